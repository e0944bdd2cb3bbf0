"""
Configuration Package for the Video Facade.

This package centralizes the static configuration of the application:

- Common settings such as the logging format, the default log level and the
  strict-format switch, optionally overridden from 'config.user.yaml'.
- Video settings: the recognised format names, the output placeholder and
  the client's default arguments.
"""
