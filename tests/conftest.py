"""Pytest fixtures for video_facade tests"""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture the text of loguru records at INFO level and above."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="INFO",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def user_config_file(tmp_path):
    """Write a config.user.yaml into a temporary directory and return its path."""
    def _write(content: str):
        path = tmp_path / "config.user.yaml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
