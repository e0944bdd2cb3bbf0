from loguru import logger

from video_facade.config.common import KNOWN_LOG_LEVELS, load_user_config, resolve_log_level


def test_missing_config_file_gives_empty_config(tmp_path):
    assert load_user_config(tmp_path / "config.user.yaml") == {}


def test_conversion_section_is_loaded(user_config_file):
    path = user_config_file("conversion:\n  log_level: debug\n  strict_formats: true\n")
    assert load_user_config(path) == {"log_level": "debug", "strict_formats": True}


def test_file_without_conversion_section(user_config_file):
    path = user_config_file("paths:\n  ffmpeg_dir: /opt/ffmpeg\n")
    assert load_user_config(path) == {}


def test_empty_file(user_config_file):
    assert load_user_config(user_config_file("")) == {}


def test_malformed_yaml_is_ignored(user_config_file):
    path = user_config_file("conversion: [unclosed\n")
    assert load_user_config(path) == {}


def test_malformed_conversion_section_is_ignored(user_config_file):
    path = user_config_file("conversion: strict\n")
    assert load_user_config(path) == {}


def test_log_level_is_normalised_to_upper_case():
    assert resolve_log_level("debug") == "DEBUG"
    assert resolve_log_level("Success") == "SUCCESS"


def test_missing_log_level_defaults_to_info():
    assert resolve_log_level(None) == "INFO"


def test_unknown_log_level_falls_back_to_info(log_messages):
    assert resolve_log_level("verbose") == "INFO"
    assert any("verbose" in message for message in log_messages)


def test_every_known_log_level_is_a_loguru_level():
    for level_name in KNOWN_LOG_LEVELS:
        assert logger.level(level_name).name == level_name
