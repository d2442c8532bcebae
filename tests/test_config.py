from pathlib import Path

import pytest

from gui.v1.config import AVATAR_ASSET, SCREEN_GREETING, SCREEN_PROFILE, AppConfig, parse_args


def test_defaults():
    config = parse_args([])
    assert config.screen == SCREEN_PROFILE
    assert config.greeting_name == "Space International"
    assert config.log_level == "INFO"
    assert config.avatar_asset == AVATAR_ASSET


def test_overrides():
    config = parse_args(["--screen", "greeting", "--name", "Ada", "--assets-dir", "/tmp/a", "--log-level", "DEBUG"])
    assert config.screen == SCREEN_GREETING
    assert config.greeting_name == "Ada"
    assert config.assets_dir == Path("/tmp/a")
    assert config.log_level == "DEBUG"


def test_unknown_arguments_are_ignored():
    assert parse_args(["--web", "--port", "8550"]).screen == SCREEN_PROFILE


def test_invalid_screen_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--screen", "settings"])


def test_avatar_path_joins_assets_dir(tmp_path):
    config = AppConfig(assets_dir=tmp_path)
    assert config.avatar_path == tmp_path / AVATAR_ASSET


def test_shipped_avatar_exists():
    assert AppConfig().avatar_path.is_file()
