# =============================================================================
# Configuration Tests
# =============================================================================

import logging

import pytest

from kata_tui.config import (
    Config,
    ConfigError,
    RenderingConfig,
    UIConfig,
    ensure_directories,
    get_xdg_config_home,
)
from kata_tui.rendering import Theme


def test_xdg_paths(xdg_home):
    assert get_xdg_config_home() == xdg_home / "config" / "kata-tui"
    assert Config.config_file_path() == xdg_home / "config" / "kata-tui" / "config.toml"
    assert Config.log_file_path() == xdg_home / "state" / "kata-tui" / "kata-tui.log"


def test_ensure_directories(xdg_home):
    dirs = ensure_directories()
    assert all(path.is_dir() for path in dirs.values())


def test_defaults_when_no_file(xdg_home):
    config = Config.load()
    assert config == Config()


def test_explicit_missing_file_is_an_error(temp_dir):
    with pytest.raises(ConfigError):
        Config.load(temp_dir / "nope.toml")


def test_save_and_load_roundtrip(temp_dir):
    path = temp_dir / "sub" / "config.toml"
    config = Config(
        rendering=RenderingConfig(code_color="magenta", min_box_width=30),
        ui=UIConfig(content_padding=4, show_tags=False),
    )
    config.save(path)

    assert Config.load(path) == config


def test_save_to_default_location(xdg_home):
    Config(ui=UIConfig(content_padding=0)).save()
    assert Config.load().ui.content_padding == 0


def test_partial_file_keeps_defaults(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text('[rendering]\nbullet = "-"\n')

    config = Config.load(path)
    assert config.rendering.bullet == "-"
    assert config.rendering.code_color == RenderingConfig().code_color
    assert config.ui == UIConfig()


def test_invalid_toml(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[rendering\n")

    with pytest.raises(ConfigError, match="Invalid config file"):
        Config.load(path)


@pytest.mark.parametrize("body", [
    "[rendering]\nmin_box_width = \"wide\"\n",
    "[rendering]\nlist_indent = true\n",
    "[rendering]\nbox_padding = -1\n",
    "[ui]\nshow_tags = 1\n",
    "rendering = 3\n",
])
def test_wrong_value_types(temp_dir, body):
    path = temp_dir / "config.toml"
    path.write_text(body)

    with pytest.raises(ConfigError):
        Config.load(path)


def test_unknown_color_name(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[rendering]\ncode_color = \"notacolour\"\n")

    with pytest.raises(ConfigError, match="rendering.code_color"):
        Config.load(path)


def test_color_formats_accepted(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text(
        "[rendering]\n"
        "code_background = \"rgb(40,40,55)\"\n"
        "border_color = \"#444444\"\n"
        "italic_color = \"grey50\"\n"
    )

    config = Config.load(path)
    assert config.rendering.code_background == "rgb(40,40,55)"
    assert config.rendering.border_color == "#444444"


def test_unknown_keys_are_ignored_with_warning(temp_dir, caplog):
    path = temp_dir / "config.toml"
    path.write_text("[ui]\ncolour = \"blue\"\n")

    with caplog.at_level(logging.WARNING, logger="kata_tui.config"):
        config = Config.load(path)

    assert config.ui == UIConfig()
    assert "colour" in caplog.text


def test_rendering_config_to_theme():
    assert RenderingConfig().to_theme() == Theme()
    assert RenderingConfig(tab_width=8).to_theme().tab_width == 8
