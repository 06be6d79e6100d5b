"""
Tests for YAML settings persistence.
"""
import yaml

from kbheight.config.settings import Settings
from kbheight.core.height_tracker import KeyboardHeightTracker


def test_missing_file_gives_defaults(tmp_path):
    settings = Settings.load(tmp_path / "settings.yaml")

    assert settings.portrait_keyboard_height == 0
    assert settings.landscape_keyboard_height == 0
    assert settings.remember_keyboard_heights is True
    assert settings.log_level == "INFO"


def test_save_and_load(tmp_path):
    path = tmp_path / "settings.yaml"
    settings = Settings.load(path)
    settings.fullscreen = True
    settings.log_level = "DEBUG"
    settings.update_keyboard_heights(812, 455)

    loaded = Settings.load(path)

    assert loaded.portrait_keyboard_height == 812
    assert loaded.landscape_keyboard_height == 455
    assert loaded.fullscreen is True
    assert loaded.log_level == "DEBUG"


def test_update_keyboard_heights_skips_unchanged(tmp_path):
    path = tmp_path / "settings.yaml"
    settings = Settings.load(path)

    settings.update_keyboard_heights(0, 0)

    assert not path.exists()


def test_negative_heights_clamped_on_load(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump({
        'portrait_keyboard_height': -20,
        'landscape_keyboard_height': 300,
    }))

    settings = Settings.load(path)

    assert settings.portrait_keyboard_height == 0
    assert settings.landscape_keyboard_height == 300
    # Loaded values are always valid tracker seeds
    KeyboardHeightTracker(settings.portrait_keyboard_height, settings.landscape_keyboard_height)


def test_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("portrait_keyboard_height: [unclosed\n")

    settings = Settings.load(path)

    assert settings.portrait_keyboard_height == 0


def test_non_mapping_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n")

    settings = Settings.load(path)

    assert settings.to_dict() == Settings().to_dict()


def test_wrong_value_type_gives_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("display_width: wide\n")

    settings = Settings.load(path)

    assert settings.display_width == 480


def test_quoted_false_flags_are_false(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("remember_keyboard_heights: 'false'\nfullscreen: \"no\"\n")

    settings = Settings.load(path)

    assert settings.remember_keyboard_heights is False
    assert settings.fullscreen is False


def test_quoted_true_flag_is_true(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("fullscreen: 'True'\n")

    assert Settings.load(path).fullscreen is True


def test_unrecognised_flag_keeps_default(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("remember_keyboard_heights: maybe\nfullscreen: [1, 2]\n")

    settings = Settings.load(path)

    assert settings.remember_keyboard_heights is True
    assert settings.fullscreen is False
