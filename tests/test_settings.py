from pathlib import Path

import pytest
import yaml

from corpo_tokens.config.settings import AppSettings, SettingsLoader, apply_settings
from corpo_tokens.config.validators import InvalidConfigurationError
from corpo_tokens.models.colors import BLACK, Color
from corpo_tokens.tokens.presets import UnknownPresetError
from corpo_tokens.tokens.store import DesignTokens, TokenStore


def test_default_config_roundtrip(tmp_path: Path) -> None:
    cfg = tmp_path / "tokens.yaml"
    SettingsLoader.dump_default(cfg)
    loaded = SettingsLoader.load(cfg)
    assert loaded.log_level == "INFO"
    assert loaded.preset == "corporate"
    assert loaded.tokens["primary_color"] == "#3182CE"

    store = TokenStore()
    assert apply_settings(loaded, store) == DesignTokens()


def test_preset_with_overrides(tmp_path: Path) -> None:
    cfg = tmp_path / "tokens.yaml"
    cfg.write_text(
        yaml.safe_dump({"preset": "Minimal", "tokens": {"base_spacing": 5, "error_color": "#B91C1C"}}),
        encoding="utf-8",
    )
    store = TokenStore()
    store.configure(success_color="#000000")
    apply_settings(SettingsLoader.load(cfg), store)
    assert store.primary_color == BLACK
    assert store.base_spacing == 5
    assert store.error_color == Color.from_hex("#B91C1C")
    assert store.success_color == DesignTokens().success_color


def test_preset_without_reset_keeps_previous_values(tmp_path: Path) -> None:
    cfg = tmp_path / "tokens.yaml"
    cfg.write_text("preset: minimal\nreset_before_preset: false\n", encoding="utf-8")
    store = TokenStore()
    store.configure(success_color="#000000")
    apply_settings(SettingsLoader.load(cfg), store)
    assert store.success_color == BLACK


def test_dump_tokens_survives_reload(tmp_path: Path) -> None:
    cfg = tmp_path / "saved.yaml"
    original = TokenStore()
    original.configure(primary_color="#7C3AED", base_spacing=6, font_family="SF Pro Display")
    SettingsLoader.dump_tokens(original.snapshot(), cfg)

    restored = TokenStore()
    apply_settings(SettingsLoader.load(cfg), restored)
    assert restored.snapshot() == original.snapshot()


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    assert SettingsLoader.load(cfg) == AppSettings()


def test_invalid_token_value_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("tokens:\n  base_spacing: -2\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        SettingsLoader.load(cfg)


def test_unknown_preset_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("preset: vaporwave\n", encoding="utf-8")
    with pytest.raises(UnknownPresetError):
        SettingsLoader.load(cfg)


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SettingsLoader.load(cfg)


def test_log_level_is_normalized(tmp_path: Path) -> None:
    cfg = tmp_path / "tokens.yaml"
    cfg.write_text("log_level: debug\n", encoding="utf-8")
    assert SettingsLoader.load(cfg).log_level == "DEBUG"


def test_unknown_log_level_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("log_level: verbose\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SettingsLoader.load(cfg)


def test_quoted_reset_flag_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text('preset: minimal\nreset_before_preset: "false"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        SettingsLoader.load(cfg)


def test_apply_settings_normalizes_preset_key() -> None:
    store = TokenStore()
    apply_settings(AppSettings(preset=" Modern "), store)
    assert store.primary_color == Color.from_hex("#7C3AED")


def test_apply_settings_rejects_unknown_preset() -> None:
    with pytest.raises(UnknownPresetError):
        apply_settings(AppSettings(preset="vaporwave"), TokenStore())
