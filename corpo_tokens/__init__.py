"""Tokens de diseño configurables y utilidades de contraste WCAG."""

from .config.settings import AppSettings, SettingsLoader, apply_settings
from .config.validators import InvalidConfigurationError
from .contrast.validator import (
    AdjustmentResult,
    ColorBlindness,
    ContrastResult,
    TextSize,
    WCAGLevel,
    adjust_for_contrast,
    are_colors_distinguishable,
    contrast_ratio,
    high_contrast_variant,
    meets_level,
    relative_luminance,
    required_ratio,
    simulate_color_blindness,
    validate_contrast,
)
from .models.colors import BLACK, WHITE, Color
from .tokens.presets import (
    PRESETS,
    ThemePreset,
    UnknownPresetError,
    apply_banking_theme,
    apply_corporate_theme,
    apply_creative_theme,
    apply_friendly_theme,
    apply_gaming_theme,
    apply_healthcare_theme,
    apply_luxury_theme,
    apply_minimal_theme,
    apply_modern_theme,
    apply_nature_theme,
    apply_ocean_theme,
    apply_preset,
    apply_sunset_theme,
    get_preset,
    list_presets,
)
from .tokens.store import DesignTokens, TokenStore, get_token_store

__version__ = "0.1.0"

__all__ = [
    "AdjustmentResult",
    "AppSettings",
    "BLACK",
    "Color",
    "ColorBlindness",
    "ContrastResult",
    "DesignTokens",
    "InvalidConfigurationError",
    "PRESETS",
    "SettingsLoader",
    "TextSize",
    "ThemePreset",
    "TokenStore",
    "UnknownPresetError",
    "WCAGLevel",
    "WHITE",
    "adjust_for_contrast",
    "apply_banking_theme",
    "apply_corporate_theme",
    "apply_creative_theme",
    "apply_friendly_theme",
    "apply_gaming_theme",
    "apply_healthcare_theme",
    "apply_luxury_theme",
    "apply_minimal_theme",
    "apply_modern_theme",
    "apply_nature_theme",
    "apply_ocean_theme",
    "apply_preset",
    "apply_settings",
    "apply_sunset_theme",
    "are_colors_distinguishable",
    "contrast_ratio",
    "get_preset",
    "get_token_store",
    "high_contrast_variant",
    "list_presets",
    "meets_level",
    "relative_luminance",
    "required_ratio",
    "simulate_color_blindness",
    "validate_contrast",
]
