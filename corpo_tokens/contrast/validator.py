from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from corpo_tokens.models.colors import BLACK, WHITE, Color, ColorLike

COARSE_STEP = 0.1
FINE_STEP = 0.05
MAX_ADJUST_ITERATIONS = 20
DISTINGUISHABLE_RATIO = 1.5
ANOMALY_WEIGHT = 0.6


class WCAGLevel(str, Enum):
    A = "a"
    AA = "aa"
    AAA = "aaa"
    CUSTOM = "custom"


class TextSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"


class ColorBlindness(str, Enum):
    NONE = "none"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    MONOCHROMACY = "monochromacy"


# (umbral texto normal, umbral texto grande)
_LEVEL_THRESHOLDS: dict[WCAGLevel, tuple[float, float]] = {
    WCAGLevel.A: (3.0, 3.0),
    WCAGLevel.AA: (4.5, 3.0),
    WCAGLevel.AAA: (7.0, 4.5),
}


@dataclass(frozen=True, slots=True)
class AdjustmentResult:
    color: Color
    ratio: float
    target_ratio: float
    achieved: bool
    iterations: int

    def to_dict(self) -> dict[str, object]:
        return {
            "color": self.color.to_hex(),
            "ratio": round(self.ratio, 2),
            "target_ratio": self.target_ratio,
            "achieved": self.achieved,
            "iterations": self.iterations,
        }


@dataclass(frozen=True, slots=True)
class ContrastResult:
    ratio: float
    is_compliant: bool
    level: WCAGLevel
    required_ratio: float
    text_size: TextSize = TextSize.NORMAL
    adjusted_foreground: AdjustmentResult | None = None
    adjusted_background: AdjustmentResult | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "ratio": round(self.ratio, 2),
            "is_compliant": self.is_compliant,
            "level": self.level.value,
            "text_size": self.text_size.value,
            "required_ratio": self.required_ratio,
            "adjusted_foreground": self.adjusted_foreground.to_dict() if self.adjusted_foreground else None,
            "adjusted_background": self.adjusted_background.to_dict() if self.adjusted_background else None,
        }


def _linearize(component: float) -> float:
    if component <= 0.03928:
        return component / 12.92
    return ((component + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """Luminancia relativa WCAG 2.1 en [0, 1]."""
    c = Color.parse(color)
    r = _linearize(c.red / 255.0)
    g = _linearize(c.green / 255.0)
    b = _linearize(c.blue / 255.0)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: ColorLike, second: ColorLike) -> float:
    """Relación de contraste en [1, 21]; simétrica en sus argumentos."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def required_ratio(
    level: WCAGLevel | str | float = WCAGLevel.AA,
    large_text: bool = False,
    custom_ratio: float | None = None,
) -> float:
    if isinstance(level, (int, float)) and not isinstance(level, bool):
        return float(level)
    level = WCAGLevel(level)
    if level is WCAGLevel.CUSTOM:
        return float(custom_ratio) if custom_ratio is not None else 4.5
    normal, large = _LEVEL_THRESHOLDS[level]
    return large if large_text else normal


def meets_level(
    ratio: float,
    level: WCAGLevel | str | float = WCAGLevel.AA,
    large_text: bool = False,
    custom_ratio: float | None = None,
) -> bool:
    return ratio >= required_ratio(level, large_text, custom_ratio)


def adjust_for_contrast(
    foreground: ColorLike,
    background: ColorLike,
    target_ratio: float,
    adjust_foreground: bool = True,
    max_iterations: int = MAX_ADJUST_ITERATIONS,
) -> AdjustmentResult:
    """Desplaza la luminosidad HSL de uno de los colores hasta alcanzar ``target_ratio``.

    Heurística acotada: primero prueba -0.1 y luego +0.1 de luminosidad; después
    avanza en pasos de 0.05 alejándose de la luminancia de referencia durante
    ``max_iterations`` pasos. Si el recorrido topa con el límite de luminosidad sin
    éxito, se reintenta una vez en sentido contrario desde el color original.
    Devuelve el mejor candidato encontrado; ``achieved`` indica si cumple.
    """
    fg = Color.parse(foreground)
    bg = Color.parse(background)
    target = fg if adjust_foreground else bg
    reference = bg if adjust_foreground else fg

    current_ratio = contrast_ratio(target, reference)
    if current_ratio >= target_ratio:
        return AdjustmentResult(target, current_ratio, target_ratio, True, 0)

    adjusted = target.shift_lightness(-COARSE_STEP)
    ratio = contrast_ratio(adjusted, reference)
    if ratio < target_ratio:
        adjusted = target.shift_lightness(COARSE_STEP)
        ratio = contrast_ratio(adjusted, reference)

    best, best_ratio = adjusted, ratio
    darker = relative_luminance(adjusted) < relative_luminance(reference)
    step = -FINE_STEP if darker else FINE_STEP
    total_iterations = 0
    iterations = 0
    flipped = False

    while best_ratio < target_ratio and iterations < max_iterations:
        candidate = adjusted.shift_lightness(step)
        if candidate == adjusted:
            # Límite de luminosidad alcanzado: se invierte el sentido una sola vez.
            if flipped:
                break
            flipped = True
            step = -step
            adjusted = target
            iterations = 0
            continue
        adjusted = candidate
        iterations += 1
        total_iterations += 1
        ratio = contrast_ratio(adjusted, reference)
        if ratio > best_ratio:
            best, best_ratio = adjusted, ratio

    return AdjustmentResult(best, best_ratio, target_ratio, best_ratio >= target_ratio, total_iterations)


def validate_contrast(
    foreground: ColorLike,
    background: ColorLike,
    level: WCAGLevel | str = WCAGLevel.AA,
    text_size: TextSize | str = TextSize.NORMAL,
    custom_ratio: float | None = None,
) -> ContrastResult:
    fg = Color.parse(foreground)
    bg = Color.parse(background)
    level = WCAGLevel(level)
    text_size = TextSize(text_size)
    ratio = contrast_ratio(fg, bg)
    needed = required_ratio(level, text_size is TextSize.LARGE, custom_ratio)
    compliant = ratio >= needed

    adjusted_fg = adjusted_bg = None
    if not compliant:
        adjusted_fg = adjust_for_contrast(fg, bg, needed)
        adjusted_bg = adjust_for_contrast(fg, bg, needed, adjust_foreground=False)

    return ContrastResult(
        ratio=ratio,
        is_compliant=compliant,
        level=level,
        required_ratio=needed,
        text_size=text_size,
        adjusted_foreground=adjusted_fg,
        adjusted_background=adjusted_bg,
    )


def _mix(color: Color, r: float, g: float, b: float) -> Color:
    return Color(
        max(0, min(255, int(r + 0.5))),
        max(0, min(255, int(g + 0.5))),
        max(0, min(255, int(b + 0.5))),
        color.alpha,
    )


def _protanopia(c: Color) -> Color:
    return _mix(c, 0.567 * c.red + 0.433 * c.green, 0.558 * c.red + 0.442 * c.green, c.blue)


def _deuteranopia(c: Color) -> Color:
    return _mix(c, 0.625 * c.red + 0.375 * c.green, 0.7 * c.red + 0.3 * c.green, c.blue)


def _tritanopia(c: Color) -> Color:
    return _mix(c, c.red, 0.95 * c.green + 0.05 * c.blue, 0.433 * c.green + 0.567 * c.blue)


def _monochromacy(c: Color) -> Color:
    gray = int(relative_luminance(c) * 255 + 0.5)
    return Color(gray, gray, gray, c.alpha)


_SIMULATIONS = {
    ColorBlindness.PROTANOPIA: _protanopia,
    ColorBlindness.DEUTERANOPIA: _deuteranopia,
    ColorBlindness.TRITANOPIA: _tritanopia,
    ColorBlindness.MONOCHROMACY: _monochromacy,
}

_ANOMALIES = {
    ColorBlindness.PROTANOMALY: _protanopia,
    ColorBlindness.DEUTERANOMALY: _deuteranopia,
    ColorBlindness.TRITANOMALY: _tritanopia,
}


def simulate_color_blindness(color: ColorLike, kind: ColorBlindness | str) -> Color:
    c = Color.parse(color)
    kind = ColorBlindness(kind)
    if kind is ColorBlindness.NONE:
        return c
    if kind in _ANOMALIES:
        return Color.lerp(c, _ANOMALIES[kind](c), ANOMALY_WEIGHT)
    return _SIMULATIONS[kind](c)


def are_colors_distinguishable(
    first: ColorLike,
    second: ColorLike,
    kinds: Iterable[ColorBlindness | str],
) -> bool:
    for kind in kinds:
        if contrast_ratio(simulate_color_blindness(first, kind), simulate_color_blindness(second, kind)) < DISTINGUISHABLE_RATIO:
            return False
    return True


def high_contrast_variant(background: ColorLike) -> Color:
    return WHITE if relative_luminance(background) < 0.5 else BLACK
