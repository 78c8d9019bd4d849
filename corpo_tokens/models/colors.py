from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Union

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _round_channel(value: float) -> int:
    # Redondeo "half-up" y recorte al rango de 8 bits.
    return max(0, min(255, int(math.floor(value + 0.5))))


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True, slots=True)
class Color:
    """Color ARGB de 8 bits por canal, inmutable y comparable por valor."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Canal {name} fuera de rango [0, 255]: {channel!r}")

    @classmethod
    def from_argb(cls, value: int) -> "Color":
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Valor ARGB fuera de rango: {value:#x}")
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            alpha=(value >> 24) & 0xFF,
        )

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Acepta ``#RGB``, ``#RRGGBB`` o ``#AARRGGBB`` (el ``#`` es opcional)."""
        digits = text.strip().removeprefix("#")
        if not digits or any(ch not in _HEX_DIGITS for ch in digits):
            raise ValueError(f"Color hexadecimal inválido: {text!r}")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            return cls.from_argb(0xFF000000 | int(digits, 16))
        if len(digits) == 8:
            return cls.from_argb(int(digits, 16))
        raise ValueError(f"Color hexadecimal inválido: {text!r}")

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float, alpha: int = 255) -> "Color":
        r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, _clamp_unit(lightness), _clamp_unit(saturation))
        return cls(_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255), alpha)

    @classmethod
    def parse(cls, value: Union["Color", str, int]) -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, bool):
            raise ValueError(f"No se puede interpretar como color: {value!r}")
        if isinstance(value, int):
            return cls.from_argb(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        raise ValueError(f"No se puede interpretar como color: {value!r}")

    @staticmethod
    def lerp(start: "Color", end: "Color", t: float) -> "Color":
        def channel(a: int, b: int) -> int:
            return max(0, min(255, int(a + (b - a) * t)))

        return Color(
            channel(start.red, end.red),
            channel(start.green, end.green),
            channel(start.blue, end.blue),
            channel(start.alpha, end.alpha),
        )

    @property
    def argb(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 255

    def to_hex(self) -> str:
        if self.is_opaque:
            return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        return f"#{self.argb:08X}"

    def to_hsl(self) -> tuple[float, float, float]:
        """Devuelve ``(hue en grados, saturación, luminosidad)``."""
        h, l, s = colorsys.rgb_to_hls(self.red / 255.0, self.green / 255.0, self.blue / 255.0)
        return h * 360.0, s, l

    def with_lightness(self, lightness: float) -> "Color":
        hue, saturation, _ = self.to_hsl()
        return Color.from_hsl(hue, saturation, _clamp_unit(lightness), self.alpha)

    def shift_lightness(self, delta: float) -> "Color":
        _, _, lightness = self.to_hsl()
        return self.with_lightness(lightness + delta)

    def with_alpha(self, alpha: int | float) -> "Color":
        """``alpha`` entero en [0, 255] o fracción en [0.0, 1.0]."""
        if isinstance(alpha, float):
            alpha = _round_channel(_clamp_unit(alpha) * 255)
        return Color(self.red, self.green, self.blue, alpha)

    def __str__(self) -> str:
        return self.to_hex()


ColorLike = Union[Color, str, int]

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
