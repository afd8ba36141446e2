"""Color conversion and Tailwind palette lookup."""

from dataclasses import dataclass
from typing import Optional

from codegen.base import format_number, round_half_up
from codegen.nodes import Color
from codegen.tailwind_maps import TAILWIND_COLORS


@dataclass(frozen=True)
class RGBA:
    """Integer channels 0-255, alpha in [0, 1]."""
    r: int
    g: int
    b: int
    a: float = 1

    @property
    def rgb_key(self) -> str:
        """Alpha-free form used as the palette key."""
        return f"rgb({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True)
class PaletteMatch:
    name: str
    opacity: Optional[int] = None  # percent, only when alpha < 1


def _channel(value: float) -> int:
    return min(255, max(0, round_half_up(value * 255)))


def color_to_rgb(color: Color) -> RGBA:
    """Convert a Figma [0, 1] color to integer channels."""
    alpha = color.a if color.a is not None else 1
    return RGBA(
        r=_channel(color.r),
        g=_channel(color.g),
        b=_channel(color.b),
        a=min(1, max(0, alpha)),
    )


def rgb_to_string(rgba: RGBA) -> str:
    if rgba.a < 1:
        return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {format_number(rgba.a)})"
    return rgba.rgb_key


def color_to_css(color: Color) -> str:
    return rgb_to_string(color_to_rgb(color))


def palette_lookup(rgba: RGBA) -> Optional[PaletteMatch]:
    """Exact palette match on the alpha-free rgb() string; None on a miss."""
    name = TAILWIND_COLORS.get(rgba.rgb_key)
    if name is None:
        return None
    if rgba.a < 1:
        return PaletteMatch(name=name, opacity=round_half_up(rgba.a * 100))
    return PaletteMatch(name=name)
