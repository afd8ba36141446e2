"""
Tailwind style classification for design nodes.

For every node two things are derived:
- symbolic Tailwind classes for values that quantize onto a Tailwind scale or
  palette entry, and
- an inline-style remainder for everything that does not (custom colors,
  gradients, exact shadow geometry, off-scale sizes).

Both may be present for the same node. The inline styles are overrides and
must be rendered with at least the specificity of the classes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from codegen.base import format_number, round_half_up
from codegen.colors import color_to_rgb, palette_lookup, rgb_to_string
from codegen.nodes import DesignNode, LayoutMode, Paint
from codegen.tailwind_maps import (
    ALIGN_ITEMS_CLASS_MAP,
    BORDER_RADIUS_SCALE,
    BORDER_WIDTH_SCALE,
    FONT_SIZE_SCALE,
    FONT_WEIGHT_SCALE,
    JUSTIFY_CLASS_MAP,
    OPACITY_SCALE,
    SHADOW_CLASS,
    SIZE_TOLERANCE,
    SPACING_SCALE,
    TEXT_ALIGN_CLASS_MAP,
    nearest_match,
    within_tolerance,
)

StyleValue = Union[str, int, float]


@dataclass
class ClassifiedStyle:
    """Tailwind classes plus the inline styles that could not be expressed as classes."""
    classes: List[str] = field(default_factory=list)
    inline_style: Dict[str, StyleValue] = field(default_factory=dict)

    @property
    def class_name(self) -> str:
        return ' '.join(self.classes)


def _spacing_token(value: float) -> str:
    return SPACING_SCALE[nearest_match(value, SPACING_SCALE)]


def _solid_palette_name(paint: Optional[Paint]) -> Optional[str]:
    """Palette class suffix for a SOLID paint, e.g. 'blue-500' or 'blue-500/50'."""
    if paint is None or paint.type != 'SOLID' or paint.color is None:
        return None
    match = palette_lookup(color_to_rgb(paint.color))
    if match is None:
        return None
    if match.opacity is not None:
        return f"{match.name}/{match.opacity}"
    return match.name


def _visible_drop_shadows(node: DesignNode):
    return [e for e in node.effects if e.type == 'DROP_SHADOW' and e.visible]


# ============================================================================
# Class groups
# ============================================================================

def get_layout_classes(node: DesignNode) -> List[str]:
    """Flex direction, alignment and gap for auto-layout frames."""
    if not node.has_auto_layout:
        return []

    classes = ['flex']
    if node.layout_mode == LayoutMode.VERTICAL:
        classes.append('flex-col')

    if node.primary_axis_align_items in JUSTIFY_CLASS_MAP:
        classes.append(JUSTIFY_CLASS_MAP[node.primary_axis_align_items])
    if node.counter_axis_align_items in ALIGN_ITEMS_CLASS_MAP:
        classes.append(ALIGN_ITEMS_CLASS_MAP[node.counter_axis_align_items])

    if node.item_spacing:
        classes.append(f"gap-{_spacing_token(node.item_spacing)}")

    return classes


def get_size_classes(node: DesignNode) -> List[str]:
    """w-*/h-* when the bounding box is within tolerance of a spacing token."""
    bbox = node.absolute_bounding_box
    if bbox is None:
        return []

    classes = []
    for prefix, value in (('w', bbox.width), ('h', bbox.height)):
        closest = nearest_match(value, SPACING_SCALE)
        if within_tolerance(value, closest, SIZE_TOLERANCE):
            classes.append(f"{prefix}-{SPACING_SCALE[closest]}")
    return classes


def get_color_classes(node: DesignNode) -> List[str]:
    """Background (non-text nodes) and border palette classes, plus border width."""
    classes = []

    if not node.is_text:
        bg = _solid_palette_name(node.first_fill)
        if bg:
            classes.append(f"bg-{bg}")

    if node.strokes:
        border = _solid_palette_name(node.first_stroke)
        if border:
            classes.append(f"border-{border}")

        if node.stroke_weight:
            closest = nearest_match(node.stroke_weight, BORDER_WIDTH_SCALE)
            classes.append(BORDER_WIDTH_SCALE[closest])

    return classes


def get_spacing_classes(node: DesignNode) -> List[str]:
    """Padding: one symmetric token if all sides match, else per-axis tokens."""
    left = node.padding_left or 0
    right = node.padding_right or 0
    top = node.padding_top or 0
    bottom = node.padding_bottom or 0
    if not (left or right or top or bottom):
        return []

    if left == right == top == bottom:
        return [f"p-{_spacing_token(left)}"]

    classes = []
    if left == right:
        classes.append(f"px-{_spacing_token(left)}")
    if top == bottom:
        classes.append(f"py-{_spacing_token(top)}")
    return classes


def get_effect_classes(node: DesignNode) -> List[str]:
    """Corner radius, opacity and shadow presence."""
    classes = []

    if node.corner_radius:
        closest = nearest_match(node.corner_radius, BORDER_RADIUS_SCALE)
        classes.append(BORDER_RADIUS_SCALE[closest])

    if node.opacity is not None and node.opacity < 1:
        percent = round_half_up(node.opacity * 100)
        classes.append(OPACITY_SCALE[nearest_match(percent, OPACITY_SCALE)])

    # Exact geometry goes to the inline boxShadow
    if _visible_drop_shadows(node):
        classes.append(SHADOW_CLASS)

    return classes


def get_text_classes(node: DesignNode) -> List[str]:
    """Font size, weight, alignment and text color. TEXT nodes only."""
    if not node.is_text:
        return []

    classes = []
    style = node.style
    if style is not None:
        if style.font_size:
            classes.append(FONT_SIZE_SCALE[nearest_match(style.font_size, FONT_SIZE_SCALE)])
        if style.font_weight and style.font_weight in FONT_WEIGHT_SCALE:
            classes.append(FONT_WEIGHT_SCALE[style.font_weight])
        if style.text_align_horizontal in TEXT_ALIGN_CLASS_MAP:
            classes.append(TEXT_ALIGN_CLASS_MAP[style.text_align_horizontal])

    color = _solid_palette_name(node.first_fill)
    if color:
        classes.append(f"text-{color}")

    return classes


def node_to_tailwind_classes(node: DesignNode) -> List[str]:
    return [
        cls
        for group in (
            get_layout_classes(node),
            get_size_classes(node),
            get_color_classes(node),
            get_spacing_classes(node),
            get_effect_classes(node),
            get_text_classes(node),
        )
        for cls in group
        if cls
    ]


# ============================================================================
# Inline remainder
# ============================================================================

def linear_gradient_css(paint: Paint) -> str:
    """CSS linear-gradient from the paint's stops.

    Stops are emitted in the order Figma lists them; they are not sorted by
    position.
    """
    stops = ', '.join(
        f"{rgb_to_string(color_to_rgb(stop.color))} {format_number(stop.position * 100, 2)}%"
        for stop in paint.gradient_stops
    )
    return f"linear-gradient({stops})"


def get_inline_styles(node: DesignNode) -> Dict[str, StyleValue]:
    """Style entries for values no Tailwind class covers."""
    styles: Dict[str, StyleValue] = {}

    bbox = node.absolute_bounding_box
    if bbox is not None:
        for key, value in (('width', bbox.width), ('height', bbox.height)):
            closest = nearest_match(value, SPACING_SCALE)
            if not within_tolerance(value, closest, SIZE_TOLERANCE):
                styles[key] = f"{format_number(value)}px"

    fill = node.first_fill
    if fill is not None:
        if fill.type == 'SOLID' and fill.color is not None:
            rgba = color_to_rgb(fill.color)
            if palette_lookup(rgba) is None:
                styles['color' if node.is_text else 'backgroundColor'] = rgb_to_string(rgba)
        elif fill.type == 'GRADIENT_LINEAR' and fill.gradient_stops:
            styles['background'] = linear_gradient_css(fill)

    stroke = node.first_stroke
    if stroke is not None and stroke.type == 'SOLID' and stroke.color is not None:
        rgba = color_to_rgb(stroke.color)
        if palette_lookup(rgba) is None:
            styles['borderColor'] = rgb_to_string(rgba)

    shadows = []
    for shadow in _visible_drop_shadows(node):
        color = rgb_to_string(color_to_rgb(shadow.color)) if shadow.color else 'rgba(0, 0, 0, 0.1)'
        x = shadow.offset.x if shadow.offset else 0
        y = shadow.offset.y if shadow.offset else 0
        blur = shadow.radius or 0
        shadows.append(f"{format_number(x)}px {format_number(y)}px {format_number(blur)}px {color}")
    if shadows:
        styles['boxShadow'] = ', '.join(shadows)

    if node.is_text and node.style is not None:
        if node.style.line_height_px:
            styles['lineHeight'] = f"{format_number(node.style.line_height_px)}px"
        if node.style.letter_spacing:
            styles['letterSpacing'] = f"{format_number(node.style.letter_spacing)}px"

    return styles


def classify_node(node: DesignNode) -> ClassifiedStyle:
    """Derive classes and inline remainder for one node. Pure function of the node."""
    return ClassifiedStyle(
        classes=node_to_tailwind_classes(node),
        inline_style=get_inline_styles(node),
    )
