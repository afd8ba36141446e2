"""
React Native generator (mobile).

No class system: each node gets a literal style object. Colors are resolved
straight to rgb()/rgba() strings without palette lookup, and sizes are copied
verbatim from the bounding box.

Hidden nodes (visible=False) get ``display: 'none'`` in their style object.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from codegen.base import normalize_number
from codegen.colors import color_to_css
from codegen.jsx_printer import INDENT, jsx_text
from codegen.nodes import DesignNode, LayoutMode, NodeType
from codegen.tailwind_maps import FLEX_ALIGN_VALUES, TEXT_ALIGN_VALUES

RN_COMPONENT_MAP: Mapping[NodeType, str] = MappingProxyType({
    NodeType.FRAME: 'View',
    NodeType.GROUP: 'View',
    NodeType.COMPONENT: 'View',
    NodeType.COMPONENT_SET: 'View',
    NodeType.INSTANCE: 'View',
    NodeType.SECTION: 'View',
    NodeType.RECTANGLE: 'View',
    NodeType.ELLIPSE: 'View',
    NodeType.LINE: 'View',
    NodeType.REGULAR_POLYGON: 'View',
    NodeType.STAR: 'View',
    NodeType.BOOLEAN_OPERATION: 'View',
    NodeType.SLICE: 'View',
    NodeType.VECTOR: 'View',
    NodeType.TEXT: 'Text',
    NodeType.UNKNOWN: 'View',
})


@dataclass
class NativeElement:
    component: str
    style: Dict[str, Any] = field(default_factory=dict)
    text: Optional[str] = None
    children: List['NativeElement'] = field(default_factory=list)


@dataclass
class NativeContext:
    """Per-request accumulator: distinct components in first-use order."""
    components: List[str] = field(default_factory=list)

    def use(self, component: str) -> None:
        if component not in self.components:
            self.components.append(component)


def node_to_react_native_styles(node: DesignNode) -> Dict[str, Any]:
    """Literal React Native style object for one node."""
    styles: Dict[str, Any] = {}

    # Layout
    if node.has_auto_layout:
        styles['flexDirection'] = 'row' if node.layout_mode == LayoutMode.HORIZONTAL else 'column'
        if node.primary_axis_align_items is not None:
            styles['justifyContent'] = FLEX_ALIGN_VALUES.get(node.primary_axis_align_items, 'flex-start')
        if node.counter_axis_align_items is not None:
            styles['alignItems'] = FLEX_ALIGN_VALUES.get(node.counter_axis_align_items, 'flex-start')
        if node.item_spacing:
            styles['gap'] = normalize_number(node.item_spacing)

    # Size
    bbox = node.absolute_bounding_box
    if bbox is not None:
        styles['width'] = normalize_number(bbox.width)
        styles['height'] = normalize_number(bbox.height)

    # Padding
    for key, value in (
        ('paddingLeft', node.padding_left),
        ('paddingRight', node.padding_right),
        ('paddingTop', node.padding_top),
        ('paddingBottom', node.padding_bottom),
    ):
        if value:
            styles[key] = normalize_number(value)

    # Background (text fill is the font color, handled below)
    fill = node.first_fill
    if not node.is_text and fill is not None and fill.type == 'SOLID' and fill.color is not None:
        styles['backgroundColor'] = color_to_css(fill.color)

    # Border
    stroke = node.first_stroke
    if stroke is not None and stroke.type == 'SOLID' and stroke.color is not None:
        styles['borderColor'] = color_to_css(stroke.color)
    if node.stroke_weight:
        styles['borderWidth'] = normalize_number(node.stroke_weight)

    if node.corner_radius:
        styles['borderRadius'] = normalize_number(node.corner_radius)

    # Text
    if node.is_text:
        text_style = node.style
        if text_style is not None:
            if text_style.font_size:
                styles['fontSize'] = normalize_number(text_style.font_size)
            if text_style.font_weight:
                styles['fontWeight'] = str(normalize_number(text_style.font_weight))
            if text_style.letter_spacing:
                styles['letterSpacing'] = normalize_number(text_style.letter_spacing)
            if text_style.line_height_px:
                styles['lineHeight'] = normalize_number(text_style.line_height_px)
            if text_style.text_align_horizontal is not None:
                styles['textAlign'] = TEXT_ALIGN_VALUES.get(text_style.text_align_horizontal, 'left')
        if fill is not None and fill.type == 'SOLID' and fill.color is not None:
            styles['color'] = color_to_css(fill.color)

    if node.opacity is not None and node.opacity < 1:
        styles['opacity'] = normalize_number(node.opacity)

    if not node.visible:
        styles['display'] = 'none'

    return styles


def lower_node(node: DesignNode, context: NativeContext) -> NativeElement:
    """Recursively lower a node, recording every component it uses."""
    component = RN_COMPONENT_MAP[node.type]
    context.use(component)
    element = NativeElement(component=component, style=node_to_react_native_styles(node))

    if node.is_text and node.characters:
        element.text = node.characters
    elif node.children and not node.is_text:
        element.children = [lower_node(child, context) for child in node.children]
    return element


def render_element(element: NativeElement, level: int = 0) -> str:
    style_attr = ''
    if element.style:
        style_attr = f" style={{{json.dumps(element.style, separators=(',', ':'))}}}"
    open_tag = f"<{element.component}{style_attr}"

    if element.text is not None:
        return f"{open_tag}>{jsx_text(element.text)}</{element.component}>"
    if not element.children:
        return f"{open_tag} />"

    inner = INDENT * (level + 1)
    lines = [f"{open_tag}>"]
    lines.extend(inner + render_element(child, level + 1) for child in element.children)
    lines.append(f"{INDENT * level}</{element.component}>")
    return '\n'.join(lines)


def generate_react_native_code(node: DesignNode, component_name: str) -> str:
    """Complete React Native component module with a single react-native import."""
    context = NativeContext()
    root = lower_node(node, context)
    jsx = render_element(root, level=2)
    imports = ', '.join(context.components)

    return f'''import React from 'react';
import {{ {imports} }} from 'react-native';

const {component_name} = () => {{
  return (
    {jsx}
  );
}};

export default {component_name};
'''
