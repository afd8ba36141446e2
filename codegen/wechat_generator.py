"""
WeChat mini-program generator.

A single pre-order walk produces the WXML markup and the WXSS stylesheet
together, so class references and selector indices always agree. The script
and manifest payloads are static.

Hidden nodes (visible=False) carry a bare ``hidden`` attribute in WXML.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from codegen.base import format_number
from codegen.colors import color_to_css
from codegen.nodes import DesignNode, LayoutMode, NodeType
from codegen.tailwind_maps import FLEX_ALIGN_VALUES, TEXT_ALIGN_VALUES

WXML_TAG_MAP: Mapping[NodeType, str] = MappingProxyType({
    NodeType.FRAME: 'view',
    NodeType.GROUP: 'view',
    NodeType.COMPONENT: 'view',
    NodeType.COMPONENT_SET: 'view',
    NodeType.INSTANCE: 'view',
    NodeType.SECTION: 'view',
    NodeType.RECTANGLE: 'view',
    NodeType.ELLIPSE: 'view',
    NodeType.LINE: 'view',
    NodeType.REGULAR_POLYGON: 'view',
    NodeType.STAR: 'view',
    NodeType.BOOLEAN_OPERATION: 'view',
    NodeType.SLICE: 'view',
    NodeType.VECTOR: 'view',
    NodeType.TEXT: 'text',
    NodeType.UNKNOWN: 'view',
})

SCRIPT_STUB = """Component({
  properties: {},
  data: {},
  methods: {}
});
"""

MANIFEST = json.dumps({"component": True, "usingComponents": {}}, indent=2) + "\n"


@dataclass
class WechatBundle:
    """The four files of a mini-program component."""
    markup: str
    stylesheet: str
    script: str = SCRIPT_STUB
    manifest: str = MANIFEST

    # payload -> file extension
    EXTENSIONS = MappingProxyType({
        'markup': 'wxml',
        'stylesheet': 'wxss',
        'script': 'js',
        'manifest': 'json',
    })

    def files(self) -> Dict[str, str]:
        """index.<ext> -> content"""
        return {
            f"index.{ext}": getattr(self, payload)
            for payload, ext in self.EXTENSIONS.items()
        }


@dataclass
class StyleRule:
    selector: str
    declarations: List[str] = field(default_factory=list)

    def render(self) -> str:
        body = ''.join(f"  {decl};\n" for decl in self.declarations)
        return f".{self.selector} {{\n{body}}}\n"


@dataclass
class WxmlElement:
    tag: str
    class_name: str
    hidden: bool = False
    text: Optional[str] = None
    children: List['WxmlElement'] = field(default_factory=list)


@dataclass
class WechatContext:
    """Per-request state: the selector counter is shared by the whole walk."""
    component_name: str
    next_index: int = 0
    rules: List[StyleRule] = field(default_factory=list)

    def allocate_class(self) -> str:
        class_name = f"{self.component_name.lower()}-{self.next_index}"
        self.next_index += 1
        return class_name


def _rpx(value: float) -> str:
    return f"{format_number(value)}rpx"


def node_to_wechat_styles(node: DesignNode) -> List[str]:
    """WXSS declarations for one node."""
    styles: List[str] = []

    # Layout
    if node.layout_mode == LayoutMode.HORIZONTAL:
        styles.extend(['display: flex', 'flex-direction: row'])
    elif node.layout_mode == LayoutMode.VERTICAL:
        styles.extend(['display: flex', 'flex-direction: column'])

    if node.primary_axis_align_items is not None:
        styles.append(f"justify-content: {FLEX_ALIGN_VALUES.get(node.primary_axis_align_items, 'flex-start')}")
    if node.counter_axis_align_items is not None:
        styles.append(f"align-items: {FLEX_ALIGN_VALUES.get(node.counter_axis_align_items, 'flex-start')}")

    # Size
    bbox = node.absolute_bounding_box
    if bbox is not None:
        styles.append(f"width: {_rpx(bbox.width)}")
        styles.append(f"height: {_rpx(bbox.height)}")

    # Padding (top right bottom left)
    padding = [node.padding_top, node.padding_right, node.padding_bottom, node.padding_left]
    if any(padding):
        styles.append('padding: ' + ' '.join(_rpx(p or 0) for p in padding))

    fill = node.first_fill
    solid_fill = fill is not None and fill.type == 'SOLID' and fill.color is not None
    if solid_fill and not node.is_text:
        styles.append(f"background-color: {color_to_css(fill.color)}")

    # Border
    stroke = node.first_stroke
    if stroke is not None and node.stroke_weight and stroke.type == 'SOLID' and stroke.color is not None:
        styles.append(f"border: {_rpx(node.stroke_weight)} solid {color_to_css(stroke.color)}")

    if node.corner_radius:
        styles.append(f"border-radius: {_rpx(node.corner_radius)}")

    # Text
    if node.is_text:
        text_style = node.style
        if text_style is not None:
            if text_style.font_size:
                styles.append(f"font-size: {_rpx(text_style.font_size)}")
            if text_style.font_weight:
                styles.append(f"font-weight: {format_number(text_style.font_weight)}")
            if text_style.text_align_horizontal is not None:
                styles.append(f"text-align: {TEXT_ALIGN_VALUES.get(text_style.text_align_horizontal, 'left')}")
        if solid_fill:
            styles.append(f"color: {color_to_css(fill.color)}")

    if node.opacity is not None and node.opacity < 1:
        styles.append(f"opacity: {format_number(node.opacity)}")

    return styles


def lower_node(node: DesignNode, context: WechatContext) -> WxmlElement:
    """Pre-order walk: the node's class index is taken before any child's."""
    class_name = context.allocate_class()
    context.rules.append(StyleRule(selector=class_name, declarations=node_to_wechat_styles(node)))

    element = WxmlElement(tag=WXML_TAG_MAP[node.type], class_name=class_name, hidden=not node.visible)
    if node.is_text and node.characters:
        element.text = node.characters
    elif node.children and not node.is_text:
        element.children = [lower_node(child, context) for child in node.children]
    return element


def _escape_text(text: str) -> str:
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def render_wxml(element: WxmlElement, indent: str = '') -> str:
    hidden = ' hidden' if element.hidden else ''
    open_tag = f'<{element.tag} class="{element.class_name}"{hidden}'

    if element.text is not None:
        return f"{indent}{open_tag}>{_escape_text(element.text)}</{element.tag}>"
    if not element.children:
        return f"{indent}{open_tag} />"

    children = '\n'.join(render_wxml(child, indent + '  ') for child in element.children)
    return f"{indent}{open_tag}>\n{children}\n{indent}</{element.tag}>"


def generate_wechat_bundle(node: DesignNode, component_name: str) -> WechatBundle:
    """Markup, stylesheet, script and manifest from one traversal."""
    context = WechatContext(component_name=component_name)
    root = lower_node(node, context)
    return WechatBundle(
        markup=render_wxml(root) + '\n',
        stylesheet='\n'.join(rule.render() for rule in context.rules),
    )
