"""
React + Tailwind CSS generator (web).

Two phases: the node tree is lowered to a JSX syntax tree
(``create_component_ast``), which is then printed and formatted
(``figma_to_jsx``).

Hidden nodes (visible=False) carry a bare ``hidden`` attribute.
"""

from types import MappingProxyType
from typing import List, Mapping

from codegen.formatter import format_code
from codegen.jsx_ast import (
    JSXAttribute,
    JSXElement,
    Module,
    create_attribute,
    create_component_declaration,
    create_default_export,
    create_element,
    create_import_statement,
    create_style_object,
    create_text_element,
)
from codegen.jsx_printer import print_module
from codegen.nodes import DesignNode, NodeType
from codegen.style_classifier import classify_node

JSX_TAG_MAP: Mapping[NodeType, str] = MappingProxyType({
    NodeType.FRAME: 'div',
    NodeType.GROUP: 'div',
    NodeType.COMPONENT: 'div',
    NodeType.COMPONENT_SET: 'div',
    NodeType.INSTANCE: 'div',
    NodeType.SECTION: 'div',
    NodeType.RECTANGLE: 'div',
    NodeType.ELLIPSE: 'div',
    NodeType.LINE: 'div',
    NodeType.REGULAR_POLYGON: 'div',
    NodeType.STAR: 'div',
    NodeType.BOOLEAN_OPERATION: 'div',
    NodeType.SLICE: 'div',
    NodeType.VECTOR: 'svg',
    NodeType.TEXT: 'span',
    NodeType.UNKNOWN: 'div',
})


def node_to_jsx_element(node: DesignNode) -> JSXElement:
    """Recursively lower a design node to a JSX element (pre-order, children in order)."""
    tag_name = JSX_TAG_MAP[node.type]
    attributes: List[JSXAttribute] = []

    style = classify_node(node)
    if style.classes:
        attributes.append(create_attribute('className', style.class_name))
    if style.inline_style:
        attributes.append(create_attribute('style', create_style_object(style.inline_style)))

    if not node.visible:
        attributes.append(create_attribute('hidden', None))

    # Children of a text node are ignored
    if node.is_text and node.characters:
        return create_text_element(tag_name, attributes, node.characters)

    if node.children and not node.is_text:
        children = [node_to_jsx_element(child) for child in node.children]
        return create_element(tag_name, attributes, children)

    return create_element(tag_name, attributes, [])


def create_component_ast(node: DesignNode, component_name: str) -> Module:
    """Module: React import, component returning the lowered root, default export."""
    return Module(body=(
        create_import_statement('react', 'React'),
        create_component_declaration(component_name, node_to_jsx_element(node)),
        create_default_export(component_name),
    ))


def generate_react_code(node: DesignNode, component_name: str) -> str:
    """Unformatted React component source."""
    return print_module(create_component_ast(node, component_name))


async def figma_to_jsx(node: DesignNode, component_name: str) -> str:
    """React component source, formatted with prettier when available."""
    return await format_code(generate_react_code(node, component_name))
