"""Tests for the web, native and mini-program generators."""
import json

import pytest

from codegen.jsx_ast import JSXText
from codegen.nodes import NodeType, parse_node
from codegen.react_generator import JSX_TAG_MAP, generate_react_code, node_to_jsx_element
from codegen.react_native_generator import (
    RN_COMPONENT_MAP,
    NativeContext,
    generate_react_native_code,
    lower_node as lower_native,
    node_to_react_native_styles,
)
from codegen.wechat_generator import (
    WXML_TAG_MAP,
    WechatContext,
    generate_wechat_bundle,
    lower_node as lower_wechat,
    node_to_wechat_styles,
    render_wxml,
)


def _wechat_classes(element):
    yield element.class_name
    for child in element.children:
        yield from _wechat_classes(child)


class TestTagTables:
    """Every node type has a tag in every backend."""

    @pytest.mark.parametrize('table', [JSX_TAG_MAP, RN_COMPONENT_MAP, WXML_TAG_MAP])
    def test_table_is_exhaustive(self, table):
        assert set(table) == set(NodeType)

    def test_unknown_type_uses_generic_container(self):
        node = parse_node({'id': '1:1', 'type': 'WASHI_TAPE'})
        assert node_to_jsx_element(node).opening.name.value == 'div'
        assert lower_native(node, NativeContext()).component == 'View'
        assert lower_wechat(node, WechatContext('Tape')).tag == 'view'

    def test_text_tags(self):
        assert JSX_TAG_MAP[NodeType.TEXT] == 'span'
        assert RN_COMPONENT_MAP[NodeType.TEXT] == 'Text'
        assert WXML_TAG_MAP[NodeType.TEXT] == 'text'
        assert JSX_TAG_MAP[NodeType.VECTOR] == 'svg'


class TestTextContent:
    """A TEXT node renders only its characters, whatever children it carries."""

    def test_web(self, hello_text_with_children):
        element = node_to_jsx_element(parse_node(hello_text_with_children))
        assert element.children == (JSXText('Hello'),)

    def test_native(self, hello_text_with_children):
        element = lower_native(parse_node(hello_text_with_children), NativeContext())
        assert element.text == 'Hello'
        assert element.children == []

    def test_wechat(self, hello_text_with_children):
        element = lower_wechat(parse_node(hello_text_with_children), WechatContext('Hello'))
        assert element.text == 'Hello'
        assert element.children == []
        assert render_wxml(element) == '<text class="hello-0">Hello</text>'

    def test_empty_text_is_empty_element(self):
        node = parse_node({'type': 'TEXT', 'characters': ''})
        assert node_to_jsx_element(node).opening.self_closing
        assert lower_native(node, NativeContext()).text is None
        assert render_wxml(lower_wechat(node, WechatContext('T'))) == '<text class="t-0" />'


class TestChildOrder:
    """Children keep their document order in every backend."""

    def test_web(self, container_abc):
        element = node_to_jsx_element(parse_node(container_abc))
        assert [child.children[0].value for child in element.children] == ['A', 'B', 'C']

    def test_native(self, container_abc):
        element = lower_native(parse_node(container_abc), NativeContext())
        assert [child.text for child in element.children] == ['A', 'B', 'C']

    def test_wechat(self, container_abc):
        element = lower_wechat(parse_node(container_abc), WechatContext('List'))
        assert [child.text for child in element.children] == ['A', 'B', 'C']

    def test_printed_order(self, container_abc):
        code = generate_react_code(parse_node(container_abc), 'List')
        assert code.index('>A<') < code.index('>B<') < code.index('>C<')


class TestHiddenNodes:
    """visible=False always produces the backend's hidden marker."""

    @pytest.mark.parametrize('node_type', list(NodeType))
    def test_web_hidden_attribute(self, node_type):
        element = node_to_jsx_element(parse_node({'type': node_type.value, 'visible': False}))
        assert any(a.name.value == 'hidden' and a.value is None for a in element.opening.attrs)

    @pytest.mark.parametrize('node_type', list(NodeType))
    def test_native_display_none(self, node_type):
        styles = node_to_react_native_styles(parse_node({'type': node_type.value, 'visible': False}))
        assert styles['display'] == 'none'

    @pytest.mark.parametrize('node_type', list(NodeType))
    def test_wechat_hidden_attribute(self, node_type):
        element = lower_wechat(parse_node({'type': node_type.value, 'visible': False}), WechatContext('X'))
        assert element.hidden
        assert ' hidden' in render_wxml(element)

    def test_visible_nodes_have_no_marker(self, container_abc):
        node = parse_node(container_abc)
        assert ' hidden' not in generate_react_code(node, 'List')
        assert 'none' not in generate_react_native_code(node, 'List')
        assert ' hidden' not in generate_wechat_bundle(node, 'List').markup

    def test_hidden_child_in_tree(self, container_abc):
        container_abc['children'][1]['visible'] = False
        markup = generate_wechat_bundle(parse_node(container_abc), 'List').markup
        assert '<text class="list-2" hidden>B</text>' in markup


class TestWechatSelectors:
    """Selector indices are unique and increase in pre-order."""

    def test_indices_follow_pre_order(self, nested_tree):
        context = WechatContext('Screen')
        root = lower_wechat(parse_node(nested_tree), context)
        classes = list(_wechat_classes(root))
        assert classes == ['screen-0', 'screen-1', 'screen-2', 'screen-3', 'screen-4']
        assert [rule.selector for rule in context.rules] == classes
        assert context.next_index == 5

    def test_contexts_are_independent(self, nested_tree):
        node = parse_node(nested_tree)
        first = generate_wechat_bundle(node, 'Screen')
        second = generate_wechat_bundle(node, 'Screen')
        assert first == second

    def test_bundle_files(self, hi_frame):
        files = generate_wechat_bundle(parse_node(hi_frame), 'Card').files()
        assert list(files) == ['index.wxml', 'index.wxss', 'index.js', 'index.json']
        assert json.loads(files['index.json'])['component'] is True
        assert files['index.js'].startswith('Component({')

    def test_markup_escaping(self):
        node = parse_node({'type': 'TEXT', 'characters': '<b>&'})
        assert render_wxml(lower_wechat(node, WechatContext('T'))) == '<text class="t-0">&lt;b&gt;&amp;</text>'

    def test_styled_rectangle_rules(self, styled_rectangle):
        styles = node_to_wechat_styles(parse_node(styled_rectangle))
        assert styles == [
            'width: 64rpx',
            'height: 100rpx',
            'padding: 8rpx 16rpx 8rpx 16rpx',
            'background-color: rgb(255, 255, 255)',
            'border: 1rpx solid rgb(59, 130, 246)',
            'border-radius: 8rpx',
        ]


class TestNativeStyles:

    def test_styled_rectangle(self, styled_rectangle):
        styles = node_to_react_native_styles(parse_node(styled_rectangle))
        assert styles == {
            'width': 64,
            'height': 100,
            'paddingLeft': 16,
            'paddingRight': 16,
            'paddingTop': 8,
            'paddingBottom': 8,
            'backgroundColor': 'rgb(255, 255, 255)',
            'borderColor': 'rgb(59, 130, 246)',
            'borderWidth': 1,
            'borderRadius': 8,
        }

    def test_text_fill_is_font_color(self, hi_frame):
        styles = node_to_react_native_styles(parse_node(hi_frame).children[0])
        assert styles['color'] == 'rgb(59, 130, 246)'
        assert 'backgroundColor' not in styles
        assert styles['fontWeight'] == '400'

    def test_imports_only_used_components(self, nested_tree):
        code = generate_react_native_code(parse_node(nested_tree), 'Screen')
        assert "import { View, Text } from 'react-native';" in code

    def test_container_without_text(self):
        code = generate_react_native_code(parse_node({'type': 'RECTANGLE'}), 'Box')
        assert "import { View } from 'react-native';" in code
        assert '<View />' in code


class TestEndToEnd:
    """Horizontal frame, gap 16, one TEXT child 'Hi'."""

    def test_web(self, hi_frame):
        code = generate_react_code(parse_node(hi_frame), 'Card')
        assert "import React from 'react';" in code
        assert '<div className="flex gap-4">' in code
        assert '<span className="text-sm font-normal text-blue-500">Hi</span>' in code
        assert 'export default Card;' in code

    def test_native(self, hi_frame):
        code = generate_react_native_code(parse_node(hi_frame), 'Card')
        assert '"flexDirection":"row"' in code
        assert '"gap":16' in code
        assert '>Hi</Text>' in code
        assert 'export default Card;' in code

    def test_wechat(self, hi_frame):
        bundle = generate_wechat_bundle(parse_node(hi_frame), 'Card')
        assert bundle.markup == '<view class="card-0">\n  <text class="card-1">Hi</text>\n</view>\n'
        assert '.card-0 {\n  display: flex;\n  flex-direction: row;\n}\n' in bundle.stylesheet
        assert bundle.stylesheet.count('.card-') == 2


class TestEntityText:
    """Text that looks like an HTML entity is emitted as a string literal."""

    def test_web(self):
        code = generate_react_code(parse_node({'type': 'TEXT', 'characters': 'Tom &amp; Jerry'}), 'Title')
        assert "<span>{'Tom &amp; Jerry'}</span>" in code

    def test_native(self):
        code = generate_react_native_code(parse_node({'type': 'TEXT', 'characters': 'Tom &amp; Jerry'}), 'Title')
        assert "<Text>{'Tom &amp; Jerry'}</Text>" in code
