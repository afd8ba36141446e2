"""Tests for parsing Figma documents into DesignNode trees."""
import pytest
from pydantic import ValidationError

from codegen.nodes import AxisAlign, DesignNode, LayoutMode, NodeType, parse_node


class TestParseNode:

    def test_camel_case_keys(self, hi_frame):
        node = parse_node(hi_frame)
        assert node.type == NodeType.FRAME
        assert node.layout_mode == LayoutMode.HORIZONTAL
        assert node.item_spacing == 16
        assert node.children[0].style.font_size == 14

    def test_unset_attributes_stay_none(self):
        node = parse_node({'id': '1:1', 'name': 'Bare', 'type': 'RECTANGLE'})
        assert node.corner_radius is None
        assert node.opacity is None
        assert node.padding_left is None
        assert node.absolute_bounding_box is None
        assert node.visible is True
        assert node.fills == []

    def test_null_lists_become_empty(self):
        node = parse_node({'type': 'FRAME', 'fills': None, 'children': None})
        assert node.fills == []
        assert node.children == []

    def test_unknown_type_is_coerced(self):
        node = parse_node({'id': '1:1', 'type': 'WASHI_TAPE'})
        assert node.type == NodeType.UNKNOWN

    def test_unknown_fields_are_ignored(self):
        node = parse_node({'type': 'FRAME', 'blendMode': 'PASS_THROUGH', 'exportSettings': []})
        assert node.type == NodeType.FRAME

    def test_alignment_enums(self):
        node = parse_node({
            'type': 'FRAME',
            'primaryAxisAlignItems': 'SPACE_BETWEEN',
            'counterAxisAlignItems': 'CENTER',
        })
        assert node.primary_axis_align_items == AxisAlign.SPACE_BETWEEN
        assert node.counter_axis_align_items == AxisAlign.CENTER

    def test_passes_design_node_through(self, hi_frame):
        node = parse_node(hi_frame)
        assert parse_node(node) is node

    def test_nodes_are_frozen(self, hi_frame):
        node = parse_node(hi_frame)
        with pytest.raises(ValidationError):
            node.name = 'Other'

    def test_first_paint_helpers(self, styled_rectangle):
        node = parse_node(styled_rectangle)
        assert node.first_fill.color.r == 1
        assert node.first_stroke is not None
        assert parse_node({'type': 'FRAME'}).first_fill is None

    def test_snake_case_construction(self):
        node = DesignNode(type=NodeType.TEXT, characters='x')
        assert node.is_text
        assert not node.has_auto_layout


class TestUnsupportedEnumValues:
    """Layout values the generators do not know are treated as unset."""

    def test_grid_layout_is_unset(self):
        node = parse_node({'type': 'FRAME', 'layoutMode': 'GRID', 'children': [{'type': 'TEXT', 'characters': 'Hi'}]})
        assert node.layout_mode is None
        assert not node.has_auto_layout
        assert node.children[0].characters == 'Hi'

    def test_unknown_axis_alignment_is_unset(self):
        node = parse_node({
            'type': 'FRAME',
            'layoutMode': 'HORIZONTAL',
            'primaryAxisAlignItems': 'SOMEWHERE',
            'counterAxisAlignItems': 'CENTER',
        })
        assert node.primary_axis_align_items is None
        assert node.counter_axis_align_items == AxisAlign.CENTER

    def test_unknown_text_alignment_is_unset(self):
        node = parse_node({'type': 'TEXT', 'style': {'fontSize': 12, 'textAlignHorizontal': 'DIAGONAL'}})
        assert node.style.text_align_horizontal is None
        assert node.style.font_size == 12
