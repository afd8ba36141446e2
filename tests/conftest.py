"""Shared Figma node fixtures for generator tests."""
import pytest

BLUE_500 = {'r': 59 / 255, 'g': 130 / 255, 'b': 246 / 255, 'a': 1}
WHITE = {'r': 1, 'g': 1, 'b': 1, 'a': 1}
# rgb(31, 116, 201), not a palette entry
OFF_PALETTE = {'r': 0.123, 'g': 0.456, 'b': 0.789, 'a': 1}


def text_node(characters, node_id='9:1', **extra):
    node = {
        'id': node_id,
        'name': characters or 'Text',
        'type': 'TEXT',
        'characters': characters,
        'style': {'fontFamily': 'Inter', 'fontSize': 14, 'fontWeight': 400},
        'fills': [{'type': 'SOLID', 'visible': True, 'color': BLUE_500}],
        'strokes': [],
        'effects': [],
    }
    node.update(extra)
    return node


@pytest.fixture
def hello_text_with_children():
    """TEXT node that (incorrectly) carries a children list."""
    return text_node('Hello', children=[
        {'id': '9:2', 'name': 'Stray', 'type': 'RECTANGLE', 'children': []},
        text_node('Ignored', node_id='9:3'),
    ])


@pytest.fixture
def container_abc():
    """Frame with three text children A, B, C in that order."""
    return {
        'id': '2:1',
        'name': 'List',
        'type': 'FRAME',
        'layoutMode': 'VERTICAL',
        'absoluteBoundingBox': {'x': 0, 'y': 0, 'width': 200, 'height': 120},
        'fills': [],
        'strokes': [],
        'effects': [],
        'children': [
            text_node('A', node_id='2:2'),
            text_node('B', node_id='2:3'),
            text_node('C', node_id='2:4'),
        ],
    }


@pytest.fixture
def hi_frame():
    """Horizontal auto-layout frame, gap 16, one 14px palette-colored TEXT child."""
    return {
        'id': '1:2',
        'name': 'Card',
        'type': 'FRAME',
        'layoutMode': 'HORIZONTAL',
        'itemSpacing': 16,
        'fills': [],
        'strokes': [],
        'effects': [],
        'children': [text_node('Hi', node_id='1:3')],
    }


@pytest.fixture
def nested_tree():
    """Three levels deep: root -> (group -> (rect, text), ellipse)."""
    return {
        'id': '3:1',
        'name': 'Screen',
        'type': 'FRAME',
        'children': [
            {
                'id': '3:2',
                'name': 'Group',
                'type': 'GROUP',
                'children': [
                    {'id': '3:3', 'name': 'Box', 'type': 'RECTANGLE'},
                    text_node('Label', node_id='3:4'),
                ],
            },
            {'id': '3:5', 'name': 'Dot', 'type': 'ELLIPSE'},
        ],
    }


@pytest.fixture
def styled_rectangle():
    """Rectangle with palette fill and stroke, padding, radius and a drop shadow."""
    return {
        'id': '4:1',
        'name': 'Button',
        'type': 'RECTANGLE',
        'absoluteBoundingBox': {'x': 0, 'y': 0, 'width': 64, 'height': 100},
        'fills': [{'type': 'SOLID', 'visible': True, 'color': WHITE}],
        'strokes': [{'type': 'SOLID', 'visible': True, 'color': BLUE_500}],
        'strokeWeight': 1,
        'cornerRadius': 8,
        'paddingLeft': 16,
        'paddingRight': 16,
        'paddingTop': 8,
        'paddingBottom': 8,
        'effects': [{
            'type': 'DROP_SHADOW',
            'visible': True,
            'radius': 4,
            'color': {'r': 0, 'g': 0, 'b': 0, 'a': 0.25},
            'offset': {'x': 0, 'y': 2},
        }],
    }


@pytest.fixture
def off_palette_rectangle():
    """Rectangle whose fill and stroke have no Tailwind palette entry."""
    return {
        'id': '5:1',
        'name': 'Custom',
        'type': 'RECTANGLE',
        'fills': [{'type': 'SOLID', 'visible': True, 'color': OFF_PALETTE}],
        'strokes': [{'type': 'SOLID', 'visible': True, 'color': OFF_PALETTE}],
        'strokeWeight': 2,
    }


@pytest.fixture
def unordered_gradient_rectangle():
    """Linear gradient whose stops are listed out of position order."""
    return {
        'id': '6:1',
        'name': 'Gradient',
        'type': 'RECTANGLE',
        'fills': [{
            'type': 'GRADIENT_LINEAR',
            'visible': True,
            'gradientStops': [
                {'color': {'r': 1, 'g': 0, 'b': 0, 'a': 1}, 'position': 1},
                {'color': {'r': 0, 'g': 0, 'b': 1, 'a': 1}, 'position': 0},
            ],
        }],
    }


@pytest.fixture
def nodes_response(hi_frame, container_abc):
    """GET /files/:key/nodes response holding two documents."""
    return {
        'name': 'Design',
        'nodes': {
            '1:2': {'document': hi_frame},
            '2:1': {'document': container_abc},
        },
    }
