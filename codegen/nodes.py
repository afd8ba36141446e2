"""
Design node models - typed view of the Figma REST API document tree.

Field names are snake_case in Python and accept the camelCase keys of the
Figma JSON (``absoluteBoundingBox``, ``primaryAxisAlignItems``, ...).
Optional attributes that Figma omits stay ``None``; they are never defaulted
to zero.
"""

import logging
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


# ============================================================================
# Enums
# ============================================================================

class NodeType(str, Enum):
    """Figma node types understood by the generators."""
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    SECTION = "SECTION"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    VECTOR = "VECTOR"
    TEXT = "TEXT"
    LINE = "LINE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    STAR = "STAR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    SLICE = "SLICE"
    UNKNOWN = "UNKNOWN"


class LayoutMode(str, Enum):
    """Auto-layout direction."""
    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class AxisAlign(str, Enum):
    """Primary/counter axis alignment of an auto-layout frame."""
    MIN = "MIN"
    CENTER = "CENTER"
    MAX = "MAX"
    SPACE_BETWEEN = "SPACE_BETWEEN"
    SPACE_AROUND = "SPACE_AROUND"
    SPACE_EVENLY = "SPACE_EVENLY"
    BASELINE = "BASELINE"
    STRETCH = "STRETCH"


class TextAlign(str, Enum):
    """Horizontal text alignment."""
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"
    JUSTIFIED = "JUSTIFIED"


# ============================================================================
# Models
# ============================================================================

class FigmaModel(BaseModel):
    """Base for all document models: camelCase aliases, read-only once built."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        frozen=True,
    )


class Color(FigmaModel):
    """Figma color, channels in [0, 1]."""
    r: float = 0
    g: float = 0
    b: float = 0
    a: Optional[float] = None


class Vector(FigmaModel):
    x: float = 0
    y: float = 0


class BoundingBox(FigmaModel):
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


class GradientStop(FigmaModel):
    color: Color
    position: float = 0


class Paint(FigmaModel):
    """A single fill or stroke entry."""
    type: str = 'SOLID'
    visible: bool = True
    opacity: Optional[float] = None
    color: Optional[Color] = None
    gradient_stops: List[GradientStop] = Field(default_factory=list)
    gradient_handle_positions: List[Vector] = Field(default_factory=list)
    image_ref: Optional[str] = None


class Effect(FigmaModel):
    """Shadow or blur effect."""
    type: str
    visible: bool = True
    radius: Optional[float] = None
    spread: Optional[float] = None
    color: Optional[Color] = None
    offset: Optional[Vector] = None


def _optional_enum(enum_cls, v: Any, field_name: str) -> Any:
    """Enum member for v, or None when Figma sends a value the generators do not know."""
    if v is None or isinstance(v, enum_cls):
        return v
    try:
        return enum_cls(v)
    except ValueError:
        logger.debug("Unsupported %s %r, treating as unset", field_name, v)
        return None


class TypeStyle(FigmaModel):
    """Text style of a TEXT node."""
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[float] = None
    letter_spacing: Optional[float] = None
    line_height_px: Optional[float] = None
    text_align_horizontal: Optional[TextAlign] = None

    @field_validator('text_align_horizontal', mode='before')
    @classmethod
    def coerce_unknown_align(cls, v: Any) -> Any:
        return _optional_enum(TextAlign, v, 'textAlignHorizontal')


class DesignNode(FigmaModel):
    """A node of the design document tree."""
    id: str = ''
    name: str = ''
    type: NodeType = NodeType.UNKNOWN
    absolute_bounding_box: Optional[BoundingBox] = None
    visible: bool = True
    opacity: Optional[float] = None
    corner_radius: Optional[float] = None
    fills: List[Paint] = Field(default_factory=list)
    strokes: List[Paint] = Field(default_factory=list)
    stroke_weight: Optional[float] = None

    layout_mode: Optional[LayoutMode] = None
    primary_axis_align_items: Optional[AxisAlign] = None
    counter_axis_align_items: Optional[AxisAlign] = None
    item_spacing: Optional[float] = None
    padding_left: Optional[float] = None
    padding_right: Optional[float] = None
    padding_top: Optional[float] = None
    padding_bottom: Optional[float] = None

    style: Optional[TypeStyle] = None
    characters: Optional[str] = None
    effects: List[Effect] = Field(default_factory=list)
    children: List['DesignNode'] = Field(default_factory=list)

    @field_validator('type', mode='before')
    @classmethod
    def coerce_unknown_type(cls, v: Any) -> Any:
        # Unsupported node types fall back to the generic container
        if isinstance(v, NodeType):
            return v
        try:
            return NodeType(v)
        except ValueError:
            logger.debug("Unsupported node type %r, treating as UNKNOWN", v)
            return NodeType.UNKNOWN

    @field_validator('layout_mode', mode='before')
    @classmethod
    def coerce_unknown_layout(cls, v: Any) -> Any:
        # e.g. GRID: no flex layout for the node
        return _optional_enum(LayoutMode, v, 'layoutMode')

    @field_validator('primary_axis_align_items', 'counter_axis_align_items', mode='before')
    @classmethod
    def coerce_unknown_axis_align(cls, v: Any, info: ValidationInfo) -> Any:
        return _optional_enum(AxisAlign, v, info.field_name)

    @field_validator('fills', 'strokes', 'effects', 'children', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT

    @property
    def has_auto_layout(self) -> bool:
        return self.layout_mode in (LayoutMode.HORIZONTAL, LayoutMode.VERTICAL)

    @property
    def first_fill(self) -> Optional[Paint]:
        # Only the first paint is significant
        return self.fills[0] if self.fills else None

    @property
    def first_stroke(self) -> Optional[Paint]:
        return self.strokes[0] if self.strokes else None


DesignNode.model_rebuild()


def parse_node(data: Any) -> DesignNode:
    """Build a DesignNode tree from a Figma document dict (or pass one through)."""
    if isinstance(data, DesignNode):
        return data
    return DesignNode.model_validate(data)
