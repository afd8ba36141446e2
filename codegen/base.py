"""
Shared helpers for all generators: platform tags, the generated artifact
container, number formatting and component naming.
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union


class Platform(str, Enum):
    """Code generation target platform."""
    PC = "pc"
    MOBILE = "mobile"
    WECHAT = "wechat"


@dataclass
class GeneratedArtifact:
    """Output of one lowering: named text payloads for a single component."""
    platform: Platform
    component_name: str
    payloads: Dict[str, str] = field(default_factory=dict)

    @property
    def code(self) -> str:
        """Primary payload (the only one for single-file platforms)."""
        return next(iter(self.payloads.values()), '')


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def normalize_number(value: Union[int, float]) -> Union[int, float]:
    """Drop a meaningless fractional part: 16.0 -> 16, 1.5 stays 1.5."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_number(value: Union[int, float], digits: int = 4) -> str:
    """Render a number for CSS/JS output without float noise."""
    return str(normalize_number(round(float(value), digits)))


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

def sanitize_name(name: str) -> str:
    return re.sub(r'[^a-zA-Z0-9]', '', name)


def to_pascal_case(text: str) -> str:
    """'my card/header' -> 'MyCardHeader'."""
    words = re.sub(r'[^a-zA-Z0-9]', ' ', text).split()
    return ''.join(w[:1].upper() + w[1:].lower() for w in words)


def generate_component_name(node_name: str, node_id: str) -> str:
    """Derive a valid component identifier from a node name, falling back to its id."""
    cleaned = to_pascal_case(node_name)
    if not cleaned:
        return 'Component' + sanitize_name(node_id)
    if not cleaned[0].isalpha():
        cleaned = 'Component' + cleaned
    return cleaned
