"""Animation spec models - what authors write per animated property."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class EasingType(str, Enum):
    """Named easing curves with a fixed keySplines mapping."""
    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    BOUNCE = "bounce"
    ELASTIC = "elastic"
    BACK = "back"
    CUBIC_BEZIER = "cubic-bezier"


class TriggerType(str, Enum):
    """DOM events that can start an animation."""
    CLICK = "click"
    MOUSEENTER = "mouseenter"
    MOUSELEAVE = "mouseleave"
    FOCUS = "focus"
    BLUR = "blur"
    LOAD = "load"


class CalcMode(str, Enum):
    LINEAR = "linear"
    DISCRETE = "discrete"
    PACED = "paced"
    SPLINE = "spline"


class FillMode(str, Enum):
    FREEZE = "freeze"
    REMOVE = "remove"


class RestartMode(str, Enum):
    ALWAYS = "always"
    WHEN_NOT_ACTIVE = "whenNotActive"
    NEVER = "never"


class ElementKind(str, Enum):
    """SVG shapes that accept animation specs."""
    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"
    POLYLINE = "polyline"
    PATH = "path"


_SHARED = frozenset({"opacity", "stroke", "strokeWidth"})

ELEMENT_PROPERTIES: Dict[ElementKind, FrozenSet[str]] = {
    ElementKind.RECT: _SHARED | {"x", "y", "width", "height", "rx", "ry", "fill"},
    ElementKind.CIRCLE: _SHARED | {"cx", "cy", "r", "fill"},
    ElementKind.LINE: _SHARED | {"x1", "y1", "x2", "y2"},
    ElementKind.POLYLINE: _SHARED | {"points", "fill"},
    ElementKind.PATH: _SHARED | {"d", "fill", "strokeDasharray", "strokeDashoffset"},
}


@dataclass(frozen=True)
class NodeRef:
    """Lookup key for a node owned by the host document.

    Holds no handle to the node itself; two refs with the same key are the
    same node.
    """
    key: str


class Trigger(BaseModel):
    """Start the animation when ``type`` fires on ``target``."""
    type: TriggerType
    target: NodeRef

    model_config = {
        "frozen": True,
    }


Number = Union[int, float]


class AnimatedProperty(BaseModel):
    """Animation of one attribute of one element."""
    from_: Optional[Number] = Field(default=None, alias="from")
    to: Optional[Number] = None
    values: Optional[List[Number]] = None

    duration: str
    begin: Optional[Union[str, Trigger]] = None
    key_times: Optional[List[Number]] = Field(default=None, alias="keyTimes")

    easing: Optional[Union[EasingType, List[EasingType]]] = None
    key_splines: Optional[str] = Field(default=None, alias="keySplines")
    calc_mode: Optional[CalcMode] = Field(default=None, alias="calcMode")

    repeat_count: Optional[Union[Number, Literal["indefinite"]]] = Field(default=None, alias="repeatCount")
    fill: Optional[FillMode] = None
    restart: Optional[RestartMode] = None

    id: Optional[str] = None

    model_config = {
        "populate_by_name": True,
        "allow_inf_nan": False,
    }


SpecMapping = Dict[str, Union[AnimatedProperty, dict]]
