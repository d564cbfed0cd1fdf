"""Compile animation specs into SMIL ``<animate>`` directives.

One directive per animated property. Compilation always validates first, and
every failure reaching the caller is an AnimationValidationError.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from xml.sax.saxutils import escape

from src.smil.easing import easing_to_key_splines
from src.smil.ids import AnimationIdGenerator, default_id_generator
from src.smil.triggers import IdLookup, resolve_begin
from src.smil.types import AnimatedProperty, CalcMode, ElementKind
from src.smil.validator import (
    AnimationValidationError,
    check_property_supported,
    element_name,
    validate_animation,
)

logger = logging.getLogger(__name__)

DIRECTIVE_TAG = "animate"
VALUE_SEPARATOR = ";"

_ATTR_ENTITIES = {'"': "&quot;"}


def format_value(value: Any) -> str:
    """Render a spec value the way it appears in markup (1.0 -> "1")."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def join_values(items: Sequence[Any]) -> str:
    return VALUE_SEPARATOR.join(format_value(item) for item in items)


@dataclass(frozen=True)
class Directive:
    """A compiled ``<animate>`` element: ordered attributes, immutable."""
    attributes: Tuple[Tuple[str, str], ...]
    tag: str = DIRECTIVE_TAG
    owner_id: Optional[str] = field(default=None, compare=False)

    @property
    def id(self) -> str:
        return self.get("id") or ""

    def get(self, name: str) -> Optional[str]:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def as_dict(self) -> Dict[str, str]:
        return dict(self.attributes)

    def to_markup(self) -> str:
        tokens = " ".join(f'{key}="{escape(value, _ATTR_ENTITIES)}"' for key, value in self.attributes)
        return f"<{self.tag} {tokens} />"

    def __str__(self) -> str:
        return self.to_markup()


def build_directive(
    element: Union[ElementKind, str],
    property: str,
    animation: AnimatedProperty,
    element_id: Optional[str] = None,
    id_generator: Optional[AnimationIdGenerator] = None,
    target_lookup: Optional[IdLookup] = None,
    strict_triggers: Optional[bool] = None,
) -> Directive:
    """Validate one property's spec and assemble its attribute set.

    ``element_id`` is the animated element's own id; it is recorded on the
    directive but never used to resolve triggers (those go through
    ``target_lookup``).
    """
    element = element_name(element)
    validate_animation(property, animation, element)

    generator = id_generator or default_id_generator
    attrs: List[Tuple[str, str]] = [
        ("id", animation.id or generator.next_id()),
        ("attributeName", property),
        ("dur", animation.duration),
    ]

    if animation.values is not None:
        attrs.append(("values", join_values(animation.values)))
    else:
        if animation.from_ is not None:
            attrs.append(("from", format_value(animation.from_)))
        if animation.to is not None:
            attrs.append(("to", format_value(animation.to)))

    if animation.begin:
        attrs.append(
            (
                "begin",
                resolve_begin(
                    animation.begin,
                    lookup=target_lookup,
                    strict=strict_triggers,
                    property=property,
                    element=element,
                ),
            )
        )

    if animation.key_times is not None:
        attrs.append(("keyTimes", join_values(animation.key_times)))

    if animation.key_splines:
        attrs.append(("keySplines", animation.key_splines))
        attrs.append(("calcMode", CalcMode.SPLINE.value))
    elif animation.easing:
        attrs.append(("keySplines", easing_to_key_splines(animation.easing)))
        attrs.append(("calcMode", CalcMode.SPLINE.value))
    elif animation.calc_mode:
        attrs.append(("calcMode", animation.calc_mode.value))

    if animation.repeat_count is not None:
        attrs.append(("repeatCount", format_value(animation.repeat_count)))
    if animation.fill:
        attrs.append(("fill", animation.fill.value))
    if animation.restart:
        attrs.append(("restart", animation.restart.value))

    directive = Directive(attributes=tuple(attrs), owner_id=element_id)
    logger.debug(f"Compiled {element}.{property} -> {directive.id}")
    return directive


def compile_animation(
    element: Union[ElementKind, str],
    property: str,
    animation: AnimatedProperty,
    element_id: Optional[str] = None,
    id_generator: Optional[AnimationIdGenerator] = None,
    target_lookup: Optional[IdLookup] = None,
    strict_triggers: Optional[bool] = None,
) -> str:
    """Compile one property's spec to a self-closing ``<animate ... />`` string."""
    return build_directive(
        element,
        property,
        animation,
        element_id=element_id,
        id_generator=id_generator,
        target_lookup=target_lookup,
        strict_triggers=strict_triggers,
    ).to_markup()


def build_element_directives(
    element: Union[ElementKind, str],
    animations: Mapping[str, Union[AnimatedProperty, dict]],
    element_id: Optional[str] = None,
    id_generator: Optional[AnimationIdGenerator] = None,
    target_lookup: Optional[IdLookup] = None,
    strict_triggers: Optional[bool] = None,
) -> List[Directive]:
    """Directives for every property of one element, in mapping order.

    All-or-nothing: the first failing property aborts the batch, and any
    failure is surfaced as AnimationValidationError with property/element
    context.
    """
    element = element_name(element)
    directives: List[Directive] = []
    for property, spec in animations.items():
        try:
            check_property_supported(element, property)
            animation = spec if isinstance(spec, AnimatedProperty) else AnimatedProperty.model_validate(spec)
            directives.append(
                build_directive(
                    element,
                    property,
                    animation,
                    element_id=element_id,
                    id_generator=id_generator,
                    target_lookup=target_lookup,
                    strict_triggers=strict_triggers,
                )
            )
        except AnimationValidationError:
            raise
        except Exception as exc:
            raise AnimationValidationError(
                f"Failed to generate animation: {exc}",
                property,
                element,
                code="compilation-failed",
            ) from exc
    return directives


def compile_element_animations(
    element: Union[ElementKind, str],
    animations: Mapping[str, Union[AnimatedProperty, dict]],
    element_id: Optional[str] = None,
    id_generator: Optional[AnimationIdGenerator] = None,
    target_lookup: Optional[IdLookup] = None,
    strict_triggers: Optional[bool] = None,
) -> List[str]:
    """Markup strings for every property of one element, in mapping order."""
    directives = build_element_directives(
        element,
        animations,
        element_id=element_id,
        id_generator=id_generator,
        target_lookup=target_lookup,
        strict_triggers=strict_triggers,
    )
    return [directive.to_markup() for directive in directives]
