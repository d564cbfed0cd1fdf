"""Structural validation of animation specs before compilation."""
from __future__ import annotations

import math
from enum import Enum
from typing import Union

from src.smil.types import ELEMENT_PROPERTIES, AnimatedProperty, ElementKind


class AnimationValidationError(ValueError):
    """Raised when a property's animation spec can't be compiled.

    ``code`` is a stable kebab-case failure kind (e.g. "keytimes-not-ascending")
    for callers and tests; the message is for humans.
    """

    def __init__(self, message: str, property: str, element: str, code: str = "invalid-animation"):
        super().__init__(f"Animation validation error for {element}.{property}: {message}")
        self.reason = message
        self.property = property
        self.element = element
        self.code = code


def element_name(element: Union[ElementKind, str]) -> str:
    return element.value if isinstance(element, Enum) else str(element)


def check_property_supported(element: Union[ElementKind, str], property: str) -> ElementKind:
    """Membership check of ``property`` against the element kind's legal set."""
    name = element_name(element)
    try:
        kind = ElementKind(name)
    except ValueError:
        raise AnimationValidationError(
            f"Unsupported element kind '{name}'", property, name, code="unsupported-element"
        ) from None
    if property not in ELEMENT_PROPERTIES[kind]:
        allowed = ", ".join(sorted(ELEMENT_PROPERTIES[kind]))
        raise AnimationValidationError(
            f"'{property}' cannot be animated on <{name}> (allowed: {allowed})",
            property,
            name,
            code="unsupported-property",
        )
    return kind


def validate_animation(property: str, animation: AnimatedProperty, element: Union[ElementKind, str]) -> None:
    """Reject the spec on the first violated rule; returns None when valid."""
    element = element_name(element)
    values = animation.values
    easing = animation.easing
    key_times = animation.key_times

    numbers = [animation.from_, animation.to, *(values or []), *(key_times or [])]
    for number in numbers:
        if number is not None and not math.isfinite(number):
            raise AnimationValidationError(
                f"Numbers must be finite, got {number}",
                property,
                element,
                code="non-finite-value",
            )

    if values is not None:
        if len(values) < 2:
            raise AnimationValidationError(
                f"values array needs at least 2 entries, got {len(values)}",
                property,
                element,
                code="values-too-short",
            )

        transition_count = len(values) - 1

        if isinstance(easing, list) and len(easing) != transition_count:
            raise AnimationValidationError(
                f"Easing array length ({len(easing)}) must match number of transitions ({transition_count})",
                property,
                element,
                code="easing-length-mismatch",
            )

        if key_times is not None and len(key_times) != len(values):
            raise AnimationValidationError(
                f"keyTimes array length ({len(key_times)}) must match values array length ({len(values)})",
                property,
                element,
                code="keytimes-length-mismatch",
            )

        if key_times is not None:
            for i, t in enumerate(key_times):
                if not 0 <= t <= 1:
                    raise AnimationValidationError(
                        f"keyTimes values must be between 0 and 1, got {t} at index {i}",
                        property,
                        element,
                        code="keytimes-out-of-range",
                    )
                if i > 0 and t <= key_times[i - 1]:
                    raise AnimationValidationError(
                        "keyTimes values must be in ascending order",
                        property,
                        element,
                        code="keytimes-not-ascending",
                    )

            if key_times[0] != 0:
                raise AnimationValidationError(
                    f"First keyTimes value must be 0, got {key_times[0]}",
                    property,
                    element,
                    code="keytimes-must-start-zero",
                )
            if key_times[-1] != 1:
                raise AnimationValidationError(
                    f"Last keyTimes value must be 1, got {key_times[-1]}",
                    property,
                    element,
                    code="keytimes-must-end-one",
                )

    if values is None and (animation.from_ is None or animation.to is None):
        raise AnimationValidationError(
            "Animation must have either 'values' array or both 'from' and 'to' properties",
            property,
            element,
            code="missing-values-or-endpoints",
        )
