"""Easing names -> SMIL keySplines control points."""
from __future__ import annotations

from typing import Dict, Sequence, Union

from src.smil.types import EasingType

EASING_KEY_SPLINES: Dict[EasingType, str] = {
    EasingType.LINEAR: "0 0 1 1",
    EasingType.EASE: "0.25 0.1 0.25 1",
    EasingType.EASE_IN: "0.42 0 1 1",
    EasingType.EASE_OUT: "0 0 0.58 1",
    EasingType.EASE_IN_OUT: "0.42 0 0.58 1",
    EasingType.BOUNCE: "0.68 -0.55 0.265 1.55",
    EasingType.ELASTIC: "0.175 0.885 0.32 1.275",
    EasingType.BACK: "0.68 -0.55 0.265 1.55",
    # Placeholder; authors wanting a custom curve pass keySplines directly
    EasingType.CUBIC_BEZIER: "0.25 0.1 0.25 1",
}

KEY_SPLINE_SEPARATOR = "; "


def curve_for(name: Union[EasingType, str]) -> str:
    """Control-point quadruple for one easing name.

    Only names from EasingType are valid; anything else raises ValueError.
    """
    return EASING_KEY_SPLINES[EasingType(name)]


def easing_to_key_splines(easing: Union[EasingType, str, Sequence[Union[EasingType, str]]]) -> str:
    """One quadruple per transition, joined in order."""
    if isinstance(easing, (str, EasingType)):
        return curve_for(easing)
    return KEY_SPLINE_SEPARATOR.join(curve_for(name) for name in easing)
