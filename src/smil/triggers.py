"""Trigger -> SMIL ``begin`` expressions, and trigger target discovery."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional, Set, Union

from pydantic import ValidationError

from src.smil.ids import NodeIdRegistry
from src.smil.types import AnimatedProperty, NodeRef, Trigger
from src.smil.validator import AnimationValidationError
from src.utils.config import settings

logger = logging.getLogger(__name__)

# Syntactically valid but matches no node, so the animation never starts
PLACEHOLDER_TARGET_ID = "target-element"

IdLookup = Callable[[NodeRef], Optional[str]]


def resolve_begin(
    begin: Union[str, Trigger],
    lookup: Optional[IdLookup] = None,
    strict: Optional[bool] = None,
    property: str = "",
    element: str = "",
) -> str:
    """Build the begin expression.

    Literal strings pass through untouched. A Trigger becomes
    ``<target id>.<event>`` where the id comes from ``lookup(trigger.target)``;
    the animated element's own id is never used. With no id available the
    placeholder target is emitted, or AnimationValidationError is raised when
    ``strict`` (default: settings.strict_triggers).
    """
    if isinstance(begin, str):
        return begin

    event = begin.type.value
    target_id = lookup(begin.target) if lookup is not None else None
    if target_id:
        return f"{target_id}.{event}"

    if settings.strict_triggers if strict is None else strict:
        raise AnimationValidationError(
            f"Trigger target '{begin.target.key}' has no id; assign one before compiling",
            property,
            element,
            code="trigger-target-unresolved",
        )
    logger.warning(f"No id for trigger target '{begin.target.key}' on {element}.{property}; animation will not start")
    return f"{PLACEHOLDER_TARGET_ID}.{event}"


def extract_trigger_targets(
    animations: Mapping[str, Union[AnimatedProperty, dict]],
    element: str = "",
) -> Set[NodeRef]:
    """Distinct trigger target refs across an element's specs (literal begins skipped)."""
    targets: Set[NodeRef] = set()
    for property, spec in animations.items():
        if not isinstance(spec, AnimatedProperty):
            try:
                spec = AnimatedProperty.model_validate(spec)
            except ValidationError as exc:
                raise AnimationValidationError(
                    f"Invalid animation spec: {exc}", property, element, code="invalid-spec"
                ) from exc
        if isinstance(spec.begin, Trigger):
            targets.add(spec.begin.target)
    return targets


def ensure_trigger_ids(
    animations: Mapping[str, Union[AnimatedProperty, dict]],
    registry: NodeIdRegistry,
    element: str = "",
) -> Dict[NodeRef, str]:
    """Give every trigger target an id ahead of compilation."""
    return {ref: registry.ensure_id(ref) for ref in extract_trigger_targets(animations, element)}
