"""SMIL Animation Module.

Compiles per-property animation specs into native SVG ``<animate>`` elements.

Components:
- types: animation spec models (AnimatedProperty, Trigger, element kinds)
- easing: named easing curves -> keySplines
- validator: structural checks, AnimationValidationError
- triggers: begin-expression resolution and trigger target discovery
- compiler: per-property directives and per-element aggregation
- ids: directive id generator and node id registry
- injector: attach/strip directives in a static SVG document
"""

from src.smil.types import (
    AnimatedProperty,
    CalcMode,
    EasingType,
    ElementKind,
    ELEMENT_PROPERTIES,
    FillMode,
    NodeRef,
    RestartMode,
    Trigger,
    TriggerType,
)

from src.smil.easing import (
    EASING_KEY_SPLINES,
    curve_for,
    easing_to_key_splines,
)

from src.smil.validator import (
    AnimationValidationError,
    check_property_supported,
    validate_animation,
)

from src.smil.ids import (
    AnimationIdGenerator,
    NodeIdRegistry,
    default_id_generator,
)

from src.smil.triggers import (
    PLACEHOLDER_TARGET_ID,
    ensure_trigger_ids,
    extract_trigger_targets,
    resolve_begin,
)

from src.smil.compiler import (
    Directive,
    build_directive,
    build_element_directives,
    compile_animation,
    compile_element_animations,
)

from src.smil.injector import (
    AnimationInjectionError,
    animate_svg,
    inject_animations,
    remove_animations,
)

__all__ = [
    # Models
    "AnimatedProperty",
    "CalcMode",
    "EasingType",
    "ElementKind",
    "ELEMENT_PROPERTIES",
    "FillMode",
    "NodeRef",
    "RestartMode",
    "Trigger",
    "TriggerType",
    # Easing
    "EASING_KEY_SPLINES",
    "curve_for",
    "easing_to_key_splines",
    # Validation
    "AnimationValidationError",
    "check_property_supported",
    "validate_animation",
    # Ids
    "AnimationIdGenerator",
    "NodeIdRegistry",
    "default_id_generator",
    # Triggers
    "PLACEHOLDER_TARGET_ID",
    "ensure_trigger_ids",
    "extract_trigger_targets",
    "resolve_begin",
    # Compiler
    "Directive",
    "build_directive",
    "build_element_directives",
    "compile_animation",
    "compile_element_animations",
    # Document host
    "AnimationInjectionError",
    "animate_svg",
    "inject_animations",
    "remove_animations",
]
