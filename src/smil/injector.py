"""Attach compiled directives to elements of a static SVG document.

The document plays the host's role: directives are appended as children of
the animated element (mount) and stripped again on request (unmount).
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union
from xml.etree import ElementTree as ET

from src.smil.compiler import DIRECTIVE_TAG, Directive, build_element_directives
from src.smil.ids import AnimationIdGenerator, NodeIdRegistry
from src.smil.triggers import extract_trigger_targets
from src.smil.types import AnimatedProperty, ElementKind
from src.smil.validator import AnimationValidationError, element_name

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class AnimationInjectionError(ValueError):
    """Raised when directives can't be attached to the document."""


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _register_svg_namespace() -> None:
    """Ensure the default SVG namespace is registered for serialization."""
    ET.register_namespace("", SVG_NS)


def _parse(svg_text: str) -> ET.Element:
    try:
        return ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise AnimationInjectionError(f"Invalid SVG XML: {exc}") from exc


def _find_by_id(root: ET.Element, element_id: str) -> Optional[ET.Element]:
    for el in root.iter():
        if el.get("id") == element_id:
            return el
    return None


def _child_tag(root: ET.Element, local: str) -> str:
    # Match the document's namespace so serialization stays prefix-free
    if root.tag.startswith("{"):
        namespace = root.tag.split("}")[0] + "}"
        return namespace + local
    return local


def inject_animations(svg_text: str, element_id: str, directives: Iterable[Directive]) -> str:
    """Append one ``<animate>`` child per directive to the element with ``element_id``."""
    root = _parse(svg_text)
    target = _find_by_id(root, element_id)
    if target is None:
        raise AnimationInjectionError(f"No element with id '{element_id}' in SVG")

    count = 0
    for directive in directives:
        child = ET.SubElement(target, _child_tag(root, directive.tag))
        for key, value in directive.attributes:
            child.set(key, value)
        count += 1

    logger.info(f"Injected {count} animation(s) into #{element_id}")
    _register_svg_namespace()
    return ET.tostring(root, encoding="unicode")


def remove_animations(svg_text: str, element_id: Optional[str] = None) -> str:
    """Strip ``<animate>`` children from one element, or from the whole document."""
    root = _parse(svg_text)
    if element_id is None:
        scopes = list(root.iter())
    else:
        target = _find_by_id(root, element_id)
        if target is None:
            raise AnimationInjectionError(f"No element with id '{element_id}' in SVG")
        scopes = [target]

    removed = 0
    for parent in scopes:
        for child in list(parent):
            if _strip_ns(child.tag) == DIRECTIVE_TAG:
                parent.remove(child)
                removed += 1

    logger.debug(f"Removed {removed} animation(s)")
    _register_svg_namespace()
    return ET.tostring(root, encoding="unicode")


def animate_svg(
    svg_text: str,
    element_id: str,
    element: Union[ElementKind, str],
    animations: Mapping[str, Union[AnimatedProperty, dict]],
    registry: Optional[NodeIdRegistry] = None,
    id_generator: Optional[AnimationIdGenerator] = None,
    strict_triggers: Optional[bool] = None,
    raise_on_error: bool = False,
) -> str:
    """Compile ``animations`` and attach them to ``element_id``.

    A trigger target whose key is the id of an element in the document is
    registered under that id; other targets resolve through ``registry``.
    If the specs don't compile, the error is logged and the SVG comes back
    unchanged so the element still renders, just without animation
    (``raise_on_error`` re-raises instead).
    """
    if registry is None:
        registry = NodeIdRegistry()
    name = element_name(element)
    root = _parse(svg_text)
    target = _find_by_id(root, element_id)
    if target is None:
        raise AnimationInjectionError(f"No element with id '{element_id}' in SVG")
    if _strip_ns(target.tag) != name:
        raise AnimationInjectionError(
            f"Element #{element_id} is a <{_strip_ns(target.tag)}>, not a <{name}>"
        )
    try:
        for ref in extract_trigger_targets(animations, name):
            if ref.key and ref not in registry and _find_by_id(root, ref.key) is not None:
                registry.assign(ref, ref.key)
        directives = build_element_directives(
            name,
            animations,
            element_id=element_id,
            id_generator=id_generator,
            target_lookup=registry.get,
            strict_triggers=strict_triggers,
        )
    except AnimationValidationError as exc:
        if raise_on_error:
            raise
        logger.error(f"Failed to set up animations for {name} #{element_id}: {exc}")
        return svg_text
    return inject_animations(svg_text, element_id, directives)
