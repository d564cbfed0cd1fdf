"""CLI interface."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

import typer

from src.smil.compiler import build_element_directives
from src.smil.ids import AnimationIdGenerator, NodeIdRegistry
from src.smil.injector import AnimationInjectionError, animate_svg
from src.smil.triggers import extract_trigger_targets
from src.smil.types import ElementKind
from src.smil.validator import AnimationValidationError
from src.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging.")):
    """Compile animation specs into SMIL <animate> elements."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_animations(path: Path) -> Dict[str, dict]:
    """Read ``{property: spec}`` JSON; trigger targets may be given as plain ids."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read spec file {path}: {exc}")
    if not isinstance(data, dict):
        raise typer.BadParameter("Spec file must contain a JSON object of {property: animation}")
    for spec in data.values():
        begin = spec.get("begin") if isinstance(spec, dict) else None
        if isinstance(begin, dict) and isinstance(begin.get("target"), str):
            begin["target"] = {"key": begin["target"]}
    return data


@app.command("compile")
def compile_cmd(
    spec_file: Path = typer.Argument(..., help="JSON file mapping property -> animation."),
    element: ElementKind = typer.Option(..., "--element", "-e", help="Element kind being animated."),
    element_id: Optional[str] = typer.Option(None, "--element-id", help="Id of the animated element."),
    as_json: bool = typer.Option(False, "--json", help="Print attribute maps as JSON."),
):
    """Print one <animate> element per animated property."""
    animations = _load_animations(spec_file)
    registry = NodeIdRegistry()
    try:
        for ref in extract_trigger_targets(animations, element.value):
            # An empty target key stays unresolved and gets the placeholder begin
            if ref.key:
                registry.assign(ref, ref.key)
        directives = build_element_directives(
            element,
            animations,
            element_id=element_id,
            id_generator=AnimationIdGenerator(),
            target_lookup=registry.get,
        )
    except AnimationValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([d.as_dict() for d in directives], indent=2))
        return
    for directive in directives:
        typer.echo(directive.to_markup())


@app.command()
def inject(
    svg_file: Path = typer.Argument(..., help="SVG document to animate."),
    spec_file: Path = typer.Argument(..., help="JSON file mapping property -> animation."),
    element_id: str = typer.Option(..., "--element-id", help="Id of the element to animate."),
    element: ElementKind = typer.Option(..., "--element", "-e", help="Element kind being animated."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout."),
    strict: bool = typer.Option(False, "--strict", help="Fail instead of leaving the SVG unanimated."),
):
    """Attach compiled animations to an element of an SVG file."""
    animations = _load_animations(spec_file)
    try:
        svg_text = svg_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read SVG file {svg_file}: {exc}")
    try:
        result = animate_svg(
            svg_text,
            element_id,
            element,
            animations,
            id_generator=AnimationIdGenerator(),
            strict_triggers=strict or None,
            raise_on_error=strict,
        )
    except (AnimationValidationError, AnimationInjectionError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if output:
        output.write_text(result, encoding="utf-8")
        typer.echo(f"Wrote {output}")
    else:
        typer.echo(result)


if __name__ == "__main__":
    app()
