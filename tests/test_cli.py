import json

from typer.testing import CliRunner

from src.cli import app

runner = CliRunner()

SVG = '<svg xmlns="http://www.w3.org/2000/svg"><rect id="box" width="10" height="10" /><circle id="btn" r="3" /></svg>'


def _write_spec(tmp_path, data) -> str:
    path = tmp_path / "spec.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_compile_prints_directives(tmp_path):
    spec = _write_spec(
        tmp_path,
        {
            "x": {"values": [0, 50, 100], "keyTimes": [0, 0.5, 1], "easing": "linear", "duration": "2s"},
            "opacity": {"from": 1, "to": 0, "duration": "1s", "begin": {"type": "click", "target": "btn"}},
        },
    )
    result = runner.invoke(app, ["compile", spec, "--element", "rect"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0].startswith('<animate id="smil-anim-1" attributeName="x"')
    assert 'begin="btn.click"' in lines[1]


def test_compile_json_output(tmp_path):
    spec = _write_spec(tmp_path, {"r": {"from": 1, "to": 2, "duration": "1s", "id": "grow"}})
    result = runner.invoke(app, ["compile", spec, "--element", "circle", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == [{"id": "grow", "attributeName": "r", "dur": "1s", "from": "1", "to": "2"}]


def test_compile_reports_validation_error(tmp_path):
    spec = _write_spec(tmp_path, {"x": {"values": [0, 1, 2], "easing": ["ease"], "duration": "1s"}})
    result = runner.invoke(app, ["compile", spec, "--element", "rect"])
    assert result.exit_code == 1
    assert "rect.x" in result.output


def test_inject_writes_output(tmp_path):
    svg_path = tmp_path / "in.svg"
    svg_path.write_text(SVG, encoding="utf-8")
    out_path = tmp_path / "out.svg"
    spec = _write_spec(tmp_path, {"width": {"from": 10, "to": 40, "duration": "1s", "fill": "freeze"}})
    result = runner.invoke(
        app,
        ["inject", str(svg_path), spec, "--element-id", "box", "--element", "rect", "-o", str(out_path)],
    )
    assert result.exit_code == 0, result.output
    text = out_path.read_text(encoding="utf-8")
    assert 'attributeName="width"' in text
    assert 'fill="freeze"' in text


def test_inject_strict_fails_on_bad_spec(tmp_path):
    svg_path = tmp_path / "in.svg"
    svg_path.write_text(SVG, encoding="utf-8")
    spec = _write_spec(tmp_path, {"width": {"from": 10, "duration": "1s"}})
    result = runner.invoke(
        app,
        ["inject", str(svg_path), spec, "--element-id", "box", "--element", "rect", "--strict"],
    )
    assert result.exit_code == 1


def test_compile_empty_trigger_target_uses_placeholder(tmp_path):
    spec = _write_spec(
        tmp_path,
        {"opacity": {"from": 1, "to": 0, "duration": "1s", "begin": {"type": "click", "target": ""}}},
    )
    result = runner.invoke(app, ["compile", spec, "--element", "rect"])
    assert result.exit_code == 0, result.output
    assert 'begin="target-element.click"' in result.output


def test_inject_missing_svg_is_a_usage_error(tmp_path):
    spec = _write_spec(tmp_path, {"width": {"from": 10, "to": 40, "duration": "1s"}})
    result = runner.invoke(
        app,
        ["inject", str(tmp_path / "absent.svg"), spec, "--element-id", "box", "--element", "rect"],
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, OSError)


def test_inject_wrong_element_kind_fails(tmp_path):
    svg_path = tmp_path / "in.svg"
    svg_path.write_text(SVG, encoding="utf-8")
    spec = _write_spec(tmp_path, {"r": {"from": 3, "to": 6, "duration": "1s"}})
    result = runner.invoke(
        app,
        ["inject", str(svg_path), spec, "--element-id", "box", "--element", "circle"],
    )
    assert result.exit_code == 1
    assert "<rect>" in result.output
