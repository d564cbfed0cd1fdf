import math

import pytest
from pydantic import ValidationError

from src.smil.types import AnimatedProperty
from src.smil.validator import (
    AnimationValidationError,
    check_property_supported,
    validate_animation,
)


def _spec(**kwargs) -> AnimatedProperty:
    kwargs.setdefault("duration", "1s")
    return AnimatedProperty.model_validate(kwargs)


def _code(spec: AnimatedProperty, prop: str = "x", element: str = "rect") -> str:
    with pytest.raises(AnimationValidationError) as excinfo:
        validate_animation(prop, spec, element)
    return excinfo.value.code


def test_from_to_pair_is_valid():
    assert validate_animation("x", _spec(**{"from": 0, "to": 100}), "rect") is None


def test_values_with_matching_arrays_is_valid():
    spec = _spec(values=[0, 50, 100], keyTimes=[0, 0.5, 1], easing=["ease", "bounce"])
    validate_animation("x", spec, "rect")


@pytest.mark.parametrize("easing", [["ease"], ["ease", "ease", "ease"], []])
def test_easing_length_mismatch(easing):
    assert _code(_spec(values=[0, 50, 100], easing=easing)) == "easing-length-mismatch"


def test_single_easing_name_is_not_length_checked():
    validate_animation("x", _spec(values=[0, 50, 100, 10], easing="ease-out"), "rect")


def test_keytimes_length_mismatch():
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0, 1])) == "keytimes-length-mismatch"


def test_keytimes_out_of_range():
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0, 1.5, 1])) == "keytimes-out-of-range"
    assert _code(_spec(values=[0, 50, 100], keyTimes=[-0.1, 0.5, 1])) == "keytimes-out-of-range"


@pytest.mark.parametrize(
    "key_times",
    [[0, 1], [0.0, 1.0], [0, 0.999, 1.0]],
)
def test_keytimes_boundaries_are_accepted(key_times):
    values = list(range(len(key_times)))
    validate_animation("x", _spec(values=values, keyTimes=key_times), "rect")


@pytest.mark.parametrize(
    "kwargs, code",
    [
        ({"values": [0, 1, 2], "keyTimes": [0, math.nan, 1]}, "non-finite-value"),
        ({"values": [0, math.inf]}, "non-finite-value"),
        ({"from": -math.inf, "to": 1}, "non-finite-value"),
    ],
)
def test_non_finite_numbers_are_rejected(kwargs, code):
    # model_construct skips pydantic's own checks, so the validator sees the raw numbers
    spec = AnimatedProperty.model_construct(duration="1s", **kwargs)
    assert _code(spec) == code


@pytest.mark.parametrize(
    "data",
    [
        {"values": [0, 1, 2], "keyTimes": [0, math.nan, 1]},
        {"values": [0, math.inf]},
        {"from": 0, "to": math.nan},
    ],
)
def test_model_rejects_nan_and_inf(data):
    with pytest.raises(ValidationError):
        AnimatedProperty.model_validate({"duration": "1s", **data})


@pytest.mark.parametrize(
    "extra",
    [
        {"keyTimes": [0.3, 0.2]},
        {"easing": ["ease", "bounce", "linear"]},
    ],
)
def test_arrays_without_values_are_not_length_checked(extra):
    validate_animation("x", _spec(**{"from": 0, "to": 1}, **extra), "rect")


def test_keytimes_not_ascending():
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0, 0.7, 0.4])) == "keytimes-not-ascending"
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0, 0.5, 0.5])) == "keytimes-not-ascending"


def test_keytimes_must_start_at_zero():
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0.1, 0.5, 1])) == "keytimes-must-start-zero"


def test_keytimes_must_end_at_one():
    assert _code(_spec(values=[0, 50, 100], keyTimes=[0, 0.5, 0.9])) == "keytimes-must-end-one"


def test_easing_checked_before_keytimes():
    spec = _spec(values=[0, 50, 100], easing=["ease"], keyTimes=[0.2, 0.1])
    assert _code(spec) == "easing-length-mismatch"


@pytest.mark.parametrize("kwargs", [{}, {"from": 0}, {"to": 10}])
def test_missing_values_or_endpoints(kwargs):
    assert _code(_spec(**kwargs)) == "missing-values-or-endpoints"


def test_values_too_short():
    assert _code(_spec(values=[5])) == "values-too-short"


def test_error_carries_property_and_element():
    with pytest.raises(AnimationValidationError) as excinfo:
        validate_animation("cx", _spec(), "circle")
    err = excinfo.value
    assert err.property == "cx"
    assert err.element == "circle"
    assert str(err).startswith("Animation validation error for circle.cx:")


def test_zero_endpoints_count_as_present():
    validate_animation("x", _spec(**{"from": 0, "to": 0}), "rect")


def test_check_property_supported():
    check_property_supported("rect", "width")
    check_property_supported("path", "strokeDashoffset")

    with pytest.raises(AnimationValidationError) as excinfo:
        check_property_supported("circle", "width")
    assert excinfo.value.code == "unsupported-property"

    with pytest.raises(AnimationValidationError) as excinfo:
        check_property_supported("ellipse", "rx")
    assert excinfo.value.code == "unsupported-element"
