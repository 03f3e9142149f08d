"""
Tests for ResultNormalizer: both response shapes, sentinels on bad data.
"""

from __future__ import annotations

import pytest

from scoring.normalizer import ResultNormalizer, label_css_class


def _nested(values):
    return {
        "engine": "watson",
        "ok": True,
        "result": {"predictions": [{"fields": ["prediction", "probability"], "values": values}]},
    }


def _flat(values):
    return {
        "engine": "gpt",
        "ok": True,
        "model": "gpt-4o",
        "predictions": [{"fields": ["prediction", "probability"], "values": values}],
    }


@pytest.mark.parametrize("wrap", [_nested, _flat])
def test_probability_text_both_shapes(wrap):
    norm = ResultNormalizer(wrap([["No Risk", [0.2, 0.8]]]))
    assert norm.probability_text(0, 0) == "20.0%"
    assert norm.probability_text(0, 1) == "80.0%"
    assert norm.probability_percent(0, 0) == pytest.approx(20.0)
    assert norm.prediction_label(0) == "No Risk"


def test_flat_shape_metadata():
    norm = ResultNormalizer(_flat([]))
    assert norm.engine == "gpt"
    assert norm.ok is True
    assert norm.model == "gpt-4o"


@pytest.mark.parametrize("response", [
    None,
    [],
    "oops",
    {},
    {"engine": "x", "ok": True},
    {"result": {}},
    {"result": {"predictions": []}},
    {"predictions": [None]},
    {"predictions": [{"fields": []}]},
    {"predictions": [{"values": "nope"}]},
])
def test_results_empty_on_missing_structure(response):
    norm = ResultNormalizer(response)
    assert norm.results() == []
    assert norm.prediction_label(0) == "Unknown"
    assert norm.probability_text(0, 0) == "0.0%"
    assert norm.probability_percent(0, 0) == 0
    assert len(norm.to_frame()) == 0


def test_label_sentinels():
    norm = ResultNormalizer(_nested([[42, [0.1]], ["", [0.1]], [], "row", ["High Risk"]]))
    assert norm.prediction_label(0) == "Unknown"
    assert norm.prediction_label(1) == "Unknown"
    assert norm.prediction_label(2) == "Unknown"
    assert norm.prediction_label(3) == "Unknown"
    assert norm.prediction_label(4) == "High Risk"
    assert norm.prediction_label(5) == "Unknown"
    assert norm.prediction_label(-1) == "Unknown"


def test_probability_sentinels():
    norm = ResultNormalizer(_nested([
        ["Low Risk", [1.5, -0.1]],
        ["Low Risk", ["0.3", True]],
        ["Low Risk", 0.4],
        ["Low Risk"],
        ["Low Risk", [0, 1]],
    ]))
    assert norm.probability_text(0, 0) == "0.0%"
    assert norm.probability_text(0, 1) == "0.0%"
    assert norm.probability_text(1, 0) == "0.0%"
    assert norm.probability_text(1, 1) == "0.0%"
    assert norm.probability_text(2, 0) == "0.0%"
    assert norm.probability_text(3, 0) == "0.0%"
    assert norm.probability_text(4, 2) == "0.0%"
    assert norm.probability_text(4, 1) == "100.0%"
    assert norm.probability_percent(4, 1) == 100
    assert norm.probability_percent(0, 0) == 0


def test_rounding_to_one_decimal():
    norm = ResultNormalizer(_nested([["Medium Risk", [0.12345]]]))
    assert norm.probability_text(0, 0) == "12.3%"


@pytest.mark.parametrize("label, css", [
    ("No Risk", "no-risk"),
    ("Low Risk", "low-risk"),
    ("Medium Risk", "medium-risk"),
    ("High Risk", "high-risk"),
    ("no risk", "unknown-risk"),
    ("Unknown", "unknown-risk"),
    (None, "unknown-risk"),
])
def test_label_css_class(label, css):
    assert label_css_class(label) == css
    assert ResultNormalizer(None).label_css_class(label) == css


def test_to_frame():
    norm = ResultNormalizer(_nested([["No Risk", [0.25, 0.75]], ["High Risk", [0.9, 0.1]]]))
    df = norm.to_frame()
    assert list(df["Prediction"]) == ["No Risk", "High Risk"]
    assert list(df["Probability"]) == ["25.0%", "90.0%"]
    assert list(df["Class"]) == ["no-risk", "high-risk"]
    assert list(df["Record"]) == [1, 2]
