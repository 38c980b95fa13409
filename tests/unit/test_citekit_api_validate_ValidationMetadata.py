import pytest

from citekit.api.validate.PathConversion import PathConversion
from citekit.api.validate.ValidationMetadata import ValidationMetadata


def test_ok_carries_nothing():
    record = ValidationMetadata.ok()
    assert record.is_valid
    assert record.to_dict() == {"status": "valid"}


def test_valid_with_error_rejected():
    with pytest.raises(ValueError, match="cannot carry"):
        ValidationMetadata(status="valid", error="boom")


def test_warning_requires_message():
    with pytest.raises(ValueError, match="requires an error message"):
        ValidationMetadata(status="warning")


def test_unknown_status_rejected():
    with pytest.raises(ValueError, match="Unknown validation status"):
        ValidationMetadata(status="maybe", error="x")


def test_to_dict_includes_details():
    record = ValidationMetadata.warn(
        error="moved",
        reason="scope_fallback",
        suggestion="Use relative path: ../a.md",
        path_conversion=PathConversion(original="a.md", recommended="../a.md"),
    )
    assert record.to_dict() == {
        "status": "warning",
        "error": "moved",
        "reason": "scope_fallback",
        "suggestion": "Use relative path: ../a.md",
        "path_conversion": {"type": "path-conversion", "original": "a.md", "recommended": "../a.md"},
    }


def test_fail_with_similar_anchors():
    record = ValidationMetadata.fail(error="Anchor not found: #x", reason="anchor_missing", similar_anchors=("y",))
    assert record.status == "error"
    assert record.to_dict()["similar_anchors"] == ["y"]
