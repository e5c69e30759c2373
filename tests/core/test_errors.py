"""Error Hierarchy — codes, categories and envelopes for requirement errors."""

from requirement.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    InvalidRequirementError,
    RequirementError,
    RequirementNotMetError,
)


def test_invalid_requirement_is_value_error():
    err = InvalidRequirementError("p1: Must not be null", "p1")
    assert isinstance(err, RequirementError)
    assert isinstance(err, ValueError)
    assert err.code == "INVALID_REQUIREMENT"
    assert err.category == ErrorCategory.CONFIGURATION
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.context.argument == "p1"


def test_requirement_not_met_carries_value_and_predicate():
    err = RequirementNotMetError("Must not be blank", "", "pred")
    assert isinstance(err, ValueError)
    assert str(err) == "Must not be blank"
    assert err.value == ""
    assert err.predicate == "pred"
    assert err.code == "REQUIREMENT_NOT_MET"
    assert err.category == ErrorCategory.VALIDATION
    assert err.context.value_type == "str"


def test_construction_and_test_time_errors_are_distinct():
    assert not issubclass(InvalidRequirementError, RequirementNotMetError)
    assert not issubclass(RequirementNotMetError, InvalidRequirementError)


def test_to_dict_envelope():
    err = RequirementNotMetError("Must be less than 2", 3, "pred")
    envelope = err.to_dict()["error"]
    assert envelope["code"] == "REQUIREMENT_NOT_MET"
    assert envelope["message"] == "Must be less than 2"
    assert envelope["category"] == "validation"
    assert envelope["severity"] == "error"
    assert envelope["context"]["value_type"] == "int"
    assert "timestamp" in envelope
