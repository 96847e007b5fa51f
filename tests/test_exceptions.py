from raisehand.exceptions import ConfigurationError, RaiseHandError, StorageError


def test_configuration_error_context() -> None:
    err = ConfigurationError(
        "Source directory does not exist: /nope", parameter="SOURCE_DIR", path="/nope"
    )

    assert isinstance(err, RaiseHandError)
    assert err.error_data == {"parameter": "SOURCE_DIR", "path": "/nope"}
    assert "SOURCE_DIR" in (err.suggestion or "")
    assert str(err).startswith("Source directory does not exist: /nope\nSuggestion:")


def test_to_dict() -> None:
    err = StorageError("Cannot write out/events.json", path="out/events.json")

    assert err.to_dict() == {
        "error_type": "StorageError",
        "message": "Cannot write out/events.json",
        "error_data": {"path": "out/events.json"},
        "suggestion": err.suggestion,
    }


def test_explicit_suggestion_wins() -> None:
    err = StorageError("boom", suggestion="Try again")
    assert str(err) == "boom\nSuggestion: Try again"
