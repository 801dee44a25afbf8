import pytest
from pydantic import ValidationError

from indexed_astar import SearchSettings


def test_defaults_are_unbounded_and_unchecked():
    settings = SearchSettings.default()
    assert settings.max_expansions is None
    assert not settings.bounded
    assert settings.check_heap_invariants is False
    assert settings.stable_ties is False


def test_budget_must_be_positive():
    assert SearchSettings(max_expansions=1).bounded
    with pytest.raises(ValidationError):
        SearchSettings(max_expansions=0)


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        SearchSettings(max_depth=3)


def test_settings_are_immutable():
    settings = SearchSettings()
    with pytest.raises(ValidationError):
        settings.stable_ties = True


def test_settings_load_from_mapping():
    settings = SearchSettings.model_validate(
        {"max_expansions": "25", "check_heap_invariants": True}
    )
    assert settings.max_expansions == 25
    assert settings.check_heap_invariants is True
