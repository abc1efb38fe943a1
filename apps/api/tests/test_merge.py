from statefacts.core.config import BUNDLED_STATES_PATH
from statefacts.domain.models import FactRecord
from statefacts.services.merge import format_population, merge, merge_all
from statefacts.services.reference import StateRegistry

registry = StateRegistry.from_json(BUNDLED_STATES_PATH)


def test_merge_without_record_has_empty_facts():
    state = registry.resolve("TX")
    view = merge(state, None)
    assert view.facts == []
    assert view.name == "Texas"
    assert view.capital == "Austin"
    assert view.population == state.population
    assert view.admission_date == "1845-12-29"


def test_merge_with_empty_record_has_empty_facts():
    view = merge(registry.resolve("TX"), FactRecord(state_code="TX", facts=[]))
    assert view.facts == []
    assert view.model_dump()["facts"] == []


def test_merge_copies_facts_in_order():
    record = FactRecord(state_code="OH", facts=["b", "a", "b"])
    view = merge(registry.resolve("OH"), record)
    assert view.facts == ["b", "a", "b"]
    view.facts.append("c")
    assert record.facts == ["b", "a", "b"]


def test_merge_all_matches_by_code():
    records = registry.filter_contiguous(False)
    views = merge_all(records, {"HI": FactRecord(state_code="HI", facts=["volcanoes"])})
    by_code = {v.code: v for v in views}
    assert by_code["HI"].facts == ["volcanoes"]
    assert by_code["AK"].facts == []


def test_format_population():
    assert format_population(37253956) == "37,253,956"
    assert format_population(999) == "999"
    assert format_population(0) == "0"
