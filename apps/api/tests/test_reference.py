import pytest

from statefacts.core.config import BUNDLED_STATES_PATH
from statefacts.core.errors import InvalidStateCode
from statefacts.domain.models import StaticStateRecord
from statefacts.services.reference import NON_CONTIGUOUS_CODES, StateRegistry

registry = StateRegistry.from_json(BUNDLED_STATES_PATH)


def test_bundled_dataset_has_fifty_states():
    assert len(registry) == 50
    codes = {r.code for r in registry.all()}
    assert len(codes) == 50
    assert NON_CONTIGUOUS_CODES <= codes


@pytest.mark.parametrize("code", ["ca", "CA", "Ca", "cA", " ca "])
def test_resolve_ignores_case(code):
    state = registry.resolve(code)
    assert state.code == "CA"
    assert state.name == "California"
    assert state.capital == "Sacramento"


@pytest.mark.parametrize("code", ["XX", "", "CAL", "C", "12"])
def test_resolve_rejects_unknown_codes(code):
    with pytest.raises(InvalidStateCode):
        registry.resolve(code)


def test_contains():
    assert "ga" in registry
    assert "ZZ" not in registry
    assert 5 not in registry


def test_filter_contiguous():
    contiguous = registry.filter_contiguous(True)
    detached = registry.filter_contiguous(False)
    assert len(contiguous) == 48
    assert {r.code for r in detached} == {"AK", "HI"}
    assert not {r.code for r in contiguous} & NON_CONTIGUOUS_CODES
    assert len(registry.filter_contiguous(None)) == 50


def test_records_are_immutable():
    state = registry.resolve("GA")
    with pytest.raises(Exception):
        state.name = "Somewhere"


def test_dataset_rows_accept_original_keys():
    record = StaticStateRecord.model_validate(
        {
            "state": "Georgia",
            "code": "ga",
            "nickname": "Peach State",
            "capital_city": "Atlanta",
            "population": 9687653,
            "admission_date": "1788-01-02",
        }
    )
    assert record.code == "GA"
    assert record.capital == "Atlanta"
    assert record.admission_number is None


def test_duplicate_codes_rejected():
    state = registry.resolve("GA")
    with pytest.raises(ValueError):
        StateRegistry([state, state])
