from __future__ import annotations

"""Fun fact endpoints: random read plus add, update and delete by 1-based index."""

import random
from typing import Any, List, Optional

from fastapi import APIRouter, Depends

from statefacts.api.deps import get_fact_store, get_registry
from statefacts.core.errors import FactIndexOutOfRange, InvalidInput, NoFactsFound
from statefacts.domain.models import (
    FactDeleteRequest,
    FactsAddRequest,
    FactUpdateRequest,
    FunFactResponse,
    MergedStateView,
    StaticStateRecord,
)
from statefacts.services.fact_store import FactStore
from statefacts.services.merge import merge
from statefacts.services.reference import StateRegistry

router = APIRouter(prefix="/states", tags=["funfacts"])


def _require_facts_list(value: Any) -> List[str]:
    if value is None:
        raise InvalidInput("State fun facts value required")
    if not isinstance(value, list):
        raise InvalidInput("State fun facts value must be an array")
    if not value or not all(isinstance(item, str) for item in value):
        raise InvalidInput("State fun facts must be a non-empty array of strings")
    return value


def _require_index(value: Any) -> int:
    # 0 is a present (out of range) index, only None counts as missing.
    if value is None:
        raise InvalidInput("State fun fact index value required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput("State fun fact index must be an integer")
    return value


def _require_fact_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput("State fun fact value required")
    return value


def _not_found_for(state: StaticStateRecord, exc: Exception) -> Exception:
    if isinstance(exc, FactIndexOutOfRange):
        return FactIndexOutOfRange(f"No Fun Fact found at that index for {state.name}")
    return NoFactsFound(f"No Fun Facts found for {state.name}")


@router.get("/{code}/funfact", response_model=FunFactResponse)
def random_funfact(
    code: str,
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> FunFactResponse:
    """Return one fun fact chosen uniformly at random."""
    state = registry.resolve(code)
    record = store.get(state.code)
    if record is None or not record.facts:
        raise NoFactsFound(f"No Fun Facts found for {state.name}")
    return FunFactResponse(funfact=record.facts[random.randrange(len(record.facts))])


@router.post("/{code}/funfact", response_model=MergedStateView)
def add_funfacts(
    code: str,
    request: Optional[FactsAddRequest] = None,
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> MergedStateView:
    state = registry.resolve(code)
    facts = _require_facts_list(request.facts if request else None)
    record = store.upsert_append(state.code, facts)
    return merge(state, record)


@router.patch("/{code}/funfact", response_model=MergedStateView)
def update_funfact(
    code: str,
    request: Optional[FactUpdateRequest] = None,
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> MergedStateView:
    state = registry.resolve(code)
    index = _require_index(request.index if request else None)
    text = _require_fact_text(request.facts if request else None)
    try:
        record = store.update_at(state.code, index, text)
    except (NoFactsFound, FactIndexOutOfRange) as exc:
        raise _not_found_for(state, exc) from exc
    return merge(state, record)


@router.delete("/{code}/funfact", response_model=MergedStateView)
def delete_funfact(
    code: str,
    request: Optional[FactDeleteRequest] = None,
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> MergedStateView:
    state = registry.resolve(code)
    index = _require_index(request.index if request else None)
    try:
        record = store.delete_at(state.code, index)
    except (NoFactsFound, FactIndexOutOfRange) as exc:
        raise _not_found_for(state, exc) from exc
    return merge(state, record)
