from __future__ import annotations

"""State reference endpoints: listing, detail, and single-attribute lookups."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from statefacts.api.deps import get_fact_store, get_registry
from statefacts.domain.models import (
    AdmissionResponse,
    CapitalResponse,
    MergedStateView,
    NicknameResponse,
    PopulationResponse,
)
from statefacts.services.fact_store import FactStore
from statefacts.services.merge import format_population, merge, merge_all
from statefacts.services.reference import StateRegistry

router = APIRouter(prefix="/states", tags=["states"])


def _parse_contig(raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


@router.get("", response_model=List[MergedStateView])
def list_states(
    contig: Optional[str] = Query(None, description="true: contiguous 48 only, false: AK and HI only"),
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> List[MergedStateView]:
    """Return every state merged with its fun facts."""
    records = registry.filter_contiguous(_parse_contig(contig))
    return merge_all(records, store.all())


@router.get("/{code}", response_model=MergedStateView)
def get_state(
    code: str,
    registry: StateRegistry = Depends(get_registry),
    store: FactStore = Depends(get_fact_store),
) -> MergedStateView:
    state = registry.resolve(code)
    return merge(state, store.get(state.code))


@router.get("/{code}/capital", response_model=CapitalResponse)
def get_capital(code: str, registry: StateRegistry = Depends(get_registry)) -> CapitalResponse:
    state = registry.resolve(code)
    return CapitalResponse(name=state.name, capital=state.capital)


@router.get("/{code}/nickname", response_model=NicknameResponse)
def get_nickname(code: str, registry: StateRegistry = Depends(get_registry)) -> NicknameResponse:
    state = registry.resolve(code)
    return NicknameResponse(name=state.name, nickname=state.nickname)


@router.get("/{code}/population", response_model=PopulationResponse)
def get_population(code: str, registry: StateRegistry = Depends(get_registry)) -> PopulationResponse:
    state = registry.resolve(code)
    return PopulationResponse(name=state.name, population=format_population(state.population))


@router.get("/{code}/admission", response_model=AdmissionResponse)
def get_admission(code: str, registry: StateRegistry = Depends(get_registry)) -> AdmissionResponse:
    state = registry.resolve(code)
    return AdmissionResponse(name=state.name, admission=state.admission_date)
