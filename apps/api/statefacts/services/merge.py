from __future__ import annotations

"""Combine static state records with their fun facts."""

from typing import Dict, List, Optional

from statefacts.domain.models import FactRecord, MergedStateView, StaticStateRecord


def merge(record: StaticStateRecord, facts: Optional[FactRecord]) -> MergedStateView:
    """Build the response view; ``facts`` is always a list, never null."""
    return MergedStateView(
        code=record.code,
        name=record.name,
        capital=record.capital,
        nickname=record.nickname,
        population=record.population,
        admission_date=record.admission_date,
        admission_number=record.admission_number,
        facts=list(facts.facts) if facts and facts.facts else [],
    )


def merge_all(
    records: List[StaticStateRecord], facts_by_code: Dict[str, FactRecord]
) -> List[MergedStateView]:
    return [merge(r, facts_by_code.get(r.code)) for r in records]


def format_population(population: int) -> str:
    """Render a population with thousands separators, e.g. 39,538,223."""
    return f"{population:,}"
