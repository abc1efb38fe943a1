from __future__ import annotations

"""Immutable registry of the bundled state reference data."""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from statefacts.core.errors import InvalidStateCode
from statefacts.domain.models import StaticStateRecord

logger = logging.getLogger(__name__)

# States outside the contiguous 48.
NON_CONTIGUOUS_CODES = frozenset({"AK", "HI"})


class StateRegistry:
    """Read-only lookup table of StaticStateRecord keyed by state code."""

    def __init__(self, records: List[StaticStateRecord]) -> None:
        by_code = {}
        for record in records:
            if record.code in by_code:
                raise ValueError(f"Duplicate state code in dataset: {record.code}")
            by_code[record.code] = record
        self._records: Tuple[StaticStateRecord, ...] = tuple(records)
        self._by_code: Mapping[str, StaticStateRecord] = MappingProxyType(by_code)

    @classmethod
    def from_json(cls, path: str | Path) -> "StateRegistry":
        """Load the dataset from a JSON array of state rows."""
        path_obj = Path(path)
        payload = json.loads(path_obj.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("states") or []
        records = [StaticStateRecord.model_validate(row) for row in payload]
        logger.info("Loaded %d states from %s", len(records), path_obj)
        return cls(records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._by_code

    def resolve(self, code: str) -> StaticStateRecord:
        """Return the record for a two-letter code, ignoring case."""
        record = self._by_code.get(code.strip().upper())
        if record is None:
            raise InvalidStateCode(code)
        return record

    def all(self) -> List[StaticStateRecord]:
        return list(self._records)

    def filter_contiguous(self, contiguous: Optional[bool]) -> List[StaticStateRecord]:
        """Select states by contiguity; None keeps the whole dataset."""
        if contiguous is None:
            return self.all()
        return [r for r in self._records if (r.code not in NON_CONTIGUOUS_CODES) == contiguous]
