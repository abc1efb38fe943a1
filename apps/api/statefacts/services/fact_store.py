from __future__ import annotations

"""Thread-safe fun fact store persisted as a JSON document collection."""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from statefacts.core.errors import (
    FactIndexOutOfRange,
    InvalidInput,
    NoFactsFound,
    StoreError,
)
from statefacts.domain.models import FactRecord

logger = logging.getLogger(__name__)


class FactStore:
    """Keyed collection of FactRecord documents, one per state code.

    Every mutation is a single read-modify-write under ``lock`` and the whole
    collection is written back to ``path`` before the call returns. With no
    path the store lives in memory only.
    """

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self.lock = threading.Lock()
        self.path = Path(path) if path else None
        self._records: Dict[str, List[str]] = {}
        self._load()

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            docs = [FactRecord.model_validate(doc) for doc in payload]
        except (OSError, ValueError, TypeError, ValidationError) as exc:
            raise StoreError(f"Could not read fact store {self.path}: {exc}") from exc
        with self.lock:
            self._records = {doc.state_code.upper(): list(doc.facts) for doc in docs}
        logger.info("Loaded fun facts for %d states from %s", len(self._records), self.path)

    def _persist(self) -> None:
        """Write all documents to disk. Caller holds the lock."""
        if self.path is None:
            return
        docs = [
            FactRecord(state_code=code, facts=facts).model_dump(by_alias=True)
            for code, facts in sorted(self._records.items())
        ]
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(docs, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StoreError(f"Could not write fact store {self.path}: {exc}") from exc

    def _snapshot(self, code: str) -> FactRecord:
        return FactRecord(state_code=code, facts=list(self._records[code]))

    def get(self, code: str) -> Optional[FactRecord]:
        code = code.upper()
        with self.lock:
            if code not in self._records:
                return None
            return self._snapshot(code)

    def all(self) -> Dict[str, FactRecord]:
        with self.lock:
            return {code: self._snapshot(code) for code in self._records}

    def upsert_append(self, code: str, new_facts: Sequence[str]) -> FactRecord:
        """Append facts to a state's list, creating the record if needed."""
        if (
            isinstance(new_facts, (str, bytes))
            or not isinstance(new_facts, (list, tuple))
            or not new_facts
            or not all(isinstance(f, str) for f in new_facts)
        ):
            raise InvalidInput("State fun facts must be a non-empty array of strings")
        code = code.upper()
        with self.lock:
            facts = self._records.get(code)
            created = facts is None
            updated = list(facts or []) + list(new_facts)
            self._records[code] = updated
            try:
                self._persist()
            except StoreError:
                if created:
                    del self._records[code]
                else:
                    self._records[code] = facts
                raise
            logger.info(
                "%s fun facts for %s: +%d (now %d)",
                "Created" if created else "Appended",
                code,
                len(new_facts),
                len(updated),
            )
            return self._snapshot(code)

    def _position(self, code: str, index: int) -> int:
        """Translate a 1-based index to a list position. Caller holds the lock."""
        facts = self._records.get(code)
        if not facts:
            raise NoFactsFound(f"No Fun Facts found for {code}")
        if index < 1 or index > len(facts):
            raise FactIndexOutOfRange(f"No Fun Fact found at index {index} for {code}")
        return index - 1

    def update_at(self, code: str, index: int, value: str) -> FactRecord:
        """Replace the fact at a 1-based index."""
        code = code.upper()
        with self.lock:
            pos = self._position(code, index)
            previous = self._records[code]
            updated = list(previous)
            updated[pos] = value
            self._records[code] = updated
            try:
                self._persist()
            except StoreError:
                self._records[code] = previous
                raise
            logger.info("Updated fun fact %d for %s", index, code)
            return self._snapshot(code)

    def delete_at(self, code: str, index: int) -> FactRecord:
        """Remove the fact at a 1-based index. An emptied record is kept."""
        code = code.upper()
        with self.lock:
            pos = self._position(code, index)
            previous = self._records[code]
            self._records[code] = previous[:pos] + previous[pos + 1 :]
            try:
                self._persist()
            except StoreError:
                self._records[code] = previous
                raise
            logger.info("Deleted fun fact %d for %s", index, code)
            return self._snapshot(code)

    def reset(self) -> None:
        """Drop every record."""
        with self.lock:
            self._records = {}
            self._persist()
