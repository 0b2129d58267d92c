"""In-memory record store keyed by owner."""

import time
from typing import Dict, Iterable, List, Optional

from ..models.record import SearchableRecord


class RecordStore:
    """Holds each owner's searchable records in insertion order."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._records: Dict[str, Dict[str, SearchableRecord]] = {}
        self._stats = {
            "total_owners": 0,
            "total_records": 0,
            "last_updated": None
        }

    def add_records(
        self,
        owner_id: str,
        records: Iterable[SearchableRecord],
        replace: bool = False
    ) -> int:
        """
        Add records for an owner.

        Args:
            owner_id: Owner of the records
            records: Records to store; an existing id is overwritten in place
            replace: Drop the owner's current records first

        Returns:
            Number of records stored for the owner afterwards
        """
        if replace or owner_id not in self._records:
            self._records[owner_id] = {}

        owner_records = self._records[owner_id]
        for record in records:
            owner_records[record.id] = record

        total = len(owner_records)
        if not owner_records:
            del self._records[owner_id]

        self._update_stats()
        return total

    def get_records(self, owner_id: str) -> List[SearchableRecord]:
        """Get an owner's records; unknown owners have none."""
        return list(self._records.get(owner_id, {}).values())

    def get_record(self, owner_id: str, record_id: str) -> Optional[SearchableRecord]:
        """Get a single record or None if not found."""
        return self._records.get(owner_id, {}).get(record_id)

    def remove_record(self, owner_id: str, record_id: str) -> bool:
        """
        Remove a record.

        Returns:
            True if removed, False if not found
        """
        owner_records = self._records.get(owner_id)
        if not owner_records or record_id not in owner_records:
            return False

        del owner_records[record_id]
        if not owner_records:
            del self._records[owner_id]

        self._update_stats()
        return True

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()
        self._stats = {
            "total_owners": 0,
            "total_records": 0,
            "last_updated": None
        }

    def get_stats(self) -> Dict[str, any]:
        """Get store statistics."""
        return self._stats.copy()

    def _update_stats(self) -> None:
        self._stats["total_owners"] = len(self._records)
        self._stats["total_records"] = sum(len(records) for records in self._records.values())
        self._stats["last_updated"] = time.time()
