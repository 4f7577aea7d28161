"""
Usage ledger: cumulative occupied minutes per table for the whole day.

A table gets an entry the first time one of its occupancy intervals is
closed, even when that interval lasted zero minutes.
"""
from typing import Dict, List, Tuple


class UsageLedger:

    def __init__(self):
        self._minutes: Dict[int, int] = {}

    def add(self, table: int, minutes: int) -> None:
        if minutes < 0:
            raise ValueError(f"Negative duration {minutes} for table {table}")
        self._minutes[table] = self._minutes.get(table, 0) + minutes

    def total_of(self, table: int) -> int:
        return self._minutes.get(table, 0)

    def entries(self) -> List[Tuple[int, int]]:
        """(table, minutes) pairs ordered by table id"""
        return sorted(self._minutes.items())
