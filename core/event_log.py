"""
Output log of one club session.

Lines recorded during the day go to the main section; lines for events
after closing time go to the deferred section, which is appended only
after the billing summary.
"""
from typing import List


class EventLog:

    def __init__(self):
        self._lines: List[str] = []
        self._deferred: List[str] = []

    def record(self, *lines: str) -> None:
        self._lines.extend(lines)

    def defer(self, *lines: str) -> None:
        self._deferred.extend(lines)

    def flush_deferred(self) -> None:
        self._lines.extend(self._deferred)
        self._deferred.clear()

    def lines(self) -> List[str]:
        return list(self._lines)
