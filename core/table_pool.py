"""
桌位池：追蹤每張桌子的佔用狀態

職責：
1. 記錄桌子被誰、從何時開始佔用
2. 維護空桌數計數器
3. 釋放桌子時回傳這段佔用的時長（交給 UsageLedger 累計）
"""
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class Occupancy:
    client: str
    since: int


class TablePool:
    """Resource pool of tables 1..table_count"""

    def __init__(self, table_count: int):
        self.table_count = table_count
        self._free_count = table_count
        self._occupancy: Dict[int, Occupancy] = {}

    def is_occupied(self, table: int) -> bool:
        return table in self._occupancy

    def occupy(self, table: int, client: str, time: int) -> None:
        """
        佔用桌子（覆寫開始時間）

        注意：
            呼叫者必須先確認桌子是空的，否則空桌數會失準
        """
        self._occupancy[table] = Occupancy(client=client, since=time)
        self._free_count -= 1
        logger.debug(f"Table {table} occupied by {client} at {time}")

    def release(self, table: int, time: int) -> int:
        """
        釋放桌子並回傳佔用時長（分鐘）

        桌子沒有開始時間紀錄時什麼都不做，回傳 0。
        """
        occupancy = self._occupancy.pop(table, None)
        if occupancy is None:
            return 0
        self._free_count += 1
        elapsed = time - occupancy.since
        logger.debug(f"Table {table} released by {occupancy.client} after {elapsed} minutes")
        return elapsed

    def free_count(self) -> int:
        return self._free_count

    def occupant_of(self, table: int) -> Optional[str]:
        occupancy = self._occupancy.get(table)
        return occupancy.client if occupancy else None

    def occupied_tables(self) -> List[int]:
        return sorted(self._occupancy)
