"""
客戶登記簿：目前在店內的客戶，以及各自坐的桌子

客戶沒有獨立的實體物件，只有 client id -> table 的對應；
table 為 None 表示在店內但還沒入座。
"""
from typing import Dict, List, Optional


class ClientRegistry:

    def __init__(self):
        self._tables: Dict[str, Optional[int]] = {}

    def is_present(self, client: str) -> bool:
        return client in self._tables

    def table_of(self, client: str) -> Optional[int]:
        return self._tables.get(client)

    def register(self, client: str) -> None:
        self._tables[client] = None

    def assign(self, client: str, table: Optional[int]) -> None:
        self._tables[client] = table

    def unregister(self, client: str) -> None:
        self._tables.pop(client, None)

    def present_clients(self) -> List[str]:
        """店內所有客戶（依 client id 字典序）"""
        return sorted(self._tables)

    def seated(self) -> Dict[str, int]:
        return {client: table for client, table in self._tables.items() if table is not None}

    def __len__(self) -> int:
        return len(self._tables)
