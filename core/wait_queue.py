"""
等待隊列：先進先出的客戶排隊名單

容量上限（不超過桌數）由 EventProcessor 負責，隊列本身不知道上限。
"""
from collections import deque
from typing import Deque, Iterator, Optional


class WaitQueue:
    """FIFO of client ids"""

    def __init__(self):
        self._clients: Deque[str] = deque()

    def enqueue(self, client: str) -> None:
        self._clients.append(client)

    def dequeue(self) -> Optional[str]:
        """取出最早排隊的客戶；隊列為空時返回 None"""
        if not self._clients:
            return None
        return self._clients.popleft()

    def remove(self, client: str) -> bool:
        """
        把客戶從隊列中移除（客戶在等待中直接離開）

        返回：
            True 如果客戶原本在隊列中
        """
        try:
            self._clients.remove(client)
        except ValueError:
            return False
        return True

    def size(self) -> int:
        return len(self._clients)

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, client: str) -> bool:
        return client in self._clients

    def __iter__(self) -> Iterator[str]:
        return iter(self._clients)
