"""
俱樂部狀態：一次重播專屬的狀態集合

桌位池、客戶登記簿、等待隊列、使用帳本四者一起建立、一起丟棄，
由 EventProcessor 獨占，不同重播之間不共享任何狀態。
"""
from dataclasses import dataclass, field

from core.client_registry import ClientRegistry
from core.exceptions import InvariantViolation
from core.table_pool import TablePool
from core.usage_ledger import UsageLedger
from core.wait_queue import WaitQueue
from models import ClubConfig


@dataclass
class ClubState:
    config: ClubConfig
    pool: TablePool
    registry: ClientRegistry = field(default_factory=ClientRegistry)
    queue: WaitQueue = field(default_factory=WaitQueue)
    ledger: UsageLedger = field(default_factory=UsageLedger)

    @classmethod
    def open(cls, config: ClubConfig) -> "ClubState":
        return cls(config=config, pool=TablePool(config.table_count))

    def check_invariants(self) -> None:
        """
        檢查狀態一致性

        檢查項目：
        1. 空桌數 + 佔用桌數 == 總桌數，且空桌數不為負
        2. 等待隊列長度不超過總桌數
        3. 每張被佔用的桌子恰好對應一位已入座客戶，反之亦然
        4. 排隊中的客戶都在店內且沒有入座

        異常：
            InvariantViolation: 任一項不成立
        """
        total = self.config.table_count
        occupied = self.pool.occupied_tables()

        # 1. 空桌數
        if self.pool.free_count() < 0 or self.pool.free_count() + len(occupied) != total:
            raise InvariantViolation(
                f"free={self.pool.free_count()} occupied={len(occupied)} total={total}"
            )

        # 2. 隊列長度
        if self.queue.size() > total:
            raise InvariantViolation(f"queue size {self.queue.size()} exceeds {total} tables")

        # 3. 桌子 <-> 客戶
        seated = self.registry.seated()
        by_table = {table: client for client, table in seated.items()}
        if len(by_table) != len(seated) or sorted(by_table) != occupied:
            raise InvariantViolation(f"seated clients {seated} do not match tables {occupied}")
        for table, client in by_table.items():
            if self.pool.occupant_of(table) != client:
                raise InvariantViolation(f"table {table} is held by {self.pool.occupant_of(table)}, not {client}")

        # 4. 排隊客戶
        for client in self.queue:
            if not self.registry.is_present(client) or client in seated:
                raise InvariantViolation(f"queued client {client} is absent or already seated")
