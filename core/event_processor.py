"""
事件處理器：依時間順序重播客戶事件的狀態機

職責：
1. 依營業時間過濾事件（開店前立即報錯，打烊後延後輸出）
2. 依動作代碼驗證並轉換 ClubState
3. 把原始事件、錯誤行與系統事件依因果順序寫入 EventLog

原則：
- 先檢查，再修改：被拒絕的事件不會留下任何部分修改
- 語意錯誤只寫成輸出行，不拋異常，重播繼續
- 不重新排序事件：時間相同時依輸入順序處理
"""
from typing import Callable, Dict, Iterable, List
import logging

from core.club_state import ClubState
from core.event_log import EventLog
from core.finalizer import close_day
from models import ClientAction, ClubConfig, ErrorCode, Event
from services.format_service import error_line, forced_exit_line, queue_popped_line, time_line

logger = logging.getLogger(__name__)


class EventProcessor:
    """一次重播的事件處理器（每次重播建立新實例）"""

    def __init__(self, config: ClubConfig):
        self.config = config
        self.state = ClubState.open(config)
        self.log = EventLog()
        self._handlers: Dict[ClientAction, Callable[[Event], None]] = {
            ClientAction.ARRIVE: self._handle_arrive,
            ClientAction.SIT_AT_TABLE: self._handle_sit,
            ClientAction.JOIN_QUEUE: self._handle_wait,
            ClientAction.LEAVE: self._handle_leave,
        }
        missing = set(ClientAction) - set(self._handlers)
        if missing:
            raise NotImplementedError(f"No handler for actions {sorted(missing)}")
        self._applied = 0
        self._closed = False

        # 輸出的第一行是開店時間
        self.log.record(time_line(config.opening))

    def process(self, events: Iterable[Event]) -> List[str]:
        """
        重播整天的事件並回傳輸出行

        流程：
        1. 逐一處理事件（先過濾時間，再分派）
        2. 打烊結算：強制離場、打烊時間、帳單、延後的打烊後事件

        參數：
            events: 已依時間排序的事件

        返回：
            完整的輸出行列表
        """
        for event in events:
            self.apply(event)
        return self.finish()

    def apply(self, event: Event) -> None:
        """處理單一事件"""
        if self._closed:
            raise RuntimeError("Club session already closed")
        self._applied += 1
        if not self._within_hours(event):
            return
        self.log.record(event.source)
        self._handlers[event.action](event)

    def finish(self) -> List[str]:
        """打烊結算並回傳完整輸出（重複呼叫不會再結算一次）"""
        if not self._closed:
            close_day(self.state, self.log)
            self._closed = True
            logger.info(
                f"Replayed {self._applied} events on {self.config.table_count} tables, "
                f"{len(self.log.lines())} output lines"
            )
        return self.log.lines()

    def _within_hours(self, event: Event) -> bool:
        """開店前的事件立即報錯；打烊後的事件延後輸出。兩者都不改變狀態。"""
        if self.config.is_before_opening(event.time):
            self.log.record(event.source, error_line(event.time, ErrorCode.NOT_OPEN_YET))
            return False
        if self.config.is_after_closing(event.time):
            self.log.defer(event.source, error_line(event.time, ErrorCode.NOT_OPEN_YET))
            return False
        return True

    def _reject(self, event: Event, code: ErrorCode) -> None:
        logger.debug(f"Rejected {event.source!r}: {code.value}")
        self.log.record(error_line(event.time, code))

    # ============ 各動作處理 ============

    def _handle_arrive(self, event: Event) -> None:
        registry = self.state.registry
        if registry.is_present(event.client):
            self._reject(event, ErrorCode.YOU_SHALL_NOT_PASS)
            return
        registry.register(event.client)

    def _handle_sit(self, event: Event) -> None:
        """
        入座

        已經坐在別桌的客戶換桌時，先結束舊桌的佔用區間再入座新桌。
        """
        registry, pool = self.state.registry, self.state.pool
        if not registry.is_present(event.client):
            self._reject(event, ErrorCode.CLIENT_UNKNOWN)
            return
        if pool.is_occupied(event.table):
            self._reject(event, ErrorCode.PLACE_IS_BUSY)
            return

        previous = registry.table_of(event.client)
        if previous is not None:
            self._release(previous, event.time)
        # 排隊中的客戶自己找到空桌時，不再佔著隊列位置
        self.state.queue.remove(event.client)

        pool.occupy(event.table, event.client, event.time)
        registry.assign(event.client, event.table)

    def _handle_wait(self, event: Event) -> None:
        """
        排隊

        規則：
        - 有任何空桌：ICanWaitNoLonger（能坐就不該等，不論客戶是否在店內）
        - 客戶不在店內：ClientUnknown
        - 隊列已滿（長度 == 桌數）：客戶直接離開，輸出強制離場
        - 已入座或已在隊列中的客戶：不做任何改變
        """
        state = self.state
        if state.pool.free_count() > 0:
            self._reject(event, ErrorCode.I_CAN_WAIT_NO_LONGER)
            return
        if not state.registry.is_present(event.client):
            self._reject(event, ErrorCode.CLIENT_UNKNOWN)
            return
        if state.registry.table_of(event.client) is not None or event.client in state.queue:
            return
        if state.queue.size() >= self.config.table_count:
            # 從未入座，不影響帳本
            state.registry.unregister(event.client)
            self.log.record(forced_exit_line(event.time, event.client))
            logger.debug(f"Queue full, {event.client} left at {event.time}")
            return
        state.queue.enqueue(event.client)

    def _handle_leave(self, event: Event) -> None:
        """
        離開

        流程：
        1. 如果客戶有坐桌，結算這段佔用並釋放桌子
        2. 釋放出的桌子交給隊列最前面的客戶
        3. 從登記簿與隊列移除離開的客戶
        """
        state = self.state
        if not state.registry.is_present(event.client):
            self._reject(event, ErrorCode.CLIENT_UNKNOWN)
            return

        # 1. 釋放桌子
        table = state.registry.table_of(event.client)
        if table is not None:
            self._release(table, event.time)

            # 2. 隊列遞補
            next_client = state.queue.dequeue()
            if next_client is not None:
                state.pool.occupy(table, next_client, event.time)
                state.registry.assign(next_client, table)
                self.log.record(queue_popped_line(event.time, next_client, table))

        # 3. 移除客戶
        state.queue.remove(event.client)
        state.registry.unregister(event.client)

    def _release(self, table: int, time: int) -> None:
        elapsed = self.state.pool.release(table, time)
        self.state.ledger.add(table, elapsed)
