"""
打烊結算

流程：
1. 店內所有客戶依 client id 排序，逐一強制離場（時間為打烊時間），
   坐著的客戶把佔用時長結算進帳本
2. 輸出打烊時間
3. 依桌號輸出帳單
4. 附上打烊後被延後的事件行
"""
import logging

from core.club_state import ClubState
from core.event_log import EventLog
from services.billing_service import build_billing_lines
from services.format_service import forced_exit_line, time_line

logger = logging.getLogger(__name__)


def close_day(state: ClubState, log: EventLog) -> None:
    config = state.config
    closing = config.closing

    # 1. 強制離場
    for client in state.registry.present_clients():
        table = state.registry.table_of(client)
        if table is not None:
            state.ledger.add(table, state.pool.release(table, closing))
        state.queue.remove(client)
        state.registry.unregister(client)
        log.record(forced_exit_line(closing, client))
        logger.debug(f"Closing time, {client} forced out")

    # 2. 打烊時間
    log.record(time_line(closing))

    # 3. 帳單
    log.record(*build_billing_lines(state.ledger, config.hourly_rate))

    # 4. 打烊後事件
    log.flush_deferred()
