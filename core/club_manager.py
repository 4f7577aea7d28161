"""
Club Manager：一次俱樂部營業日（club session）的入口

職責：
1. 接收輸入（行、文字或檔案）並完整解析
2. 以全新的 EventProcessor 重播事件
3. 回傳輸出行

原則：
- 解析失敗就整個失敗，不產生部分輸出
- 每次呼叫都建立新的狀態，不同 session 互不影響
"""
from typing import Iterable, List
import logging

from core.event_processor import EventProcessor
from models import ClubConfig, Event
from services.parsing_service import load_input, parse_input

logger = logging.getLogger(__name__)


class ClubManager:
    """Club session 管理器"""

    @staticmethod
    def run_session(config: ClubConfig, events: Iterable[Event]) -> List[str]:
        """
        以已解析的設定與事件重播一整天

        參數：
            config: 俱樂部設定
            events: 依時間排序的事件

        返回：
            輸出行列表
        """
        return EventProcessor(config).process(events)

    @staticmethod
    def run_from_lines(lines: Iterable[str]) -> List[str]:
        """
        解析輸入行後重播

        異常：
            InputFormatError: 任一行格式錯誤
        """
        config, events = parse_input(lines)
        logger.info(
            f"Starting session: {config.table_count} tables, {len(events)} events"
        )
        return ClubManager.run_session(config, events)

    @staticmethod
    def run_from_text(text: str) -> List[str]:
        return ClubManager.run_from_lines(text.splitlines())

    @staticmethod
    def run_from_file(path) -> List[str]:
        """
        讀取輸入檔後重播

        異常：
            InputFormatError: 任一行格式錯誤
            OSError: 檔案無法讀取
        """
        config, events = load_input(path)
        logger.info(
            f"Starting session from {path}: {config.table_count} tables, {len(events)} events"
        )
        return ClubManager.run_session(config, events)
