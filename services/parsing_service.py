"""
解析服務：把輸入行轉成 ClubConfig 與事件列表

輸入格式：
    第 1 行：桌數
    第 2 行：HH:MM HH:MM（開店與打烊時間）
    第 3 行：每小時費率
    其後：HH:MM ACTION CLIENT [TABLE]

任何一行格式錯誤都會拋出 InputFormatError，整個重播不產生輸出。
"""
import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import ValidationError

from core.exceptions import InputFormatError, InvalidConfiguration
from models import ClientAction, ClubConfig, Event
from services.clock_service import parse_clock

logger = logging.getLogger(__name__)

HEADER_LINES = 3

_CLIENT_PATTERN = re.compile(r"^[a-z0-9_-]+$")
_INTEGER_PATTERN = re.compile(r"^\d+$")


def _parse_int(text: str, line_number: int, line: str, what: str) -> int:
    if not _INTEGER_PATTERN.match(text):
        raise InputFormatError(line_number, line, f"invalid {what}")
    return int(text)


def _parse_time(text: str, line_number: int, line: str) -> int:
    try:
        return parse_clock(text)
    except ValueError as e:
        raise InputFormatError(line_number, line, str(e)) from e


def parse_config(lines: List[str]) -> ClubConfig:
    """
    解析前三行設定

    異常：
        InputFormatError: 缺行、整數或時間無法解析
        InvalidConfiguration: 數值不合理（例如 opening >= closing）
    """
    if len(lines) < HEADER_LINES:
        missing = len(lines) + 1
        raise InputFormatError(missing, "", "missing configuration line")

    table_count = _parse_int(lines[0], 1, lines[0], "number of tables")

    parts = lines[1].split(" ")
    if len(parts) != 2:
        raise InputFormatError(2, lines[1], "expected opening and closing time")
    opening = _parse_time(parts[0], 2, lines[1])
    closing = _parse_time(parts[1], 2, lines[1])

    hourly_rate = _parse_int(lines[2], 3, lines[2], "hourly rate")

    try:
        return ClubConfig(
            table_count=table_count,
            opening=opening,
            closing=closing,
            hourly_rate=hourly_rate,
        )
    except ValidationError as e:
        error = e.errors()[0]
        # 只有 table_count 會在欄位層級失敗，其餘是營業時間的檢查
        line_number = 1 if error["loc"] == ("table_count",) else 2
        raise InvalidConfiguration(line_number, lines[line_number - 1], error["msg"]) from e


def parse_event(line: str, line_number: int, config: ClubConfig) -> Event:
    """
    解析一行事件

    規則：
    - ACTION 只能是 1..4
    - ACTION 2 必須有 4 個欄位（含桌號，且桌號在 1..N），其他動作剛好 3 個
    - CLIENT 只能包含 a-z、0-9、_、-
    """
    parts = line.split(" ")
    if len(parts) < 3:
        raise InputFormatError(line_number, line, "invalid event format")

    time = _parse_time(parts[0], line_number, line)
    code = _parse_int(parts[1], line_number, line, "action")
    try:
        action = ClientAction(code)
    except ValueError as e:
        raise InputFormatError(line_number, line, f"unknown action {code}") from e

    client = parts[2]
    if not _CLIENT_PATTERN.match(client):
        raise InputFormatError(line_number, line, f"invalid client name {client!r}")

    expected_fields = 4 if action == ClientAction.SIT_AT_TABLE else 3
    if len(parts) != expected_fields:
        raise InputFormatError(
            line_number, line, f"action {code} expects {expected_fields} fields"
        )

    table = None
    if action == ClientAction.SIT_AT_TABLE:
        table = _parse_int(parts[3], line_number, line, "table")
        if not config.has_table(table):
            raise InputFormatError(line_number, line, f"table {table} does not exist")

    return Event(time=time, action=action, client=client, table=table, source=line)


def parse_input(lines: Iterable[str]) -> Tuple[ClubConfig, List[Event]]:
    """
    解析完整輸入

    流程：
    1. 去掉行尾換行，忽略結尾的空行
    2. 解析設定
    3. 逐行解析事件，並檢查時間不倒退

    返回：
        (ClubConfig, 事件列表)
    """
    # 1. 正規化
    normalized = [line.rstrip("\r\n") for line in lines]
    while normalized and not normalized[-1].strip():
        normalized.pop()

    # 2. 設定
    config = parse_config(normalized)

    # 3. 事件
    events: List[Event] = []
    for index, line in enumerate(normalized[HEADER_LINES:], start=HEADER_LINES + 1):
        event = parse_event(line, index, config)
        if events and event.time < events[-1].time:
            raise InputFormatError(index, line, "events are not in chronological order")
        events.append(event)

    logger.debug(f"Parsed {len(events)} events for {config.table_count} tables")
    return config, events


def load_input(path) -> Tuple[ClubConfig, List[Event]]:
    """讀取輸入檔並解析（OSError 交給呼叫者處理）"""
    text = Path(path).read_text(encoding="utf-8")
    return parse_input(text.splitlines())
