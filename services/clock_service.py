"""
時鐘服務：HH:MM 與「當天分鐘數」之間的轉換

純計算邏輯，不涉及狀態
"""
import re

_CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_clock(text: str) -> int:
    """
    解析 HH:MM 為當天的分鐘數

    範例：
        parse_clock("09:00") -> 540
        parse_clock("23:59") -> 1439

    異常：
        ValueError: 格式不是兩位數小時 00-23 與兩位數分鐘 00-59
    """
    match = _CLOCK_PATTERN.match(text)
    if not match:
        raise ValueError(f"invalid time {text!r}, expected HH:MM")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_clock(minutes: int) -> str:
    """
    把分鐘數格式化成 HH:MM

    也用在帳單的累計時長，因此小時數不做 24 取餘。
    """
    hours, rest = divmod(minutes, 60)
    return f"{hours:02d}:{rest:02d}"
