"""
計費服務：每張桌子的收費計算

純計算邏輯，輸入是累計時長與時薪，不修改任何狀態
"""
from typing import List

from core.usage_ledger import UsageLedger
from services.format_service import billing_line


def calculate_charge(minutes: int, hourly_rate: int) -> int:
    """
    依累計使用分鐘數計算金額

    規則：
    - hours = minutes // 60，leftover = minutes % 60
    - leftover <= 30：收 (hours + 1) 小時
    - leftover > 30：收 (hours + 2) 小時

    範例（rate = 10）：
        0 分 -> 10
        30 分 -> 10
        31 分 -> 20
        60 分 -> 20
        90 分 -> 20
        91 分 -> 30

    參數：
        minutes: 累計使用分鐘數（>= 0）
        hourly_rate: 每小時費率

    返回：
        金額
    """
    hours, leftover = divmod(minutes, 60)
    if leftover > 30:
        return (hours + 2) * hourly_rate
    return (hours + 1) * hourly_rate


def build_billing_lines(ledger: UsageLedger, hourly_rate: int) -> List[str]:
    """
    產生帳單行（依桌號遞增）

    只有出現在帳本裡的桌子才會列出；從未使用的桌子略過。
    同一份帳本重複呼叫結果相同。
    """
    return [
        billing_line(table, calculate_charge(minutes, hourly_rate), minutes)
        for table, minutes in ledger.entries()
    ]
