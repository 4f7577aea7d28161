"""
自定義異常類別

集中管理所有輸入與狀態異常，方便 API 層與 CLI 統一處理。

注意：YouShallNotPass、ClientUnknown 等語意錯誤不是異常，
它們只會成為輸出行，重播會繼續進行。
"""


class ComputerClubException(Exception):
    """所有俱樂部異常的基類"""
    pass


# ============ 輸入解析異常 ============

class InputFormatError(ComputerClubException):
    """輸入格式錯誤：整個重播失敗，不產生任何輸出"""
    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class InvalidConfiguration(InputFormatError):
    """設定可以解析，但內容不合理（桌數 < 1、費率為負、營業時間顛倒）"""
    pass


# ============ 狀態異常 ============

class InvariantViolation(ComputerClubException):
    """俱樂部狀態不一致（只由 ClubState.check_invariants 拋出）"""
    pass
