"""
領域模型：電腦俱樂部的事件、設定與代碼

時間一律以「當天的分鐘數」表示（09:00 -> 540），
解析與格式化交給 services.clock_service。
"""
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClientAction(int, enum.Enum):
    """輸入事件的動作代碼"""
    ARRIVE = 1
    SIT_AT_TABLE = 2
    JOIN_QUEUE = 3
    LEAVE = 4


class OutputAction(int, enum.Enum):
    """系統產生的輸出事件代碼"""
    FORCED_EXIT = 11
    QUEUE_POPPED = 12
    ERROR = 13


class ErrorCode(str, enum.Enum):
    """語意錯誤（不會中斷重播，只會寫成輸出行）"""
    YOU_SHALL_NOT_PASS = "YouShallNotPass"
    CLIENT_UNKNOWN = "ClientUnknown"
    PLACE_IS_BUSY = "PlaceIsBusy"
    NOT_OPEN_YET = "NotOpenYet"
    I_CAN_WAIT_NO_LONGER = "ICanWaitNoLonger"


MINUTES_PER_DAY = 24 * 60


class ClubConfig(BaseModel):
    """
    俱樂部的固定設定（輸入檔的前三行）

    驗證：
    - table_count >= 1
    - hourly_rate >= 0
    - opening 必須早於 closing（同一天內）
    """
    model_config = ConfigDict(frozen=True)

    table_count: int = Field(ge=1)
    opening: int = Field(ge=0, lt=MINUTES_PER_DAY)
    closing: int = Field(ge=0, lt=MINUTES_PER_DAY)
    hourly_rate: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_hours(self) -> "ClubConfig":
        if self.opening >= self.closing:
            raise ValueError("opening time must be before closing time")
        return self

    def is_before_opening(self, time: int) -> bool:
        return time < self.opening

    def is_after_closing(self, time: int) -> bool:
        return time > self.closing

    def has_table(self, table: int) -> bool:
        return 1 <= table <= self.table_count


class Event(BaseModel):
    """
    一筆已解析的輸入事件

    table 只有 SIT_AT_TABLE 才有值，其餘為 None。
    source 保留原始文字，輸出時原樣寫回。
    """
    model_config = ConfigDict(frozen=True)

    time: int
    action: ClientAction
    client: str
    table: Optional[int] = None
    source: str
