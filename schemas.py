"""
API request / response schemas
"""
from typing import List

from pydantic import BaseModel


class ReplayRequest(BaseModel):
    # 與輸入檔相同的格式：前三行是設定，其後每行一個事件
    input: str


class ReplayResponse(BaseModel):
    lines: List[str]
