"""
Session API Endpoints

職責：
1. 接收與輸入檔相同格式的文字，重播一整天
2. 回傳輸出行
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from config import Settings, get_settings
from schemas import ReplayRequest, ReplayResponse
from core.club_manager import ClubManager
from core.exceptions import InputFormatError

router = APIRouter(prefix="/api/sessions", tags=["sessions"])
logger = logging.getLogger(__name__)


@router.post("/replay", response_model=ReplayResponse)
def replay_session(request: ReplayRequest, settings: Settings = Depends(get_settings)):
    """
    重播一個營業日

    流程：
    1. 檢查輸入行數上限
    2. 解析並重播（解析失敗不產生任何輸出）
    3. 返回輸出行

    錯誤：
        400: 輸入格式錯誤（detail 包含行號與原始內容）
        413: 輸入超過 max_input_lines
    """
    lines = request.input.splitlines()
    if len(lines) > settings.max_input_lines:
        raise HTTPException(
            status_code=413,
            detail=f"Input has {len(lines)} lines, limit is {settings.max_input_lines}"
        )

    try:
        output = ClubManager.run_from_lines(lines)
        return ReplayResponse(lines=output)

    except InputFormatError as e:
        logger.warning(f"Rejected replay input: {e}")
        raise HTTPException(
            status_code=400,
            detail={"line_number": e.line_number, "line": e.line, "reason": e.reason}
        )
    except Exception as e:
        logger.error(f"Failed to replay session: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
