"""
垃圾号码举报API路由
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.db.store import DirectoryStore, get_store
from app.schemas import SpamReportRequest, SpamReportResponse
from app.core.security import get_current_user_id
from app.core.phone import is_valid_phone_number
from app.core.logger import get_logger, bind_context

logger = get_logger(__name__)

router = APIRouter(tags=["举报"])


@router.post("/markSpam", response_model=SpamReportResponse)
async def mark_spam(
    report: SpamReportRequest,
    current_user_id: int = Depends(get_current_user_id),
    store: DirectoryStore = Depends(get_store)
):
    """举报号码为垃圾/骚扰号码"""
    bind_context(user_id=current_user_id)
    
    if not is_valid_phone_number(report.phone_number, report.country_code):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number")
    
    count = await store.increment_spam(report.phone_number)
    logger.info(f"User {current_user_id} reported {report.phone_number} as spam (count: {count})")
    
    return SpamReportResponse(phone_number=report.phone_number, spam_likelihood=count)
