"""
全局目录检索API路由
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.db.store import DirectoryStore, get_store
from app.schemas import NameSearchResponse, PhoneSearchResponse
from app.services.directory_service import directory_service

router = APIRouter(tags=["目录检索"])


@router.get("/searchUserByName/{name}", response_model=NameSearchResponse)
async def search_user_by_name(name: str, store: DirectoryStore = Depends(get_store)):
    """按姓名检索 (前缀匹配在前，包含匹配在后)"""
    users = await directory_service.search_by_name(store, name)
    if not users:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return NameSearchResponse(users=users)


@router.get("/searchUserByPhoneNumber/{phone_number}", response_model=PhoneSearchResponse)
async def search_user_by_phone_number(phone_number: str, store: DirectoryStore = Depends(get_store)):
    """按号码检索 (注册用户优先，否则返回所有通讯录中的名字)"""
    users = await directory_service.search_by_phone(store, phone_number)
    if not users:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return PhoneSearchResponse(users=users)
