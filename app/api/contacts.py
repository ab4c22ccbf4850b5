"""
通讯录管理API路由
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.db.store import DirectoryStore, DuplicateRecordError, get_store
from app.schemas import ContactCreate, ContactResponse, ContactEnvelope, ContactListResponse
from app.core.phone import is_valid_phone_number
from app.core.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["通讯录"])


@router.post("/addContact", response_model=ContactEnvelope)
async def add_contact(contact_data: ContactCreate, store: DirectoryStore = Depends(get_store)):
    """添加联系人 (同一用户下号码不可重复)"""
    if not is_valid_phone_number(contact_data.phone_number, contact_data.country_code):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number")
    
    owner = await store.get_user(contact_data.user_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    
    existing = await store.get_contact(contact_data.user_id, contact_data.phone_number)
    if existing is not None:
        logger.warning(f"Contact {contact_data.phone_number} already exists for user {contact_data.user_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Contact already exists")
    
    try:
        contact = await store.create_contact(
            user_id=contact_data.user_id,
            name=contact_data.name,
            phone_number=contact_data.phone_number,
        )
    except DuplicateRecordError:
        # 并发请求在检查之后抢先写入
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Contact already exists")
    
    logger.info(f"Contact {contact.id} added for user {contact.user_id}")
    return ContactEnvelope(contact=ContactResponse.model_validate(contact))


@router.get("/contacts/{name}", response_model=ContactListResponse)
async def list_contacts(name: str, store: DirectoryStore = Depends(get_store)):
    """列出名字以 name 开头的所有用户的通讯录"""
    contacts = []
    for user_id in await store.find_user_ids_by_name_prefix(name):
        contacts.extend(await store.list_contacts(user_id))
    
    return ContactListResponse(
        contacts=[ContactResponse.model_validate(contact) for contact in contacts]
    )
