"""
用户注册与登录API路由
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.db.store import DirectoryStore, DuplicateRecordError, get_store
from app.schemas import UserCreate, UserLogin, UserProfile, UserListResponse, TokenResponse
from app.core.security import verify_password, get_password_hash, create_user_token, get_current_user_id
from app.core.phone import is_valid_phone_number
from app.core.logger import get_logger, bind_context
from app.services.contact_seeder import contact_seeder

logger = get_logger(__name__)

router = APIRouter(tags=["用户管理"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, store: DirectoryStore = Depends(get_store)):
    """用户注册"""
    if not is_valid_phone_number(user_data.phone_number, user_data.country_code):
        logger.debug(f"Invalid phone format: {user_data.phone_number} ({user_data.country_code})")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid phone number"
        )
    
    try:
        user = await store.create_user(
            name=user_data.name,
            phone_number=user_data.phone_number,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )
    except DuplicateRecordError:
        # 号码与邮箱同时冲突时以号码为准
        if await store.get_user_by_phone(user_data.phone_number) is not None:
            logger.warning(f"Registration failed: phone {user_data.phone_number} already exists")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Phone number already exists")
        logger.warning(f"Registration failed: email {user_data.email} already exists")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")
    
    bind_context(user_id=user.id)
    logger.info(f"New user registered: {user.name} (ID: {user.id})")
    
    if user_data.auto_generated_contacts:
        try:
            await contact_seeder.seed(store, user.id, user.phone_number)
        except DuplicateRecordError:
            logger.warning(f"Contact seeding skipped for user {user.id}: duplicate numbers")
    
    return TokenResponse(token=create_user_token(user.id))


@router.post("/login", response_model=TokenResponse)
async def login(login_data: UserLogin, store: DirectoryStore = Depends(get_store)):
    """用户登录"""
    user = await store.get_user_by_phone(login_data.phone_number)
    if user is None:
        logger.warning(f"Login failed for phone: {login_data.phone_number} (not registered)")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    
    if not verify_password(login_data.password, user.password_hash):
        logger.warning(f"Login failed for user {user.id} (invalid password)")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    
    bind_context(user_id=user.id)
    logger.info(f"User logged in successfully: {user.name} (ID: {user.id})")
    
    return TokenResponse(token=create_user_token(user.id))


@router.get("/me", response_model=UserProfile)
async def get_current_user_info(
    current_user_id: int = Depends(get_current_user_id),
    store: DirectoryStore = Depends(get_store)
):
    """获取当前用户信息"""
    bind_context(user_id=current_user_id)
    
    user = await store.get_user(current_user_id)
    if user is None:
        logger.error(f"User ID {current_user_id} found in token but not in DB")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    
    return UserProfile.model_validate(user)


@router.get("/users", response_model=UserListResponse)
async def get_all_users(store: DirectoryStore = Depends(get_store)):
    """获取全部注册用户 (不含密码哈希)"""
    users = await store.list_users()
    return UserListResponse(users=[UserProfile.model_validate(user) for user in users])
