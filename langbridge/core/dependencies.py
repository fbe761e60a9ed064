from bson import ObjectId
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from langbridge.api.friends.service import FriendshipService
from langbridge.api.friends.store import MongoStore
from langbridge.api.preferences.store import RedisThemeBackend, ThemeStore
from langbridge.core.accesstoken import verify_access_token
from langbridge.core.config import settings
from langbridge.core.database import client, database
from langbridge.core.redis_utils import RedisNotifier, get_redis_client

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")

redis_client = get_redis_client()
store = MongoStore(client, database)
friendship_service = FriendshipService(store, notifier=RedisNotifier(redis_client))
theme_store = ThemeStore(
    RedisThemeBackend(redis_client),
    default_theme=settings.DEFAULT_THEME,
    prefix=settings.THEME_STORAGE_PREFIX,
)


async def get_current_active_user(token: str = Depends(oauth2_scheme)) -> str:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    decoded_jwt = verify_access_token(token)
    if not decoded_jwt:
        raise credentials_exception
    user_id = decoded_jwt.get("sub")
    if user_id is None or not ObjectId.is_valid(user_id):
        raise credentials_exception
    return user_id


def get_friendship_service() -> FriendshipService:
    return friendship_service


def get_theme_store() -> ThemeStore:
    return theme_store
