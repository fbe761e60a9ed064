from motor.motor_asyncio import AsyncIOMotorClient
from langbridge.core.config import settings


client = AsyncIOMotorClient(settings.MONGO_URL, tz_aware=True)

database = client[settings.MONGO_DATABASE]
