import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from langbridge.api.friends import friends
from langbridge.api.preferences import preferences
from langbridge.core.config import settings
from langbridge.core.database import database
from langbridge.core.dependencies import redis_client, store
from langbridge.core.exceptions import LangBridgeError, langbridge_error_handler
from langbridge.core.logging_config import RequestLoggingMiddleware, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.VERSION)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(LangBridgeError, langbridge_error_handler)


@app.on_event("startup")
async def startup_event():
    await store.ensure_indexes()
    logger.info("Friend request indexes ready")


@app.on_event("shutdown")
async def shutdown_event():
    redis_client.close()


app.include_router(friends.router, prefix="/api/users", tags=["friends"])
app.include_router(preferences.router, prefix="/api/preferences", tags=["preferences"])


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API"}


@app.get("/healthCheck")
async def healthCheck():
    mongoDb = False
    redisDb = False
    try:
        redisDb = bool(redis_client.ping())
    except Exception as e:
        logger.warning("Redis health check failed: %s", e)

    try:
        checkMongo = await database.command("ping")
        mongoDb = bool(checkMongo.get("ok"))
    except Exception as e:
        logger.warning("MongoDB health check failed: %s", e)

    if mongoDb and redisDb:
        return {"message": "All services are up and running"}
    else:
        return {
            "message": "Some services are down",
            "mongoDb": mongoDb,
            "redisDb": redisDb,
        }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
