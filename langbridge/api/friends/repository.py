from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from bson import ObjectId


USER_SUMMARY_FIELDS = {
    "fullName": 1,
    "profilePic": 1,
    "nativeLanguage": 1,
    "learningLanguage": 1,
}
USER_BRIEF_FIELDS = {"fullName": 1, "profilePic": 1}

PENDING = "pending"
ACCEPTED = "accepted"


def pair_key(user_a: ObjectId, user_b: ObjectId) -> str:
    """Key shared by both directions of a request between two users."""
    return ":".join(sorted([str(user_a), str(user_b)]))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRepository:
    def __init__(self, database, session=None):
        self._collection = database.get_collection("users")
        self._session = session

    async def find_by_id(
        self, user_id: ObjectId, projection: Optional[dict] = None
    ) -> Optional[dict]:
        return await self._collection.find_one(
            {"_id": user_id}, projection, session=self._session
        )

    async def find_by_ids(
        self, user_ids: Iterable[ObjectId], projection: Optional[dict] = None
    ) -> Dict[ObjectId, dict]:
        ids = list(set(user_ids))
        if not ids:
            return {}
        cursor = self._collection.find(
            {"_id": {"$in": ids}}, projection, session=self._session
        )
        return {user["_id"]: user async for user in cursor}

    async def find_recommended(
        self, exclude_ids: List[ObjectId], projection: Optional[dict] = None
    ) -> List[dict]:
        cursor = self._collection.find(
            {"_id": {"$nin": exclude_ids}, "isOnboarded": True},
            projection,
            session=self._session,
        )
        return await cursor.to_list(length=None)

    async def add_friend(self, user_id: ObjectId, friend_id: ObjectId) -> None:
        await self._collection.update_one(
            {"_id": user_id},
            {"$addToSet": {"friends": friend_id}},
            session=self._session,
        )


class FriendRequestRepository:
    def __init__(self, database, session=None):
        self._collection = database.get_collection("friendrequests")
        self._session = session

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("pairKey", unique=True)
        await self._collection.create_index([("recipient", 1), ("status", 1)])
        await self._collection.create_index([("sender", 1), ("status", 1)])

    async def find_by_id(self, request_id: ObjectId) -> Optional[dict]:
        return await self._collection.find_one(
            {"_id": request_id}, session=self._session
        )

    async def find_between(
        self, user_a: ObjectId, user_b: ObjectId
    ) -> Optional[dict]:
        return await self._collection.find_one(
            {
                "$or": [
                    {"sender": user_a, "recipient": user_b},
                    {"sender": user_b, "recipient": user_a},
                ]
            },
            session=self._session,
        )

    async def insert(self, sender: ObjectId, recipient: ObjectId) -> dict:
        now = utcnow()
        document = {
            "sender": sender,
            "recipient": recipient,
            "status": PENDING,
            "pairKey": pair_key(sender, recipient),
            "createdAt": now,
            "updatedAt": now,
        }
        result = await self._collection.insert_one(document, session=self._session)
        document["_id"] = result.inserted_id
        return document

    async def mark_accepted(self, request_id: ObjectId) -> None:
        await self._collection.update_one(
            {"_id": request_id},
            {"$set": {"status": ACCEPTED, "updatedAt": utcnow()}},
            session=self._session,
        )

    async def find_incoming(self, user_id: ObjectId) -> List[dict]:
        return await self._find({"recipient": user_id, "status": PENDING})

    async def find_outgoing(self, user_id: ObjectId) -> List[dict]:
        return await self._find({"sender": user_id, "status": PENDING})

    async def find_accepted(self, user_id: ObjectId) -> List[dict]:
        return await self._find(
            {
                "status": ACCEPTED,
                "$or": [{"sender": user_id}, {"recipient": user_id}],
            }
        )

    async def _find(self, query: dict) -> List[dict]:
        cursor = self._collection.find(query, session=self._session).sort(
            "createdAt", 1
        )
        return await cursor.to_list(length=None)
