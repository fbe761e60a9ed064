"""Friend request lifecycle and the friendship relation.

A request moves from ``pending`` to ``accepted`` when its recipient accepts
it; nothing else changes a request. Acceptance adds each party to the other's
``friends`` set in the same transaction as the status change.
"""

import functools
import logging
from typing import List

from bson import ObjectId
from pymongo.errors import DuplicateKeyError, OperationFailure
from starlette.concurrency import run_in_threadpool

from langbridge.api.friends.models import (
    AcceptedFriendRequest,
    FriendRequestOut,
    FriendRequests,
    IncomingFriendRequest,
    Message,
    OutgoingFriendRequest,
    UserSummary,
)
from langbridge.api.friends.repository import (
    PENDING,
    USER_BRIEF_FIELDS,
    USER_SUMMARY_FIELDS,
)
from langbridge.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    LangBridgeError,
    NotFoundError,
    UnexpectedError,
)

logger = logging.getLogger(__name__)


def operation(func):
    """Let domain errors through and turn anything else into UnexpectedError."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except LangBridgeError:
            raise
        except Exception:
            logger.exception("Error in %s", func.__name__)
            raise UnexpectedError()

    return wrapper


def parse_object_id(value, message: str) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidArgumentError(message)
    return ObjectId(value)


class FriendshipService:
    def __init__(self, store, notifier=None):
        self._store = store
        self._notifier = notifier

    @operation
    async def get_recommended_users(self, caller_id: str) -> List[UserSummary]:
        me = parse_object_id(caller_id, "Invalid user ID")
        caller = await self._store.users.find_by_id(me, {"friends": 1})
        if not caller:
            raise NotFoundError("User not found")

        exclude = list(caller.get("friends", [])) + [me]
        users = await self._store.users.find_recommended(exclude, USER_SUMMARY_FIELDS)
        return [UserSummary.model_validate(user) for user in users]

    @operation
    async def get_my_friends(self, caller_id: str) -> List[UserSummary]:
        me = parse_object_id(caller_id, "Invalid user ID")
        caller = await self._store.users.find_by_id(me, {"friends": 1})
        if not caller:
            raise NotFoundError("User not found")

        friend_ids = caller.get("friends", [])
        friends = await self._store.users.find_by_ids(friend_ids, USER_SUMMARY_FIELDS)
        return [
            UserSummary.model_validate(friends[friend_id])
            for friend_id in friend_ids
            if friend_id in friends
        ]

    @operation
    async def send_friend_request(
        self, caller_id: str, recipient_id: str
    ) -> FriendRequestOut:
        recipient_oid = parse_object_id(recipient_id, "Invalid user ID")
        me = parse_object_id(caller_id, "Invalid user ID")
        if me == recipient_oid:
            raise InvalidArgumentError("Cannot send request to yourself")

        # A concurrent send for the same pair loses either on the unique
        # pairKey index or with a transaction write conflict.
        try:
            async with self._store.unit_of_work() as uow:
                request = await self._create_request(uow, me, recipient_oid)
        except DuplicateKeyError:
            raise ConflictError("Request already pending")
        except OperationFailure as e:
            if not e.has_error_label("TransientTransactionError"):
                raise
            raise ConflictError("Request already pending")

        logger.info(
            "Friend request sent",
            extra={"sender": str(me), "recipient": str(recipient_oid)},
        )
        await self._notify("friend_request.sent", request)
        return FriendRequestOut.model_validate(request)

    async def _create_request(self, uow, me: ObjectId, recipient_oid: ObjectId) -> dict:
        caller = await uow.users.find_by_id(me, {"friends": 1})
        recipient = await uow.users.find_by_id(recipient_oid, {"friends": 1})
        if not caller or not recipient:
            raise NotFoundError("User not found")

        if recipient_oid in caller.get("friends", []) or me in recipient.get(
            "friends", []
        ):
            raise ConflictError("Already friends")

        existing = await uow.friend_requests.find_between(me, recipient_oid)
        if existing:
            raise ConflictError(_existing_request_message(existing))

        return await uow.friend_requests.insert(me, recipient_oid)

    @operation
    async def accept_friend_request(self, caller_id: str, request_id: str) -> Message:
        request_oid = parse_object_id(request_id, "Invalid request ID")
        me = parse_object_id(caller_id, "Invalid user ID")

        async with self._store.unit_of_work() as uow:
            request = await uow.friend_requests.find_by_id(request_oid)
            if not request:
                raise NotFoundError("Request not found")
            if request["recipient"] != me:
                raise ForbiddenError("Unauthorized")
            if request["status"] != PENDING:
                raise ConflictError("Request already processed")

            await uow.friend_requests.mark_accepted(request_oid)
            await uow.users.add_friend(request["sender"], request["recipient"])
            await uow.users.add_friend(request["recipient"], request["sender"])

        logger.info("Friend request accepted", extra={"request_id": str(request_oid)})
        await self._notify("friend_request.accepted", request)
        return Message(message="Request accepted")

    @operation
    async def get_friend_requests(self, caller_id: str) -> FriendRequests:
        me = parse_object_id(caller_id, "Invalid user ID")
        incoming = await self._store.friend_requests.find_incoming(me)
        accepted = await self._store.friend_requests.find_accepted(me)

        senders = await self._store.users.find_by_ids(
            [request["sender"] for request in incoming], USER_SUMMARY_FIELDS
        )
        parties = await self._store.users.find_by_ids(
            [request["sender"] for request in accepted]
            + [request["recipient"] for request in accepted],
            USER_BRIEF_FIELDS,
        )

        incoming_reqs = [
            IncomingFriendRequest.model_validate(
                {**request, "sender": senders[request["sender"]]}
            )
            for request in incoming
            if request["sender"] in senders
        ]
        # requests whose sender or recipient no longer resolves are dropped
        accepted_reqs = [
            AcceptedFriendRequest.model_validate(
                {
                    **request,
                    "sender": parties[request["sender"]],
                    "recipient": parties[request["recipient"]],
                }
            )
            for request in accepted
            if request["sender"] in parties and request["recipient"] in parties
        ]
        return FriendRequests(incomingReqs=incoming_reqs, acceptedReqs=accepted_reqs)

    @operation
    async def get_outgoing_friend_requests(
        self, caller_id: str
    ) -> List[OutgoingFriendRequest]:
        me = parse_object_id(caller_id, "Invalid user ID")
        outgoing = await self._store.friend_requests.find_outgoing(me)
        recipients = await self._store.users.find_by_ids(
            [request["recipient"] for request in outgoing], USER_SUMMARY_FIELDS
        )
        return [
            OutgoingFriendRequest.model_validate(
                {**request, "recipient": recipients[request["recipient"]]}
            )
            for request in outgoing
            if request["recipient"] in recipients
        ]

    async def _notify(self, event: str, request: dict) -> None:
        if self._notifier is not None:
            # redis-py is blocking
            await run_in_threadpool(self._notifier.publish, event, request)


def _existing_request_message(request: dict) -> str:
    if request["status"] == PENDING:
        return "Request already pending"
    return "Already connected"
