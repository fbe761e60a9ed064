from langbridge.api.friends.repository import FriendRequestRepository, UserRepository
from langbridge.core.unit_of_work import MongoUnitOfWork


class MongoStore:
    """Entry point to the users and friend request collections.

    ``users`` and ``friend_requests`` run outside any transaction;
    ``unit_of_work()`` returns a transactional scope with the same repositories.
    """

    def __init__(self, client, database):
        self._client = client
        self._database = database
        self.users = UserRepository(database)
        self.friend_requests = FriendRequestRepository(database)

    def unit_of_work(self) -> MongoUnitOfWork:
        return MongoUnitOfWork(
            self._client,
            self._database,
            users=UserRepository,
            friend_requests=FriendRequestRepository,
        )

    async def ensure_indexes(self) -> None:
        await self.friend_requests.ensure_indexes()
