"""Transactional unit of work over a MongoDB client session.

Usage::

    async with MongoUnitOfWork(client, database, users=UserRepository) as uow:
        user = await uow.users.find_by_id(user_id)
        ...

Repositories named in the constructor are instantiated on enter, bound to the
session, so every read and write they perform joins the transaction. Leaving
the block normally commits, leaving it with an exception aborts, and the
session is ended either way.
"""

import logging

logger = logging.getLogger(__name__)


class MongoUnitOfWork:
    def __init__(self, client, database, **repositories):
        self._client = client
        self._database = database
        self._repositories = repositories
        self.session = None

    async def __aenter__(self):
        self.session = await self._client.start_session()
        try:
            self.session.start_transaction()
            for name, repository in self._repositories.items():
                setattr(self, name, repository(self._database, session=self.session))
        except Exception:
            await self.session.end_session()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                logger.debug("Aborting transaction after %s", exc_type.__name__)
                await self.rollback()
        finally:
            await self.session.end_session()
        return False

    async def commit(self):
        if self.session.in_transaction:
            await self.session.commit_transaction()

    async def rollback(self):
        if self.session.in_transaction:
            await self.session.abort_transaction()
