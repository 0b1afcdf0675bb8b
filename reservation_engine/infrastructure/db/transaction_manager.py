from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.interfaces.transaction_manager import TransactionManager


class SQLAlchemyTransactionManager(TransactionManager):
    """
    Each outermost ``start()`` is one database transaction.

    Reads issued before ``start()`` autobegin a transaction on the session;
    that implicit transaction is closed first so the unit of work commits on
    its own. Nested ``start()`` calls join the outer transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._depth = 0

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        if self._session.in_transaction():
            await self._session.commit()
        self._depth = 1
        try:
            async with self._session.begin():
                yield
        finally:
            self._depth = 0
