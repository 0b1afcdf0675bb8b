import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from reservation_engine.application.interfaces.transaction_manager import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """
    Serializa las unidades de trabajo con un asyncio.Lock de proceso.

    No hay rollback: los repos en memoria escriben al final de cada caso de
    uso, después de todas las validaciones. No es reentrante.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        async with self._lock:
            yield
