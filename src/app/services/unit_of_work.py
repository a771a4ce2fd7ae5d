"""Unit of Work Interface

Groups the writes of one use case into a single commit.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        """Commit all pending writes"""
        pass

    @abstractmethod
    async def rollback(self):
        """Discard all pending writes"""
        pass
