from __future__ import annotations

from abc import ABC, abstractmethod

from casilleros.core.entities.block import Block


class BlockRepository(ABC):
    @abstractmethod
    def list_with_lockers(self) -> list[Block]:
        """All blocks ordered by id, each with its lockers ordered by locker id."""
        raise NotImplementedError

    @abstractmethod
    def create_with_lockers(self, *, name: str, rows: int, columns: int) -> Block:
        """Insert the block and its rows x columns lockers as one unit."""
        raise NotImplementedError

    @abstractmethod
    def get_name(self, block_id: int) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, block_id: int) -> bool:
        """Return True if a block was deleted. Its lockers go with it (store cascade)."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
