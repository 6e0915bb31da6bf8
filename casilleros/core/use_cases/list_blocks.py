from __future__ import annotations

from casilleros.core.entities.block import Block
from casilleros.core.repositories.block_repository import BlockRepository


class ListBlocksUseCase:
    def __init__(self, *, block_repo: BlockRepository) -> None:
        self._block_repo = block_repo

    def execute(self) -> list[Block]:
        return self._block_repo.list_with_lockers()
