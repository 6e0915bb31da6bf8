from __future__ import annotations

from typing import Any

from casilleros.core.errors import NotFoundError
from casilleros.core.repositories.block_repository import BlockRepository
from casilleros.core.use_cases.validation import require_id


class DeleteBlockUseCase:
    def __init__(self, *, block_repo: BlockRepository) -> None:
        self._block_repo = block_repo

    def execute(self, *, block_id: Any) -> None:
        block_id = require_id(block_id, "ID de bloque inválido")
        if not self._block_repo.delete(block_id):
            raise NotFoundError("Bloque no encontrado")
