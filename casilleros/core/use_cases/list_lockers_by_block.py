from __future__ import annotations

from typing import Any

from casilleros.core.entities.locker import Locker
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.core.use_cases.validation import require_id


class ListLockersByBlockUseCase:
    """
    An unknown block id yields an empty list, not an error.
    """

    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, block_id: Any) -> list[Locker]:
        block_id = require_id(block_id, "ID de bloque inválido")
        return self._locker_repo.list_by_block(block_id)
