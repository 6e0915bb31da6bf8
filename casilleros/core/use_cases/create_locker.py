from __future__ import annotations

from typing import Any

from casilleros.core.entities.locker import Locker, single_locker_code
from casilleros.core.errors import NotFoundError
from casilleros.core.repositories.block_repository import BlockRepository
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.core.use_cases.validation import require_id


class CreateLockerUseCase:
    """
    Add a single locker to an existing block.

    Two round trips: the block name is read first to build the ``{blockName}-{number}`` code,
    then the locker is inserted in the Available state.
    """

    def __init__(self, *, block_repo: BlockRepository, locker_repo: LockerRepository) -> None:
        self._block_repo = block_repo
        self._locker_repo = locker_repo

    def execute(self, *, block_id: Any, number: Any) -> Locker:
        block_id = require_id(block_id, "ID de bloque inválido")
        number = require_id(number, "Número de casillero inválido")

        block_name = self._block_repo.get_name(block_id)
        if block_name is None:
            raise NotFoundError("Bloque no encontrado")

        locker = self._locker_repo.add(block_id=block_id, code=single_locker_code(block_name, number))
        locker.block_name = block_name
        return locker
