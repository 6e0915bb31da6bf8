from __future__ import annotations

from typing import Any

from casilleros.core.errors import NotFoundError
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.core.use_cases.validation import require_id


class DeleteLockerUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: Any) -> None:
        locker_id = require_id(locker_id, "ID de casillero inválido")
        if not self._locker_repo.delete(locker_id):
            raise NotFoundError("Casillero no encontrado")
