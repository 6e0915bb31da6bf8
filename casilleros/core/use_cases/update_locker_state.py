from __future__ import annotations

from typing import Any

from casilleros.core.entities.locker import LockerState
from casilleros.core.errors import NotFoundError, ValidationError
from casilleros.core.repositories.locker_repository import LockerRepository
from casilleros.core.use_cases.validation import require_id


class UpdateLockerStateUseCase:
    def __init__(self, *, locker_repo: LockerRepository) -> None:
        self._locker_repo = locker_repo

    def execute(self, *, locker_id: Any, state: Any) -> LockerState:
        locker_id = require_id(locker_id, "ID de casillero inválido")

        if state not in LockerState.values():
            raise ValidationError(f"Estado inválido. Debe ser uno de: {', '.join(LockerState.values())}")
        new_state = LockerState(state)

        if not self._locker_repo.update_state(locker_id, new_state):
            raise NotFoundError("Casillero no encontrado")
        return new_state
