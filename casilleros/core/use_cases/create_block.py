from __future__ import annotations

from typing import Any

from casilleros.core.entities.block import Block
from casilleros.core.errors import ValidationError
from casilleros.core.repositories.block_repository import BlockRepository
from casilleros.core.use_cases.validation import GridLimits, is_int_in_range


class CreateBlockUseCase:
    """
    Create a block together with one Available locker per grid cell.

    Rules are checked in order (name, rows, columns) and the first failure is raised
    before the repository is touched.
    """

    def __init__(self, *, block_repo: BlockRepository, limits: GridLimits) -> None:
        self._block_repo = block_repo
        self._limits = limits

    def execute(self, *, name: Any, rows: Any, columns: Any) -> Block:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("El nombre del bloque es requerido")

        if not is_int_in_range(rows, 1, self._limits.max_rows):
            raise ValidationError(f"Las filas deben estar entre 1 y {self._limits.max_rows}")

        if not is_int_in_range(columns, 1, self._limits.max_columns):
            raise ValidationError(f"Las columnas deben estar entre 1 y {self._limits.max_columns}")

        return self._block_repo.create_with_lockers(name=name.strip(), rows=rows, columns=columns)
