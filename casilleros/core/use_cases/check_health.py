from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from casilleros.core.repositories.block_repository import BlockRepository


@dataclass(frozen=True, slots=True)
class HealthDTO:
    status: str
    timestamp: str
    version: str


class CheckHealthUseCase:
    """
    Probe the store with a block count; any store error propagates to the caller.
    """

    def __init__(self, *, block_repo: BlockRepository, version: str) -> None:
        self._block_repo = block_repo
        self._version = version

    def execute(self) -> HealthDTO:
        self._block_repo.count()
        return HealthDTO(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=self._version,
        )
