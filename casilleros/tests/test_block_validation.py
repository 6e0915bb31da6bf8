from __future__ import annotations

import pytest

from casilleros.core.errors import ErrorKind, NotFoundError, ValidationError
from casilleros.core.use_cases.create_block import CreateBlockUseCase
from casilleros.core.use_cases.delete_block import DeleteBlockUseCase
from casilleros.core.use_cases.validation import GridLimits


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_is_rejected_before_store_call(block_repo, name) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(name=name, rows=3, columns=5)

    assert "nombre del bloque es requerido" in str(exc_info.value)
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert block_repo.calls == []


@pytest.mark.parametrize("rows", [0, -1, 11, 100, None, True])
def test_rows_out_of_range_are_rejected(block_repo, rows) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(name="Bloque Test", rows=rows, columns=5)

    assert "filas deben estar entre 1 y 10" in str(exc_info.value)
    assert block_repo.calls == []


@pytest.mark.parametrize("columns", [0, -3, 16, 20, None])
def test_columns_out_of_range_are_rejected(block_repo, columns) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(name="Bloque Test", rows=3, columns=columns)

    assert "columnas deben estar entre 1 y 15" in str(exc_info.value)
    assert block_repo.calls == []


def test_first_failing_rule_wins(block_repo) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits())

    with pytest.raises(ValidationError, match="nombre"):
        use_case.execute(name="", rows=0, columns=0)

    with pytest.raises(ValidationError, match="filas"):
        use_case.execute(name="B", rows=0, columns=0)


def test_bounds_follow_configured_limits(block_repo) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits(max_rows=2, max_columns=30))

    with pytest.raises(ValidationError, match="Las filas deben estar entre 1 y 2"):
        use_case.execute(name="B", rows=3, columns=1)

    block = use_case.execute(name="B", rows=2, columns=30)
    assert len(block.lockers) == 60


def test_valid_block_is_created_with_trimmed_name(block_repo) -> None:
    use_case = CreateBlockUseCase(block_repo=block_repo, limits=GridLimits())

    block = use_case.execute(name="  Norte  ", rows=10, columns=15)

    assert block_repo.calls == [("create_with_lockers", "Norte", 10, 15)]
    assert block.name == "Norte"
    assert len(block.lockers) == 150


@pytest.mark.parametrize("block_id", [0, -1, -100, None])
def test_delete_block_rejects_non_positive_id(block_repo, block_id) -> None:
    use_case = DeleteBlockUseCase(block_repo=block_repo)

    with pytest.raises(ValidationError, match="ID de bloque inválido"):
        use_case.execute(block_id=block_id)

    assert block_repo.calls == []


def test_delete_missing_block_is_not_found(block_repo) -> None:
    use_case = DeleteBlockUseCase(block_repo=block_repo)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(block_id=42)

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert block_repo.calls == [("delete", 42)]


@pytest.mark.parametrize("block_id", ["abc", "", "1.5", "1e3", " "])
def test_delete_block_rejects_non_numeric_text(block_repo, block_id) -> None:
    with pytest.raises(ValidationError, match="ID de bloque inválido"):
        DeleteBlockUseCase(block_repo=block_repo).execute(block_id=block_id)

    assert block_repo.calls == []


def test_delete_block_accepts_numeric_text(block_repo) -> None:
    DeleteBlockUseCase(block_repo=block_repo).execute(block_id=" 1 ")

    assert block_repo.calls == [("delete", 1)]
