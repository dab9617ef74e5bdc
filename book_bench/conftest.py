from pathlib import Path

import pytest

from book_bench.config_logging import reset_logging


def _read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def make_book(tmp_path):
    def _make(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def read_lines():
    return _read_lines


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
