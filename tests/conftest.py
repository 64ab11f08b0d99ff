import json
import pathlib
from typing import Any, Callable

import pytest

from mime_to_ext import enable_logs

type WriteDatabase = Callable[[Any], pathlib.Path]


@pytest.fixture(autouse=True)
def logs() -> None:
    enable_logs()


@pytest.fixture
def write_database(tmp_path: pathlib.Path) -> WriteDatabase:
    def write(content: Any) -> pathlib.Path:
        path = tmp_path / "mime_db.json"
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return write
