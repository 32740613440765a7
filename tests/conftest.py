from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest

from emysql.protocols import NativeStatement

pytest_plugins = ["pytest_databases.docker.mysql"]


@pytest.fixture
def native_statement() -> Mock:
    """Create a mock native statement that reports successful execution."""
    native = Mock(spec=NativeStatement)
    native.bind_param.return_value = True
    native.execute.return_value = True
    native.fetchall.return_value = []
    native.fetchone.return_value = None
    return native


class RecordingEscaper:
    """Escape service that records its inputs and escapes quotes and newlines like the server would."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def escape(self, value: str) -> str:
        self.calls.append(value)
        return value.replace("'", "\\'").replace("\n", "\\n")


@pytest.fixture
def escaper() -> RecordingEscaper:
    return RecordingEscaper()
