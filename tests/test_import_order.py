"""Testa que cada camada importa isoladamente em um interpretador limpo."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).parent.parent / "src"


@pytest.mark.parametrize(
    "module",
    [
        "api.connectors.email",
        "api.validators.email",
        "api.payload_builders.email",
        "app.protocols.models",
        "app.bootstrap.email_factory",
        "app",
    ],
)
def test_module_imports_first_in_fresh_interpreter(module: str) -> None:
    env = {**os.environ, "PYTHONPATH": str(SRC_PATH)}

    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )

    assert result.returncode == 0, result.stderr
