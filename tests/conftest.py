from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO

import pytest


@pytest.fixture
def thing_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    # -1. guards: the whole scenario can be switched off from the environment.
    if os.environ.get("SKIP_THING"):
        pytest.skip("skipping thing because the environment")
    # 0. top-level setup; monkeypatch and tmp_path clean up after themselves.
    monkeypatch.setenv("IMAGINATION", "vivid")
    return tmp_path


@pytest.fixture
def new_test_file(request: pytest.FixtureRequest) -> Iterator[Callable[[Path, str], TextIO]]:
    # Helper factory: create a file, register its close as cleanup, fail the test if it cannot help.
    handles: list[TextIO] = []

    def _create(directory: Path, name: str) -> TextIO:
        try:
            handle = (directory / name).open("w", encoding="utf-8")
        except OSError as exc:
            pytest.fail(f"could not create test file {name}: {exc}")
        handles.append(handle)
        return handle

    yield _create

    for handle in handles:
        try:
            handle.close()
        except OSError as exc:
            request.node.warn(pytest.PytestWarning(f"cleanup error closing file: {exc}"))
