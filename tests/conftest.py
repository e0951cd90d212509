"""Shared pytest fixtures for the React Component Factory test suite.

Provides reusable fixtures for:
- Temporary project directories with an ``rcf.config.json``
- A component store rooted in ``tmp_path``
- A scripted ``PromptService`` replacement that replays canned answers
- Capturing Rich console output
"""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any, Sequence

import pytest

from component_factory import utils
from component_factory.prompts import Choice
from component_factory.storage import ComponentStore


# ---------------------------------------------------------------------------
# Scripted prompts
# ---------------------------------------------------------------------------

class ScriptedPrompts:
    """``PromptService`` that replays answers in order.

    Each queued answer is used by the next prompt of any kind.  ``select``
    and ``expand`` answers are matched against choice labels or keys, then
    values; ``checkbox`` answers are lists of values, or ``None`` to keep
    the checked defaults.  Every question asked is recorded in ``asked``.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers: deque[Any] = deque(answers)
        self.asked: list[tuple[str, str, list[Choice]]] = []

    def _next(self, kind: str, message: str, choices: Sequence[Choice] = ()) -> Any:
        self.asked.append((kind, message, list(choices)))
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        return self.answers.popleft()

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        answer = self._next("select", message, choices)
        for choice in choices:
            if answer == choice.label:
                return choice.value
        for choice in choices:
            if answer == choice.value:
                return choice.value
        raise AssertionError(f"{answer!r} is not offered by {message!r}")

    def text(self, message: str) -> str:
        return self._next("text", message)

    def confirm(self, message: str, default: bool = True) -> bool:
        return self._next("confirm", message)

    def checkbox(self, message: str, choices: Sequence[Choice]) -> list[Any]:
        answer = self._next("checkbox", message, choices)
        if answer is None:
            return [c.value for c in choices if c.checked]
        return list(answer)

    def expand(self, message: str, choices: Sequence[Choice]) -> Any:
        answer = self._next("expand", message, choices)
        for choice in choices:
            if answer == choice.key:
                return choice.value
        return answer

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.asked]


@pytest.fixture
def scripted():
    """Factory for ``ScriptedPrompts`` instances."""
    return ScriptedPrompts


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def component_root(tmp_path: Path) -> Path:
    """Component tree with a couple of nested folders."""
    root = tmp_path / "components"
    (root / "widgets").mkdir(parents=True)
    (root / "layout" / "grid").mkdir(parents=True)
    return root


@pytest.fixture
def store(component_root: Path) -> ComponentStore:
    return ComponentStore(component_root)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Project root with ``package.json`` and ``rcf.config.json``."""
    project = tmp_path / "web"
    project.mkdir()
    (project / "package.json").write_text('{"name": "web"}\n', encoding="utf-8")
    (project / "rcf.config.json").write_text(
        json.dumps({"componentRoot": "src/components"}), encoding="utf-8"
    )
    return project


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def console_output(capsys, monkeypatch):
    """Capture the shared Rich console.

    The console writes to whatever ``sys.stdout`` is at call time, so
    ``capsys`` sees it; the width is widened so long paths do not wrap.
    Read the text with ``console_output.readouterr().out``.
    """
    monkeypatch.setattr(utils.console, "width", 240)
    monkeypatch.setattr(utils.console, "_color_system", None)
    return capsys
