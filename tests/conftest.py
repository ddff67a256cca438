from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from create_vite.catalog import Catalog, default_catalog
from create_vite.prompts import Choice, PromptCancelled


class ScriptedPrompter:
    """Replays answers in order; an answer of `CANCEL` raises `PromptCancelled`."""

    CANCEL = object()

    def __init__(self, *answers: object) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, list[Choice]]] = []

    def _next(self, message: str) -> object:
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        answer = self.answers.pop(0)
        if answer is self.CANCEL:
            raise PromptCancelled(message)
        return answer

    def text(self, message: str, *, default: str) -> str:
        self.calls.append(("text", message, []))
        answer = self._next(message)
        return default if answer is None else str(answer)

    def select(self, message: str, choices: Sequence[Choice], *, default_index: int = 0) -> Choice:
        self.calls.append(("select", message, list(choices)))
        answer = self._next(message)
        for choice in choices:
            if choice.value == answer:
                return choice
        raise AssertionError(f"{answer!r} is not offered by {message!r}")


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """Tiny stand-in templates directory for `vue-ts` and `react-swc-ts`."""
    root = tmp_path / "templates"
    for template_id in ("vue-ts", "react-swc-ts"):
        tpl = root / f"template-{template_id}"
        (tpl / "src").mkdir(parents=True)
        (tpl / "package.json.j2").write_text('{"name": "{{ package_name }}"}\n', encoding="utf-8")
        (tpl / "_gitignore").write_text("node_modules\n", encoding="utf-8")
        (tpl / "src" / "main.ts").write_text(f"// {template_id}\n", encoding="utf-8")
    return root


@pytest.fixture
def scripted() -> type[ScriptedPrompter]:
    return ScriptedPrompter
