"""
renderer.py

Responsibility: Deterministically copy a template directory into a destination.

Rules:
- Walk template files in sorted order to ensure deterministic output.
- Files ending in `.j2` are rendered with Jinja2 and written without the suffix.
- Files listed in `RENAME_FILES` are written under their real name
  (packaged templates cannot ship dotfiles reliably).
- Everything else is copied byte-for-byte.
- Existing files in the destination are overwritten; nothing is deleted.

This module intentionally does NOT know about the catalog, prompts, or CLI parsing.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"

RENAME_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderResult:
    rendered_files: int
    copied_files: int


def _iter_template_files(template_dir: Path) -> list[Path]:
    """
    Return all files under template_dir, in deterministic lexicographic order
    (relative path ordering).
    """
    files: list[Path] = []
    for root, _dirs, filenames in os.walk(template_dir):
        root_path = Path(root)
        for name in filenames:
            files.append(root_path / name)
    files.sort(key=lambda p: str(p.relative_to(template_dir)).replace(os.sep, "/"))
    return files


def destination_name(name: str) -> str:
    """Map a template file name to the name written into the project."""
    if name.endswith(TEMPLATE_SUFFIX):
        name = name[: -len(TEMPLATE_SUFFIX)]
    return RENAME_FILES.get(name, name)


def render_template_dir(
    *,
    template_dir: str | Path,
    destination_dir: str | Path,
    context: dict[str, Any],
) -> RenderResult:
    """
    Render/copy a template directory into destination_dir.

    - Creates destination directories as needed.
    - Copies file permissions from template files.
    """
    tpl_dir = Path(template_dir).resolve()
    dst_dir = Path(destination_dir).resolve()

    if not tpl_dir.exists() or not tpl_dir.is_dir():
        raise RenderError(f"Template directory not found: {tpl_dir}")

    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )

    rendered = 0
    copied = 0

    for src_path in _iter_template_files(tpl_dir):
        rel = src_path.relative_to(tpl_dir)
        dst_path = dst_dir / rel.parent / destination_name(rel.name)
        dst_path.parent.mkdir(parents=True, exist_ok=True)

        if src_path.name.endswith(TEMPLATE_SUFFIX):
            text = src_path.read_text(encoding="utf-8")
            try:
                out = env.from_string(text).render(**context)
            except Exception as e:  # noqa: BLE001 - surface as RenderError
                raise RenderError(f"Failed rendering template file: {rel}") from e
            dst_path.write_text(out, encoding="utf-8", newline="\n")
            shutil.copystat(src_path, dst_path)
            rendered += 1
        else:
            shutil.copy2(src_path, dst_path)
            copied += 1
        logger.debug("wrote %s", dst_path)

    return RenderResult(rendered_files=rendered, copied_files=copied)
