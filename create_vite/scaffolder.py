"""
scaffolder.py

Responsibility: Materialize a resolved template id into a target directory.

Steps:
1) Validate the template id against the catalog and locate its source directory
2) Create the destination (and missing parents) if it does not exist
3) Copy the template via `renderer.py`
4) Compute the follow-up instructions shown to the user

All checks that can fail without touching the filesystem run before step 2.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from create_vite.catalog import Catalog, default_catalog
from create_vite.renderer import RenderError, RenderResult, render_template_dir

logger = logging.getLogger(__name__)

TEMPLATE_PREFIX = "template-"
DEFAULT_TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"

_VALID_PACKAGE_NAME = re.compile(r"^(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*$")


class ScaffoldError(RuntimeError):
    pass


@dataclass(frozen=True)
class ScaffoldResult:
    root: Path
    template_dir: Path
    package_name: str
    files: RenderResult


def is_valid_package_name(name: str) -> bool:
    return bool(_VALID_PACKAGE_NAME.match(name))


def to_valid_package_name(name: str) -> str:
    """
    Best-effort conversion of a directory name into an npm package name.

    Example: "My App" -> "my-app"
    """
    out = name.strip().lower()
    out = re.sub(r"\s+", "-", out)
    out = re.sub(r"^[._]+", "", out)
    out = re.sub(r"[^a-z\d\-~]+", "-", out)
    return out


def template_source_dir(template_id: str, templates_root: str | Path | None = None) -> Path:
    root = Path(templates_root) if templates_root is not None else DEFAULT_TEMPLATES_ROOT
    return root / f"{TEMPLATE_PREFIX}{template_id}"


def scaffold(
    target_dir: str,
    template_id: str,
    *,
    cwd: str | Path | None = None,
    templates_root: str | Path | None = None,
    catalog: Catalog | None = None,
) -> ScaffoldResult:
    """
    Copy the template for `template_id` into `<cwd>/<target_dir>`.

    Raises `ScaffoldError` for unknown ids, missing template sources and copy
    failures. A destination created before a copy failure is left in place.
    """
    catalog = catalog or default_catalog()
    if not catalog.is_valid(template_id):
        raise ScaffoldError(f"Unknown template: {template_id!r}")

    template_dir = template_source_dir(template_id, templates_root)
    if not template_dir.is_dir():
        raise ScaffoldError(f"Template directory not found: {template_dir}")

    base = Path(cwd) if cwd is not None else Path.cwd()
    root = (base / target_dir).resolve()

    package_name = root.name
    if not is_valid_package_name(package_name):
        package_name = to_valid_package_name(package_name)

    context = {
        "project_name": root.name,
        "package_name": package_name,
        "template": template_id,
    }

    logger.debug("copying %s -> %s", template_dir, root)
    try:
        root.mkdir(parents=True, exist_ok=True)
        files = render_template_dir(template_dir=template_dir, destination_dir=root, context=context)
    except (OSError, RenderError) as e:
        raise ScaffoldError(f"Failed to copy template {template_id!r} into {root}: {e}") from e

    return ScaffoldResult(root=root, template_dir=template_dir, package_name=package_name, files=files)


def next_steps(root: str | Path, cwd: str | Path | None = None) -> list[str]:
    """
    Commands the user should run next, `cd` first when the project is not the cwd.
    """
    base = Path(cwd).resolve() if cwd is not None else Path.cwd().resolve()
    root_path = Path(root).resolve()

    steps: list[str] = []
    if root_path != base:
        rel = os.path.relpath(root_path, base)
        steps.append(f'cd "{rel}"' if re.search(r"\s", rel) else f"cd {rel}")
    steps.append("npm install")
    steps.append("npm run dev")
    return steps
