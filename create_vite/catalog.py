"""
catalog.py

Responsibility: Load the static framework/variant catalog into a typed model.

The catalog is plain data: colours are stored as `ColorTag` values and only
turned into terminal styles by `display.py`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "catalog.yaml"


class CatalogError(ValueError):
    pass


class ColorTag(str, Enum):
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"
    RED = "red"
    RED_BRIGHT = "red_bright"
    BLUE = "blue"
    BLUE_BRIGHT = "blue_bright"


@dataclass(frozen=True)
class Variant:
    id: str
    display_name: str
    color: ColorTag


@dataclass(frozen=True)
class Framework:
    id: str
    display_name: str
    color: ColorTag
    variants: tuple[Variant, ...]


class Catalog:
    """Ordered, read-only collection of frameworks."""

    def __init__(self, frameworks: tuple[Framework, ...]) -> None:
        ids: list[str] = []
        for fw in frameworks:
            if not fw.variants:
                raise CatalogError(f"Framework {fw.id!r} has no variants.")
            ids.extend(v.id for v in fw.variants)

        seen: set[str] = set()
        for template_id in ids:
            if template_id in seen:
                raise CatalogError(f"Duplicate template id: {template_id!r}")
            seen.add(template_id)

        self._frameworks = frameworks
        self._ids = tuple(ids)
        self._id_set = frozenset(ids)

    def frameworks(self) -> tuple[Framework, ...]:
        return self._frameworks

    def all_template_ids(self) -> list[str]:
        """
        Flattened variant ids: framework order first, then variant order.
        """
        return list(self._ids)

    def is_valid(self, template_id: str | None) -> bool:
        return template_id is not None and template_id in self._id_set

    def get_framework(self, framework_id: str) -> Framework | None:
        for fw in self._frameworks:
            if fw.id == framework_id:
                return fw
        return None


def _require_str(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise CatalogError(f"{where}: `{key}` is required.")
    return str(value).strip()


def _parse_color(raw: dict[str, Any], where: str) -> ColorTag:
    value = _require_str(raw, "color", where)
    try:
        return ColorTag(value)
    except ValueError as e:
        raise CatalogError(f"{where}: unknown color {value!r}") from e


def _parse_variant(raw: Any, where: str) -> Variant:
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: variant must be a mapping.")
    return Variant(
        id=_require_str(raw, "id", where),
        display_name=_require_str(raw, "display", where),
        color=_parse_color(raw, where),
    )


def _parse_framework(raw: Any, index: int) -> Framework:
    if not isinstance(raw, dict):
        raise CatalogError(f"frameworks[{index}] must be a mapping.")
    fw_id = _require_str(raw, "id", f"frameworks[{index}]")
    where = f"framework {fw_id!r}"

    variants_raw = raw.get("variants") or []
    if not isinstance(variants_raw, list):
        raise CatalogError(f"{where}: `variants` must be a list.")

    return Framework(
        id=fw_id,
        display_name=_require_str(raw, "display", where),
        color=_parse_color(raw, where),
        variants=tuple(_parse_variant(v, f"{where} variant[{i}]") for i, v in enumerate(variants_raw)),
    )


def parse_catalog(data: Any) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a mapping/object at the top level.")
    frameworks_raw = data.get("frameworks")
    if not isinstance(frameworks_raw, list) or not frameworks_raw:
        raise CatalogError("Catalog must define a non-empty `frameworks` list.")
    return Catalog(tuple(_parse_framework(raw, i) for i, raw in enumerate(frameworks_raw)))


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Load a catalog YAML file. Defaults to the catalog shipped with the package.
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    if not catalog_path.exists():
        raise CatalogError(f"Catalog file does not exist: {catalog_path}")
    return parse_catalog(yaml.safe_load(catalog_path.read_text(encoding="utf-8")))


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return load_catalog()
