from __future__ import annotations

from pathlib import Path

import pytest

from create_vite.catalog import Catalog, CatalogError, ColorTag, load_catalog, parse_catalog


def test_template_ids_are_unique(catalog: Catalog) -> None:
    ids = catalog.all_template_ids()
    assert len(ids) == len(set(ids))


def test_flattening_keeps_framework_then_variant_order(catalog: Catalog) -> None:
    expected = [v.id for fw in catalog.frameworks() for v in fw.variants]
    assert catalog.all_template_ids() == expected
    assert expected[:2] == ["vanilla-ts", "vanilla"]
    assert expected[4:8] == ["react-ts", "react-swc-ts", "react", "react-swc"]


def test_packaged_catalog_contents(catalog: Catalog) -> None:
    assert [fw.id for fw in catalog.frameworks()] == [
        "vanilla",
        "vue",
        "react",
        "preact",
        "lit",
        "svelte",
        "solid",
        "qwik",
    ]
    assert len(catalog.all_template_ids()) == 18
    lit = catalog.get_framework("lit")
    assert lit is not None
    assert lit.color is ColorTag.RED_BRIGHT


def test_is_valid(catalog: Catalog) -> None:
    assert catalog.is_valid("vue-ts")
    assert not catalog.is_valid("vue-typescript")
    assert not catalog.is_valid("react-swc-")
    assert not catalog.is_valid(None)


def test_get_framework_unknown(catalog: Catalog) -> None:
    assert catalog.get_framework("angular") is None


def test_every_template_has_a_directory(catalog: Catalog) -> None:
    from create_vite.scaffolder import template_source_dir

    for template_id in catalog.all_template_ids():
        assert template_source_dir(template_id).is_dir(), template_id


def _fw(fw_id: str, *variant_ids: str, color: str = "green") -> dict:
    return {
        "id": fw_id,
        "display": fw_id.title(),
        "color": color,
        "variants": [{"id": v, "display": v, "color": "blue"} for v in variant_ids],
    }


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(CatalogError, match="Duplicate template id"):
        parse_catalog({"frameworks": [_fw("a", "x"), _fw("b", "x")]})


def test_empty_variants_rejected() -> None:
    with pytest.raises(CatalogError, match="no variants"):
        parse_catalog({"frameworks": [_fw("a")]})


def test_unknown_color_rejected() -> None:
    with pytest.raises(CatalogError, match="unknown color"):
        parse_catalog({"frameworks": [_fw("a", "x", color="chartreuse")]})


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(CatalogError):
        parse_catalog(["not", "a", "mapping"])


def test_load_catalog_from_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "frameworks:\n"
        "  - id: mini\n"
        "    display: Mini\n"
        "    color: magenta\n"
        "    variants:\n"
        "      - {id: mini-ts, display: TypeScript, color: blue}\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.all_template_ids() == ["mini-ts"]
    assert catalog.frameworks()[0].color is ColorTag.MAGENTA


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="does not exist"):
        load_catalog(tmp_path / "nope.yaml")
