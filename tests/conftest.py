"""Shared test fixtures."""
from __future__ import annotations

import json

import pytest

from chem_quiz.catalog import Catalog
from chem_quiz.models import Compound, FunctionalGroup


@pytest.fixture
def sample_compounds():
    """Five compounds with distinct names and structures."""
    return [
        Compound(
            "ethanol", "CH3-CH2-OH", "C2H6O",
            common_name="ethyl alcohol", local_name="エタノール", smiles="CCO",
        ),
        Compound(
            "propan-2-ol", "(CH3)2CHOH", "C3H8O",
            common_name="isopropyl alcohol", local_name="イソプロパノール", smiles="CC(O)C",
        ),
        Compound(
            "ethanoic acid", "CH3COOH", "C2H4O2",
            common_name="acetic acid", local_name="酢酸", smiles="CC(=O)O",
        ),
        Compound("benzene", "C6H6", "C6H6", local_name="ベンゼン", smiles="c1ccccc1"),
        Compound(
            "methanol", "CH3OH", "CH4O",
            common_name="methyl alcohol", local_name="メタノール", smiles="CO",
        ),
    ]


@pytest.fixture
def ethanol():
    return Compound(
        "ethanol", "CH3-CH2-OH", "C2H6O",
        common_name="ethyl alcohol",
        local_name="エタノール",
        functional_groups=(FunctionalGroup("Hydroxyl group", "ヒドロキシ基", "-OH"),),
        smiles="CCO",
    )


@pytest.fixture
def sample_catalog(sample_compounds):
    """Organic/Alcohols/{Primary,Secondary}, Organic/Acids, Organic/Arenes, Inorganic/Salts."""
    ethanol, propan_2_ol, acid, benzene, methanol = sample_compounds
    salt = Compound("sodium chloride", "NaCl", "NaCl", common_name="table salt")
    return Catalog.from_entries([
        (ethanol, ("Organic", "Alcohols", "Primary")),
        (methanol, ("Organic", "Alcohols", "Primary")),
        (propan_2_ol, ("Organic", "Alcohols", "Secondary")),
        (acid, ("Organic", "Acids")),
        (benzene, ("Organic", "Arenes")),
        (salt, ("Inorganic", "Salts")),
    ])


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False))


@pytest.fixture
def catalog_dir(tmp_path, sample_compounds):
    """A catalog directory with a manifest and two category data files."""
    root = tmp_path / "catalog"
    _write_json(root / "index.json", {
        "roots": [
            {
                "label": "Organic",
                "children": [
                    {
                        "label": "Alcohols",
                        "file": "organic/alcohols/compounds.json",
                    },
                    {
                        "label": "Other",
                        "file": "organic/other/compounds.json",
                    },
                ],
            },
        ],
    })
    ethanol, propan_2_ol, acid, benzene, methanol = sample_compounds
    _write_json(
        root / "organic" / "alcohols" / "compounds.json",
        {"compounds": [c.to_dict() for c in (ethanol, propan_2_ol, methanol)]},
    )
    _write_json(
        root / "organic" / "other" / "compounds.json",
        {"compounds": [c.to_dict() for c in (acid, benzene, ethanol)]},
    )
    return root
