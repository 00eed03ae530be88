"""Built-in sample dataset for previews, the CLI fallback and tests."""
from __future__ import annotations

from chem_quiz.catalog import Catalog
from chem_quiz.models import Compound, FunctionalGroup

DEMO_OPTION_COUNT = 4

_HYDROXYL = FunctionalGroup("Hydroxyl group", "ヒドロキシ基", "-OH")
_CARBOXYL = FunctionalGroup("Carboxyl group", "カルボキシ基", "-COOH")
_CARBONYL = FunctionalGroup("Carbonyl group", "カルボニル基", ">C=O")

_METHANOL = Compound(
    "methanol", "CH3OH", "CH4O",
    common_name="methyl alcohol", local_name="メタノール",
    series_general_formula="CnH2n+1OH", functional_groups=(_HYDROXYL,), smiles="CO",
)
_ETHANOL = Compound(
    "ethanol", "CH3-CH2-OH", "C2H6O",
    common_name="ethyl alcohol", local_name="エタノール",
    series_general_formula="CnH2n+1OH", functional_groups=(_HYDROXYL,), smiles="CCO",
)
_BUTANOL = Compound(
    "butan-1-ol", "CH3-(CH2)3-OH", "C4H10O",
    common_name="n-butanol", local_name="1-ブタノール",
    series_general_formula="CnH2n+1OH", functional_groups=(_HYDROXYL,), smiles="CCCCO",
)
_PROPAN_2_OL = Compound(
    "propan-2-ol", "(CH3)2CHOH", "C3H8O",
    common_name="isopropyl alcohol", local_name="2-プロパノール",
    functional_groups=(_HYDROXYL,), smiles="CC(O)C",
)
_GLYCEROL = Compound(
    "propane-1,2,3-triol", "HO-CH2-CH(OH)-CH2-OH", "C3H8O3",
    common_name="glycerol", local_name="グリセリン",
    functional_groups=(_HYDROXYL,), notes="Trihydric alcohol; viscous and sweet-tasting",
    smiles="OCC(O)CO",
)
_ACETIC_ACID = Compound(
    "ethanoic acid", "CH3COOH", "C2H4O2",
    common_name="acetic acid", local_name="酢酸",
    functional_groups=(_CARBOXYL,), smiles="CC(=O)O",
)
_PROPANOIC_ACID = Compound(
    "propanoic acid", "CH3-CH2-COOH", "C3H6O2",
    common_name="propionic acid", local_name="プロピオン酸",
    functional_groups=(_CARBOXYL,), smiles="CCC(=O)O",
)
_ACETONE = Compound(
    "propanone", "(CH3)2CO", "C3H6O",
    common_name="acetone", local_name="アセトン",
    functional_groups=(_CARBONYL,), smiles="CC(=O)C",
)
_BENZENE = Compound(
    "benzene", "C6H6", "C6H6",
    local_name="ベンゼン", notes="Planar aromatic ring of six carbons", smiles="c1ccccc1",
)
_TOLUENE = Compound(
    "methylbenzene", "C6H5-CH3", "C7H8",
    common_name="toluene", local_name="トルエン", smiles="Cc1ccccc1",
)
_ETHYNE = Compound(
    "ethyne", "HC≡CH", "C2H2",
    common_name="acetylene", local_name="アセチレン",
    series_general_formula="CnH2n-2", smiles="C#C",
)
_BUT_2_YNE = Compound(
    "but-2-yne", "CH3-C≡C-CH3", "C4H6",
    common_name="dimethylacetylene", local_name="2-ブチン",
    series_general_formula="CnH2n-2", smiles="CC#CC",
)
_ISOBUTANE = Compound(
    "2-methylpropane", "(CH3)2CH-CH3", "C4H10",
    common_name="isobutane", local_name="イソブタン",
    series_general_formula="CnH2n+2", smiles="CC(C)C",
)
_HEXANE = Compound(
    "hexane", "CH3-(CH2)4-CH3", "C6H14",
    local_name="ヘキサン", series_general_formula="CnH2n+2", smiles="CCCCCC",
)
_SODIUM_CHLORIDE = Compound(
    "sodium chloride", "NaCl", "NaCl",
    common_name="table salt", local_name="塩化ナトリウム", smiles="[Na+].[Cl-]",
)
_POTASSIUM_NITRATE = Compound(
    "potassium nitrate", "KNO3", "KNO3",
    common_name="saltpetre", local_name="硝酸カリウム",
)
_SODIUM_CARBONATE = Compound(
    "sodium carbonate", "Na2CO3", "Na2CO3",
    common_name="soda ash", local_name="炭酸ナトリウム",
    smiles="[Na+].[Na+].[O-]C(=O)[O-]",
)
_CALCIUM_CARBONATE = Compound(
    "calcium carbonate", "CaCO3", "CaCO3",
    common_name="calcite", local_name="炭酸カルシウム",
    smiles="[Ca+2].[O-]C(=O)[O-]",
)

_PRIMARY_ALCOHOLS = ("Organic", "Alcohols", "Primary alcohols")
_SECONDARY_ALCOHOLS = ("Organic", "Alcohols", "Secondary alcohols")
_POLYOLS = ("Organic", "Alcohols", "Polyols")
_CARBOXYLIC_ACIDS = ("Organic", "Carboxylic acids")
_KETONES = ("Organic", "Ketones")
_ARENES = ("Organic", "Arenes")
_ALKANES = ("Organic", "Hydrocarbons", "Alkanes")
_ALKYNES = ("Organic", "Hydrocarbons", "Alkynes")
_SALTS = ("Inorganic", "Salts")
_CARBONATES = ("Inorganic", "Salts", "Carbonates")
_SOLVENTS = ("Laboratory solvents",)


def demo_entries() -> list[tuple[Compound, tuple[str, ...]]]:
    return [
        (_METHANOL, _PRIMARY_ALCOHOLS),
        (_ETHANOL, _PRIMARY_ALCOHOLS),
        (_BUTANOL, _PRIMARY_ALCOHOLS),
        (_PROPAN_2_OL, _SECONDARY_ALCOHOLS),
        (_GLYCEROL, _POLYOLS),
        (_ACETIC_ACID, _CARBOXYLIC_ACIDS),
        (_PROPANOIC_ACID, _CARBOXYLIC_ACIDS),
        (_ACETONE, _KETONES),
        (_BENZENE, _ARENES),
        (_TOLUENE, _ARENES),
        (_ISOBUTANE, _ALKANES),
        (_HEXANE, _ALKANES),
        (_ETHYNE, _ALKYNES),
        (_BUT_2_YNE, _ALKYNES),
        (_SODIUM_CHLORIDE, _SALTS),
        (_POTASSIUM_NITRATE, _SALTS),
        (_SODIUM_CARBONATE, _CARBONATES),
        (_CALCIUM_CARBONATE, _CARBONATES),
        # Shared references: these also appear under Organic
        (_ETHANOL, _SOLVENTS),
        (_ACETONE, _SOLVENTS),
        (_HEXANE, _SOLVENTS),
        (_TOLUENE, _SOLVENTS),
    ]


def demo_compounds() -> list[Compound]:
    return list(dict.fromkeys(compound for compound, _ in demo_entries()))


def demo_catalog() -> Catalog:
    return Catalog.from_entries(demo_entries())
