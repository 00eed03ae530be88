"""Parse a category data file (``compounds.json``) into Compound objects.

File shape::

  {"compounds": [{"iupac_name": ..., "skeletal_formula": ...,
                  "molecular_formula": ..., ...}, ...]}

Optional keys (common_name, local_name, series_general_formula,
functional_groups, notes, smiles) default to empty.
"""
from __future__ import annotations

import json
from pathlib import Path

from chem_quiz.models import Compound

REQUIRED_KEYS = ("iupac_name", "skeletal_formula", "molecular_formula")


def parse_compound_file(path: Path) -> list[Compound]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    return parse_compound_list(raw)


def parse_compound_list(raw: dict) -> list[Compound]:
    if not isinstance(raw, dict) or not isinstance(raw.get("compounds"), list):
        raise ValueError("expected an object with a 'compounds' list")

    compounds: list[Compound] = []
    for i, record in enumerate(raw["compounds"]):
        if not isinstance(record, dict):
            raise ValueError(f"compound[{i}]: expected object, got {type(record).__name__}")
        missing = [k for k in REQUIRED_KEYS if not record.get(k)]
        if missing:
            label = record.get("iupac_name") or "?"
            raise ValueError(f"compound[{i}] ({label}): missing {', '.join(missing)}")
        compounds.append(Compound.from_dict(record))
    return compounds
