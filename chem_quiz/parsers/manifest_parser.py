"""Parse the catalog manifest (``index.json``) into CatalogNode trees.

  {"roots": [{"label": "Organic", "file": "...",
              "children": [...]}]}

``label`` is the category name used in lookup paths; ``file`` points at a
category data file relative to the manifest's directory.
"""
from __future__ import annotations

import json
from pathlib import Path

from chem_quiz.models import CatalogLeaf, CatalogNode


def parse_manifest_file(path: Path) -> list[CatalogNode]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict) or not isinstance(raw.get("roots"), list):
        raise ValueError("manifest must be an object with a 'roots' list")
    return [_parse_node(n, (i,)) for i, n in enumerate(raw["roots"])]


def _parse_node(raw: dict, position: tuple[int, ...]) -> CatalogNode:
    where = ".".join(str(p) for p in position)
    if not isinstance(raw, dict) or not raw.get("label"):
        raise ValueError(f"manifest node {where}: missing label")
    children = raw.get("children") or []
    labels = [c.get("label") for c in children if isinstance(c, dict)]
    dupes = sorted({l for l in labels if labels.count(l) > 1})
    if dupes:
        raise ValueError(f"manifest node {where} ({raw['label']}): duplicate children {dupes}")
    return CatalogNode(
        label=raw["label"],
        file=raw.get("file"),
        children=tuple(_parse_node(c, position + (i,)) for i, c in enumerate(children)),
    )


def manifest_leaves(roots: list[CatalogNode]) -> list[CatalogLeaf]:
    """Flatten manifest trees into (path, file) leaves in pre-order."""
    leaves: list[CatalogLeaf] = []
    for node in roots:
        _gather_leaves(node, (), leaves)
    return leaves


def _gather_leaves(node: CatalogNode, prefix: tuple[str, ...], leaves: list[CatalogLeaf]) -> None:
    path = prefix + (node.label,)
    if node.file:
        leaves.append(CatalogLeaf(path=path, file=node.file))
    for child in node.children:
        _gather_leaves(child, path, leaves)
