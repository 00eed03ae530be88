"""Category tree over a shared compound list.

Categories live in a flat arena (``Catalog._nodes``) and refer to their
children and compounds by index, so one compound can be listed under any
number of categories without being owned by one of them.

Lookup paths resolve to a node and return the compounds of its whole
subtree: the node's own compounds first, then each child subtree in
declaration order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from chem_quiz.models import CatalogNode, Compound
from chem_quiz.parsers.compound_parser import parse_compound_file
from chem_quiz.parsers.manifest_parser import manifest_leaves, parse_manifest_file

_log = logging.getLogger("chem_quiz.catalog")

MANIFEST_NAME = "index.json"
ROOT = 0


def format_path(path: Sequence[str]) -> str:
    return " / ".join(path)


class CatalogError(Exception):
    pass


class EmptyPathError(CatalogError):
    def __init__(self):
        super().__init__("category path must contain at least one segment")


class CategoryNotFoundError(CatalogError):
    """No category named *segment* along *path*.

    ``path`` is the full requested path as a tuple, whatever sequence type the
    caller passed, so it compares equal to the paths ``available_paths`` returns.
    """

    def __init__(self, path: Sequence[str], segment: str):
        self.path = tuple(path)
        self.segment = segment
        super().__init__(f"no category {segment!r} in path: {format_path(self.path)}")


class CatalogLoadError(CatalogError):
    def __init__(self, source: Path, reason: str):
        self.source = source
        super().__init__(f"failed to load {source}: {reason}")


@dataclass
class _Category:
    name: str
    children: dict[str, int] = field(default_factory=dict)  # name -> node index
    compounds: list[int] = field(default_factory=list)  # indices into Catalog._compounds


class Catalog:
    def __init__(self):
        self._nodes: list[_Category] = [_Category(name="")]
        self._compounds: list[Compound] = []
        self._compound_ids: dict[Compound, int] = {}

    def __len__(self) -> int:
        return len(self._compounds)

    @property
    def category_count(self) -> int:
        return len(self._nodes) - 1

    # -- construction ------------------------------------------------------

    def add_category(self, path: Sequence[str]) -> int:
        """Create the category at *path* (and any missing parents); return its index."""
        if not path:
            raise EmptyPathError()
        node = ROOT
        for segment in path:
            children = self._nodes[node].children
            if segment not in children:
                children[segment] = len(self._nodes)
                self._nodes.append(_Category(name=segment))
            node = children[segment]
        return node

    def add_compound(self, path: Sequence[str], compound: Compound) -> None:
        node = self.add_category(path)
        cid = self._compound_ids.get(compound)
        if cid is None:
            cid = len(self._compounds)
            self._compounds.append(compound)
            self._compound_ids[compound] = cid
        refs = self._nodes[node].compounds
        if cid not in refs:
            refs.append(cid)

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[Compound, Sequence[str]]]) -> Catalog:
        catalog = cls()
        for compound, path in entries:
            catalog.add_compound(path, compound)
        return catalog

    @classmethod
    def from_directory(cls, directory: str | Path) -> Catalog:
        """Load ``index.json`` and every category data file it references."""
        directory = Path(directory)
        manifest_path = directory / MANIFEST_NAME
        try:
            roots = parse_manifest_file(manifest_path)
        except (OSError, ValueError) as e:
            raise CatalogLoadError(manifest_path, str(e)) from e

        catalog = cls()
        for root in roots:
            catalog._add_tree(root, ())
        for leaf in manifest_leaves(roots):
            data_path = directory / leaf.file
            try:
                compounds = parse_compound_file(data_path)
            except (OSError, ValueError, KeyError, TypeError) as e:
                raise CatalogLoadError(data_path, str(e)) from e
            _log.debug("  %s: %d compounds", format_path(leaf.path), len(compounds))
            for compound in compounds:
                catalog.add_compound(leaf.path, compound)
        _log.info(
            "Loaded %d compounds in %d categories from %s",
            len(catalog), catalog.category_count, directory,
        )
        return catalog

    def _add_tree(self, node: CatalogNode, prefix: tuple[str, ...]) -> None:
        """Create every manifest category, including ones without a data file."""
        path = prefix + (node.label,)
        self.add_category(path)
        for child in node.children:
            self._add_tree(child, path)

    # -- lookup ------------------------------------------------------------

    def compounds_for(self, path: Sequence[str]) -> list[Compound]:
        path = tuple(path)
        if not path:
            raise EmptyPathError()
        node = self._resolve(path)
        return [self._compounds[cid] for cid in self._subtree_ids(node)]

    def compounds_for_paths(self, paths: Iterable[Sequence[str]]) -> list[Compound]:
        """Union of several selections, duplicates dropped, first-seen order kept."""
        ids: dict[int, None] = {}
        for path in paths:
            path = tuple(path)
            if not path:
                raise EmptyPathError()
            for cid in self._subtree_ids(self._resolve(path)):
                ids.setdefault(cid, None)
        return [self._compounds[cid] for cid in ids]

    def children(self, path: Sequence[str] = ()) -> list[str]:
        node = self._resolve(tuple(path)) if path else ROOT
        return list(self._nodes[node].children)

    def available_paths(self) -> list[tuple[str, ...]]:
        """Paths of every category that directly lists compounds."""
        paths: list[tuple[str, ...]] = []
        stack: list[tuple[int, tuple[str, ...]]] = [(ROOT, ())]
        while stack:
            node, prefix = stack.pop()
            category = self._nodes[node]
            if category.compounds:
                paths.append(prefix)
            for name, child in category.children.items():
                stack.append((child, prefix + (name,)))
        return sorted(paths)

    def all_compounds(self) -> list[Compound]:
        return list(self._compounds)

    def _resolve(self, path: tuple[str, ...]) -> int:
        node = ROOT
        for segment in path:
            child = self._nodes[node].children.get(segment)
            if child is None:
                raise CategoryNotFoundError(path, segment)
            node = child
        return node

    def _subtree_ids(self, node: int) -> list[int]:
        ids: dict[int, None] = {}
        stack = [node]
        while stack:
            category = self._nodes[stack.pop()]
            for cid in category.compounds:
                ids.setdefault(cid, None)
            stack.extend(reversed(category.children.values()))
        return list(ids)
