from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Sequence

if TYPE_CHECKING:
    from chem_quiz.quiz_generator import QuizMode


@dataclass(frozen=True)
class FunctionalGroup:
    name_en: str
    name_ja: str
    pattern: str

    @classmethod
    def from_dict(cls, d: dict) -> FunctionalGroup:
        return cls(
            name_en=d["name_en"],
            name_ja=d.get("name_ja", ""),
            pattern=d.get("pattern", ""),
        )

    def to_dict(self) -> dict:
        return {"name_en": self.name_en, "name_ja": self.name_ja, "pattern": self.pattern}


@dataclass(frozen=True)
class Compound:
    iupac_name: str
    skeletal_formula: str
    molecular_formula: str
    common_name: str | None = None
    local_name: str | None = None
    series_general_formula: str | None = None
    functional_groups: tuple[FunctionalGroup, ...] = ()
    notes: str | None = None
    smiles: str | None = None  # rendering only

    def __post_init__(self):
        if not self.iupac_name:
            raise ValueError("compound name must not be empty")
        for field_name in ("skeletal_formula", "molecular_formula"):
            if not getattr(self, field_name):
                raise ValueError(f"{self.iupac_name}: {field_name} must not be empty")
        # Accept lists from callers; stored as a tuple so the record stays hashable
        if not isinstance(self.functional_groups, tuple):
            object.__setattr__(self, "functional_groups", tuple(self.functional_groups))

    @property
    def name(self) -> str:
        return self.iupac_name

    @property
    def has_renderable_structure(self) -> bool:
        return bool(self.smiles)

    def english_label(self) -> str:
        """IUPAC name, with the common name in parentheses when it differs."""
        if self.common_name and self.common_name != self.iupac_name:
            return f"{self.iupac_name} ({self.common_name})"
        return self.iupac_name

    def display_name(self) -> str:
        if self.local_name:
            return f"{self.english_label()} / {self.local_name}"
        return self.english_label()

    def display_structure(self) -> str:
        return f"{self.skeletal_formula} ({self.molecular_formula})"

    def render_structure(self) -> str:
        """SMILES for a structure renderer, or the plain-text structure."""
        if self.smiles:
            return self.smiles
        return self.display_structure()

    def hint(self) -> str | None:
        if self.series_general_formula:
            return f"Series formula: {self.series_general_formula}"
        if self.functional_groups:
            groups = ", ".join(f"{g.name_en} ({g.pattern})" for g in self.functional_groups)
            return f"Functional groups: {groups}"
        if self.notes:
            return self.notes
        if self.molecular_formula:
            return f"Molecular formula: {self.molecular_formula}"
        return None

    def __str__(self) -> str:
        return f"{self.display_name()}: {self.display_structure()}"

    @classmethod
    def from_dict(cls, d: dict) -> Compound:
        return cls(
            iupac_name=d["iupac_name"],
            skeletal_formula=d["skeletal_formula"],
            molecular_formula=d["molecular_formula"],
            common_name=d.get("common_name"),
            local_name=d.get("local_name"),
            series_general_formula=d.get("series_general_formula"),
            functional_groups=tuple(
                FunctionalGroup.from_dict(g) for g in d.get("functional_groups") or []
            ),
            notes=d.get("notes"),
            smiles=d.get("smiles"),
        )

    def to_dict(self) -> dict:
        return {
            "iupac_name": self.iupac_name,
            "common_name": self.common_name,
            "local_name": self.local_name,
            "skeletal_formula": self.skeletal_formula,
            "molecular_formula": self.molecular_formula,
            "series_general_formula": self.series_general_formula,
            "functional_groups": [g.to_dict() for g in self.functional_groups],
            "notes": self.notes,
            "smiles": self.smiles,
        }


@dataclass(frozen=True)
class CatalogNode:
    label: str
    file: str | None = None
    children: tuple[CatalogNode, ...] = ()


@dataclass(frozen=True)
class CatalogLeaf:
    path: tuple[str, ...]
    file: str


@dataclass(frozen=True)
class QuizItem:
    mode: QuizMode
    prompt: str
    options: tuple[str, ...]
    correct_index: int
    compound: Compound  # prompt compound, used for hints

    @property
    def answer(self) -> str:
        return self.options[self.correct_index]

    def is_correct(self, choice: int) -> bool:
        return choice == self.correct_index


@dataclass(frozen=True)
class Quiz:
    mode: QuizMode
    items: tuple[QuizItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[QuizItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> QuizItem:
        return self.items[index]

    def score(self, choices: Sequence[int | None]) -> SessionScore:
        """Grade one choice per item; ``None`` marks a skipped item."""
        if len(choices) != len(self.items):
            raise ValueError(f"expected {len(self.items)} choices, got {len(choices)}")
        result = SessionScore()
        for item, choice in zip(self.items, choices):
            result.record(choice is not None and item.is_correct(choice))
        return result


@dataclass
class SessionScore:
    total: int = 0
    correct: int = 0

    def record(self, was_correct: bool) -> None:
        self.total += 1
        if was_correct:
            self.correct += 1

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return 0.0
        return round(self.correct / self.total * 100, 1)

    def to_dict(self) -> dict:
        return {"total": self.total, "correct": self.correct, "accuracy": self.accuracy}
