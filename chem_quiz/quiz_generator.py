"""Build multiple-choice quizzes from a slice of compounds."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, MutableSequence, Protocol, Sequence, TypeVar

from chem_quiz.models import Quiz, QuizItem

if TYPE_CHECKING:
    from chem_quiz.models import Compound

_log = logging.getLogger("chem_quiz.quiz")

DEFAULT_OPTION_COUNT = 4
MIN_OPTION_COUNT = 2

T = TypeVar("T")


class RandomSource(Protocol):
    """The two draws the generator needs; ``random.Random`` provides both."""

    def randrange(self, stop: int) -> int:
        ...

    def shuffle(self, x: MutableSequence) -> None:
        ...


class CompoundField(Enum):
    NAME = "name"
    STRUCTURE = "structure"
    MOLECULAR_FORMULA = "molecular_formula"

    def render(self, compound: Compound) -> str:
        if self is CompoundField.NAME:
            return compound.display_name()
        if self is CompoundField.STRUCTURE:
            return compound.display_structure()
        return compound.molecular_formula


class QuizMode(Enum):
    """Which compound field is shown as the prompt and which one is asked for."""

    NAME_TO_STRUCTURE = (CompoundField.NAME, CompoundField.STRUCTURE)
    STRUCTURE_TO_NAME = (CompoundField.STRUCTURE, CompoundField.NAME)
    NAME_TO_FORMULA = (CompoundField.NAME, CompoundField.MOLECULAR_FORMULA)
    FORMULA_TO_NAME = (CompoundField.MOLECULAR_FORMULA, CompoundField.NAME)

    @property
    def prompt_field(self) -> CompoundField:
        return self.value[0]

    @property
    def option_field(self) -> CompoundField:
        return self.value[1]

    @property
    def slug(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, text: str) -> QuizMode:
        """Accept ``name-to-structure``, ``name_to_structure`` or the member name."""
        key = text.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(m.slug for m in cls)
            raise ValueError(f"unknown quiz mode {text!r} (choose from: {choices})") from None


class QuizError(Exception):
    pass


class InvalidQuizArgumentError(QuizError, ValueError):
    pass


class InsufficientCompoundsError(QuizError):
    def __init__(self, required: int, available: int, message: str | None = None):
        self.required = required
        self.available = available
        super().__init__(
            message or f"requires at least {required} compounds but only {available} provided"
        )


class NotEnoughCompoundsError(InsufficientCompoundsError):
    pass


class InsufficientUniqueOptionsError(InsufficientCompoundsError):
    def __init__(self, required: int, unique: int):
        super().__init__(
            required,
            unique,
            f"requires at least {required} unique options but only {unique} available",
        )

    @property
    def unique(self) -> int:
        return self.available


def eligible_pool(compounds: Sequence[Compound], mode: QuizMode) -> list[Compound]:
    """Drop entries whose prompt or option text repeats an earlier entry's."""
    seen_prompts: set[str] = set()
    seen_options: set[str] = set()
    pool: list[Compound] = []
    for compound in compounds:
        prompt = mode.prompt_field.render(compound)
        option = mode.option_field.render(compound)
        if prompt in seen_prompts or option in seen_options:
            _log.debug("Skipping %s: %s text already used", compound.name, mode.slug)
            continue
        seen_prompts.add(prompt)
        seen_options.add(option)
        pool.append(compound)
    return pool


def _sample(rng: RandomSource, population: Sequence[T], k: int) -> list[T]:
    """Pick *k* items without replacement (partial Fisher-Yates)."""
    pool = list(population)
    for i in range(k):
        j = i + rng.randrange(len(pool) - i)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:k]


def _build_item(
    rng: RandomSource,
    compound: Compound,
    pool: list[Compound],
    mode: QuizMode,
    option_count: int,
) -> QuizItem:
    others = [c for c in pool if c is not compound]
    distractors = _sample(rng, others, option_count - 1)

    render = mode.option_field.render
    options = [(True, render(compound))] + [(False, render(c)) for c in distractors]
    rng.shuffle(options)
    correct_index = next(i for i, (is_answer, _) in enumerate(options) if is_answer)

    return QuizItem(
        mode=mode,
        prompt=mode.prompt_field.render(compound),
        options=tuple(text for _, text in options),
        correct_index=correct_index,
        compound=compound,
    )


def generate_quiz(
    rng: RandomSource,
    compounds: Sequence[Compound],
    mode: QuizMode,
    count: int,
    option_count: int = DEFAULT_OPTION_COUNT,
) -> Quiz:
    """Generate *count* questions with distinct prompt compounds.

    Every item carries *option_count* options that are pairwise distinct as
    displayed, exactly one of which belongs to the prompt compound. Compounds
    whose prompt or option text collides with an earlier compound's are
    treated as one.

    All randomness comes from *rng*, drawn in a fixed order, so the same seed
    and input always yield the same quiz. There are no retries: the call
    either succeeds or raises.

    Raises ``InvalidQuizArgumentError`` for a bad mode, a non-integer or
    negative count, or fewer than two options, and an
    ``InsufficientCompoundsError`` subclass when the compounds cannot fill the
    requested quiz.
    """
    if not isinstance(mode, QuizMode):
        raise InvalidQuizArgumentError(f"unsupported quiz mode: {mode!r}")
    for label, value in (("question count", count), ("option count", option_count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidQuizArgumentError(f"{label} must be an integer (got {value!r})")
    if count < 0:
        raise InvalidQuizArgumentError(f"question count must not be negative (got {count})")
    if option_count < MIN_OPTION_COUNT:
        raise InvalidQuizArgumentError(f"option count must be at least {MIN_OPTION_COUNT}")

    if count == 0:
        return Quiz(mode=mode)

    if len(compounds) < option_count:
        raise NotEnoughCompoundsError(required=option_count, available=len(compounds))

    pool = eligible_pool(compounds, mode)
    if len(pool) < option_count:
        raise InsufficientUniqueOptionsError(required=option_count, unique=len(pool))
    if len(pool) < count:
        raise NotEnoughCompoundsError(
            required=count,
            available=len(pool),
            message=f"requested {count} questions but only {len(pool)} distinct compounds available",
        )

    prompts = _sample(rng, pool, count)
    items = tuple(_build_item(rng, c, pool, mode, option_count) for c in prompts)
    _log.info(
        "Generated %d %s questions from %d compounds (%d eligible)",
        len(items), mode.slug, len(compounds), len(pool),
    )
    return Quiz(mode=mode, items=items)


def generate_question(
    rng: RandomSource,
    compounds: Sequence[Compound],
    mode: QuizMode,
    option_count: int = DEFAULT_OPTION_COUNT,
) -> QuizItem:
    """Generate a single question; same rules and errors as ``generate_quiz``."""
    return generate_quiz(rng, compounds, mode, 1, option_count=option_count)[0]
