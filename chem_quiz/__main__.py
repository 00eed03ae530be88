"""CLI entry point for chem-quiz.

Usage:
  python -m chem_quiz paths [--demo] [--catalog DIR]
  python -m chem_quiz list [PATH ...]
  python -m chem_quiz quiz [PATH ...] [--mode MODE] [--count N] [--options K] [--seed S]
  python -m chem_quiz play [PATH ...] [--mode MODE] [--count N] [--options K] [--seed S]
  python -m chem_quiz config [KEY VALUE]

PATH is a category path such as ``Organic/Alcohols``; several paths are
merged, no path means the whole catalog. MODE is one of name-to-structure,
structure-to-name, name-to-formula, formula-to-name.
"""
from __future__ import annotations

import json
import logging
import random
import sys
from pathlib import Path

from chem_quiz.catalog import MANIFEST_NAME, Catalog, CatalogError, format_path
from chem_quiz.config import DEFAULTS, Settings, load_settings, save_settings
from chem_quiz.models import Compound, Quiz
from chem_quiz.quiz_generator import QuizError, QuizMode, eligible_pool, generate_quiz

_log = logging.getLogger("chem_quiz.cli")

VALUE_FLAGS = ("--mode", "--count", "--options", "--seed", "--catalog")
COMMANDS = ("paths", "list", "quiz", "play", "config")


def main():
    args = sys.argv[1:]
    command = args[0] if args else "paths"

    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(name)s | %(message)s")

    handlers = {
        "paths": _paths,
        "list": _list,
        "quiz": _quiz,
        "play": _play,
        "config": _config,
    }
    handler = handlers.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print(f"Commands: {', '.join(COMMANDS)}")
        sys.exit(1)

    try:
        handler(args[1:], settings)
    except (CatalogError, QuizError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str | None) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _positional(args: list[str]) -> list[str]:
    """Arguments that are neither flags nor flag values."""
    result = []
    skip = False
    for a in args:
        if skip:
            skip = False
            continue
        if a in VALUE_FLAGS:
            skip = True
            continue
        if a.startswith("--"):
            continue
        result.append(a)
    return result


def _parse_path(text: str) -> tuple[str, ...]:
    return tuple(s.strip() for s in text.split("/") if s.strip())


def _load_catalog(args: list[str], settings: Settings) -> Catalog:
    from chem_quiz.demo import demo_catalog

    if "--demo" in args:
        return demo_catalog()
    directory = Path(_parse_flag(args, "--catalog", str(settings.catalog_full_path)))
    if not (directory / MANIFEST_NAME).exists():
        _log.info("No catalog at %s, using the demo dataset", directory)
        return demo_catalog()
    return Catalog.from_directory(directory)


def _select(args: list[str], catalog: Catalog) -> list[Compound]:
    paths = [_parse_path(p) for p in _positional(args)]
    if not paths:
        return catalog.all_compounds()
    return catalog.compounds_for_paths(paths)


def _build_quiz(args: list[str], settings: Settings) -> Quiz:
    catalog = _load_catalog(args, settings)
    compounds = _select(args, catalog)

    mode_flag = _parse_flag(args, "--mode", None)
    mode = QuizMode.parse(mode_flag) if mode_flag is not None else settings.quiz_mode_enum
    option_count = int(_parse_flag(args, "--options", str(settings.option_count)))
    count_flag = _parse_flag(args, "--count", None)
    if count_flag is None:
        count = min(settings.question_count, len(eligible_pool(compounds, mode)))
    else:
        count = int(count_flag)
    seed_flag = _parse_flag(args, "--seed", None)
    seed = int(seed_flag) if seed_flag is not None else settings.seed

    return generate_quiz(random.Random(seed), compounds, mode, count, option_count=option_count)


def _paths(args: list[str], settings: Settings):
    catalog = _load_catalog(args, settings)
    for path in catalog.available_paths():
        print(f"{format_path(path):50s} {len(catalog.compounds_for(path)):3d}")


def _list(args: list[str], settings: Settings):
    catalog = _load_catalog(args, settings)
    compounds = _select(args, catalog)
    for compound in compounds:
        print(f"  {compound}")
    print(f"\n{len(compounds)} compounds")


def _quiz(args: list[str], settings: Settings):
    quiz = _build_quiz(args, settings)
    for n, item in enumerate(quiz, 1):
        print(f"Q{n}. {item.prompt}")
        for i, option in enumerate(item.options):
            marker = "*" if item.is_correct(i) else " "
            print(f"  {marker} {i + 1}. {option}")
        hint = item.compound.hint()
        if hint:
            print(f"     hint: {hint}")
        print()


def _play(args: list[str], settings: Settings):
    quiz = _build_quiz(args, settings)
    choices: list[int | None] = []

    for n, item in enumerate(quiz, 1):
        print(f"\nQ{n}/{len(quiz)}. {item.prompt}")
        for i, option in enumerate(item.options, 1):
            print(f"  {i}. {option}")
        try:
            raw = input(f"Answer (1-{len(item.options)}, h for hint, Enter to skip): ").strip()
            if raw.lower() == "h":
                print(f"  hint: {item.compound.hint() or '-'}")
                raw = input("Answer: ").strip()
        except EOFError:
            break

        choice = int(raw) - 1 if raw.isdigit() else None
        if choice is not None and not 0 <= choice < len(item.options):
            choice = None
        choices.append(choice)

        if choice is not None and item.is_correct(choice):
            print("  Correct!")
        else:
            print(f"  Wrong. Answer: {item.answer}")

    choices.extend([None] * (len(quiz) - len(choices)))
    score = quiz.score(choices)
    print(f"\nScore: {score.correct}/{score.total} ({score.accuracy}%)")


def _config(args: list[str], settings: Settings):
    """Show settings, or set one: ``config question_count 5``."""
    if not args:
        for key, value in settings.to_dict().items():
            print(f"{key:15s} {json.dumps(value)}")
        return
    if len(args) != 2:
        raise ValueError("usage: config KEY VALUE")

    key, raw = args
    if key not in DEFAULTS:
        raise ValueError(f"unknown setting {key!r} (expected one of {', '.join(DEFAULTS)})")
    if isinstance(DEFAULTS[key], str):
        value = raw
        if key == "quiz_mode":
            QuizMode.parse(value)
    else:
        # integer settings; seed also accepts null
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            value = raw
        if isinstance(value, bool) or not (isinstance(value, int) or (key == "seed" and value is None)):
            raise ValueError(f"{key} must be an integer (got {raw!r})")

    updated = Settings(**{**settings.to_dict(), key: value})
    save_settings(updated)
    print(f"{key} = {json.dumps(value)}")


if __name__ == "__main__":
    main()
