"""Labeled example files consumed by the command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .types import Classification

LOGGER = logging.getLogger(__name__)


class CorpusError(ValueError):
    """Raised when a corpus file is missing or malformed."""


def load_corpus(path: Path | str) -> list[Classification[str, str]]:
    """Read training examples from a YAML list of ``{category, features}`` entries.

    Scalars are read as their literal text, the same form query features take
    on the command line, so `yes` stays "yes" and `1` stays "1". Nothing is
    tokenised.
    """

    corpus_path = Path(path).expanduser()
    if not corpus_path.is_file():
        raise CorpusError(f"Corpus file not found: {corpus_path}")

    try:
        with corpus_path.open("r", encoding="utf-8") as handle:
            raw = yaml.load(handle, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise CorpusError(f"Invalid YAML in {corpus_path}: {exc}") from exc

    if raw is None or raw == "":
        return []
    if not isinstance(raw, list):
        raise CorpusError("Corpus root must be a list of examples.")

    examples = [_parse_example(entry, idx) for idx, entry in enumerate(raw, start=1)]
    LOGGER.debug("Loaded %s example(s) from %s", len(examples), corpus_path)
    return examples


def _parse_example(entry: Any, idx: int) -> Classification[str, str]:
    if not isinstance(entry, dict):
        raise CorpusError(f"examples[{idx}] must be a mapping.")
    category = entry.get("category")
    if not _is_scalar(category) or not category.strip():
        raise CorpusError(f"examples[{idx}] requires a scalar 'category'.")
    features = entry.get("features", [])
    if features is None or features == "":
        features = []
    if not isinstance(features, list):
        raise CorpusError(f"examples[{idx}].features must be a list.")
    for position, feature in enumerate(features, start=1):
        if not _is_scalar(feature):
            raise CorpusError(f"examples[{idx}].features[{position}] must be a scalar.")
    return Classification.of(features, category)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str)


__all__ = ["CorpusError", "load_corpus"]
