"""Classifier protocol definitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

from ..types import Classification

F = TypeVar("F")
C = TypeVar("C")


@runtime_checkable
class FeatureProbability(Protocol[F, C]):
    """Anything able to estimate P(feature | category)."""

    def feature_probability(self, feature: F, category: C) -> float:
        """Return the probability that ``feature`` occurs given ``category``."""


@runtime_checkable
class Classifier(Protocol[F, C]):
    """Common interface shared by decision rules built on a counting core."""

    def learn(self, category: C, features: Iterable[F]) -> None:
        """Record one labeled example."""

    def classify(self, features: Iterable[F]) -> Classification[F, C] | None:
        """Return the most probable classification, or None when untrained."""

    def is_trained(self) -> bool:
        """Return True when at least one example is retained."""


__all__ = ["Classifier", "FeatureProbability"]
