"""Core immutable data structures used throughout Bayes."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

F = TypeVar("F", bound=Hashable)
C = TypeVar("C", bound=Hashable)

DEFAULT_PROBABILITY = 1.0


@dataclass(frozen=True, eq=True)
class Classification(Generic[F, C]):
    """A featureset together with its category and probability (or score).

    Learned examples carry a probability of 1.0; classification results carry
    the computed score. Instances order by probability first and fall back to
    the category when probabilities are equal, so two results for different
    categories never compare as equivalent. Equality and hashing ignore the
    featureset: the same category with the same probability is a duplicate.
    """

    featureset: tuple[F, ...] = field(compare=False)
    category: C
    probability: float = DEFAULT_PROBABILITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "featureset", tuple(self.featureset))
        object.__setattr__(self, "probability", float(self.probability))

    @classmethod
    def of(
        cls,
        features: Iterable[F],
        category: C,
        probability: float = DEFAULT_PROBABILITY,
    ) -> Classification[F, C]:
        """Build a classification, freezing the featureset into a tuple."""

        return cls(featureset=tuple(features), category=category, probability=probability)

    def _order_key(self) -> tuple[float, Any]:
        return (self.probability, self.category)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self._order_key() >= other._order_key()

    def __str__(self) -> str:
        features = ", ".join(str(feature) for feature in self.featureset)
        return (
            f"Classification(category={self.category}, "
            f"probability={self.probability}, featureset=[{features}])"
        )


__all__ = ["Classification", "DEFAULT_PROBABILITY"]
