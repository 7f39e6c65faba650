"""Counting model and sliding memory shared by every decision rule."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from ..types import Classification
from .base import FeatureProbability

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Hashable)
C = TypeVar("C", bound=Hashable)

DEFAULT_MEMORY_CAPACITY = 1000
DEFAULT_SMOOTHING = 1.0
DEFAULT_ASSUMED_PROBABILITY = 0.5


class ClassifierCore(Generic[F, C]):
    """Feature and category counts over the most recent training examples.

    The core remembers at most ``memory_capacity`` examples. Learning beyond
    that forgets the oldest example and reverses its counts, so the tables
    always describe exactly the retained memory. All table mutation goes
    through the increment/decrement helpers which drop keys whose count
    reaches zero.
    """

    def __init__(
        self,
        *,
        memory_capacity: int = DEFAULT_MEMORY_CAPACITY,
        smoothing: float = DEFAULT_SMOOTHING,
    ) -> None:
        self._memory_capacity = _validate_capacity(memory_capacity)
        self._smoothing = _validate_smoothing(smoothing)
        self._feature_count_per_category: dict[C, dict[F, int]] = {}
        self._total_feature_count: dict[F, int] = {}
        self._total_category_count: dict[C, int] = {}
        self._memory: deque[Classification[F, C]] = deque()

    def reset(self) -> None:
        """Forget every learned example and count."""

        LOGGER.info("Resetting classifier core (%s example(s) forgotten)", len(self._memory))
        self._feature_count_per_category = {}
        self._total_feature_count = {}
        self._total_category_count = {}
        self._memory = deque()

    # -- introspection -----------------------------------------------------

    @property
    def features(self) -> frozenset[F]:
        return frozenset(self._total_feature_count)

    @property
    def categories(self) -> frozenset[C]:
        return frozenset(self._total_category_count)

    @property
    def ordered_categories(self) -> tuple[C, ...]:
        """Known categories in the order they were first learned."""

        return tuple(self._total_category_count)

    @property
    def vocabulary_size(self) -> int:
        return len(self._total_feature_count)

    @property
    def memory(self) -> tuple[Classification[F, C], ...]:
        """Retained training examples, oldest first."""

        return tuple(self._memory)

    @property
    def smoothing(self) -> float:
        return self._smoothing

    @property
    def memory_capacity(self) -> int:
        return self._memory_capacity

    @memory_capacity.setter
    def memory_capacity(self, value: int) -> None:
        self.set_memory_capacity(value)

    def __len__(self) -> int:
        return len(self._memory)

    def set_memory_capacity(self, capacity: int) -> None:
        """Change the capacity, forgetting the oldest examples when shrinking."""

        capacity = _validate_capacity(capacity)
        evicted = 0
        while len(self._memory) > capacity:
            self._forget(self._memory.popleft())
            evicted += 1
        if evicted:
            LOGGER.debug(
                "Memory capacity lowered to %s; forgot %s example(s)", capacity, evicted
            )
        self._memory_capacity = capacity

    # -- count mutation ----------------------------------------------------

    def increment_feature(self, feature: F, category: C) -> None:
        features = self._feature_count_per_category.setdefault(category, {})
        features[feature] = features.get(feature, 0) + 1
        self._total_feature_count[feature] = self._total_feature_count.get(feature, 0) + 1

    def decrement_feature(self, feature: F, category: C) -> None:
        features = self._feature_count_per_category.get(category)
        if features is None or feature not in features:
            return
        _decrement(features, feature)
        if not features:
            del self._feature_count_per_category[category]
        _decrement(self._total_feature_count, feature)

    def increment_category(self, category: C) -> None:
        self._total_category_count[category] = self._total_category_count.get(category, 0) + 1

    def decrement_category(self, category: C) -> None:
        _decrement(self._total_category_count, category)

    # -- counts --------------------------------------------------------------

    def feature_count(self, feature: F, category: C) -> int:
        features = self._feature_count_per_category.get(category)
        if features is None:
            return 0
        return features.get(feature, 0)

    def total_feature_count(self, feature: F) -> int:
        """Occurrences of ``feature`` across every category."""

        return self._total_feature_count.get(feature, 0)

    def category_feature_count(self, category: C) -> int:
        features = self._feature_count_per_category.get(category)
        if features is None:
            return 0
        return sum(features.values())

    def category_count(self, category: C) -> int:
        return self._total_category_count.get(category, 0)

    def categories_total(self) -> int:
        """Number of retained training examples across all categories."""

        return sum(self._total_category_count.values())

    # -- probabilities -------------------------------------------------------

    def raw_feature_probability(self, feature: F, category: C) -> float:
        """Unsmoothed share of ``category``'s feature occurrences taken by ``feature``."""

        total = self.category_feature_count(category)
        if total == 0:
            return 0.0
        return self.feature_count(feature, category) / total

    def feature_probability(
        self,
        feature: F,
        category: C,
        smoothing: float | None = None,
    ) -> float:
        """Laplace-smoothed P(feature | category); 0.0 for unknown categories."""

        if self.category_count(category) == 0:
            return 0.0
        lam = self._smoothing if smoothing is None else _validate_smoothing(smoothing)
        vocabulary = self.vocabulary_size or 1
        denominator = self.category_feature_count(category) + lam * vocabulary
        if denominator == 0:
            return 0.0
        return (self.feature_count(feature, category) + lam) / denominator

    def feature_weighed_average(
        self,
        feature: F,
        category: C,
        estimator: FeatureProbability[F, C] | None = None,
        weight: float = 0.0,
        assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
    ) -> float:
        """Return P(feature | category) as seen by ``estimator``.

        ``estimator`` defaults to this core's smoothed estimate. With a
        positive ``weight`` the estimate is pulled towards
        ``assumed_probability``; the pull fades as the feature is observed
        more often overall.
        """

        source = self if estimator is None else estimator
        basic = source.feature_probability(feature, category)
        if weight <= 0:
            return basic
        totals = self.total_feature_count(feature)
        return (weight * assumed_probability + totals * basic) / (weight + totals)

    # -- learning ------------------------------------------------------------

    def learn(self, category: C, features: Iterable[F]) -> None:
        """Record one labeled example."""

        self.learn_classification(Classification.of(features, category))

    def learn_classification(self, classification: Classification[F, C]) -> None:
        """Record a prepared classification as a training example."""

        for feature in classification.featureset:
            self.increment_feature(feature, classification.category)
        self.increment_category(classification.category)

        self._memory.append(classification)
        if len(self._memory) > self._memory_capacity:
            forgotten = self._memory.popleft()
            self._forget(forgotten)
            LOGGER.debug(
                "Memory full (%s); forgot oldest example for category %r",
                self._memory_capacity,
                forgotten.category,
            )

    def _forget(self, classification: Classification[F, C]) -> None:
        for feature in classification.featureset:
            self.decrement_feature(feature, classification.category)
        self.decrement_category(classification.category)


def _decrement(counts: dict, key: Hashable) -> None:
    count = counts.get(key)
    if count is None:
        return
    if count <= 1:
        del counts[key]
    else:
        counts[key] = count - 1


def _validate_capacity(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"memory capacity must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"memory capacity must be positive, got {value}")
    return value


def _validate_smoothing(value: float) -> float:
    smoothing = float(value)
    if smoothing < 0:
        raise ValueError(f"smoothing must not be negative, got {value}")
    return smoothing


__all__ = [
    "ClassifierCore",
    "DEFAULT_ASSUMED_PROBABILITY",
    "DEFAULT_MEMORY_CAPACITY",
    "DEFAULT_SMOOTHING",
]
