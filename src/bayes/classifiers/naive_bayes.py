"""Naive Bayes decision rule over a sliding-window counting core."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from ..types import Classification
from .base import FeatureProbability
from .core import DEFAULT_ASSUMED_PROBABILITY, ClassifierCore

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Hashable)
C = TypeVar("C", bound=Hashable)


class NaiveBayesClassifier(Generic[F, C]):
    """Ranks categories by log P(category) + sum(log P(feature | category)).

    Scores are computed fresh from the held core on every call. The returned
    probabilities are log scores, so they are comparable between categories
    of one call but are not normalised.
    """

    def __init__(
        self,
        core: ClassifierCore[F, C] | None = None,
        *,
        feature_weight: float = 0.0,
        assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
    ) -> None:
        self.core: ClassifierCore[F, C] = core if core is not None else ClassifierCore()
        if feature_weight < 0:
            raise ValueError(f"feature weight must not be negative, got {feature_weight}")
        if not 0.0 <= assumed_probability <= 1.0:
            raise ValueError(
                f"assumed probability must lie in [0, 1], got {assumed_probability}"
            )
        self.feature_weight = float(feature_weight)
        self.assumed_probability = float(assumed_probability)

    # -- learning surface ----------------------------------------------------

    def learn(self, category: C, features: Iterable[F]) -> None:
        self.core.learn(category, features)

    def learn_classification(self, classification: Classification[F, C]) -> None:
        self.core.learn_classification(classification)

    def reset(self) -> None:
        self.core.reset()

    def is_trained(self) -> bool:
        return self.core.categories_total() > 0

    @property
    def features(self) -> frozenset[F]:
        return self.core.features

    @property
    def categories(self) -> frozenset[C]:
        return self.core.categories

    @property
    def memory_capacity(self) -> int:
        return self.core.memory_capacity

    def set_memory_capacity(self, capacity: int) -> None:
        self.core.set_memory_capacity(capacity)

    # -- scoring -------------------------------------------------------------

    def features_probability_log_sum(
        self,
        features: Iterable[F],
        category: C,
        estimator: FeatureProbability[F, C] | None = None,
    ) -> float:
        log_sum = 0.0
        for feature in features:
            probability = self.core.feature_weighed_average(
                feature,
                category,
                estimator,
                weight=self.feature_weight,
                assumed_probability=self.assumed_probability,
            )
            if not probability > 0.0:
                return -math.inf
            log_sum += math.log(probability)
        return log_sum

    def category_probability(
        self,
        features: Iterable[F],
        category: C,
        estimator: FeatureProbability[F, C] | None = None,
    ) -> float:
        """Log score of ``features`` belonging to ``category``."""

        total = self.core.categories_total()
        count = self.core.category_count(category)
        if total == 0 or count == 0:
            return -math.inf
        prior = math.log(count / total)
        return prior + self.features_probability_log_sum(features, category, estimator)

    def classify_detailed(
        self,
        features: Iterable[F],
        estimator: FeatureProbability[F, C] | None = None,
    ) -> list[Classification[F, C]]:
        """Return every known category's classification, ranked ascending.

        The last element is the best classification. Categories with equal
        scores are ranked so that the one learned earliest comes last.
        """

        featureset = tuple(features)
        ranked: list[tuple[float, int, Classification[F, C]]] = []
        for position, category in enumerate(self.core.ordered_categories):
            score = self.category_probability(featureset, category, estimator)
            ranked.append((score, -position, Classification.of(featureset, category, score)))
        ranked.sort(key=lambda entry: (entry[0], entry[1]))
        return [classification for _score, _position, classification in ranked]

    def classify(
        self,
        features: Iterable[F],
        estimator: FeatureProbability[F, C] | None = None,
    ) -> Classification[F, C] | None:
        """Return the most probable classification, or None when untrained."""

        ranking = self.classify_detailed(features, estimator)
        if not ranking:
            LOGGER.debug("Classification requested before any example was learned")
            return None
        return ranking[-1]


__all__ = ["NaiveBayesClassifier"]
