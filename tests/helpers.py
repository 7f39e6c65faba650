"""Shared test data and assertions."""

from __future__ import annotations

from collections import Counter

from bayes.classifiers import ClassifierCore

POSITIVE = ["I", "love", "sunny", "days"]
NEGATIVE = ["I", "hate", "rain"]


def assert_counts_match_memory(core: ClassifierCore) -> None:
    """Check that every count equals the aggregation over the retained memory."""

    feature_counts: Counter = Counter()
    category_counts: Counter = Counter()
    for example in core.memory:
        category_counts[example.category] += 1
        for feature in example.featureset:
            feature_counts[(feature, example.category)] += 1

    assert len(core.memory) <= core.memory_capacity
    assert core.categories == frozenset(category_counts)
    assert core.features == frozenset(feature for feature, _category in feature_counts)
    assert core.categories_total() == len(core.memory)
    for category, count in category_counts.items():
        assert core.category_count(category) == count
        expected_total = sum(
            n for (_feature, owner), n in feature_counts.items() if owner == category
        )
        assert core.category_feature_count(category) == expected_total
    for (feature, category), count in feature_counts.items():
        assert core.feature_count(feature, category) == count
