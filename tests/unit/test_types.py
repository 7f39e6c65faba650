from dataclasses import FrozenInstanceError

import pytest

from bayes import types as bayes_types


def test_classification_defaults_to_certain_probability() -> None:
    classification = bayes_types.Classification.of(["a", "b"], "letters")

    assert classification.featureset == ("a", "b")
    assert classification.category == "letters"
    assert classification.probability == 1.0


def test_classification_is_immutable() -> None:
    classification = bayes_types.Classification.of(["a"], "letters", 0.3)

    with pytest.raises(FrozenInstanceError):
        classification.category = "digits"  # type: ignore[misc]


def test_classification_freezes_mutable_featureset() -> None:
    features = ["a", "b"]
    classification = bayes_types.Classification.of(features, "letters")

    features.append("c")

    assert classification.featureset == ("a", "b")


def test_classifications_order_by_probability() -> None:
    low = bayes_types.Classification.of([], "b", -3.0)
    high = bayes_types.Classification.of([], "a", -1.0)

    assert low < high
    assert high > low
    assert max([high, low]) is high


def test_equal_probabilities_fall_back_to_category() -> None:
    first = bayes_types.Classification.of([], "a", 0.5)
    second = bayes_types.Classification.of([], "b", 0.5)

    assert first < second
    assert not second < first
    assert first != second
    assert len({first, second}) == 2


def test_same_probability_and_category_are_equivalent_in_order() -> None:
    first = bayes_types.Classification.of(["x"], "a", 0.5)
    second = bayes_types.Classification.of(["y"], "a", 0.5)

    assert first <= second
    assert second <= first
    assert not first < second


def test_classification_string_lists_featureset() -> None:
    classification = bayes_types.Classification.of(["sunny", "day"], "pos", 0.25)

    assert str(classification) == (
        "Classification(category=pos, probability=0.25, featureset=[sunny, day])"
    )


def test_constructor_freezes_featureset_and_probability() -> None:
    features = ["x", "y"]
    classification = bayes_types.Classification(features, "letters", 1)  # type: ignore[arg-type]

    features.clear()

    assert classification.featureset == ("x", "y")
    assert isinstance(classification.probability, float)


def test_equality_ignores_featureset() -> None:
    first = bayes_types.Classification.of(["x"], "a", 0.5)
    second = bayes_types.Classification.of(["y", "z"], "a", 0.5)

    assert first == second
    assert len({first, second}) == 1
    assert first != bayes_types.Classification.of(["x"], "a", 0.25)
