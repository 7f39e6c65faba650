from __future__ import annotations

import pytest

from bayes.classifiers import NaiveBayesClassifier
from tests.helpers import NEGATIVE, POSITIVE


@pytest.fixture
def weather_classifier() -> NaiveBayesClassifier[str, str]:
    classifier: NaiveBayesClassifier[str, str] = NaiveBayesClassifier()
    classifier.learn("pos", POSITIVE)
    classifier.learn("neg", NEGATIVE)
    return classifier
