"""Classifier implementations and infrastructure."""

from .base import Classifier, FeatureProbability
from .core import ClassifierCore
from .naive_bayes import NaiveBayesClassifier

__all__ = [
    "Classifier",
    "ClassifierCore",
    "FeatureProbability",
    "NaiveBayesClassifier",
]
