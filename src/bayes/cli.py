"""Bayes command-line interface."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .classifiers import ClassifierCore, NaiveBayesClassifier
from .config import Config, ConfigError, load_config
from .corpus import CorpusError, load_corpus
from .logging import configure_logging

app = typer.Typer(help="Sliding-window naive Bayes classifier utilities.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _bayes(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to Bayes config (env BAYES_CONFIG or ~/.config/bayes/config.yaml).",
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def classify(
    ctx: typer.Context,
    corpus: Annotated[Path, typer.Argument(..., help="YAML file with labeled examples.")],
    features: Annotated[
        list[str] | None,
        typer.Argument(help="Features of the example to classify."),
    ] = None,
    detailed: Annotated[
        bool,
        typer.Option(
            "--detailed",
            help="Print the score of every known category, best first.",
        ),
    ] = False,
) -> None:
    """Train on CORPUS and classify the given features."""

    classifier = _trained_classifier(_state(ctx), corpus)
    featureset = features or []

    if detailed:
        ranking = classifier.classify_detailed(featureset)
        if not ranking:
            typer.echo("No categories learned.")
            return
        typer.echo("Ranking:")
        for classification in reversed(ranking):
            typer.echo(f"  {classification.category}: {classification.probability:.6f}")
        return

    best = classifier.classify(featureset)
    if best is None:
        typer.echo("No categories learned.")
        return
    typer.echo(f"Category: {best.category}")
    typer.echo(f"Score: {best.probability:.6f}")


@app.command()
def inspect(
    ctx: typer.Context,
    corpus: Annotated[Path, typer.Argument(..., help="YAML file with labeled examples.")],
) -> None:
    """Train on CORPUS and report what the classifier retained."""

    classifier = _trained_classifier(_state(ctx), corpus)
    core = classifier.core

    typer.echo("→ Bayes Model")
    typer.echo(f"Version: {__version__}")
    typer.echo(f"Memory: {len(core)}/{core.memory_capacity} example(s)")
    typer.echo(f"Vocabulary: {core.vocabulary_size} feature(s)")
    typer.echo("")
    typer.echo("Categories:")
    for category in core.ordered_categories:
        typer.echo(
            f"  - {category}: {core.category_count(category)} example(s), "
            f"{core.category_feature_count(category)} feature occurrence(s)"
        )


def build_classifier(config: Config) -> NaiveBayesClassifier[Hashable, Hashable]:
    """Create an untrained classifier from configuration."""

    core: ClassifierCore[Hashable, Hashable] = ClassifierCore(
        memory_capacity=config.memory_capacity,
        smoothing=config.smoothing,
    )
    return NaiveBayesClassifier(
        core,
        feature_weight=config.feature_weight,
        assumed_probability=config.assumed_probability,
    )


def _trained_classifier(state: CLIState, corpus: Path) -> NaiveBayesClassifier[Hashable, Hashable]:
    config = _load_environment(state)
    try:
        examples = load_corpus(corpus)
    except CorpusError as exc:
        typer.secho(f"Corpus error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    classifier = build_classifier(config)
    for example in examples:
        classifier.learn_classification(example)
    LOGGER.info(
        "Learned %s example(s); %s retained across %s categories.",
        len(examples),
        len(classifier.core),
        len(classifier.categories),
    )
    return classifier


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _load_environment(state: CLIState) -> Config:
    try:
        config = load_config(state.config_path)
        configure_logging(config.logging)
    except ConfigError as exc:
        _config_failure(exc)
    return config


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


__all__ = ["app", "build_classifier"]
