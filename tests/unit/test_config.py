from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from bayes.classifiers.core import DEFAULT_MEMORY_CAPACITY
from bayes.config import CONFIG_ENV_VAR, Config, ConfigError, LoggingConfig, load_config


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_path


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_load_config_success(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        f"""
        memory_capacity: 50
        smoothing: 0.5
        feature_weight: 1
        assumed_probability: 0.25
        logging:
          level: DEBUG
          file: {tmp_path}/logs/bayes.log
        """,
    )

    config = load_config(config_path)

    assert config.memory_capacity == 50
    assert config.smoothing == 0.5
    assert config.feature_weight == 1.0
    assert config.assumed_probability == 0.25
    assert config.logging.level == "debug"
    assert config.logging.file == tmp_path / "logs" / "bayes.log"


def test_missing_default_config_uses_defaults() -> None:
    config = load_config()

    assert config == Config()
    assert config.memory_capacity == DEFAULT_MEMORY_CAPACITY
    assert config.logging == LoggingConfig()


def test_default_config_location_is_read(tmp_path: Path) -> None:
    config_dir = tmp_path / "home" / ".config" / "bayes"
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("memory_capacity: 7\n", encoding="utf-8")

    assert load_config().memory_capacity == 7


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "smoothing: 2\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))

    assert load_config().smoothing == 2.0


def test_explicit_missing_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "")

    assert load_config(config_path) == Config()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "memory_capacity: 0\n",
        "memory_capacity: many\n",
        "memory_capacity: true\n",
        "smoothing: -1\n",
        "smoothing: lots\n",
        "feature_weight: -0.5\n",
        "assumed_probability: 2\n",
        "logging: verbose\n",
        "logging:\n  file: ''\n",
        "memory_capacity: [unclosed\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    config_path = _write_config(tmp_path, content)

    with pytest.raises(ConfigError):
        load_config(config_path)
