"""Tests for prowl.config."""

import logging
from pathlib import Path

import pytest

from prowl.config import LoaderConfig


class TestLoaderConfig:
    """LoaderConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = LoaderConfig()
        assert config.routes_folder == Path.cwd() / "routes"
        assert config.prefix == ""
        assert config.exclusions == ()
        assert config.router_attr == "router"
        assert config.strict_imports is True
        assert config.logger is logging.getLogger("prowl")

    def test_frozen(self) -> None:
        config = LoaderConfig()
        with pytest.raises(AttributeError):
            config.prefix = "/api"  # type: ignore[misc]

    def test_relative_folder_resolved_to_absolute(self) -> None:
        config = LoaderConfig(routes_folder=Path("routes"))
        assert config.routes_folder.is_absolute()

    def test_absolute_folder_unchanged(self, tmp_path: Path) -> None:
        config = LoaderConfig(routes_folder=tmp_path)
        assert config.routes_folder == tmp_path

    def test_string_folder_accepted(self, tmp_path: Path) -> None:
        config = LoaderConfig(routes_folder=str(tmp_path))  # type: ignore[arg-type]
        assert config.routes_folder == tmp_path

    def test_exclusions_coerced_to_tuple(self) -> None:
        config = LoaderConfig(exclusions=["a", "b"])  # type: ignore[arg-type]
        assert config.exclusions == ("a", "b")

    def test_single_string_exclusion(self) -> None:
        config = LoaderConfig(exclusions="legacy")  # type: ignore[arg-type]
        assert config.exclusions == ("legacy",)
        assert [p.text for p in config.patterns] == ["legacy"]

    def test_patterns_compiled(self) -> None:
        config = LoaderConfig(exclusions=("^draft", "[bad"))
        assert [p.text for p in config.patterns] == ["^draft", "[bad"]
        assert config.patterns[0].regex is not None
        assert config.patterns[1].regex is None

    def test_invalid_pattern_reported_at_construction(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="prowl"):
            LoaderConfig(exclusions=("[bad",))
        assert "'[bad'" in caplog.text

    def test_custom_logger(self) -> None:
        logger = logging.getLogger("myapp.routes")
        config = LoaderConfig(logger=logger)
        assert config.logger is logger

    def test_equality_ignores_logger(self, tmp_path: Path) -> None:
        a = LoaderConfig(routes_folder=tmp_path, logger=logging.getLogger("a"))
        b = LoaderConfig(routes_folder=tmp_path, logger=logging.getLogger("b"))
        assert a == b
