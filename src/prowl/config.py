"""Prowl configuration.

LoaderConfig is the settings object for one ``load()`` call, frozen after
creation.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from prowl._types import LoggerLike
from prowl.routes.scanner import ExclusionPattern, compile_exclusions

DEFAULT_ROUTES_DIR = "routes"
DEFAULT_ROUTER_ATTR = "router"


def _default_routes_folder() -> Path:
    return Path.cwd() / DEFAULT_ROUTES_DIR


def _default_logger() -> LoggerLike:
    return logging.getLogger("prowl")


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Configuration for a route loader.

    Attributes:
        routes_folder: Directory containing the route modules.  Always
            resolved to an absolute path on construction.
        prefix: Prefix prepended to every mounted URL (e.g. ``/api``).
        exclusions: File or directory names to skip.  Each entry matches a
            name literally and, when it compiles, as a regular expression.
        router_attr: Module attribute holding the module's ``Router``.
        strict_imports: Raise when a route module fails to import.  When
            False the module is logged and skipped instead.
        logger: Logger used for progress and warnings.  Anything with
            ``debug``/``info``/``warning``/``error`` works.
        patterns: Compiled form of ``exclusions`` (derived, not passed in).

    """

    routes_folder: Path = field(default_factory=_default_routes_folder)
    prefix: str = ""
    exclusions: tuple[str, ...] = ()
    router_attr: str = DEFAULT_ROUTER_ATTR
    strict_imports: bool = True
    logger: LoggerLike = field(default_factory=_default_logger, repr=False, compare=False)
    patterns: tuple[ExclusionPattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        folder = Path(self.routes_folder)
        if not folder.is_absolute():
            folder = folder.resolve()
        object.__setattr__(self, "routes_folder", folder)
        exclusions = self.exclusions
        if isinstance(exclusions, str):
            exclusions = (exclusions,)
        object.__setattr__(self, "exclusions", tuple(str(e) for e in exclusions))
        # Invalid regexes are reported here, once, instead of per file
        object.__setattr__(self, "patterns", compile_exclusions(self.exclusions, self.logger))
