"""Route and RouteMatch.

A Route pairs a compiled Pattern with default values and per-variable
requirements. Matching never raises: a miss is ``None``, a hit is a
frozen ``RouteMatch`` carrying both the params and the consumed path.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self
from urllib.parse import unquote_plus

from routechain.config import RouteConfig
from routechain.errors import ConfigurationError
from routechain.routing.pattern import DELIMITER, Pattern, compile_pattern
from routechain.routing.protocol import Composable, QueryLookup


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match.

    ``params`` holds defaults overlaid with captured values. A route with
    no variables and no defaults matches with empty ``params``; the match
    object itself is still truthy, unlike a miss (``None``).

    ``matched_path`` is the prefix of the input the match consumed. For a
    partial match it excludes the trailing segments left for the caller.
    """

    params: dict[str, str] = field(default_factory=dict)
    matched_path: str = ""

    def __getitem__(self, name: str) -> str:
        return self.params[name]

    def __contains__(self, name: object) -> bool:
        return name in self.params

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of *name*, or *default* if absent."""
        return self.params.get(name, default)


def compile_requirement(name: str, regex: str) -> re.Pattern[str]:
    """Compile a requirement regex, reporting failures as configuration errors."""
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error as exc:
        msg = f"Invalid requirement for variable {name!r}: {regex!r} ({exc})"
        raise ConfigurationError(msg) from exc


class Route(Composable):
    """A single route pattern with defaults and requirements.

    Usage::

        route = Route("products/:id", defaults={"format": "json"}, requirements={"id": r"\\d+"})
        route.match("products/123").params   # {"format": "json", "id": "123"}
        route.match("products/abc")          # None

    Instances are immutable after construction and safe to share between
    threads.
    """

    __slots__ = ("_defaults", "_pattern", "_requirements")

    def __init__(
        self,
        pattern: str | Pattern,
        defaults: Mapping[str, str] | None = None,
        requirements: Mapping[str, str] | None = None,
    ) -> None:
        self._pattern = compile_pattern(pattern) if isinstance(pattern, str) else pattern
        self._defaults: dict[str, str] = dict(defaults or {})
        self._requirements: dict[str, re.Pattern[str]] = {
            name: compile_requirement(name, regex) for name, regex in (requirements or {}).items()
        }

    @classmethod
    def from_config(cls, config: RouteConfig | Mapping[str, Any], **kwargs: Any) -> Self:
        """Build a route from a ``RouteConfig`` or a ``route``/``defaults``/``reqs`` mapping."""
        if not isinstance(config, RouteConfig):
            config = RouteConfig.from_mapping(config)
        return cls(config.route, config.defaults, config.reqs, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pattern.template!r})"

    # -- Introspection --

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def variables(self) -> tuple[str, ...]:
        """Names of the pattern's variables in positional order."""
        return self._pattern.variables

    @property
    def defaults(self) -> dict[str, str]:
        """A copy of the route's default values."""
        return dict(self._defaults)

    @property
    def requirements(self) -> dict[str, str]:
        """Requirement regex sources by variable name."""
        return {name: regex.pattern for name, regex in self._requirements.items()}

    def get_default(self, name: str, default: str | None = None) -> str | None:
        return self._defaults.get(name, default)

    # -- Matching --

    def match_path(
        self,
        path: str,
        partial: bool = False,
        query: QueryLookup | None = None,
    ) -> RouteMatch | None:
        """Match *path* against the pattern.

        Leading delimiters are ignored; trailing ones only outside partial
        mode. Consecutive delimiters produce empty segments, which match an
        unconstrained variable but no literal.

        In partial mode the path may carry more segments than the pattern;
        the extra ones are left out of ``matched_path``.
        """
        normalized = path.lstrip(DELIMITER)
        leading = len(path) - len(normalized)
        if not partial:
            normalized = normalized.rstrip(DELIMITER)

        parts = normalized.split(DELIMITER) if normalized else []
        segments = self._pattern.segments
        if len(parts) < len(segments) or (not partial and len(parts) != len(segments)):
            return None

        values: dict[str, str] = {}
        for seg, raw in zip(segments, parts, strict=False):
            if not seg.is_variable:
                if raw != seg.value:
                    return None
                continue

            value = unquote_plus(raw)
            regex = self._requirements.get(seg.value)
            if regex is not None and regex.fullmatch(value) is None:
                return None
            values[seg.value] = value

        params = {**self._defaults, **values}
        for name, value in values.items():
            # An empty capture falls back to the default, when there is one
            if not value and name in self._defaults:
                params[name] = self._defaults[name]

        consumed = DELIMITER.join(parts[: len(segments)])
        return RouteMatch(params=params, matched_path=path[: leading + len(consumed)])
