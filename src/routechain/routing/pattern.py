"""Route template compilation.

A template such as ``api/:api_type/products/:id`` is split on ``/`` into
literal and variable segments. A leading ``::`` escapes the variable
prefix: ``items/::special`` matches the literal path ``items/:special``.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from routechain.errors import ConfigurationError

logger = logging.getLogger("routechain.routing")

DELIMITER = "/"
VARIABLE_PREFIX = ":"
_ESCAPED_PREFIX = VARIABLE_PREFIX * 2


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-delimited token of a pattern.

    Literal:  ``products``  (is_variable=False, value="products")
    Variable: ``:id``       (is_variable=True, value="id")
    """

    value: str
    is_variable: bool = False


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled route template. Immutable."""

    template: str
    segments: tuple[Segment, ...]

    @property
    def variables(self) -> tuple[str, ...]:
        """Variable names in positional order."""
        return tuple(seg.value for seg in self.segments if seg.is_variable)


def parse_segment(chunk: str) -> Segment:
    """Parse one template chunk into a Segment.

    Examples::

        "products"  -> Segment("products")
        ":id"       -> Segment("id", is_variable=True)
        "::special" -> Segment(":special")
    """
    if chunk.startswith(_ESCAPED_PREFIX):
        return Segment(chunk[1:])
    if chunk.startswith(VARIABLE_PREFIX):
        return Segment(chunk[1:], is_variable=True)
    return Segment(chunk)


@lru_cache(maxsize=256)
def compile_pattern(template: str) -> Pattern:
    """Compile *template* into a Pattern.

    Leading and trailing delimiters are ignored; the empty template has no
    segments. Raises ``ConfigurationError`` for an empty variable name or
    a variable name used twice.
    """
    trimmed = template.strip(DELIMITER)
    segments: list[Segment] = []
    seen: set[str] = set()

    if trimmed:
        for chunk in trimmed.split(DELIMITER):
            seg = parse_segment(chunk)
            if seg.is_variable:
                if not seg.value:
                    msg = f"Route {template!r} has a variable with an empty name."
                    raise ConfigurationError(msg)
                if seg.value in seen:
                    msg = f"Route {template!r} declares variable {seg.value!r} more than once."
                    raise ConfigurationError(msg)
                seen.add(seg.value)
            segments.append(seg)

    pattern = Pattern(template=template, segments=tuple(segments))
    logger.debug("Compiled route %r into %d segment(s)", template, len(segments))
    return pattern
