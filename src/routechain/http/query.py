"""Immutable query string parameters.

The side channel ``TypedRoute`` falls back to when the path does not carry
the API type. Only the first value of a repeated key is kept.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Read-only ``Mapping[str, str]`` over a query string."""

    _data: dict[str, str]

    __slots__ = ("_data",)

    def __init__(self, query_string: str = "") -> None:
        data: dict[str, str] = {}
        for key, value in parse_qsl(query_string, keep_blank_values=True):
            data.setdefault(key, value)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)
