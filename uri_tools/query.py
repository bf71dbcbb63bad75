"""Split query strings into ordered name/value pairs and join them back.

Names are not unique: ``a=1&a=2`` gives two pairs and both are kept in the
order they were written. A segment without ``=`` gives a pair whose value is
``None`` to tell it apart from ``name=`` (an empty value).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Iterator, NamedTuple, Optional

from .constants import PAIR_SEPARATOR, QUERY_SEPARATOR
from .errors import URIValueError

if TYPE_CHECKING:
    from .types import TQueries, TQueryItem


class QueryPair(NamedTuple):
    """A name and an optional value taken from a query string."""

    name: str
    value: Optional[str] = None

    def __str__(self) -> str:
        """Serialize the pair. An absent value is rendered as ``name=``."""
        return f"{self.name}{PAIR_SEPARATOR}{self.value or ''}"

    @classmethod
    def parse(cls, segment: str) -> QueryPair:
        """Split the given segment on the first ``=``.

        .. code-block:: python

            assert QueryPair.parse("a=b=c") == ("a", "b=c")
            assert QueryPair.parse("flag") == ("flag", None)

        """
        name, sep, value = segment.partition(PAIR_SEPARATOR)
        return cls(name, value if sep else None)

    @classmethod
    def coerce(cls, item: TQueryItem) -> QueryPair:
        """Convert ``["name"]``/``["name", "value"]`` sequences to a pair."""
        if isinstance(item, cls):
            return item

        if (
            not isinstance(item, Sequence)
            or isinstance(item, (str, bytes))
            or not 0 < len(item) < 3
        ):
            raise URIValueError(f"Query pair must be a (name, value) sequence, got {item!r}")

        name, value = item[0], item[1] if len(item) > 1 else None
        if not isinstance(name, str):
            raise URIValueError(f"Query name must be a string, got {name!r}")

        if value is not None and not isinstance(value, str):
            raise URIValueError(f"Query value must be a string or None, got {value!r}")

        return cls(name, value)


def split_query_string(query_string: str) -> list[QueryPair]:
    """Decompose the given query string into pairs. Empty string gives no pairs."""
    if not query_string:
        return []

    return [QueryPair.parse(segment) for segment in query_string.split(QUERY_SEPARATOR)]


def join_query_string(pairs: list[QueryPair]) -> str:
    return QUERY_SEPARATOR.join(str(pair) for pair in pairs)


def iter_query_pairs(queries: TQueries) -> Iterator[QueryPair]:
    """Iterate over the given mapping or sequence of pairs as :class:`QueryPair`."""
    if isinstance(queries, Mapping):
        for name, value in queries.items():
            yield QueryPair.coerce((name, value))
        return

    if isinstance(queries, (str, bytes)):
        raise URIValueError("Use a sequence of pairs or a mapping, not a query string")

    for item in queries:
        yield QueryPair.coerce(item)
