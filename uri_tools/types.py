from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Sequence, Union

if TYPE_CHECKING:
    from .query import QueryPair

TQueryValue = Optional[str]
TQueryItem = Union["QueryPair", Sequence[TQueryValue]]
TQueries = Union[Mapping[str, TQueryValue], Iterable[TQueryItem]]
TPort = Union[str, int, None]
TComponents = tuple[str, str, str, str, str, str, str, str]
