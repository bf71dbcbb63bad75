"""URI-Tools includes a `uri_tools.URI` class that gives you a mutable, component-wise
interface onto a URI string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from multidict import MultiDict, MultiDictProxy

from .constants import PATH_SEPARATOR
from .errors import URIError, URIIndexError
from .logs import logger
from .query import QueryPair, iter_query_pairs, join_query_string, split_query_string
from .utils import build_uri, split_uri

if TYPE_CHECKING:
    from .types import TPort, TQueries, TQueryValue


class URI:
    """Represent a parsed URI.

    Components are kept as raw (percent-encoded) text. The query is kept as an
    ordered list of :class:`uri_tools.QueryPair`, names may repeat.

    .. code-block:: python

        uri = URI("http://www.google.com/index.html?test=my%20data")
        assert uri.get_query("test") == "my%20data"

        uri / "extra"
        assert str(uri) == "http://www.google.com/index.html/extra?test=my%20data"

    :param uri: URI text to parse
    :raises URIParseError: if the text cannot be split into components

    """

    __slots__ = (
        "_scheme",
        "_username",
        "_password",
        "_hostname",
        "_port",
        "_path",
        "_anchor",
        "_queries",
    )

    def __init__(self, uri: str):
        """Parse the given text."""
        (
            self._scheme,
            self._username,
            self._password,
            self._hostname,
            self._port,
            self._path,
            query_string,
            self._anchor,
        ) = split_uri(uri)
        self._queries: list[QueryPair] = split_query_string(query_string)

    @classmethod
    def parse(cls, uri: str) -> URI:
        """Parse the given text and return a new URI."""
        return cls(uri)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        """Represent the URI."""
        try:
            return f"<URI {self}>"
        except URIError:
            return (
                f"<URI scheme={self._scheme!r} host={self._hostname!r} port={self._port!r} "
                f"path={self._path!r} query={self.get_query_string()!r}>"
            )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URI):
            return self.serialize() == other.serialize()

        if isinstance(other, str):
            return self.serialize() == other

        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> URI:
        """Copy the URI to a new one."""
        clone = self.__class__.__new__(self.__class__)
        for name in self.__slots__:
            setattr(clone, name, getattr(self, name))

        clone._queries = list(self._queries)
        return clone

    def __truediv__(self, segment: str) -> URI:
        """Append the given path segment (``uri / "segment"``)."""
        self.append_path_segment(segment)
        return self

    __itruediv__ = __truediv__

    def __rtruediv__(self, segment: str) -> URI:
        """Prepend the given path segment (``"segment" / uri``)."""
        self.prepend_path_segment(segment)
        return self

    # Accessors
    # ---------

    def get_scheme(self) -> str:
        return self._scheme

    def get_username(self) -> str:
        return self._username

    def get_password(self) -> str:
        return self._password

    def get_domain(self) -> str:
        return self._hostname

    def get_port(self) -> str:
        """Return the port as written, e.g. ``"8080"``. Empty string if absent."""
        return self._port

    def get_path(self) -> str:
        return self._path

    def get_anchor(self) -> str:
        return self._anchor

    def get_path_segments(self) -> list[str]:
        """Split the path on ``/`` and drop the first element.

        .. code-block:: python

            assert URI("http://a.com/x/y/").get_path_segments() == ["x", "y", ""]

        """
        return self._path.split(PATH_SEPARATOR)[1:]

    def get_path_segment(self, index: int) -> str:
        """Return the path segment at the given index.

        :raises URIIndexError: if the index is out of range
        """
        segments = self.get_path_segments()
        try:
            return segments[index]
        except IndexError as exc:
            raise URIIndexError(
                f"Path segment index {index} is out of range for {self._path!r}"
            ) from exc

    def get_all_queries(self) -> list[QueryPair]:
        """Return a copy of the query pairs in their current order."""
        return list(self._queries)

    def get_query(self, name: str, default: str = "") -> str:
        """Return the value of the first query with the given name.

        A query written without ``=`` has an empty value.

        :param name: query name
        :param default: a value to return when no query has the name
        """
        for pair in self._queries:
            if pair.name == name:
                return pair.value or ""

        return default

    def has_query(self, name: str) -> bool:
        return any(pair.name == name for pair in self._queries)

    # Mutators
    # --------

    def set_scheme(self, scheme: str):
        self._scheme = scheme

    def set_username(self, username: str):
        self._username = username

    def set_password(self, password: str):
        self._password = password

    def set_domain(self, domain: str):
        self._hostname = domain

    def set_port(self, port: TPort):
        """Set the port. Integers are stored as text, ``None`` removes the port."""
        self._port = "" if port is None else str(port)

    def set_path(self, path: str):
        self._path = path

    def set_anchor(self, anchor: str):
        self._anchor = anchor

    def set_path_segments(self, segments: list[str]):
        """Rebuild the path from the given segments. No segments give an empty path."""
        self._path = "".join(f"{PATH_SEPARATOR}{segment}" for segment in segments)

    def set_path_segment(self, segment: str, index: int):
        """Replace the path segment at the given index.

        An index outside of the current segments is ignored: the path is never
        extended to reach it.
        """
        segments = self.get_path_segments()
        try:
            segments[index] = segment
        except IndexError:
            logger.debug("Path segment %d not found in '%s', skip it", index, self._path)
            return

        self.set_path_segments(segments)

    def append_path_segment(self, segment: str):
        """Append the given segment keeping exactly one slash between it and the path."""
        path = self._path
        if path.endswith(PATH_SEPARATOR):
            path = path[:-1]

        if segment.startswith(PATH_SEPARATOR):
            segment = segment[1:]

        self._path = f"{path}{PATH_SEPARATOR}{segment}"

    def prepend_path_segment(self, segment: str):
        """Prepend the given segment keeping exactly one slash between it and the path.

        An empty path gives a trailing slash: ``""`` with ``"x"`` becomes ``"/x/"``.
        """
        path = self._path
        if path.startswith(PATH_SEPARATOR):
            path = path[1:]

        if segment.endswith(PATH_SEPARATOR):
            segment = segment[:-1]

        if not segment.startswith(PATH_SEPARATOR):
            segment = f"{PATH_SEPARATOR}{segment}"

        self._path = f"{segment}{PATH_SEPARATOR}{path}"

    def set_all_queries(self, queries: TQueries):
        """Replace all the queries with the given ones.

        :param queries: a mapping or a sequence of ``(name, value)`` pairs
        :raises URIValueError: if a pair has an unsupported shape
        """
        self._queries = list(iter_query_pairs(queries))

    def set_query(self, name: str, value: TQueryValue, overwrite: bool = True):
        """Set the value of the first query with the given name or append a new one.

        With ``overwrite=False`` a query which already has a non-empty value is kept.
        """
        if not overwrite and self.get_query(name):
            logger.debug("Query '%s' is already set, skip it", name)
            return

        for idx, pair in enumerate(self._queries):
            if pair.name == name:
                self._queries[idx] = pair._replace(value=value)
                return

        self._queries.append(QueryPair(name, value))

    def set_queries(self, queries: TQueries, overwrite: bool = True):
        """Set the given queries one by one, existing queries are kept.

        :param queries: a mapping or a sequence of ``(name, value)`` pairs
        :param overwrite: see :meth:`set_query`
        :raises URIValueError: if a pair has an unsupported shape
        """
        pairs = list(iter_query_pairs(queries))
        for pair in pairs:
            self.set_query(pair.name, pair.value, overwrite=overwrite)

    def remove_query(self, name: str) -> int:
        """Remove every query with the given name and return how many were removed."""
        queries = [pair for pair in self._queries if pair.name != name]
        removed = len(self._queries) - len(queries)
        self._queries = queries
        return removed

    # Serialization
    # -------------

    def get_query_string(self) -> str:
        return join_query_string(self._queries)

    def serialize(self) -> str:
        """Build the URI text from the current components.

        :raises URISerializeError: if the components cannot form a URI (e.g. a non-numeric port)
        """
        return build_uri(
            self._scheme,
            self._username,
            self._password,
            self._hostname,
            self._port,
            self._path,
            self.get_query_string(),
            self._anchor,
        )

    # Properties
    # ----------

    scheme = property(get_scheme, set_scheme)
    username = property(get_username, set_username)
    password = property(get_password, set_password)
    hostname = domain = property(get_domain, set_domain)
    port = property(get_port, set_port)
    path = property(get_path, set_path)
    anchor = fragment = property(get_anchor, set_anchor)
    path_segments = property(get_path_segments, set_path_segments)
    queries = property(get_all_queries, set_all_queries)
    query_string = property(get_query_string)

    @property
    def query(self) -> MultiDictProxy[str]:
        """A read-only :py:class:`multidict.MultiDictProxy` of the queries.

        .. code-block:: python

            uri = URI("http://a.com/?tag=a&tag=b")
            assert uri.query["tag"] == "a"
            assert uri.query.getall("tag") == ["a", "b"]

        See :py:mod:`multidict` documentation for further reference.
        """
        pairs = [(pair.name, pair.value or "") for pair in self._queries]
        return MultiDictProxy(MultiDict(pairs))


def parse_uri(uri: str) -> URI:
    """Parse the given text and return a :class:`URI`."""
    return URI.parse(uri)
