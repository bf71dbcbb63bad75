""" URI-Tools -- Tools to parse, edit and serialize URIs """
from __future__ import annotations

from .errors import URIError, URIIndexError, URIParseError, URISerializeError, URIValueError
from .query import QueryPair, join_query_string, split_query_string
from .uri import URI, parse_uri

__all__ = (
    # Errors
    "URIError",
    "URIIndexError",
    "URIParseError",
    "URISerializeError",
    "URIValueError",
    # URI
    "URI",
    "parse_uri",
    # Queries
    "QueryPair",
    "join_query_string",
    "split_query_string",
)
