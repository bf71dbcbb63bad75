from __future__ import annotations


class URIError(Exception):
    """Base class for URI-Tools Errors."""


class URIParseError(URIError, ValueError):
    """Raise when the given text cannot be split into URI components."""


class URISerializeError(URIError, ValueError):
    """Raise when URI components cannot be joined back into text."""


class URIValueError(URIError, ValueError):
    """Raise when a query pair has an unsupported shape."""


class URIIndexError(URIError, IndexError):
    """Raise when a path segment index is out of range."""
