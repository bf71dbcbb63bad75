from __future__ import annotations


def test_types_available():
    from uri_tools import types

    assert types.TQueryValue
    assert types.TQueryItem
    assert types.TQueries
    assert types.TPort
    assert types.TComponents


def test_errors():
    from uri_tools import errors

    assert issubclass(errors.URIParseError, errors.URIError)
    assert issubclass(errors.URIParseError, ValueError)
    assert issubclass(errors.URISerializeError, ValueError)
    assert issubclass(errors.URIValueError, ValueError)
    assert issubclass(errors.URIIndexError, errors.URIError)
    assert issubclass(errors.URIIndexError, IndexError)
