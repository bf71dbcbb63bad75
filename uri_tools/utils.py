"""URI-Tools Utils."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yarl import URL

from .constants import PORT_SEPARATOR, USERINFO_SEPARATOR
from .errors import URIParseError, URISerializeError

if TYPE_CHECKING:
    from .types import TComponents


def split_uri(text: str) -> TComponents:
    """Split the given text into raw (still percent-encoded) components.

    :return: scheme, username, password, hostname, port, path, query string, fragment
    :raises URIParseError: if :py:class:`yarl.URL` rejects the text
    """
    if not isinstance(text, str):
        raise URIParseError(f"URI must be a string, got {type(text).__name__}")

    try:
        url = URL(text, encoded=True)
        return (
            url.scheme,
            url.raw_user or "",
            url.raw_password or "",
            url.raw_host or "",
            split_port(url.raw_authority),
            url.raw_path,
            url.raw_query_string,
            url.raw_fragment,
        )
    except (TypeError, ValueError) as exc:
        raise URIParseError(f"Invalid URI {text!r}: {exc}") from exc


def build_uri(
    scheme: str,
    username: str,
    password: str,
    hostname: str,
    port: str,
    path: str,
    query_string: str,
    fragment: str,
) -> str:
    """Join the given raw components into text.

    :raises URISerializeError: if :py:class:`yarl.URL` cannot render the components
    """
    try:
        url = URL.build(
            scheme=scheme,
            authority=make_authority(username, password, hostname, port),
            path=path,
            query_string=query_string,
            fragment=fragment,
            encoded=True,
        )
        return str(url)
    except (TypeError, ValueError) as exc:
        raise URISerializeError(f"Cannot build URI: {exc}") from exc


def split_port(authority: str) -> str:
    """Return the port of the given raw authority as written, without conversion."""
    hostinfo = authority.rpartition(USERINFO_SEPARATOR)[2]
    if hostinfo.startswith("["):
        _, _, hostinfo = hostinfo.partition("]")
        return hostinfo[1:] if hostinfo.startswith(PORT_SEPARATOR) else ""

    _, sep, port = hostinfo.rpartition(PORT_SEPARATOR)
    return port if sep else ""


def make_authority(username: str, password: str, hostname: str, port: str) -> str:
    """Build a raw authority. IPv6 hosts are enclosed in brackets."""
    authority = f"[{hostname}]" if PORT_SEPARATOR in hostname else hostname
    if port:
        authority = f"{authority}{PORT_SEPARATOR}{port}"

    if username or password:
        userinfo = f"{username}{PORT_SEPARATOR}{password}" if password else username
        authority = f"{userinfo}{USERINFO_SEPARATOR}{authority}"

    return authority
