from __future__ import annotations

from typing import Final

QUERY_SEPARATOR: Final = "&"
PAIR_SEPARATOR: Final = "="
PATH_SEPARATOR: Final = "/"
USERINFO_SEPARATOR: Final = "@"
PORT_SEPARATOR: Final = ":"
