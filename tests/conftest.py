from __future__ import annotations

import pytest

GOOGLE_URI = "http://www.google.com/index.html?test=my%20data&test2=something1234"


@pytest.fixture(scope="session")
def google_uri():
    return GOOGLE_URI


@pytest.fixture()
def uri(google_uri):
    from uri_tools import URI

    return URI(google_uri)


@pytest.fixture()
def gen_uri():
    from uri_tools import URI

    def gen_uri(path="/", query="", scheme="http", host="example.com", fragment=""):
        text = f"{scheme}://{host}{path}"
        if query:
            text = f"{text}?{query}"
        if fragment:
            text = f"{text}#{fragment}"

        return URI(text)

    return gen_uri
