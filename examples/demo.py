"""Parse a URI, edit its path and queries, print the result."""

from uri_tools import URI


def main() -> URI:
    uri = URI.parse("http://www.google.com/index.html?test=my%20data&test2=something1234")
    print(uri.get_query("test"))  # my%20data

    uri.set_path("/path/to/location")
    uri / "extra"
    "new" / uri
    print(uri.get_path())  # /new/path/to/location/extra

    uri.set_path_segment("changed", 1)
    uri.set_query("ex1", "hello")
    uri.set_query("ex1", "test", overwrite=False)
    uri.set_queries([["ex2", "world"]])
    print(uri)

    return uri


if __name__ == "__main__":
    main()

# ruff: noqa: T201, B018
