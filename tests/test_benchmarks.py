import pytest


@pytest.mark.benchmark(group="parse", disable_gc=True)
def test_benchmark_parse_serialize(benchmark, google_uri):
    from uri_tools import URI

    def run_benchmark():
        uri = URI(google_uri)
        assert uri.get_query("test2")
        return str(uri)

    res = benchmark(run_benchmark)
    assert res == google_uri


@pytest.mark.benchmark(group="edit", disable_gc=True)
def test_benchmark_edit(benchmark, uri):
    from copy import copy

    def run_benchmark():
        edited = copy(uri)
        edited / "extra"
        "new" / edited
        edited.set_path_segment("changed", 1)
        edited.set_queries([["ex1", "hello"], ["test", "other"]], overwrite=False)
        return edited.serialize()

    res = benchmark(run_benchmark)
    assert res == (
        "http://www.google.com/new/changed/extra"
        "?test=my%20data&test2=something1234&ex1=hello"
    )
