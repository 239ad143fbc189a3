"""Parsers hold no mutable state and can be shared across threads."""

from concurrent.futures import ThreadPoolExecutor

from dbt_artifact_typing.api import parse_manifest, parse_run_results
from dbt_artifact_typing.errors import UnsupportedVersion


def test_thread_pool_over_many_artifacts(make_artifact):
    artifacts = [make_artifact("run-results", (i % 6) + 1, results=[i]) for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        parsed = list(pool.map(parse_run_results, artifacts))

    assert all(p is a for p, a in zip(parsed, artifacts))
    assert [p["results"] for p in parsed] == [[i] for i in range(200)]


def test_failures_do_not_leak_between_calls(make_artifact):
    good = make_artifact("manifest", 12)
    bad = make_artifact("manifest", 99)

    def _parse(raw):
        try:
            return parse_manifest(raw)
        except UnsupportedVersion as e:
            return e.version

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(_parse, [good, bad] * 50))

    assert results == [good, 99] * 50
