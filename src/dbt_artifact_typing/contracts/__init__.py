"""Per-version artifact shapes.

Each ``TypedDict`` here names one published dbt schema version. They
describe the top-level layout only and are used purely as static type
tags: nothing checks an artifact against them at runtime.

Many consecutive versions share the same top-level keys (run-results
v2-v6, sources v2-v3, manifest v1-v3 and v4-v8), so the ``Parsed*``
unions cannot be narrowed by a type checker from the value alone. Use a
version-pinned parser (``parse_manifest_v12``) when the version is known,
or ``<CATEGORY>_PARSER.contract_for(raw)`` to get the runtime tag.
"""
