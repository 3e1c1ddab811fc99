"""Behaviour tests for aggregating a specification into text artifacts.

These pytest-bdd scenarios, driven by ``features/spec_aggregation.feature``,
build a small docs tree under ``tmp_path`` (a ``docs.json`` navigation file,
``.mdx`` pages with frontmatter, and optional schema files) and run
``SpecAggregator`` against it. They cover navigation-ordered joining, skipping
of missing pages, and the full artifact with embedded schema sections.

Usage
-----
Run ``pytest tests/bdd/test_spec_aggregation.py -v``. No network access or
external tools are required.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from spec_txt.config import BuildConfig
from spec_txt.generator import BuildReport, SpecAggregator

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "spec_aggregation.feature"
)
scenarios(FEATURE_FILE)

LIFECYCLE_BODY = "The lifecycle has three phases.\n\n1. Initialization"
TOOLS_BODY = "Servers expose tools.\n\n---\n\nSee also: prompts."

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_page(spec_root: Path, reference: str, body: str) -> None:
    path = spec_root / f"{reference.lstrip('/')}.mdx"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\ntitle: {path.stem}\n---\n\n{body}\n", encoding="utf-8")


@given(parsers.parse('a navigation config with a "{label}" group'))
def given_navigation(
    tmp_path: Path, scenario_state: ScenarioState, label: str
) -> None:
    """Write docs.json with one Specification tab and a single group."""
    docs = tmp_path / "docs"
    docs.mkdir()
    payload = {
        "navigation": {
            "tabs": [
                {"tab": "Documentation", "groups": [{"group": "Intro", "pages": ["intro"]}]},
                {
                    "tab": "Specification",
                    "groups": [
                        {"group": label, "pages": ["/basic/lifecycle", "/server/tools"]}
                    ],
                },
            ]
        }
    }
    (docs / "docs.json").write_text(json.dumps(payload), encoding="utf-8")
    scenario_state["config"] = BuildConfig(
        navigation=docs / "docs.json",
        docs_root=docs,
        spec_root=docs / "specification",
        schema_root=tmp_path / "schema",
        output=tmp_path / "spec.txt",
        full_output=tmp_path / "spec-full.txt",
    )


@given('the pages "/basic/lifecycle" and "/server/tools" exist with frontmatter')
def given_both_pages(scenario_state: ScenarioState) -> None:
    """Write both specification pages."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    _write_page(config.spec_root, "/basic/lifecycle", LIFECYCLE_BODY)
    _write_page(config.spec_root, "/server/tools", TOOLS_BODY)


@given('only the page "/basic/lifecycle" exists with frontmatter')
def given_lifecycle_only(scenario_state: ScenarioState) -> None:
    """Write the lifecycle page and leave tools missing."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    _write_page(config.spec_root, "/basic/lifecycle", LIFECYCLE_BODY)


@given(parsers.parse('schema files exist for version "{version}"'))
def given_schema_files(scenario_state: ScenarioState, version: str) -> None:
    """Write schema.ts and schema.json for the version."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    schema_dir = config.schema_root / version
    schema_dir.mkdir(parents=True)
    (schema_dir / "schema.ts").write_text("export interface Tool {}", encoding="utf-8")
    (schema_dir / "schema.json").write_text('{"definitions": {}}', encoding="utf-8")


@when("I aggregate the specification")
def when_aggregate(scenario_state: ScenarioState) -> None:
    """Run the aggregator for the primary artifact only."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    scenario_state["report"] = SpecAggregator(config).run()


@when("I aggregate the specification with schema files")
def when_aggregate_full(scenario_state: ScenarioState) -> None:
    """Run the aggregator requesting the full artifact."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    scenario_state["report"] = SpecAggregator(config).run(include_full=True)


@then("the primary artifact contains both sections in navigation order")
def then_both_sections(scenario_state: ScenarioState) -> None:
    """Verify the exact joined text for both pages."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    expected = (
        f"# basic/lifecycle\n\n{LIFECYCLE_BODY}\n\n---\n\n# server/tools\n\n{TOOLS_BODY}"
    )
    actual = config.output.read_text(encoding="utf-8")
    assert actual == expected, f"unexpected artifact text: {actual!r}"


@then("the primary artifact contains only the lifecycle section")
def then_lifecycle_only(scenario_state: ScenarioState) -> None:
    """Verify no placeholder is emitted for the missing page."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    actual = config.output.read_text(encoding="utf-8")
    assert actual == f"# basic/lifecycle\n\n{LIFECYCLE_BODY}"


@then(
    parsers.parse(
        "the summary reports {resolved:d} resolved and {missing:d} missing pages"
    )
)
def then_summary_counts(
    scenario_state: ScenarioState, resolved: int, missing: int
) -> None:
    """Verify the resolved and missing counts recorded in the report."""
    report = typ.cast("BuildReport", scenario_state["report"])
    assert report.pages_found == 2
    assert len(report.resolved) == resolved
    assert len(report.missing) == missing
    assert f"pages resolved: {resolved}" in report.summary_lines()


@then(parsers.parse('the missing page "{reference}" is reported'))
def then_missing_reported(scenario_state: ScenarioState, reference: str) -> None:
    """Verify the miss names the raw navigation reference."""
    report = typ.cast("BuildReport", scenario_state["report"])
    assert [page.reference for page in report.missing] == [reference]


@then("the full artifact appends the schema sections after the pages")
def then_full_artifact(scenario_state: ScenarioState) -> None:
    """Verify the schema sections follow the primary content in fixed order."""
    config = typ.cast("BuildConfig", scenario_state["config"])
    primary = config.output.read_text(encoding="utf-8")
    full = config.full_output.read_text(encoding="utf-8")
    assert full == (
        primary
        + "\n\n---\n\n# schema.ts\n\n```typescript\nexport interface Tool {}\n```"
        + '\n\n---\n\n# schema.json\n\n```json\n{"definitions": {}}\n```'
    )
