"""Behaviour tests for generating man pages from a command tree.

These pytest-bdd scenarios drive :class:`cmdman.generator.ManPageGenerator`
end-to-end from the feature file ``man_pages.feature``: a two-level tree must
produce one page per command, children before parents, with the shared author
text and cross-references; a nameless root must fail before touching disk.

Usage
-----
Run ``pytest tests/bdd/test_man_pages.py -v`` after installing the test extra
(``pip install -e '.[test]'``). No external services are required.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from cmdman.command import Command
from cmdman.config import ManPageOptions
from cmdman.generator import ManPageGenerator, MissingCommandNameError

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "man_pages.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a command tree with "{root}" and its subcommand "{child}"'))
def given_tree(root: str, child: str, scenario_state: ScenarioState) -> None:
    command = Command(use=root, short=f"The {root} tool")
    command.add_command(Command(use=child, short=f"The {child} command"))
    scenario_state["root"] = command


@given("a root command without a name")
def given_nameless_root(scenario_state: ScenarioState) -> None:
    scenario_state["root"] = Command(use="")


@given(parsers.parse('generation options with author "{author}"'))
def given_options(author: str, tmp_path: Path, scenario_state: ScenarioState) -> None:
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    scenario_state["output_dir"] = output_dir
    scenario_state["options"] = ManPageOptions(
        directory=output_dir,
        author=author,
        date=dt.datetime(2026, 1, 1, tzinfo=dt.UTC),
    )


@when("I generate the man pages")
def when_generate(scenario_state: ScenarioState) -> None:
    generator = ManPageGenerator(scenario_state["options"])
    scenario_state["written"] = generator.run(scenario_state["root"])


@when("I try to generate the man pages")
def when_try_generate(scenario_state: ScenarioState) -> None:
    generator = ManPageGenerator(scenario_state["options"])
    try:
        generator.run(scenario_state["root"])
    except MissingCommandNameError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('the pages "{first}" and "{second}" are written in that order'))
def then_pages_in_order(first: str, second: str, scenario_state: ScenarioState) -> None:
    written = typ.cast("list[Path]", scenario_state["written"])
    assert [path.name for path in written] == [first, second], (
        f"expected {first} before {second}, got {[path.name for path in written]!r}"
    )


@then(parsers.parse('every page has an AUTHOR section containing "{author}"'))
def then_author_everywhere(author: str, scenario_state: ScenarioState) -> None:
    for path in typ.cast("list[Path]", scenario_state["written"]):
        page = path.read_text(encoding="utf-8")
        assert f".SH AUTHOR\n{author}\n" in page, f"missing AUTHOR in {path.name}"


@then(parsers.parse('the page "{name}" cross-references "{cmd_path}"'))
def then_cross_reference(name: str, cmd_path: str, scenario_state: ScenarioState) -> None:
    page = (scenario_state["output_dir"] / name).read_text(encoding="utf-8")
    see_also = page.split(".SH SEE ALSO\n", 1)[1]
    reference = cmd_path.replace(" ", "\\-")
    assert see_also.splitlines() == [f".BR {reference} (1)"]


@then("generation fails with a missing command name error")
def then_missing_name(scenario_state: ScenarioState) -> None:
    assert isinstance(scenario_state.get("error"), MissingCommandNameError)


@then("no page is written")
def then_nothing_written(scenario_state: ScenarioState) -> None:
    assert list(scenario_state["output_dir"].iterdir()) == []
