"""Conformance fixture loader for matchcase.

Loads YAML fixtures from tests/fixtures/ and converts them into match
tables for parametrized testing. Every fixture is run twice: through the
registry (config path) and through match() (dispatcher path), so the two
entry points are held to the same expectations.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from matchcase import (
    MatchTable,
    Registry,
    RegistryBuilder,
    parse_table_config,
    register_core_guards,
)
from matchcase.testing import register

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    table: MatchTable
    value: Any
    expect: Any

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


def make_registry() -> Registry:
    """Build a registry with the core guards and the test domain."""
    builder = register_core_guards(RegistryBuilder())
    return register(builder).build()


# ─── Parametrization ───────────────────────────────────────────────────────


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize any test that asks for a conformance_case."""
    if "conformance_case" in metafunc.fixturenames:
        cases = load_fixtures()
        metafunc.parametrize("conformance_case", cases, ids=[c.id for c in cases])


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all conformance fixtures."""
    registry = make_registry()
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file, registry))
    return cases


def _load_file(path: Path, registry: Registry) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = f"{path.stem}/{doc['name']}"
            table = registry.load_table(parse_table_config(doc["table"]))
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        table=table,
                        value=case["value"],
                        expect=case["expect"],
                    )
                )
    return cases
