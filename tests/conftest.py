"""Shared test fixtures for billiard-saloon."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from billiard_saloon.config import SaloonConfig, TableSpec, save_config
from billiard_saloon.models import Table, TableType
from billiard_saloon.saloon import Saloon, create_saloon


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep fleet overrides from the host environment out of tests."""
    monkeypatch.delenv("SALOON_TABLES", raising=False)


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def saloon() -> Saloon:
    """A saloon with the default six-table fleet."""
    return create_saloon(SaloonConfig())


@pytest.fixture
def small_saloon() -> Saloon:
    """Two snooker tables and one billiard table."""
    return Saloon([
        Table(1, TableType.SNOOKER),
        Table(2, TableType.SNOOKER),
        Table(3, TableType.BILLIARD),
    ])


def setup_saloon_project(project_root: Path, config: SaloonConfig | None = None) -> SaloonConfig:
    """Write a saloon config at the given path.

    This replaces CLI-based initialization for testing.

    Args:
        project_root: Path to the project root
        config: Optional config to use (defaults to the default fleet)

    Returns:
        The config that was saved
    """
    if config is None:
        config = SaloonConfig()
    save_config(config, project_root)
    return config


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    """A temporary working directory with no saloon config."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def two_table_project(project: Path) -> Path:
    """A working directory configured with one REX and one BILLIARD table."""
    setup_saloon_project(
        project,
        SaloonConfig(
            tables=[
                TableSpec(id=10, type=TableType.REX),
                TableSpec(id=20, type=TableType.BILLIARD),
            ]
        ),
    )
    return project
