"""Configuration management for Billiard Saloon."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from . import CONFIG_FILE, SALOON_DIR
from .models import TableType


class TableSpec(BaseModel):
    """One table of the fleet."""

    id: int = Field(ge=1)
    type: TableType


# Fleet installed at startup when nothing else is configured
DEFAULT_FLEET = [
    (1, TableType.SNOOKER),
    (2, TableType.SNOOKER),
    (3, TableType.BILLIARD),
    (4, TableType.BILLIARD),
    (5, TableType.BILLIARD),
    (6, TableType.REX),
]


def _default_tables() -> list[TableSpec]:
    return [TableSpec(id=table_id, type=table_type) for table_id, table_type in DEFAULT_FLEET]


class SaloonConfig(BaseModel):
    """Configuration for Billiard Saloon.

    Only the fleet layout is configurable. Base prices are fixed per table type.
    """

    version: int = 1
    tables: list[TableSpec] = Field(default_factory=_default_tables)

    @field_validator("tables")
    @classmethod
    def _unique_ids(cls, tables: list[TableSpec]) -> list[TableSpec]:
        seen: set[int] = set()
        for table in tables:
            if table.id in seen:
                raise ValueError(f"Duplicate table id: {table.id}")
            seen.add(table.id)
        return tables


def get_saloon_dir(project_root: Path) -> Path:
    """Directory holding the saloon's settings."""
    return project_root / SALOON_DIR


def get_config_path(project_root: Path) -> Path:
    return get_saloon_dir(project_root) / CONFIG_FILE


def load_config(project_root: Path) -> SaloonConfig:
    """Read the fleet for a saloon rooted at ``project_root``.

    A missing config file means the default fleet. ``SALOON_TABLES``
    replaces whatever fleet the file describes.
    """
    config_path = get_config_path(project_root)
    if not config_path.exists():
        return _apply_env_overrides(SaloonConfig())

    config = SaloonConfig.model_validate(json.loads(config_path.read_text()))
    return _apply_env_overrides(config)


def save_config(config: SaloonConfig, project_root: Path) -> None:
    """Write the fleet as JSON, creating the saloon directory on first use."""
    config_path = get_config_path(project_root)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.model_dump(mode="json"), indent=2))


def create_default_config() -> SaloonConfig:
    """Create a configuration holding the default fleet."""
    return SaloonConfig()


def parse_fleet(value: str) -> list[TableSpec]:
    """Parse a fleet description such as ``"1:SNOOKER,2:REX"``."""
    tables = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        table_id, sep, type_name = entry.partition(":")
        if not sep:
            raise ValueError(f"Invalid table entry (expected ID:TYPE): {entry!r}")
        try:
            table_type = TableType[type_name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown table type: {type_name.strip()!r}") from None
        try:
            tables.append(TableSpec(id=int(table_id), type=table_type))
        except ValueError:
            raise ValueError(f"Invalid table id: {table_id!r}") from None
    return tables


def _apply_env_overrides(config: SaloonConfig) -> SaloonConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump(mode="json")

    # SALOON_TABLES
    if fleet := os.environ.get("SALOON_TABLES"):
        data["tables"] = [table.model_dump(mode="json") for table in parse_fleet(fleet)]

    return SaloonConfig.model_validate(data)
