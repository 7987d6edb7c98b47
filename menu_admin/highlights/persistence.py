"""Persistence boundary - whole-state snapshot/restore at session edges.

The snapshot is a JSON mirror of the entities: {"config": {...},
"weeklySchedule": {"0": [...], ..., "6": [...]}} with camelCase keys and
ISO-8601 timestamps. No migration or versioning is applied.
"""

from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import Field, FieldSerializationInfo, field_serializer, field_validator
from pydantic import ValidationError as PydanticValidationError

from menu_admin.config.settings import settings
from menu_admin.highlights.config_store import HighlightsConfigStore
from menu_admin.highlights.errors import SnapshotError
from menu_admin.highlights.schedule import WeeklyScheduleStore
from menu_admin.highlights.types import CamelModel, HighlightsConfig, WeeklySchedule
from menu_admin.highlights.validators import validate_config_fields


class HighlightsSnapshot(CamelModel):
    config: HighlightsConfig
    weekly_schedule: WeeklySchedule = Field(default_factory=WeeklySchedule)

    @field_validator("config")
    @classmethod
    def _check_config_fields(cls, config: HighlightsConfig) -> HighlightsConfig:
        result = validate_config_fields(config.model_dump(include={"title", "description", "active"}))
        if not result.is_valid:
            raise ValueError("; ".join(f"{field}: {message}" for field, message in result.errors.items()))
        return config

    @field_serializer("weekly_schedule")
    def _serialize_schedule(self, schedule: WeeklySchedule, info: FieldSerializationInfo) -> dict[str, Any]:
        return schedule.to_mapping(mode=info.mode, by_alias=info.by_alias)


def build_snapshot(config_store: HighlightsConfigStore, schedule_store: WeeklyScheduleStore) -> HighlightsSnapshot:
    return HighlightsSnapshot(config=config_store.config, weekly_schedule=schedule_store.schedule)


def dump_snapshot(snapshot: HighlightsSnapshot) -> str:
    return snapshot.model_dump_json(by_alias=True, indent=2)


def load_snapshot(data: str | bytes | dict[str, Any]) -> HighlightsSnapshot:
    """Parse a snapshot from JSON text or an already-decoded mapping.

    Raises:
        SnapshotError: If the payload does not match the snapshot format
    """
    try:
        if isinstance(data, dict):
            return HighlightsSnapshot.model_validate(data)
        return HighlightsSnapshot.model_validate_json(data)
    except PydanticValidationError as e:
        raise SnapshotError(f"Invalid highlights snapshot: {e.error_count()} error(s), first: {e.errors()[0]['msg']}") from e


def save_snapshot(snapshot: HighlightsSnapshot, path: str | Path | None = None) -> Path:
    """Write the snapshot to disk, replacing any previous file."""
    target = Path(path or settings.snapshot_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_suffix(target.suffix + ".tmp")
    temp_path.write_text(dump_snapshot(snapshot), encoding="utf-8")
    temp_path.replace(target)
    logger.info("Highlights snapshot saved", path=str(target))
    return target


def read_snapshot(path: str | Path | None = None) -> HighlightsSnapshot | None:
    """Read a snapshot from disk; None if no snapshot was saved yet.

    Raises:
        SnapshotError: If the file exists but cannot be parsed
    """
    source = Path(path or settings.snapshot_path)
    if not source.exists():
        logger.info("No highlights snapshot found", path=str(source))
        return None
    return load_snapshot(source.read_text(encoding="utf-8"))


def apply_snapshot(
    snapshot: HighlightsSnapshot,
    config_store: HighlightsConfigStore,
    schedule_store: WeeklyScheduleStore,
) -> None:
    config_store.replace(snapshot.config)
    schedule_store.replace_schedule(snapshot.weekly_schedule)
