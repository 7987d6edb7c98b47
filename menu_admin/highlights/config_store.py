"""Highlights configuration store - owner of the single config record.

Exactly one HighlightsConfig exists per session. It is mutated through
update_config/toggle_active, never deleted, and reset to defaults on demand.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from menu_admin.config.settings import settings
from menu_admin.highlights.errors import HighlightsError, ValidationError
from menu_admin.highlights.results import OperationResult
from menu_admin.highlights.types import HighlightsConfig, utc_now
from menu_admin.highlights.validators import validate_config_fields

EDITABLE_FIELDS = ("title", "description", "active")


def default_config() -> HighlightsConfig:
    return HighlightsConfig(
        title=settings.default_title,
        description=settings.default_description,
        active=True,
    )


class HighlightsConfigStore:
    """Accessor/mutator pair around the configuration singleton."""

    def __init__(self, config: HighlightsConfig | None = None) -> None:
        self._config = config.model_copy(deep=True) if config is not None else default_config()

    @property
    def config(self) -> HighlightsConfig:
        return self._config.model_copy(deep=True)

    @property
    def is_active(self) -> bool:
        return self._config.active

    def update_config(self, partial: Mapping[str, Any]) -> OperationResult:
        """Merge editable fields (title, description, active) after validation.

        Unknown or read-only fields are rejected. On failure the stored record
        is unchanged and the result carries a field -> message map.
        """
        try:
            unknown = {key: "Field cannot be updated" for key in partial if key not in EDITABLE_FIELDS}
            if unknown:
                raise ValidationError(unknown)

            merged = self._config.model_dump(include=set(EDITABLE_FIELDS))
            merged.update(partial)
            validate_config_fields(merged).raise_for_errors()

            description = merged.get("description")
            self._config = self._config.model_copy(
                update={
                    "title": merged["title"].strip(),
                    "description": description or "",
                    "active": merged["active"],
                    "updated_at": utc_now(),
                }
            )
        except HighlightsError as e:
            logger.warning("update_config rejected", error_code=e.code, error=str(e))
            return OperationResult.from_error(e)

        logger.info("Highlights config updated", fields=sorted(partial), active=self._config.active)
        return OperationResult.ok(self.config)

    def toggle_active(self) -> OperationResult:
        """Flip the active flag; title and description are left as stored."""
        self._config = self._config.model_copy(update={"active": not self._config.active, "updated_at": utc_now()})
        logger.info("Highlights config toggled", active=self._config.active)
        return OperationResult.ok(self.config)

    def reset(self) -> OperationResult:
        """Restore default title/description/active, keeping id and created_at."""
        defaults = default_config()
        self._config = self._config.model_copy(
            update={
                "title": defaults.title,
                "description": defaults.description,
                "active": defaults.active,
                "updated_at": utc_now(),
            }
        )
        logger.info("Highlights config reset to defaults")
        return OperationResult.ok(self.config)

    def replace(self, config: HighlightsConfig) -> None:
        """Swap in a whole record (session restore)."""
        self._config = config.model_copy(deep=True)
        logger.info("Highlights config replaced", title=self._config.title, active=self._config.active)
