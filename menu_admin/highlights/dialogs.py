"""Dialog/selection coordinator - which modal is open and what it targets.

Pure UI-state routing: no validation, no persistence, no business rules.
Dialogs are independent flags; callers decide whether to allow more than one
open at a time.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Literal

from loguru import logger


class DialogName(StrEnum):
    CONFIG = "config"
    ADD_PRODUCT = "addProduct"
    EDIT_DISCOUNT = "editDiscount"
    PREVIEW = "preview"
    DELETE = "delete"
    COPY_DAY = "copyDay"


SELECTION_KEYS = (
    "config",
    "product",
    "scheduleItem",
    "dayId",
    "deleteId",
    "copyFromDay",
    "copyToDay",
)

# Selection slice cleared when each dialog closes
DIALOG_SELECTION: dict[DialogName, tuple[str, ...]] = {
    DialogName.CONFIG: ("config",),
    DialogName.ADD_PRODUCT: ("product", "dayId"),
    DialogName.EDIT_DISCOUNT: ("scheduleItem", "dayId"),
    DialogName.PREVIEW: (),
    DialogName.DELETE: ("deleteId", "dayId"),
    DialogName.COPY_DAY: ("copyFromDay", "copyToDay"),
}


@dataclass(frozen=True)
class DialogIntent:
    """A UI intent: open or close a dialog, optionally carrying a payload.

    Attributes:
        kind: Target dialog
        action: "open" or "close"
        payload: Selection data stored on open (ignored on close)
    """

    kind: DialogName | str
    action: Literal["open", "close"] = "open"
    payload: Mapping[str, Any] | None = None


def _dialog_name(name: DialogName | str) -> DialogName:
    try:
        return DialogName(name)
    except ValueError as e:
        raise ValueError(f"Unknown dialog: {name}") from e


class DialogCoordinator:
    def __init__(self) -> None:
        self._dialogs: dict[DialogName, bool] = dict.fromkeys(DialogName, False)
        self._selected: dict[str, Any] = dict.fromkeys(SELECTION_KEYS)
        # Keys each open dialog wrote, so closing it never leaves them behind
        self._claimed: dict[DialogName, set[str]] = {name: set() for name in DialogName}

    @property
    def dialogs(self) -> dict[str, bool]:
        return {name.value: is_open for name, is_open in self._dialogs.items()}

    @property
    def selected_data(self) -> dict[str, Any]:
        return dict(self._selected)

    def is_open(self, name: DialogName | str) -> bool:
        return self._dialogs[_dialog_name(name)]

    def open_dialog(self, name: DialogName | str, data: Mapping[str, Any] | None = None) -> None:
        """Open a dialog and store its target under selected_data.

        Raises:
            ValueError: If the dialog or a selection key is unknown
        """
        dialog = _dialog_name(name)
        payload = dict(data or {})
        unknown = sorted(set(payload) - set(SELECTION_KEYS))
        if unknown:
            raise ValueError(f"Unknown selection keys for {dialog.value}: {', '.join(unknown)}")

        self._dialogs[dialog] = True
        self._selected.update(payload)
        self._claimed[dialog].update(payload)
        logger.debug("Dialog opened", dialog=dialog.value, keys=sorted(payload))

    def close_dialog(self, name: DialogName | str) -> None:
        """Close a dialog and clear its slice of selected_data."""
        dialog = _dialog_name(name)
        self._dialogs[dialog] = False
        for key in set(DIALOG_SELECTION[dialog]) | self._claimed[dialog]:
            self._selected[key] = None
        self._claimed[dialog].clear()
        logger.debug("Dialog closed", dialog=dialog.value)

    def close_all_dialogs(self) -> None:
        self._dialogs = dict.fromkeys(DialogName, False)
        self._selected = dict.fromkeys(SELECTION_KEYS)
        self._claimed = {name: set() for name in DialogName}

    def dispatch(self, intent: DialogIntent) -> None:
        if intent.action == "open":
            self.open_dialog(intent.kind, intent.payload)
        elif intent.action == "close":
            self.close_dialog(intent.kind)
        else:
            raise ValueError(f"Invalid dialog action: {intent.action}. Must be 'open' or 'close'")
