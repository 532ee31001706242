"""Save the live arrangement under a user-supplied name."""

from __future__ import annotations

import logging
from typing import Callable

from .dialog import NameDialog
from .store import ConfigStore
from .switcher import DisplayConfigSwitcher

log = logging.getLogger(__name__)

PROMPT_MESSAGE = "Enter a name for the current configuration."


class AddConfigWorkflow:
    """Prompt for a name, then append the live arrangement to the store."""

    def __init__(
        self,
        store: ConfigStore,
        switcher: DisplayConfigSwitcher,
        dialog: NameDialog,
        on_added: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._switcher = switcher
        self._dialog = dialog
        self._on_added = on_added
        self._handler_id: int | None = None

    @property
    def pending(self) -> bool:
        return self._handler_id is not None

    def begin(self) -> None:
        self._dialog.set_message(PROMPT_MESSAGE)
        self._dialog.set_name("")
        self.cancel()
        self._handler_id = self._dialog.connect("closed", self._on_dialog_closed)
        self._dialog.open()

    def cancel(self) -> None:
        """Drop the pending ``closed`` subscription, if any."""
        if self._handler_id is not None:
            self._dialog.disconnect(self._handler_id)
            self._handler_id = None

    def _on_dialog_closed(self, _dialog: NameDialog) -> None:
        self.cancel()

        if not self._dialog.is_valid():
            log.debug("Name prompt dismissed, nothing saved")
            return

        live = self._switcher.get_monitors_config()
        if live is None:
            log.warning("No live monitor state available, cannot save configuration")
            return

        self._store.append(live.to_configuration(self._dialog.get_name()))
        if self._on_added is not None:
            self._on_added()
