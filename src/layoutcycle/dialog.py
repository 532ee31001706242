"""Name prompt contract used when saving the current arrangement."""

from __future__ import annotations

from gi.repository import GObject

MAX_NAME_LENGTH = 15


class NameDialog(GObject.Object):
    """Modal name entry.

    Subclasses supply :meth:`present` and wire their Cancel/Confirm buttons to
    :meth:`cancel` and :meth:`confirm`.  The dialog is reused between
    prompts, so ``closed`` fires once per prompt.
    """

    __gsignals__ = {
        "closed": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(self) -> None:
        super().__init__()
        self._message = ""
        self._name = ""
        self._valid = False

    def set_message(self, message: str) -> None:
        self._message = message

    def get_message(self) -> str:
        return self._message

    def set_name(self, name: str) -> None:
        self._name = name[:MAX_NAME_LENGTH]

    def get_name(self) -> str:
        return self._name

    def is_valid(self) -> bool:
        return self._valid

    def open(self) -> None:
        """Show the prompt.  A prompt dismissed without Confirm is invalid."""
        self._valid = False
        self.present()

    def present(self) -> None:
        raise NotImplementedError

    def confirm(self) -> None:
        self._valid = True
        self.emit("closed")

    def cancel(self) -> None:
        self._valid = False
        self.emit("closed")
