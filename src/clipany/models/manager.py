from enum import Enum
from typing import Optional, Union


class ClipboardManagerName(str, Enum):
    KLIPPER = "klipper"
    PARCELLITE = "parcellite"
    CLIPIT = "clipit"
    XCLIP = "xclip"

    @classmethod
    def parse(cls, value: Union[str, "ClipboardManagerName", None]) -> Optional["ClipboardManagerName"]:
        """Return the member for ``value``, ``None`` for ``None``.

        Raises ``ValueError`` for anything outside the known set.
        """
        if value is None or isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @classmethod
    def names(cls) -> str:
        return ", ".join(member.value for member in cls)


class Operation(str, Enum):
    GET_CONTENT = "get_content"
    ADD_CONTENT = "add_content"
    CLEAR_CONTENT = "clear_content"
    CLEAR_HISTORY = "clear_history"
    LIST_HISTORY = "list_history"
    GET_HISTORY_ITEM = "get_history_item"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Operation.GET_CONTENT: "get clipboard content",
    Operation.ADD_CONTENT: "add clipboard content",
    Operation.CLEAR_CONTENT: "clear clipboard content",
    Operation.CLEAR_HISTORY: "clear clipboard history",
    Operation.LIST_HISTORY: "list clipboard history",
    Operation.GET_HISTORY_ITEM: "get clipboard history item",
}


class Capability(str, Enum):
    SUPPORTED = "supported"
    NOT_IMPLEMENTED = "not_implemented"
    UNSUPPORTED = "unsupported"
