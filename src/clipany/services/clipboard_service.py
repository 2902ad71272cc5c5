import logging
import sys
from typing import Callable, Optional, Sequence, TextIO, Union

from clipany.clipboard import DETECTION_ORDER, get_manager
from clipany.clipboard.detector import detect_clipboard_manager as _detect
from clipany.config import ClipboardConfig
from clipany.exceptions import (
    ClipanyError,
    InvalidInputError,
    InvalidManagerError,
    MissingInputError,
    NoManagerDetectedError,
)
from clipany.models import Capability, ClipboardManagerName, Operation, Outcome
from clipany.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

ManagerArg = Union[str, ClipboardManagerName, None]


class ClipboardService:
    """Routes clipboard operations to the active clipboard manager.

    Every public method returns an ``Outcome``; errors never propagate.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        config: Optional[ClipboardConfig] = None,
        detection_order: Sequence[ClipboardManagerName] = DETECTION_ORDER,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.config = config or ClipboardConfig()
        self.runner = runner or ProcessRunner(timeout=self.config.command_timeout)
        self.detection_order = tuple(detection_order)
        self._stdout = stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def detect_clipboard_manager(self) -> Optional[ClipboardManagerName]:
        return _detect(self.runner, self.detection_order, self.config)

    def clear_clipboard_history(self, clipboard_manager: ManagerArg = None) -> Outcome:
        return self._dispatch(Operation.CLEAR_HISTORY, clipboard_manager)

    def clear_clipboard_content(self, clipboard_manager: ManagerArg = None) -> Outcome:
        return self._dispatch(Operation.CLEAR_CONTENT, clipboard_manager)

    def get_clipboard_content(self, clipboard_manager: ManagerArg = None) -> Outcome:
        return self._dispatch(Operation.GET_CONTENT, clipboard_manager)

    def list_clipboard_history(self, clipboard_manager: ManagerArg = None) -> Outcome:
        return self._dispatch(Operation.LIST_HISTORY, clipboard_manager)

    def get_clipboard_history_item(self, index: int = 0, clipboard_manager: ManagerArg = None) -> Outcome:
        def validate() -> None:
            if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                raise InvalidInputError(
                    f"Invalid history index {index!r}, must be a non-negative integer")

        return self._dispatch(
            Operation.GET_HISTORY_ITEM, clipboard_manager, index, validate=validate)

    def add_clipboard_content(
        self,
        content: Optional[str] = None,
        clipboard_manager: ManagerArg = None,
        tee: bool = False,
    ) -> Outcome:
        def validate() -> None:
            if content is None:
                raise MissingInputError("Please specify content")

        outcome = self._dispatch(
            Operation.ADD_CONTENT, clipboard_manager, content, validate=validate)

        if tee and content is not None:
            self.stdout.write(content)
            self.stdout.flush()
        return outcome

    def _resolve_manager(self, clipboard_manager: ManagerArg) -> Optional[ClipboardManagerName]:
        explicit = clipboard_manager if clipboard_manager is not None else self.config.clipboard_manager
        if explicit is None:
            return self.detect_clipboard_manager()
        try:
            return ClipboardManagerName.parse(explicit)
        except ValueError:
            raise InvalidManagerError(explicit, ClipboardManagerName.names()) from None

    def _dispatch(
        self,
        operation: Operation,
        clipboard_manager: ManagerArg,
        *args,
        validate: Optional[Callable[[], None]] = None,
    ) -> Outcome:
        try:
            name = self._resolve_manager(clipboard_manager)
            if validate is not None:
                validate()
            if name is None:
                raise NoManagerDetectedError()

            manager = get_manager(name, self.runner, self.config)
            if manager.capability(operation) is not Capability.SUPPORTED:
                raise manager.unavailable_error(operation)

            logger.debug(f"Dispatching {operation.value} to {name.value}")
            payload = getattr(manager, operation.value)(*args)
        except ClipanyError as e:
            logger.debug(f"Cannot {operation.description}: [{e.status}] {e}")
            return Outcome.from_error(e)

        return Outcome.success(payload)


def _default_service() -> ClipboardService:
    return ClipboardService(config=ClipboardConfig.from_env())


def detect_clipboard_manager() -> Optional[ClipboardManagerName]:
    return _default_service().detect_clipboard_manager()


def clear_clipboard_history(clipboard_manager: ManagerArg = None) -> Outcome:
    return _default_service().clear_clipboard_history(clipboard_manager)


def clear_clipboard_content(clipboard_manager: ManagerArg = None) -> Outcome:
    return _default_service().clear_clipboard_content(clipboard_manager)


def get_clipboard_content(clipboard_manager: ManagerArg = None) -> Outcome:
    return _default_service().get_clipboard_content(clipboard_manager)


def list_clipboard_history(clipboard_manager: ManagerArg = None) -> Outcome:
    return _default_service().list_clipboard_history(clipboard_manager)


def get_clipboard_history_item(index: int = 0, clipboard_manager: ManagerArg = None) -> Outcome:
    return _default_service().get_clipboard_history_item(index, clipboard_manager)


def add_clipboard_content(
    content: Optional[str] = None,
    clipboard_manager: ManagerArg = None,
    tee: bool = False,
) -> Outcome:
    return _default_service().add_clipboard_content(content, clipboard_manager, tee)
