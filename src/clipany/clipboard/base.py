from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from clipany.config import ClipboardConfig
from clipany.exceptions import (
    BackendExecutionError,
    OperationNotImplementedError,
    UnsupportedOperationError,
)
from clipany.models import Capability, ClipboardManagerName, Operation
from clipany.utils.process import CommandResult, ProcessRunner


class ClipboardManager(ABC):
    """One clipboard-manager backend.

    Subclasses declare what they can do in ``capabilities``; every operation
    absent from the table is ``Capability.UNSUPPORTED``. The default
    implementations below raise the matching error.
    """

    name: ClipboardManagerName
    capabilities: Dict[Operation, Capability] = {}

    def __init__(self, runner: ProcessRunner, config: Optional[ClipboardConfig] = None):
        self.runner = runner
        self.config = config or ClipboardConfig()

    @classmethod
    @abstractmethod
    def probe(cls, runner: ProcessRunner, config: ClipboardConfig) -> bool:
        """Return True when this manager is active in the current session."""

    @classmethod
    def capability(cls, operation: Operation) -> Capability:
        return cls.capabilities.get(operation, Capability.UNSUPPORTED)

    def get_content(self) -> str:
        raise self.unavailable_error(Operation.GET_CONTENT)

    def add_content(self, content: str) -> None:
        raise self.unavailable_error(Operation.ADD_CONTENT)

    def clear_content(self) -> None:
        raise self.unavailable_error(Operation.CLEAR_CONTENT)

    def clear_history(self) -> None:
        raise self.unavailable_error(Operation.CLEAR_HISTORY)

    def list_history(self) -> List[str]:
        raise self.unavailable_error(Operation.LIST_HISTORY)

    def get_history_item(self, index: int) -> Optional[str]:
        raise self.unavailable_error(Operation.GET_HISTORY_ITEM)

    def unavailable_error(self, operation: Operation) -> Exception:
        if self.capability(operation) is Capability.NOT_IMPLEMENTED:
            return OperationNotImplementedError(self.name.value, operation.description)
        return UnsupportedOperationError(self.name.value, operation.description)

    @staticmethod
    def _check(result: CommandResult, message: str) -> str:
        if not result.ok:
            raise BackendExecutionError(message, result.returncode, result.stderr)
        return result.stdout
