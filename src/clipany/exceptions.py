"""Error taxonomy for clipboard operations.

Backends and the dispatcher raise these internally; ``ClipboardService``
turns them into ``Outcome`` objects so nothing escapes to callers.
"""
from typing import Optional, Sequence


class ClipanyError(Exception):
    status: int = 500


class InvalidManagerError(ClipanyError):
    status = 400

    def __init__(self, value: object, known: str):
        super().__init__(
            f"Unknown clipboard manager {value!r}, must be one of: {known}")
        self.value = value


class InvalidInputError(ClipanyError):
    status = 400


class MissingInputError(InvalidInputError):
    pass


class NoManagerDetectedError(ClipanyError):
    status = 412

    def __init__(self, message: str = "Can't detect any known clipboard manager"):
        super().__init__(message)


class UnsupportedOperationError(ClipanyError):
    status = 412

    def __init__(self, manager: str, description: str):
        super().__init__(
            f"Cannot {description} (clipboard manager={manager})")
        self.manager = manager


class OperationNotImplementedError(ClipanyError):
    status = 501

    def __init__(self, manager: str, description: str):
        super().__init__(
            f"Not yet implemented: {description} (clipboard manager={manager})")
        self.manager = manager


class BackendExecutionError(ClipanyError):
    status = 500

    def __init__(self, message: str, exit_code: int, stderr: str = ""):
        super().__init__(f"{message}: {exit_code}")
        self.exit_code = exit_code
        self.stderr = stderr


class PipeCloseError(BackendExecutionError):
    """Raised when a command fed through a stdin pipe does not exit cleanly."""

    def __init__(self, command: Sequence[str], exit_code: int, stderr: str = "",
                 message: Optional[str] = None):
        text = message or f"Can't close pipe to {' '.join(command)}"
        super().__init__(text, exit_code, stderr)
        self.command = tuple(command)
