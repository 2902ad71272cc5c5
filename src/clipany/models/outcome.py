from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from clipany.exceptions import ClipanyError


class Outcome(BaseModel):
    """Result envelope returned by every clipboard operation.

    ``status`` follows HTTP conventions: 200 success, 400 bad input,
    412 precondition failed, 500 backend failure, 501 not implemented.
    """

    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    payload: Any = Field(default=None)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def success(cls, payload: Any = None, message: str = "OK") -> "Outcome":
        return cls(status=200, message=message, payload=payload)

    @classmethod
    def from_error(cls, error: ClipanyError) -> "Outcome":
        return cls(status=error.status, message=str(error))

    def as_envelope(self) -> List[Any]:
        if self.payload is None:
            return [self.status, self.message]
        return [self.status, self.message, self.payload]
