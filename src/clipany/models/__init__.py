from clipany.models.manager import Capability, ClipboardManagerName, Operation
from clipany.models.outcome import Outcome

__all__ = [
    'Capability',
    'ClipboardManagerName',
    'Operation',
    'Outcome',
]
