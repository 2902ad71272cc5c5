from .clipboard_service import ClipboardService

__all__ = ['ClipboardService']
