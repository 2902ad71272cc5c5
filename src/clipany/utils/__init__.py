from clipany.utils.process import CommandResult, ProcessRunner, chomp

__all__ = [
    'CommandResult',
    'ProcessRunner',
    'chomp',
]
