"""Utils package initialization."""

from .ui import print_and_log, print_exception, setup_logging
from .dialogs import UserInteraction, ConsoleInteraction, DialogInteraction, create_interaction

__all__ = [
    'print_and_log', 'print_exception', 'setup_logging',
    'UserInteraction', 'ConsoleInteraction', 'DialogInteraction', 'create_interaction'
]
