"""In-process event emitter and the wallet adapter surface built on it."""

from wallet_events.errors import InvalidListenerError, WalletError, WalletEventsError
from wallet_events.events import EventEmitter, Listener, current_context
from wallet_events.log import configure, setup_logging

__version__ = "0.1.0"

__all__ = [
    "EventEmitter",
    "InvalidListenerError",
    "Listener",
    "WalletError",
    "WalletEventsError",
    "__version__",
    "configure",
    "current_context",
    "setup_logging",
]
