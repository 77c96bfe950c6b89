"""Domain exceptions for the event emitter and wallet adapters."""

from __future__ import annotations


class WalletEventsError(Exception):
    """Base for wallet-events domain errors."""

    def __init__(
        self,
        message: str = "",
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class InvalidListenerError(WalletEventsError, TypeError):
    """Listener passed to on/once/add_listener is not callable."""

    def __init__(self, fn: object) -> None:
        super().__init__(
            "The listener must be callable",
            code="invalid_listener",
            details={"listener": repr(fn)},
        )


class WalletConfigurationError(WalletEventsError):
    """Config value could not be parsed."""


class WalletError(WalletEventsError):
    """Base for wallet adapter failures. ``error`` is the underlying cause, if any."""

    def __init__(
        self,
        message: str = "",
        error: BaseException | None = None,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details, original_error=error)

    @property
    def error(self) -> BaseException | None:
        return self.original_error


class WalletNotReadyError(WalletError):
    """Wallet is not installed or cannot be loaded."""


class WalletNotConnectedError(WalletError):
    """Operation requires a connected wallet."""


class WalletConnectionError(WalletError):
    """Connecting to the wallet failed."""


class WalletDisconnectionError(WalletError):
    """Disconnecting from the wallet failed."""


class WalletSendTransactionError(WalletError):
    """Sending a transaction through the wallet failed."""
