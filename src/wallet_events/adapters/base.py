"""Base wallet adapter: readiness, connection state and lifecycle events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NewType, Protocol

from loguru import logger

from wallet_events.errors import WalletError, WalletNotConnectedError
from wallet_events.events import EventEmitter

WalletName = NewType("WalletName", str)


class WalletReadyState(str, Enum):
    """Whether a wallet can be used from this process."""

    INSTALLED = "Installed"
    NOT_DETECTED = "NotDetected"
    LOADABLE = "Loadable"
    UNSUPPORTED = "Unsupported"


class WalletAdapterEvent(str, Enum):
    """Event identifiers emitted by wallet adapters. Equal to their string values."""

    CONNECT = "connect"
    DISCONNECT = "disconnect"
    ERROR = "error"
    READY_STATE_CHANGE = "readyStateChange"


class WalletAdapterEvents(Protocol):
    """Listener signatures per event. Documentation only; emit does not check payloads."""

    def connect(self, public_key: Any) -> None: ...

    def disconnect(self) -> None: ...

    def error(self, error: WalletError) -> None: ...

    def ready_state_change(self, ready_state: WalletReadyState) -> None: ...


@dataclass
class SendOptions:
    skip_preflight: bool = False
    preflight_commitment: str | None = None
    max_retries: int | None = None
    min_context_slot: int | None = None


@dataclass
class SendTransactionOptions(SendOptions):
    signers: list[Any] = field(default_factory=list)


class Blockhash(Protocol):
    blockhash: str


class Transaction(Protocol):
    fee_payer: Any
    recent_blockhash: str | None


class Connection(Protocol):
    async def get_latest_blockhash(
        self,
        commitment: str | None = None,
        min_context_slot: int | None = None,
    ) -> Blockhash: ...


class BaseWalletAdapter(EventEmitter[str], ABC):
    """Interface for wallet adapters.

    Subclasses emit ``connect(public_key)`` once connected, ``disconnect()``
    once disconnected, ``error(WalletError)`` on internal faults and
    ``readyStateChange(state)`` when readiness changes (see
    :meth:`_set_ready_state`). Callers subscribe with on/once/off.
    """

    supported_transaction_versions: frozenset[Any] | None = None

    @property
    @abstractmethod
    def name(self) -> WalletName:
        ...

    @property
    @abstractmethod
    def url(self) -> str:
        ...

    @property
    @abstractmethod
    def icon(self) -> str:
        ...

    @property
    @abstractmethod
    def ready_state(self) -> WalletReadyState:
        ...

    @property
    @abstractmethod
    def public_key(self) -> Any | None:
        ...

    @property
    @abstractmethod
    def connecting(self) -> bool:
        ...

    @property
    def connected(self) -> bool:
        return self.public_key is not None

    async def auto_connect(self) -> None:
        await self.connect()

    @abstractmethod
    async def connect(self) -> None:
        """Connect to the wallet; emit ``connect`` on success."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Disconnect from the wallet; emit ``disconnect``."""
        ...

    @abstractmethod
    async def send_transaction(
        self,
        transaction: Transaction,
        connection: Connection,
        options: SendTransactionOptions | None = None,
    ) -> str:
        """Sign and send ``transaction``; return its signature."""
        ...

    def _set_ready_state(self, ready_state: WalletReadyState) -> None:
        """Store ``ready_state`` and emit ``readyStateChange`` if it changed.

        Subclasses implement the ``ready_state`` property by reading
        ``_ready_state``.
        """
        if getattr(self, "_ready_state", None) == ready_state:
            return
        self._ready_state = ready_state
        logger.debug("Wallet {} ready state -> {}", self.name, ready_state.value)
        self.emit(WalletAdapterEvent.READY_STATE_CHANGE, ready_state)

    async def _prepare_transaction(
        self,
        transaction: Transaction,
        connection: Connection,
        options: SendOptions | None = None,
    ) -> Transaction:
        """Fill in fee payer and recent blockhash when the transaction lacks them."""
        public_key = self.public_key
        if public_key is None:
            raise WalletNotConnectedError("Wallet not connected")

        options = options or SendOptions()
        transaction.fee_payer = transaction.fee_payer or public_key
        if not transaction.recent_blockhash:
            latest = await connection.get_latest_blockhash(
                commitment=options.preflight_commitment,
                min_context_slot=options.min_context_slot,
            )
            transaction.recent_blockhash = latest.blockhash
        return transaction
