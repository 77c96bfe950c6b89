"""Mock wallet adapter for testing lifecycle events without a real wallet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wallet_events.adapters.base import (
    BaseWalletAdapter,
    SendTransactionOptions,
    WalletAdapterEvent,
    WalletName,
    WalletReadyState,
)
from wallet_events.errors import (
    WalletConnectionError,
    WalletNotReadyError,
    WalletSendTransactionError,
)


@dataclass
class MockTransaction:
    fee_payer: Any = None
    recent_blockhash: str | None = None


@dataclass
class MockBlockhash:
    blockhash: str


class MockConnection:
    """Connection stub returning a fixed blockhash and recording calls."""

    def __init__(self, blockhash: str = "hash-1") -> None:
        self._blockhash = blockhash
        self.calls: list[dict[str, Any]] = []

    async def get_latest_blockhash(
        self,
        commitment: str | None = None,
        min_context_slot: int | None = None,
    ) -> MockBlockhash:
        self.calls.append({"commitment": commitment, "min_context_slot": min_context_slot})
        return MockBlockhash(self._blockhash)


class MockWalletAdapter(BaseWalletAdapter):
    """Mock adapter that connects to a canned public key."""

    def __init__(
        self,
        public_key: str = "PubKey111",
        ready_state: WalletReadyState = WalletReadyState.INSTALLED,
        fail_connect: bool = False,
    ) -> None:
        super().__init__()
        self._key = public_key
        self._public_key: str | None = None
        self._connecting = False
        self._ready_state = ready_state
        self._fail_connect = fail_connect
        self.sent: list[MockTransaction] = []

    @property
    def name(self) -> WalletName:
        return WalletName("Mock")

    @property
    def url(self) -> str:
        return "https://wallet.example"

    @property
    def icon(self) -> str:
        return "data:image/svg+xml;base64,"

    @property
    def ready_state(self) -> WalletReadyState:
        return self._ready_state

    @property
    def public_key(self) -> str | None:
        return self._public_key

    @property
    def connecting(self) -> bool:
        return self._connecting

    async def connect(self) -> None:
        if self.connected or self.connecting:
            return
        if self.ready_state is not WalletReadyState.INSTALLED:
            raise WalletNotReadyError("Wallet not ready")

        self._connecting = True
        try:
            if self._fail_connect:
                error = WalletConnectionError("Connection rejected")
                self.emit(WalletAdapterEvent.ERROR, error)
                raise error
            self._public_key = self._key
            self.emit(WalletAdapterEvent.CONNECT, self._public_key)
        finally:
            self._connecting = False

    async def disconnect(self) -> None:
        if self._public_key is None:
            return
        self._public_key = None
        self.emit(WalletAdapterEvent.DISCONNECT)

    async def send_transaction(
        self,
        transaction: MockTransaction,
        connection: MockConnection,
        options: SendTransactionOptions | None = None,
    ) -> str:
        try:
            prepared = await self._prepare_transaction(transaction, connection, options)
        except Exception as exc:
            error = WalletSendTransactionError(str(exc), exc)
            self.emit(WalletAdapterEvent.ERROR, error)
            raise error from exc
        self.sent.append(prepared)
        return f"sig-{len(self.sent)}"

    def detect(self) -> None:
        """Simulate the wallet becoming available."""
        self._set_ready_state(WalletReadyState.INSTALLED)
