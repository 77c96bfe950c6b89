"""Wallet adapters. Each subclasses base.BaseWalletAdapter."""

from wallet_events.adapters.base import (
    BaseWalletAdapter,
    Connection,
    SendOptions,
    SendTransactionOptions,
    Transaction,
    WalletAdapterEvent,
    WalletAdapterEvents,
    WalletName,
    WalletReadyState,
)
from wallet_events.adapters.detection import scope_polling_detection_strategy

__all__ = [
    "BaseWalletAdapter",
    "Connection",
    "SendOptions",
    "SendTransactionOptions",
    "Transaction",
    "WalletAdapterEvent",
    "WalletAdapterEvents",
    "WalletName",
    "WalletReadyState",
    "scope_polling_detection_strategy",
]
