"""Polling detection of wallets that become available after startup."""

from __future__ import annotations

import threading
from collections.abc import Callable

from loguru import logger

from wallet_events.config import cfg, positive_interval


def scope_polling_detection_strategy(
    detect: Callable[[], bool],
    interval: float | None = None,
) -> Callable[[], None]:
    """Call ``detect`` until it returns True.

    ``detect`` runs once immediately; errors from that call propagate. If it
    does not report a wallet, a daemon thread polls it every ``interval``
    seconds (default from config; must be positive). Errors while polling are
    logged and polling goes on. Returns a function that stops polling.
    """
    interval = cfg.detection_poll_interval_seconds if interval is None else positive_interval(interval)
    stopped = threading.Event()

    def dispose() -> None:
        stopped.set()

    if detect():
        dispose()
        return dispose

    def poll() -> None:
        while not stopped.wait(interval):
            try:
                if detect():
                    dispose()
            except Exception:
                logger.exception("Wallet detection failed; retrying in {}s", interval)

    threading.Thread(target=poll, name="wallet-detection", daemon=True).start()
    return dispose
