"""Cooperative cancellation."""

import threading

from image_snipper.core.exceptions import OperationCancelledError


class CancellationToken:
    """Signal polled by long-running operations to stop early."""

    def __init__(self) -> None:
        """Initialize an uncancelled token."""
        self._event = threading.Event()

    @property
    def is_cancelled(self) -> bool:
        """
        Check whether cancellation was requested.

        Returns:
            bool: True once cancel() has been called.
        """
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Safe to call from a signal handler or another thread."""
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """
        Raise if cancellation was requested.

        Raises:
            OperationCancelledError: If cancel() has been called.
        """
        if self._event.is_set():
            raise OperationCancelledError()
