"""
Signal-driven level changes

Lets an operator change the root level of the current context by sending
the process a signal, e.g. ``kill -USR1 <pid>`` to switch to DEBUG.

The signal handler itself only records the request. The level change runs
on a short-lived daemon thread, because the interrupted main thread may hold
the locks the change needs.
"""

from __future__ import annotations

import signal
import threading
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from log_configurator.core.log_level import LogLevel

if TYPE_CHECKING:
    from types import FrameType
    from log_configurator.configurator.controller import LevelController


def _default_signals() -> Dict[int, LogLevel]:
    # SIGUSR1/SIGUSR2 are not available on Windows
    signals: Dict[int, LogLevel] = {}
    if hasattr(signal, "SIGUSR1"):
        signals[signal.SIGUSR1] = LogLevel.DEBUG
    if hasattr(signal, "SIGUSR2"):
        signals[signal.SIGUSR2] = LogLevel.INFO
    return signals


class LevelSignalHandler:
    """
    Maps signals to root levels.

    Original handlers are chained after the request is recorded and restored
    by ``uninstall``. Signal handlers can only be installed from the main
    thread.

    Example:
        handler = LevelSignalHandler(controller)
        handler.install()
        # kill -USR1 <pid>  -> root level DEBUG
        # kill -USR2 <pid>  -> root level INFO
    """

    def __init__(
        self,
        controller: "LevelController",
        signals: Optional[Mapping[int, Any]] = None
    ):
        """
        Initialize signal handler.

        Args:
            controller: Controller used to change the root level
            signals: Mapping of signal number to level
                     (default: SIGUSR1 -> DEBUG, SIGUSR2 -> INFO)
        """
        self._controller = controller
        self._signals: Dict[int, Any] = dict(
            _default_signals() if signals is None else signals
        )
        self._original_handlers: Dict[int, Any] = {}
        self._workers: List[threading.Thread] = []

    @property
    def signals(self) -> Dict[int, Any]:
        return dict(self._signals)

    @property
    def installed(self) -> bool:
        return bool(self._original_handlers)

    def install(self) -> None:
        """Install handlers for every mapped signal."""
        if self.installed:
            return
        for sig in self._signals:
            try:
                self._original_handlers[sig] = signal.signal(sig, self._handle)
            except (OSError, ValueError) as e:
                # Not the main thread, or the signal cannot be caught
                self._controller.status_logger.warn(
                    f"Cannot install level handler for signal {sig}", exc=e
                )

    def uninstall(self) -> None:
        """Restore the original handlers."""
        for sig, handler in self._original_handlers.items():
            try:
                signal.signal(sig, handler)
            except (OSError, ValueError) as e:
                self._controller.status_logger.warn(
                    f"Cannot restore handler for signal {sig}", exc=e
                )
        self._original_handlers.clear()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for level changes requested by signals so far.

        Args:
            timeout: Maximum seconds to wait per pending change

        Returns:
            True if no change is still pending
        """
        for worker in list(self._workers):
            worker.join(timeout)
        self._workers = [w for w in self._workers if w.is_alive()]
        return not self._workers

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        # Runs between bytecodes of the main thread: take no locks here
        level = self._signals.get(signum)
        if level is not None:
            worker = threading.Thread(
                target=self._apply,
                args=(signum, level),
                name=f"level-signal-{signum}",
                daemon=True,
            )
            self._workers = [w for w in self._workers if w.is_alive()] + [worker]
            worker.start()

        original = self._original_handlers.get(signum)
        if callable(original):
            original(signum, frame)

    def _apply(self, signum: int, level: Any) -> None:
        self._controller.set_root_level(level)
        self._controller.status_logger.info(
            f"Root level set to {level} by signal {signum}"
        )
