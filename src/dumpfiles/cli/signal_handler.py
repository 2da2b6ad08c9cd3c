"""Signal handling utilities for the dumpfiles CLI.

SIGINT is recorded rather than acted on immediately, so the writer can stop
between two writes and the CLI can exit with the conventional status.
"""

import signal
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Records SIGINT so writing can be interrupted cleanly.

    Attributes:
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigint_handler: SIGINT handler installed before ours.
    """

    def __init__(self) -> None:
        self.sigint_received = Event()
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGINT signal.

        The original handler is restored, so a second Ctrl+C behaves as usual.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGINT handler."""
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)
