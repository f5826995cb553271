"""Server that rebuilds messages from the signals its clients send.

SIGUSR1 carries a set bit and SIGUSR2 a clear bit.  Every signal is echoed
back to its sender as an acknowledgement, and each completed byte is written
to standard output at once.
"""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO, Optional

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Server:
    """Decodes bits from signals and acknowledges each one to its sender."""

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        notify: Callable[[int, int], None] = os.kill,
    ) -> None:
        self._output = output
        self._notify = notify
        self._decoder = BitDecoder()

    @property
    def output(self) -> BinaryIO:
        """Binary stream that receives decoded bytes."""
        return self._output if self._output is not None else sys.stdout.buffer

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Process one signal; return the byte it completed, if any."""
        if signum == signal.SIGUSR1:
            bit = 1
        elif signum == signal.SIGUSR2:
            bit = 0
        else:
            raise ValueError(f"signal {signum} carries no bit")
        octet = self._decoder.feed(bit)
        if octet is not None:
            out = self.output
            out.write(bytes([octet]))
            out.flush()
        with contextlib.suppress(ProcessLookupError):
            self._notify(sender_pid, signum)
        return octet

    def serve(self) -> None:
        """Announce this process's PID and handle signals until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            printf("Waiting input for pid: %d\n", os.getpid())
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the server until interrupted; return the exit status."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())