"""Command that sends a text message to a server process, one bit per signal.

Each bit is signalled to the server and resent until the server echoes a
signal back.  Eight acknowledged bits make one byte.  A newline closes every
message.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from collections import deque
from types import TracebackType
from typing import Any, Optional, Union

from sigtalk.printf import printf
from sigtalk.protocol import BITS_PER_BYTE, bits_of
from sigtalk.textutil import atoi

USAGE_EXIT_CODE = 22
ACK_DELAY = 0.005

_WRONG_COUNT = (
    "⚠️\tError: Wrong number of arguments.\n"
    "❗\tUsage: sigtalk-client [--echo] <PID> <string>"
)
_BAD_PID = (
    "⚠️\tError: PID is invalid.\n"
    "🔢\tA PID only has positive decimal numbers. "
    "PID 0 is reserved for the kernel."
)


class UsageError(Exception):
    """The command line does not name a valid server and message."""

    exit_code = USAGE_EXIT_CODE


def _all_digits(text: str) -> bool:
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def validate_args(argv: list[str]) -> tuple[int, str]:
    """Check ``[pid, message]`` and return the server PID and the message."""
    args = list(argv)
    if len(args) != 2:
        raise UsageError(_WRONG_COUNT)
    pid_text, message = args
    pid = atoi(pid_text)
    if not _all_digits(pid_text) or pid <= 0:
        raise UsageError(_BAD_PID)
    return pid, message


class _Acknowledgements:
    """Counts the server's replies while installed as the signal handler."""

    _SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)

    def __init__(self) -> None:
        self.count = 0
        self.echoes: deque[str] = deque()
        self._previous: dict[int, Any] = {}

    def _on_signal(self, signum: int, frame: Any) -> None:
        self.count += 1
        self.echoes.append("1" if signum == signal.SIGUSR1 else "0")

    def drain_echoes(self) -> str:
        out = []
        while self.echoes:
            out.append(self.echoes.popleft())
        return "".join(out)

    def __enter__(self) -> "_Acknowledgements":
        for signum in self._SIGNALS:
            self._previous[signum] = signal.signal(signum, self._on_signal)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        for signum, handler in self._previous.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)


def _write_echo(text: str) -> None:
    if text:
        sys.stdout.write(text)
        sys.stdout.flush()


def _send_byte(pid: int, octet: int, acks: _Acknowledgements, echo: bool) -> None:
    bits = list(bits_of(octet))
    while acks.count < BITS_PER_BYTE:
        os.kill(pid, signal.SIGUSR1 if bits[acks.count] else signal.SIGUSR2)
        time.sleep(ACK_DELAY)
        if echo:
            _write_echo(acks.drain_echoes())
    acks.count = 0
    if echo:
        _write_echo(acks.drain_echoes() + " ")


def send_message(pid: int, message: Union[str, bytes], echo: bool = False) -> int:
    """Send ``message`` and a closing newline to ``pid``; return bytes sent.

    With ``echo`` every acknowledged bit is written to standard output as
    ``1`` or ``0``, and a space follows each byte.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data += b"\n"
    with _Acknowledgements() as acks:
        for octet in data:
            _send_byte(pid, octet, acks, echo)
    return len(data)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the client; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    echo = False
    if args and args[0] in ("-e", "--echo"):
        echo = True
        args = args[1:]
    try:
        pid, message = validate_args(args)
    except UsageError as exc:
        printf("%s\n", str(exc))
        return exc.exit_code
    try:
        send_message(pid, message, echo)
    except OSError as exc:
        printf("❗\tError: cannot signal process %d: %s\n", pid, exc.strerror)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())