"""Send a message to a listening server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from minitalk.convert import atoi
from minitalk.printf import printf
from minitalk.protocol import adaptive_delay, encode_message

_MICROSECONDS = 1_000_000
_USAGE = 'Error: use (client <server pid> "sentence")'


def send_message(pid: int, message: Union[str, bytes]) -> None:
    """Signal ``message`` bit by bit to process ``pid``.

    A 1 bit is sent as SIGUSR1 and a 0 bit as SIGUSR2, with a pause after
    each that grows with the length of the message.
    """
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    pause = adaptive_delay(len(payload)) / _MICROSECONDS
    for bit in encode_message(payload):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(pause)
    time.sleep(len(payload) / _MICROSECONDS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <server pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("%s\n", _USAGE)
        return 1
    pid = atoi(args[0])
    if pid <= 0:
        printf("Error: invalid server pid [%s]\n", args[0])
        return 1
    try:
        send_message(pid, args[1])
    except OSError as error:
        printf("Error: %s\n", str(error))
        return 1
    return 0