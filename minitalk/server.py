"""Receive messages sent one bit per signal and print each as it completes."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Optional, Sequence, TextIO

from minitalk.printf import format_printf
from minitalk.protocol import MessageDecoder

_GREEN = "\033[0;32m"
_RESET = "\033[0;37m"
_ART = (
    "           _       _ _        _ _    \n"
    "          (_)     (_) |      | | |   \n"
    " _ __ ___  _ _ __  _| |_ __ _| | | __\n"
    "| '_ ` _ \\| | '_ \\| | __/ _` | | |/ /\n"
    "| | | | | | | | | | | || (_| | |   < \n"
    "|_| |_| |_|_|_| |_|_|\\__\\__,_|_|_|\\_\\ \n"
)


def welcome_banner(pid: int) -> str:
    """The coloured start-up banner showing ``pid``."""
    return _GREEN + _ART + format_printf("PID: [%d]%s\n", pid, _RESET)


class Server:
    """Decodes SIGUSR1/SIGUSR2 bits into messages and writes them out."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self._output = output
        self._decoder = MessageDecoder()

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def handle(self, signum: int, frame: Optional[FrameType]) -> Optional[str]:
        """Take one signal as a bit; print and return a finished message."""
        message = self._decoder.feed(signum == signal.SIGUSR1)
        if message is None:
            return None
        text = message.decode("utf-8", errors="replace")
        self.output.write(format_printf("%s\n", text or None))
        self.output.flush()
        return text

    def run(self) -> None:
        """Show the banner, install the handlers and wait for signals forever."""
        self.output.write(welcome_banner(os.getpid()))
        self.output.flush()
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    try:
        Server().run()
    except KeyboardInterrupt:
        pass
    return 0