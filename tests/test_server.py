import io
import signal
from unittest import mock

import pytest

from minitalk.protocol import encode_message
from minitalk.server import Server, main, welcome_banner


def _deliver(server, message):
    results = []
    for bit in encode_message(message):
        results.append(server.handle(signal.SIGUSR1 if bit else signal.SIGUSR2, None))
    return results


def test_banner_shows_pid():
    banner = welcome_banner(4321)
    assert "PID: [4321]" in banner
    assert banner.startswith("\033[0;32m")
    assert banner.endswith("\033[0;37m\n")


@pytest.mark.parametrize("message", ["hi", "longer message here", "ünïcode ✓"])
def test_handle_prints_complete_message(message):
    output = io.StringIO()
    server = Server(output=output)
    results = _deliver(server, message)
    assert output.getvalue() == message + "\n"
    assert results[-1] == message
    assert all(result is None for result in results[:-1])


def test_nothing_printed_before_terminator():
    output = io.StringIO()
    server = Server(output=output)
    bits = list(encode_message("abc"))[:-8]
    for bit in bits:
        server.handle(signal.SIGUSR1 if bit else signal.SIGUSR2, None)
    assert output.getvalue() == ""


def test_empty_message_prints_null():
    output = io.StringIO()
    server = Server(output=output)
    _deliver(server, "")
    assert output.getvalue() == "(null)\n"


def test_consecutive_messages():
    output = io.StringIO()
    server = Server(output=output)
    _deliver(server, "one")
    _deliver(server, "two")
    assert output.getvalue().splitlines() == ["one", "two"]


def test_run_installs_handlers_and_prints_banner():
    output = io.StringIO()
    server = Server(output=output)
    with mock.patch("minitalk.server.signal.signal") as install, \
            mock.patch("minitalk.server.signal.pause", side_effect=KeyboardInterrupt), \
            mock.patch("minitalk.server.os.getpid", return_value=777):
        with pytest.raises(KeyboardInterrupt):
            server.run()
    assert "PID: [777]" in output.getvalue()
    installed = {call.args[0] for call in install.call_args_list}
    assert installed == {signal.SIGUSR1, signal.SIGUSR2}


def test_main_returns_zero_on_interrupt(capsys):
    with mock.patch("minitalk.server.signal.signal"), \
            mock.patch("minitalk.server.signal.pause", side_effect=KeyboardInterrupt), \
            mock.patch("minitalk.server.os.getpid", return_value=555):
        status = main([])
    assert status == 0
    assert "PID: [555]" in capsys.readouterr().out