# minitalk

This package lets two processes on a POSIX system exchange messages through
signals. A server process listens for `SIGUSR1` and `SIGUSR2`. A client process
sends it a string one bit per signal: `SIGUSR1` carries a 1 bit and `SIGUSR2`
carries a 0 bit. Each byte goes out most significant bit first. The client
encodes text as UTF-8, and a NUL byte ends the message.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

Start the server. It prints a coloured banner that shows its process id, then
waits for signals until it is interrupted:

```
minitalk-server
```

In another terminal, send it a message:

```
minitalk-client <server pid> "hello there"
```

When the terminating NUL byte arrives, the server decodes the message as UTF-8
and prints it on a line of its own. Bytes that are not valid UTF-8 are replaced.
An empty message prints as `(null)`.

The client exits with status 1 and sends nothing in these cases:

- It is not given exactly two arguments. It prints a usage message.
- The pid does not parse to a positive number. It prints an error.

If sending a signal fails, for example because no process has that pid, the
client prints the error and exits with status 1.

After each bit the client pauses. The pause grows with the length of the
message: 50 µs for messages of up to 10000 bytes, rising to 10000 µs for
messages longer than 100000 bytes. `minitalk.protocol.adaptive_delay` returns
this value.

## Limitations

The server never acknowledges anything. The client relies only on its pauses,
so if a signal is lost the message arrives garbled and the client does not find
out. The server decodes the bits from every sender as one stream, so two
clients that send at the same time corrupt each other's messages.

## Library use

Encoding and decoding work without sending any signals:

```python
from minitalk.protocol import encode_message, MessageDecoder

decoder = MessageDecoder()
for bit in encode_message("hi"):   # NUL terminator included
    message = decoder.feed(bit)
    if message is not None:
        print(message)             # b'hi'
```

`bits_to_byte` builds a byte from eight bits, given most significant bit first.
`MessageDecoder.reset` throws away a partly received message.

`minitalk.server.Server` handles the signal side. `handle(signum, frame)`
treats one signal as a bit and returns the text of a finished message. Pass
`Server(output=...)` a text stream and it writes messages there instead of to
standard output. `run()` installs the handlers and waits forever.
`minitalk.client.send_message(pid, message)` does the sending.

The package also includes some small helpers:

- `minitalk.convert`: `atoi`, which parses a leading decimal integer and wraps
  it like a 32-bit int, and `itoa`.
- `minitalk.strutils`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strchr` and `strrchr`. The search functions return an index, or `None` when
  nothing is found.
- `minitalk.charclass`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower` and `toupper`. Each accepts an int code or a one-character string.
- `minitalk.printf`: `printf` writes to standard output and returns the number
  of characters written. `format_printf` returns the text instead. Both support
  `%c %s %p %d %i %u %x %X %%`.