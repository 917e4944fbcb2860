# minitalk

Two small commands that pass text from one process to another using only
POSIX signals. Every byte goes out as eight signals, least significant bit
first. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. The server
answers each signal with `SIGUSR1`, and the client waits for that answer
before it sends the next bit. A zero byte ends the message. When the server
receives it, it prints a newline.

## Requirements

- Python 3.10 or later.
- The client runs on any POSIX system.
- The server waits for signals with `signal.sigwaitinfo`. That call exists
  on Linux but not on macOS, so the server needs a platform that provides it.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits:

```
$ minitalk-server
Server started. PID: 4242
```

From another terminal, send it a message:

```
$ minitalk-client 4242 "Hello, world"
```

The server writes the bytes it receives to standard output, then a newline
when the message ends. It keeps serving, so you can send any number of
messages one after another. Stop it with Ctrl-C, which makes it exit with
status 130. If it cannot send an acknowledgement, it reports the error and
exits with status 1.

The client sends the message as UTF-8. Anything after a NUL character in the
message is not sent. The client exits with status 1 in three cases:

- it is not given exactly two arguments (it prints a usage line);
- the PID is not a positive number;
- a signal cannot be delivered.

The client waits for an acknowledgement of every bit and has no timeout. If
no acknowledgement ever comes, it waits forever.

## Library

### Bit encoding (`minitalk.protocol`)

The bit encoding works without sending any signals:

```python
from minitalk.protocol import ByteDecoder, encode_byte, encode_message

encode_byte(0x41)                   # (1, 0, 0, 0, 0, 0, 1, 0)
bits = list(encode_message(b"hi"))  # 24 bits: 'h', 'i', then the zero byte
decoder = ByteDecoder()
received = [byte for bit in bits if (byte := decoder.feed(bit)) is not None]
# received == [104, 105, 0]
```

`ByteDecoder.feed` takes one bit and returns a byte once it has eight bits.
Until then it returns `None`.

### Sending (`minitalk.client`)

- `send_message(pid, message)` sends a `str` or bytes message and its zero
  terminator to a running server.
- `send_byte(pid, value)` sends a single byte.

Both raise `OSError` if a signal cannot be delivered. `main(argv=None)` is the
command-line entry point.

### Receiving (`minitalk.server`)

`Server(output=None, notify=os.kill)` holds the receiving state. `output` is a
binary stream and defaults to standard output.

- `Server.handle(signum, sender_pid)` processes one signal. It writes a byte
  once one is complete (a zero byte is written as a newline), acknowledges the
  signal through `notify`, and returns the completed byte or `None`.
- `Server.serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as
  they arrive.

### Other helpers

- `minitalk.cstrings` has helpers that treat text as NUL-terminated strings:
  `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strchr`, `strrchr`, `memchr`, `memcmp` and `strmapi`. The search functions
  return an index, or `None` when nothing is found.
- `minitalk.chars` has ASCII character tests (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`) and case mapping (`toupper`, `tolower`).
  It also writes to a text stream with `putstr_fd`, `putendl_fd` and
  `putnbr_fd`.
- `minitalk.printf` has `sprintf` and `printf`. They know the `%c %s %d %i
  %u %x %X %p %%` conversions and take no flags, width or precision. `printf`
  writes to standard output and returns the number of characters written.

## Limitations

The server keeps one decoding state for all senders. It does not tell clients
apart. If two clients send at the same time, their bits are mixed together.

## Tests

```
pip install ".[test]"
pytest
```