# sigtalk

sigtalk sends text from one process to another on the same POSIX machine
using only two signals. Each byte goes as eight signals, most significant
bit first. SIGUSR1 carries a 1 and SIGUSR2 carries a 0. The server sends
every signal back to its sender as an acknowledgement, and the client keeps
resending the current bit until that acknowledgement has arrived.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits:

```
$ sigtalk-server
Waiting input for pid: 4242
```

From another terminal, send it a message:

```
$ sigtalk-client 4242 "hello there"
```

The client encodes the message as UTF-8 and ends it with a newline. The
server writes each byte to standard output as soon as all eight of its bits
have arrived. Stop the server with Ctrl-C.

With `-e` or `--echo` before the PID, the client prints each acknowledged
bit as `1` or `0`, and a space after every byte:

```
$ sigtalk-client --echo 4242 "hi"
```

The PID must consist of decimal digits only and be greater than zero. With
the wrong number of arguments, or with an invalid PID, the client prints an
error and exits with status 22. If the process cannot be signalled, it
prints an error and exits with status 1.

## Library use

`sigtalk.protocol` holds the bit encoding and does not touch signals:

```python
from sigtalk.protocol import BitDecoder, bits_of, encode

list(bits_of(ord("A")))    # [0, 1, 0, 0, 0, 0, 0, 1]
encode("hi")               # list of sixteen bits, most significant first

decoder = BitDecoder()
decoder.feed_all(encode("hi"))   # b"hi"
```

`BitDecoder.feed(bit)` returns the completed byte after every eighth bit and
`None` otherwise; `BitDecoder.reset()` drops a partly received byte and
`pending` tells how many bits of the current byte have arrived.

`sigtalk.client.send_message(pid, message, echo=False)` sends a message from
Python and returns the number of bytes sent, newline included.
`sigtalk.client.validate_args(argv)` checks a `[pid, message]` list and
raises `UsageError` when it is not valid.

`sigtalk.server.Server` does the decoding on the receiving side.
`Server.handle(signum, sender_pid)` takes one signal, writes any completed
byte to its output stream and acknowledges the sender; `Server.serve()`
announces the PID and waits for signals.

The package also contains some small helpers:

- `sigtalk.textutil` has `atoi`, `itoa`, `split`, `strtrim`, `substr` and
  `strnstr`, following the rules of the C functions of the same names
  (`atoi` wraps to a 32-bit int; `strnstr` returns an index or `None`).
- `sigtalk.printf` has `format_string` and `printf`, which support the
  `%c %s %p %d %i %u %x %X %%` conversions, plus `hex_lower`, `hex_upper`
  and `pointer_hex`. `printf` writes to standard output and returns the
  length of what it wrote.
- `sigtalk.lines.LineReader` reads a file descriptor, or any object with a
  `read(size)` method, one line at a time with `readline()` or by
  iteration. Lines keep their newline; `readline()` returns `None` at the
  end of the input.

## Limitations

- `Server.serve()` waits with `signal.sigwaitinfo`, which Python offers only
  on some POSIX systems such as Linux; it is not available on macOS.
- Messages only travel from client to server. There is no reply channel
  beyond the per-bit acknowledgement, and bits from two clients sending at
  once are not kept apart.

## Tests

```
pip install ".[test]"
pytest
```