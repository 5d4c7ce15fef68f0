# sigtalk

sigtalk sends a text message from one process to another using only the
POSIX user signals. Each byte goes out as eight signals, most significant bit
first. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. The server
acknowledges every bit with `SIGUSR1`. A terminating zero byte marks the end
of the message. Text is sent as UTF-8.

The commands need `SIGUSR1`, `SIGUSR2`, `signal.pthread_sigmask` and
`signal.sigwaitinfo`. Linux provides all of them. macOS does not provide
`sigwaitinfo`, so the commands do not run there.

## Installing

```
pip install .
```

## Running

Start the server. It prints its process id and then waits for messages:

```
$ sigtalk-server
Server PID: 4242
```

In another terminal, send a message to that process id:

```
$ sigtalk-client 4242 "hello there"
Message sent successfully
```

The server prints each complete message on its own line. If it can deliver
the final acknowledgement to the client, it then prints
`Message acknowledged`. Bytes that are not valid UTF-8 are shown as
replacement characters. The server keeps running until it receives `SIGINT`
or `SIGTERM`, and then exits with status 0.

The client exits with status 1 and prints a message on standard error in
these cases:

- it was not given exactly two arguments (`Usage: ./client [server_pid] [message]`);
- the process id is not a positive number (`Invalid PID`);
- the message is empty (`Message cannot be empty`);
- the message contains a NUL character;
- a signal could not be delivered (`Failed to send signal to server`);
- the server cancelled the transfer. In this case the line on standard
  error is empty.

The server handles one sender at a time. When a different process starts
sending before the current message is finished, the server sends `SIGUSR2`
to the first sender and drops its partial message.

## Limits

- The client has no timeout. It waits for each acknowledgement for as long
  as it takes.
- The server keeps a partial message in memory without any size limit.
- Nothing is queued or stored. A message exists only on the server's
  standard output.

## Using it as a library

You can use the protocol pieces without real signals:

```python
import io

from sigtalk.client import transmit
from sigtalk.protocol import bit_for_signal, encode_byte, message_bits
from sigtalk.receiver import Receiver

encode_byte(ord("A"))        # (0, 1, 0, 0, 0, 0, 0, 1)
list(message_bits("hi"))     # every bit of "hi", then eight zero bits

out = io.StringIO()
receiver = Receiver(lambda pid, signum: None, out)

def send(pid, signum):
    receiver.receive(bit_for_signal(signum), 1234)

transmit(4242, "hi", send, lambda: None)
out.getvalue()               # "hi\nMessage acknowledged\n"
```

- `sigtalk.protocol` contains `encode_byte`, `message_bits`,
  `signal_for_bit`, `bit_for_signal` and the `TalkError` exception.
- `sigtalk.receiver.Receiver(notify, output)` rebuilds messages from bits.
  `receive(bit, sender)` returns the text when a message is complete, and
  `None` otherwise. `reset()` drops the partial message. `notify(pid, signum)`
  sends the acknowledgements and cancellations. If it raises `OSError`, the
  failure is reported on standard error.
- `sigtalk.client` contains `validate_args(argv)`, `transmit(pid, message,
  send, wait_ack)` and `main(argv=None)`.
- `sigtalk.server` contains `serve(out, err)` and `main(argv=None)`.

The package also has small helpers:

- `sigtalk.charclass` classifies ASCII characters and converts their case.
- `sigtalk.convert` parses integers with C-style wrapping (`parse_int`,
  `parse_long`) and formats them (`int_to_str`).
- `sigtalk.strings` offers bounded copying, searching, trimming and
  splitting.
- `sigtalk.memory` fills, copies, searches and compares byte buffers.
- `sigtalk.output` is a minimal printf-style formatter. `render` and
  `printf` understand `%s %d %i %p %x %X %u %c %%`. The `put_*` functions
  write to a stream.

## Tests

```
pip install ".[test]"
pytest
```