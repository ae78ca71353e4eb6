# iisreftrace

Small diagnostic building blocks for tracking down reference-count bugs
and for getting debug output out of long-running services. The package
has no dependencies beyond the standard library.

## Modules

- `iisreftrace.tracelog.TraceLog(log_size, extra_bytes_in_header, entry_size)`
  is a fixed-size circular log. `write(entry)` stores the entry in the next
  slot and returns the slot index. Bytes-like entries are zero-padded to
  `entry_size` (a longer one raises `ValueError`); any other object is
  stored as given. `reset()` clears the slots and the `header` bytes,
  `close()` releases the log, and `log[i]` / `len(log)` read it back.
- `iisreftrace.reftrace.RefTraceLog(log_size, extra_bytes_in_header=0)` is a
  trace log of frozen `RefTraceEntry` records.
  `write(new_ref_count, context, context1=None, context2=None, context3=None)`
  records the new count, the contexts, the thread id and the caller's stack
  (up to 16 frames, innermost first).
- `iisreftrace.memorylog.MemoryLog(max_byte_size)` is a circular byte buffer
  of NUL-terminated messages. When a message does not fit in the space left,
  the rest of the buffer is zeroed and writing starts over at offset 0.
  `snapshot()` returns the raw buffer and `messages()` the stored messages.
- `iisreftrace.debugprints.DebugPrints(label, output_flags, stderr)` is a
  debug output channel and a context manager. Depending on its
  `OutputFlags` it writes to a stderr stream, a log file
  (`open_file`, `reopen_file`, `close_file`), a 512 KiB memory log
  (`open_memory_log`, `close_memory_log`) and the `iisreftrace.debugger`
  logger at DEBUG level. `printf(file_path, line_number, function_name, fmt, *args)`
  sends a message of the form `tid label!function [file @ line]:message`.
- `iisreftrace.msgformat` builds those messages: `strip_directory`,
  `format_prologue` and `format_message` (truncated to 10239 characters).
- `iisreftrace.diagnostics` has `print_error` (adds the system text for an
  error number), `dump` (sends text without a header), `print_assert_failed`,
  `assert_failed` (also raises `AssertionBreak` unless the module flag
  `avoid_shutdown_asserts` is true) and `print_current_time`.
- `iisreftrace.irtl` has `irtl_trace` (sends a trace message with the
  caller's location), `stristr` (case-insensitive substring search returning
  the rest of the string) and `num_processors`.
- `iisreftrace.debugflags` holds the process-wide debug flag word
  (`set_debug_flags`, `get_debug_flags`, `debug_enabled`) and the
  `OutputFlags`, `PrintReason` and `DebugFlag` enums.
- `iisreftrace.listentry` has the intrusive lists `LinkedList` and
  `SingleList` built from `ListEntry` nodes.
- `iisreftrace.winobj` has `get_platform_type` (returns a `PlatformType`;
  `INVALID` off Windows), `build_object_name`, and `ObjectFactory`, which
  creates in-process `Event`, `Semaphore` and `Mutex` objects and counts how
  many of each it made. Semaphores and mutexes are named
  `file:line member:ADDRESS PID:pid`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from iisreftrace.reftrace import RefTraceLog
from iisreftrace.debugprints import DebugPrints
from iisreftrace.debugflags import OutputFlags

log = RefTraceLog(256, 0)
slot = log.write(2, "session", None, None, None)
print(log[slot].new_ref_count)  # 2

with DebugPrints("worker", OutputFlags.MEMORY, None) as dbg:
    dbg.open_memory_log()
    dbg.printf("src/worker.py", 42, "handle", "refcount now %d\n", 2)
    print(dbg.memory_log.messages())
```

## What it does not do

The package is a library only: it installs no command. Debug flags live
in memory for the life of the process; nothing loads them from or saves
them to persistent settings. "Debugger" output is plain `logging` output
on the `iisreftrace.debugger` logger, and the synchronisation objects that
`ObjectFactory` creates are visible only inside the current process.