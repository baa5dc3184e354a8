"""Terminal key source — reads single key presses and maps them to review commands."""

from collections import deque
from collections.abc import Callable, Iterator

import typer

from labeller.review.domain.command import Command

# Escape sequences as returned by click's getchar: ANSI CSI and SS3 forms on
# POSIX terminals, two-character scan codes on Windows.
_KEY_BINDINGS: dict[str, Command] = {
    "\x1b[D": Command.MOVE_PREVIOUS,
    "\x1bOD": Command.MOVE_PREVIOUS,
    "\xe0K": Command.MOVE_PREVIOUS,
    "\x00K": Command.MOVE_PREVIOUS,
    "\x1b[C": Command.MOVE_NEXT,
    "\x1bOC": Command.MOVE_NEXT,
    "\xe0M": Command.MOVE_NEXT,
    "\x00M": Command.MOVE_NEXT,
    "\x1b[A": Command.CYCLE_LABEL,
    "\x1bOA": Command.CYCLE_LABEL,
    "\xe0H": Command.CYCLE_LABEL,
    "\x00H": Command.CYCLE_LABEL,
    "\t": Command.JUMP_TO_NEXT_UNLABELLED,
    "\x03": Command.QUIT,
}


def map_key(key: str) -> Command | None:
    """Return the Command bound to key, or None if the key is unbound."""
    return _KEY_BINDINGS.get(key)


def split_keys(chunk: str) -> Iterator[str]:
    """
    Split one terminal read into individual key presses.

    A single read can hold several keys when a key is held down or typed
    quickly. CSI sequences end at their first byte in 0x40-0x7E, SS3 sequences
    carry one character after ``ESC O``, and Windows scan codes are a
    ``\\xe0`` or ``\\x00`` prefix plus one character.
    """
    i = 0
    while i < len(chunk):
        ch = chunk[i]
        if ch == "\x1b" and chunk[i + 1 : i + 2] == "[":
            end = i + 2
            while end < len(chunk) and not "\x40" <= chunk[end] <= "\x7e":
                end += 1
            end = min(end + 1, len(chunk))
        elif ch == "\x1b" and chunk[i + 1 : i + 2] == "O" and i + 2 < len(chunk):
            end = i + 3
        elif ch in ("\xe0", "\x00") and i + 1 < len(chunk):
            end = i + 2
        else:
            end = i + 1
        yield chunk[i:end]
        i = end


class TerminalKeySource:
    """Returns one key press per call, reading from the terminal when none are queued.

    Ctrl-C arrives from click as KeyboardInterrupt and Ctrl-D as EOFError;
    both end the session. Satisfies the KeySource protocol structurally.
    """

    def __init__(self, read_key: Callable[[], str] | None = None) -> None:
        self._read_key = read_key or typer.getchar
        self._pending: deque[str] = deque()

    def next_command(self) -> Command | None:
        if not self._pending:
            try:
                chunk = self._read_key()
            except (KeyboardInterrupt, EOFError):
                return Command.QUIT
            self._pending.extend(split_keys(chunk))
            if not self._pending:
                return None
        return map_key(self._pending.popleft())
