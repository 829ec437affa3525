"""Tail splicing for the cookie serialization.

Every edit to a cookie is the same three steps: cut the buffer, keep the
tail past the cut, then write new text and put the tail back. ``cut``
captures the tail and truncates; ``Splice.write`` appends and reattaches.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Splice:
    """A buffer cut in two, waiting for new text between the halves."""

    head: str
    tail: str

    def write(self, text: str) -> tuple[str, int]:
        """Append *text* to the head and reattach the tail.

        Returns the new buffer and the index right after *text*, i.e. the
        buffer length measured before the tail went back on.
        """
        body = self.head + text
        return body + self.tail, len(body)


def cut(buffer: str, truncate_from: int, take_from: int | None = None) -> Splice:
    """Truncate *buffer* at *truncate_from* and capture the tail at *take_from*.

    Text between the two indices is dropped. *take_from* defaults to
    *truncate_from*, which keeps everything.
    """
    if take_from is None:
        take_from = truncate_from
    return Splice(head=buffer[:truncate_from], tail=buffer[take_from:])


def remove(buffer: str, start: int, end: int) -> str:
    """Drop ``buffer[start:end]``."""
    return buffer[:start] + buffer[end:]


def shift(offset: int | None, delta: int) -> int | None:
    """Move a stored offset by *delta*; absent offsets stay absent."""
    if offset is None:
        return None
    return offset + delta
