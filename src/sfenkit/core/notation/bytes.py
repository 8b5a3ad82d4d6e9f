"""Offset-tracking byte views and the tokenizers built on them.

Every grammar works on :class:`Bytes`: a window into the original input that
remembers where it starts in that input. Sub-views are made by index
arithmetic on the shared buffer, so an error raised deep inside a nested
parse still reports a position in the top-level string.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

SPACE = 0x20


class Bytes:
    """Immutable view over part of an input buffer plus its absolute offset."""

    __slots__ = ("_buf", "_start", "_stop", "_base")

    def __init__(self, data: bytes | str, base_offset: int = 0) -> None:
        # str input must be ASCII; anything else raises UnicodeEncodeError.
        if isinstance(data, str):
            data = data.encode("ascii")
        self._buf = bytes(data)
        self._start = 0
        self._stop = len(self._buf)
        self._base = base_offset

    @classmethod
    def _view(cls, buf: bytes, start: int, stop: int, base_offset: int) -> Bytes:
        view = cls.__new__(cls)
        view._buf = buf
        view._start = start
        view._stop = stop
        view._base = base_offset
        return view

    # -- Basic queries ------------------------------------------------------

    @property
    def base_offset(self) -> int:
        """Offset of this view's first byte within the original input."""
        return self._base

    @property
    def end_offset(self) -> int:
        """Offset just past this view's last byte."""
        return self._base + len(self)

    def as_bytes(self) -> bytes:
        return self._buf[self._start : self._stop]

    def is_empty(self) -> bool:
        return self._start == self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __bool__(self) -> bool:
        return self._start != self._stop

    def __getitem__(self, idx: int) -> int:
        if not (0 <= idx < len(self)):
            raise IndexError(f"byte index {idx} out of range for length {len(self)}")
        return self._buf[self._start + idx]

    def get(self, idx: int) -> int | None:
        """Byte at *idx*, or ``None`` past the end."""
        if 0 <= idx < len(self):
            return self._buf[self._start + idx]
        return None

    def __iter__(self) -> Iterator[int]:
        return iter(self._buf[self._start : self._stop])

    def position(self, pred: Callable[[int], bool]) -> int | None:
        """Index of the first byte satisfying *pred*, or ``None``."""
        for i in range(self._start, self._stop):
            if pred(self._buf[i]):
                return i - self._start
        return None

    # -- Slicing ------------------------------------------------------------

    def range(self, start: int, stop: int) -> Bytes:
        """Sub-view ``[start, stop)``; its base offset moves by *start*."""
        if not (0 <= start <= stop <= len(self)):
            raise IndexError(f"range {start}..{stop} out of bounds for length {len(self)}")
        return Bytes._view(
            self._buf, self._start + start, self._start + stop, self._base + start
        )

    def range_from(self, start: int) -> Bytes:
        return self.range(start, len(self))

    def range_to(self, stop: int) -> Bytes:
        return self.range(0, stop)

    def split_at(self, mid: int) -> tuple[Bytes, Bytes]:
        """Two adjoining views ``[0, mid)`` and ``[mid, len)``."""
        return self.range_to(mid), self.range_from(mid)

    def try_split_at(self, mid: int) -> tuple[Bytes, Bytes] | None:
        """Like :meth:`split_at`, but ``None`` when *mid* exceeds the length."""
        if mid > len(self):
            return None
        return self.split_at(mid)

    def exhausted(self) -> Bytes:
        """Empty view positioned at the end of this one."""
        return self.range_from(len(self))

    # -- Tokenizers ---------------------------------------------------------

    def split(self, pred: Callable[[int], bool]) -> Split:
        return Split(self, pred)

    def tokens(self) -> Tokens:
        return Tokens(self)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        return self._base == other._base and self.as_bytes() == other.as_bytes()

    def __hash__(self) -> int:
        return hash((self._base, self.as_bytes()))

    def __repr__(self) -> str:
        return f"Bytes({self.as_bytes()!r}, base_offset={self._base})"


class Split:
    """Fields of a view separated by bytes matching a predicate.

    No separator yields the whole view; a trailing separator yields a trailing
    empty field. Once exhausted, the iterator stays exhausted.
    """

    __slots__ = ("_bytes", "_pred", "_finished")

    def __init__(self, data: Bytes, pred: Callable[[int], bool]) -> None:
        self._bytes = data
        self._pred = pred
        self._finished = False

    def __iter__(self) -> Split:
        return self

    def __next__(self) -> Bytes:
        if self._finished:
            raise StopIteration
        pos = self._bytes.position(self._pred)
        if pos is None:
            self._finished = True
            return self._bytes
        item = self._bytes.range_to(pos)
        self._bytes = self._bytes.range_from(pos + 1)
        return item


class Tokens:
    """Runs of non-space bytes, skipping ASCII spaces between them."""

    __slots__ = ("_bytes",)

    def __init__(self, data: Bytes) -> None:
        self._bytes = data

    def __iter__(self) -> Tokens:
        return self

    def __next__(self) -> Bytes:
        start = self._bytes.position(lambda b: b != SPACE)
        if start is None:
            raise StopIteration
        rest = self._bytes.range_from(start)
        end = rest.position(lambda b: b == SPACE)
        if end is None:
            end = len(rest)
        item, self._bytes = rest.split_at(end)
        return item

    def next_token(self) -> Bytes | None:
        """Next token, or ``None`` when the input is used up."""
        return next(self, None)

    def remain(self) -> Bytes:
        """Unconsumed input with leading spaces stripped."""
        start = self._bytes.position(lambda b: b != SPACE)
        if start is None:
            start = len(self._bytes)
        return self._bytes.range_from(start)
