"""
Delimiter-aware scanner used by the DDL parser.

The scanner is a cursor over an immutable string. Every read operation
consumes the read portion from the front of the buffer, so the parser walks
the statement from left to right without backtracking.

Search operations return None instead of an index when nothing is found.

Classes
-------
- `Scanner`: Cursor with nesting-aware search/split primitives
"""
from typing import Optional, Union



class Scanner:
    """Cursor over a string

    Examples
    --------
    >>> sc = Scanner("users (id INT, price DECIMAL(10,2)) WITHOUT ROWID")
    >>> sc.read_until_whitespace()
    'users'
    >>> sc.trim_outside_enclosing_pair('(', ')')
    True
    >>> sc.split_excluding_enclosing_pair(',', '(', ')')
    ['id INT', 'price DECIMAL(10,2)']
    """
    def __init__(self, text:str):
        self._text = text
        self._start = 0
        self._end = len(text)

    @property
    def buffer(self) -> str:
        """Remaining (unconsumed) text"""
        return self._text[self._start:self._end]

    def __len__(self) -> int:
        return self._end - self._start

    def __str__(self) -> str:
        return self.buffer

    def __repr__(self) -> str:
        return f"Scanner({self.buffer!r})"

    def is_empty(self) -> bool:
        """True if nothing remains in the buffer"""
        return self._start >= self._end

    def starts_with(self, prefix:str) -> bool:
        """True if the buffer starts with `prefix` (case-sensitive)"""
        return self._text.startswith(prefix, self._start, self._end)

    def skip(self, prefix_or_length:Union[str, int]) -> None:
        """Remove a prefix or a number of leading characters

        Parameters
        ----------
        prefix_or_length : str | int
            Literal prefix to remove, or the number of characters to remove

        Raises
        ------
        ValueError
            If the buffer does not start with the prefix,
            or the length is negative or exceeds the buffer
        """
        if isinstance(prefix_or_length, str):
            if not self.starts_with(prefix_or_length):
                raise ValueError(f"Buffer does not start with {prefix_or_length!r}")
            length = len(prefix_or_length)
        else:
            length = prefix_or_length
            if length < 0 or length > len(self):
                raise ValueError(f"Cannot skip {length} characters " \
                                 f"of a buffer of length {len(self)}")
        self._start += length

    def trim(self) -> None:
        """Remove leading and trailing whitespace"""
        while self._start < self._end and self._text[self._start].isspace():
            self._start += 1
        while self._end > self._start and self._text[self._end - 1].isspace():
            self._end -= 1

    def index_of_whitespace(self) -> Optional[int]:
        """Index of the first whitespace character, or None"""
        for i in range(self._start, self._end):
            if self._text[i].isspace():
                return i - self._start
        return None

    def read(self, length:int) -> str:
        """Return and remove the first `length` characters"""
        result = self._text[self._start:self._start + length]
        self.skip(length)
        return result

    def read_until_whitespace(self) -> str:
        """Return and remove the leading token

        The whitespace following the token is removed as well.
        If the buffer contains no whitespace, the whole buffer is returned.
        """
        if (pos := self.index_of_whitespace()) is None:
            return self.read(len(self))

        token = self.read(pos)
        while self._start < self._end and self._text[self._start].isspace():
            self._start += 1
        return token

    #
    # Nesting-aware search
    #

    def index_of_enclosing_pair(self, left:str, right:str) -> Optional[int]:
        """Index of the `right` character closing the first top-level `left`

        Parameters
        ----------
        left : str
            Opening character (e.g. '(')
        right : str
            Closing character (e.g. ')')

        Returns
        -------
        int | None
            Index relative to the start of the buffer,
            or None if the depth never returns to zero
        """
        depth = 0
        for i in range(self._start, self._end):
            c = self._text[i]
            if c == left:
                depth += 1
            elif c == right:
                depth -= 1
                if depth == 0:
                    return i - self._start
        return None

    def index_of_excluding_enclosing_pair(self, target:str,
                                          left:str, right:str) -> Optional[int]:
        """Index of the first `target` character outside of any `left`/`right` pair

        Returns
        -------
        int | None
            Index relative to the start of the buffer, or None if not found

        Examples
        --------
        >>> Scanner("a DECIMAL(10,2), b INT").index_of_excluding_enclosing_pair(',', '(', ')')
        15
        """
        depth = 0
        for i in range(self._start, self._end):
            c = self._text[i]
            if c == left:
                depth += 1
            elif c == right:
                depth -= 1
            elif c == target and depth == 0:
                return i - self._start
        return None

    def trim_outside_enclosing_pair(self, left:str, right:str) -> bool:
        """Keep only the content of the first top-level `left`/`right` pair

        Everything from the closing character onward is discarded,
        then everything up to and including the first `left`,
        and the rest is trimmed.

        Returns
        -------
        bool
            False if no balanced pair was found (the buffer is left untouched)
        """
        if (right_pos := self.index_of_enclosing_pair(left, right)) is None:
            return False

        self._end = self._start + right_pos
        self._start = self._text.index(left, self._start, self._end) + 1
        self.trim()
        return True

    def split_excluding_enclosing_pair(self, target:str,
                                       left:str, right:str) -> list[str]:
        """Split the buffer on top-level `target` characters

        The buffer is consumed. Each segment is trimmed, and the last segment
        is included even without a trailing separator, so at least one
        segment (possibly empty) is always returned.
        """
        result = []
        while (pos := self.index_of_excluding_enclosing_pair(target, left, right)) is not None:
            result.append(self.read(pos).strip())
            self.skip(1)
        result.append(self.read(len(self)).strip())
        return result

    def abbreviate(self, max_length:int) -> str:
        """Preview of the buffer, truncated to `max_length` characters with '...'"""
        if len(self) <= max_length:
            return self.buffer
        return self._text[self._start:self._start + max_length] + "..."
