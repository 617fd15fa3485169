"""
Indentation-aware text accumulator.

Generators append unindented lines; nesting depth is derived from
per-language triggers that recognise lines opening or closing a block.
"""

from typing import Callable, Iterable, List, Union

LinePredicate = Callable[[str], bool]


class IndentationAwareBuffer:
    """Accumulates lines, indenting each according to the current depth."""

    def __init__(
        self,
        indent: str,
        augment_trigger: LinePredicate,
        reduce_trigger: LinePredicate,
        level: int = 0,
    ):
        """
        Initialize buffer.

        Args:
            indent: Text emitted once per nesting level
            augment_trigger: True for lines after which depth increases
            reduce_trigger: True for lines before which depth decreases
            level: Starting depth
        """
        self.indent = indent
        self.augment_trigger = augment_trigger
        self.reduce_trigger = reduce_trigger
        self.level = max(level, 0)
        self._lines: List[str] = []

    def append(self, line: Union[str, Iterable[str], None]) -> "IndentationAwareBuffer":
        """Append a line, an optional line (None) or a sequence of lines."""
        if line is None:
            return self
        if isinstance(line, str):
            self._append_line(line)
        else:
            for item in line:
                self.append(item)
        return self

    __iadd__ = append

    def _append_line(self, line: str):
        clean = line.strip()
        if self.reduce_trigger(clean):
            self.level = max(self.level - 1, 0)
        self._lines.append(self.indent * self.level + clean + "\n")
        if self.augment_trigger(clean):
            self.level += 1

    @property
    def lines(self) -> List[str]:
        """Emitted lines without their newline terminators."""
        return [line[:-1] for line in self._lines]

    def __str__(self) -> str:
        return "".join(self._lines)

