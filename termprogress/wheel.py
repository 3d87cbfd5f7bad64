"""Glyph cycles for spinners."""

from typing import Iterable, Iterator, Tuple


class Wheel:
    """A fixed, repeating sequence of single-character glyphs."""

    def __init__(self, glyphs: Iterable[str]):
        self.glyphs: Tuple[str, ...] = tuple(glyphs)
        if not self.glyphs:
            raise ValueError("A wheel needs at least one glyph")

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index % len(self.glyphs)]

    def __iter__(self) -> Iterator[str]:
        return iter(self.glyphs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wheel):
            return NotImplemented
        return self.glyphs == other.glyphs

    def __repr__(self) -> str:
        return f"Wheel({''.join(self.glyphs)!r})"


DEFAULT_WHEEL = Wheel("/-\\|")
