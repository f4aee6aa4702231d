"""A fixed-length container that stores repeated values compactly."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["PalettedContainer"]

T = TypeVar("T")

_MAX_PALETTE = 16


class _PaletteFull(Exception):
    pass


class _Indirect(Generic[T]):
    """A palette of up to 16 distinct values and an index per element."""

    __slots__ = ("palette", "indices")

    def __init__(self, length: int) -> None:
        self.palette: list[T] = []
        self.indices = bytearray(length)

    def get(self, index: int) -> T:
        return self.palette[self.indices[index]]

    def set(self, index: int, value: T) -> T:
        try:
            palette_index = self.palette.index(value)
        except ValueError:
            if len(self.palette) >= _MAX_PALETTE:
                raise _PaletteFull from None
            self.palette.append(value)
            palette_index = len(self.palette) - 1
        old = self.get(index)
        self.indices[index] = palette_index
        return old


class PalettedContainer(Generic[T]):
    """A fixed-length sequence that switches between a single value, a small
    palette and a plain list depending on how many distinct values it holds."""

    def __init__(self, length: int, default: T) -> None:
        if length <= 0:
            raise ValueError("a paletted container must have a positive length")
        self._length = length
        self._single: T = default
        self._indirect: _Indirect[T] | None = None
        self._direct: list[T] | None = None

    def __len__(self) -> int:
        return self._length

    def fill(self, value: T) -> None:
        """Set every element to ``value``."""
        self._single = value
        self._indirect = None
        self._direct = None

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check_index(index)
        if self._direct is not None:
            return self._direct[index]
        if self._indirect is not None:
            return self._indirect.get(index)
        return self._single

    def set(self, index: int, value: T) -> T:
        """Replace the element at ``index`` and return the previous one."""
        self._check_index(index)
        if self._direct is not None:
            old = self._direct[index]
            self._direct[index] = value
            return old
        if self._indirect is not None:
            try:
                return self._indirect.set(index, value)
            except _PaletteFull:
                ind = self._indirect
                self._direct = [ind.get(i) for i in range(self._length)]
                self._indirect = None
                return self.set(index, value)
        old = self._single
        if old == value:
            return old
        ind: _Indirect[T] = _Indirect(self._length)
        ind.palette.extend((old, value))
        ind.indices[index] = 1
        self._indirect = ind
        return old

    def optimize(self) -> None:
        """Shrink the representation as far as the current contents allow."""
        if self._indirect is None and self._direct is None:
            return
        values = (
            self._direct
            if self._direct is not None
            else [self._indirect.get(i) for i in range(self._length)]
        )
        ind: _Indirect[T] = _Indirect(self._length)
        try:
            for i, value in enumerate(values):
                ind.set(i, value)
        except _PaletteFull:
            return
        if len(ind.palette) == 1:
            self.fill(ind.palette[0])
        else:
            self._indirect = ind
            self._direct = None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(
                f"index {index} is out of bounds in paletted container of length {self._length}"
            )