"""Non-empty sequences."""

import collections.abc


class Sequence1(collections.abc.MutableSequence):
    """A list guaranteed to hold at least one item.

    Any mutation that would leave the sequence empty raises `ValueError`.
    Compares equal to other sequences (including plain lists) with the same items.
    """

    def __init__(self, items):
        items = list(items)
        if not items:
            raise ValueError("Sequence1 requires at least one item")
        self._items = items

    @classmethod
    def coerce(cls, items):
        """Converter accepting a `Sequence1` or any non-empty iterable."""
        if isinstance(items, cls):
            return items
        return cls(items)

    @property
    def head(self):
        return self._items[0]

    @property
    def tail(self):
        return self._items[1:]

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            items = list(self._items)
            items[index] = value
            if not items:
                raise ValueError("cannot empty a Sequence1")
            self._items = items
        else:
            self._items[index] = value

    def __delitem__(self, index):
        items = list(self._items)
        del items[index]
        if not items:
            raise ValueError("cannot empty a Sequence1")
        self._items = items

    def __len__(self):
        return len(self._items)

    def insert(self, index, value):
        self._items.insert(index, value)

    def __eq__(self, other):
        if isinstance(other, Sequence1):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Sequence1({self._items!r})"
