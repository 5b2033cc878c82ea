from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Timestamp:
    """
    Immutable snapshot of a vector clock, attached to outgoing messages.
    self_index is the slot of the process that took the snapshot.
    Values must be plain non-negative ints; bools and floats are refused.
    """
    values: Tuple[int, ...]
    self_index: int

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
        for v in self.values + (self.self_index,):
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"clock values must be int, got {v!r}")
            if v < 0:
                raise ValueError(f"clock values must be non-negative, got {v}")
        if not 0 <= self.self_index < len(self.values):
            raise ValueError(f"self index {self.self_index} outside timestamp of size {len(self.values)}")

    def __len__(self):
        return len(self.values)

    def __str__(self):
        return "<" + " ".join(str(v) for v in self.values) + ">"


class VectorClock:
    """
    Vector Clock for causal delivery among a fixed set of peers.
    One slot per peer; slots only ever grow (increment and merge).
    """

    def __init__(self, size, self_index):
        if size < 1:
            raise ValueError(f"clock size must be positive, got {size}")
        if not 0 <= self_index < size:
            raise ValueError(f"self index {self_index} outside clock of size {size}")
        self.self_index = self_index
        self._values = [0] * size

    @property
    def values(self):
        return tuple(self._values)

    def __len__(self):
        return len(self._values)

    def increment(self):
        """Advance the local slot and return a snapshot for an outgoing message."""
        self._values[self.self_index] += 1
        return self.snapshot()

    def merge(self, other):
        """Slot-wise maximum with another clock or timestamp."""
        if len(other.values) != len(self._values):
            raise ValueError(
                f"cannot merge clock of size {len(other.values)} into size {len(self._values)}"
            )
        for i, ts in enumerate(other.values):
            if ts > self._values[i]:
                self._values[i] = ts

    def can_deliver(self, ts, sender_index):
        """
        Causal delivery condition for a message stamped with ts:
        it must be the next message from its sender, and the sender
        must not have seen anything this process has not seen yet.
        """
        if ts.values[sender_index] - self._values[sender_index] != 1:
            return False
        for i, value in enumerate(ts.values):
            if i == sender_index:
                continue
            if value > self._values[i]:
                return False
        return True

    def snapshot(self):
        return Timestamp(tuple(self._values), self.self_index)

    def __str__(self):
        return "<" + " ".join(str(v) for v in self._values) + ">"

    def __repr__(self):
        return f"VectorClock(self_index={self.self_index}, values={self._values})"
