"""Decide whether a new display string can reuse the existing slots."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

SlotCommand = Tuple[int, str]


@dataclass(frozen=True)
class Patch:
    """Same slot count: push one character into every slot, in order."""

    commands: Tuple[SlotCommand, ...]
    previous: str = ""

    @property
    def changed(self) -> Iterator[SlotCommand]:
        """Commands whose character differs from the previous display string."""
        for index, char in self.commands:
            if self.previous[index:index + 1] != char:
                yield index, char

    def __len__(self) -> int:
        return len(self.commands)


@dataclass(frozen=True)
class Rebuild:
    """Slot count changed (or no slots yet): discard and recreate every slot."""

    chars: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.chars)


DiffOutcome = Union[Patch, Rebuild]


def diff_display(previous: Optional[str], new: str) -> DiffOutcome:
    """Compare two display strings.

    A length change has no stable per-position mapping ("9" -> "10"), so it
    always rebuilds.
    """
    if previous is None or len(previous) != len(new):
        return Rebuild(chars=tuple(new))
    return Patch(commands=tuple(enumerate(new)), previous=previous)
