"""Protocol shared by name sources handed to a renaming engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NameGenerator(Protocol):
    """Source of unique replacement names.

    A renaming engine calls :meth:`reset` when it enters a new naming scope,
    for example the members of another class, and :meth:`next_name` for
    every identifier it renames within that scope.
    """

    def reset(self) -> None:
        """Restart the sequence from its first name."""

        ...

    def next_name(self) -> str:
        """Return the next name in the sequence."""

        ...


__all__ = ["NameGenerator"]
