"""Opaque descriptions of text edits, measured in bytes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OpaqueDiff:
    """An edit that replaced ``old_length`` bytes at ``byte_index`` with ``new_length`` bytes."""

    byte_index: int
    old_length: int
    new_length: int

    def __post_init__(self) -> None:
        if min(self.byte_index, self.old_length, self.new_length) < 0:
            raise ValueError("diff offsets and lengths must not be negative")

    @classmethod
    def empty(cls) -> OpaqueDiff:
        """Return the diff that changes nothing."""
        return cls(0, 0, 0)

    def is_empty(self) -> bool:
        """Return True when every field is zero."""
        return self.byte_index == 0 and self.old_length == 0 and self.new_length == 0

    def reverse(self) -> OpaqueDiff:
        """Return the diff that undoes this one."""
        return OpaqueDiff(self.byte_index, self.new_length, self.old_length)