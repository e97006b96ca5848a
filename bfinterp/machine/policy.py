"""
Overflow policies for the two boundary axes of the machine.

The pointer axis (tape addresses) and the value axis (cell bytes) are
configured independently, each with one OverflowPolicy.
"""

from __future__ import annotations

from enum import Enum

from bfinterp.errors import ConfigurationError


class OverflowPolicy(str, Enum):
    """What the machine does when a mutation would leave its valid range."""

    IGNORE = "ignore"  # the mutation is discarded
    WRAP_AROUND = "wrap_around"  # jump to the opposite end of the range
    THROW_EXCEPTION = "throw_exception"  # raise CellOverflow / CellValueOverflow

    @classmethod
    def parse(cls, raw: OverflowPolicy | str) -> OverflowPolicy:
        """
        Resolve a policy from a member, its value, or its name.

        Matching is case-insensitive and treats ``-`` as ``_``, so
        ``"wrap-around"``, ``"wrap_around"`` and ``"WRAP_AROUND"`` all resolve
        to WRAP_AROUND. Raises ConfigurationError for anything else.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            key = raw.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == key:
                    return member
        valid = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"Unknown overflow policy {raw!r}; expected one of: {valid}")
