"""Broadcast codes of the devices a client agrees to connect to."""

from __future__ import annotations

from typing import Iterable, Iterator

BROADCAST_CODE_SIZE = 16
"""Bytes reserved for a broadcast code, terminator included."""

MAX_LIDAR_COUNT = 32
"""Most devices that can be listed at once."""

LOCAL_BROADCAST_CODES: tuple[str, ...] = ("000000000000001",)
"""Codes configured in place of command-line input; the default is a placeholder."""

_PLACEHOLDER_RUN = "000000000"


def is_valid_local_code(code: str) -> bool:
    """Whether a locally configured code looks like a real broadcast code.

    A real code fills the code field but for its terminator and is not a
    placeholder made mostly of zeros.
    """
    return len(code) + 1 == BROADCAST_CODE_SIZE and _PLACEHOLDER_RUN not in code


class Whitelist:
    """An ordered set of broadcast codes.

    An empty whitelist means every broadcasting device may be connected.
    """

    def __init__(self, capacity: int = MAX_LIDAR_COUNT) -> None:
        self.capacity = capacity
        self._codes: list[str] = []

    @property
    def auto_connect(self) -> bool:
        """True when no code is listed, so any device may connect."""
        return not self._codes

    def add(self, code: str) -> None:
        """List a code; raises ``ValueError`` if it is too long, listed, or the list is full."""
        if len(code) > BROADCAST_CODE_SIZE:
            raise ValueError(
                f"broadcast code longer than {BROADCAST_CODE_SIZE} characters: {code!r}"
            )
        if len(self._codes) >= self.capacity:
            raise ValueError(f"whitelist is full ({self.capacity} codes)")
        if code in self:
            raise ValueError(f"broadcast code already listed: {code!r}")
        self._codes.append(code)

    def add_local_codes(self, codes: Iterable[str] = LOCAL_BROADCAST_CODES) -> list[str]:
        """List every valid code that can be added; return the ones that were."""
        added = []
        for code in codes:
            if not is_valid_local_code(code):
                continue
            try:
                self.add(code)
            except ValueError:
                continue
            added.append(code)
        return added

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        wanted = code[:BROADCAST_CODE_SIZE]
        return any(listed[:BROADCAST_CODE_SIZE] == wanted for listed in self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)