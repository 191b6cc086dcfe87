"""Detection of devices that broadcast from the same IP address."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Conflict:
    """Two broadcast codes seen from one IP address."""

    ip: str
    known_code: str
    new_code: str

    def __str__(self) -> str:
        return (
            f"broadcast_code: {{{self.known_code}}} is conflicted with "
            f"broadcast_code: {{{self.new_code}}}, which ip is : {{{self.ip}}}"
        )


class BroadcastConflictDetector:
    """Remembers the first broadcast code seen from each IP address."""

    def __init__(self) -> None:
        self.codes: dict[str, str] = {}

    def observe(self, ip: str, code: str) -> Conflict | None:
        """Record a broadcast; return a conflict if the IP already had another code."""
        known = self.codes.get(ip)
        if known is None:
            self.codes[ip] = code
            return None
        if known == code:
            return None
        return Conflict(ip=ip, known_code=known, new_code=code)