"""Severity scale for node type definition changes."""

from enum import IntEnum


class Severity(IntEnum):
    """Impact of a definition change, totally ordered.

    NONE: no modification at all.
    TRIVIAL: neither affects consistency of existing content nor changes
        existing/assigned definition ids.
    MINOR: does not affect consistency of existing content but *does*
        change existing/assigned definition ids.
    MAJOR: affects consistency of existing content and changes
        existing/assigned definition ids.
    """
    NONE = 0
    TRIVIAL = 1
    MINOR = 2
    MAJOR = 3

    def raise_to(self, other: "Severity") -> "Severity":
        """Return this severity raised to at least `other`."""
        return self if self >= other else Severity(other)

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_label(cls, label: str) -> "Severity":
        """Parse a label such as "minor" or "MAJOR"."""
        try:
            return cls[label.strip().upper()]
        except KeyError:
            valid = ", ".join(s.name for s in cls)
            raise ValueError(f"Unknown severity '{label}' (expected one of: {valid})") from None


def max_severity(*severities: Severity) -> Severity:
    """Pairwise maximum; NONE for no arguments."""
    result = Severity.NONE
    for severity in severities:
        result = result.raise_to(severity)
    return result
