"""Output caps for stored diff text."""

from dataclasses import dataclass

DEFAULT_MAX_BYTES = 4096
DEFAULT_MAX_LINES = 256


@dataclass(frozen=True, slots=True)
class DiffLimits:
    """Caps on already-stored diff text.

    A record is stored while both totals are below their caps, so the stored
    text may exceed a cap by at most one record. Once either cap is reached no
    further records are stored.

    Attributes:
        max_bytes: Cap on stored UTF-8 bytes (must be > 0)
        max_lines: Cap on stored newline characters (must be > 0)
    """

    max_bytes: int = DEFAULT_MAX_BYTES
    max_lines: int = DEFAULT_MAX_LINES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be > 0, got {self.max_bytes}")
        if self.max_lines <= 0:
            raise ValueError(f"max_lines must be > 0, got {self.max_lines}")

    def allows(self, stored_bytes: int, stored_lines: int) -> bool:
        """True while another record may be stored."""
        return stored_bytes < self.max_bytes and stored_lines < self.max_lines
