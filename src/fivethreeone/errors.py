"""Error taxonomy for program generation.

All errors are deterministic consequences of bad input: they are raised
synchronously and never retried.
"""

from __future__ import annotations


class ProgramError(Exception):
    code = "program_error"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, str | None]:
        return {"code": self.code, "message": self.message, "field": self.field}


class InvalidProgramParameter(ProgramError):
    """Week, set or lift argument outside the program's domain."""

    code = "invalid_program_parameter"


class InvalidInventory(ProgramError):
    """Malformed plate inventory (non-positive, duplicate or non-numeric plates)."""

    code = "invalid_inventory"
