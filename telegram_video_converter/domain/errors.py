from __future__ import annotations


class ConverterError(Exception):
    exit_code = 1


class UsageError(ConverterError):
    """Bad invocation: wrong arguments, missing input or an output collision."""

    exit_code = 2


class EncodingError(ConverterError):
    """The encoder could not be spawned or exited with a non-zero status."""

    exit_code = 1

    def __init__(self, message: str, *, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
