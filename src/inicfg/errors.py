from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    EMPTY_INPUT = "empty input"
    INVALID_FORMAT = "invalid format"
    GLOBAL_DATA_NOT_ALLOWED = "global data not allowed"
    SECTION_NOT_FOUND = "section not found"
    KEY_NOT_FOUND = "key not found"
    INVALID_FILE_EXTENSION = "invalid file extension"
    FILE_NOT_FOUND = "file not found"


class IniError(Exception):
    """Base class for inicfg errors.

    Errors compare equal by :class:`ErrorKind`, so ``exc == ErrorKind.KEY_NOT_FOUND``
    and ``KeyNotFoundError() == KeyNotFoundError("other message")`` both hold.
    The class is abstract: raise one of the subclasses, which set ``kind``.
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        if getattr(self, "kind", None) is None:
            raise TypeError(f"{type(self).__name__} is abstract; raise a subclass")
        self.message = message or self.kind.value
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniError):
            return self.kind is other.kind
        if isinstance(other, ErrorKind):
            return self.kind is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


class IniParseError(IniError):
    """Abstract base for errors raised when INI text cannot be parsed.

    ``lineno`` is 1-based; both it and ``line`` are ``None`` when the error is
    not tied to a specific line.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        lineno: int | None = None,
        line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            self.message = f"{self.message} (line {lineno}: {line!r})"
            self.args = (self.message,)


class EmptyInputError(IniParseError):
    """Raised when the document is a single blank or comment line."""

    kind = ErrorKind.EMPTY_INPUT


class InvalidFormatError(IniParseError):
    """Raised for a malformed section header or a key line without ``=``."""

    kind = ErrorKind.INVALID_FORMAT


class GlobalDataNotAllowedError(IniParseError):
    """Raised when a key-value line appears before any section header."""

    kind = ErrorKind.GLOBAL_DATA_NOT_ALLOWED


class SectionNotFoundError(IniError):
    kind = ErrorKind.SECTION_NOT_FOUND


class KeyNotFoundError(IniError):
    kind = ErrorKind.KEY_NOT_FOUND


class InvalidFileExtensionError(IniError):
    """Raised when a path does not end with ``.ini``."""

    kind = ErrorKind.INVALID_FILE_EXTENSION


class IniFileNotFoundError(IniError):
    """Raised when an INI file cannot be read for any reason."""

    kind = ErrorKind.FILE_NOT_FOUND
