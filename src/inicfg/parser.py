from __future__ import annotations

from .errors import EmptyInputError, GlobalDataNotAllowedError, InvalidFormatError

Config = dict[str, dict[str, str]]

COMMENT_PREFIX = ";"


def _is_blank(line: str) -> bool:
    return line == "" or line.startswith(COMMENT_PREFIX)


def loads(text: str, *, strict: bool = False) -> Config:
    """Parse INI *text* into a mapping of section name to key-value pairs.

    Lines are split on ``\\n`` and stripped. Blank lines and lines starting
    with ``;`` are skipped, unless the whole document is that single line, in
    which case :class:`EmptyInputError` is raised.

    Only the first ``=`` separates a key from its value. Duplicate sections
    and keys overwrite earlier ones. A header ``[]`` names the empty section;
    with ``strict=True`` it is rejected with :class:`InvalidFormatError`.

    Raises:
        EmptyInputError: The document is a single blank or comment line.
        InvalidFormatError: A section header is unbalanced, or a key line has
            no ``=``.
        GlobalDataNotAllowedError: A key line precedes the first section.
    """

    lines = text.split("\n")
    config: Config = {}
    current: str | None = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if _is_blank(line):
            if len(lines) == 1:
                raise EmptyInputError("the file is empty", lineno=lineno, line=raw)
            continue

        opens = line.startswith("[")
        closes = line.endswith("]")
        if opens and closes:
            current = line[1:-1]
            if strict and current == "":
                raise InvalidFormatError(
                    "empty section name", lineno=lineno, line=raw
                )
            config[current] = {}
            continue
        if opens or closes:
            raise InvalidFormatError(
                "malformed section header", lineno=lineno, line=raw
            )

        if current is None:
            raise GlobalDataNotAllowedError(
                "key-value data outside of a section", lineno=lineno, line=raw
            )

        key, sep, value = line.partition("=")
        if not sep:
            raise InvalidFormatError("missing '=' separator", lineno=lineno, line=raw)
        config[current][key.strip()] = value.strip()

    return config
