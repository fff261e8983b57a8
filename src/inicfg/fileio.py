from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import IniFileNotFoundError, InvalidFileExtensionError
from .parser import Config, loads
from .serializer import dumps

logger = logging.getLogger(__name__)

INI_SUFFIX = ".ini"
FILE_MODE = 0o644


def check_suffix(path: str | os.PathLike[str]) -> str:
    """Return *path* as a string, or raise if it does not end with ``.ini``."""
    name = os.fspath(path)
    if not name.endswith(INI_SUFFIX):
        raise InvalidFileExtensionError(
            f"expected a {INI_SUFFIX} file, got {name!r}"
        )
    return name


def read_file(path: str | os.PathLike[str], *, strict: bool = False) -> Config:
    """Read and parse the INI file at *path*.

    The suffix check happens before the file is touched.

    Raises:
        InvalidFileExtensionError: *path* does not end with ``.ini``.
        IniFileNotFoundError: The file is missing or cannot be read.
        IniParseError: The contents are not valid INI.
    """

    name = check_suffix(path)
    try:
        text = Path(name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s: %s", name, exc)
        raise IniFileNotFoundError(f"cannot read {name!r}: {exc}") from exc
    logger.debug("Read %d bytes from %s", len(text), name)
    return loads(text, strict=strict)


def write_file(config: Config, path: str | os.PathLike[str]) -> None:
    """Serialize *config* and replace the file at *path* with it.

    The text goes to a ``.tmp`` sibling first, so a failed write leaves any
    existing file untouched. OSError propagates to the caller.
    """

    data = dumps(config).encode("utf-8")
    target = Path(path)
    tmp = target.with_suffix(target.suffix + ".tmp")
    with tmp.open("wb") as fh:
        fh.write(data)
    tmp.chmod(FILE_MODE)
    tmp.replace(target)
    logger.debug("Wrote %d sections to %s", len(config), os.fspath(path))
