from .config import get_sections, get_value, section_names, set_value
from .errors import (
    EmptyInputError,
    ErrorKind,
    GlobalDataNotAllowedError,
    IniError,
    IniFileNotFoundError,
    IniParseError,
    InvalidFileExtensionError,
    InvalidFormatError,
    KeyNotFoundError,
    SectionNotFoundError,
)
from .fileio import read_file, write_file
from .parser import Config, loads
from .serializer import dumps

__all__ = [
    "Config",
    "loads",
    "read_file",
    "dumps",
    "write_file",
    "section_names",
    "get_sections",
    "get_value",
    "set_value",
    "ErrorKind",
    "IniError",
    "IniParseError",
    "EmptyInputError",
    "InvalidFormatError",
    "GlobalDataNotAllowedError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "InvalidFileExtensionError",
    "IniFileNotFoundError",
]
