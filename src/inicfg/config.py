from __future__ import annotations

from .errors import KeyNotFoundError, SectionNotFoundError
from .parser import Config


def section_names(config: Config) -> list[str]:
    """Return the section names of *config*.

    Callers should not rely on the order.
    """
    return list(config)


def get_sections(config: Config) -> Config:
    """Return *config* itself, not a copy.

    Mutating the result mutates the configuration.
    """
    return config


def get_value(config: Config, section: str, key: str) -> str:
    try:
        data = config[section]
    except KeyError:
        raise SectionNotFoundError(f"section not found: {section!r}") from None
    try:
        return data[key]
    except KeyError:
        raise KeyNotFoundError(
            f"key not found: {key!r} in section {section!r}"
        ) from None


def set_value(config: Config, section: str, key: str, value: str) -> None:
    """Set *key* in *section*, creating the section when it is missing."""
    config.setdefault(section, {})[key] = value
