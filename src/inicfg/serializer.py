from __future__ import annotations

from .parser import Config


def dumps(config: Config) -> str:
    """Serialize *config* as INI text.

    Comments and the original layout are not preserved; parsing the result
    yields the same sections, keys and values.
    """

    lines: list[str] = []
    for section, properties in config.items():
        lines.append(f"[{section}]")
        for key, value in properties.items():
            lines.append(f"{key} = {value}")
    return "\n".join(lines) + "\n"
