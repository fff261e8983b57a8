from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

DEFAULT_FILENAME = "config.ini"


def _app_name(default: str) -> str:
    return os.getenv("INICFG_APP_NAME", default)


def user_config_dir(app_name: str = "inicfg") -> Path:
    app = _app_name(app_name)
    return Path(_uc(appname=app)).resolve()


def user_config_file(app_name: str = "inicfg") -> Path:
    """Return the per-user INI file, which may not exist yet."""
    return user_config_dir(app_name) / DEFAULT_FILENAME
