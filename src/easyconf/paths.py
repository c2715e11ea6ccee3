from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

CONFIG_DIR_ENV = "EASYCONF_CONFIG_DIR"


def user_config_dir(app_name: str) -> Path:
    """Return the per-user configuration directory for *app_name*.

    ``$EASYCONF_CONFIG_DIR/<app_name>`` takes precedence over the platform
    default.
    """
    env = os.getenv(CONFIG_DIR_ENV)
    if env:
        return (Path(env).expanduser() / app_name).resolve()
    return Path(_uc(appname=app_name)).resolve()


def user_config_file(app_name: str, filename: str = "config.yaml") -> Path:
    return user_config_dir(app_name) / filename
