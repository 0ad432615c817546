from importlib.resources import files

from platformdirs import user_config_path

PACKAGE_NAME = "linkunwrap"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/linkunwrap/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

SETTING_FILENAME = "settings.toml"
SETTING_PATH = USER_CONFIG_DIR / SETTING_FILENAME

# -----------------------------------------------------------------------------
# Embedded resources
# -----------------------------------------------------------------------------

RES = files("linkunwrap.resources")

# Config
DEFAULT_CONFIG_FILE = RES.joinpath("config", "settings.sample.toml")
