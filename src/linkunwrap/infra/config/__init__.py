"""
Loading of user settings and the typed views over them.
"""

__all__ = [
    "find_config_file",
    "init_config",
    "load_config",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
from .file_io import find_config_file, init_config, load_config
