"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass


@dataclass
class ResolverConfig:
    """Configuration for the redirect resolver.

    Attributes:
        disabled_hosts: Registry hosts whose rules should be skipped.
            Concrete subdomains of folded domains are accepted and
            normalized (``"wow.curseforge.com"`` disables
            ``"*.curseforge.com"``).
    """

    disabled_hosts: tuple[str, ...] = ()


@dataclass
class LogConfig:
    """Configuration for package logging.

    Attributes:
        log_level: Name of the logging level (``"DEBUG"``, ``"INFO"``, ...).
        log_dir: Optional directory for a rotating log file.
    """

    log_level: str = "INFO"
    log_dir: str | None = None
