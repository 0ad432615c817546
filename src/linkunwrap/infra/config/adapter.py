from __future__ import annotations

from typing import Any

from linkunwrap.schemas import LogConfig, ResolverConfig


class ConfigAdapter:
    """Typed accessor over a loaded configuration mapping.

    Args:
        config (dict[str, Any]): Configuration mapping with an optional
            ``general`` block.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_resolver_config(self) -> ResolverConfig:
        """Build a ResolverConfig from the ``general`` block.

        Returns:
            ResolverConfig: Resolved resolver settings.

        Raises:
            ValueError: If ``disabled_hosts`` is not a list of strings.
        """
        hosts = self._gen_cfg().get("disabled_hosts") or []
        if isinstance(hosts, str) or not all(isinstance(h, str) for h in hosts):
            raise ValueError(f"disabled_hosts must be a list of strings: {hosts!r}")

        return ResolverConfig(disabled_hosts=tuple(hosts))

    def get_log_config(self) -> LogConfig:
        """Build a LogConfig from ``general.debug``.

        Returns:
            LogConfig: Logging level and optional log directory.
        """
        debug_cfg = self._gen_cfg().get("debug") or {}

        return LogConfig(
            log_level=str(debug_cfg.get("log_level", "INFO")).upper(),
            log_dir=debug_cfg.get("log_dir") or None,
        )

    def _gen_cfg(self) -> dict[str, Any]:
        return self._config.get("general") or {}
