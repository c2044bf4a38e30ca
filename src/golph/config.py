#-
# #%L
# Contrast AI SmartFix
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import os
from typing import Optional, Any

from golph.errors import ConfigError
from golph.utils import debug_log, log, set_debug_mode


class GolphConfig:
    """
    Configuration manager for golph.
    Handles loading, validating, and accessing configuration values.
    """

    # Preset values
    VERSION = "0.1.0"
    USER_AGENT = f"golph/{VERSION}"

    def __init__(self, env_vars=None):
        """
        Initialize the configuration manager.

        Args:
            env_vars: Optional dictionary of environment variables (for testing)
        """
        self.env_vars = env_vars if env_vars is not None else os.environ
        self._load_config()

    def _get_env_var(self, var_name: str, required: bool = True, default: Optional[Any] = None) -> Optional[str]:
        """Gets an environment variable or raises ConfigError if required and not found.

        The built-in GOLPH_* settings are all optional; required=True is for
        subclasses that load mandatory settings of their own in _load_config.
        """
        value = self.env_vars.get(var_name)
        if required and not value:
            log(f"Error: Required environment variable {var_name} is not set.", is_error=True)
            raise ConfigError(f"Required environment variable {var_name} is not set.")
        return value if value else default

    def _load_config(self):
        """Loads all configuration from environment variables."""

        # --- Core Settings ---
        self.debug_mode = self._get_env_var("GOLPH_DEBUG_MODE", required=False, default="false").lower() == "true"
        set_debug_mode(self.debug_mode)

        # --- Phabricator Configuration ---
        self.base_url = self._get_env_var("GOLPH_BASE_URL", required=False, default="")
        self.api_token = self._get_env_var("GOLPH_API_TOKEN", required=False, default="")

        # --- Transport Configuration ---
        self.http_timeout = self._get_http_timeout()

        debug_log(f"Base URL: {self.base_url or '(default)'}")
        debug_log(f"API Token: {'***' if self.api_token else '(not set)'}")
        debug_log(f"HTTP Timeout: {self.http_timeout}")

    def _get_http_timeout(self) -> Optional[float]:
        """Validates and normalizes the GOLPH_HTTP_TIMEOUT setting.

        Returns:
            Timeout in seconds, or None to leave timeouts to the transport
        """
        raw_timeout = self._get_env_var("GOLPH_HTTP_TIMEOUT", required=False, default=None)
        if raw_timeout is None:
            return None
        try:
            timeout = float(raw_timeout)
        except (ValueError, TypeError):
            log(f"Invalid GOLPH_HTTP_TIMEOUT value '{raw_timeout}'. Using no timeout.", is_warning=True)
            return None
        if timeout <= 0:
            log(f"GOLPH_HTTP_TIMEOUT must be positive, got {timeout}. Using no timeout.", is_warning=True)
            return None
        return timeout


_config_instance: Optional[GolphConfig] = None


def get_config(env_vars=None) -> GolphConfig:
    """Returns the shared configuration, loading it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = GolphConfig(env_vars=env_vars)
    return _config_instance


def reset_config():
    """Drops the shared configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
