"""Global constants for the plugin configuration tools."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Plugin configuration document used when no path is given on the command line
_config_file_env = os.getenv("PLUGIN_CONFIG_FILE", "")
if _config_file_env:
    # Relative paths are resolved against the project root
    _config_file_path = Path(_config_file_env)
    PLUGIN_CONFIG_FILE = _config_file_path if _config_file_path.is_absolute() else (PROJECT_ROOT / _config_file_path).resolve()
else:
    PLUGIN_CONFIG_FILE = PROJECT_ROOT / "plugins" / "config.json"

PORT = int(os.getenv("PORT", "9090"))
