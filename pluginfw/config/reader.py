"""Config reader - turns JSON plugin configuration documents into PluginConfig values."""

import json
import logging
from typing import Any, List

from pydantic import ValidationError

from pluginfw.config.document import PluginsDocument
from pluginfw.config.plugin_config import PluginConfig

logger = logging.getLogger(__name__)


class ConfigReadError(Exception):
    """Raised when a plugin configuration document cannot be read."""


def read_plugin_configs(data: Any) -> List[PluginConfig]:
    """Build PluginConfig values from an already-decoded document.

    Args:
        data: Either {"plugins": [...]} or the bare list of plugin entries.

    Returns:
        Plugin configs in document order. They are not validated; call
        ``is_valid()`` on each one.

    Raises:
        ConfigReadError: If the document does not match the expected structure.
    """
    if isinstance(data, list):
        data = {"plugins": data}

    try:
        document = PluginsDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigReadError(f"Invalid plugin configuration: {e}") from e

    configs = [entry.to_plugin_config() for entry in document.plugins]
    logger.debug(f"Read {len(configs)} plugin config(s)")
    return configs


def loads(text: str) -> List[PluginConfig]:
    """Parse a JSON string into PluginConfig values.

    Raises:
        ConfigReadError: If the text is not valid JSON or has the wrong structure.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigReadError(f"Invalid JSON in plugin configuration: {e}") from e

    return read_plugin_configs(data)


def dumps(configs: List[PluginConfig]) -> str:
    """Serialize plugin configs back into the document form.

    Raises:
        ValueError: If a config holds a version that is set but invalid.
    """
    return json.dumps(
        {"plugins": [config.to_dict() for config in configs]},
        indent=2,
        ensure_ascii=False,
    )
