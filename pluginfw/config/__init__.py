"""Plugin configuration types.

Imports are lazy so the core value types can be used without pulling in
pydantic, which only the document/reader layer needs.
"""

__all__ = [
    "VersionInfo",
    "PluginInstanceConfig",
    "PluginConfig",
    "ExactVersion",
    "VersionRange",
    "validate_file_path",
    "validate_plugin_instance_name",
    "ConfigReadError",
    "read_plugin_configs",
]


def __getattr__(name):
    if name == "VersionInfo":
        from pluginfw.config.version_info import VersionInfo
        return VersionInfo
    if name == "PluginInstanceConfig":
        from pluginfw.config.instance_config import PluginInstanceConfig
        return PluginInstanceConfig
    if name in ("PluginConfig", "ExactVersion", "VersionRange"):
        from pluginfw.config import plugin_config
        return getattr(plugin_config, name)
    if name in ("validate_file_path", "validate_plugin_instance_name"):
        from pluginfw.config import validation
        return getattr(validation, name)
    if name in ("ConfigReadError", "read_plugin_configs"):
        from pluginfw.config import reader
        return getattr(reader, name)
    raise AttributeError(f"module 'pluginfw.config' has no attribute {name!r}")
