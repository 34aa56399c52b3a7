"""pluginfw - plugin configuration model and validation."""

__version__ = "1.0.0"
