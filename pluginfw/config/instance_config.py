"""Plugin instance configuration - one named instance created from a plugin."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pluginfw.config.validation import validate_plugin_instance_name


@dataclass
class PluginInstanceConfig:
    """Configuration for a single runtime instance of a plugin."""

    name: str
    config: Dict[str, Any] = field(default_factory=dict)
    dependencies: List[str] = field(default_factory=list)  # names of other instances

    def is_valid(self) -> bool:
        """Check the instance name and its declared dependency names.

        An instance may not depend on itself. Whether the dependencies exist
        is decided by whoever wires the instances together.
        """
        if not validate_plugin_instance_name(self.name):
            return False

        for dependency in self.dependencies:
            if not validate_plugin_instance_name(dependency):
                return False
            if dependency == self.name:
                return False

        return True

    def to_dict(self) -> dict:
        """Serialize to the document form used by the config reader."""
        return {
            "name": self.name,
            "config": dict(self.config),
            "dependencies": list(self.dependencies),
        }
