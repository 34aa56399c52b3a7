"""Document models - the JSON shape of a plugin configuration file."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pluginfw.config.instance_config import PluginInstanceConfig
from pluginfw.config.plugin_config import PluginConfig
from pluginfw.config.version_info import VersionInfo


class InstanceConfigDocument(BaseModel):
    """One entry of a plugin's "instances" list."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Instance name, unique within the plugin")
    config: Dict[str, Any] = Field(default_factory=dict, description="Instance-specific settings")
    dependencies: List[str] = Field(
        default_factory=list,
        description="Names of other instances this instance depends on",
    )

    def to_instance_config(self) -> PluginInstanceConfig:
        return PluginInstanceConfig(
            name=self.name,
            config=dict(self.config),
            dependencies=list(self.dependencies),
        )


class PluginConfigDocument(BaseModel):
    """One entry of the "plugins" list.

    Either "version" or both "minVersion" and "maxVersion" are expected.
    Other combinations are still accepted here and rejected later by
    ``PluginConfig.is_valid()``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    file_path: str = Field(..., alias="filePath", description="Path to the plugin module")
    version: Optional[str] = Field(default=None, description="Exact plugin version, e.g. '1.0.0'")
    min_version: Optional[str] = Field(default=None, alias="minVersion", description="Lowest accepted version")
    max_version: Optional[str] = Field(default=None, alias="maxVersion", description="Highest accepted version")
    instances: List[InstanceConfigDocument] = Field(default_factory=list)

    @field_validator("version", "min_version", "max_version")
    @classmethod
    def version_well_formed(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        # Raises ValueError, which pydantic reports as a validation error
        return str(VersionInfo.parse(v))

    def to_plugin_config(self) -> PluginConfig:
        return PluginConfig(
            file_path=self.file_path,
            version=_to_version(self.version),
            min_version=_to_version(self.min_version),
            max_version=_to_version(self.max_version),
            instance_configs=[instance.to_instance_config() for instance in self.instances],
        )


class PluginsDocument(BaseModel):
    """Top-level document: {"plugins": [...]}."""

    model_config = ConfigDict(extra="forbid")

    plugins: List[PluginConfigDocument] = Field(default_factory=list)


def _to_version(value: Optional[str]) -> VersionInfo:
    if value is None:
        return VersionInfo()
    return VersionInfo.parse(value)
