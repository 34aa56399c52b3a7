"""Plugin configuration - where a plugin lives, which versions are acceptable,
and which instances to create from it."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from pluginfw.config.instance_config import PluginInstanceConfig
from pluginfw.config.validation import validate_file_path
from pluginfw.config.version_info import VersionInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactVersion:
    """Only ``version`` is acceptable."""

    version: VersionInfo


@dataclass(frozen=True)
class VersionRange:
    """Any version in the inclusive range [min_version, max_version]."""

    min_version: VersionInfo
    max_version: VersionInfo


VersionRequirement = Union[ExactVersion, VersionRange]


@dataclass
class PluginConfig:
    """Configuration of a single plugin.

    The versioning requirement is stored as three version fields. Exactly one
    of two combinations is meaningful:

    - exact mode: ``version`` set, ``min_version`` and ``max_version`` null
    - range mode: ``version`` null, ``min_version`` and ``max_version`` set

    Fields are plain attributes and can be reassigned freely, so any other
    combination is representable; ``is_valid()`` rejects it. Use
    ``set_requirement()`` to switch modes without passing through such a state.
    """

    file_path: str = ""
    version: VersionInfo = field(default_factory=VersionInfo)
    min_version: VersionInfo = field(default_factory=VersionInfo)
    max_version: VersionInfo = field(default_factory=VersionInfo)
    instance_configs: List[PluginInstanceConfig] = field(default_factory=list)

    @classmethod
    def exact_version(
        cls,
        file_path: str,
        version: VersionInfo,
        instance_configs: List[PluginInstanceConfig],
    ) -> PluginConfig:
        """Create a config that accepts exactly one plugin version."""
        return cls(
            file_path=file_path,
            version=version,
            instance_configs=list(instance_configs),
        )

    @classmethod
    def version_range(
        cls,
        file_path: str,
        min_version: VersionInfo,
        max_version: VersionInfo,
        instance_configs: List[PluginInstanceConfig],
    ) -> PluginConfig:
        """Create a config that accepts any version in [min_version, max_version]."""
        return cls(
            file_path=file_path,
            min_version=min_version,
            max_version=max_version,
            instance_configs=list(instance_configs),
        )

    def is_exact_version(self) -> bool:
        """True if only ``version`` is set."""
        return (
            not self.version.is_null()
            and self.min_version.is_null()
            and self.max_version.is_null()
        )

    def is_version_range(self) -> bool:
        """True if only ``min_version`` and ``max_version`` are set."""
        return (
            self.version.is_null()
            and not self.min_version.is_null()
            and not self.max_version.is_null()
        )

    def is_valid(self, path_validator: Callable[[str], bool] = validate_file_path) -> bool:
        """Check the whole configuration.

        Checks run in order and stop at the first failure:

        1. the file path passes ``path_validator``
        2. the version is valid (exact mode) or the range is valid (range
           mode); any other combination, mixed or all-null, fails here
        3. there is at least one instance config
        4. every instance config is valid
        5. instance names are unique

        Args:
            path_validator: Predicate applied to ``file_path``.

        Returns:
            True if the configuration can be used to load the plugin.
        """
        if not path_validator(self.file_path):
            logger.debug(f"Invalid plugin file path: {self.file_path!r}")
            return False

        if self.is_exact_version():
            if not self.version.is_valid():
                logger.debug(f"Invalid plugin version for {self.file_path}: {self.version!r}")
                return False
        elif not self.is_version_range():
            logger.debug(
                f"Inconsistent versioning for {self.file_path}: "
                f"version={self.version!r}, min={self.min_version!r}, max={self.max_version!r}"
            )
            return False
        else:
            if not VersionInfo.is_range_valid(self.min_version, self.max_version):
                logger.debug(
                    f"Invalid plugin version range for {self.file_path}: "
                    f"version={self.version!r}, min={self.min_version!r}, max={self.max_version!r}"
                )
                return False

        if not self.instance_configs:
            logger.debug(f"Plugin {self.file_path} has no instance configs")
            return False

        for instance_config in self.instance_configs:
            if not instance_config.is_valid():
                logger.debug(f"Invalid instance config in {self.file_path}: {instance_config.name!r}")
                return False

        seen_names = set()
        for instance_config in self.instance_configs:
            if instance_config.name in seen_names:
                logger.debug(f"Duplicate instance name in {self.file_path}: {instance_config.name!r}")
                return False
            seen_names.add(instance_config.name)

        return True

    @property
    def requirement(self) -> Optional[VersionRequirement]:
        """The versioning mode as a single value, or None if the fields are inconsistent."""
        if self.is_exact_version():
            return ExactVersion(self.version)
        if self.is_version_range():
            return VersionRange(self.min_version, self.max_version)
        return None

    def set_requirement(self, requirement: VersionRequirement) -> None:
        """Replace the versioning mode, resetting the fields of the other mode."""
        if isinstance(requirement, ExactVersion):
            self.version = requirement.version
            self.min_version = VersionInfo()
            self.max_version = VersionInfo()
        elif isinstance(requirement, VersionRange):
            self.version = VersionInfo()
            self.min_version = requirement.min_version
            self.max_version = requirement.max_version
        else:
            raise TypeError(f"Unsupported version requirement: {requirement!r}")

    def accepts(self, version: VersionInfo) -> bool:
        """Check whether a concrete plugin version satisfies this config."""
        if not version.is_valid():
            return False

        if self.is_exact_version():
            return self.version.is_valid() and version == self.version
        if self.is_version_range() and VersionInfo.is_range_valid(self.min_version, self.max_version):
            return self.min_version <= version <= self.max_version
        return False

    def instance_names(self) -> List[str]:
        """Names of the instance configs, in configuration order."""
        return [instance_config.name for instance_config in self.instance_configs]

    def to_dict(self) -> dict:
        """Serialize to the document form used by the config reader.

        Raises:
            ValueError: If a version field is set but not a valid version,
                since the reader could not parse it back.
        """
        data: dict = {"filePath": self.file_path}
        for key, version in (
            ("version", self.version),
            ("minVersion", self.min_version),
            ("maxVersion", self.max_version),
        ):
            if version.is_null():
                continue
            if not version.is_valid():
                raise ValueError(f"Cannot serialize invalid {key} of {self.file_path!r}: {version!r}")
            data[key] = str(version)
        data["instances"] = [instance_config.to_dict() for instance_config in self.instance_configs]
        return data
