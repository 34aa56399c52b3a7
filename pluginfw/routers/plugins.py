"""Plugin configuration validation REST API endpoints."""

import logging
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from pluginfw.config.document import PluginConfigDocument, PluginsDocument
from pluginfw.config.plugin_config import PluginConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plugins", tags=["plugins"])


class PluginValidationResult(BaseModel):
    """Validation outcome for one plugin config."""

    file_path: str
    valid: bool
    exact_version: bool
    version_range: bool
    instances: List[str]


class PluginsValidationResult(BaseModel):
    """Validation outcome for a whole document."""

    valid: bool
    plugins: List[PluginValidationResult]


def _result(config: PluginConfig) -> PluginValidationResult:
    return PluginValidationResult(
        file_path=config.file_path,
        valid=config.is_valid(),
        exact_version=config.is_exact_version(),
        version_range=config.is_version_range(),
        instances=config.instance_names(),
    )


@router.post("/config/validate", response_model=PluginValidationResult)
async def validate_plugin_config(body: PluginConfigDocument):
    """Validate a single plugin config entry."""
    result = _result(body.to_plugin_config())
    logger.info(f"Validated plugin config {result.file_path!r}: valid={result.valid}")
    return result


@router.post("/configs/validate", response_model=PluginsValidationResult)
async def validate_plugin_configs(body: PluginsDocument):
    """Validate every plugin config of a document."""
    results = [_result(entry.to_plugin_config()) for entry in body.plugins]
    valid = bool(results) and all(r.valid for r in results)
    logger.info(f"Validated {len(results)} plugin config(s): valid={valid}")
    return PluginsValidationResult(valid=valid, plugins=results)
