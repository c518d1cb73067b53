"""
Configuração da biblioteca.
"""

from .settings import Settings, get_settings
from .preset_loader import (
    load_preset,
    list_presets,
    list_categories,
    resolve_preset_reference,
    load_filter_preset,
    build_filter_pipeline_config,
    create_filter_pipeline,
)

__all__ = [
    "Settings",
    "get_settings",
    "load_preset",
    "list_presets",
    "list_categories",
    "resolve_preset_reference",
    "load_filter_preset",
    "build_filter_pipeline_config",
    "create_filter_pipeline",
]
