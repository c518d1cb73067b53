"""
Preset Loader - Carrega configurações de pipelines de filtros.

Permite referenciar configurações prontas por nome ao invés de
repetir shift/sample_type/input_bits em cada uso.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .settings import get_settings

logger = logging.getLogger(__name__)


def _presets_dir() -> Path:
    return get_settings().presets_dir


def load_preset(category: str, preset_name: str) -> Dict[str, Any]:
    """
    Carrega um preset de uma categoria específica.
    
    Args:
        category: Categoria do preset (filters, ...)
        preset_name: Nome do preset (off, default, adc_10bit, etc.)
    
    Returns:
        Dicionário com a configuração do preset
    
    Raises:
        FileNotFoundError: Se o preset não existir
        ValueError: Se a categoria não existir
    """
    presets_dir = _presets_dir()
    category_dir = presets_dir / category
    
    if not category_dir.exists():
        available = list_categories()
        raise ValueError(f"Categoria '{category}' não existe. Disponíveis: {available}")
    
    preset_file = category_dir / f"{preset_name}.json"
    
    if not preset_file.exists():
        available = list_presets(category)
        raise FileNotFoundError(
            f"Preset '{preset_name}' não existe na categoria '{category}'. "
            f"Disponíveis: {available}"
        )
    
    with open(preset_file, "r", encoding="utf-8") as f:
        preset = json.load(f)
    
    logger.info(f"Preset carregado: {category}/{preset_name}")
    return preset


def list_presets(category: str) -> list[str]:
    """Lista todos os presets disponíveis em uma categoria."""
    category_dir = _presets_dir() / category
    
    if not category_dir.exists():
        return []
    
    return sorted(f.stem for f in category_dir.glob("*.json"))


def list_categories() -> list[str]:
    """Lista todas as categorias de presets disponíveis."""
    presets_dir = _presets_dir()
    if not presets_dir.exists():
        return []
    return sorted(d.name for d in presets_dir.iterdir() if d.is_dir())


def resolve_preset_reference(config: Any, category: str) -> Dict[str, Any]:
    """
    Resolve uma referência de preset em uma configuração.
    
    Se config é um dict com "preset", carrega o preset e faz merge com overrides.
    Se config é uma string, trata como nome do preset.
    Se config é um dict sem "preset", retorna como está.
    
    Example:
        >>> config = {"preset": "default", "enabled": False}
        >>> resolved = resolve_preset_reference(config, "filters")
        >>> # Carrega preset "default" e sobrescreve enabled
    """
    # String direta = nome do preset
    if isinstance(config, str):
        return load_preset(category, config)
    
    # Dict sem "preset" = configuração inline
    if not isinstance(config, dict) or "preset" not in config:
        return config
    
    # Dict com "preset" = carregar e fazer merge
    preset_name = config["preset"]
    base_config = load_preset(category, preset_name)
    
    # Merge: overrides sobrescrevem preset
    overrides = {k: v for k, v in config.items() if k != "preset"}
    return {**base_config, **overrides}


def load_filter_preset(preset_name: str) -> Dict[str, Any]:
    """
    Carrega um preset de pipeline de filtros.
    
    Args:
        preset_name: Nome do preset (off, default, adc_10bit, heavy, etc.)
    
    Returns:
        Configuração incluindo lista de filtros a aplicar
    """
    return load_preset("filters", preset_name)


def build_filter_pipeline_config(filter_config: Any) -> Dict[str, Any]:
    """
    Constrói configuração de pipeline de filtros a partir de preset ou config inline.
    
    Args:
        filter_config: Pode ser:
            - string: nome do preset (ex: "default", "adc_10bit")
            - dict com "preset": carrega preset e aplica overrides
            - dict com "filters": usa configuração inline diretamente
    
    Returns:
        Configuração resolvida com lista de filtros
    
    Example:
        >>> # Preset com override
        >>> config = build_filter_pipeline_config({
        ...     "preset": "adc_10bit",
        ...     "filters": [
        ...         {"name": "fixed_point_ema", "shift": 6, "sample_type": "int32"}
        ...     ]
        ... })
    """
    # String = nome do preset
    if isinstance(filter_config, str):
        return load_filter_preset(filter_config)
    
    # Dict com preset = carregar e fazer merge
    if isinstance(filter_config, dict) and "preset" in filter_config:
        preset_name = filter_config["preset"]
        base = load_filter_preset(preset_name)
        
        # Se tem filters no override, substitui completamente
        if "filters" in filter_config:
            base["filters"] = filter_config["filters"]
        
        # Merge outros campos
        for key in ["enabled", "description", "name"]:
            if key in filter_config:
                base[key] = filter_config[key]
        
        return base
    
    # Dict sem preset = config inline
    if isinstance(filter_config, dict):
        return {
            "name": filter_config.get("name", "custom"),
            "description": filter_config.get("description", "Configuração customizada"),
            "enabled": filter_config.get("enabled", True),
            "filters": filter_config.get("filters", [])
        }
    
    # Fallback: sem filtros
    return {"enabled": False, "filters": []}


def create_filter_pipeline(filter_config: Any):
    """
    Cria instância de FilterPipeline a partir de configuração.
    
    Args:
        filter_config: Configuração de filtros (preset name, dict, etc.)
    
    Returns:
        FilterPipeline configurado ou None se desabilitado
    """
    from fixed_ema.components.signal_processing.filters import FilterPipeline
    
    config = build_filter_pipeline_config(filter_config)
    
    if not config.get("enabled", True):
        return None
    
    return FilterPipeline.from_preset(config)
