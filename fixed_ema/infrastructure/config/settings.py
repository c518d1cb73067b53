"""
Configurações da biblioteca.

Responsabilidade única: centralizar configurações do ambiente.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from functools import lru_cache


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Configurações da biblioteca."""
    
    # Paths
    base_dir: Path
    presets_dir: Path
    
    # Verificações de construção (nunca por amostra)
    debug_checks: bool
    
    # Defaults para filtros criados sem parâmetros
    default_shift: int
    default_sample_type: str
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Cria configurações a partir de variáveis de ambiente."""
        base_dir = Path(__file__).resolve().parent
        
        return cls(
            base_dir=base_dir,
            presets_dir=Path(os.getenv("FIXED_EMA_PRESETS_DIR", base_dir / "presets")),
            debug_checks=os.getenv("FIXED_EMA_DEBUG", "0").strip().lower() in _TRUE_VALUES,
            default_shift=int(os.getenv("FIXED_EMA_DEFAULT_SHIFT", "4")),
            default_sample_type=os.getenv("FIXED_EMA_DEFAULT_SAMPLE_TYPE", "int32"),
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância singleton das configurações."""
    return Settings.from_env()
