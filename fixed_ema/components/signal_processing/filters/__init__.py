"""
Filtros de Sinal - Módulo de processamento de sinais.

Implementa filtros de fluxo para suavização de amostras inteiras
em laços de amostragem (ADC, interrupções de timer).
"""

from .base import SignalFilter, FilterRegistry, BlockInput, BlockOutput
from .fixed_point_ema import FixedPointEMA
from .pipeline import (
    FilterPipeline,
    create_adc_pipeline,
    create_cascade_pipeline,
)

__all__ = [
    # Base
    "SignalFilter",
    "FilterRegistry",
    "BlockInput",
    "BlockOutput",

    # Exponential
    "FixedPointEMA",

    # Pipeline
    "FilterPipeline",
    "create_adc_pipeline",
    "create_cascade_pipeline",
]
