"""
fixed-point-ema - EMA de ponto fixo para fluxos de amostras inteiras.

Filtro IIR de um polo (alpha = 2^-K) usando apenas shifts e somas,
com análise de resposta e validação de dimensionamento.
"""

from fixed_ema.components.signal_processing.filters import (
    BlockInput,
    BlockOutput,
    FilterPipeline,
    FilterRegistry,
    FixedPointEMA,
    SignalFilter,
    create_adc_pipeline,
    create_cascade_pipeline,
)
from fixed_ema.domain.entities import FilterConfig, SampleType

__version__ = "1.0.0"

__all__ = [
    "BlockInput",
    "BlockOutput",
    "FilterConfig",
    "FilterPipeline",
    "FilterRegistry",
    "FixedPointEMA",
    "SampleType",
    "SignalFilter",
    "create_adc_pipeline",
    "create_cascade_pipeline",
]
