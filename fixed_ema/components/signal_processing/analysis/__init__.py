"""
Análise do filtro - escolha de K e verificação de fidelidade.
"""

from .response import (
    alpha,
    pole,
    cutoff_frequency,
    time_constant,
    settling_steps,
    reference_response,
    frequency_response,
    quantization_error,
)

__all__ = [
    "alpha",
    "pole",
    "cutoff_frequency",
    "time_constant",
    "settling_steps",
    "reference_response",
    "frequency_response",
    "quantization_error",
]
