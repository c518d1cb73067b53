"""
Filtro EMA de ponto fixo.

Suaviza fluxos de amostras inteiras usando apenas shifts e somas.
"""

from .fixed_point_ema import FixedPointEMA

__all__ = [
    "FixedPointEMA",
]
