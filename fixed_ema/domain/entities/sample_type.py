"""
Entidades do tipo de amostra e da configuração do filtro.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import numpy as np


@dataclass(frozen=True)
class SampleType:
    """
    Tipo inteiro com sinal usado para entrada, saída e acumulador.

    Encapsula um dtype do numpy (int8 a int64) e emula a aritmética
    de largura fixa em complemento de dois.
    """
    dtype: np.dtype

    @classmethod
    def resolve(cls, value: Any) -> "SampleType":
        """
        Cria a partir de um dtype, tipo numpy ou nome ("int16").

        Raises:
            ValueError: Se não for um inteiro com sinal
        """
        if isinstance(value, SampleType):
            return value
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValueError(f"sample_type inválido: {value!r}") from e

        if dtype.kind != "i":
            raise ValueError(
                f"sample_type deve ser inteiro com sinal, recebido: {dtype.name}"
            )
        return cls(dtype=dtype)

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def bits(self) -> int:
        """Largura em bits, incluindo o bit de sinal."""
        return self.dtype.itemsize * 8

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def wrap(self, value: int) -> int:
        """Reduz um inteiro Python à faixa do tipo (wrap-around)."""
        offset = 1 << (self.bits - 1)
        return ((value + offset) & ((1 << self.bits) - 1)) - offset

    def scalar(self, value: int) -> np.signedinteger:
        """Converte um inteiro já reduzido em escalar numpy do tipo."""
        return self.dtype.type(value)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FilterConfig:
    """Configuração imutável de um filtro EMA de ponto fixo."""
    shift: int
    sample_type: SampleType
    input_bits: Optional[int] = None

    @property
    def scale_bits(self) -> int:
        """Bits extras de escala do acumulador (2K)."""
        return 2 * self.shift

    @property
    def required_bits(self) -> Optional[int]:
        """Largura mínima do tipo (M + 1 + 2K), se M for conhecido."""
        if self.input_bits is None:
            return None
        return self.input_bits + 1 + self.scale_bits

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shift": self.shift,
            "sample_type": self.sample_type.name,
            "input_bits": self.input_bits,
        }
