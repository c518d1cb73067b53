"""
Características numéricas da EMA com polo em alpha = 2^-K.

Funções de análise (fora do laço de amostragem) para escolher K:
frequência de corte, constante de tempo, limite de acomodação e
comparação com o modelo ideal em ponto flutuante.

Referência da fórmula de corte:
https://tttapa.github.io/Pages/Mathematics/Systems-and-Control-Theory/Digital-filters/Exponential%20Moving%20Average/
"""

import math
import operator
import numpy as np
from typing import Any, Dict, Tuple
from scipy import signal as sps

from ..filters.fixed_point_ema import FixedPointEMA


def _check_shift(shift: int) -> int:
    shift = operator.index(shift)
    if shift < 0:
        raise ValueError(f"shift deve ser >= 0, recebido: {shift}")
    return shift


def alpha(shift: int) -> float:
    """Fator de suavização 2^-K."""
    return 2.0 ** -_check_shift(shift)


def pole(shift: int) -> float:
    """Polo da função de transferência, 1 - 2^-K."""
    return 1.0 - alpha(shift)


def _coefficients(shift: int) -> Tuple[np.ndarray, np.ndarray]:
    # H(z) = alpha / (1 - (1 - alpha) z^-1)
    a = alpha(shift)
    return np.array([a]), np.array([1.0, -(1.0 - a)])


def cutoff_frequency(shift: int, sample_rate: float = 1.0) -> float:
    """
    Frequência de corte (-3 dB).

    f_c = fs / 2pi · arccos((a² + 2a - 2) / (2a - 2))

    Com K = 0 o filtro é transparente e o corte fica em Nyquist.
    """
    a = alpha(shift)
    if a >= 1.0:
        return sample_rate / 2.0

    omega = np.arccos((a * a + 2.0 * a - 2.0) / (2.0 * a - 2.0))
    return float(omega * sample_rate / (2.0 * np.pi))


def time_constant(shift: int, sample_period: float = 1.0) -> float:
    """Constante de tempo tau = -T / ln(1 - alpha) (63% do degrau)."""
    p = pole(shift)
    if p <= 0.0:
        return 0.0
    return -sample_period / math.log(p)


def settling_steps(shift: int, amplitude: int) -> int:
    """
    Limite superior de chamadas para uma entrada constante, a partir do
    estado zero, até a saída ser exatamente igual à entrada.

    n = ceil( ln(|x| · 2^(2K)) / -ln(1 - 2^-K) )

    A partir da n-ésima chamada a saída é `amplitude` e permanece.
    """
    shift = _check_shift(shift)
    amplitude = operator.index(amplitude)

    if amplitude == 0 or shift == 0:
        return 1

    initial_error = abs(amplitude) * (1 << (2 * shift))
    steps = math.ceil(math.log(initial_error) / -math.log1p(-(2.0 ** -shift)))
    return max(1, steps)


def reference_response(shift: int, samples: Any, initial: float = 0.0) -> np.ndarray:
    """
    Resposta do filtro ideal (ponto flutuante) via scipy.signal.lfilter.

    Args:
        shift: K do filtro
        samples: Sinal de entrada
        initial: y[-1], saída antes da primeira amostra

    Returns:
        Array float com y[n] = alpha·x[n] + (1 - alpha)·y[n-1]
    """
    b, a = _coefficients(shift)
    x = np.asarray(samples, dtype=float)
    zi = np.array([(1.0 - alpha(shift)) * initial])
    y, _ = sps.lfilter(b, a, x, zi=zi)
    return y


def frequency_response(
    shift: int,
    n_points: int = 512,
    sample_rate: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Magnitude da resposta em frequência via scipy.signal.freqz.

    Returns:
        (frequências em Hz, ganho linear)
    """
    b, a = _coefficients(shift)
    freqs, h = sps.freqz(b, a, worN=n_points, fs=sample_rate)
    return freqs, np.abs(h)


def quantization_error(
    shift: int,
    samples: Any,
    sample_type: Any = "int64",
) -> Dict[str, float]:
    """
    Compara a EMA de ponto fixo com o modelo ideal.

    Returns:
        Dict com max_abs_error, mean_abs_error e final_error
    """
    x = np.asarray(samples)
    if x.size == 0:
        return {"max_abs_error": 0.0, "mean_abs_error": 0.0, "final_error": 0.0}

    fixed = FixedPointEMA(shift=shift, sample_type=sample_type, debug=False).apply(x)
    ideal = reference_response(shift, x)
    error = fixed.astype(float) - ideal

    return {
        "max_abs_error": float(np.max(np.abs(error))),
        "mean_abs_error": float(np.mean(np.abs(error))),
        "final_error": float(error[-1]),
    }
