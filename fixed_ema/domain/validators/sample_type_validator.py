"""
Validadores do dimensionamento do filtro EMA de ponto fixo.

O filtro nunca verifica overflow em tempo de execução: um par
shift/sample_type pequeno demais para a faixa de entrada produz
saída silenciosamente errada (wrap-around). Estes validadores
fazem a verificação na construção ou sobre dados gravados.

Regra de largura: o tipo precisa de pelo menos M + 1 + 2K bits,
onde M é o número de bits da entrada (ex: ADC de 10 bits, M = 10).
"""

import numpy as np
from typing import Any, Dict, Optional, Tuple, Union

from ..entities import FilterConfig, SampleType
from .base import Validator, ValidatorRegistry, ValidationResult, ValidationConfig


def required_bits(input_bits: int, shift: int) -> int:
    """Largura mínima do tipo para entradas de `input_bits` bits."""
    return input_bits + 1 + 2 * shift


def max_input_value(sample_type: Any, shift: int) -> int:
    """
    Maior magnitude de entrada suportada por um tipo com um dado shift.

    Inverso de `required_bits`: M = bits - 1 - 2K.
    """
    st = SampleType.resolve(sample_type)
    input_bits = st.bits - 1 - 2 * shift
    if input_bits <= 0:
        return 0
    return (1 << input_bits) - 1


def _as_config(data: Union[FilterConfig, Dict[str, Any]]) -> FilterConfig:
    if isinstance(data, FilterConfig):
        return data
    return FilterConfig(
        shift=data["shift"],
        sample_type=SampleType.resolve(data.get("sample_type", "int32")),
        input_bits=data.get("input_bits"),
    )


@ValidatorRegistry.register
class SampleTypeValidator(Validator):
    """
    Valida a combinação shift / sample_type / input_bits.

    Verifica:
    - shift não negativo
    - Fator de escala 2^(2K) representável no tipo
    - Largura do tipo >= M + 1 + 2K (quando M é conhecido)
    """

    name = "sample_type"
    description = "Valida o dimensionamento do tipo de amostra"

    def validate(
        self,
        data: Union[FilterConfig, Dict[str, Any]],
        config: ValidationConfig = None
    ) -> ValidationResult:
        """Valida uma configuração de filtro."""
        cfg = config or ValidationConfig()

        try:
            filter_config = _as_config(data)
        except (KeyError, ValueError) as e:
            return ValidationResult.fail(f"Configuração inválida: {e}")

        shift = filter_config.shift
        st = filter_config.sample_type
        result = ValidationResult.ok(
            bits=st.bits,
            sample_type=st.name,
            shift=shift,
        )

        if not isinstance(shift, (int, np.integer)) or isinstance(shift, bool):
            result.add_error(f"shift deve ser inteiro, recebido: {shift!r}")
            return result

        if shift < 0:
            result.add_error(f"shift deve ser >= 0, recebido: {shift}")
            return result

        if 2 * shift >= st.bits - 1:
            result.add_error(
                f"Escala 2^{2 * shift} não cabe em {st.name} ({st.bits} bits)"
            )
            return result

        result.metadata["max_input_value"] = max_input_value(st, shift)

        if filter_config.input_bits is None:
            message = "input_bits não informado: faixa de entrada não verificada"
            if cfg.require_input_bits:
                result.add_error(message)
            else:
                result.add_warning(message)
            return result

        needed = required_bits(filter_config.input_bits, shift) + cfg.headroom_bits
        result.metadata["required_bits"] = needed

        if st.bits < needed:
            result.add_error(
                f"{st.name} tem {st.bits} bits, mas entradas de "
                f"{filter_config.input_bits} bits com shift={shift} exigem {needed}"
            )

        return result


@ValidatorRegistry.register
class InputRangeValidator(Validator):
    """
    Valida amostras gravadas contra a faixa suportada pelo filtro.

    Útil para conferir, fora do laço de amostragem, se um fluxo real
    cabe no dimensionamento escolhido.
    """

    name = "input_range"
    description = "Valida amostras contra a faixa do filtro"

    def validate(
        self,
        data: Tuple[Union[FilterConfig, Dict[str, Any]], Union[np.ndarray, list]],
        config: ValidationConfig = None
    ) -> ValidationResult:
        """Valida (configuração, amostras)."""
        cfg = config or ValidationConfig()

        try:
            filter_config, samples = data
            filter_config = _as_config(filter_config)
            samples = np.asarray(samples)
        except (KeyError, TypeError, ValueError) as e:
            return ValidationResult.fail(f"Formato inválido: {e}")

        if samples.size == 0:
            result = ValidationResult.ok(num_samples=0)
            result.add_warning("Nenhuma amostra para validar")
            return result

        if samples.dtype.kind not in ("i", "u"):
            return ValidationResult.fail(
                f"Amostras devem ser inteiras, recebido: {samples.dtype.name}"
            )

        limit = max_input_value(filter_config.sample_type, filter_config.shift)
        values = samples.astype(object).ravel()
        result = ValidationResult.ok(
            num_samples=int(samples.size),
            max_input_value=limit,
            min_sample=int(min(values)),
            max_sample=int(max(values)),
        )

        out_of_range = sum(1 for v in values if abs(int(v)) > limit)
        if out_of_range > 0:
            result.add_error(
                f"{out_of_range} amostras fora da faixa ±{limit} "
                f"para {filter_config.sample_type.name} com shift={filter_config.shift}"
            )

        if not cfg.allow_negative_input:
            negatives = sum(1 for v in values if int(v) < 0)
            if negatives > 0:
                result.add_error(f"{negatives} amostras negativas")

        return result


def check_filter_config(
    shift: int,
    sample_type: Any,
    input_bits: Optional[int] = None,
    config: ValidationConfig = None,
) -> ValidationResult:
    """Atalho para validar uma configuração sem montar FilterConfig."""
    return SampleTypeValidator().validate(
        {"shift": shift, "sample_type": sample_type, "input_bits": input_bits},
        config,
    )
