"""
Filtro de Média Móvel Exponencial em ponto fixo.

Filtro IIR de um polo, implementação direta da equação de diferenças:

    y[n] = alpha·x[n] + (1 - alpha)·y[n-1],  alpha = 2^-K

Usando uma potência de dois como polo, a multiplicação por alpha vira
um shift aritmético: nenhuma divisão e nenhum ponto flutuante.

O acumulador guarda a saída escalada por 2^(2K). Os 2K bits extras
preservam a precisão sub-inteira entre atualizações; a saída só é
convertida de volta (com arredondamento) na leitura.

IMPORTANTE: dimensionamento do tipo.
    O sample_type precisa de pelo menos M + 1 + 2K bits, onde M é o
    número de bits da entrada (ADC de 10 bits: M = 10). Overflow NÃO é
    verificado por amostra: com o tipo pequeno demais a saída é
    silenciosamente errada (wrap-around em complemento de dois), como
    no hardware. Use `input_bits` com `debug=True` (ou FIXED_EMA_DEBUG=1)
    para verificar a regra uma única vez, na construção.

Concorrência:
    O acumulador é estado privado e mutável, sem lock. Cada fluxo deve
    ter sua própria instância; chamar `filter()` de mais de uma thread
    sem sincronização externa corrompe o estado.
"""

import logging
import operator
import numpy as np
from typing import Any, Dict, Optional

from fixed_ema.domain.entities import FilterConfig, SampleType
from fixed_ema.domain.validators import check_filter_config
from fixed_ema.infrastructure.config import get_settings
from ..base import SignalFilter, FilterRegistry, BlockInput, BlockOutput

logger = logging.getLogger(__name__)


@FilterRegistry.register
class FixedPointEMA(SignalFilter):
    """
    Filtro EMA de ponto fixo (alpha = 2^-K).

    Parâmetros:
        shift: K, número de bits do shift. Define o polo e, portanto,
            a frequência de corte. Maior = mais suave, resposta mais lenta.
        sample_type: Tipo inteiro com sinal para entrada, saída e
            acumulador ("int8", "int16", "int32", "int64" ou dtype numpy)
        input_bits: M, bits máximos da entrada (opcional, só para a
            verificação de dimensionamento)
        debug: Verifica M + 1 + 2K <= bits na construção.
            None = usa Settings.debug_checks

    Exemplo (K=4, int16):
        >>> ema = FixedPointEMA(shift=4, sample_type="int16")
        >>> int(ema.filter(100))
        6
    """

    name = "fixed_point_ema"
    description = "EMA de ponto fixo (alpha = 2^-K), só shifts e somas"

    def __init__(
        self,
        shift: Optional[int] = None,
        sample_type: Any = None,
        input_bits: Optional[int] = None,
        debug: Optional[bool] = None,
        **kwargs
    ):
        settings = get_settings()
        if shift is None:
            shift = settings.default_shift
        if sample_type is None:
            sample_type = settings.default_sample_type

        self._shift = shift
        self._sample_type = SampleType.resolve(sample_type)
        self._input_bits = input_bits
        self._debug = settings.debug_checks if debug is None else bool(debug)
        super().__init__(
            shift=shift,
            sample_type=self._sample_type.name,
            input_bits=input_bits,
            **kwargs
        )

        self._shift = int(shift)
        self._scale_bits = 2 * self._shift
        # Meio LSB na escala 2^(2K): arredondamento para o mais próximo
        self._half = (1 << self._scale_bits) >> 1
        self._accumulator = 0

        logger.debug(
            f"FixedPointEMA criado: K={self._shift}, tipo={self._sample_type.name}, "
            f"input_bits={self._input_bits}, debug={self._debug}"
        )

    def validate_params(self) -> None:
        # Só verifica a faixa de entrada em modo debug
        input_bits = self._input_bits if self._debug else None
        result = check_filter_config(self._shift, self._sample_type, input_bits)

        if not result.is_valid:
            raise ValueError("; ".join(result.errors))

        if self._debug:
            for warning in result.warnings:
                logger.warning(f"FixedPointEMA: {warning}")

    # ------------------------------------------------------------------
    # Configuração (imutável)
    # ------------------------------------------------------------------

    @property
    def shift(self) -> int:
        return self._shift

    @property
    def sample_type(self) -> SampleType:
        return self._sample_type

    @property
    def input_bits(self) -> Optional[int]:
        return self._input_bits

    @property
    def scale_bits(self) -> int:
        """Bits de escala do acumulador (2K)."""
        return self._scale_bits

    @property
    def rounding_constant(self) -> int:
        """2^(2K-1), somado antes do shift final (0 quando K=0)."""
        return self._half

    @property
    def alpha(self) -> float:
        return 1.0 / (1 << self._shift)

    @property
    def config(self) -> FilterConfig:
        return FilterConfig(
            shift=self._shift,
            sample_type=self._sample_type,
            input_bits=self._input_bits,
        )

    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------

    @property
    def accumulator(self) -> np.signedinteger:
        """Estado interno: saída filtrada escalada por 2^(2K)."""
        return self._sample_type.scalar(self._accumulator)

    @property
    def output(self) -> np.signedinteger:
        """Última saída, sem consumir amostra."""
        st = self._sample_type
        return st.scalar(st.wrap(self._accumulator + self._half) >> self._scale_bits)

    def reset(self, value: int = 0) -> None:
        """
        Reinicializa o filtro.

        Args:
            value: Nível inicial da saída. Com 0 (default) a saída parte
                do zero; com o primeiro valor esperado evita a rampa inicial.
        """
        st = self._sample_type
        self._accumulator = st.wrap(st.wrap(operator.index(value)) << self._scale_bits)

    def clone(self) -> "FixedPointEMA":
        """Nova instância com a mesma configuração e estado zerado."""
        return FixedPointEMA(
            shift=self._shift,
            sample_type=self._sample_type,
            input_bits=self._input_bits,
            debug=self._debug,
        )

    # ------------------------------------------------------------------
    # Filtragem
    # ------------------------------------------------------------------

    def filter(self, sample: int) -> np.signedinteger:
        """
        Filtra a entrada: dado x[n], calcula y[n].

        Tempo constante, sem alocação de estado, sem verificação de
        overflow. Todas as operações são reduzidas ao sample_type.

        Args:
            sample: Novo valor bruto (inteiro)

        Returns:
            Novo valor filtrado, como escalar do sample_type
        """
        st = self._sample_type
        scaled = st.wrap(st.wrap(operator.index(sample)) << self._scale_bits)
        difference = st.wrap(scaled - self._accumulator)
        # >> em int Python é aritmético (arredonda para -infinito)
        self._accumulator = st.wrap(self._accumulator + (difference >> self._shift))
        return st.scalar(st.wrap(self._accumulator + self._half) >> self._scale_bits)

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        """
        Filtra um array de amostras inteiras, em ordem.

        Continua a partir do estado atual (um fluxo pode ser entregue
        em blocos). Chame `reset()` antes para começar do zero.

        Raises:
            ValueError: Se o sinal não for 1D ou não for inteiro
        """
        samples = np.asarray(signal)

        if samples.ndim != 1:
            raise ValueError(f"Sinal deve ser 1D, recebido: {samples.ndim}D")
        if samples.size and samples.dtype.kind not in ("i", "u"):
            raise ValueError(
                f"Sinal deve ser inteiro, recebido: {samples.dtype.name}"
            )

        return np.fromiter(
            (self.filter(s) for s in samples.tolist()),
            dtype=self._sample_type.dtype,
            count=samples.size,
        )

    def process(self, input_data: BlockInput, config: Optional[Dict[str, Any]] = None) -> BlockOutput:
        """
        Processa dados aplicando a EMA de ponto fixo.

        Usa uma instância nova com a mesma configuração: o estado do
        fluxo desta instância não é alterado. Com config={"prime": True}
        o filtro parte do primeiro valor em vez de zero.
        """
        try:
            # Assume data é (n, 2) com [x, y]
            if input_data.data.ndim != 2 or input_data.data.shape[1] != 2:
                raise ValueError("Dados devem ser array 2D com shape (n, 2) para [x, y]")

            x = input_data.data[:, 0]
            y = np.rint(input_data.data[:, 1]).astype(np.int64)

            # Aplicar filtro ao sinal y
            block_filter = self.clone()
            if config and config.get("prime", False) and len(y) > 0:
                block_filter.reset(int(y[0]))
            y_filtered = block_filter.apply(y)

            # Combinar de volta
            filtered_data = np.column_stack([x, y_filtered])

            metadata = {
                "filter_applied": self.name,
                "filter_params": self.params,
                "final_accumulator": int(block_filter.accumulator),
                **(input_data.metadata or {})
            }

            return BlockOutput(
                data=filtered_data,
                metadata=metadata,
                success=True
            )

        except Exception as e:
            return BlockOutput(
                data=input_data.data,  # Retorna dados originais em caso de erro
                metadata=input_data.metadata,
                success=False,
                error=str(e)
            )
