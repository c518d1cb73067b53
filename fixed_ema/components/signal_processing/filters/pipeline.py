"""
Pipeline de Filtros.

Permite encadear múltiplos filtros de fluxo em sequência (cascata).
"""

import logging
import numpy as np
from typing import List, Dict, Any, Optional

from fixed_ema.interface.schemas import FilterDescription, PipelineSchema
from .base import SignalFilter, FilterRegistry

logger = logging.getLogger(__name__)


class FilterPipeline:
    """
    Pipeline para aplicação sequencial de múltiplos filtros.

    Cada amostra passa por todos os estágios, em ordem. Duas EMAs em
    cascata formam um passa-baixa de segunda ordem, com queda mais
    acentuada acima do corte.

    Uso:
        pipeline = FilterPipeline([
            {"name": "fixed_point_ema", "shift": 4, "sample_type": "int32"},
            {"name": "fixed_point_ema", "shift": 4, "sample_type": "int32"},
        ])
        for raw in adc_samples:
            smoothed = pipeline.filter(raw)
    """

    def __init__(self, filters: Optional[List[Any]] = None):
        """
        Inicializa o pipeline.

        Args:
            filters: Lista de configurações de filtros.
                     Cada item é um dict com "name" e parâmetros opcionais,
                     um nome de filtro ou uma instância de SignalFilter.
        """
        self.filter_configs = list(filters or [])
        self.filters: List[SignalFilter] = []
        self._build_filters()

    def _build_filters(self) -> None:
        """Constrói instâncias dos filtros a partir das configurações."""
        self.filters = []

        for config in self.filter_configs:
            if isinstance(config, str):
                # Apenas nome do filtro, sem parâmetros
                filter_instance = FilterRegistry.create(config)
            elif isinstance(config, dict):
                name = config.get("name")
                if not name:
                    raise ValueError("Configuração de filtro deve ter 'name'")

                # Extrair parâmetros (tudo exceto 'name')
                params = {k: v for k, v in config.items() if k != "name"}
                filter_instance = FilterRegistry.create(name, **params)
            elif isinstance(config, SignalFilter):
                # Já é uma instância
                filter_instance = config
            else:
                raise ValueError(f"Configuração inválida: {config}")

            self.filters.append(filter_instance)

        logger.debug(f"Pipeline construído: {self!r}")

    def add(self, filter_name: str, **kwargs) -> "FilterPipeline":
        """
        Adiciona um filtro ao pipeline.

        Args:
            filter_name: Nome do filtro
            **kwargs: Parâmetros do filtro

        Returns:
            self para encadeamento
        """
        config = {"name": filter_name, **kwargs}
        self.filter_configs.append(config)
        self.filters.append(FilterRegistry.create(filter_name, **kwargs))
        return self

    def remove(self, index: int) -> "FilterPipeline":
        """Remove filtro pelo índice."""
        if 0 <= index < len(self.filters):
            del self.filter_configs[index]
            del self.filters[index]
        return self

    def clear(self) -> "FilterPipeline":
        """Remove todos os filtros."""
        self.filter_configs = []
        self.filters = []
        return self

    def reset(self) -> None:
        """Zera o estado de todos os estágios."""
        for filter_instance in self.filters:
            filter_instance.reset()

    def filter(self, sample: Any) -> Any:
        """
        Passa uma amostra por todos os estágios.

        Sem estágios, a amostra é devolvida sem alteração.
        """
        result = sample
        for filter_instance in self.filters:
            result = filter_instance.filter(result)
        return result

    def apply(self, signal: np.ndarray, **kwargs) -> np.ndarray:
        """
        Aplica todos os filtros em sequência.

        Como os estágios são causais, filtrar o sinal inteiro estágio
        por estágio equivale a filtrar amostra por amostra.

        Args:
            signal: Sinal de entrada
            **kwargs: Argumentos extras passados para cada filtro

        Returns:
            Sinal filtrado
        """
        if len(signal) == 0:
            return np.asarray(signal)

        result = np.asarray(signal).copy()

        for filter_instance in self.filters:
            result = filter_instance.apply(result, **kwargs)

        return result

    def apply_with_history(
        self,
        signal: np.ndarray,
        **kwargs
    ) -> Dict[str, np.ndarray]:
        """
        Aplica filtros e retorna resultado de cada etapa.

        Útil para debug e visualização do efeito de cada filtro.

        Returns:
            Dict com "original", resultados intermediários e "final"
        """
        history = {"original": np.asarray(signal).copy()}

        result = np.asarray(signal).copy()
        for i, filter_instance in enumerate(self.filters):
            result = filter_instance.apply(result, **kwargs)
            history[f"step_{i}_{filter_instance.name}"] = result.copy()

        history["final"] = result
        return history

    def describe(self) -> List[Dict[str, Any]]:
        """Retorna descrição de todos os filtros no pipeline."""
        return [
            FilterDescription(
                name=f.name,
                description=f.description,
                params=f.params,
            ).model_dump()
            for f in self.filters
        ]

    @classmethod
    def from_preset(cls, preset_config: Dict[str, Any]) -> "FilterPipeline":
        """
        Cria pipeline a partir de configuração de preset.

        A configuração é validada pelo PipelineSchema (pydantic).

        Args:
            preset_config: Dict com "filters" contendo lista de configs

        Returns:
            FilterPipeline configurado
        """
        schema = PipelineSchema.model_validate(preset_config)
        filters = [
            {"name": step.name, **step.to_params()}
            for step in schema.filters
        ]
        return cls(filters)

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        filter_names = [f.name for f in self.filters]
        return f"FilterPipeline([{' -> '.join(filter_names)}])"


# Conveniência: pipelines pré-configurados
def create_adc_pipeline(
    shift: int = 4,
    input_bits: int = 10,
    sample_type: Optional[str] = None,
) -> FilterPipeline:
    """
    Cria pipeline para leituras de ADC (default: 10 bits, 0-1023).

    Args:
        shift: K do filtro
        input_bits: Resolução do ADC (M)
        sample_type: Tipo inteiro; se None, escolhe o menor tipo com
            pelo menos M + 1 + 2K bits
    """
    if sample_type is None:
        needed = input_bits + 1 + 2 * shift
        for candidate in ("int8", "int16", "int32", "int64"):
            if np.dtype(candidate).itemsize * 8 >= needed:
                sample_type = candidate
                break
        else:
            raise ValueError(
                f"Nenhum tipo inteiro comporta {needed} bits (input_bits={input_bits}, shift={shift})"
            )

    return FilterPipeline([
        {
            "name": "fixed_point_ema",
            "shift": shift,
            "sample_type": sample_type,
            "input_bits": input_bits,
        }
    ])


def create_cascade_pipeline(
    stages: int = 2,
    shift: int = 4,
    sample_type: str = "int32",
) -> FilterPipeline:
    """
    Cria cascata de EMAs idênticas.

    Args:
        stages: Número de estágios (ordem do passa-baixa)
        shift: K de cada estágio
        sample_type: Tipo inteiro de cada estágio
    """
    if stages < 1:
        raise ValueError(f"stages deve ser >= 1, recebido: {stages}")

    return FilterPipeline([
        {"name": "fixed_point_ema", "shift": shift, "sample_type": sample_type}
        for _ in range(stages)
    ])
