"""
Serviço que mantém um filtro por fluxo de amostras.

Cada canal (ex: pino de ADC) tem seu próprio pipeline, criado na
primeira amostra. Filtros nunca são compartilhados entre canais.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

import numpy as np

from ...infrastructure.config.preset_loader import create_filter_pipeline

logger = logging.getLogger(__name__)


@dataclass
class StreamFilterService:
    """
    Filtra fluxos independentes, um pipeline por canal.

    Não é thread-safe: cada canal deve ser alimentado por um único
    contexto de execução.
    """

    filter_config: Any = "default"
    filter_builder: Callable[[Any], object | None] = create_filter_pipeline
    _pipelines: dict[str, object] = field(default_factory=dict, init=False, repr=False)

    @property
    def channels(self) -> list[str]:
        """Canais com pipeline criado."""
        return list(self._pipelines)

    def _pipeline_for(self, channel: str):
        pipeline = self._pipelines.get(channel)
        if pipeline is None:
            pipeline = self.filter_builder(self.filter_config)
            if pipeline is None:
                raise ValueError(
                    f"Configuração de filtro desabilitada: {self.filter_config!r}"
                )
            self._pipelines[channel] = pipeline
            logger.debug(f"Pipeline criado para canal '{channel}': {pipeline!r}")
        return pipeline

    def push(self, channel: str, sample: int):
        """Filtra uma amostra de um canal."""
        return self._pipeline_for(channel).filter(sample)

    def push_many(self, samples: Mapping[str, int]) -> dict[str, Any]:
        """Filtra uma amostra de cada canal (ex: uma varredura do ADC)."""
        return {channel: self.push(channel, value) for channel, value in samples.items()}

    def filter_channels(self, channels: Mapping[str, Iterable[int]]) -> dict[str, np.ndarray]:
        """Filtra blocos de amostras por canal, continuando o estado de cada um."""
        return {
            channel: self._pipeline_for(channel).apply(np.asarray(list(values)))
            for channel, values in channels.items()
        }

    def reset(self, channel: str | None = None) -> None:
        """Zera o estado de um canal, ou de todos."""
        if channel is None:
            for pipeline in self._pipelines.values():
                pipeline.reset()
            return

        if channel in self._pipelines:
            self._pipelines[channel].reset()

    def drop(self, channel: str) -> None:
        """Encerra o fluxo de um canal, descartando seu filtro."""
        self._pipelines.pop(channel, None)
