"""
Schemas de configuração declarativa de filtros e pipelines.
"""

from typing import Dict, Any, Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fixed_ema.domain.entities import SampleType


class FilterStepSchema(BaseModel):
    """Um estágio de filtro dentro de um pipeline."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field("fixed_point_ema", description="Nome do filtro registrado")
    shift: int = Field(..., ge=0, description="K: polo em alpha = 2^-K")
    sample_type: str = Field("int32", description="Tipo inteiro com sinal (int8..int64)")
    input_bits: Optional[int] = Field(None, ge=1, description="Bits máximos da entrada (M)")
    debug: Optional[bool] = Field(None, description="Verificação de dimensionamento na construção")

    @field_validator("sample_type")
    @classmethod
    def _check_sample_type(cls, value: str) -> str:
        return SampleType.resolve(value).name

    def to_params(self) -> Dict[str, Any]:
        """Parâmetros para FilterRegistry.create (sem 'name' e sem None)."""
        return self.model_dump(exclude={"name"}, exclude_none=True)


class PipelineSchema(BaseModel):
    """Pipeline de filtros (preset ou configuração inline)."""
    name: Optional[str] = Field(None, description="Nome do preset")
    description: Optional[str] = ""
    enabled: bool = True
    filters: List[FilterStepSchema] = Field(default_factory=list)


class FilterDescription(BaseModel):
    """Descrição serializável de um filtro instanciado."""
    name: str
    description: str
    params: Dict[str, Any] = Field(default_factory=dict)
