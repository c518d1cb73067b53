"""
Módulo de Processamento de Sinais.

Contém componentes para filtragem de fluxos de amostras inteiras:

- filters/: Filtros de fluxo (EMA de ponto fixo) e pipelines
- analysis/: Características do filtro (corte, acomodação, fidelidade)
"""

# Importar submódulos principais
from . import filters
from . import analysis
