"""
Domain Entities - Modelos de dados do domínio.
"""

from .sample_type import SampleType, FilterConfig

__all__ = [
    "SampleType",
    "FilterConfig",
]
