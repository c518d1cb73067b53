"""
Serviços de domínio.
"""

from .stream_filter_service import StreamFilterService

__all__ = [
    "StreamFilterService",
]
