# Data models for conversion results

from .conversion import ConversionResult, SourceType

__all__ = [
    "ConversionResult",
    "SourceType",
]
