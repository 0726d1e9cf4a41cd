from .result import TransformResult
from .source_record import SourceRecord

__all__ = [
    "SourceRecord",
    "TransformResult",
]
