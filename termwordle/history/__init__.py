from .scores import (
    HistoryFormatError,
    bucket_index,
    format_scores,
    read_scores,
    record,
    update_score,
    write_scores,
)

__all__ = [
    "HistoryFormatError", "bucket_index", "format_scores", "read_scores",
    "record", "update_score", "write_scores",
]
