from .store import (
    Lexicon,
    check_record,
    build_lexicon,
    check_no_duplicates,
    choose,
    choose_index,
    contains,
    load,
    sort,
)
from .sorting import merge_sort

__all__ = [
    "Lexicon", "check_record", "build_lexicon", "check_no_duplicates", "choose", "choose_index",
    "contains", "load", "sort", "merge_sort",
]
