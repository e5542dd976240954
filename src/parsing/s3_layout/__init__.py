"""Stage 3: Layout Processing - строки, фразы и колонки."""

from .stage import LayoutResult, LayoutStage, Line, LineGrouper
from .word_combiner import WordCombiner
from .column_splitter import ColumnSplitter

__all__ = [
    "Line",
    "LayoutResult",
    "LayoutStage",
    "LineGrouper",
    "WordCombiner",
    "ColumnSplitter",
]
