"""Post-processing module: output generated from parsed documents."""

from .data_generator import DataGenerator, build_content_data
from .navigation import build_navigation_tree, format_outline
from .search_index import SearchIndexGenerator, build_search_index

__all__ = [
    "DataGenerator",
    "build_content_data",
    "SearchIndexGenerator",
    "build_search_index",
    "build_navigation_tree",
    "format_outline",
]
