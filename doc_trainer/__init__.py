"""doc-trainer: split PDF and Markdown documents into navigable sections."""

from .config import ProcessorConfig, load_config
from .errors import (
    ConfigError,
    DocTrainerError,
    ImageUnresolvableError,
    InputUnavailableError,
)
from .pipeline import DocumentProcessor, parse_path
from .processing import (
    Document,
    MarkdownParser,
    PDFParser,
    Section,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "DocumentProcessor",
    "parse_path",
    "ProcessorConfig",
    "load_config",
    # Models
    "Document",
    "Section",
    # Parsers
    "MarkdownParser",
    "PDFParser",
    # Errors
    "DocTrainerError",
    "InputUnavailableError",
    "ImageUnresolvableError",
    "ConfigError",
]
