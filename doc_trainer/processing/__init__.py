"""Processing module: line classification and section building."""

from .assembler import DEFAULT_TITLE, assemble_document, title_from_filename
from .classifier_interface import LineClassifierBase
from .file_system import FileSystem, LocalFileSystem
from .image_associator import MarkdownImageResolver, distribute_images
from .markdown_classifier import MarkdownClassifier
from .markdown_parser import MarkdownParser, discover_markdown_files
from .models import (
    Content,
    Document,
    Heading,
    Ignored,
    LineEvent,
    ParserState,
    Section,
)
from .pdf_parser import PDFParser
from .section_builder import INTRODUCTION_HEADING, SectionBuilder
from .text_classifier import PlainTextClassifier

__all__ = [
    "Document",
    "Section",
    "Heading",
    "Content",
    "Ignored",
    "LineEvent",
    "ParserState",
    "LineClassifierBase",
    "MarkdownClassifier",
    "PlainTextClassifier",
    "SectionBuilder",
    "INTRODUCTION_HEADING",
    "MarkdownImageResolver",
    "distribute_images",
    "FileSystem",
    "LocalFileSystem",
    "assemble_document",
    "title_from_filename",
    "DEFAULT_TITLE",
    "MarkdownParser",
    "discover_markdown_files",
    "PDFParser",
]
