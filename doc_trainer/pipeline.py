"""Processing pipeline: parse the configured input, then write outputs."""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ProcessorConfig
from .errors import ConfigError
from .post_processing import DataGenerator, SearchIndexGenerator
from .processing import Document, MarkdownParser, PDFParser


logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Orchestrates document processing.

    Pipeline stages:
    1. Parsing - PDF or Markdown into a Document
    2. Structured data - ``data/content.json`` and per-section files
    3. Search index - ``search-index.json``
    """

    def __init__(self, config: Optional[ProcessorConfig] = None):
        """Initialize the processor.

        Args:
            config: Processor configuration.
        """
        self.config = config or ProcessorConfig()

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output.directory)

    def parse(self) -> Document:
        """Run only the parsing stage.

        Raises:
            ConfigError: If the input type is unknown or no PDF path is set.
            InputUnavailableError: If the input cannot be read.
        """
        self.config.validate()
        if self.config.input_type == "markdown":
            logger.info("Processing Markdown files...")
            return self._parse_markdown()
        logger.info("Processing PDF file...")
        return self._parse_pdf()

    def process(self) -> Document:
        """Run the full pipeline and return the parsed Document."""
        doc = self.parse()
        logger.info(f"Found {len(doc.sections)} sections")

        logger.info("Generating structured data...")
        DataGenerator(self.output_dir).generate(doc)

        logger.info("Creating search index...")
        SearchIndexGenerator(self.output_dir).generate(doc)

        return doc

    def _parse_markdown(self) -> Document:
        md_config = self.config.markdown
        parser = MarkdownParser(self.output_dir)
        title = self.config.output.title or None

        if md_config.auto_discover:
            logger.info(f"Auto-discovering files in: {md_config.directory}")
            return parser.parse_directory(md_config.directory, title)

        logger.info(f"Processing {len(md_config.files)} specified files")
        return parser.parse_files(md_config.files, title)

    def _parse_pdf(self) -> Document:
        pdf_path = self.config.pdf.path
        if not pdf_path:
            raise ConfigError("PDF path not specified in config")

        logger.info(f"Parsing PDF: {pdf_path}")
        parser = PDFParser(
            self.output_dir,
            extract_images=self.config.pdf.extract_images,
        )
        return parser.parse(pdf_path)


def parse_path(
    input_path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    title: Optional[str] = None
) -> Document:
    """Parse a PDF file, a Markdown file or a directory of Markdown files.

    Args:
        input_path: Source to parse; the format is chosen from the suffix.
        output_dir: Where images are written. Images are skipped when None.
        title: Title override for Markdown input.
    """
    path = Path(input_path)
    if path.is_dir():
        return MarkdownParser(output_dir).parse_directory(path, title)
    if path.suffix.lower() == ".pdf":
        return PDFParser(output_dir).parse(path)
    return MarkdownParser(output_dir).parse_files([path], title)
