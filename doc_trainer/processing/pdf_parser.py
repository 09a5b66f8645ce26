"""PDF to Document parser using PyMuPDF."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pymupdf

from ..errors import InputUnavailableError
from .assembler import assemble_document, title_from_filename
from .file_system import FileSystem, LocalFileSystem
from .image_associator import distribute_images
from .models import Document, ParserState, Section
from .section_builder import SectionBuilder
from .text_classifier import PlainTextClassifier


logger = logging.getLogger(__name__)


class PDFParser:
    """Extracts plain text and images from a PDF and splits it into sections.

    Text is taken page by page with PyMuPDF and classified line by line with
    the plain-text heuristics. Content lines are reflowed with single spaces.
    Embedded images have no usable position, so they are spread evenly over
    the sections once the text has been segmented.
    """

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        extract_images: bool = True,
        file_system: Optional[FileSystem] = None
    ):
        """Initialize the parser.

        Args:
            output_dir: Directory that receives the ``images`` folder.
                Images are not extracted when omitted.
            extract_images: Whether to extract embedded images.
            file_system: Writer used to store extracted images.
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.extract_images = extract_images
        self.file_system = file_system or LocalFileSystem()
        self.classifier = PlainTextClassifier()

    @property
    def image_dir(self) -> Optional[Path]:
        return self.output_dir / "images" if self.output_dir else None

    def parse(self, pdf_path: Union[str, Path]) -> Document:
        """Parse a PDF file into a Document.

        Args:
            pdf_path: Path to the PDF file.

        Returns:
            Document titled after the file name.

        Raises:
            InputUnavailableError: If the PDF cannot be opened.
        """
        path = Path(pdf_path)
        if not path.is_file():
            raise InputUnavailableError(f"PDF file not found: {path}")

        try:
            doc = pymupdf.open(str(path))
        except Exception as e:
            raise InputUnavailableError(f"Failed to open PDF {path}: {e}") from e

        try:
            text = self._extract_text(doc)
            images = []
            if self.extract_images and self.image_dir is not None:
                images = self._extract_images(doc)
        finally:
            doc.close()

        logger.info(f"Extracted {len(images)} images from {path.name}")
        return self.parse_text(text, title=title_from_filename(path), images=images)

    def parse_text(
        self,
        text: str,
        title: Optional[str] = None,
        images: Optional[list[str]] = None
    ) -> Document:
        """Segment already extracted plain text.

        Args:
            text: Plain text, one logical line per line.
            title: Document title.
            images: Image filenames to distribute over the sections.
        """
        sections = self.parse_lines(text.splitlines())
        distribute_images(sections, images or [])
        return assemble_document(sections, title)

    def parse_lines(self, lines: Iterable[str]) -> list[Section]:
        state = ParserState()
        builder = SectionBuilder(joiner=self.classifier.joiner)
        for line in lines:
            builder.feed(self.classifier.classify(line, state))
        return builder.finish()

    def _extract_text(self, doc: pymupdf.Document) -> str:
        pages = []
        for page in doc:
            try:
                pages.append(page.get_text("text"))
            except Exception as e:
                logger.warning(f"Failed to extract text from page {page.number + 1}: {e}")
        return "\n\n".join(pages)

    def _extract_images(self, doc: pymupdf.Document) -> list[str]:
        """Write every embedded image to the image directory.

        Returns:
            Filenames in page order. Failed images are logged and skipped.
        """
        image_names = []
        image_index = 0
        seen_xrefs = set()

        for page in doc:
            page_number = page.number + 1
            for image_info in page.get_images(full=True):
                xref = image_info[0]
                if xref in seen_xrefs:
                    continue
                seen_xrefs.add(xref)

                try:
                    extracted = doc.extract_image(xref)
                except Exception as e:
                    logger.warning(f"Failed to extract image {xref} on page {page_number}: {e}")
                    continue
                if not extracted or not extracted.get("image"):
                    continue

                image_index += 1
                ext = extracted.get("ext") or "png"
                image_name = f"page{page_number}_img{image_index}.{ext}"
                try:
                    self.file_system.write_bytes(self.image_dir / image_name, extracted["image"])
                except OSError as e:
                    logger.warning(f"Failed to save image {image_name}: {e}")
                    continue
                image_names.append(image_name)

        return image_names
