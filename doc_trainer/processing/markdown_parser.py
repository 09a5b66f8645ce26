"""Markdown to Document parser."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ..errors import ImageUnresolvableError, InputUnavailableError
from .assembler import DEFAULT_TITLE, assemble_document
from .file_system import FileSystem
from .image_associator import MarkdownImageResolver
from .markdown_classifier import MarkdownClassifier
from .models import Content, Document, ParserState, Section
from .section_builder import SectionBuilder, new_id_sequence


logger = logging.getLogger(__name__)


class MarkdownParser:
    """Splits Markdown files into sections at every ATX heading.

    Inline images (``![alt](path)``) are copied to ``<output_dir>/images``
    as they are encountered and attached to the section that is open at
    that point. Without an output directory images are left alone.

    Section ids restart at ``section-1`` on every parse call and keep
    counting across the files of one ``parse_files`` call.
    """

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        file_system: Optional[FileSystem] = None
    ):
        """Initialize the parser.

        Args:
            output_dir: Directory that receives the ``images`` folder.
            file_system: Reader/writer used to copy images.
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.classifier = MarkdownClassifier()
        self._resolver: Optional[MarkdownImageResolver] = None
        if self.output_dir is not None:
            self._resolver = MarkdownImageResolver(
                self.output_dir / "images", file_system=file_system
            )

    def parse_lines(
        self,
        lines: Iterable[str],
        source_path: Optional[Union[str, Path]] = None,
        ids: Optional[Iterator[int]] = None
    ) -> list[Section]:
        """Parse one Markdown source given as lines.

        Args:
            lines: Lines of the file, with or without trailing newlines.
            source_path: File the lines came from, for image resolution.
            ids: Section counter to continue. A new one is started if omitted.

        Returns:
            Sections in reading order.
        """
        state = ParserState()
        builder = SectionBuilder(joiner=self.classifier.joiner, ids=ids)

        for raw_line in lines:
            line = raw_line.rstrip('\r\n')
            event = self.classifier.classify(line, state)
            builder.feed(event)
            if isinstance(event, Content) and event.image_refs:
                self._attach_images(builder, event.image_refs, source_path)

        return builder.finish()

    def parse_text(self, text: str, title: Optional[str] = None) -> Document:
        """Parse a Markdown string into a Document."""
        return assemble_document(self.parse_lines(text.splitlines()), title)

    def parse_file(
        self,
        file_path: Union[str, Path],
        ids: Optional[Iterator[int]] = None
    ) -> list[Section]:
        """Parse a single Markdown file.

        Raises:
            InputUnavailableError: If the file cannot be read.
        """
        path = Path(file_path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return self.parse_lines(f, source_path=path, ids=ids)
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(f"Failed to read {path}: {e}") from e

    def parse_files(
        self,
        files: Iterable[Union[str, Path]],
        title: Optional[str] = None
    ) -> Document:
        """Parse several Markdown files into one Document, in the given order.

        Raises:
            InputUnavailableError: If any file cannot be read. No partial
                Document is returned.
        """
        # One id sequence for the whole call so ids stay unique across files
        ids = new_id_sequence()
        sections: list[Section] = []
        for file_path in files:
            logger.debug(f"Parsing {file_path}")
            sections.extend(self.parse_file(file_path, ids=ids))
        return assemble_document(sections, title or DEFAULT_TITLE)

    def parse_directory(
        self,
        directory: Union[str, Path],
        title: Optional[str] = None
    ) -> Document:
        """Parse every ``*.md`` file below a directory, skipping README.md.

        Raises:
            InputUnavailableError: If the directory is missing or holds no
                Markdown files.
        """
        files = discover_markdown_files(directory)
        logger.info(f"Found {len(files)} markdown files")
        return self.parse_files(files, title)

    def _attach_images(
        self,
        builder: SectionBuilder,
        image_refs: Iterable[str],
        source_path: Optional[Union[str, Path]]
    ) -> None:
        if self._resolver is None:
            return
        for ref in image_refs:
            try:
                builder.attach_image(self._resolver.resolve(ref, source_path))
            except ImageUnresolvableError as e:
                logger.warning(f"Skipping image: {e}")


def discover_markdown_files(directory: Union[str, Path]) -> list[Path]:
    """Return the Markdown files below ``directory`` in sorted order.

    Raises:
        InputUnavailableError: If the directory is missing or empty of
            Markdown files.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise InputUnavailableError(f"Directory not found: {directory}")

    files = sorted(
        p for p in directory.rglob("*.md")
        if p.is_file() and p.name != "README.md"
    )
    if not files:
        raise InputUnavailableError(f"No markdown files found in {directory}")
    return files
