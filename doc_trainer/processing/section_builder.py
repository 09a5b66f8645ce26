"""Single-pass accumulation of line events into sections."""

import itertools
import logging
from typing import Iterator, Optional

from .models import Content, Heading, Ignored, LineEvent, Section


logger = logging.getLogger(__name__)

INTRODUCTION_HEADING = "Introduction"


def new_id_sequence() -> Iterator[int]:
    """Return a fresh section counter starting at 1."""
    return itertools.count(1)


class SectionBuilder:
    """Turns a stream of line events into a flat list of sections.

    The builder is either outside any section or inside one. A heading
    flushes the open section (if any) and opens a new one. Content outside
    a section opens an implicit "Introduction" section first, so nothing
    before the first heading is lost. ``finish()`` flushes the last section.

    Section ids come from ``ids``. A parser creates one per parse call and
    may pass the same sequence to several builders (one per file).
    """

    def __init__(self, joiner: str = "\n", ids: Optional[Iterator[int]] = None):
        """Initialize the builder.

        Args:
            joiner: Separator placed between appended content lines.
            ids: Section counter. A new one starting at 1 is used if omitted.
        """
        self.joiner = joiner
        self._ids = ids if ids is not None else new_id_sequence()
        self._sections: list[Section] = []
        self._current: Optional[Section] = None
        self._buffer: list[str] = []

    @property
    def current(self) -> Optional[Section]:
        """The section currently open, if any."""
        return self._current

    def feed(self, event: LineEvent) -> None:
        """Apply one line event."""
        if isinstance(event, Heading):
            self.open_section(event.level, event.text)
        elif isinstance(event, Content):
            self.add_content(event.text)
        elif not isinstance(event, Ignored):
            raise TypeError(f"Unknown line event: {event!r}")

    def open_section(self, level: int, heading: str) -> Section:
        self._flush()
        section = Section(
            id=f"section-{next(self._ids)}",
            level=level,
            heading=heading.strip(),
        )
        logger.debug(f"Opened {section.id}: '{section.heading}' (level {level})")
        self._current = section
        return section

    def add_content(self, text: str) -> None:
        if self._current is None:
            if not text.strip():
                return
            self.open_section(1, INTRODUCTION_HEADING)
        self._buffer.append(text)

    def attach_image(self, filename: str) -> None:
        """Append an image filename to the open section."""
        if self._current is None:
            logger.debug(f"No open section for image {filename}, dropping it")
            return
        self._current.images.append(filename)

    def finish(self) -> list[Section]:
        """Flush the open section and return every section built so far."""
        self._flush()
        return self._sections

    def _flush(self) -> None:
        if self._current is None:
            return
        self._current.content = self.joiner.join(self._buffer).strip()
        self._sections.append(self._current)
        self._current = None
        self._buffer = []
