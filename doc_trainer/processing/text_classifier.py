"""Line classifier for plain text extracted from PDFs.

PDF text extraction loses font and layout information, so headings are
guessed from the shape of the line alone:

- Numbered headings such as ``2. Results`` or ``1.1 Overview``: level is the
  number of integer groups.
- Short lines made only of letters and spaces that start with a capital:
  always level 1.

The second rule misfires on short capitalized sentences. That is a known
approximation and is left as is.
"""

import re

from .classifier_interface import LineClassifierBase
from .models import Content, Heading, Ignored, LineEvent, ParserState


# "1. Scope", "1.1 Overview", "2.3.1. Limits" (at least one dot)
NUMBERED_HEADING_PATTERN = re.compile(r'^(\d+\.(?:\d+\.)*\d*)\s+[A-Z]')
TITLE_HEADING_PATTERN = re.compile(r'^[A-Z][A-Za-z\s]{3,}$')
MAX_TITLE_LENGTH = 100
MAX_LEVEL = 6


class PlainTextClassifier(LineClassifierBase):
    """Heuristic heading detection for unstructured text."""

    joiner = " "

    @property
    def name(self) -> str:
        return "text"

    def classify(self, line: str, state: ParserState) -> LineEvent:
        line = line.strip()
        if not line:
            return Ignored()

        numbered = NUMBERED_HEADING_PATTERN.match(line)
        if numbered:
            level = len([g for g in numbered.group(1).split('.') if g])
            return Heading(level=min(level, MAX_LEVEL), text=line)

        if len(line) < MAX_TITLE_LENGTH and TITLE_HEADING_PATTERN.match(line):
            return Heading(level=1, text=line)

        return Content(line)
