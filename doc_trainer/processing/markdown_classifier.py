"""Line classifier for raw Markdown source."""

import re

from .classifier_interface import LineClassifierBase
from .models import Content, Heading, Ignored, LineEvent, ParserState


# heading text must contain a non-space character
HEADING_PATTERN = re.compile(r'^(#{1,6})\s+(\S.*)$')
IMAGE_PATTERN = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
FRONT_MATTER_DELIMITER = '---'
CODE_FENCE = '```'


class MarkdownClassifier(LineClassifierBase):
    """Classifies Markdown lines.

    - A leading ``---`` opens a front matter block, discarded up to the next
      lone ``---``.
    - Lines starting with three backticks toggle the code fence flag. While it
      is set every line is content, even ones that look like headings.
    - ``#`` to ``######`` followed by whitespace is a heading.
    """

    joiner = "\n"

    @property
    def name(self) -> str:
        return "markdown"

    def classify(self, line: str, state: ParserState) -> LineEvent:
        state.line_number += 1

        if state.line_number == 1 and line.rstrip() == FRONT_MATTER_DELIMITER:
            state.in_front_matter = True
            return Ignored()

        if state.in_front_matter:
            if line.rstrip() == FRONT_MATTER_DELIMITER:
                state.in_front_matter = False
            return Ignored()

        if line.strip().startswith(CODE_FENCE):
            state.in_code_fence = not state.in_code_fence
            return Ignored()

        if state.in_code_fence:
            return Content(line)

        match = HEADING_PATTERN.match(line)
        if match:
            return Heading(level=len(match.group(1)), text=match.group(2).strip())

        refs = tuple(m.group(2).strip() for m in IMAGE_PATTERN.finditer(line))
        return Content(line, image_refs=refs)
