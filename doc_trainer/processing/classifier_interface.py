"""Abstract base class for line classifiers.

This module defines the interface that every input format implements,
so the section builder stays the same for Markdown and PDF text.
"""

from abc import ABC, abstractmethod

from .models import LineEvent, ParserState


class LineClassifierBase(ABC):
    """Classifies one line of input as heading, content or ignorable markup.

    Implementations must be total: every possible line maps to an event,
    nothing raises.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the input format."""
        pass

    # Separator used by the section builder when appending content lines
    joiner: str = "\n"

    @abstractmethod
    def classify(self, line: str, state: ParserState) -> LineEvent:
        """Classify a single line.

        Args:
            line: The raw line, without its trailing newline.
            state: Mutable per-file state. Implementations may update flags.

        Returns:
            A Heading, Content or Ignored event.
        """
        pass
