"""Data models for document segmentation."""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Section:
    """A contiguous span of content introduced by a heading."""
    id: str
    level: int
    heading: str
    content: str = ""
    images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "level": self.level,
            "heading": self.heading,
            "content": self.content,
            "images": list(self.images)
        }


@dataclass
class Document:
    """A titled, reading-order list of sections."""
    title: str
    sections: list[Section] = field(default_factory=list)

    @property
    def total_images(self) -> int:
        return sum(len(s.images) for s in self.sections)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections]
        }


# Line events produced by the classifiers

@dataclass(frozen=True)
class Heading:
    """A line that opens a new section."""
    level: int
    text: str


@dataclass(frozen=True)
class Content:
    """A body line, with any inline image references found on it."""
    text: str
    image_refs: tuple[str, ...] = ()


@dataclass(frozen=True)
class Ignored:
    """Markup that is neither heading nor content (fences, front matter)."""


LineEvent = Union[Heading, Content, Ignored]


@dataclass
class ParserState:
    """Per-file classification state."""
    in_code_fence: bool = False
    in_front_matter: bool = False
    line_number: int = 0
