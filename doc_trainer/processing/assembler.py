"""Document assembly and title helpers."""

from pathlib import Path
from typing import Optional, Union

from .models import Document, Section


DEFAULT_TITLE = "Documentation"


def assemble_document(sections: list[Section], title: Optional[str] = None) -> Document:
    """Wrap sections into a Document. An empty section list is accepted."""
    return Document(title=title or DEFAULT_TITLE, sections=list(sections))


def title_from_filename(path: Union[str, Path]) -> str:
    """Derive a title from a file name: ``user_guide-v2.pdf`` -> ``user guide v2``."""
    stem = Path(path).stem
    return stem.replace('_', ' ').replace('-', ' ')
