"""Client-side search index generation."""

import json
import logging
from pathlib import Path
from typing import Union

from ..processing.models import Document


logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


def build_search_index(doc: Document, preview_length: int = PREVIEW_LENGTH) -> dict:
    """Build the search index for a document.

    Each section becomes one item. Content is cut to ``preview_length``
    characters, with ``...`` appended when truncated.
    """
    items = []
    for section in doc.sections:
        content = section.content
        if len(content) > preview_length:
            content = content[:preview_length] + "..."
        items.append({
            "id": section.id,
            "heading": section.heading,
            "content": content,
            "level": section.level
        })
    return {"items": items}


class SearchIndexGenerator:
    """Writes ``search-index.json`` into the output directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def generate(self, doc: Document) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        index_path = self.output_dir / "search-index.json"
        with open(index_path, 'w', encoding='utf-8') as f:
            json.dump(build_search_index(doc), f, indent=2, ensure_ascii=False)
        logger.info(f"Generated search index: {index_path}")
        return index_path
