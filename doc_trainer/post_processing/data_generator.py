"""Structured JSON output for parsed documents."""

import json
import logging
from pathlib import Path
from typing import Union

from ..processing.models import Document


logger = logging.getLogger(__name__)


def build_content_data(doc: Document) -> dict:
    """Build the ``content.json`` payload for a document."""
    data = doc.to_dict()
    data["metadata"] = {
        "total_sections": len(doc.sections),
        "total_images": doc.total_images
    }
    return data


class DataGenerator:
    """Writes ``data/content.json`` and one ``data/sections/<id>.json`` per section."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    @property
    def data_dir(self) -> Path:
        return self.output_dir / "data"

    def generate(self, doc: Document) -> Path:
        """Write the data files.

        Args:
            doc: The document to serialize. It is not modified.

        Returns:
            Path to ``content.json``.
        """
        sections_dir = self.data_dir / "sections"
        sections_dir.mkdir(parents=True, exist_ok=True)

        content_path = self.data_dir / "content.json"
        self._save_json(content_path, build_content_data(doc))
        logger.info(f"Generated: {content_path}")

        for section in doc.sections:
            self._save_json(sections_dir / f"{section.id}.json", section.to_dict())
        logger.info(f"Generated: {len(doc.sections)} individual section files")

        return content_path

    def _save_json(self, path: Path, data: dict) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
