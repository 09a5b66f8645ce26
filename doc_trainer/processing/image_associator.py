"""Association of images with sections.

Markdown references are resolved eagerly, as each line is read. PDF images
carry no position, so they are spread over the sections afterwards.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import ImageUnresolvableError
from .file_system import FileSystem, LocalFileSystem
from .models import Section


logger = logging.getLogger(__name__)


class MarkdownImageResolver:
    """Copies images referenced from Markdown into a flat output directory.

    Images are keyed by filename only: two ``diagram.png`` files from
    different folders end up in the same destination, the last one wins.
    """

    def __init__(
        self,
        image_dir: Union[str, Path],
        file_system: Optional[FileSystem] = None
    ):
        """Initialize the resolver.

        Args:
            image_dir: Destination directory for copied images.
            file_system: Reader/writer used for the copy.
        """
        self.image_dir = Path(image_dir)
        self.file_system = file_system or LocalFileSystem()

    def resolve(self, image_ref: str, source_path: Optional[Union[str, Path]]) -> str:
        """Copy one referenced image and return its filename.

        Args:
            image_ref: Path as written in the Markdown reference.
            source_path: Markdown file the reference was found in. Relative
                references resolve against its directory, or the working
                directory when no source is known.

        Returns:
            The image filename inside the output directory.

        Raises:
            ImageUnresolvableError: If the image cannot be read or written.
        """
        base_dir = Path(source_path).parent if source_path else Path(".")
        source = base_dir / image_ref
        image_name = Path(image_ref).name
        if not image_name:
            raise ImageUnresolvableError(f"Invalid image reference: {image_ref!r}")

        try:
            data = self.file_system.read_bytes(source)
        except OSError as e:
            raise ImageUnresolvableError(f"Image not found: {source}") from e

        destination = self.image_dir / image_name
        try:
            self.file_system.write_bytes(destination, data)
        except OSError as e:
            raise ImageUnresolvableError(f"Failed to copy image to {destination}: {e}") from e

        logger.debug(f"Copied image {source} -> {destination}")
        return image_name


def distribute_images(sections: list[Section], images: list[str]) -> list[Section]:
    """Spread images evenly over sections, in order.

    Every section receives ``max(1, len(images) // len(sections))`` images
    until the list runs out. Images beyond ``per_section * len(sections)``
    are not assigned.

    Args:
        sections: Sections in reading order. Modified in place.
        images: Image filenames in extraction order.

    Returns:
        The same section list.
    """
    if not sections or not images:
        return sections

    per_section = max(1, len(images) // len(sections))
    remaining = iter(images)
    for section in sections:
        for _ in range(per_section):
            image = next(remaining, None)
            if image is None:
                return sections
            section.images.append(image)

    unassigned = len(images) - per_section * len(sections)
    if unassigned > 0:
        logger.debug(f"{unassigned} images left unassigned")
    return sections
