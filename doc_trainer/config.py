"""YAML configuration for the document processor."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ConfigError


logger = logging.getLogger(__name__)

INPUT_TYPES = ("pdf", "markdown")


@dataclass
class PDFConfig:
    """PDF input settings."""
    path: Optional[str] = None
    extract_images: bool = True


@dataclass
class MarkdownConfig:
    """Markdown input settings."""
    # Directory searched recursively when auto_discover is on
    directory: str = "."
    auto_discover: bool = True
    # Explicit file list, used when auto_discover is off
    files: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Output settings."""
    directory: str = "docs"
    # Overrides the default Markdown document title when set
    title: str = ""


@dataclass
class ProcessorConfig:
    """Top-level configuration, mirroring ``config.yaml``."""
    input_type: str = "pdf"
    pdf: PDFConfig = field(default_factory=PDFConfig)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> None:
        if self.input_type not in INPUT_TYPES:
            raise ConfigError(
                f"invalid input_type: {self.input_type} (must be 'pdf' or 'markdown')"
            )


def _section(raw: dict, key: str) -> dict:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def config_from_dict(raw: dict) -> ProcessorConfig:
    """Build a ProcessorConfig from parsed YAML. Unknown keys are ignored."""
    if not isinstance(raw, dict):
        raise ConfigError("Configuration must be a mapping")

    pdf = _section(raw, "pdf")
    markdown = _section(raw, "markdown")
    output = _section(raw, "output")

    config = ProcessorConfig(
        input_type=raw.get("input_type") or "pdf",
        pdf=PDFConfig(
            path=pdf.get("path"),
            extract_images=pdf.get("extract_images", True),
        ),
        markdown=MarkdownConfig(
            directory=markdown.get("directory") or ".",
            auto_discover=markdown.get("auto_discover", True),
            files=list(markdown.get("files") or []),
        ),
        output=OutputConfig(
            directory=output.get("directory") or "docs",
            title=output.get("title") or "",
        ),
    )
    config.validate()
    return config


def load_config(config_path: Union[str, Path]) -> ProcessorConfig:
    """Read and parse a YAML configuration file.

    Raises:
        ConfigError: If the file is missing or is not valid YAML.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return config_from_dict(raw)
