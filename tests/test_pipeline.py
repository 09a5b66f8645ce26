import json
import sys
import pytest
from unittest.mock import MagicMock, patch
from doc_trainer import cli
from doc_trainer.config import ProcessorConfig, config_from_dict, load_config
from doc_trainer.errors import ConfigError, InputUnavailableError
from doc_trainer.pipeline import DocumentProcessor, parse_path
from doc_trainer.processing.models import Document, Section


def test_load_config_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("input_type: markdown\nmarkdown:\n  directory: docs_src\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.input_type == "markdown"
    assert config.markdown.directory == "docs_src"
    assert config.markdown.auto_discover is True
    assert config.output.directory == "docs"
    assert config.pdf.extract_images is True


def test_load_config_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_invalid_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("input_type: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_invalid_input_type():
    with pytest.raises(ConfigError):
        config_from_dict({"input_type": "docx"})


def test_process_markdown(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "guide.md").write_text("# Start\nHello\n## More\nWorld\n", encoding="utf-8")
    out = tmp_path / "out"

    config = config_from_dict({
        "input_type": "markdown",
        "markdown": {"directory": str(src)},
        "output": {"directory": str(out), "title": "My Docs"},
    })
    doc = DocumentProcessor(config).process()

    assert doc.title == "My Docs"
    content = json.loads((out / "data" / "content.json").read_text(encoding="utf-8"))
    assert [s["heading"] for s in content["sections"]] == ["Start", "More"]
    assert (out / "search-index.json").exists()


def test_process_markdown_explicit_files(tmp_path):
    md_file = tmp_path / "one.md"
    md_file.write_text("# One\n", encoding="utf-8")
    config = ProcessorConfig(input_type="markdown")
    config.markdown.auto_discover = False
    config.markdown.files = [str(md_file)]
    config.output.directory = str(tmp_path / "out")

    doc = DocumentProcessor(config).parse()
    assert doc.title == "Documentation"
    assert [s.heading for s in doc.sections] == ["One"]


def test_process_pdf_requires_path():
    with pytest.raises(ConfigError):
        DocumentProcessor(ProcessorConfig(input_type="pdf")).parse()


@patch("doc_trainer.pipeline.PDFParser")
def test_process_pdf_uses_parser(mock_parser_class, tmp_path):
    mock_parser = MagicMock()
    mock_parser_class.return_value = mock_parser
    mock_parser.parse.return_value = Document(
        title="manual",
        sections=[Section(id="section-1", level=1, heading="A", content="b")],
    )
    config = ProcessorConfig(input_type="pdf")
    config.pdf.path = "manual.pdf"
    config.pdf.extract_images = False
    config.output.directory = str(tmp_path)

    doc = DocumentProcessor(config).process()

    assert doc.title == "manual"
    mock_parser_class.assert_called_once_with(tmp_path, extract_images=False)
    mock_parser.parse.assert_called_once_with("manual.pdf")
    assert (tmp_path / "data" / "sections" / "section-1.json").exists()


def test_process_failure_writes_nothing(tmp_path):
    out = tmp_path / "out"
    config = config_from_dict({
        "input_type": "markdown",
        "markdown": {"directory": str(tmp_path / "missing")},
        "output": {"directory": str(out)},
    })
    with pytest.raises(InputUnavailableError):
        DocumentProcessor(config).process()
    assert not (out / "data").exists()


def test_parse_path_markdown_file(tmp_path):
    md_file = tmp_path / "notes.md"
    md_file.write_text("intro text\n# Heading\n", encoding="utf-8")
    doc = parse_path(md_file)
    assert [s.heading for s in doc.sections] == ["Introduction", "Heading"]


def test_cli_outline(tmp_path, monkeypatch):
    md_file = tmp_path / "notes.md"
    md_file.write_text("# Top\n## Child\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["doc-trainer", "outline", str(md_file)])
    assert cli.main() == 0


def test_cli_outline_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["doc-trainer", "outline", str(tmp_path / "nope.md")])
    assert cli.main() == 1


def test_cli_process_missing_config(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["doc-trainer", "process", "-c", str(tmp_path / "none.yaml")])
    assert cli.main() == 1


@patch("doc_trainer.cli.DocumentProcessor")
def test_cli_process_pdf_override(mock_processor_class, tmp_path, monkeypatch):
    mock_processor_class.return_value.process.return_value = Document(title="x")
    monkeypatch.setattr(sys, "argv", [
        "doc-trainer", "process", "-c", str(tmp_path / "none.yaml"),
        "--pdf", "input.pdf", "-o", str(tmp_path / "site"),
    ])

    assert cli.main() == 0
    config = mock_processor_class.call_args[0][0]
    assert config.input_type == "pdf"
    assert config.pdf.path == "input.pdf"
    assert config.output.directory == str(tmp_path / "site")
