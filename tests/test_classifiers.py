import pytest
from doc_trainer.processing.markdown_classifier import MarkdownClassifier
from doc_trainer.processing.text_classifier import PlainTextClassifier
from doc_trainer.processing.models import Content, Heading, Ignored, ParserState


def classify_all(classifier, lines):
    state = ParserState()
    return [classifier.classify(line, state) for line in lines]


def test_markdown_heading_levels():
    classifier = MarkdownClassifier()
    events = classify_all(classifier, ["# One", "### Three  ", "###### Six", "####### Seven"])

    assert events[0] == Heading(level=1, text="One")
    assert events[1] == Heading(level=3, text="Three")
    assert events[2] == Heading(level=6, text="Six")
    # Seven hashes is not a heading
    assert isinstance(events[3], Content)


def test_markdown_hash_without_space_is_content():
    events = classify_all(MarkdownClassifier(), ["#hashtag", "#"])
    assert all(isinstance(e, Content) for e in events)


def test_markdown_code_fence():
    lines = ["```", "# not a heading", "```", "# Heading"]
    events = classify_all(MarkdownClassifier(), lines)

    assert events[0] == Ignored()
    assert events[1] == Content("# not a heading")
    assert events[2] == Ignored()
    assert events[3] == Heading(level=1, text="Heading")


def test_markdown_code_fence_with_language():
    events = classify_all(MarkdownClassifier(), ["```python", "## x = 1", "```"])
    assert events[1] == Content("## x = 1")


def test_markdown_front_matter_is_ignored():
    lines = ["---", "title: Guide", "# tags", "---", "# Real"]
    events = classify_all(MarkdownClassifier(), lines)

    assert events[:4] == [Ignored()] * 4
    assert events[4] == Heading(level=1, text="Real")


def test_markdown_rule_after_first_line_is_content():
    events = classify_all(MarkdownClassifier(), ["Text", "---"])
    assert events[1] == Content("---")


def test_markdown_image_refs():
    event = MarkdownClassifier().classify(
        "See ![one](img/a.png) and ![two](b.jpg)", ParserState()
    )
    assert event.image_refs == ("img/a.png", "b.jpg")


def test_markdown_image_in_fence_is_not_a_ref():
    events = classify_all(MarkdownClassifier(), ["```", "![x](a.png)", "```"])
    assert events[1].image_refs == ()


@pytest.mark.parametrize("line,level", [
    ("1. Scope", 1),
    ("1.1 Overview", 2),
    ("2.3.1 Limits", 3),
    ("2.3.1. Limits", 3),
    ("1.2.3.4.5.6.7 Deep", 6),
])
def test_text_numbered_headings(line, level):
    event = PlainTextClassifier().classify(line, ParserState())
    assert event == Heading(level=level, text=line)


def test_text_title_heuristic():
    classifier = PlainTextClassifier()
    assert classifier.classify("INTRODUCTION", ParserState()) == Heading(1, "INTRODUCTION")
    assert classifier.classify("  Getting Started  ", ParserState()) == Heading(1, "Getting Started")


def test_text_content_lines():
    classifier = PlainTextClassifier()
    # Punctuation, lowercase start, too short, too long, year without dot
    for line in ["Some content here.", "lowercase words", "Abc", "A" * 120, "2023 Annual report"]:
        assert isinstance(classifier.classify(line, ParserState()), Content), line


def test_text_short_capitalized_sentence_is_heading():
    # Known approximation: short capitalized phrases look like headings
    event = PlainTextClassifier().classify("The end", ParserState())
    assert event == Heading(level=1, text="The end")


def test_text_blank_line_ignored():
    assert PlainTextClassifier().classify("   ", ParserState()) == Ignored()


def test_markdown_hashes_with_only_whitespace_are_content():
    events = classify_all(MarkdownClassifier(), ["#  ", "###\t"])
    assert events == [Content("#  "), Content("###\t")]


def test_text_classifier_does_not_track_line_numbers():
    state = ParserState()
    PlainTextClassifier().classify("INTRODUCTION", state)
    assert state.line_number == 0
