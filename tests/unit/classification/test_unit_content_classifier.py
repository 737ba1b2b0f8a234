# tests/unit/classification/test_unit_content_classifier.py — v1
"""Tests for classification/content_classifier.py — metadata-first inference."""

from __future__ import annotations

from smartcontext.classification.content_classifier import classify_content_type
from smartcontext.core.models import DocumentContext, ProjectContext


def _doc(purpose: str | None = None) -> DocumentContext:
    return DocumentContext(file_id="f", purpose=purpose)


class TestProjectGenre:
    def test_genre_wins_over_everything(self):
        result = classify_content_type(
            ProjectContext(genre="academic"), _doc("technical manual"), "```code```"
        )
        assert result == "academic"

    def test_other_genre_is_ignored(self):
        result = classify_content_type(ProjectContext(genre="other"), _doc("My novel"), "")
        assert result == "fiction"


class TestPurposeKeywords:
    def test_technical(self):
        assert classify_content_type(None, _doc("API Documentation"), "") == "technical"

    def test_fiction(self):
        assert classify_content_type(None, _doc("short story"), "") == "fiction"

    def test_blog(self):
        assert classify_content_type(None, _doc("Weekly article"), "") == "blog"

    def test_technical_checked_before_fiction(self):
        assert classify_content_type(None, _doc("technical story"), "") == "technical"

    def test_unmatched_purpose_falls_through_to_content(self):
        assert classify_content_type(None, _doc("notes"), "```x```") == "technical"


class TestContentHeuristics:
    def test_code_fence(self):
        assert classify_content_type(None, None, "see ```print(1)```") == "technical"

    def test_function_keyword(self):
        assert classify_content_type(None, None, "a function returns") == "technical"

    def test_class_keyword(self):
        assert classify_content_type(None, None, "class Foo:") == "technical"

    def test_ten_quotes_is_fiction(self):
        assert classify_content_type(None, None, '"a" ' * 5) == "fiction"

    def test_nine_quotes_is_other(self):
        assert classify_content_type(None, None, '"' * 9) == "other"

    def test_empty_content(self):
        assert classify_content_type(None, None, "") == "other"

    def test_code_beats_quotes(self):
        assert classify_content_type(None, None, '"x" ' * 6 + "class A") == "technical"
