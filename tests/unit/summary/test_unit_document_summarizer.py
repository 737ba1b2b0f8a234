# tests/unit/summary/test_unit_document_summarizer.py — v1
"""Tests for summary/document_summarizer.py — digests and cache reuse."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from smartcontext.cache.fingerprint import content_hash
from smartcontext.cache.summary_cache import SummaryCache
from smartcontext.core.tokens import estimate_tokens
from smartcontext.summary.document_summarizer import (
    DocumentSummarizer,
    build_content_overview,
    split_paragraphs,
)


class TestSplitParagraphs:
    def test_drops_blank_blocks(self):
        assert split_paragraphs("a\n\n\n\n  \n\nb") == ["a", "b"]

    def test_empty(self):
        assert split_paragraphs("") == []


class TestContentOverview:
    def test_single_paragraph(self):
        assert build_content_overview("one two three", "other") == (
            "CONTENT OVERVIEW (other): 3 words, 1 sections\nOPENING: one two three"
        )

    def test_opening_and_end(self):
        text = "First para here.\n\nMiddle.\n\nLast one."
        lines = build_content_overview(text, "blog").split("\n")
        assert lines == [
            "CONTENT OVERVIEW (blog): 6 words, 3 sections",
            "OPENING: First para here.",
            "CURRENT END: Last one.",
        ]

    def test_long_excerpt_truncated(self):
        text = "x" * 250
        overview = build_content_overview(text, "other")
        assert f"OPENING: {'x' * 200}..." in overview

    def test_empty_content(self):
        assert build_content_overview("", "other") == "CONTENT OVERVIEW (other): 0 words, 0 sections"


class TestGenerateSummary:
    def test_fields(self, markdown_document, fake_clock):
        summarizer = DocumentSummarizer(clock=fake_clock)
        s = summarizer.generate_summary("doc-1", markdown_document, "other")
        assert s.file_id == "doc-1"
        assert s.version == content_hash(markdown_document)
        assert s.structural == "STRUCTURE:\n# Intro\n## Setup\n## Results"
        assert s.content.startswith("CONTENT OVERVIEW (other): 1210 words, 6 sections")
        assert s.entities.startswith("KEY TERMS: lorem (1200)")
        assert s.created_at == s.updated_at == fake_clock.now
        assert s.token_count == estimate_tokens(
            "\n\n".join([s.structural, s.content, s.entities])
        )
        assert summarizer.generated_count == 1


class TestGetDocumentSummary:
    def test_cache_hit_skips_generation(self, memory_store, fake_clock):
        summarizer = DocumentSummarizer(cache=SummaryCache(memory_store, clock=fake_clock))
        first = summarizer.get_document_summary("doc-1", "Hello world.", "other")
        second = summarizer.get_document_summary("doc-1", "Hello world.", "other")
        assert first == second
        assert summarizer.generated_count == 1

    def test_edit_produces_new_version(self, fake_clock):
        summarizer = DocumentSummarizer(cache=SummaryCache(clock=fake_clock))
        a = summarizer.get_document_summary("doc-1", "Hello world.", "other")
        b = summarizer.get_document_summary("doc-1", "Hello world!", "other")
        assert a.version != b.version
        assert summarizer.generated_count == 2
        assert len(summarizer.cache) == 2

    def test_expired_entry_regenerates(self, fake_clock):
        summarizer = DocumentSummarizer(cache=SummaryCache(clock=fake_clock))
        summarizer.get_document_summary("doc-1", "text", "other")
        fake_clock.advance(30 * 60)
        summarizer.get_document_summary("doc-1", "text", "other")
        assert summarizer.generated_count == 2

    def test_without_cache_always_generates(self):
        summarizer = DocumentSummarizer(cache=None)
        summarizer.get_document_summary("doc-1", "text", "other")
        summarizer.get_document_summary("doc-1", "text", "other")
        assert summarizer.generated_count == 2


class TestConcurrency:
    def test_generated_count_exact_under_threads(self):
        summarizer = DocumentSummarizer(cache=None)
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(
                lambda i: summarizer.generate_summary(f"doc-{i}", f"text {i}", "other"),
                range(50),
            ))
        assert summarizer.generated_count == 50
