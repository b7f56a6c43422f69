"""Tests for the tool response models."""

import pytest
from pydantic import ValidationError

from cmdoc_mcp.contracts import (
    CompleteSummary,
    CompletionData,
    CompletionEntry,
    DocumentData,
    DocumentSummary,
    NotFoundDetails,
    ResolvedEntry,
    ToolEnvelope,
    TopicEntry,
    TopicsData,
    TopicsSummary,
    build_error,
    build_ok,
)


class TestEnvelope:
    def test_ok_with_error_rejected(self):
        with pytest.raises(ValidationError):
            ToolEnvelope(ok=True, error={"code": "x", "message": "y"})

    def test_failure_without_error_rejected(self):
        with pytest.raises(ValidationError):
            ToolEnvelope(ok=False)

    def test_build_error_dumps_details_model(self):
        payload = build_error(
            "document_not_found",
            "No document matches 'x'.",
            NotFoundDetails(input={"command": "x"}, path="x", top_level=["js"]),
        )
        assert payload["ok"] is False
        assert "data" not in payload
        assert payload["error"]["details"] == {
            "source": "index",
            "action": "resolve",
            "input": {"command": "x"},
            "path": "x",
            "top_level": ["js"],
        }


class TestDocumentData:
    def test_content_omitted_when_absent(self):
        data = DocumentData(
            entries=[ResolvedEntry(path="git/commit.md", is_index_file=False, variants=["basic"])],
            summary=DocumentSummary(generation=3),
        )
        payload = build_ok(data)

        assert payload["data"]["source"] == "index"
        assert payload["data"]["action"] == "resolve"
        assert payload["data"]["entries"] == [
            {"path": "git/commit.md", "is_index_file": False, "variants": ["basic"]}
        ]
        assert payload["data"]["summary"] == {"count": 1, "exists": True, "generation": 3}

    def test_exactly_one_entry(self):
        with pytest.raises(ValidationError):
            DocumentData(entries=[], summary=DocumentSummary(generation=0))


class TestTopicsData:
    def test_count_must_match_entries(self):
        with pytest.raises(ValidationError):
            TopicsData(
                entries=[TopicEntry(name="slice")],
                summary=TopicsSummary(count=2, total=2, path="js/string", generation=0),
            )

    def test_count_cannot_exceed_total(self):
        with pytest.raises(ValidationError):
            TopicsSummary(count=3, total=2, path="js", generation=0)


class TestCompletionData:
    def test_line_outcome(self):
        data = CompletionData.from_outcome("js array ", iteration=1, strategy="prefix")
        assert data.entries == [CompletionEntry(completion="js array ")]
        assert data.summary.kind == "line"
        assert data.summary.count == 1

    def test_suggestions_outcome(self):
        data = CompletionData.from_outcome(["push", "pop"], iteration=2, strategy="first")
        assert [entry.name for entry in data.entries] == ["push", "pop"]
        assert data.summary.kind == "suggestions"

    def test_empty_suggestions(self):
        data = CompletionData.from_outcome([], iteration=2, strategy="prefix")
        assert data.entries == []
        assert data.summary.count == 0

    def test_line_with_name_entry_rejected(self):
        with pytest.raises(ValidationError):
            CompletionData(
                entries=[TopicEntry(name="push")],
                summary=CompleteSummary(kind="line", count=1, iteration=1, strategy="prefix"),
            )

    def test_suggestions_with_completion_entry_rejected(self):
        with pytest.raises(ValidationError):
            CompletionData(
                entries=[CompletionEntry(completion="js ")],
                summary=CompleteSummary(kind="suggestions", count=1, iteration=2, strategy="prefix"),
            )
