"""Response models for the index tools.

Every tool returns ``{"ok": ..., "data": ..., "error": ...}``. The ``data``
part is one of four payloads, one per resolution outcome:

- ``DocumentData``: ``doc_resolve`` found a document
- ``TopicsData``: ``doc_resolve`` stopped on a directory and lists its keys
- ``CompletionData``: ``doc_complete`` returned a line or candidates
- ``ReloadData``: ``doc_reload_index`` swapped in a new snapshot

Tools build these models instead of raw dicts, so a payload that drifts from
its declared shape fails validation inside the tool rather than reaching the
client.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field, model_validator


class ToolError(BaseModel):
    """Error half of a tool response."""

    code: str = Field(description="Machine-readable error code, e.g. document_not_found")
    message: str = Field(description="One-line explanation for the caller")
    details: dict[str, Any] | None = Field(default=None, description="Error-specific context")


class ToolEnvelope(BaseModel):
    """Outer response shape: exactly one of ``data`` (on success) or ``error``."""

    ok: bool
    data: Any | None = None
    error: ToolError | None = None

    @model_validator(mode="after")
    def _check_ok_matches_error(self) -> "ToolEnvelope":
        if self.ok == (self.error is not None):
            state = "must not" if self.ok else "must"
            raise ValueError(f"ok={str(self.ok).lower()} responses {state} include error")
        return self


# Entries


class ResolvedEntry(BaseModel):
    """A document the command resolved to."""

    path: str = Field(description="Document path relative to the docs root")
    is_index_file: bool
    variants: list[str] = Field(description="Variants stored for the path (basic/detail/install)")
    content: str | None = Field(default=None, description="Markdown text when content is enabled")


class TopicEntry(BaseModel):
    """A key one level below where resolution or completion stopped."""

    name: str


class CompletionEntry(BaseModel):
    """Replacement input line from a tab press."""

    completion: str


# Summaries


class DocumentSummary(BaseModel):
    count: Literal[1] = 1
    exists: Literal[True] = True
    generation: int = Field(ge=0)


class TopicsSummary(BaseModel):
    count: int = Field(ge=0)
    total: int = Field(ge=0, description="Topics before max_suggestions was applied")
    exists: Literal[False] = False
    path: str = Field(description="Slash-joined path of the directory that was listed")
    generation: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_truncation(self) -> "TopicsSummary":
        if self.count > self.total:
            raise ValueError("count cannot exceed total")
        return self


class CompleteSummary(BaseModel):
    kind: Literal["line", "suggestions"]
    count: int = Field(ge=0)
    iteration: int = Field(ge=1)
    strategy: Literal["prefix", "first"]


class ReloadSummary(BaseModel):
    generation: int = Field(ge=0)
    source: str | None = Field(default=None, description="File the snapshot was loaded from")
    top_level: int = Field(ge=0)


# Payloads


class DocumentData(BaseModel):
    source: Literal["index"] = "index"
    action: Literal["resolve"] = "resolve"
    entries: list[ResolvedEntry] = Field(min_length=1, max_length=1)
    summary: DocumentSummary


class TopicsData(BaseModel):
    source: Literal["index"] = "index"
    action: Literal["resolve"] = "resolve"
    entries: list[TopicEntry]
    summary: TopicsSummary

    @model_validator(mode="after")
    def _check_count(self) -> "TopicsData":
        if len(self.entries) != self.summary.count:
            raise ValueError("summary.count does not match entries")
        return self


class CompletionData(BaseModel):
    source: Literal["index"] = "index"
    action: Literal["complete"] = "complete"
    entries: list[Union[CompletionEntry, TopicEntry]]
    summary: CompleteSummary

    @model_validator(mode="after")
    def _check_kind(self) -> "CompletionData":
        if len(self.entries) != self.summary.count:
            raise ValueError("summary.count does not match entries")
        if self.summary.kind == "line":
            if len(self.entries) != 1 or not isinstance(self.entries[0], CompletionEntry):
                raise ValueError("a line completion carries exactly one completion entry")
        elif not all(isinstance(entry, TopicEntry) for entry in self.entries):
            raise ValueError("suggestions carry only name entries")
        return self

    @classmethod
    def from_outcome(
        cls,
        outcome: str | list[str],
        *,
        iteration: int,
        strategy: Literal["prefix", "first"],
    ) -> "CompletionData":
        """Wrap the return value of ``complete`` (a line or a candidate list)."""
        if isinstance(outcome, list):
            entries: list[CompletionEntry | TopicEntry] = [TopicEntry(name=name) for name in outcome]
            kind: Literal["line", "suggestions"] = "suggestions"
        else:
            entries = [CompletionEntry(completion=outcome)]
            kind = "line"
        return cls(
            entries=entries,
            summary=CompleteSummary(
                kind=kind,
                count=len(entries),
                iteration=iteration,
                strategy=strategy,
            ),
        )


class ReloadData(BaseModel):
    source: Literal["index"] = "index"
    action: Literal["reload"] = "reload"
    entries: list[TopicEntry]
    summary: ReloadSummary


IndexData = Union[DocumentData, TopicsData, CompletionData, ReloadData]


# Error details


class NotFoundDetails(BaseModel):
    source: Literal["index"] = "index"
    action: Literal["resolve"] = "resolve"
    input: dict[str, str]
    path: str = Field(description="The normalized command that matched nothing")
    top_level: list[str] = Field(description="Keys available at the index root")


class LoadFailureDetails(BaseModel):
    path: str
    reason: str
    generation: int = Field(ge=0, description="Generation still being served")


def build_ok(data: IndexData) -> dict[str, Any]:
    """Wrap a payload model in a success response."""
    return ToolEnvelope(ok=True, data=data.model_dump(exclude_none=True)).model_dump(
        exclude_none=True
    )


def build_error(
    code: str,
    message: str,
    details: BaseModel | dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Wrap an error code and its details in a failure response."""
    if isinstance(details, BaseModel):
        details = details.model_dump(exclude_none=True)
    return ToolEnvelope(
        ok=False,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)
