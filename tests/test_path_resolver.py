"""Tests for document path resolution and variant selection."""

import pytest

from cmdoc_mcp.index import node_from_mapping
from cmdoc_mcp.resolution import (
    NotFound,
    Resolved,
    ResolveOptions,
    Suggestions,
    document_path,
    locate,
    resolve,
)


class TestLocate:
    def test_index_document_wins(self, sample_root):
        result = locate(["js", "array"], sample_root)
        assert isinstance(result, Resolved)
        assert result.is_index_file is True
        assert result.path == "js/array"

    def test_basic_leaf(self, sample_root):
        result = locate(["node"], sample_root)
        assert isinstance(result, Resolved)
        assert result.is_index_file is False
        assert result.node is sample_root.child("node")

    def test_ambiguous_directory(self, sample_root):
        assert locate(["js", "string"], sample_root) == Suggestions(candidates=("slice", "split"))

    def test_dead_end(self, sample_root):
        assert locate(["js", "array", "nope"], sample_root) == NotFound()


class TestDocumentPath:
    @pytest.fixture
    def commit(self, sample_root):
        return Resolved(path="git/commit", node=sample_root.child("git").child("commit"))

    def test_plain(self, commit):
        assert document_path(commit) == "git/commit.md"

    def test_detail(self, commit):
        assert document_path(commit, ResolveOptions(detail=True)) == "git/commit.detail.md"

    def test_missing_install_falls_back_to_plain(self, commit):
        assert document_path(commit, ResolveOptions(install=True)) == "git/commit.md"

    def test_detail_beats_install(self, commit):
        path = document_path(commit, ResolveOptions(detail=True, install=True))
        assert path == "git/commit.detail.md"

    def test_index_file(self, sample_root):
        resolved = Resolved(path="js", node=sample_root.child("js").index, is_index_file=True)
        assert document_path(resolved, ResolveOptions(detail=True)) == "js/index.md"


class TestResolve:
    def test_corrects_typo_to_document(self, splice_root):
        result = resolve("array.splcie", splice_root)
        assert result.path == "array/splice.md"
        assert result.exists is True
        assert result.suggestions is None

    def test_directory_index(self, sample_root):
        result = resolve("JS", sample_root)
        assert result.path == "js/index.md"
        assert result.is_index_file is True

    def test_variants(self, sample_root):
        assert resolve("node", sample_root, ResolveOptions(install=True)).path == "node.install.md"
        assert resolve("node", sample_root, ResolveOptions(detail=True)).path == "node.md"
        both = resolve("node", sample_root, ResolveOptions(detail=True, install=True))
        assert both.path == "node.install.md"
        assert resolve("node", sample_root).variants == ["basic", "install"]

    def test_fuzzy_dotted_input(self, sample_root):
        assert resolve("Git.Comit()", sample_root).path == "git/commit.md"
        assert resolve("js aray splice", sample_root).path == "js/array/splice.md"

    def test_word_list(self, sample_root):
        assert resolve(["JS", "Array", "PUSH"], sample_root).path == "js/array/push.md"

    def test_suggestions(self, sample_root):
        result = resolve("js string", sample_root)
        assert result.exists is False
        assert result.path == "js/string"
        assert result.suggestions == ["slice", "split"]

    def test_not_found_echoes_input(self, sample_root):
        result = resolve("nonexistent.thing", sample_root)
        assert result.to_dict()["suggestions"] is None
        assert result.exists is False
        assert result.path == "nonexistent.thing"

    def test_empty_input_lists_top_level(self, sample_root):
        result = resolve("", sample_root)
        assert result.exists is False
        assert result.suggestions == ["js", "git", "node"]

    def test_root_index_document(self):
        root = node_from_mapping({"index": {"__basic": 10}, "guide": {"__basic": 20}})
        result = resolve("", root)
        assert result.path == "index.md"
        assert result.is_index_file is True

    def test_node_without_basic_lists_nothing(self):
        root = node_from_mapping({"weird": {"__detail": 10}})
        result = resolve("weird", root)
        assert result.exists is False
        assert result.suggestions == []

    @pytest.mark.parametrize("command", ["", " ", "...", ";;", "()", "a" * 300, "éè 中"])
    def test_never_raises(self, sample_root, command):
        result = resolve(command, sample_root)
        assert not (result.path.endswith(".detail.install.md") or result.path.endswith(".install.detail.md"))
