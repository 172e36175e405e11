"""Tests for the MCP server and its folder helpers."""

import asyncio

import pytest

from docscan.server.mcp_server import (
    create_mcp_server,
    format_size,
    list_supported_files,
    resolve_inside,
)


def make_tree(root):
    (root / "notes").mkdir()
    (root / "notes" / "a.md").write_text("alpha", encoding="utf-8")
    (root / "b.txt").write_text("beta", encoding="utf-8")
    (root / "c.png").write_bytes(b"\x89PNG")
    (root / "main.c").write_text("int main;", encoding="utf-8")
    (root / ".hidden.txt").write_text("hidden", encoding="utf-8")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "dep.txt").write_text("dep", encoding="utf-8")


def call(server, tool, arguments):
    """Call an MCP tool and return its text output."""
    result = asyncio.run(server.call_tool(tool, arguments))
    # Newer mcp releases return (content, structured_output)
    if isinstance(result, tuple):
        result = result[0]
    if isinstance(result, dict):
        return result["result"]
    return "".join(block.text for block in result)


@pytest.fixture
def server(tmp_path):
    make_tree(tmp_path)
    return create_mcp_server(tmp_path)


def test_list_supported_files(tmp_path):
    make_tree(tmp_path)
    names = [f.path.relative_to(tmp_path).as_posix() for f in list_supported_files(tmp_path)]
    assert names == ["b.txt", "notes/a.md"]


def test_list_skips_unaccepted_extensions(tmp_path):
    make_tree(tmp_path)
    names = [f.name for f in list_supported_files(tmp_path)]
    assert "main.c" not in names
    assert "c.png" not in names


def test_list_with_prefix(tmp_path):
    make_tree(tmp_path)
    files = list_supported_files(tmp_path, "notes/")
    assert [f.name for f in files] == ["a.md"]


def test_resolve_inside_rejects_escape(tmp_path):
    make_tree(tmp_path)
    assert resolve_inside(tmp_path, "b.txt") == (tmp_path / "b.txt").resolve()
    assert resolve_inside(tmp_path, "../outside.txt") is None
    assert resolve_inside(tmp_path, "missing.txt") is None


def test_format_size():
    assert format_size(10) == "10 B"
    assert format_size(2048) == "2.0 KB"
    assert format_size(3 * 1024 * 1024) == "3.0 MB"


def test_server_name(server):
    assert server.name == "docscan"


class TestTools:
    def test_ls(self, server):
        out = call(server, "ls", {})
        assert "b.txt" in out
        assert "notes/a.md" in out
        assert "main.c" not in out

    def test_read(self, server):
        assert call(server, "read", {"path": "notes/a.md"}) == "alpha"

    def test_read_refuses_paths_outside_folder(self, server, tmp_path):
        (tmp_path.parent / "x.txt").write_text("secret", encoding="utf-8")
        assert call(server, "read", {"path": "../x.txt"}) == "Error: File not found: ../x.txt"

    def test_read_unsupported_file(self, server):
        assert call(server, "read", {"path": "c.png"}) == "Error: Unsupported file type: image/png"

    def test_find(self, server):
        out = call(server, "find", {"path": "b.txt", "query": "ET", "context_length": 1})
        assert out == "1. @1: b[et]a"

    def test_find_no_matches(self, server):
        out = call(server, "find", {"path": "b.txt", "query": "ET", "case_sensitive": True})
        assert out == "No matches for: ET"

    def test_find_missing_file(self, server):
        out = call(server, "find", {"path": "nope.txt", "query": "x"})
        assert out == "Error: File not found: nope.txt"

    def test_find_negative_context(self, server):
        out = call(server, "find", {"path": "b.txt", "query": "e", "context_length": -1})
        assert out.startswith("Error: context_length must be >= 0")
