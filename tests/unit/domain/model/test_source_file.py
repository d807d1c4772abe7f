"""Tests for domain/model/source_file.py."""

import pytest

from prettiest.domain.model.node_kind import NodeKind
from prettiest.domain.model.source_file import SourceFile
from prettiest.domain.model.syntax_node import SyntaxNode


class TestSourceFile:
    """Tests for SourceFile aggregate."""

    def test_valid(self) -> None:
        """Root within text bounds is accepted."""
        root = SyntaxNode(kind=NodeKind.SOURCE_FILE, full_start=0, start=0, end=3)

        source = SourceFile(file_name="a.ts", text="abc", root=root)

        assert source.root is root

    def test_root_past_text_raises(self) -> None:
        """Root ending after the text is rejected."""
        root = SyntaxNode(kind=NodeKind.SOURCE_FILE, full_start=0, start=0, end=10)

        with pytest.raises(ValueError, match="past end"):
            SourceFile(file_name="a.ts", text="abc", root=root)

    def test_empty_file_name_raises(self) -> None:
        """file_name must not be empty."""
        root = SyntaxNode(kind=NodeKind.SOURCE_FILE, full_start=0, start=0, end=0)

        with pytest.raises(ValueError, match="file_name"):
            SourceFile(file_name="", text="", root=root)
