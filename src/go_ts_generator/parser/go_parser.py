"""
Go source parsing using tree-sitter.

This module wraps the tree-sitter runtime and the tree-sitter-go grammar.
It discovers Go files under a source root, parses them into syntax trees,
and groups comments the way the Go toolchain does so that doc comments can
be attached to declarations and scanned for annotations.
"""

import re
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterator, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree


class GoParseError(Exception):
    """Error while reading or parsing a Go source file."""
    pass


class SourceScanError(Exception):
    """Error while scanning a source directory."""
    pass


# //go:generate, //line, //export and friends are not documentation
_DIRECTIVE = re.compile(r"^//(line |extern |export |[a-z0-9]+:[a-z0-9])")

_PARSER: Optional[Parser] = None


def _get_parser() -> Parser:
    """Initialize and return the tree-sitter parser with the Go language."""
    global _PARSER
    if _PARSER is None:
        _PARSER = Parser(Language(tree_sitter_go.language()))
    return _PARSER


def node_text(node: Node) -> str:
    """Decode the source text covered by a node."""
    if node.text is None:
        return ""
    return node.text.decode("utf8", errors="replace")


def _comment_lines(raw: str) -> list[str]:
    """Strip comment markers from a single // or /* */ comment."""
    if raw.startswith("//"):
        if _DIRECTIVE.match(raw):
            return []
        line = raw[2:]
        if line.startswith(" "):
            line = line[1:]
        return [line]
    body = raw[2:-2] if raw.endswith("*/") else raw[2:]
    return body.split("\n")


def normalize_comment_text(raw_comments: list[str]) -> str:
    """
    Turn raw comments into plain text.

    Mirrors Go's CommentGroup.Text(): comment markers are removed, trailing
    whitespace is trimmed, leading and trailing blank lines are dropped and
    runs of blank lines collapse into one.

    Args:
        raw_comments: Comment source texts, including their markers.

    Returns:
        The comment text without a trailing newline.
    """
    lines: list[str] = []
    for raw in raw_comments:
        lines.extend(line.rstrip() for line in _comment_lines(raw))

    result: list[str] = []
    for line in lines:
        if not line and (not result or not result[-1]):
            continue
        result.append(line)
    while result and not result[-1]:
        result.pop()
    return "\n".join(result)


@dataclass(frozen=True)
class CommentGroup:
    """A run of adjacent comments with no blank line or code between them."""

    text: str
    start_line: int
    end_line: int
    start_byte: int
    end_byte: int
    starts_line: bool
    """True if only whitespace precedes the group on its first line."""


@dataclass
class ParsedFile:
    """A parsed Go file together with its comment groups."""

    path: Path
    relative_path: str
    source: bytes
    tree: Tree
    comment_groups: list[CommentGroup] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def doc_comment_for(self, node: Node) -> str:
        """
        Get the doc comment of a declaration or field.

        The doc comment is the comment group that ends on the line directly
        above the node and does not trail other code on its own line.
        """
        target_line = node.start_point[0] - 1
        for group in self.comment_groups:
            if group.end_byte > node.start_byte:
                break
            if group.end_line == target_line and group.starts_line:
                return group.text
        return ""

    def line_comment_for(self, node: Node) -> str:
        """Get the comment that trails a node on its last line."""
        end_byte = _code_end_byte(node)
        end_line = node.end_point[0]
        for group in self.comment_groups:
            if group.start_byte < end_byte:
                continue
            if group.start_line == end_line:
                return group.text
            break
        return ""


def _code_end_byte(node: Node) -> int:
    """End of the last non-comment child; trailing comments may sit inside a node."""
    ends = [c.end_byte for c in node.children if c.type != "comment"]
    return max(ends) if ends else node.end_byte


def _iter_comments(node: Node) -> Iterator[Node]:
    """Yield comment nodes in source order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "comment":
            yield current
            continue
        stack.extend(reversed(current.children))


def _starts_line(source: bytes, offset: int) -> bool:
    line_start = source.rfind(b"\n", 0, offset) + 1
    return not source[line_start:offset].strip()


def collect_comment_groups(source: bytes, root: Node) -> list[CommentGroup]:
    """
    Group the comments of a syntax tree the way go/parser does.

    Two comments belong to the same group when only whitespace with at most
    one newline separates them.

    Args:
        source: Source bytes the tree was parsed from.
        root: Root node of the syntax tree.

    Returns:
        Comment groups in source order.
    """
    runs: list[list[Node]] = []
    for comment in _iter_comments(root):
        if runs:
            previous = runs[-1][-1]
            gap = source[previous.end_byte:comment.start_byte]
            # a comment trailing code never continues onto the next line
            max_newlines = 1 if _starts_line(source, runs[-1][0].start_byte) else 0
            if not gap.strip() and gap.count(b"\n") <= max_newlines:
                runs[-1].append(comment)
                continue
        runs.append([comment])

    groups: list[CommentGroup] = []
    for run in runs:
        first, last = run[0], run[-1]
        groups.append(
            CommentGroup(
                text=normalize_comment_text([node_text(c) for c in run]),
                start_line=first.start_point[0],
                end_line=last.end_point[0],
                start_byte=first.start_byte,
                end_byte=last.end_byte,
                starts_line=_starts_line(source, first.start_byte),
            )
        )
    return groups


class GoParser:
    """
    Parse Go source files into tree-sitter syntax trees.

    Files containing syntax errors are rejected with GoParseError so callers
    can skip them, matching what go/parser would do.
    """

    def parse_bytes(
        self,
        source: bytes,
        path: Path,
        relative_path: Optional[str] = None,
    ) -> ParsedFile:
        """
        Parse Go source bytes.

        Args:
            source: The Go source code.
            path: Path the source was read from.
            relative_path: Path under its source root, prefixed with the root,
                used for classification. Defaults to the file name.

        Returns:
            The parsed file.

        Raises:
            GoParseError: If the source contains syntax errors.
        """
        tree = _get_parser().parse(source)
        if tree.root_node.has_error:
            raise GoParseError(f"Syntax error in {path}")
        return ParsedFile(
            path=path,
            relative_path=relative_path or path.name,
            source=source,
            tree=tree,
            comment_groups=collect_comment_groups(source, tree.root_node),
        )

    def parse_file(self, path: Path, root: Optional[Path] = None) -> ParsedFile:
        """
        Read and parse a Go file.

        Args:
            path: Path to the Go file.
            root: Source root the file was discovered under. The file's
                relative path keeps the root as given, parents included.

        Returns:
            The parsed file.

        Raises:
            GoParseError: If the file cannot be read or contains syntax errors.
        """
        try:
            source = path.read_bytes()
        except OSError as e:
            raise GoParseError(f"Failed to read {path}: {e}") from e

        relative_path = path.name
        if root is not None:
            relative_path = (root / path.relative_to(root)).as_posix()
        return self.parse_bytes(source, path, relative_path)


def find_go_files(
    directory: Path,
    exclude_patterns: Optional[list[str]] = None,
) -> list[Path]:
    """
    Find all Go files under a directory.

    Args:
        directory: Source root to search.
        exclude_patterns: Optional fnmatch patterns matched against the
            root-relative posix path of each file.

    Returns:
        Paths sorted by relative path for deterministic ordering.

    Raises:
        SourceScanError: If the directory is missing or cannot be listed.
    """
    if not directory.exists():
        raise SourceScanError(f"Source directory not found: {directory}")
    if not directory.is_dir():
        raise SourceScanError(f"Source path is not a directory: {directory}")

    try:
        candidates = list(directory.rglob("*.go"))
    except OSError as e:
        raise SourceScanError(f"Failed to scan {directory}: {e}") from e

    matched: list[Path] = []
    for path in candidates:
        if not path.is_file():
            continue
        rel_path = path.relative_to(directory).as_posix()
        if exclude_patterns and any(fnmatch(rel_path, pat) for pat in exclude_patterns):
            continue
        matched.append(path)

    matched.sort(key=lambda p: p.relative_to(directory).as_posix())
    return matched
