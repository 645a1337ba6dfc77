"""
Split a template into depth-tagged fragments and prune unresolved blocks.

A block is the text between an open tag and its matching close tag. Blocks
are never built into a tree: each fragment carries its nesting depth (1 is
the top level) and block boundaries are recovered from depth changes.
"""

from sqltemplate.engines.sql.errors import TagMismatchError
from sqltemplate.engines.sql.placeholders import first_placeholder

Token = tuple[str, int]


def tokenize(sql: str, open_tag: str, close_tag: str) -> list[Token]:
    """Split *sql* on nested tags into ``(fragment, depth)`` tokens.

    Tag text is dropped; joining the fragments gives *sql* without tags.
    Raises ``TagMismatchError`` when the tags are equal or unbalanced.
    """
    if open_tag == close_tag:
        raise TagMismatchError(
            f"Open tag {open_tag!r} and close tag {close_tag!r} must differ",
            open_tag=open_tag,
            close_tag=close_tag,
        )
    depth = 0
    tokens: list[Token] = []
    for segment in sql.split(open_tag):
        first, *rest = segment.split(close_tag)
        depth += 1
        tokens.append((first, depth))
        for piece in rest:
            depth -= 1
            if depth < 1:
                raise TagMismatchError(
                    f"Close tag {close_tag!r} without a matching open tag {open_tag!r}",
                    open_tag=open_tag,
                    close_tag=close_tag,
                    depth=depth,
                )
            tokens.append((piece, depth))
    if depth != 1:
        raise TagMismatchError(
            f"Tags {open_tag!r} and {close_tag!r} are not balanced: "
            f"{depth - 1} block(s) left open",
            open_tag=open_tag,
            close_tag=close_tag,
            depth=depth,
        )
    return tokens


def untokenize(tokens: list[Token]) -> str:
    """Inverse of ``tokenize()`` (without the tags)."""
    return "".join(fragment for fragment, _ in tokens)


def remove_unused(tokens: list[Token]) -> list[Token]:
    """Drop every block whose own text still has an unresolved placeholder.

    The whole block goes, nested blocks included; siblings and the enclosing
    block are kept. Placeholders at depth 1 are left for the caller to report.
    """
    kept: list[Token] = []
    remove_depth: int | None = None
    for fragment, depth in tokens:
        if remove_depth is not None and depth < remove_depth:
            # block closed: retract its opening fragment and nested children
            while kept and kept[-1][1] >= remove_depth:
                kept.pop()
            remove_depth = None
        if remove_depth is None and depth > 1 and first_placeholder(fragment) is not None:
            remove_depth = depth
            continue
        if remove_depth is None:
            kept.append((fragment, depth))
    return kept


def count_blocks(tokens: list[Token]) -> int:
    """Number of blocks opened in *tokens*."""
    opened = 0
    previous = 0
    for _, depth in tokens:
        if depth > previous:
            opened += depth - previous
        previous = depth
    return opened - 1 if opened else 0
