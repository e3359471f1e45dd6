from .data import CommentLine, EllipsisLine, LineKind, ParsedLine, SuperTokenLine, TokenLine, Line
from .grammar import parse_line
from .normalize import normalize

WORD_LINE_TYPES = {
    LineKind.TOKEN: TokenLine,
    LineKind.SUPERTOKEN: SuperTokenLine,
    LineKind.ELLIPSIS: EllipsisLine,
}


def build_record(normalized: ParsedLine) -> Line:
    """Re-tag a normalized line as one of the four line types."""
    if normalized.kind is LineKind.COMMENT:
        return CommentLine(normalized.fields["body"])
    try:
        line_type = WORD_LINE_TYPES[normalized.kind]
    except KeyError:
        raise ValueError(f"Unknown line kind: {normalized.kind}")
    return line_type(**normalized.fields)


def read_line(text: str) -> Line | None:
    """Parse, normalize and build a single line. Returns None for blank lines."""
    parsed = parse_line(text)
    if parsed is None:
        return None
    return build_record(normalize(parsed))
