"""
Line grammar for the ten-column CoNLL-U format.

Cf. https://universaldependencies.org/format.html

Every line is classified by its first character(s): blank, ``#`` comment, or a
word line whose ID column shape (``5``, ``1-2``, ``8.1``) decides between token,
multiword token and empty node. Word lines are then split into their ten
columns and each column is checked against its own grammar. Nothing is
converted here; see ``normalize`` for typed values.
"""
import regex as re

from .data import LineKind, ParsedLine
from ..errors import LineSyntaxError

UNDERSCORE = "_"

COLUMNS = ["form", "lemma", "upos", "xpos", "feats", "head", "deprel", "deps", "misc"]

EOL = re.compile(r"(\r\n|\r|\n)\Z")
EMPTY_LINE = re.compile(r"[^\S\r\n]*")
COMMENT_LINE = re.compile(r"#[^\n]*")

ID_PATTERNS = [
    (LineKind.TOKEN, re.compile(r"[0-9]+")),
    (LineKind.SUPERTOKEN, re.compile(r"[0-9]+-[0-9]+")),
    (LineKind.ELLIPSIS, re.compile(r"[0-9]+\.[0-9]+")),
]
TOKEN_REF = re.compile(r"[0-9]+(?:-[0-9]+|\.[0-9]+)?")

NOT_TAB = re.compile(r"[^\t]+")
NOT_TAB_OR_SPACE = re.compile(r"[^\t\s]+")
DEPREL = re.compile(r"[a-z]+(?::[a-z]+)?")
FEAT = re.compile(r"([A-Z0-9][A-Z0-9a-z]*(?:\[[a-z0-9]+\])?)=([A-Z0-9][a-zA-Z0-9]*)")
DEP = re.compile(r"([0-9]+(?:-[0-9]+|\.[0-9]+)?):(.+)")
MISC_ITEM = re.compile(r"(\w+)=([^|]+)")
# universal relation, then optional subtype, case marker (any script) and case
ENHANCED_RELATION = re.compile(
    r"[a-z]+(?::[a-z]+)?(?::[\p{Ll}\p{Lm}\p{Lo}\p{M}]+(?:_[\p{Ll}\p{Lm}\p{Lo}\p{M}]+)*)?(?::[a-z]+)?")


def strip_eol(text: str) -> str:
    """Remove a single trailing line terminator, if any."""
    return EOL.sub("", text, count=1)


def parse_line(text: str) -> ParsedLine | None:
    """
    Classify one line and split it into raw sub-fields.
    :param text: Line of text, with or without its line terminator
    :return: ParsedLine, or None for an empty line
    :raises LineSyntaxError: if the line matches none of the alternatives
    """
    line = strip_eol(text)
    if EMPTY_LINE.fullmatch(line):
        return None
    if line.startswith("#"):
        if not COMMENT_LINE.fullmatch(line):
            raise LineSyntaxError("comment contains a line break", column="comment", value=line)
        return ParsedLine(LineKind.COMMENT, {"body": line})

    id_text, sep, rest = line.partition("\t")
    kind = classify_id(id_text)
    if not sep:
        raise LineSyntaxError("expected 10 tab-separated columns, found 1", column="id", value=id_text)
    columns = rest.split("\t")
    if len(columns) != len(COLUMNS):
        raise LineSyntaxError(f"expected 10 tab-separated columns, found {len(columns) + 1}",
                              column="id", value=id_text)

    fields = {"id": id_text}
    for name, value in zip(COLUMNS, columns):
        fields[name] = COLUMN_PARSERS[name](value)
    return ParsedLine(kind, fields)


def classify_id(text: str) -> LineKind:
    for kind, pattern in ID_PATTERNS:
        if pattern.fullmatch(text):
            return kind
    raise LineSyntaxError("not a comment, blank line or token ID", column="id", value=text)


def _fail(column, value, expected):
    return LineSyntaxError(f"invalid {column.upper()} {value!r}: expected {expected}",
                           column=column, value=value)


def _text_column(name, pattern, expected):
    def parse(value):
        if value == UNDERSCORE or pattern.fullmatch(value):
            return value
        raise _fail(name, value, expected)
    return parse


def _pair_list(parse_item):
    """ '_' | epsilon | item ('|' item)* """
    def parse(value):
        if value == UNDERSCORE:
            return UNDERSCORE
        if value == "":
            return []
        return [parse_item(item) for item in value.split("|")]
    return parse


def parse_head(value: str) -> str:
    if value == UNDERSCORE or TOKEN_REF.fullmatch(value):
        return value
    raise _fail("head", value, "'_' or a token ID")


def parse_feat(item: str) -> tuple[str, str]:
    match = FEAT.fullmatch(item)
    if not match:
        raise _fail("feats", item, "Name=Value")
    return match.group(1), match.group(2)


def parse_dep(item: str) -> tuple[str, str]:
    match = DEP.fullmatch(item)
    if not match or not is_enhanced_relation(match.group(2)):
        raise _fail("deps", item, "head:relation")
    return match.group(1), match.group(2)


def parse_misc_item(item: str) -> tuple[str, str]:
    match = MISC_ITEM.fullmatch(item)
    if not match:
        raise _fail("misc", item, "Key=Value")
    return match.group(1), match.group(2)


def is_enhanced_relation(relation: str) -> bool:
    """
    Check an enhanced relation such as ``obl:arg``, ``nmod:poss`` or ``obl:上:loc``.
    """
    return ENHANCED_RELATION.fullmatch(relation) is not None


COLUMN_PARSERS = {
    "form": _text_column("form", NOT_TAB, "'_' or any non-empty text"),
    "lemma": _text_column("lemma", NOT_TAB, "'_' or any non-empty text"),
    "upos": _text_column("upos", NOT_TAB_OR_SPACE, "'_' or a tag without whitespace"),
    "xpos": _text_column("xpos", NOT_TAB_OR_SPACE, "'_' or a tag without whitespace"),
    "feats": _pair_list(parse_feat),
    "head": parse_head,
    "deprel": _text_column("deprel", DEPREL, "'_' or a relation like 'nsubj:pass'"),
    "deps": _pair_list(parse_dep),
    "misc": _pair_list(parse_misc_item),
}
