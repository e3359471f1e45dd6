from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class LineKind(Enum):
    COMMENT = "comment"
    TOKEN = "token"
    SUPERTOKEN = "supertoken"
    ELLIPSIS = "ellipsis"


@dataclass(frozen=True)
class RangeId:
    """ID of a multiword token, e.g. ``1-2``."""
    start: int
    end: int

    def __str__(self):
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class DecimalId:
    """ID of an empty node, e.g. ``8.1``."""
    major: int
    minor: int

    def __str__(self):
        return f"{self.major}.{self.minor}"


TokenRef = Union[int, RangeId, DecimalId]


def parse_ref(text: str) -> TokenRef:
    """
    Turn the textual form of a token reference into a TokenRef.
    :param text: ``"5"``, ``"1-2"`` or ``"8.1"``
    :return: int, RangeId or DecimalId
    """
    if "-" in text:
        start, end = text.split("-")
        return RangeId(int(start), int(end))
    if "." in text:
        major, minor = text.split(".")
        return DecimalId(int(major), int(minor))
    return int(text)


def ref_key(ref: TokenRef) -> tuple[int, int]:
    """
    Sort key giving the order in which references appear inside a sentence:
    ``1-2`` < ``1`` < ``1.1`` < ``2``.
    """
    if isinstance(ref, RangeId):
        return ref.start, -1
    if isinstance(ref, DecimalId):
        return ref.major, ref.minor
    return ref, 0


@dataclass(frozen=True)
class ParsedLine:
    """Tagged parse tree of one line, before and after normalization."""
    kind: LineKind
    fields: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CommentLine:
    body: str
    kind = LineKind.COMMENT

    @property
    def id(self):
        return None


@dataclass(frozen=True)
class WordLine:
    """Columns 2-10, shared by tokens, multiword tokens and empty nodes."""
    id: TokenRef
    form: str
    lemma: str
    upos: str
    xpos: str
    feats: dict[str, str] | None
    head: int | None
    deprel: str
    deps: dict[TokenRef, str] | None
    misc: dict[str, str] | None


@dataclass(frozen=True)
class TokenLine(WordLine):
    id: int
    kind = LineKind.TOKEN


@dataclass(frozen=True)
class SuperTokenLine(WordLine):
    id: RangeId
    kind = LineKind.SUPERTOKEN


@dataclass(frozen=True)
class EllipsisLine(WordLine):
    id: DecimalId
    kind = LineKind.ELLIPSIS


Line = Union[CommentLine, TokenLine, SuperTokenLine, EllipsisLine]
