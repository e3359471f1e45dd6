from .data import Sentence
from ..lines import CommentLine, EllipsisLine, SuperTokenLine


def _remove(sentences: list[Sentence], line_type) -> list[Sentence]:
    return [Sentence(tuple(line for line in sentence if not isinstance(line, line_type)))
            for sentence in sentences]


def remove_comments(sentences: list[Sentence]) -> list[Sentence]:
    return _remove(sentences, CommentLine)


def remove_supertokens(sentences: list[Sentence]) -> list[Sentence]:
    return _remove(sentences, SuperTokenLine)


def remove_ellipses(sentences: list[Sentence]) -> list[Sentence]:
    return _remove(sentences, EllipsisLine)
