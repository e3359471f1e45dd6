from dataclasses import dataclass

from ..lines import CommentLine, EllipsisLine, Line, SuperTokenLine, TokenLine, WordLine


@dataclass(frozen=True)
class Sentence:
    """Lines of one sentence in file order, comments included."""
    lines: tuple[Line, ...]

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    @property
    def comments(self) -> list[CommentLine]:
        return [line for line in self.lines if isinstance(line, CommentLine)]

    @property
    def words(self) -> list[WordLine]:
        return [line for line in self.lines if isinstance(line, WordLine)]

    @property
    def tokens(self) -> list[TokenLine]:
        return [line for line in self.lines if isinstance(line, TokenLine)]

    @property
    def supertokens(self) -> list[SuperTokenLine]:
        return [line for line in self.lines if isinstance(line, SuperTokenLine)]

    @property
    def ellipses(self) -> list[EllipsisLine]:
        return [line for line in self.lines if isinstance(line, EllipsisLine)]

    @property
    def metadata(self) -> dict[str, str | None]:
        """
        Header comments such as ``# sent_id = s1`` as a dict. A comment without
        '=' (e.g. ``# newdoc``) maps to None. Last occurrence wins.
        """
        metadata = {}
        for comment in self.comments:
            key, sep, value = comment.body.lstrip("#").partition("=")
            key = key.strip()
            if key:
                metadata[key] = value.strip() if sep else None
        return metadata
