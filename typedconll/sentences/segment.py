from typing import Iterable

from .data import Sentence
from ..errors import StructureError
from ..lines import Line, ref_key

FIRST_TOKEN_KEY = ref_key(1)


def segment(lines: Iterable[Line], line_numbers: list[int] | None = None,
            after_gap: list[bool] | None = None) -> list[Sentence]:
    """
    Split a flat sequence of lines into sentences by watching the IDs.

    A new sentence starts at a line when
        - the line is a comment and the previous line was not, or
        - the ID of the line is not greater than the previous one (counter reset;
          a repeated ID counts as a reset).
    IDs are compared through ``ref_key`` so that ``1-2`` sorts before ``1`` and
    ``1.1`` after it.

    :param lines: Built lines in file order, blank lines already dropped
    :param line_numbers: Optional source line number of each line, used in errors
    :param after_gap: Optional flag per line, True when malformed lines were dropped
        right before it; such a line just continues the current sentence
    :raises StructureError: if a comment interrupts a sentence, i.e. the first
        ID after a comment is past the first token
    """
    sentences = []
    current = []
    last_id = None
    for i, line in enumerate(lines):
        current_id = line.id
        boundary = (current_id is None and last_id is not None) or (
            current_id is not None and last_id is not None and ref_key(current_id) <= ref_key(last_id))

        # a comment run can only be a sentence header
        if last_id is None and current_id is not None and ref_key(current_id) > FIRST_TOKEN_KEY:
            if after_gap is None or not after_gap[i]:
                line_number = line_numbers[i] if line_numbers is not None else None
                raise StructureError(f"comment in the middle of a sentence, before token {current_id}: {line}",
                                     line=line, token_id=current_id, line_number=line_number)

        if boundary and current:
            sentences.append(Sentence(tuple(current)))
            current = []
        current.append(line)
        last_id = current_id

    if current:
        sentences.append(Sentence(tuple(current)))
    return sentences
