from .data import DecimalId, LineKind, ParsedLine, RangeId, parse_ref
from .grammar import UNDERSCORE
from ..errors import NormalizationError


def normalize(parsed: ParsedLine) -> ParsedLine:
    """
    Turn the raw sub-fields of a word line into typed values.
    ID and HEAD become numbers, FEATS/DEPS/MISC become dicts (or None for '_').
    FORM, LEMMA, UPOS, XPOS and DEPREL are kept as they are, literal '_' included.
    Comment lines are returned unchanged.
    :param parsed: Output of ``grammar.parse_line``
    :raises NormalizationError: if a value has the right shape but the wrong type
    """
    if parsed.kind is LineKind.COMMENT:
        return parsed
    fields = dict(parsed.fields)
    fields["id"] = normalize_id(parsed.kind, fields["id"])
    fields["head"] = normalize_head(fields["head"])
    fields["feats"] = fold_pairs(fields["feats"])
    fields["deps"] = fold_pairs(fields["deps"], key=parse_ref)
    fields["misc"] = fold_pairs(fields["misc"])
    return ParsedLine(parsed.kind, fields)


def normalize_id(kind: LineKind, text: str):
    ref = parse_ref(text)
    if kind is LineKind.TOKEN and ref < 1:
        raise NormalizationError(f"token ID must be at least 1, got {text}", column="id", value=text)
    if kind is LineKind.SUPERTOKEN and not 1 <= ref.start < ref.end:
        raise NormalizationError(f"multiword token range must be increasing, got {text}",
                                 column="id", value=text)
    return ref


def normalize_head(text: str) -> int | None:
    if text == UNDERSCORE:
        return None
    ref = parse_ref(text)
    if isinstance(ref, (RangeId, DecimalId)):
        raise NormalizationError(f"HEAD must be an integer, got {text}", column="head", value=text)
    return ref


def fold_pairs(pairs, key=None) -> dict | None:
    """
    Fold a list of (key, value) pairs into a dict, last duplicate wins.
    :param pairs: '_' or list of string pairs
    :param key: Optional conversion applied to every key
    """
    if pairs == UNDERSCORE:
        return None
    if key is None:
        return dict(pairs)
    return {key(k): v for k, v in pairs}
