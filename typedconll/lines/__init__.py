from .data import (LineKind, RangeId, DecimalId, TokenRef, ParsedLine, CommentLine, WordLine, TokenLine,
                   SuperTokenLine, EllipsisLine, Line, parse_ref, ref_key)
from .grammar import parse_line, is_enhanced_relation
from .normalize import normalize
from .records import build_record, read_line
