from .data import Sentence
from .segment import segment
from .parser import ConlluParser, LineError, parse_file, parse_files, parse_text
from .utils import remove_comments, remove_supertokens, remove_ellipses
from .table import to_dataframe
from .graph import dependency_graph, is_tree
