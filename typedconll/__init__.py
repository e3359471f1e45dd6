from .version import __version__
from .errors import ConlluError, LineSyntaxError, NormalizationError, StructureError
from .sentences import Sentence, ConlluParser, parse_file, parse_files, parse_text
