import logging
import os
import re
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from .data import Sentence
from .segment import segment
from ..errors import ConlluError
from ..lines import Line, read_line

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class LineError:
    """A line that was dropped, with where it was and why."""
    line_number: int
    text: str
    message: str


def split_lines(text: str) -> list[str]:
    """Split on \\r\\n, \\r or \\n; a final terminator does not open a new line."""
    if not text:
        return []
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _read(text: str) -> Line | LineError | None:
    # line_number is filled in by the caller
    try:
        return read_line(text)
    except ConlluError as e:
        return LineError(line_number=0, text=text, message=e.message)


class ConlluParser:
    """Read a CoNLL-U file into a list of sentences."""

    def __init__(self, path: str | None = None, strict: bool = False, n_jobs: int = 1, encoding: str = "utf-8"):
        """
        :param path: Path to a .conllu file
        :param strict: Raise on the first malformed line instead of dropping it
        :param n_jobs: Number of worker processes for the line parsing step
        :param encoding: File encoding
        """
        self.path = path
        self.strict = strict
        self.n_jobs = n_jobs
        self.encoding = encoding
        self.errors: list[LineError] = []

    def __call__(self) -> list[Sentence]:
        if self.path is None:
            raise ValueError("No input for path")
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"File doesn't exist: {self.path}")
        logger.info("Parsing %s", self.path)
        with open(self.path, "r", encoding=self.encoding, newline="") as in_f:
            sentences = self.parse_text(in_f.read())
        logger.info("%s: %d sentences, %d malformed lines", self.path, len(sentences), len(self.errors))
        return sentences

    def parse_text(self, text: str) -> list[Sentence]:
        self.errors = []
        raw_lines = split_lines(text)
        lines, line_numbers, after_gap = [], [], []
        dropped = False
        for line_number, result in enumerate(self._read_all(raw_lines), start=1):
            if result is None:
                continue
            if isinstance(result, LineError):
                self._report(LineError(line_number, result.text, result.message))
                dropped = True
                continue
            lines.append(result)
            line_numbers.append(line_number)
            after_gap.append(dropped)
            dropped = False
        logger.debug("%d lines read, %d kept, %d dropped", len(raw_lines), len(lines), len(self.errors))
        return segment(lines, line_numbers=line_numbers, after_gap=after_gap)

    def _read_all(self, raw_lines: list[str]):
        if self.n_jobs > 1 and len(raw_lines) > 1:
            chunksize = max(1, len(raw_lines) // (self.n_jobs * 4))
            with ProcessPoolExecutor(max_workers=self.n_jobs) as executor:
                return list(executor.map(_read, raw_lines, chunksize=chunksize))
        return [_read(line) for line in raw_lines]

    def _report(self, error: LineError):
        if self.strict:
            # re-raise with column info
            try:
                read_line(error.text)
            except ConlluError as e:
                e.line_number = error.line_number
                raise
        logger.warning("Skipping line %d: %s: %r", error.line_number, error.message, error.text)
        self.errors.append(error)


def parse_text(text: str, **kwargs) -> list[Sentence]:
    return ConlluParser(**kwargs).parse_text(text)


def parse_file(path: str, **kwargs) -> list[Sentence]:
    return ConlluParser(path, **kwargs)()


def parse_files(paths: list[str], **kwargs) -> list[list[Sentence]]:
    """
    Parse several files. All paths are checked before any parsing starts.
    :raises FileNotFoundError: naming the first missing path
    """
    for path in paths:
        if not os.path.exists(path):
            raise FileNotFoundError(f"File doesn't exist: {path}")
    return [parse_file(path, **kwargs) for path in paths]
