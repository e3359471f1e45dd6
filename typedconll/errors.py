class ConlluError(ValueError):
    """Base class for everything that goes wrong while reading CoNLL-U."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class LineSyntaxError(ConlluError):
    """A line matches none of the line alternatives."""

    def __init__(self, message: str, column: str | None = None, value: str | None = None,
                 line_number: int | None = None):
        super().__init__(message, line_number=line_number)
        self.column = column
        self.value = value


class NormalizationError(ConlluError):
    """A column parsed, but cannot be turned into its typed value (e.g. HEAD=1-2)."""

    def __init__(self, message: str, column: str | None = None, value: str | None = None,
                 line_number: int | None = None):
        super().__init__(message, line_number=line_number)
        self.column = column
        self.value = value


class StructureError(ConlluError):
    """A comment shows up in the middle of a sentence."""

    def __init__(self, message: str, line=None, token_id=None, line_number: int | None = None):
        super().__init__(message, line_number=line_number)
        self.line = line
        self.token_id = token_id
