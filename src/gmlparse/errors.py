from __future__ import annotations


class GMLError(Exception):
    """Base error for GML parsing and graph extraction, with a short code."""

    def __init__(self, message: str, code: str = "EGML") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class GMLSyntaxError(GMLError):
    """The grammar engine rejected the document."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message, code="ESYNTAX")
        self.line = line
        self.column = column


class MalformedTreeError(GMLError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMALFORMED")


class MissingKeyError(GMLError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMISSING_KEY")


class EmptyValueError(GMLError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="EEMPTY_VALUE")


class NumberFormatError(GMLError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="ENUMBER")


class MissingGraphError(GMLError):
    def __init__(self, message: str = "Document has no 'graph' attribute") -> None:
        super().__init__(message, code="EMISSING_GRAPH")


class MissingFieldError(GMLError):
    def __init__(self, name: str, owner: str | None = None) -> None:
        where = f" from {owner}" if owner else ""
        super().__init__(f"Missing required field '{name}'{where}", code="EMISSING_FIELD")
        self.name = name
        self.owner = owner


class TypeMismatchError(GMLError):
    def __init__(self, name: str, expected: str, actual: object) -> None:
        super().__init__(
            f"Field '{name}': expected {expected} but found {actual!r}",
            code="ETYPE",
        )
        self.name = name
        self.expected = expected
        self.actual = actual
