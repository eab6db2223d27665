from __future__ import annotations


# Raised when an emit operation is called against a Thing holding a different target.
class TargetMismatchError(TypeError):
    def __init__(self, operation: str, expected: type, actual: object) -> None:
        super().__init__(
            f"{operation} requires a {expected.__name__}, thing holds {type(actual).__name__}"
        )
        self.operation = operation
        self.expected = expected
        self.actual = actual
