"""Exception hierarchy for Sightforge."""


class SightforgeError(Exception):
    """Base exception for all Sightforge errors."""

    pass


class InputError(SightforgeError):
    """Errors related to the input outline."""

    pass


class MalformedInputError(InputError):
    """The SVG input has no usable path or a command has the wrong arity."""

    def __init__(self, reason: str, segment: str | None = None) -> None:
        self.reason = reason
        self.segment = segment
        message = f"Malformed SVG input: {reason}"
        if segment is not None:
            message += f" (in '{segment}')"
        super().__init__(message)


class GeometryError(SightforgeError):
    """Errors in geometric calculations."""

    pass


class DegenerateGeometryError(GeometryError):
    """Line set cannot be scaled into the sight frame."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Cannot fit lines to sight frame: bounding box is {width} x {height}"
        )


class OutputError(SightforgeError):
    """Errors related to writing output files."""

    pass


class SightWriteError(OutputError):
    """Error writing a sight or preview file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class BudgetExhaustedWarning(UserWarning):
    """Explicit lines already use the whole line budget.

    Conversion continues, but every curve is dropped from the output.
    """

    def __init__(self, line_count: int, max_lines: int) -> None:
        self.line_count = line_count
        self.max_lines = max_lines
        super().__init__(
            f"{line_count} explicit lines leave no budget for curves "
            f"(limit {max_lines}); all curves dropped"
        )
