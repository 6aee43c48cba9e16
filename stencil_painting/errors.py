"""Exception hierarchy for stencil generation and compositing.

Every failure the engine can report derives from StencilError so batch
callers can catch one type per item and move on to the next image.
"""

from __future__ import annotations


class StencilError(Exception):
    """Base class for all engine failures."""


class InvalidParameterError(StencilError, ValueError):
    """A size, radius or width parameter is zero or otherwise unusable."""


class DimensionMismatch(StencilError, ValueError):
    def __init__(
        self,
        expected: tuple[int, int],
        actual: tuple[int, int],
        what: str = "image",
        against: str = "Stencil",
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{against} dims {expected[0]}x{expected[1]} != {what} dims {actual[0]}x{actual[1]}"
        )


class InconsistentMaskSize(StencilError, ValueError):
    """Masks in one folder do not share a single (width, height)."""


class UnsupportedMaskFormat(StencilError, ValueError):
    """A mask is not an 8-bit single-channel image without alpha."""


class EmptyMaskFolder(InvalidParameterError):
    """The mask folder contains no images."""


class ImageFormatError(StencilError, ValueError):
    """A pixel buffer or image file does not have the expected layout."""


class UnknownGeneratorError(StencilError, KeyError):
    """No generator is registered for the given spec type."""
