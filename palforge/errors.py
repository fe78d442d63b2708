"""Error types raised by the dithering engine."""
from __future__ import annotations


class InvalidArgument(ValueError):
    """A precondition of one of the engine components was violated.

    Attributes
    ----------
    component : str
        Name of the component whose boundary rejected the input
        (``"bayer"``, ``"tiler"``, ``"quantizer"`` or ``"pipeline"``).
    """

    def __init__(self, component: str, message: str) -> None:
        self.component = component
        super().__init__(f"{component}: {message}")
