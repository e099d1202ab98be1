"""Exceptions raised by the color engine."""

class ColorEngineError(Exception):
    """Base class for color engine errors."""

class InvalidColorError(ColorEngineError, ValueError):
    """A color string that was required to parse did not."""

    def __init__(self, text: str):
        super().__init__(f"Invalid CSS color: {text!r}")
        self.text = text

class UnknownBlendMethodError(ColorEngineError, ValueError):
    """Blend method is not one of rgb, hsl, lab, cmyk."""

class ContractViolation(ColorEngineError, AssertionError):
    """Caller broke a precondition (empty grid, non-square diagonal, ...)."""
