"""
Custom exceptions for the algorithms package.
"""

class PolymatError(Exception):
    """Base exception for polymat errors.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class VariableIndexError(PolymatError, IndexError):
    """Raised when a variable index does not address a slot of the polynomial.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ArityError(PolymatError, ValueError):
    """Raised when an operation needs a single-variable polynomial.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class RenderError(PolymatError, ValueError):
    """Raised when a monomial cannot be rendered.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConversionError(PolymatError, ValueError):
    """Raised when converting to or from sympy fails.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)
