"""Module-level constants shared by the algorithms package."""

FASTMATH = False  # Global flag for Numba's fastmath option

# Names used when rendering monomials, one per variable slot
VARIABLE_NAMES = ("x", "y", "z", "w", "t", "k")

# numpy dtype kinds handled by the compiled matrix kernel; everything else
# is stored as ``object`` and multiplied in Python
NUMERIC_KINDS = "iufc"
