"""Example script: building polynomials and evaluating them at matrices.

Run with
    python examples/matrix_polynomial.py
"""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from polymat import SquareMatrix, power, variable
from polymat.utils.log_config import logger


def main() -> None:
    """Expand, substitute and evaluate a few polynomials."""
    x, y, z = variable(1), variable(2), variable(3)

    a = 1 + x * y + y * z + z
    logger.info(f"a            = {a}")
    logger.info(f"a(1 + x, 1)  = {a(1 + x, 1)}")
    logger.info(f"a(1)(13, 1)(53, 2) = {a(1)(13, 1)(53, 2).get_const()}")

    q = power(1 + 3 * x, 2)
    logger.info(f"(1 + 3x)^2   = {q}")

    p = 5 + 10 * x + power(x, 3)
    m = SquareMatrix([[1, 1, 1], [1, 1, 1], [2, 2, 2]])
    logger.info(f"p            = {p}")
    logger.info(f"p(M) =\n{p(m)}")


if __name__ == "__main__":
    main()
