from .constant import ConstantTerm
from .polynomial import PolynomialTerm
from .function import FunctionTerm, LogTerm
from .least_squares import LeastSquaresTerm

__all__ = [
    "ConstantTerm",
    "PolynomialTerm",
    "FunctionTerm",
    "LogTerm",
    "LeastSquaresTerm",
]
