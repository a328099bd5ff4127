"""
Exception hierarchy for the gacha engine.

Internal conditions (bad solver input, singular chains, unbuilt tables)
carry status 500; caller-facing input problems carry status 400.
"""


class GachaError(Exception):
    status = 500


class DimensionMismatch(GachaError, ValueError):
    """Matrix is not square, or the right-hand side length disagrees."""


class SingularMatrix(GachaError, ArithmeticError):
    """A pivot of exactly zero was selected during elimination."""


class Uninitialized(GachaError, RuntimeError):
    """An expectation table was read before it was built."""


class UnsupportedCombination(GachaError, LookupError):
    status = 400

    def __init__(self, key):
        self.key = key
        super().__init__(f"unsupported game/pool combination: {key}")


class InvalidRequest(GachaError, ValueError):
    status = 400
