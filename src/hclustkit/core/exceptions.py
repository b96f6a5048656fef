"""
Custom exceptions with actionable guidance.

Provides specific error types for invalid distance matrices and
unsupported clustering options, each with a suggestion for resolution.
"""

from __future__ import annotations


class HclustError(Exception):
    """Base exception for hclustkit errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class InputMatrixError(HclustError):
    """Base class for distance matrix errors."""


class ShapeError(InputMatrixError):
    """Raised when the distance matrix is not square."""

    def __init__(self, shape: tuple[int, ...] | None):
        if shape is None:
            detail = "rows have unequal lengths"
        elif len(shape) == 2:
            detail = f"{shape[0]} rows x {shape[1]} columns"
        else:
            detail = f"{len(shape)}-dimensional array of shape {shape}"
        super().__init__(
            message=f"Distance matrix is not square: {detail}",
            suggestion=(
                "Pass the full n x n matrix of pairwise distances, not a condensed "
                "vector or a feature matrix."
            ),
        )
        self.shape = shape


class AsymmetryError(InputMatrixError):
    """Raised when d[i, j] != d[j, i] for some pair."""

    def __init__(self, row: int, col: int, value: float, mirrored: float):
        super().__init__(
            message=(
                f"Distance matrix is not symmetric: d[{row}, {col}] = {value!r} "
                f"but d[{col}, {row}] = {mirrored!r}"
            ),
            suggestion=(
                "Symmetrize the matrix before clustering, e.g. (d + d.T) / 2, "
                "if the asymmetry is numerical noise."
            ),
        )
        self.row = row
        self.col = col


class DistanceValueError(InputMatrixError):
    """Raised when off-diagonal distances are NaN or negative."""

    def __init__(self, invalid_values: list[tuple[int, int, float]]):
        examples = invalid_values[:3]
        example_str = ", ".join(f"d[{i}, {j}] = {val!r}" for i, j, val in examples)
        super().__init__(
            message=f"Distance matrix contains invalid values (must be >= 0): {example_str}",
            suggestion=(
                "Distances must be non-negative real numbers. Missing pairs (NaN) "
                "must be imputed before clustering."
            ),
        )
        self.invalid_values = invalid_values


class InsufficientInputError(InputMatrixError):
    """Raised when the distance matrix has no observations."""

    def __init__(self, n: int):
        super().__init__(
            message=f"Need at least 1 observation to cluster, got {n}",
            suggestion="Check that the distance matrix was loaded correctly.",
        )
        self.n = n


class ConfigurationError(HclustError):
    """Raised when clustering options are invalid."""


class UnsupportedMethodError(ConfigurationError):
    """Raised when the linkage method tag is not recognized."""

    def __init__(self, method: object, supported: list[str]):
        super().__init__(
            message=f"Unsupported linkage method: {method!r}",
            suggestion=f"Choose one of: {', '.join(supported)}",
        )
        self.method = method
