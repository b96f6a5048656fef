"""
Parser for labelled distance matrix files.

Expected format:
- CSV or TSV (optionally gzipped) with a header row
- First column holds the observation labels
- Remaining columns hold distances, in the same order as the rows
"""

from __future__ import annotations

import logging
from pathlib import Path

import polars as pl

from hclustkit.core.distance_matrix import DistanceMatrix
from hclustkit.core.exceptions import ShapeError

logger = logging.getLogger(__name__)


class DistanceMatrixParser:
    """
    Reads a labelled distance matrix into a DistanceMatrix.

    Example:
        >>> parser = DistanceMatrixParser(Path("distances.csv"))
        >>> matrix = parser.to_distance_matrix()
        >>> matrix.labels[:2]
        ('sample_a', 'sample_b')
    """

    def __init__(self, path: Path) -> None:
        """
        Args:
            path: Path to distance matrix file (CSV/TSV)
        """
        self.path = path
        self._validate_path()

    def _validate_path(self) -> None:
        """Ensure the matrix file exists."""
        if not self.path.exists():
            msg = f"Distance matrix file not found: {self.path}"
            raise FileNotFoundError(msg)

    def parse(self) -> pl.DataFrame:
        """
        Parse the matrix file into a Polars DataFrame.

        Returns:
            DataFrame with labels as first column and one column per observation

        Raises:
            ValueError: If the file is empty, has null values or the
                row labels do not match the column headers
            ShapeError: If the number of rows and value columns differ
        """
        path_str = str(self.path)
        separator = "\t" if path_str.endswith((".tsv", ".tsv.gz")) else ","

        df = pl.read_csv(self.path, separator=separator, has_header=True)
        self._validate_matrix(df)
        return df

    def _validate_matrix(self, df: pl.DataFrame) -> None:
        if df.is_empty():
            msg = f"Distance matrix is empty: {self.path}"
            raise ValueError(msg)

        label_col = df.columns[0]
        value_columns = df.columns[1:]
        if len(df) != len(value_columns):
            raise ShapeError((len(df), len(value_columns)))

        row_labels = [str(label) for label in df[label_col].to_list()]
        if row_labels != list(value_columns):
            missing_in_rows = set(value_columns) - set(row_labels)
            missing_in_cols = set(row_labels) - set(value_columns)
            msg_parts = ["Distance matrix row/column mismatch:"]
            if missing_in_rows:
                msg_parts.append(f"  Columns missing from rows: {sorted(missing_in_rows)[:5]}")
            if missing_in_cols:
                msg_parts.append(f"  Rows missing from columns: {sorted(missing_in_cols)[:5]}")
            if not missing_in_rows and not missing_in_cols:
                msg_parts.append("  Row labels are not in the same order as the column headers")
            raise ValueError("\n".join(msg_parts))

        if df.select(value_columns).null_count().sum_horizontal()[0] > 0:
            msg = "Distance matrix contains null/missing values"
            raise ValueError(msg)

    def to_distance_matrix(self, check_values: bool = True) -> DistanceMatrix:
        """
        Load the file as a validated DistanceMatrix carrying its labels.

        Args:
            check_values: Reject NaN, infinite or negative distances
        """
        df = self.parse()
        label_col = df.columns[0]
        labels = [str(label) for label in df[label_col].to_list()]
        values = df.select(df.columns[1:]).cast(pl.Float64).to_numpy()
        logger.info(f"Loaded {len(labels)} x {len(labels)} distance matrix from {self.path}")
        return DistanceMatrix(values, labels=labels, check_values=check_values)
