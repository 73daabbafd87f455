# src/tidy_stats/core/_data_prep.py

import warnings
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


class InvalidInputError(ValueError):
    """
    Raised when an input is not a well-formed table or replicate container.
    """


def _as_summary_frame(table: Any) -> pd.DataFrame:
    """
    Coerce a summary table into a fresh DataFrame.

    Accepts a DataFrame, a mapping of column name -> list-like values of equal
    length, or a list/tuple of row mappings sharing the same keys.

    :param table: the summary table produced by an upstream routine.
    :return: a new DataFrame; the input is never modified.
    :raises InvalidInputError: if ``table`` is None or not rectangular.
    """
    if table is None:
        raise InvalidInputError("Summary table must not be None")

    if isinstance(table, pd.DataFrame):
        return table.copy()

    if isinstance(table, Mapping):
        return _columns_to_frame(table)

    if isinstance(table, (list, tuple)):
        return _rows_to_frame(table)

    raise InvalidInputError(
        f"Summary table must be tabular, got {type(table).__name__}"
    )


def _columns_to_frame(columns: Mapping) -> pd.DataFrame:
    data = {}
    for name, values in columns.items():
        if not pd.api.types.is_list_like(values) or isinstance(values, Mapping):
            raise InvalidInputError(f"Column '{name}' is not a sequence of values")
        # read once; iterators are consumed here
        values = list(values)
        if np.asarray(values, dtype=object).ndim != 1:
            raise InvalidInputError(f"Column '{name}' must be one-dimensional")
        data[name] = values

    lengths = {name: len(values) for name, values in data.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidInputError(f"Columns have unequal lengths: {lengths}")
    return pd.DataFrame(data)


def _rows_to_frame(rows: Sequence) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame()

    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise InvalidInputError(
                f"Row {i} must be a mapping of column name to value, "
                f"got {type(row).__name__}"
            )

    columns = list(rows[0].keys())
    expected = set(columns)
    for i, row in enumerate(rows[1:], start=1):
        if set(row.keys()) != expected:
            raise InvalidInputError(
                f"Row {i} has columns {sorted(map(str, row.keys()))}, "
                f"expected {sorted(map(str, columns))}"
            )
    return pd.DataFrame([[row[col] for col in columns] for row in rows], columns=columns)


def _check_conf_level(conf_level: float) -> None:
    """
    Ensure a confidence level lies strictly between 0 and 1.

    :raises ValueError: otherwise.
    """
    if not 0.0 < conf_level < 1.0:
        raise ValueError(f"conf_level must be between 0 and 1, got {conf_level}")


def _validate_replicates(
    estimates: Any,
    replicates: Any,
    terms: Optional[Sequence[str]] = None,
) -> Tuple[np.ndarray, np.ndarray, Optional[List[str]]]:
    """
    Check bootstrap output shapes and return float arrays.

    :param estimates: statistics on the original data, length p.
    :param replicates: R x p replicate matrix (a 1-D vector is read as R x 1).
    :param terms: optional p statistic names.
    :return: (t0, t, terms) with t0 of shape (p,) and t of shape (R, p).
    :raises InvalidInputError: on any shape mismatch.
    """
    try:
        t0 = np.atleast_1d(np.asarray(estimates, dtype=float))
        t = np.asarray(replicates, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Bootstrap output must be numeric: {exc}") from exc

    if t0.ndim != 1:
        raise InvalidInputError(f"estimates must be one-dimensional, got shape {t0.shape}")
    if t.ndim == 1:
        t = t[:, None]
    if t.ndim != 2:
        raise InvalidInputError(f"replicates must be 1-D or 2-D, got shape {t.shape}")
    if t.shape[0] == 0:
        raise InvalidInputError("replicates must contain at least one resample")
    if t.shape[1] != t0.size:
        raise InvalidInputError(
            f"replicates have {t.shape[1]} statistics but {t0.size} estimates were given"
        )

    if terms is not None:
        terms = [str(term) for term in terms]
        if len(terms) != t0.size:
            raise InvalidInputError(
                f"{len(terms)} term names given for {t0.size} estimates"
            )
    return t0, t, terms


def _count_missing(
    t: np.ndarray,
    terms: Optional[Sequence[str]] = None,
) -> int:
    """
    Warn about missing replicate values, which are ignored per statistic.

    :return: total number of missing replicate values.
    """
    per_term = np.isnan(t).sum(axis=0)
    n_missing = int(per_term.sum())
    if n_missing > 0:
        labels = terms if terms is not None else [str(i) for i in range(t.shape[1])]
        affected = [labels[i] for i in np.flatnonzero(per_term)]
        warnings.warn(
            f"{n_missing} missing replicate values ignored for statistics {affected}",
            UserWarning,
        )
    return n_missing
