# src/tidy_stats/core/_contrasts.py

from typing import Any, Tuple

import pandas as pd

CONTRAST_COLUMN = "contrast"
LEVEL_COLUMNS = ("level1", "level2")
CONTRAST_SEP = " - "


def _is_pairwise_label(value: Any, sep: str = CONTRAST_SEP) -> bool:
    """
    True if ``value`` is a string made of exactly two parts joined by ``sep``.
    """
    return isinstance(value, str) and value.count(sep) == 1


def _has_contrast_column(df: pd.DataFrame, column: str = CONTRAST_COLUMN) -> bool:
    return column in df.columns


def _split_contrast(
    df: pd.DataFrame,
    column: str = CONTRAST_COLUMN,
    into: Tuple[str, str] = LEVEL_COLUMNS,
    sep: str = CONTRAST_SEP,
) -> pd.DataFrame:
    """
    Replace a combined "A - B" contrast column with two level columns.

    The split is all-or-nothing: if any value is not a pairwise label the
    table is returned unchanged, as it is when the contrast name is not
    unique. The level columns are inserted where the contrast column was,
    and the original column is dropped.

    :param df: summary table with a contrast column.
    :param column: name of the combined label column.
    :param into: names of the left and right level columns.
    :param sep: literal separator between the two levels.
    :return: a new DataFrame, or ``df`` itself when no split applies.
    """
    if any(name in df.columns for name in into):
        return df
    if list(df.columns).count(column) != 1:
        return df

    loc = df.columns.get_loc(column)
    labels = df.iloc[:, loc].tolist()
    if not all(_is_pairwise_label(label, sep) for label in labels):
        return df

    parts = [label.split(sep) for label in labels]
    out = df.drop(columns=column)
    for offset, name in enumerate(into):
        values = pd.Series([p[offset] for p in parts], index=df.index, dtype=object)
        out.insert(loc + offset, name, values)
    return out
