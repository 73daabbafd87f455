# src/tidy_stats/core/_columns.py

from types import MappingProxyType
from typing import Hashable, Mapping

import pandas as pd

# Source column name -> canonical name. Add entries, never change existing ones.
RENAME_MAP: Mapping[str, str] = MappingProxyType({
    # point estimates (lsmeans, emmeans, ref.grid predictions)
    "lsmean": "estimate",
    "emmean": "estimate",
    "pmmean": "estimate",
    "prediction": "estimate",
    "SE": "std.error",
    "lower.CL": "conf.low",
    "upper.CL": "conf.high",
    "t.ratio": "statistic",
})


def canonical_name(name: Hashable) -> Hashable:
    """
    Canonical name for a source column; unknown names are returned unchanged.
    """
    return RENAME_MAP.get(name, name)


def _rename_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename every known column of ``df`` to its canonical name.

    :param df: summary table.
    :return: a new DataFrame with the same rows and number of columns.
    """
    return df.rename(columns=canonical_name)
