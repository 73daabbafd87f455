"""
tidy_stats.core
---------------
Kernels behind the tidiers.

Submodules:
  - _data_prep   : input validation, coercion to DataFrame / arrays, InvalidInputError
  - _columns     : the source -> canonical column rename map
  - _contrasts   : splitting "A - B" contrast labels into level1 / level2
  - _bootstrap   : bias, standard error and intervals of bootstrap replicates
"""

__all__ = [
    "_data_prep",
    "_columns",
    "_contrasts",
    "_bootstrap",
]

# re-export key functions for convenient import
from ._data_prep  import InvalidInputError, _as_summary_frame, _check_conf_level, \
                         _validate_replicates, _count_missing
from ._columns    import RENAME_MAP, canonical_name, _rename_columns
from ._contrasts  import _has_contrast_column, _split_contrast
from ._bootstrap  import (
    bootstrap_bias,
    bootstrap_se,
    percentile_ci,
    basic_ci,
    normal_ci,
    bootstrap_ci,
)
