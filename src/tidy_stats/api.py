# src/tidy_stats/api.py

from typing import Any

import pandas as pd
import jax.numpy as jnp

from .core._data_prep import InvalidInputError, _as_summary_frame, _check_conf_level, _count_missing
from .core._columns import _rename_columns
from .core._contrasts import _has_contrast_column, _split_contrast
from .core._bootstrap import _ConfMethod, bootstrap_bias, bootstrap_se, bootstrap_ci
from .results import BootstrapReplicates


def normalize(summary_table: Any) -> pd.DataFrame:
    """
    Turn a model summary table into a canonical tidy DataFrame.

    A "contrast" column whose values all read "A - B" is split into
    ``level1``/``level2``; then known columns are renamed (``emmean`` ->
    ``estimate``, ``SE`` -> ``std.error``, ``lower.CL`` -> ``conf.low``,
    ``upper.CL`` -> ``conf.high``, ``t.ratio`` -> ``statistic``, ...). Unknown
    columns pass through untouched.

    The table is taken as already summarized; confidence level and other
    summary options are passed to the upstream routine by :func:`tidy_summary`.

    :param summary_table: DataFrame, mapping of columns, or list of row mappings.
    :return: a new DataFrame with the same rows, in the same order.
    :raises InvalidInputError: if ``summary_table`` is None or not tabular.
    """
    # 1. coerce & validate (always a copy)
    df = _as_summary_frame(summary_table)
    # 2. split combined contrast labels
    if _has_contrast_column(df):
        df = _split_contrast(df)
    # 3. canonical column names
    return _rename_columns(df)


def tidy_summary(
    result: Any,
    conf_level: float = 0.95,
    **options: Any,
) -> pd.DataFrame:
    """
    Summarize an estimated-marginal-means style result and normalize it.

    ``result`` must provide ``summary(level=..., **options)`` returning a
    summary table. By convention ``conf_level`` is passed on as ``level``;
    every other keyword goes to ``summary`` unchanged. Neither is checked
    here, and errors raised by ``summary`` are not caught.

    :param result: fitted marginal-means / contrast / reference-grid object.
    :param conf_level: confidence level of the reported intervals.
    :param options: extra keyword arguments for ``result.summary``.
    :return: canonical DataFrame, see :func:`normalize`.
    :raises InvalidInputError: if ``result`` has no ``summary`` method or it
        does not return a table.
    """
    summarize = getattr(result, "summary", None)
    if not callable(summarize):
        raise InvalidInputError(
            f"{type(result).__name__} object does not provide a summary() method"
        )
    return normalize(summarize(level=conf_level, **options))


def tidy_bootstrap(
    boot: BootstrapReplicates,
    conf_int: bool = False,
    conf_level: float = 0.95,
    conf_method: _ConfMethod = "perc",
) -> pd.DataFrame:
    """
    One row per bootstrapped statistic: estimate, bias, standard error and,
    optionally, a confidence interval.

    :param boot: original estimates and replicate matrix.
    :param conf_int: whether to add ``conf.low`` / ``conf.high``.
    :param conf_level: interval coverage.
    :param conf_method: "perc", "basic" or "norm".
    :return: DataFrame with columns term (if named), statistic, bias,
        std.error[, conf.low, conf.high].
    :raises InvalidInputError: if ``boot`` is not a BootstrapReplicates.
    :raises ValueError: on an unknown ``conf_method`` or bad ``conf_level``.
    """
    if not isinstance(boot, BootstrapReplicates):
        raise InvalidInputError(
            f"Expected BootstrapReplicates, got {type(boot).__name__}"
        )
    if conf_int:
        _check_conf_level(conf_level)
        if conf_method not in ("perc", "basic", "norm"):
            raise ValueError(f"Unknown bootstrap CI method: {conf_method}")

    # 1. missing replicates are ignored per statistic
    _count_missing(boot.replicates, boot.terms)
    t0 = jnp.asarray(boot.estimates)
    t = jnp.asarray(boot.replicates)

    # 2. point summaries
    ret = pd.DataFrame({
        "statistic": boot.estimates,
        "bias": [float(b) for b in bootstrap_bias(t0, t)],
        "std.error": [float(s) for s in bootstrap_se(t)],
    })
    if boot.terms is not None:
        ret.insert(0, "term", boot.terms)

    # 3. interval
    if conf_int:
        lower, upper = bootstrap_ci(t0, t, conf_level=conf_level, method=conf_method)
        ret["conf.low"] = [float(x) for x in lower]
        ret["conf.high"] = [float(x) for x in upper]
    return ret
