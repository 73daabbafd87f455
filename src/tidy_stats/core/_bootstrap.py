# src/tidy_stats/core/_bootstrap.py

from typing import Literal, Tuple

import jax
jax.config.update("jax_enable_x64", True)

import jax.numpy as jnp
from scipy.stats import norm as _norm_dist  # for normal quantiles

_ConfMethod = Literal["perc", "basic", "norm"]

# ───────────────────────────────────────────────────────────────────────────────
# Point summaries of the replicate distribution
# ───────────────────────────────────────────────────────────────────────────────

@jax.jit
def bootstrap_bias(t0: jnp.ndarray, t: jnp.ndarray) -> jnp.ndarray:
    """
    Bias of each statistic: mean of the replicates minus the original estimate.

    :param t0: 1D array of original estimates, length p.
    :param t: R x p array of replicates; NaNs are ignored.
    :return: 1D array of biases.
    """
    return jnp.nanmean(t, axis=0) - t0


@jax.jit
def bootstrap_se(t: jnp.ndarray) -> jnp.ndarray:
    """
    Bootstrap standard error: sample standard deviation of each replicate column.
    A column with a single usable replicate gives NaN.
    """
    return jnp.nanstd(t, axis=0, ddof=1)


# ───────────────────────────────────────────────────────────────────────────────
# Confidence intervals
# ───────────────────────────────────────────────────────────────────────────────

def percentile_ci(
    t: jnp.ndarray,
    conf_level: float = 0.95,
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Percentile interval: the alpha/2 and 1 - alpha/2 replicate quantiles.
    """
    alpha = 1.0 - conf_level
    lower = jnp.nanpercentile(t, 100 * (alpha / 2.0), axis=0)
    upper = jnp.nanpercentile(t, 100 * (1.0 - alpha / 2.0), axis=0)
    return lower, upper


def basic_ci(
    t0: jnp.ndarray,
    t: jnp.ndarray,
    conf_level: float = 0.95,
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Basic (reverse percentile) interval: 2*t0 minus the upper/lower quantiles.
    """
    q_lower, q_upper = percentile_ci(t, conf_level)
    return 2.0 * t0 - q_upper, 2.0 * t0 - q_lower


def normal_ci(
    t0: jnp.ndarray,
    t: jnp.ndarray,
    conf_level: float = 0.95,
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Normal approximation interval centred on the bias-corrected estimate.
    """
    z = float(_norm_dist.ppf(1.0 - (1.0 - conf_level) / 2.0))
    center = t0 - bootstrap_bias(t0, t)
    half_width = z * bootstrap_se(t)
    return center - half_width, center + half_width


def bootstrap_ci(
    t0: jnp.ndarray,
    t: jnp.ndarray,
    conf_level: float = 0.95,
    method: _ConfMethod = "perc",
) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Dispatch to a bootstrap interval method.

    :param t0: 1D array of original estimates.
    :param t: R x p array of replicates.
    :param conf_level: interval coverage, e.g. 0.95.
    :param method: one of 'perc', 'basic', 'norm'.
    :return: (lower, upper) 1D arrays.
    :raises ValueError: if method is unrecognized.
    """
    if method == "perc":
        return percentile_ci(t, conf_level)
    elif method == "basic":
        return basic_ci(t0, t, conf_level)
    elif method == "norm":
        return normal_ci(t0, t, conf_level)
    else:
        raise ValueError(f"Unknown bootstrap CI method: {method}")
