# src/tidy_stats/__init__.py

"""
tidy_stats
==========

Tidiers that turn statistical model output into uniform pandas DataFrames
with standard column names, so plotting and analysis code can treat every
result the same way. Features:

- Estimated-marginal-means, contrast and reference-grid summaries renamed to
  estimate / std.error / conf.low / conf.high / statistic
- "A - B" contrast labels split into level1 / level2
- Bootstrap output summarized as estimate, bias, standard error and
  percentile, basic or normal intervals
"""

__version__ = "0.1.0"

# High-level API
from .api import normalize, tidy_summary, tidy_bootstrap

# Result classes
from .results import BootstrapReplicates

# Errors and vocabulary
from .core._data_prep import InvalidInputError
from .core._columns import RENAME_MAP

__all__ = [
    "normalize",
    "tidy_summary",
    "tidy_bootstrap",
    "BootstrapReplicates",
    "InvalidInputError",
    "RENAME_MAP",
]
