# src/tidy_stats/results.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Any, Dict, List

import numpy as np
import pandas as pd

from .core._data_prep import _validate_replicates


@dataclass
class BootstrapReplicates:
    """
    Container for already-computed bootstrap output.

    ``estimates`` holds each statistic on the original data (t0) and
    ``replicates`` one row per resample (t, R x p). A 1D replicate vector is
    read as a single statistic.
    """
    estimates: Any
    replicates: Any
    terms: Optional[List[str]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.estimates, self.replicates, self.terms = _validate_replicates(
            self.estimates, self.replicates, self.terms
        )

    @property
    def n_replicates(self) -> int:
        return self.replicates.shape[0]

    @property
    def n_statistics(self) -> int:
        return self.estimates.size

    def summary(self) -> str:
        """
        Return a concise multi-line summary of the bootstrap output.
        """
        labels = self.terms or [f"t{i + 1}" for i in range(self.n_statistics)]
        lines = [
            f"Replicates: {self.n_replicates}",
            f"Statistics: {self.n_statistics}",
        ]
        for label, value in zip(labels, self.estimates):
            lines.append(f"{label}: {value:.4f}")
        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Return the replicates in long format: one row per replicate and statistic.
        """
        labels = self.terms or [f"t{i + 1}" for i in range(self.n_statistics)]
        return pd.DataFrame({
            "replicate": np.repeat(np.arange(self.n_replicates), self.n_statistics),
            "term": np.tile(labels, self.n_replicates),
            "value": self.replicates.reshape(-1),
        })
