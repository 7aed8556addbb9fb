"""
Power-law fitness evaluator.

Scores a slope/intercept genome by how well ``y = 10**b * x**m`` fits a set of
paired measurements. The fit is measured in log-log space, where the power
law is the straight line ``log10(y) = m * log10(x) + b``.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np

from src.evolution.core.genome import ParameterGenome
from src.evolution.fitness.base import FitnessEvaluator, FitnessMetrics


class PowerLawFitness(FitnessEvaluator):
    """
    Fitness of a power-law fit to paired positive measurements.

    The evaluator keeps a read-only copy of the dataset. The score is
    ``1 / (1 + mse)`` where ``mse`` is the mean squared residual in log-log
    space, so it lies in ``(0, 1]`` and equals 1 for an exact fit.
    """

    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        slope: str = "m",
        intercept: str = "b",
        config: Optional[Dict[str, Any]] = None
    ):
        super().__init__(config)
        x = np.array(x, dtype=float)
        y = np.array(y, dtype=float)

        if x.ndim != 1 or x.shape != y.shape:
            raise ValueError(f"x and y must be 1-D and the same length, got {x.shape} and {y.shape}")
        if x.size == 0:
            raise ValueError("Dataset is empty")
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValueError("Dataset contains non-finite values")
        if np.any(x <= 0) or np.any(y <= 0):
            raise ValueError("Power-law fitting needs strictly positive x and y")

        self.log_x = np.log10(x)
        self.log_y = np.log10(y)
        self.log_x.setflags(write=False)
        self.log_y.setflags(write=False)
        self.slope = slope
        self.intercept = intercept

    def _coefficients(self, genome: ParameterGenome):
        return float(genome[self.slope]), float(genome[self.intercept])

    def residuals(self, genome: ParameterGenome) -> np.ndarray:
        """Log-space residuals of the genome's line against the dataset."""
        m, b = self._coefficients(genome)
        return self.log_y - (m * self.log_x + b)

    def evaluate(self, genome: ParameterGenome) -> float:
        mse = float(np.mean(self.residuals(genome) ** 2))
        if not np.isfinite(mse):
            return 0.0
        return 1.0 / (1.0 + mse)

    def calculate_metrics(self, genome: ParameterGenome) -> FitnessMetrics:
        residuals = self.residuals(genome)
        mse = float(np.mean(residuals ** 2))
        total = float(np.sum((self.log_y - self.log_y.mean()) ** 2))
        r_squared = 1.0 - float(np.sum(residuals ** 2)) / total if total > 0 else float("nan")
        return FitnessMetrics(
            score=self.evaluate(genome),
            details={
                "mse": mse,
                "r_squared": r_squared,
                "points": int(self.log_x.size),
            }
        )

    def predict(self, genome: ParameterGenome, x: Any) -> np.ndarray:
        """Evaluate the genome's power law at ``x``."""
        m, b = self._coefficients(genome)
        return 10.0 ** b * np.asarray(x, dtype=float) ** m
