"""
Score reports for engine output.

Summarizes batches of compatibility or interaction scores so a planner
can see how a guest list scores as a whole:
1. Score distribution statistics (mean, spread, quantiles)
2. A ranked tabular view of pairwise compatibility

Reports describe the engine's scores; they do not measure how well the
scores predict real interactions.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from ..compatibility import CompatibilityConfig, compute_pair_scores, shared_tags
from ..profiles import normalize_guests
from ..profiles.normalizer import GuestInput

logger = logging.getLogger(__name__)

DEFAULT_QUANTILES = (0.1, 0.25, 0.5, 0.75, 0.9)

COMPATIBILITY_COLUMNS = ["pair_id", "guest_a", "guest_b", "score", "shared_interests"]


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 0.2, "p50": 0.5, "p90": 0.8}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class ScoreReport:
    """
    Distribution report for one kind of score.

    Attributes:
        score_name: What was scored (e.g. "compatibility")
        distribution_stats: Distribution statistics
        additional_metrics: Free-form extra metrics
    """
    score_name: str
    distribution_stats: ScoreDistributionStats
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score_name": self.score_name,
            "distribution_stats": self.distribution_stats.to_dict(),
            "additional_metrics": self.additional_metrics
        }

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved score report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        stats = self.distribution_stats
        lines = [
            f"Score Report: {self.score_name}",
            "=" * 50,
            "",
            f"Score Distribution ({stats.count} scores):",
            f"  Mean: {stats.mean:.4f}",
            f"  Std:  {stats.std:.4f}",
            f"  Min:  {stats.min:.4f}",
            f"  Max:  {stats.max:.4f}",
        ]

        for q_name, q_value in stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.4f}")

        for name, value in self.additional_metrics.items():
            lines.append(f"  {name}: {value}")

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: Sequence[float] = DEFAULT_QUANTILES
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Compatibility or interaction scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance (all zeros for no scores)
    """
    values = np.asarray(scores, dtype=float)

    if values.size == 0:
        return ScoreDistributionStats(
            count=0, mean=0.0, std=0.0, min=0.0, max=0.0,
            quantiles={f"p{int(q * 100)}": 0.0 for q in quantiles}
        )

    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(values, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        count=int(values.size),
        mean=float(np.mean(values)),
        std=float(np.std(values)),
        min=float(np.min(values)),
        max=float(np.max(values)),
        quantiles=quantile_dict
    )


def compatibility_frame(
    guests: Iterable[GuestInput],
    config: Optional[CompatibilityConfig] = None
) -> pd.DataFrame:
    """
    Ranked table of pairwise compatibility.

    Rows are sorted by descending score with a stable sort, so equal
    scores keep natural pair order, matching pairing selection.

    Args:
        guests: Raw guest mappings or normalized GuestProfiles
        config: Compatibility configuration (defaults if omitted)

    Returns:
        DataFrame with columns pair_id, guest_a, guest_b, score, shared_interests
    """
    profiles = normalize_guests(guests)
    indices_a, indices_b, scores = compute_pair_scores(profiles, config)

    rows = []
    for a, b, score in zip(indices_a, indices_b, scores):
        guest_a, guest_b = profiles[a], profiles[b]
        rows.append({
            "pair_id": f"{guest_a.guest_id}_{guest_b.guest_id}",
            "guest_a": guest_a.guest_id,
            "guest_b": guest_b.guest_id,
            "score": float(score),
            "shared_interests": len(shared_tags(guest_a.interests, guest_b.interests)),
        })

    df = pd.DataFrame(rows, columns=COMPATIBILITY_COLUMNS)
    return df.sort_values("score", ascending=False, kind="stable").reset_index(drop=True)


def create_score_report(
    score_name: str,
    scores: Sequence[float],
    quantiles: Sequence[float] = DEFAULT_QUANTILES,
    additional_metrics: Optional[Dict[str, Any]] = None
) -> ScoreReport:
    """
    Create a distribution report for a batch of scores.

    Args:
        score_name: What was scored
        scores: The scores
        quantiles: Quantiles to compute
        additional_metrics: Extra metrics to attach

    Returns:
        ScoreReport instance
    """
    return ScoreReport(
        score_name=score_name,
        distribution_stats=compute_score_distribution_stats(scores, quantiles),
        additional_metrics=dict(additional_metrics or {})
    )


def create_compatibility_report(
    guests: Iterable[GuestInput],
    config: Optional[CompatibilityConfig] = None,
    top_k: int = 5
) -> ScoreReport:
    """
    Distribution report over all pairwise compatibility scores.

    The top_k highest-scoring pair ids are attached as an extra metric.
    """
    frame = compatibility_frame(guests, config)
    report = create_score_report(
        "compatibility",
        frame["score"].to_numpy(),
        additional_metrics={"top_pairs": frame["pair_id"].head(top_k).tolist()}
    )
    logger.info(f"Compatibility report over {report.distribution_stats.count} pairs: "
                f"mean={report.distribution_stats.mean:.4f}")
    return report


def summarize_interaction_scores(scores: List[float]) -> ScoreReport:
    """Distribution report over per-guest interaction scores (0-100)."""
    return create_score_report("interaction", scores)
