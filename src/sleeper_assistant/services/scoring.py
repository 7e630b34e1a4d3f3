"""
Fantasy point scoring from raw stat categories.

Sleeper leagues weight each stat category independently
(``scoring_settings``). Projection rows carry raw categories plus
pre-aggregated totals (``pts_ppr``, ``pts_half_ppr``, ``pts_std``) that are
used when none of the weighted categories are present.
"""

from collections.abc import Iterable, Mapping

from sleeper_assistant.models import ProjectionRow

SCORED_CATEGORIES = (
    "pass_yd",
    "pass_td",
    "pass_int",
    "pass_2pt",
    "rush_yd",
    "rush_td",
    "rush_2pt",
    "rec",
    "rec_yd",
    "rec_td",
    "rec_2pt",
    "fum_lost",
    "fum",
    "fum_rec",
    "fum_rec_td",
)


def compute_points(
    stats: Mapping[str, float],
    weights: Mapping[str, float],
    totals: Mapping[str, float] | None = None,
) -> float:
    """
    Score raw stats with a league's category weights.

    Args:
        stats: Raw stat categories for one player
        weights: League scoring settings (category -> points per unit)
        totals: Pre-aggregated point fields; defaults to ``stats``

    Returns:
        Unrounded fantasy points
    """
    points = 0.0
    for category in SCORED_CATEGORIES:
        weight = weights.get(category)
        value = stats.get(category)
        if weight and value:
            points += value * weight

    if points == 0:
        totals = stats if totals is None else totals
        rec = weights.get("rec")
        if rec == 1:
            points = totals.get("pts_ppr") or 0.0
        elif rec == 0.5:
            points = totals.get("pts_half_ppr") or 0.0
        else:
            points = totals.get("pts_std") or 0.0

    return float(points)


def scoring_format(weights: Mapping[str, float]) -> str:
    """Projection ordering for a league: ppr, half_ppr or std."""
    rec = weights.get("rec")
    if rec == 0.5:
        return "half_ppr"
    if rec == 0:
        return "std"
    return "ppr"


def projection_points(
    rows: Iterable[ProjectionRow], weights: Mapping[str, float]
) -> dict[str, float]:
    """Score every projection row, keyed by player id."""
    return {
        row.player_id: compute_points(row.stats, weights)
        for row in rows
        if row.player_id and row.stats
    }
