"""
Console rendering of the cross-directory dependency usage ranking.

Functions here return plain text lines; the CLI decides how to print them.
"""

from typing import Dict, List

from diranalyzer.schemas import DependencyTally
from diranalyzer.utils import round_half_up

RANKING_BAR_LENGTH = 30
RULE = '─' * 65


def ranking_bar(count: int, max_count: int, width: int = RANKING_BAR_LENGTH) -> str:
    """Filled/empty bar of ``width`` cells proportional to ``count / max_count``."""
    filled = round_half_up(count / max_count * width) if max_count else 0
    filled = max(0, min(filled, width))
    return '█' * filled + '░' * (width - filled)


def rank_dependencies(tally: Dict[str, DependencyTally]) -> List[tuple]:
    """Tally entries sorted by total usage count, highest first."""
    return sorted(tally.items(), key=lambda item: item[1].count, reverse=True)


def render_ranking(
    tally: Dict[str, DependencyTally],
    total_import_score: int,
    directory_count: int,
) -> List[str]:
    """
    Render the DEPENDENCY USAGE RANKING block.

    Args:
        tally: Cross-directory tally keyed by dependency name
        total_import_score: Sum of the import scores of all analyzed directories
        directory_count: Number of stored directories

    Returns:
        Output lines
    """
    lines = ["", "=== DEPENDENCY USAGE RANKING ===", RULE]

    ranked = rank_dependencies(tally)
    if ranked:
        max_count = ranked[0][1].count
        for index, (name, data) in enumerate(ranked, start=1):
            percentage = data.count / max_count * 100 if max_count else 0.0
            lines.append(
                f"{str(index).rjust(2)}. {name.ljust(15)} "
                f"{ranking_bar(data.count, max_count)} {data.count} ({percentage:.1f}%)"
            )
            lines.append(f"    v{', '.join(data.versions)} | {len(data.dirs)} dirs")

    lines.append(RULE)

    average_import_score = total_import_score / directory_count if directory_count else 0.0
    lines.append("")
    lines.append(f"Total Dependencies: {len(tally)} | Import Score: {average_import_score:.2f}")
    return lines
