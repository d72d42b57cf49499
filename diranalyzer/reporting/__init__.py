"""Text rendering for analysis reports."""

from .charts import ranking_bar, rank_dependencies, render_ranking

__all__ = ["ranking_bar", "rank_dependencies", "render_ranking"]
