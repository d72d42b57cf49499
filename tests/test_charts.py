import unittest

from diranalyzer.reporting.charts import RULE, rank_dependencies, ranking_bar, render_ranking
from diranalyzer.schemas import DependencyTally, DependencyUsage


class TestRankingBar(unittest.TestCase):

    def test_proportional_fill(self):
        self.assertEqual(ranking_bar(5, 10), "█" * 15 + "░" * 15)
        self.assertEqual(ranking_bar(10, 10), "█" * 30)
        self.assertEqual(ranking_bar(0, 10), "░" * 30)

    def test_zero_max_is_empty(self):
        self.assertEqual(ranking_bar(0, 0), "░" * 30)


class TestRenderRanking(unittest.TestCase):

    def make_tally(self):
        tally = {}
        tally.setdefault("lodash", DependencyTally()).add(
            DependencyUsage(name="lodash", version="4.17.21", count=5), "/a")
        for version, dir_path in [("18.2.0", "/a"), ("17.0.2", "/b"), ("18.2.0", "/b")]:
            tally.setdefault("react", DependencyTally()).add(
                DependencyUsage(name="react", version=version, count=4), dir_path)
        return tally

    def test_tally_accumulates_distinct_versions_and_dirs(self):
        react = self.make_tally()["react"]
        self.assertEqual(react.count, 12)
        self.assertEqual(react.versions, ["18.2.0", "17.0.2"])
        self.assertEqual(react.dirs, ["/a", "/b"])

    def test_ranked_by_total_count(self):
        self.assertEqual([name for name, _ in rank_dependencies(self.make_tally())], ["react", "lodash"])

    def test_render(self):
        lines = render_ranking(self.make_tally(), total_import_score=7, directory_count=2)
        self.assertEqual(lines, [
            "",
            "=== DEPENDENCY USAGE RANKING ===",
            RULE,
            " 1. react           " + "█" * 30 + " 12 (100.0%)",
            "    v18.2.0, 17.0.2 | 2 dirs",
            # 5 / 12 * 30 = 12.5
            " 2. lodash          " + "█" * 13 + "░" * 17 + " 5 (41.7%)",
            "    v4.17.21 | 1 dirs",
            RULE,
            "",
            "Total Dependencies: 2 | Import Score: 3.50",
        ])

    def test_render_empty_tally(self):
        lines = render_ranking({}, total_import_score=0, directory_count=1)
        self.assertEqual(lines, [
            "",
            "=== DEPENDENCY USAGE RANKING ===",
            RULE,
            RULE,
            "",
            "Total Dependencies: 0 | Import Score: 0.00",
        ])

    def test_rule_width(self):
        self.assertEqual(len(RULE), 65)


if __name__ == '__main__':
    unittest.main()
