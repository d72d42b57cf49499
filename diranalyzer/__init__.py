"""
Directory Analyzer - heuristic importance scores for local project directories.

Scores each registered directory from its entry count, size and age, and from
how often the dependencies declared in its package.json are actually used by
its source code. Dependencies are ranked across all registered directories.

Usage:
    from diranalyzer import analyze_directory, analyze_dependencies

    analysis = analyze_directory("~/code/my-app")
    print(analysis.score)
"""

__version__ = "0.1.0"

from .analyzers import (
    FileScanner,
    ImportAnalysisError,
    analyze_dependencies,
    analyze_imports,
    create_bar_chart,
)
from .schemas import (
    DependencyTally,
    DependencyUsage,
    DirectoryAnalysis,
    ImportUsage,
    PackageScore,
)
from .scoring import ScoringError, analyze_directory, calculate_score
from .store import DirectoryStore, expand_path

__all__ = [
    "__version__",
    "FileScanner",
    "ImportAnalysisError",
    "analyze_dependencies",
    "analyze_imports",
    "create_bar_chart",
    "DependencyTally",
    "DependencyUsage",
    "DirectoryAnalysis",
    "ImportUsage",
    "PackageScore",
    "ScoringError",
    "analyze_directory",
    "calculate_score",
    "DirectoryStore",
    "expand_path",
]
