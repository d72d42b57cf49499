"""Overall 0-100 score of a registered directory."""

import math
import time
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

from diranalyzer.analyzers.dependency_analyzer import analyze_dependencies
from diranalyzer.analyzers.file_scanner import FileScanner, count_entries
from diranalyzer.analyzers.import_analyzer import analyze_imports, import_score
from diranalyzer.schemas import DependencyUsage, DirectoryAnalysis, ImportUsage
from diranalyzer.utils import BYTES_PER_MB, SECONDS_PER_DAY

logger = logging.getLogger(__name__)

# Score components
BASE_POINTS = 10
MAX_FILE_POINTS = 30
MAX_SIZE_POINTS = 30
MAX_AGE_POINTS = 30
DAYS_PER_AGE_POINT = 30
POINTS_PER_DEPENDENCY = 3
MAX_DEPENDENCY_POINTS = 15
MAX_IMPORT_POINTS = 15
MAX_SCORE = 100


def creation_time(path: Path) -> float:
    """Creation time of ``path``; falls back to ctime where birth time is not recorded."""
    stat = path.stat()
    return getattr(stat, 'st_birthtime', stat.st_ctime)


def compute_score(
    file_count: int,
    size_mb: float,
    age_days: float,
    dependency_count: int,
    imports: int,
) -> int:
    """
    Combine the directory signals into a score capped at 100.

    Args:
        file_count: Number of top-level entries
        size_mb: Directory size in MB
        age_days: Days since the directory was created
        dependency_count: Number of used dependencies
        imports: Import score (external import declarations)

    Returns:
        Score between 10 and 100
    """
    score = BASE_POINTS
    score += min(file_count, MAX_FILE_POINTS)
    score += min(math.floor(size_mb), MAX_SIZE_POINTS)
    score += max(MAX_AGE_POINTS - math.floor(age_days / DAYS_PER_AGE_POINT), 0)
    score += min(dependency_count * POINTS_PER_DEPENDENCY, MAX_DEPENDENCY_POINTS)
    score += min(imports, MAX_IMPORT_POINTS)
    return min(score, MAX_SCORE)


def analyze_directory(
    dir_path: Union[str, Path],
    dependencies: Optional[List[DependencyUsage]] = None,
    import_map: Optional[Dict[str, ImportUsage]] = None,
) -> DirectoryAnalysis:
    """
    Score a directory from its entry count, size, age, dependencies and imports.

    Any error yields an analysis with the error message and a score of 0.

    Args:
        dir_path: Directory to score
        dependencies: Already computed dependency usage, analyzed here if omitted
        import_map: Already computed import map, analyzed here if omitted
    """
    path = Path(dir_path)
    try:
        file_count = count_entries(path)
        size_mb = FileScanner(path).total_size() / BYTES_PER_MB
        age_days = (time.time() - creation_time(path)) / SECONDS_PER_DAY

        if dependencies is None:
            dependencies = analyze_dependencies(path)
        if import_map is None:
            import_map = analyze_imports(path)
        imports = import_score(import_map)

        score = compute_score(file_count, size_mb, age_days, len(dependencies), imports)

        return DirectoryAnalysis(
            path=str(dir_path),
            file_count=file_count,
            size=f"{size_mb:.2f}",
            dependency_score=dependencies,
            import_score=imports,
            score=score,
        )

    except Exception as e:
        logger.error(f"Error analyzing directory {dir_path}: {e}")
        return DirectoryAnalysis(path=str(dir_path), error=str(e), score=0)
