"""
Weighted per-package importance scores.

Combines three signals for every package seen in a project:
- dependency usage counts from the manifest/source correlation
- whether the package is declared directly in the manifest
- how often it is imported, with a bonus for imports from entry points
"""

from collections.abc import Mapping, Sequence
from typing import Dict, List, Tuple, Union
import logging

from pydantic import ValidationError

from diranalyzer.schemas import ImportData, PackageScore, PackageScoreDetails
from diranalyzer.utils import round_half_up

logger = logging.getLogger(__name__)


class ScoringError(ValueError):
    """Raised when the score calculator receives malformed input."""


WEIGHTS = {
    "direct_dependency": 30,  # base score for packages declared in the manifest
    "dependency_usage": 20,   # per 10 references found in source
    "import_count": 25,       # per 5 import declarations
    "entry_point_bonus": 25,  # imported from an entry point file
}


def _validate_dep_data(dep_data) -> List[Tuple[str, int]]:
    if isinstance(dep_data, (str, bytes)) or not isinstance(dep_data, Sequence):
        raise ScoringError("dep_data must be a list of (package, count) pairs")

    pairs = []
    for item in dep_data:
        if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
            raise ScoringError(f"dep_data entries must be (package, count) pairs, got {item!r}")
        if isinstance(item[1], bool) or not isinstance(item[1], int):
            raise ScoringError(f"dep_data count for {item[0]!r} must be an integer")
        pairs.append((str(item[0]), item[1]))
    return pairs


def _validate_import_data(import_data) -> ImportData:
    if isinstance(import_data, ImportData):
        return import_data

    if not isinstance(import_data, Mapping):
        raise ScoringError("import_data must be an object")

    for key in ("direct_deps", "import_analysis"):
        if not isinstance(import_data.get(key), list):
            raise ScoringError(f"import_data.{key} must be a list")

    try:
        return ImportData.model_validate(dict(import_data))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ScoringError(f"Invalid import_data: {'; '.join(errors)}") from e


def calculate_score(
    dep_data: Sequence[Tuple[str, int]],
    import_data: Union[ImportData, Mapping],
) -> List[PackageScore]:
    """
    Score every package seen in the dependency and import signals.

    Args:
        dep_data: ``(package, usage_count)`` pairs from the dependency analyzer
        import_data: Declared packages and per-package import usage

    Returns:
        Package scores sorted by score, highest first

    Raises:
        ScoringError: If either input is malformed

    Example:
        >>> scores = calculate_score(
        ...     [("react", 10)],
        ...     {"direct_deps": ["react"], "import_analysis": [
        ...         {"package": "react", "usage_count": 5, "is_in_entry_point": True}]},
        ... )
        >>> scores[0].score
        100
    """
    pairs = _validate_dep_data(dep_data)
    imports = _validate_import_data(import_data)

    scores: Dict[str, float] = {}

    for package, count in pairs:
        scores[package] = scores.get(package, 0) + count * WEIGHTS["dependency_usage"] / 10

    for package in imports.direct_deps:
        scores[package] = scores.get(package, 0) + WEIGHTS["direct_dependency"]

    for entry in imports.import_analysis:
        scores[entry.package] = scores.get(entry.package, 0) + entry.usage_count * WEIGHTS["import_count"] / 5
        if entry.is_in_entry_point:
            scores[entry.package] += WEIGHTS["entry_point_bonus"]

    # First occurrence wins for the detail lookups
    dependency_counts: Dict[str, int] = {}
    for package, count in pairs:
        dependency_counts.setdefault(package, count)
    import_entries = {}
    for entry in imports.import_analysis:
        import_entries.setdefault(entry.package, entry)
    direct = set(imports.direct_deps)

    results = []
    for package, score in scores.items():
        entry = import_entries.get(package)
        results.append(PackageScore(
            package=package,
            score=round_half_up(score),
            details=PackageScoreDetails(
                is_direct=package in direct,
                import_count=entry.usage_count if entry else 0,
                is_in_entry_point=entry.is_in_entry_point if entry else False,
                dependency_count=dependency_counts.get(package, 0),
            ),
        ))

    results.sort(key=lambda r: r.score, reverse=True)
    logger.debug(f"Scored {len(results)} packages")
    return results
