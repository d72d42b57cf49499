"""
Dependency usage analysis.

Reads the dependencies declared in a project's package.json and counts how
often each one is referenced by ``require()`` calls or ``from '...'`` clauses
in the project's source files.
"""

import json
import re
from pathlib import Path
from typing import Dict, List, Tuple, Union
import logging

from diranalyzer.analyzers.file_scanner import FileScanner
from diranalyzer.schemas import DependencyUsage
from diranalyzer.utils import round_half_up

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

CHART_BAR_LENGTH = 30


def read_declared_dependencies(dir_path: Union[str, Path]) -> Dict[str, str]:
    """
    Read runtime and dev dependencies from package.json.

    devDependencies override same-named runtime entries.

    Args:
        dir_path: Project directory

    Returns:
        Mapping of package name to declared version range; empty when
        the directory has no package.json

    Raises:
        json.JSONDecodeError: If package.json is not valid JSON
        ValueError: If package.json or a dependency section is not an object
        OSError: If package.json cannot be read
    """
    manifest = Path(dir_path) / MANIFEST_NAME
    if not manifest.exists():
        return {}

    package_json = json.loads(manifest.read_text(encoding='utf-8'))
    if not isinstance(package_json, dict):
        raise ValueError(f"{MANIFEST_NAME} must contain an object")

    declared: Dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        entries = package_json.get(section) or {}
        if not isinstance(entries, dict):
            raise ValueError(f"{MANIFEST_NAME} {section} must be an object")
        declared.update(entries)
    return declared


def build_usage_patterns(dep: str) -> Tuple[re.Pattern, re.Pattern]:
    """Compile the require() and ``from`` patterns matching ``dep`` or ``dep/sub/path``."""
    name = re.escape(dep)
    target = rf"""['"]{name}(?:/[^'"]+)?['"]"""
    require_pattern = re.compile(rf"require\({target}\)")
    from_pattern = re.compile(rf"from\s+{target}")
    return require_pattern, from_pattern


def analyze_dependencies(dir_path: Union[str, Path]) -> List[DependencyUsage]:
    """
    Correlate declared dependencies against their usage in source files.

    Args:
        dir_path: Project directory

    Returns:
        Dependencies referenced at least once, sorted by usage count
        (descending). Empty on any error or when package.json is absent.
    """
    try:
        declared = read_declared_dependencies(dir_path)
        if not declared:
            return []

        patterns = {dep: build_usage_patterns(dep) for dep in declared}
        usage = {dep: 0 for dep in declared}

        for file_path in FileScanner(Path(dir_path)).scan():
            content = file_path.read_text(encoding='utf-8', errors='replace')
            for dep, (require_pattern, from_pattern) in patterns.items():
                usage[dep] += len(require_pattern.findall(content)) + len(from_pattern.findall(content))

        dependencies = [
            DependencyUsage(name=name, version=version, count=usage[name])
            for name, version in declared.items()
            if usage[name] > 0
        ]
        dependencies.sort(key=lambda d: d.count, reverse=True)

        logger.debug(f"{len(dependencies)} of {len(declared)} declared dependencies used in {dir_path}")
        return dependencies

    except Exception as e:
        logger.error(f"Error analyzing dependencies: {e}")
        return []


def create_bar_chart(dependencies: List[DependencyUsage]) -> str:
    """
    Render a per-directory usage chart, one line per dependency.

    Example:
        >>> print(create_bar_chart(deps))
        react  |──────────────────────────────12
        lodash |───────────────6
    """
    if not dependencies:
        return "No dependencies found"

    max_name_length = max(len(d.name) for d in dependencies)
    max_count = max(d.count for d in dependencies)

    lines = []
    for dep in dependencies:
        normalized = round_half_up(dep.count / max_count * CHART_BAR_LENGTH) if max_count else 0
        lines.append(f"{dep.name.ljust(max_name_length)} |{'─' * normalized}{dep.count}")
    return "\n".join(lines)