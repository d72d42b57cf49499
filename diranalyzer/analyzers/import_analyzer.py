"""
Import analysis for JavaScript and TypeScript projects.

Parses every source file of a project and collects the external packages
named by top-level ``import`` declarations. JavaScript files are parsed with
esprima. esprima cannot read TypeScript syntax, so the import declarations of
``.ts``/``.tsx`` files are extracted with a pattern instead. The same pattern
is used for JavaScript files with syntax esprima does not support.
"""

import re
from pathlib import Path
from typing import Dict, List, Union
import logging

import esprima
from esprima.error_handler import Error as EsprimaError

from diranalyzer.analyzers.file_scanner import FileScanner
from diranalyzer.schemas import ImportEntry, ImportUsage

logger = logging.getLogger(__name__)


class ImportAnalysisError(RuntimeError):
    """Raised when a project cannot be scanned for imports at all."""


ENTRY_POINTS = {'index.js', 'main.js', 'server.js', 'app.js'}

TYPESCRIPT_EXTENSIONS = {'.ts', '.tsx'}

# Matches: import x from 'pkg' / import { a, b } from "pkg" / import 'pkg' / import type { T } from 'pkg'
IMPORT_DECLARATION_PATTERN = re.compile(
    r"""^[ \t]*import\s+(?:type\s+)?(?:[\w*{}\s,$]+?\s+from\s+)?['"]([^'"]+)['"]""",
    re.MULTILINE
)


def parse_import_sources(content: str, suffix: str) -> List[str]:
    """
    Return the source specifier of every top-level import declaration.

    Args:
        content: File content
        suffix: File extension, used to choose the parser

    Returns:
        Specifiers in declaration order
    """
    if suffix in TYPESCRIPT_EXTENSIONS:
        return IMPORT_DECLARATION_PATTERN.findall(content)

    try:
        tree = esprima.parseModule(content, {'jsx': True, 'tolerant': True})
    except EsprimaError as e:
        # e.g. optional chaining, nullish coalescing, class fields
        logger.debug(f"esprima could not parse module ({e}), matching import declarations instead")
        return IMPORT_DECLARATION_PATTERN.findall(content)

    return [
        node.source.value
        for node in tree.body
        if node.type == 'ImportDeclaration'
    ]


def analyze_imports(project_path: Union[str, Path]) -> Dict[str, ImportUsage]:
    """
    Build the import map of a project.

    Relative specifiers (starting with ``.``) are skipped. Files that fail to
    parse are logged and skipped.

    Args:
        project_path: Project directory

    Returns:
        Mapping of package specifier to its ImportUsage

    Raises:
        ImportAnalysisError: If the project directory cannot be scanned
    """
    try:
        scanner = FileScanner(Path(project_path))
        files = scanner.scan()
    except Exception as e:
        raise ImportAnalysisError(f"Error analyzing imports: {e}") from e

    import_map: Dict[str, ImportUsage] = {}

    for file_path in files:
        relative_path = scanner.relative(file_path)

        try:
            content = file_path.read_text(encoding='utf-8', errors='replace')
            sources = parse_import_sources(content, file_path.suffix)
        except Exception as e:
            logger.warning(f"Could not parse {relative_path}: {e}")
            continue

        for package_name in sources:
            if package_name.startswith('.'):
                continue

            usage = import_map.setdefault(package_name, ImportUsage())
            usage.count += 1
            usage.files.append(relative_path)

            if relative_path in ENTRY_POINTS:
                usage.is_in_entry_point = True

    logger.debug(f"Found {len(import_map)} imported packages in {project_path}")
    return import_map


def import_score(import_map: Dict[str, ImportUsage]) -> int:
    """Total number of external import declarations in an import map."""
    return sum(usage.count for usage in import_map.values())


def to_import_entries(import_map: Dict[str, ImportUsage]) -> List[ImportEntry]:
    """Convert an import map into score calculator entries."""
    return [
        ImportEntry(
            package=package,
            usage_count=usage.count,
            is_in_entry_point=usage.is_in_entry_point,
        )
        for package, usage in import_map.items()
    ]
