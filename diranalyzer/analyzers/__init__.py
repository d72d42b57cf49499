"""Source analyzers: file scanning, dependency usage and import parsing."""

from .file_scanner import FileScanner, count_entries
from .dependency_analyzer import analyze_dependencies, create_bar_chart, read_declared_dependencies
from .import_analyzer import (
    ImportAnalysisError,
    analyze_imports,
    import_score,
    to_import_entries,
)

__all__ = [
    "FileScanner",
    "count_entries",
    "analyze_dependencies",
    "create_bar_chart",
    "read_declared_dependencies",
    "ImportAnalysisError",
    "analyze_imports",
    "import_score",
    "to_import_entries",
]
