"""
File scanner for project directories.

Recursively scans a project directory to find all JavaScript and TypeScript
source files. Used by the dependency and import analyzers, and by the
directory scorer for size measurements.
"""

from pathlib import Path
from typing import Iterator, List, Set, Optional
import logging

logger = logging.getLogger(__name__)


class FileScanner:
    """
    Recursively scan a project directory for source files.

    Supports:
    - JavaScript (.js, .jsx, .mjs, .cjs)
    - TypeScript (.ts, .tsx)

    Excludes installed packages and build output:
    - node_modules, dist, build, plus common cache/VCS directories
    """

    # Supported source file extensions
    SUPPORTED_EXTENSIONS = {'.js', '.jsx', '.ts', '.tsx', '.mjs', '.cjs'}

    # Directories to exclude from scanning
    DEFAULT_EXCLUDE_DIRS = {
        'node_modules',
        'dist',
        'build',
        '.git',
        '__pycache__',
        '.venv',
        'venv',
        '.next',
        '.nuxt',
        '.cache',
        'coverage',
    }

    def __init__(
        self,
        base_path: Path,
        extensions: Optional[Set[str]] = None,
        exclude_dirs: Optional[Set[str]] = None
    ):
        """
        Initialize the file scanner.

        Args:
            base_path: Project directory to scan
            extensions: File extensions to include (default: JS/TS extensions)
            exclude_dirs: Directory names to exclude (default: node_modules, dist, build, ...)
        """
        self.base_path = Path(base_path).resolve()
        self.extensions = extensions or self.SUPPORTED_EXTENSIONS
        self.exclude_dirs = exclude_dirs or self.DEFAULT_EXCLUDE_DIRS

        if not self.base_path.exists():
            raise FileNotFoundError(f"Base path does not exist: {self.base_path}")

        if not self.base_path.is_dir():
            raise NotADirectoryError(f"Base path is not a directory: {self.base_path}")

    def scan(self) -> List[Path]:
        """
        Scan the base directory recursively for source files.

        Returns:
            List of Path objects for all source files found,
            sorted by path for consistent ordering.
        """
        logger.debug(f"Scanning project directory: {self.base_path}")

        source_files = [
            file_path
            for file_path in self._walk_directory(self.base_path)
            if file_path.suffix in self.extensions
        ]
        source_files.sort()

        logger.debug(f"Found {len(source_files)} source files in {self.base_path}")
        return source_files

    def relative(self, file_path: Path) -> str:
        """Return ``file_path`` relative to the base path, with forward slashes."""
        return file_path.relative_to(self.base_path).as_posix()

    def total_size(self) -> int:
        """Sum of the sizes in bytes of every file in the walked tree."""
        total = 0
        for file_path in self._walk_directory(self.base_path):
            try:
                total += file_path.stat().st_size
            except OSError as e:
                logger.debug(f"Could not stat {file_path}: {e}")
        return total

    def _walk_directory(self, directory: Path) -> Iterator[Path]:
        """
        Recursively walk directory, yielding files while respecting exclusions.

        Args:
            directory: Directory to walk

        Yields:
            Path objects for files found
        """
        try:
            for item in directory.iterdir():
                # Hidden files and directories are never matched
                if item.name.startswith('.'):
                    continue

                if item.is_symlink():
                    continue

                if item.is_dir():
                    if item.name in self.exclude_dirs:
                        logger.debug(f"Skipping excluded directory: {item}")
                        continue

                    yield from self._walk_directory(item)

                elif item.is_file():
                    yield item

        except PermissionError:
            logger.warning(f"Permission denied accessing: {directory}")
        except OSError as e:
            logger.error(f"Error scanning directory {directory}: {e}")


def count_entries(project_path: Path) -> int:
    """Number of top-level entries (files and directories) in ``project_path``."""
    return sum(1 for _ in Path(project_path).iterdir())
