"""Directory store for remembering which project directories to analyze.

The store is a single JSON file of the form ``{"directories": [...]}``.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Union

from diranalyzer.schemas import DirectoryStoreData

logger = logging.getLogger(__name__)


def expand_path(raw_path: str) -> Path:
    """Expand a leading ``~`` and resolve to an absolute path.

    Args:
        raw_path: Path as typed by the user

    Returns:
        Absolute path
    """
    raw_path = raw_path.strip()
    if raw_path.startswith('~'):
        home = os.environ.get('HOME') or os.environ.get('USERPROFILE') or str(Path.home())
        raw_path = os.path.join(home, raw_path[1:].lstrip('/\\'))
    return Path(raw_path).resolve()


class DirectoryStore:
    """Manages the list of stored directories using a JSON file."""

    def __init__(self, config_file: Path):
        """Initialize the directory store.

        Args:
            config_file: JSON file holding the stored directories
        """
        self.config_file = Path(config_file)

        # Ensure parent directory exists
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        # Initialize store file if it doesn't exist
        if not self.config_file.exists():
            self._write_store(DirectoryStoreData())

    def _read_store(self) -> DirectoryStoreData:
        """Read store file."""
        try:
            with open(self.config_file, 'r') as f:
                return DirectoryStoreData.model_validate(json.load(f))
        except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
            # Corrupted or missing store is treated as empty
            logger.warning(f"Could not read {self.config_file}, treating as empty: {e}")
            return DirectoryStoreData()

    def _write_store(self, data: DirectoryStoreData) -> None:
        """Write store file."""
        with open(self.config_file, 'w') as f:
            json.dump(data.model_dump(), f, indent=2)

    def get_stored_directories(self) -> List[str]:
        """Return the stored directories in insertion order."""
        return self._read_store().directories

    def save_directory(self, dir_path: Union[str, Path]) -> bool:
        """Add a directory to the store.

        Args:
            dir_path: Absolute directory path

        Returns:
            True if the directory was added, False if it was already stored
        """
        dir_path = str(dir_path)
        data = self._read_store()

        if dir_path in data.directories:
            logger.debug(f"Directory already stored: {dir_path}")
            return False

        data.directories.append(dir_path)
        self._write_store(data)
        logger.info(f"Stored directory: {dir_path}")
        return True

    def remove_directory(self, dir_path: Union[str, Path]) -> bool:
        """Remove a directory from the store.

        Args:
            dir_path: Directory path to remove

        Returns:
            True if the directory was found and removed, False otherwise
        """
        dir_path = str(dir_path)
        data = self._read_store()

        if dir_path not in data.directories:
            return False

        data.directories.remove(dir_path)
        self._write_store(data)
        logger.info(f"Removed directory: {dir_path}")
        return True
