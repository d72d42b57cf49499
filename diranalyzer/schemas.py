"""
Centralized Pydantic schemas for Directory Analyzer.

This module is the single source of truth for the data models shared by the
analyzers, the scoring functions, the directory store and the CLI.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


# ============================================================================
# STORE SCHEMAS
# ============================================================================

class DirectoryStoreData(BaseModel):
    """Contents of the persisted directories file."""
    directories: List[str] = Field(default_factory=list, description="Absolute paths of registered directories")


# ============================================================================
# ANALYSIS SCHEMAS
# ============================================================================

class DependencyUsage(BaseModel):
    """A declared manifest dependency and how often source files reference it."""
    name: str = Field(description="Package name as declared in package.json")
    version: str = Field(description="Declared version with ^ and ~ removed")
    count: int = Field(default=0, description="Number of require()/from references found")

    @field_validator('version', mode='before')
    @classmethod
    def strip_range_markers(cls, v):
        """Remove every ^ and ~ from the declared range."""
        if isinstance(v, str):
            return v.replace('^', '').replace('~', '')
        return str(v)


class ImportUsage(BaseModel):
    """Usage of one external package collected from import declarations."""
    count: int = Field(default=0, description="Number of import declarations")
    files: List[str] = Field(default_factory=list, description="Relative paths, one per declaration")
    is_in_entry_point: bool = Field(default=False, description="Imported from a root entry point file")


class DirectoryAnalysis(BaseModel):
    """Overall analysis of a registered directory."""
    path: str = Field(description="Directory path")
    file_count: int = Field(default=0, description="Number of top-level entries")
    size: str = Field(default="0.00", description="Size in MB, two decimals")
    dependency_score: List[DependencyUsage] = Field(default_factory=list, description="Used dependencies")
    import_score: int = Field(default=0, description="Total external import declarations")
    score: int = Field(default=0, description="Overall score out of 100")
    error: Optional[str] = Field(None, description="Error message if the directory could not be analyzed")


class DependencyTally(BaseModel):
    """Running cross-directory tally for one dependency during a single invocation."""
    count: int = 0
    versions: List[str] = Field(default_factory=list, description="Distinct versions, first-seen order")
    dirs: List[str] = Field(default_factory=list, description="Distinct directories, first-seen order")

    def add(self, usage: DependencyUsage, dir_path: str) -> None:
        self.count += usage.count
        if usage.version not in self.versions:
            self.versions.append(usage.version)
        if dir_path not in self.dirs:
            self.dirs.append(dir_path)


# ============================================================================
# SCORING SCHEMAS
# ============================================================================

class ImportEntry(BaseModel):
    """Per-package import signal fed into the package score calculator."""
    package: str
    usage_count: int = 0
    is_in_entry_point: bool = False


class ImportData(BaseModel):
    """Import-side inputs of the package score calculator."""
    direct_deps: List[str] = Field(default_factory=list, description="Packages declared in the manifest")
    import_analysis: List[ImportEntry] = Field(default_factory=list, description="Per-package import usage")


class PackageScoreDetails(BaseModel):
    """Signals that contributed to a package score."""
    is_direct: bool = False
    import_count: int = 0
    is_in_entry_point: bool = False
    dependency_count: int = 0


class PackageScore(BaseModel):
    """Weighted importance score of a single package."""
    package: str
    score: int
    details: PackageScoreDetails
