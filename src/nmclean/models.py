"""Data models for nmclean."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Action(str, Enum):
    """Operation applied to the discovered node_modules folders."""

    SIZE = "size"  # Read-only, reports disk usage
    COUNT = "count"  # Read-only, reports immediate subfolders
    DELETE = "delete"  # Irreversible recursive removal

    @classmethod
    def names(cls) -> list[str]:
        """Valid action tokens in declaration order."""
        return [action.value for action in cls]


class SizeResult(BaseModel):
    """Disk usage of a single node_modules folder."""

    path: str = Field(..., description="Path of the measured folder")
    size_bytes: int = Field(0, ge=0, description="Total size of all files beneath it")


class SizeReport(BaseModel):
    """Outcome of the size action over the whole match set."""

    results: list[SizeResult] = Field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        """Grand total across every match."""
        return sum(r.size_bytes for r in self.results)


class CountResult(BaseModel):
    """Immediate subfolder count of a single node_modules folder."""

    path: str = Field(..., description="Path of the listed folder")
    subfolder_count: int = Field(0, ge=0, description="Number of direct subdirectories")
    error: Optional[str] = Field(None, description="Listing failure, if any (count is then 0)")


class CountReport(BaseModel):
    """Outcome of the count action over the whole match set."""

    results: list[CountResult] = Field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.results)


class DeleteResult(BaseModel):
    """Result of removing a single node_modules folder."""

    path: str = Field(..., description="Path that was removed")
    success: bool = Field(True, description="Whether removal succeeded")
    error: Optional[str] = Field(None, description="Error message if failed")


class DeleteReport(BaseModel):
    """Outcome of the delete action over the whole match set."""

    results: list[DeleteResult] = Field(default_factory=list)

    @property
    def processed_count(self) -> int:
        """Number of matches attempted, whether or not removal succeeded."""
        return len(self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if not r.success)
