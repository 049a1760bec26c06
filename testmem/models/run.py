"""Results of the child processes invoked per directory."""

from pydantic import BaseModel, Field  # type: ignore
from typing import List, Optional


class TestRunResult(BaseModel):
    """Combined output and exit status of one test command."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    path: str = Field(..., description="Directory relative to the scan root")
    command: List[str] = Field(default_factory=list, description="argv that was executed")
    output: str = Field(default="", description="Combined stdout and stderr")
    exit_code: int = Field(..., description="Process exit status")

    @property
    def succeeded(self) -> bool:
        """Check if the test command exited cleanly."""
        return self.exit_code == 0


class ProfileReport(BaseModel):
    """Text listing produced by the profiling tool."""

    path: str = Field(..., description="Directory relative to the scan root")
    command: List[str] = Field(default_factory=list, description="argv that was executed")
    output: str = Field(default="", description="Standard output of the listing")
    exit_code: int = Field(default=0, description="Process exit status")
    total_size: Optional[str] = Field(
        None, description="Size token following the Total marker, e.g. '512kB'"
    )

    @property
    def has_total(self) -> bool:
        """Check if a total figure was found in the listing."""
        return self.total_size is not None
