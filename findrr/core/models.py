"""Core data models for filtered tree traversal."""

import os
import stat
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SizeComparison(Enum):
    """Relational operator of a size filter, keyed by its sign character."""

    LESS = "-"
    EQUAL = "="
    GREATER = "+"


class SizeFilter(BaseModel):
    """Size constraint: compare an entry's size against a byte count."""

    model_config = ConfigDict(frozen=True)

    comparison: SizeComparison
    size: int = Field(ge=0)

    def accepts(self, size: int) -> bool:
        """Check a size in bytes against this constraint."""
        if self.comparison is SizeComparison.LESS:
            return size < self.size
        if self.comparison is SizeComparison.GREATER:
            return size > self.size
        return size == self.size


class FilterConfig(BaseModel):
    """Parsed command line: root path, optional filters and optional program.

    A filter left as None does not constrain the search.
    """

    model_config = ConfigDict(frozen=True)

    root: str
    inum: int | None = Field(default=None, ge=0)
    name: str | None = None
    size: SizeFilter | None = None
    nlinks: int | None = Field(default=None, ge=0)
    exec_path: str | None = None

    @property
    def has_filters(self) -> bool:
        """Check whether any filter is active."""
        return any(
            value is not None
            for value in (self.inum, self.name, self.size, self.nlinks)
        )


@dataclass(frozen=True)
class EntryMetadata:
    """Attributes of one filesystem entry, as seen by lstat."""

    inode: int
    size: int
    nlinks: int
    is_dir: bool

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "EntryMetadata":
        """Build metadata from a stat result."""
        return cls(
            inode=st.st_ino,
            size=st.st_size,
            nlinks=st.st_nlink,
            is_dir=stat.S_ISDIR(st.st_mode),
        )


@dataclass(frozen=True)
class SkippedEntry:
    """A directory or entry left out of the traversal."""

    path: str
    reason: str
    is_dir: bool = False


class ChildStatus(Enum):
    """Kinds of state change a spawned child can go through."""

    EXITED = "exited"
    SIGNALED = "signaled"
    STOPPED = "stopped"
    CONTINUED = "continued"


@dataclass(frozen=True)
class ChildTransition:
    """One observed state change of a spawned child."""

    status: ChildStatus
    code: int | None = None  # exit status or signal number

    @property
    def is_terminal(self) -> bool:
        """Child is gone after this transition."""
        return self.status in (ChildStatus.EXITED, ChildStatus.SIGNALED)

    def describe(self) -> str:
        """Human-readable summary of the transition."""
        if self.status is ChildStatus.EXITED:
            return f"Normal exited, status = {self.code}"
        if self.status is ChildStatus.SIGNALED:
            return f"Was killed by signal {self.code}"
        if self.status is ChildStatus.STOPPED:
            return f"Was stopped by signal {self.code}"
        return "Was continued"


@dataclass
class ExecutionResult:
    """Outcome of running the external program."""

    pid: int
    transitions: list[ChildTransition]

    @property
    def final(self) -> ChildTransition:
        """The terminal transition."""
        return self.transitions[-1]

    @property
    def exit_code(self) -> int | None:
        """Exit status if the child exited normally."""
        if self.final.status is ChildStatus.EXITED:
            return self.final.code
        return None

    @property
    def signal(self) -> int | None:
        """Signal number if the child was killed."""
        if self.final.status is ChildStatus.SIGNALED:
            return self.final.code
        return None
