"""Data models for the melvis segment."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ValueSource(str, Enum):
    """Layer that last supplied a value, lowest precedence first."""
    FROM_FILE = 'file'
    FROM_ENV_FILE = 'env_file'
    FROM_PROCESS_ENV = 'process_env'


@dataclass(frozen=True)
class SourcedValue:
    value: str = ""
    source: ValueSource = ValueSource.FROM_FILE


@dataclass
class ResolvedConfig:
    """Stack builder settings merged from all layers.

    ``stack`` and ``pf`` carry their provenance with them; they are replaced
    as a whole so a source tag never changes without its value.
    ``sb_version`` is only ever written by the settings file reader.
    """
    stack: SourcedValue = field(default_factory=SourcedValue)
    pf: SourcedValue = field(default_factory=SourcedValue)
    sb_version: str = ""

    @property
    def stack_name(self) -> str:
        return self.stack.value

    @property
    def stack_name_source(self) -> ValueSource:
        return self.stack.source

    @property
    def pf_name(self) -> str:
        return self.pf.value

    @property
    def pf_name_source(self) -> ValueSource:
        return self.pf.source

    def set_stack_name(self, value: str, source: ValueSource) -> None:
        self.stack = SourcedValue(value, source)

    def set_pf_name(self, value: str, source: ValueSource) -> None:
        self.pf = SourcedValue(value, source)

    def is_empty(self) -> bool:
        return not (self.stack.value or self.pf.value or self.sb_version)


@dataclass
class ReadResult:
    """Outcome of applying one layer to a ResolvedConfig."""
    source: ValueSource
    path: Optional[str] = None
    applied: bool = False
    keys: List[str] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class ResolutionResult:
    config: ResolvedConfig
    reads: List[ReadResult] = field(default_factory=list)


@dataclass
class Segment:
    """A single labelled, coloured unit handed to the status line host."""
    name: str
    content: str
    foreground: int
    background: int
    hide_separators: bool = False
