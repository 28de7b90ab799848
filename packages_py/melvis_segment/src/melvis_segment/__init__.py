from .domain import (
    ValueSource,
    SourcedValue,
    ResolvedConfig,
    ReadResult,
    ResolutionResult,
    Segment
)
from .types import Theme, MelvisOptions
from .validators import (
    MelvisError,
    SourceUnavailableError,
    WorkingDirectoryUnavailableError
)
from .readers import (
    load_settings_document,
    load_env_file,
    read_settings_file,
    read_env_file,
    read_process_env
)
from .core import MelvisResolver, resolve_config, get_working_directory
from .presenter import (
    SEGMENT_NAME,
    annotate_source,
    format_content,
    build_segments
)
from .segment import RenderContext, segment_melvis

__all__ = [
    "ValueSource",
    "SourcedValue",
    "ResolvedConfig",
    "ReadResult",
    "ResolutionResult",
    "Segment",
    "Theme",
    "MelvisOptions",
    "MelvisError",
    "SourceUnavailableError",
    "WorkingDirectoryUnavailableError",
    "load_settings_document",
    "load_env_file",
    "read_settings_file",
    "read_env_file",
    "read_process_env",
    "MelvisResolver",
    "resolve_config",
    "get_working_directory",
    "SEGMENT_NAME",
    "annotate_source",
    "format_content",
    "build_segments",
    "RenderContext",
    "segment_melvis"
]
