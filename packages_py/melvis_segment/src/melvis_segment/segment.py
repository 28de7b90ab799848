"""Host-facing entry point, called once per status line render."""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .core import MelvisResolver, get_working_directory
from .domain import Segment
from .presenter import build_segments
from .types import MelvisOptions, Theme
from .validators import WorkingDirectoryUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """What the host hands to a segment renderer.

    ``cwd`` and ``environ`` default to the live process values when None.
    """
    theme: Theme
    cwd: Optional[str] = None
    environ: Optional[Mapping[str, str]] = None
    options: Optional[MelvisOptions] = None


def segment_melvis(context: RenderContext) -> List[Segment]:
    """Return zero or one melvis segment for the current directory."""
    cwd = context.cwd
    if cwd is None:
        try:
            cwd = get_working_directory()
        except WorkingDirectoryUnavailableError as e:
            logger.debug(f"melvis segment hidden: {e}")
            return []

    resolution = MelvisResolver(context.options).resolve(cwd, context.environ)
    segments = build_segments(resolution.config, context.theme)
    if not segments:
        logger.debug(f"melvis segment hidden: nothing configured in {cwd}")
    return segments
