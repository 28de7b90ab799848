"""Display formatting for a resolved melvis config."""

from typing import Dict, List, Optional

from .domain import ResolvedConfig, Segment, ValueSource
from .types import Theme

SEGMENT_NAME = "melvis"

MELVIS_ICON = "⋀⋀"
ARROW = "→"
PLACEHOLDER = "??"

# Settings-file values render bare.
SOURCE_MARKERS: Dict[ValueSource, str] = {
    ValueSource.FROM_FILE: "",
    ValueSource.FROM_ENV_FILE: "ᴹ",
    ValueSource.FROM_PROCESS_ENV: "ᴱ",
}


def annotate_source(text: str, source: ValueSource) -> str:
    """Append the provenance marker for ``source`` to ``text``."""
    return f"{text}{SOURCE_MARKERS[source]}"


def format_content(config: ResolvedConfig) -> Optional[str]:
    """Render ``config`` as segment text, or None when there is nothing to show.

    Empty names are shown as ``??`` without touching ``config``.
    """
    if config.is_empty():
        return None

    stack_name = config.stack_name or PLACEHOLDER
    pf_name = config.pf_name or PLACEHOLDER

    content = MELVIS_ICON
    if config.sb_version:
        content = f"{content} v{config.sb_version}"

    return (
        f"{content} "
        f"{annotate_source(stack_name, config.stack_name_source)} {ARROW} "
        f"{annotate_source(pf_name, config.pf_name_source)}"
    )


def build_segments(config: ResolvedConfig, theme: Theme) -> List[Segment]:
    content = format_content(config)
    if content is None:
        return []
    return [
        Segment(
            name=SEGMENT_NAME,
            content=content,
            foreground=theme.melvis_fg,
            background=theme.melvis_bg,
            hide_separators=False,
        )
    ]
