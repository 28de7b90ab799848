"""Resolution driver: applies the three layers in fixed order."""

import os
import logging
from typing import Mapping, Optional

from .domain import ResolutionResult, ResolvedConfig
from .readers import read_env_file, read_process_env, read_settings_file
from .types import MelvisOptions
from .validators import WorkingDirectoryUnavailableError

logger = logging.getLogger(__name__)


def get_working_directory() -> str:
    """Return the current working directory.

    Raises:
        WorkingDirectoryUnavailableError: the directory was removed or is inaccessible.
    """
    try:
        return os.getcwd()
    except OSError as e:
        raise WorkingDirectoryUnavailableError(f"Cannot determine working directory: {e}") from e


class MelvisResolver:
    """Merges settings file, env file and process environment into one ResolvedConfig.

    Precedence, lowest to highest:
    1. settings file (``options.settings_file``)
    2. env file (``options.env_file``)
    3. process environment

    Each call builds a fresh config; nothing is cached between calls.
    """

    def __init__(self, options: Optional[MelvisOptions] = None):
        self.options = options or MelvisOptions()

    def resolve_path(self, cwd: str, name: str) -> str:
        return os.path.abspath(os.path.join(cwd, name))

    def resolve(self, cwd: str, environ: Optional[Mapping[str, str]] = None) -> ResolutionResult:
        env = os.environ if environ is None else environ
        config = ResolvedConfig()
        result = ResolutionResult(config=config)

        result.reads.append(
            read_settings_file(config, self.resolve_path(cwd, self.options.settings_file))
        )
        result.reads.append(
            read_env_file(
                config,
                self.resolve_path(cwd, self.options.env_file),
                stack_name_source=self.options.env_file_stack_name_source
            )
        )
        result.reads.append(read_process_env(config, env))

        logger.debug(
            f"Resolved stack={config.stack_name!r} ({config.stack_name_source.value}), "
            f"pf={config.pf_name!r} ({config.pf_name_source.value}), "
            f"sb_version={config.sb_version!r}"
        )
        return result


def resolve_config(
    cwd: str,
    environ: Optional[Mapping[str, str]] = None,
    options: Optional[MelvisOptions] = None
) -> ResolvedConfig:
    """Resolve and return only the merged config."""
    return MelvisResolver(options).resolve(cwd, environ).config
