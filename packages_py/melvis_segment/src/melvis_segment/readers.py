"""Layer readers that apply settings.yml, .mdk.env and the process env to a ResolvedConfig."""

import os
import logging
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv.parser import parse_stream

from .domain import ReadResult, ResolvedConfig, ValueSource
from .validators import SourceUnavailableError

logger = logging.getLogger(__name__)

STACK_NAME_KEY = "stack_name"
PF_KEY = "pf"
SB_VERSION_KEY = "sb_version"

ENV_STACK_NAME = "STACK_NAME"
ENV_PF = "PF"


class _SettingsLoader(yaml.SafeLoader):
    """SafeLoader that keeps the source text of typed scalars.

    ``sb_version: 2.10`` must stay ``"2.10"`` instead of becoming the float 2.1.
    """


for _tag in ("int", "float", "bool", "timestamp"):
    _SettingsLoader.add_constructor(
        f"tag:yaml.org,2002:{_tag}", yaml.SafeLoader.construct_yaml_str
    )


def load_settings_document(path: str) -> Dict[str, Any]:
    """Load the settings document at ``path`` as a mapping.

    Raises:
        SourceUnavailableError: file missing, unreadable, or not a YAML mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=_SettingsLoader)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(ValueSource.FROM_FILE, path, str(e)) from e
    except yaml.YAMLError as e:
        raise SourceUnavailableError(ValueSource.FROM_FILE, path, f"YAML parsing error: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SourceUnavailableError(
            ValueSource.FROM_FILE, path, f"expected a mapping, got {type(data).__name__}"
        )
    return data


def load_env_file(path: str) -> Dict[str, str]:
    """Parse a ``KEY=value`` file. Keys without a value are dropped.

    Values are taken literally; ``${VAR}`` references are not expanded.

    Raises:
        SourceUnavailableError: file missing, unreadable, or holding a
            statement that is not a binding.
    """
    if not os.path.isfile(path):
        raise SourceUnavailableError(ValueSource.FROM_ENV_FILE, path, "file not found")
    try:
        with open(path, "r", encoding="utf-8") as stream:
            bindings = list(parse_stream(stream))
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(ValueSource.FROM_ENV_FILE, path, str(e)) from e

    values: Dict[str, str] = {}
    for binding in bindings:
        if binding.error:
            raise SourceUnavailableError(
                ValueSource.FROM_ENV_FILE, path,
                f"unparseable statement at line {binding.original.line}"
            )
        if binding.key is None or binding.value is None:
            continue
        values[binding.key] = binding.value
    return values


def _settings_value(data: Dict[str, Any], key: str, path: str) -> Optional[str]:
    if key not in data:
        return None
    value = data[key]
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise SourceUnavailableError(
            ValueSource.FROM_FILE, path, f"'{key}' must be a scalar, got {type(value).__name__}"
        )
    return str(value)


def read_settings_file(config: ResolvedConfig, path: str) -> ReadResult:
    """Apply the stack builder settings document.

    On success both provenance tags become FROM_FILE, even for keys the
    document does not set. On failure ``config`` is left untouched.
    """
    result = ReadResult(source=ValueSource.FROM_FILE, path=path)
    try:
        data = load_settings_document(path)
        stack_name = _settings_value(data, STACK_NAME_KEY, path)
        pf_name = _settings_value(data, PF_KEY, path)
        sb_version = _settings_value(data, SB_VERSION_KEY, path)
    except SourceUnavailableError as e:
        logger.debug(f"Settings file skipped: {e}")
        result.error = e.reason
        return result

    if stack_name is not None:
        result.keys.append(STACK_NAME_KEY)
    if pf_name is not None:
        result.keys.append(PF_KEY)
    if sb_version is not None:
        config.sb_version = sb_version
        result.keys.append(SB_VERSION_KEY)

    config.set_stack_name(config.stack_name if stack_name is None else stack_name, ValueSource.FROM_FILE)
    config.set_pf_name(config.pf_name if pf_name is None else pf_name, ValueSource.FROM_FILE)

    result.applied = True
    logger.debug(f"Settings file applied: {path} keys={result.keys}")
    return result


def read_env_file(
    config: ResolvedConfig,
    path: str,
    stack_name_source: ValueSource = ValueSource.FROM_FILE
) -> ReadResult:
    """Apply ``PF`` and ``STACK_NAME`` from an env file.

    ``PF`` is tagged FROM_ENV_FILE. ``STACK_NAME`` is tagged with
    ``stack_name_source``, which defaults to FROM_FILE.
    """
    result = ReadResult(source=ValueSource.FROM_ENV_FILE, path=path)
    try:
        values = load_env_file(path)
    except SourceUnavailableError as e:
        logger.debug(f"Env file skipped: {e}")
        result.error = e.reason
        return result

    if ENV_PF in values:
        config.set_pf_name(values[ENV_PF], ValueSource.FROM_ENV_FILE)
        result.keys.append(ENV_PF)
    if ENV_STACK_NAME in values:
        config.set_stack_name(values[ENV_STACK_NAME], stack_name_source)
        result.keys.append(ENV_STACK_NAME)

    result.applied = True
    logger.debug(f"Env file applied: {path} keys={result.keys}")
    return result


def read_process_env(config: ResolvedConfig, environ: Mapping[str, str]) -> ReadResult:
    """Apply ``PF`` and ``STACK_NAME`` from ``environ``. A variable set to "" still counts."""
    result = ReadResult(source=ValueSource.FROM_PROCESS_ENV, applied=True)

    if ENV_PF in environ:
        config.set_pf_name(environ[ENV_PF], ValueSource.FROM_PROCESS_ENV)
        result.keys.append(ENV_PF)
    if ENV_STACK_NAME in environ:
        config.set_stack_name(environ[ENV_STACK_NAME], ValueSource.FROM_PROCESS_ENV)
        result.keys.append(ENV_STACK_NAME)

    logger.debug(f"Process env applied: keys={result.keys}")
    return result
