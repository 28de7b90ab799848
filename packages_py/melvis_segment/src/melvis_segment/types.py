"""
Configuration models supplied by the status line host.
"""
from pydantic import BaseModel, Field
from .domain import ValueSource

class Theme(BaseModel):
    """Colours the host theme assigns to the melvis segment.

    Values are 256-colour terminal palette indexes.
    """
    melvis_fg: int = Field(ge=0, le=255, description="Foreground colour index")
    melvis_bg: int = Field(ge=0, le=255, description="Background colour index")

class MelvisOptions(BaseModel):
    """Where the layered sources live and how the env file tags stack names.

    Relative file names are resolved against the working directory.
    ``env_file_stack_name_source`` defaults to the file tag, which is how
    existing stacks have always been annotated; set it to
    ``ValueSource.FROM_ENV_FILE`` to mark env-file stack names distinctly.
    """
    settings_file: str = Field(default="settings.yml", description="Stack builder settings document")
    env_file: str = Field(default=".mdk.env", description="KEY=value env file")
    env_file_stack_name_source: ValueSource = Field(
        default=ValueSource.FROM_FILE,
        description="Source tag recorded for STACK_NAME read from the env file"
    )
