"""
Configuration model for the helpwrap shim.

Built once at startup from the (layered) environment and passed down
explicitly; the capture and rewrite logic never reads the environment.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TOOL = "go"
DEFAULT_PROGRAM_NAME = "helpwrap"


class WrapperConfig(BaseModel):
    """Settings for a single wrapper invocation."""

    model_config = ConfigDict(frozen=True)

    tool: str = Field(
        default=DEFAULT_TOOL,
        description="Executable name or path the rewritten arguments are passed to",
    )
    debug: bool = Field(
        default=False,
        description="Log raw arguments and the capture result to stderr",
    )
    suppress_warning: bool = Field(
        default=False,
        description="Do not print the warning block when a help flag is reinterpreted",
    )
    program_name: str = Field(
        default=DEFAULT_PROGRAM_NAME,
        description="Label shown in the warning block (basename of argv[0])",
    )

    @field_validator("tool")
    @classmethod
    def default_empty_tool(cls, v: str) -> str:
        return v.strip() or DEFAULT_TOOL
