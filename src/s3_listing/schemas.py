"""Run configuration schemas for s3-listing-tools."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BackendName(str, Enum):
    """Available listing backends."""

    AWS_CLI = "aws-cli"
    BOTO3 = "boto3"


class RunConfig(BaseModel):
    """What a listing run should cover.

    Built either from command-line arguments or from the interactive menus.
    """

    model_config = ConfigDict(frozen=True)

    buckets: tuple[str, ...] = Field(
        default=(), description="Explicit bucket names, processed in order"
    )
    all_buckets: bool = Field(
        default=False, description="Enumerate every bucket the credentials can see"
    )
    include_files: bool = Field(
        default=False, description="Write file records after directory records"
    )
    exclude_extensions: frozenset[str] = Field(
        default=frozenset(),
        description="Case-sensitive file extensions (no leading dot) to skip",
    )

    @model_validator(mode="after")
    def _check_bucket_selection(self) -> "RunConfig":
        if self.all_buckets and self.buckets:
            raise ValueError("Give bucket names or all_buckets, not both")
        if not self.all_buckets and not self.buckets:
            raise ValueError("No buckets selected")
        return self


class MenuExit(BaseModel):
    """Outcome of the interactive menus when no run should happen."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., description="Process exit code")
    reason: str = Field(default="", description="Message shown to the user")
