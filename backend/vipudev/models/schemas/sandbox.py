"""Code runner, packaging and deploy helper schemas."""

from pydantic import Field

from vipudev.models.schemas.base import CamelModel


class RunCodeRequest(CamelModel):
    """Schema for running a single snippet on the host."""

    code: str = Field(..., min_length=1)
    language: str | None = None


class RunCodeResponse(CamelModel):
    stdout: str
    stderr: str
    exit_code: int | None
    timed_out: bool


class SandboxFile(CamelModel):
    """A file staged into the container scratch directory."""

    path: str = ""
    content: str = ""


class RunProjectRequest(CamelModel):
    """Schema for running a multi-file project in a container."""

    files: list[SandboxFile] = Field(..., min_length=1)
    language: str | None = None
    command: str | None = Field(None, max_length=2000)


class RunProjectResponse(CamelModel):
    stdout: str
    stderr: str
    exit_code: int | None
    image_used: str
    command_run: str
    timed_out: bool


class ZipCodeRequest(CamelModel):
    code: str = Field(..., min_length=1)
    language: str | None = None
    filename: str | None = None


class DeployRequest(CamelModel):
    platform: str = Field(..., min_length=1)


class DeployResponse(CamelModel):
    success: bool = True
    logs: str
