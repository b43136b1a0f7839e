"""Code execution: host snippets and containerized projects."""

from vipudev.core.sandbox.runner import (
    SandboxRunner,
    SandboxError,
    SandboxUnavailableError,
    SandboxStagingError,
    ProjectRunResult,
    TIMEOUT_MARKER,
    get_sandbox_runner,
)
from vipudev.core.sandbox.host import HostRunner, SnippetRunResult, get_host_runner

__all__ = [
    "SandboxRunner",
    "SandboxError",
    "SandboxUnavailableError",
    "SandboxStagingError",
    "ProjectRunResult",
    "TIMEOUT_MARKER",
    "get_sandbox_runner",
    "HostRunner",
    "SnippetRunResult",
    "get_host_runner",
]
