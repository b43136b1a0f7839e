"""Single-file snippet runs directly on the host interpreter."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from vipudev.core.config import settings
from vipudev.core.sandbox.runner import SandboxUnavailableError
from vipudev.core.storage.workspace import ScratchWorkspace

logger = logging.getLogger(__name__)

HOST_INTERPRETERS = {
    "python": ("python3", "main.py"),
    "javascript": ("node", "main.js"),
}


@dataclass
class SnippetRunResult:
    stdout: str
    stderr: str
    exit_code: Optional[int]
    timed_out: bool = False


class HostRunner:
    """Runs one file with python3 or node under a wall-clock timeout."""

    def __init__(
        self,
        timeout: float = 7,
        max_output_bytes: int = 1024 * 1024,
        scratch_root: Optional[str] = None,
    ):
        self.timeout = timeout
        self.max_output_bytes = max_output_bytes
        self.scratch_root = scratch_root

    async def run(self, code: str, language: Optional[str] = None) -> SnippetRunResult:
        interpreter, filename = HOST_INTERPRETERS[
            "python" if language == "python" else "javascript"
        ]

        with ScratchWorkspace(prefix="vipudev-run-", base_path=self.scratch_root) as workspace:
            script = workspace.write_file(filename, code)
            try:
                process = await asyncio.create_subprocess_exec(
                    interpreter,
                    str(script),
                    cwd=str(workspace.path),
                    stdin=asyncio.subprocess.DEVNULL,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                raise SandboxUnavailableError(f"Could not start {interpreter}: {e}") from e

            # Readers outlive the timeout so output printed before a kill is kept
            stdout_reader = asyncio.create_task(process.stdout.read())
            stderr_reader = asyncio.create_task(process.stderr.read())

            timed_out = False
            try:
                await asyncio.wait_for(process.wait(), timeout=self.timeout)
            except asyncio.TimeoutError:
                timed_out = True
                logger.warning("Host run exceeded %ss, killing %s", self.timeout, interpreter)
                process.kill()
                await process.wait()

            stdout, stderr = await asyncio.gather(stdout_reader, stderr_reader)

        return SnippetRunResult(
            stdout=self._decode(stdout),
            stderr=self._decode(stderr),
            exit_code=process.returncode,
            timed_out=timed_out,
        )

    def _decode(self, output: bytes) -> str:
        return (output or b"")[: self.max_output_bytes].decode("utf-8", errors="replace")


_host_runner: Optional[HostRunner] = None


def get_host_runner() -> HostRunner:
    global _host_runner
    if _host_runner is None:
        _host_runner = HostRunner(
            timeout=settings.host_run_timeout_seconds,
            max_output_bytes=settings.host_run_max_output_bytes,
            scratch_root=settings.sandbox_scratch_root,
        )
    return _host_runner
