"""Multi-file project runs inside a throwaway Docker container.

One request moves through a fixed sequence: stage the files into a fresh
scratch directory, start exactly one container with no network and
memory/CPU ceilings, wait up to the timeout (killing the container when it
expires), collect stdout/stderr and the exit code, then remove the container
and the scratch directory. Cleanup runs on every path. Nothing is retried or
queued; concurrent requests each get their own container and directory.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import ConnectionError as RequestsConnectionError, ReadTimeout

from vipudev.core.config import settings
from vipudev.core.storage.workspace import ScratchWorkspace, UnsafePathError

logger = logging.getLogger(__name__)

CONTAINER_WORKDIR = "/app"
TIMEOUT_MARKER = "\n[Process killed due to timeout]"


class SandboxError(Exception):
    """Base error for code runs."""


class SandboxUnavailableError(SandboxError):
    """The container runtime (or interpreter) could not be started."""


class SandboxStagingError(SandboxError):
    """Submitted files could not be written to the scratch directory."""


@dataclass(frozen=True)
class LanguageProfile:
    image: str
    default_command: str
    entry_file: str


LANGUAGE_PROFILES = {
    "python": LanguageProfile("python:3.11", "python main.py", "main.py"),
    "node": LanguageProfile("node:18", "node main.js", "main.js"),
}


def resolve_profile(language: Optional[str]) -> LanguageProfile:
    """Python gets the python profile; everything else runs on node."""
    return LANGUAGE_PROFILES.get((language or "node").lower(), LANGUAGE_PROFILES["node"])


@dataclass
class ProjectRunResult:
    stdout: str
    stderr: str
    exit_code: Optional[int]  # None when the run was killed on timeout
    image_used: str
    command_run: str
    timed_out: bool = False


class SandboxRunner:
    """Runs staged projects in resource-limited containers."""

    def __init__(
        self,
        client_factory: Callable[[], docker.DockerClient] = docker.from_env,
        timeout: float = 20,
        memory_limit: str = "512m",
        cpu_limit: float = 1.0,
        scratch_root: Optional[str] = None,
    ):
        self.client_factory = client_factory
        self.timeout = timeout
        self.memory_limit = memory_limit
        self.cpu_limit = cpu_limit
        self.scratch_root = scratch_root

    async def run_project(
        self,
        files: Iterable[tuple[str, str]],
        language: Optional[str] = None,
        command: Optional[str] = None,
    ) -> ProjectRunResult:
        """
        Run a project and return its output.

        Args:
            files: (path, content) pairs; paths are relative to the project root
            language: "python" or anything else for node
            command: Shell command to run instead of the language default

        Raises:
            UnsafePathError: A path escapes the scratch directory
            SandboxStagingError: Files could not be written
            SandboxUnavailableError: The container could not be started
        """
        profile = resolve_profile(language)
        run_command = command or profile.default_command

        workspace = self._stage(files, profile)
        try:
            return await asyncio.to_thread(
                self._run_container, workspace.path, profile.image, run_command
            )
        finally:
            workspace.cleanup()

    def _stage(self, files: Iterable[tuple[str, str]], profile: LanguageProfile) -> ScratchWorkspace:
        try:
            workspace = ScratchWorkspace(prefix="vipudev-project-", base_path=self.scratch_root)
        except OSError as e:
            raise SandboxStagingError(f"Could not create scratch directory: {e}") from e

        try:
            workspace.write_files(files, default_name=profile.entry_file)
        except UnsafePathError:
            workspace.cleanup()
            raise
        except OSError as e:
            workspace.cleanup()
            raise SandboxStagingError(f"Could not write project files: {e}") from e
        return workspace

    def _run_container(self, scratch: Path, image: str, command: str) -> ProjectRunResult:
        try:
            client = self.client_factory()
        except DockerException as e:
            raise SandboxUnavailableError(
                "Failed to run project in Docker. Ensure Docker is installed and accessible."
            ) from e

        # Each client owns a connection pool on the Docker socket
        try:
            return self._run_with_client(client, scratch, image, command)
        finally:
            self._close(client)

    def _run_with_client(
        self, client: docker.DockerClient, scratch: Path, image: str, command: str
    ) -> ProjectRunResult:
        try:
            container = client.containers.run(
                image,
                ["bash", "-lc", command],
                detach=True,
                network_mode="none",
                mem_limit=self.memory_limit,
                nano_cpus=int(self.cpu_limit * 1_000_000_000),
                volumes={str(scratch): {"bind": CONTAINER_WORKDIR, "mode": "rw"}},
                working_dir=CONTAINER_WORKDIR,
            )
        except DockerException as e:
            raise SandboxUnavailableError(
                "Failed to run project in Docker. Ensure Docker is installed and accessible."
            ) from e

        timed_out = False
        exit_code = None
        try:
            try:
                status = container.wait(timeout=self.timeout)
                exit_code = status.get("StatusCode")
            except (ReadTimeout, RequestsConnectionError):
                timed_out = True
                logger.warning("Sandbox container %s exceeded %ss, killing", container.id, self.timeout)
                self._kill(container)

            stdout = self._decode(container.logs(stdout=True, stderr=False))
            stderr = self._decode(container.logs(stdout=False, stderr=True))
        finally:
            self._remove(container)

        if timed_out:
            stderr += TIMEOUT_MARKER

        return ProjectRunResult(
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            image_used=image,
            command_run=command,
            timed_out=timed_out,
        )

    @staticmethod
    def _decode(output: bytes) -> str:
        return output.decode("utf-8", errors="replace") if output else ""

    @staticmethod
    def _close(client) -> None:
        try:
            client.close()
        except DockerException as e:
            logger.warning("Failed to close Docker client: %s", e)

    @staticmethod
    def _kill(container) -> None:
        try:
            container.kill()
        except DockerException as e:
            logger.warning("Failed to kill sandbox container %s: %s", container.id, e)

    @staticmethod
    def _remove(container) -> None:
        try:
            container.remove(force=True)
        except DockerException as e:
            logger.warning("Failed to remove sandbox container %s: %s", container.id, e)


_sandbox_runner: Optional[SandboxRunner] = None


def get_sandbox_runner() -> SandboxRunner:
    """Get or create the global sandbox runner."""
    global _sandbox_runner
    if _sandbox_runner is None:
        _sandbox_runner = SandboxRunner(
            timeout=settings.sandbox_timeout_seconds,
            memory_limit=settings.sandbox_memory_limit,
            cpu_limit=settings.sandbox_cpu_limit,
            scratch_root=settings.sandbox_scratch_root,
        )
    return _sandbox_runner
