"""Child process execution with timeout and cancellation."""

import asyncio
import contextlib
import logging
import os
import shutil
import signal

from zopen_mcp.models import (
    CommandFailed,
    CommandSpec,
    CommandTimedOut,
    ExecutableNotFound,
    ExecutionResult,
    Success,
)

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 65536


def resolve_executable(name: str) -> str | None:
    """Locate an executable.

    Bare names are searched on PATH. Anything containing a path separator
    is used as given and checked when spawned.

    Returns:
        Path to execute, or None if a bare name is not on PATH
    """
    if os.sep in name or (os.altsep and os.altsep in name):
        return name
    return shutil.which(name)


def _decode(data: bytes | bytearray | None) -> str:
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    """Append everything read from stream to buffer until EOF."""
    if stream is None:
        return
    while chunk := await stream.read(READ_CHUNK_SIZE):
        buffer.extend(chunk)


async def _kill(proc: asyncio.subprocess.Process) -> None:
    """Kill the child's whole process group and reap it."""
    with contextlib.suppress(ProcessLookupError):
        os.killpg(proc.pid, signal.SIGKILL)
    with contextlib.suppress(ProcessLookupError):
        proc.kill()
    await proc.wait()


async def run_command(
    spec: CommandSpec,
    timeout: float | None = None,
) -> ExecutionResult:
    """Execute a command and classify its outcome.

    stdin is detached so the child never reads the MCP stdio stream.
    Output is collected as it arrives, so a timed out command still
    reports what it printed before it was killed. If the awaiting task is
    cancelled, the child process group is killed before the cancellation
    propagates.

    Args:
        spec: Command to run
        timeout: Seconds before the child is killed, None for no limit

    Returns:
        Success, CommandFailed, ExecutableNotFound or CommandTimedOut
    """
    executable = resolve_executable(spec.executable)
    if executable is None:
        logger.warning("Executable not found on PATH: %s", spec.executable)
        return ExecutableNotFound(spec.executable)

    logger.debug("Executing: %s", spec)

    try:
        proc = await asyncio.create_subprocess_exec(
            executable,
            *spec.argv[1:],
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=spec.cwd,
            start_new_session=True,
        )
    except FileNotFoundError as e:
        # Missing working directory surfaces as the same exception
        if spec.cwd and e.filename == spec.cwd:
            raise
        logger.warning("Executable not found: %s", spec.executable)
        return ExecutableNotFound(spec.executable)

    stdout_buffer = bytearray()
    stderr_buffer = bytearray()

    try:
        await asyncio.wait_for(
            asyncio.gather(
                _drain(proc.stdout, stdout_buffer),
                _drain(proc.stderr, stderr_buffer),
                proc.wait(),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        await _kill(proc)
        logger.warning("Command timed out after %ss: %s", timeout, spec)
        return CommandTimedOut(
            timeout=timeout or 0.0,
            stdout=_decode(stdout_buffer),
            stderr=_decode(stderr_buffer),
        )
    except asyncio.CancelledError:
        await _kill(proc)
        logger.info("Command cancelled, child %d terminated: %s", proc.pid, spec)
        raise

    stdout = _decode(stdout_buffer)
    stderr = _decode(stderr_buffer)
    returncode = proc.returncode if proc.returncode is not None else 0

    logger.debug(
        "Command exited with %d (%d bytes stdout, %d bytes stderr)",
        returncode,
        len(stdout),
        len(stderr),
    )

    if returncode != 0:
        return CommandFailed(exit_code=returncode, stderr=stderr, stdout=stdout)
    return Success(stdout=stdout, stderr=stderr)
