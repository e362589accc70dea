"""Running an external program on the matched paths."""

import logging
import os
import sys
from collections.abc import Callable

import click

from .models import ChildStatus, ChildTransition, ExecutionResult

logger = logging.getLogger(__name__)

WAIT_FLAGS = os.WUNTRACED | os.WCONTINUED


class ExecutionError(RuntimeError):
    """Spawning or waiting for the child process failed."""


def decode_status(status: int) -> ChildTransition:
    """Translate a raw wait status into a ChildTransition."""
    if os.WIFEXITED(status):
        return ChildTransition(ChildStatus.EXITED, os.WEXITSTATUS(status))
    if os.WIFSIGNALED(status):
        return ChildTransition(ChildStatus.SIGNALED, os.WTERMSIG(status))
    if os.WIFSTOPPED(status):
        return ChildTransition(ChildStatus.STOPPED, os.WSTOPSIG(status))
    if os.WIFCONTINUED(status):
        return ChildTransition(ChildStatus.CONTINUED)
    raise ExecutionError(f"Unrecognized wait status: {status:#x}")


class Executor:
    """Spawns a program with the matched paths as its whole argument vector.

    The first matched path becomes ``argv[0]`` of the child; the program's
    own path is only used to locate the image. The caller blocks until the
    child has exited or was killed by a signal, and every state change seen
    on the way (including stop and continue) is reported on stderr.

    Args:
        exec_path: Path of the program to run.
        spawn: Process creation primitive, ``os.posix_spawn`` compatible.
        waitpid: Wait primitive, ``os.waitpid`` compatible.
    """

    def __init__(
        self,
        exec_path: str,
        spawn: Callable[..., int] = os.posix_spawn,
        waitpid: Callable[[int, int], tuple[int, int]] = os.waitpid,
    ):
        self.exec_path = exec_path
        self._spawn = spawn
        self._waitpid = waitpid

    def run(self, matches: list[str]) -> ExecutionResult | None:
        """Run the program on ``matches`` and wait for it to finish.

        Returns:
            The child's lifecycle, or None if there was nothing to pass.

        Raises:
            ExecutionError: If the child cannot be spawned or waited for.
        """
        if not matches:
            logger.warning(f"No matches, not running {self.exec_path}")
            return None

        pid = self.spawn(matches)
        return self.wait(pid)

    def spawn(self, argv: list[str]) -> int:
        """Start the child process and return its pid."""
        logger.debug(f"Spawning {self.exec_path} with {len(argv)} argument(s)")
        # child inherits our descriptors; keep its output after ours
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            return self._spawn(self.exec_path, argv, os.environ)
        except OSError as e:
            raise ExecutionError(f"Cannot execute '{self.exec_path}': {e}") from e

    def wait(self, pid: int) -> ExecutionResult:
        """Block on the child until it exits or is killed."""
        transitions: list[ChildTransition] = []
        while True:
            try:
                _, status = self._waitpid(pid, WAIT_FLAGS)
            except OSError as e:
                raise ExecutionError(f"Waiting for process {pid} failed: {e}") from e

            transition = decode_status(status)
            transitions.append(transition)
            click.echo(transition.describe(), err=True)

            if transition.is_terminal:
                return ExecutionResult(pid=pid, transitions=transitions)
