"""Process launcher built on anyio."""

import subprocess
from collections.abc import Sequence
from pathlib import Path  # noqa: TC003 - Used at runtime in signatures
from typing import final

import anyio

from tsdown_action.enums import IOMode
from tsdown_action.exceptions import ProcessSpawnError


@final
class AnyioProcessLauncher:
    """Launches a child process with anyio and waits for it to exit.

    Output is never captured. In INHERIT mode the child writes straight to
    the parent's terminal; in SILENT mode all standard streams go to the
    null device.
    """

    async def launch(
        self,
        command: Sequence[str],
        cwd: Path,
        io_mode: IOMode,
    ) -> int:
        """Launch ``command`` in ``cwd`` and return its exit code.

        Raises:
            ProcessSpawnError: If the process could not be launched.
        """
        stream = subprocess.DEVNULL if io_mode == IOMode.SILENT else None

        try:
            process = await anyio.open_process(
                list(command),
                cwd=cwd,
                stdin=stream,
                stdout=stream,
                stderr=stream,
            )
        except OSError as e:
            program = command[0] if command else ""
            msg = f"Failed to launch '{program}': {e}"
            raise ProcessSpawnError(msg, command=tuple(command), cause=e) from e

        async with process:
            return await process.wait()
