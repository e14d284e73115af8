"""Process package for running the bundler.

Key Components:
    - ExecutableReference: How to invoke a tool
    - ProcessOutcome: Result of a successful run
    - ExecutableResolver / ProcessLauncher: Ports for resolution and spawning
    - LocalBinaryResolver, PackageRunnerResolver, FallbackResolver: Resolvers
    - AnyioProcessLauncher: anyio-based launcher
    - FakeProcessLauncher, StaticResolver: Test doubles
    - ProcessRunner: Resolve, launch, map exit code

Example:
    >>> from tsdown_action.process import ProcessRunner
    >>> runner = ProcessRunner()
    >>> await runner.run(("src/index.ts", "--dts"), Path.cwd())
"""

from ._fake import FakeProcessLauncher, LaunchCall, StaticResolver
from ._launcher import AnyioProcessLauncher
from ._models import ExecutableReference, ProcessOutcome
from ._protocol import ExecutableResolver, ProcessLauncher
from ._resolver import (
    DEFAULT_CLI_SCRIPT,
    DEFAULT_PACKAGE,
    FallbackResolver,
    LocalBinaryResolver,
    PackageRunnerResolver,
    create_resolver,
)
from ._runner import ProcessRunner

__all__ = [
    "DEFAULT_CLI_SCRIPT",
    "DEFAULT_PACKAGE",
    "AnyioProcessLauncher",
    "ExecutableReference",
    "ExecutableResolver",
    "FakeProcessLauncher",
    "FallbackResolver",
    "LaunchCall",
    "LocalBinaryResolver",
    "PackageRunnerResolver",
    "ProcessLauncher",
    "ProcessOutcome",
    "ProcessRunner",
    "StaticResolver",
    "create_resolver",
]
