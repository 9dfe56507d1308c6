"""StageResult - what every `cmd_*` function hands back to its caller."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """A command split into announce, progress, result and output.

    `announce` is known before any work starts. Draining `progress_callback`
    does the work, yielding (fraction, message) pairs, and fills in `result`
    (one line for humans), `output` (dict matching the command's registered
    schema) and `success` (drives the CLI exit code).
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
