"""Run producer scripts in a child interpreter."""

import logging
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)


class ScriptExecutor:
    """Callable that runs ``interpreter path`` and waits for it to finish.

    A non-zero exit raises subprocess.CalledProcessError.
    """

    def __init__(self, interpreter: Optional[str] = None):
        self.interpreter = interpreter or sys.executable

    def __call__(self, path: str) -> None:
        logger.debug("Executing %s %s", self.interpreter, path)
        subprocess.run([self.interpreter, path], check=True)

    def __repr__(self) -> str:
        return f"ScriptExecutor(interpreter={self.interpreter!r})"
