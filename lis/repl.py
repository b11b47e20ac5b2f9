"""Interactive read-eval-print loop for lis."""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from lis import config
from lis.errors import LisError
from lis.interpreter import Interpreter

try:
    import readline  # noqa: F401  line editing and history for input()
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

# Failures that abort one line but never the session
RECOVERABLE = (LisError, ArithmeticError, RecursionError)


def repl(
    interpreter: Interpreter,
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Read a line, evaluate its first form, print the result; until EOF or Ctrl-C."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    prompt = prompt if prompt is not None else config.get_prompt()

    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            return

        if not line.strip():
            continue

        try:
            text = interpreter.eval_to_string(line)
        except RECOVERABLE as e:
            logger.debug("evaluation of %r failed", line, exc_info=True)
            print(f"Error: {e}", file=err)
            continue

        print(text, file=out)


def main() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    repl(Interpreter())


if __name__ == "__main__":
    main()
