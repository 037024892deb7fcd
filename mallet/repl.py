"""Read-eval-print driver and script runner.

    mallet                 interactive session
    mallet FILE ARGS...    run FILE with *ARGV* bound to ARGS
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from mallet.config import get_history_file, get_log_level, get_prompt
from mallet.interpreter import ERROR_PREFIX, Interpreter

try:
    import readline
except ImportError:  # not available on every platform
    readline = None

logger = logging.getLogger(__name__)

BANNER = '(println (str "Mallet [" *host-language* "]"))'


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_history() -> None:
    if readline is None:
        return
    try:
        readline.read_history_file(get_history_file())
    except OSError:
        logger.debug("no history file at %s", get_history_file())


def _save_history() -> None:
    if readline is None:
        return
    try:
        readline.write_history_file(get_history_file())
    except OSError as exc:
        logger.warning("could not save history: %s", exc)


def repl(interp: Interpreter, prompt: Optional[str] = None) -> None:
    """Loop until end of input; one failing line never ends the session."""
    prompt = prompt if prompt is not None else get_prompt()
    interp.rep(BANNER)
    _load_history()
    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue
            if not line.strip():
                continue
            output = interp.rep(line)
            if output:
                print(output)
    finally:
        _save_history()


def run_file(interp: Interpreter, path: str) -> int:
    output = interp.load_file(path)
    if output.startswith(ERROR_PREFIX):
        print(output, file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mallet", description="Mallet Lisp interpreter")
    parser.add_argument("file", nargs="?", help="script to run instead of starting a REPL")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="arguments bound to *ARGV*")
    options = parser.parse_args(argv)

    configure_logging()
    interp = Interpreter(argv=options.args)
    if options.file:
        return run_file(interp, options.file)
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
