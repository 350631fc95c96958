"""Command line entry point: `python -m monlox [script]`.

With a script path, runs the file and prints its final value. Without one,
starts an interactive REPL.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from monlox import __version__, config
from monlox.errors import MonloxSyntaxError
from monlox.interpreter import Interpreter, ensure_recursion_limit
from monlox.reader.lexer import lex
from monlox.types.objects import NULL, is_error

logger = logging.getLogger("monlox")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FATAL = 2

CONTINUATION_PROMPT = "... "


def run_script_file(file_path: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Run a script non-interactively and return the process exit status."""
    out = out or sys.stdout
    err = err or sys.stderr
    logger.debug("running script %s", file_path)
    p = Path(file_path)
    try:
        source = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file not found: {file_path}", file=err)
        return EXIT_ERROR

    interp = Interpreter()
    try:
        result = interp.eval(source)
    except MonloxSyntaxError as e:
        print(f"SyntaxError: {e}", file=err)
        return EXIT_ERROR
    except RecursionError:
        print("Fatal: maximum recursion depth exceeded", file=err)
        return EXIT_FATAL

    if is_error(result):
        print(result.inspect(), file=err)
        return EXIT_ERROR
    if result is not NULL:
        print(result.inspect(), file=out)
    return EXIT_OK


def _open_brackets(source: str) -> int:
    """Net count of unclosed `(`, `[` and `{` in `source`.

    Unlexable input counts as balanced so the evaluator reports the error.
    """
    depth = 0
    try:
        for tok in lex(source):
            if tok.kind == "operator" and tok.text in ("(", "[", "{"):
                depth += 1
            elif tok.kind == "operator" and tok.text in (")", "]", "}"):
                depth -= 1
    except MonloxSyntaxError:
        return 0
    return depth


def repl(stdin: Optional[TextIO] = None, out: Optional[TextIO] = None, prompt: Optional[str] = None) -> int:
    """Read-eval-print loop; state persists for the whole session.

    Input is buffered across lines until its brackets balance, so a
    multi-line function body can be typed in.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    prompt = config.get_prompt() if prompt is None else prompt
    interp = Interpreter()

    print(f"Monlox REPL v{__version__}", file=out)
    print("Type 'exit' or press Ctrl+D to quit.", file=out)

    pending: list[str] = []
    while True:
        out.write(CONTINUATION_PROMPT if pending else prompt)
        out.flush()
        raw = stdin.readline()
        if raw == "":
            print("\nExiting.", file=out)
            break
        line = raw.strip()
        if not pending:
            if not line:
                continue
            if line == "exit":
                break

        pending.append(raw)
        source = "".join(pending)
        if _open_brackets(source) > 0:
            continue
        pending = []

        try:
            result = interp.eval(source)
        except MonloxSyntaxError as e:
            print(f"SyntaxError: {e}", file=out)
            continue
        except RecursionError:
            print("Fatal: maximum recursion depth exceeded", file=out)
            continue

        if result is not NULL:
            print(result.inspect(), file=out)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="monlox", description="Monlox interpreter")
    ap.add_argument("script", nargs="?", help="script file to run; omit for a REPL")
    ap.add_argument("--log-level", default=None, help="logging level (default: $MONLOX_LOG_LEVEL or WARNING)")
    ap.add_argument("--version", action="version", version=f"monlox {__version__}")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or config.get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        limit = config.get_recursion_limit()
    except ValueError as e:
        ap.error(str(e))
    ensure_recursion_limit(limit)

    if args.script:
        return run_script_file(args.script)
    try:
        return repl()
    except KeyboardInterrupt:
        print("\nExiting.")
        return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
