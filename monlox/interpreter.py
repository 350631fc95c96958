from __future__ import annotations

import logging
import sys

from monlox import config
from monlox.evaluation.evaluator import evaluate
from monlox.reader.parser import parse
from monlox.types.environment import Environment
from monlox.types.objects import MonloxObject

logger = logging.getLogger(__name__)


def ensure_recursion_limit(limit: int) -> None:
    """Raise the host recursion limit to at least `limit`; never lowers it."""
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Reads and evaluates Monlox source text against one root Environment.
    Bindings made by earlier `eval` calls stay visible to later ones, which
    is what the REPL relies on.

    Evaluation recurses on the host stack, so creating an Interpreter raises
    the process-wide recursion limit to `recursion_limit` (default: the
    MONLOX_RECURSION_LIMIT setting). Embedders that manage the limit
    themselves can pass a value no higher than the current one.
    """

    def __init__(self, env: Environment | None = None, recursion_limit: int | None = None):
        self.env: Environment = env if env is not None else Environment()
        ensure_recursion_limit(recursion_limit or config.get_recursion_limit())

    def eval(self, code: str) -> MonloxObject:
        """Parse and evaluate `code`.

        Language errors come back as an `Error` object; malformed source
        raises MonloxSyntaxError before anything is evaluated.
        """
        program = parse(code)
        logger.debug("evaluating %d statements", len(program.statements))
        return evaluate(program, self.env)
