"""
Shell-like tokenizer for console input lines.
"""

import logging
import shlex
from typing import Iterator

logger = logging.getLogger(__name__)


class Tokens:
    """Lazy, restartable view over the tokens of a single line.

    Every call to ``iter()`` lexes the line again from the start. Malformed
    quoting never raises: lexing stops at the broken token and whatever was
    complete before it is kept.
    """

    def __init__(self, line: str) -> None:
        self.line = line

    def __iter__(self) -> Iterator[str]:
        lexer = shlex.shlex(self.line, posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ""
        while True:
            try:
                token = lexer.get_token()
            except ValueError as e:
                logger.debug("Stopped tokenizing %r: %s", self.line, e)
                return
            if token is None:
                return
            yield token

    def __repr__(self) -> str:
        return f"Tokens({self.line!r})"


def tokenize(line: str) -> Tokens:
    """Split a raw input line into tokens using POSIX shell quoting rules."""
    return Tokens(line)
