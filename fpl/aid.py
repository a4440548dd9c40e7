"""Entry point for the embedded configuration loader of the host kernel.

The loader calls ``FPLParser().parse(stream)``. It shares the engine of ``fpl.parse``.
"""

from .lexer import Lexer
from .parser import Parser


class FPLParser:
    def parse(self, stream):
        return Parser(Lexer(stream)).parse()
