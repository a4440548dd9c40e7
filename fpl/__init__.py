from .utils import logger
from .value import Value, ValueKind, Block, Document
from .exceptions import (FPLError, ConfigurationError, ValueKindError, ParseError, LexError,
                         UnexpectedInput, UnexpectedToken, UnexpectedEOF, UnexpectedCharacters,
                         MalformedNumber, UnterminatedString, NestingTooDeep)
from .lexer import Token, TokenType, Lexer
from .parser import Parser
from .fpl import FPL, FPLOptions, parse

__version__: str = "1.0.0"
