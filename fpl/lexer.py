## Lexer Implementation

import enum
from io import StringIO

from .utils import ASCII_WHITESPACE, isdigit, isalpha, isalnum
from .exceptions import UnterminatedString


@enum.unique
class TokenType(enum.Enum):
    BLOCK_START = enum.auto()
    IDENTIFIER = enum.auto()
    STRING = enum.auto()
    NUMBER = enum.auto()
    BOOLEAN = enum.auto()
    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    LEFT_BRACKET = enum.auto()
    RIGHT_BRACKET = enum.auto()
    COLON = enum.auto()
    COMMA = enum.auto()
    EOF = enum.auto()
    ERROR = enum.auto()


PUNCTUATION = {
    '@': TokenType.BLOCK_START,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    '[': TokenType.LEFT_BRACKET,
    ']': TokenType.RIGHT_BRACKET,
    ':': TokenType.COLON,
    ',': TokenType.COMMA,
}

BOOLEANS = ('true', 'false')


class Token(str):
    """A string with meta-information, that is produced by the lexer.

    When parsing text, the resulting chunks of the input that haven't been discarded,
    will end up as Tokens. Since Token inherits from ``str``, it compares equal to its literal text.

    Attributes:
        type: The ``TokenType`` of the token
        value: The literal text of the token (same as the token itself). For strings, the text between the quotes.
        pos_in_stream: The index of the token's first character in the input
        line: The line of the token's first character (starting with 1)
        column: The column of the token's first character (starting with 1)
    """
    __slots__ = ('type', 'value', 'pos_in_stream', 'line', 'column')

    def __new__(cls, type_, value, pos_in_stream=None, line=None, column=None):
        self = super(Token, cls).__new__(cls, value)
        self.type = type_
        self.value = value
        self.pos_in_stream = pos_in_stream
        self.line = line
        self.column = column
        return self

    def update(self, type_=None, value=None):
        return Token.new_borrow_pos(
            type_ if type_ is not None else self.type,
            value if value is not None else self.value,
            self
        )

    @classmethod
    def new_borrow_pos(cls, type_, value, borrow_t):
        return cls(type_, value, borrow_t.pos_in_stream, borrow_t.line, borrow_t.column)

    def __reduce__(self):
        return (self.__class__, (self.type, self.value, self.pos_in_stream, self.line, self.column))

    def __repr__(self):
        return 'Token(%s, %r)' % (self.type.name, self.value)

    def __eq__(self, other):
        if isinstance(other, Token) and self.type != other.type:
            return False

        return str.__eq__(self, other)

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    __hash__ = str.__hash__


class Lexer:
    """Reads an FPL text one character at a time and hands out one token per ``next_token()`` call.

    The lexer keeps only the current character. ``stream`` is either a ``str`` or a text
    file-like object with a ``read(n)`` method.

    Parameters:
        callbacks: Optional mapping of ``TokenType`` to a function that receives each token
            of that type and returns the token to use in its place.
        source_path: Name of the input, used in error messages.
    """

    def __init__(self, stream, callbacks=None, source_path=None):
        if isinstance(stream, str):
            stream = StringIO(stream)
        self.stream = stream
        self.callbacks = dict(callbacks or {})
        self.source_path = source_path

        self.char_pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.stream.read(1)

    def _advance(self):
        if self.current_char:
            self.char_pos += 1
            if self.current_char == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.current_char = self.stream.read(1)

    def _skip_whitespace_and_comments(self):
        while True:
            while self.current_char and self.current_char in ASCII_WHITESPACE:
                self._advance()
            if self.current_char == '#':
                while self.current_char and self.current_char != '\n':
                    self._advance()
            else:
                break

    def _token(self, type_, value, start):
        pos, line, column = start
        return Token(type_, value, pos, line, column)

    def next_token(self):
        "Returns the next token in the input. Keeps returning an EOF token once the input is exhausted."
        self._skip_whitespace_and_comments()
        start = (self.char_pos, self.line, self.column)
        c = self.current_char

        if not c:
            t = self._token(TokenType.EOF, '', start)
        elif c in PUNCTUATION:
            self._advance()
            t = self._token(PUNCTUATION[c], c, start)
        elif c == '"':
            t = self._read_string(start)
        elif isdigit(c) or c == '.':
            t = self._read_number(start)
        elif isalpha(c):
            t = self._read_identifier_or_boolean(start)
        else:
            self._advance()
            t = self._token(TokenType.ERROR, c, start)

        if t.type in self.callbacks:
            t = self.callbacks[t.type](t)
            if not isinstance(t, Token):
                raise TypeError("Callbacks must return a token (returned %r)" % t)
        return t

    def _read_string(self, start):
        self._advance()
        chars = []
        while self.current_char and self.current_char != '"':
            chars.append(self.current_char)
            self._advance()

        if self.current_char != '"':
            pos, line, column = start
            raise UnterminatedString(pos, line, column, self.source_path)
        self._advance()
        return self._token(TokenType.STRING, ''.join(chars), start)

    def _read_number(self, start):
        chars = []
        has_dot = False
        while isdigit(self.current_char) or self.current_char == '.':
            if self.current_char == '.':
                if has_dot:
                    return self._token(TokenType.ERROR, ''.join(chars) + '.', start)
                has_dot = True

            chars.append(self.current_char)
            self._advance()

        return self._token(TokenType.NUMBER, ''.join(chars), start)

    def _read_identifier_or_boolean(self, start):
        chars = []
        while self.current_char and (isalnum(self.current_char) or self.current_char == '_'):
            chars.append(self.current_char)
            self._advance()

        value = ''.join(chars)
        if value in BOOLEANS:
            return self._token(TokenType.BOOLEAN, value, start)
        return self._token(TokenType.IDENTIFIER, value, start)

    def lex(self):
        "Iterates over all the remaining tokens, ending with (and including) the EOF token"
        while True:
            t = self.next_token()
            yield t
            if t.type == TokenType.EOF:
                break
