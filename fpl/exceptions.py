class FPLError(Exception):
    pass


class ConfigurationError(FPLError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class ValueKindError(FPLError, TypeError):
    pass


class ParseError(FPLError):
    pass


class LexError(FPLError):
    pass


class UnexpectedInput(FPLError):
    """UnexpectedInput Error.

    Used as a base class for the following exceptions:

    - ``UnexpectedToken``: The parser received an unexpected token
    - ``UnexpectedEOF``: The input ended where the grammar expected more
    - ``UnexpectedCharacters``: The lexer encountered a character it can't start a token with
    - ``UnterminatedString``: A quoted string was still open at end-of-input
    - ``MalformedNumber``: A numeric literal had more than one decimal point

    After catching one of these exceptions, you may call ``get_context`` to create a nicer error message.
    """
    pos_in_stream = None
    line = None
    column = None
    source_path = None

    def _set_position(self, pos_in_stream, line, column, source_path):
        self.pos_in_stream = pos_in_stream
        self.line = line
        self.column = column
        self.source_path = source_path

    def get_context(self, text, span=40):
        """Returns a pretty string pinpointing the error in the text,
        with span amount of context characters around it.

        Note:
            The parser reads its input as a stream and doesn't keep a copy of it,
            so you have to provide the text again
        """
        assert self.pos_in_stream is not None, self
        pos = self.pos_in_stream
        start = max(pos - span, 0)
        end = pos + span
        before = text[start:pos].rsplit('\n', 1)[-1]
        after = text[pos:end].split('\n', 1)[0]
        return before + after + '\n' + ' ' * len(before.expandtabs()) + '^\n'

    def _format_position(self):
        if self.line is None:
            return ''
        where = 'line %s, column %s' % (self.line, self.column)
        if self.source_path:
            where = '%s, %s' % (self.source_path, where)
        return ' (%s)' % where


class UnexpectedToken(ParseError, UnexpectedInput):
    """Raised by the parser when the current token doesn't fit the grammar.

    ``token`` is the offending token, ``expected`` the token types (or a description)
    that would have been accepted instead.
    """

    def __init__(self, token, expected, message=None, source_path=None):
        self.token = token
        self.expected = expected
        self.message = message
        self._set_position(token.pos_in_stream, token.line, token.column, source_path)

        super(UnexpectedToken, self).__init__()

    def __reduce__(self):
        return (self.__class__, (self.token, self.expected, self.message, self.source_path))

    def __str__(self):
        message = "Unexpected token: %s" % self.token.value
        if self.message:
            message = "%s. %s" % (self.message, message)
        return message + self._format_position()


class UnexpectedEOF(UnexpectedToken):
    def __str__(self):
        message = "Unexpected end-of-input"
        if self.message:
            message = "%s. %s" % (self.message, message)
        return message + self._format_position()


class UnexpectedCharacters(LexError, UnexpectedInput):
    def __init__(self, token, source_path=None):
        self.token = token
        self.char = token.value
        self._set_position(token.pos_in_stream, token.line, token.column, source_path)

        super(UnexpectedCharacters, self).__init__()

    def __reduce__(self):
        return (self.__class__, (self.token, self.source_path))

    def __str__(self):
        return "Unexpected character: %r%s" % (self.char, self._format_position())


class MalformedNumber(LexError, UnexpectedInput):
    def __init__(self, token, source_path=None):
        self.token = token
        self._set_position(token.pos_in_stream, token.line, token.column, source_path)

        super(MalformedNumber, self).__init__()

    def __reduce__(self):
        return (self.__class__, (self.token, self.source_path))

    def __str__(self):
        return "Malformed number: %s%s" % (self.token.value, self._format_position())


class UnterminatedString(LexError, UnexpectedInput):
    def __init__(self, pos_in_stream, line, column, source_path=None):
        self._set_position(pos_in_stream, line, column, source_path)

        super(UnterminatedString, self).__init__()

    def __reduce__(self):
        return (self.__class__, (self.pos_in_stream, self.line, self.column, self.source_path))

    def __str__(self):
        return "Unterminated string" + self._format_position()


class NestingTooDeep(ParseError, UnexpectedInput):
    "Raised when arrays and objects are nested deeper than the interpreter's recursion limit allows"

    def __init__(self, token, source_path=None):
        self.token = token
        self._set_position(token.pos_in_stream, token.line, token.column, source_path)

        super(NestingTooDeep, self).__init__()

    def __reduce__(self):
        return (self.__class__, (self.token, self.source_path))

    def __str__(self):
        return "Nesting too deep at token: %s%s" % (self.token.value, self._format_position())
