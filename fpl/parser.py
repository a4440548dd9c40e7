"Recursive-descent parser for FPL documents"

from .exceptions import (UnexpectedToken, UnexpectedEOF, UnexpectedCharacters, MalformedNumber,
                         NestingTooDeep)
from .lexer import TokenType
from .value import Value, Block, Document
from .utils import isdigit, logger


class Parser:
    """Builds a ``Document`` out of the tokens of a ``Lexer``.

    The parser holds a single token of lookahead in ``current_token`` and pulls the next one
    from the lexer only through ``eat()``. Any grammar violation raises immediately; nothing
    is returned for a document that failed to parse.
    """

    def __init__(self, lexer, debug=False):
        self.lexer = lexer
        self.debug = debug
        self.source_path = lexer.source_path
        self.current_token = None
        self._next()

    def _next(self):
        self.current_token = self.lexer.next_token()
        if self.debug:
            t = self.current_token
            logger.debug("Token %r at line %s, column %s", t, t.line, t.column)

    def _unexpected(self, expected, message=None):
        token = self.current_token
        if token.type == TokenType.ERROR:
            first = token.value[:1]
            if isdigit(first) or first == '.':
                return MalformedNumber(token, self.source_path)
            return UnexpectedCharacters(token, self.source_path)
        if token.type == TokenType.EOF:
            return UnexpectedEOF(token, expected, message, self.source_path)
        return UnexpectedToken(token, expected, message, self.source_path)

    def eat(self, type_):
        if self.current_token.type == type_:
            self._next()
        else:
            raise self._unexpected([type_])

    def parse(self):
        try:
            return self._parse_document()
        except RecursionError:
            raise NestingTooDeep(self.current_token, self.source_path) from None

    def _parse_document(self):
        blocks = Document()
        while self.current_token.type != TokenType.EOF:
            if self.current_token.type == TokenType.BLOCK_START:
                name, props = self.parse_block()
                if name in blocks:
                    logger.debug("Block %r declared again, replacing the earlier declaration", name)
                blocks[name] = props
            else:
                raise self._unexpected([TokenType.BLOCK_START], "Expected block start")

        return blocks

    def parse_block(self):
        self.eat(TokenType.BLOCK_START)
        name = self.current_token.value
        self.eat(TokenType.IDENTIFIER)
        self.eat(TokenType.LEFT_BRACE)
        props = self.parse_properties()
        self.eat(TokenType.RIGHT_BRACE)

        logger.debug("Parsed block %r with %d properties", name, len(props))
        return name, props

    def parse_properties(self):
        props = Block()
        while self.current_token.type != TokenType.RIGHT_BRACE:
            if self.current_token.type in (TokenType.IDENTIFIER, TokenType.STRING):
                key = self.current_token.value
                self.eat(self.current_token.type)
            else:
                raise self._unexpected([TokenType.IDENTIFIER, TokenType.STRING],
                                       "Expected key (identifier or string)")

            self.eat(TokenType.COLON)
            props[key] = self.parse_value()
            if self.current_token.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)

        return props

    def parse_value(self):
        token = self.current_token
        if token.type == TokenType.STRING:
            self.eat(TokenType.STRING)
            return Value.string(token.value)

        elif token.type == TokenType.NUMBER:
            if token.value == '.':
                raise MalformedNumber(token, self.source_path)
            self.eat(TokenType.NUMBER)
            return Value.number(float(token.value))

        elif token.type == TokenType.BOOLEAN:
            self.eat(TokenType.BOOLEAN)
            return Value.boolean(token.value == 'true')

        elif token.type == TokenType.LEFT_BRACKET:
            return self.parse_array()

        elif token.type == TokenType.LEFT_BRACE:
            return self.parse_object()

        raise self._unexpected([TokenType.STRING, TokenType.NUMBER, TokenType.BOOLEAN,
                                TokenType.LEFT_BRACKET, TokenType.LEFT_BRACE],
                               "Unexpected value type")

    def parse_array(self):
        self.eat(TokenType.LEFT_BRACKET)
        items = []
        while self.current_token.type != TokenType.RIGHT_BRACKET:
            items.append(self.parse_value())
            if self.current_token.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)

        self.eat(TokenType.RIGHT_BRACKET)
        return Value.array(items)

    def parse_object(self):
        # Object keys are identifiers only; quoted keys are accepted in block properties alone
        self.eat(TokenType.LEFT_BRACE)
        obj = {}
        while self.current_token.type != TokenType.RIGHT_BRACE:
            key = self.current_token.value
            self.eat(TokenType.IDENTIFIER)
            self.eat(TokenType.COLON)
            obj[key] = self.parse_value()

            if self.current_token.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)

        self.eat(TokenType.RIGHT_BRACE)
        return Value.object(obj)
