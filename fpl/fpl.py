import os

from .exceptions import ConfigurationError, assert_config
from .lexer import Lexer, TokenType
from .parser import Parser
from .utils import logger


class FPLOptions:
    """Specifies the options for FPL

    """
    OPTIONS_DOC = """
    debug
            Log every token and finished block to the ``fpl`` logger at DEBUG level (default: False)
    lexer_callbacks
            Dictionary of callbacks for the lexer, keyed by ``TokenType``. May alter tokens during lexing. Use with caution.
    source_path
            Name of the input, reported in error messages (default: None)
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults = {
        'debug': False,
        'lexer_callbacks': {},
        'source_path': None,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        self.__dict__['options'] = options

        for type_ in options['lexer_callbacks']:
            assert_config(type_, list(TokenType), "Lexer callback key %r isn't a TokenType. Expected one of: %s")

        if o:
            raise ConfigurationError("Unknown options: %s" % list(o.keys()))

    def __getattr__(self, name):
        try:
            return self.__dict__['options'][name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        self.options[name] = value


class FPL:
    """Main interface for the library.

    A thin front-end that wires a new ``Lexer`` to a new ``Parser`` for every input, so one
    instance can be shared freely between threads.

    Parameters:
        options: Keyword options, see ``FPLOptions``.

    Example:

        >>> FPL().parse('@server { port: 8080 }')['server']['port'].as_number()
        8080.0
    """

    def __init__(self, **options):
        self.options = FPLOptions(options)

    if __doc__:
        __doc__ += "\n\n" + FPLOptions.OPTIONS_DOC

    @classmethod
    def open(cls, filename, rel_to=None, encoding='utf8', **options):
        """Parse the FPL file given by its filename, and return its Document

        If ``rel_to`` is provided, the function will find the filename in relation to it.

        Example:

            >>> FPL.open("settings.fpl", rel_to=__file__)
            Document(...)

        """
        if rel_to:
            basepath = os.path.dirname(rel_to)
            filename = os.path.join(basepath, filename)
        options.setdefault('source_path', filename)
        with open(filename, encoding=encoding) as f:
            return cls(**options).parse(f)

    def __repr__(self):
        return 'FPL(source_path=%r, debug=%r)' % (self.options.source_path, self.options.debug)

    def _build_lexer(self, text):
        return Lexer(text, self.options.lexer_callbacks, self.options.source_path)

    def lex(self, text):
        "Only lex the text, without parsing it. Returns an iterator of tokens ending with the EOF token."
        return self._build_lexer(text).lex()

    def parse(self, text):
        """Parse the given text or text stream.

        Parameters:
            text (str or file-like): The FPL source.

        Returns:
            A ``Document`` mapping each block name to its ``Block``.

        Raises:
            LexError, ParseError: On the first invalid token. No partial document is returned.
        """
        if self.options.source_path:
            logger.debug("Parsing %s", self.options.source_path)
        parser = Parser(self._build_lexer(text), debug=self.options.debug)
        return parser.parse()


def parse(text, **options):
    "Parse an FPL text or text stream into a ``Document``. Accepts the same options as ``FPL``."
    return FPL(**options).parse(text)
