import logging
logger: logging.Logger = logging.getLogger("fpl")
logger.addHandler(logging.StreamHandler())
# By default, we should not output any log messages
logger.setLevel(logging.CRITICAL)


ASCII_WHITESPACE = frozenset(' \t\n\r\f\v')


def isdigit(c):
    return '0' <= c <= '9'


def isalpha(c):
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')


def isalnum(c):
    return isalpha(c) or isdigit(c)
