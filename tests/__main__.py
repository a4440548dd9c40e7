from __future__ import absolute_import, print_function

import logging
import unittest

from fpl import logger

from .test_lexer import TestLexer
from .test_parser import TestParser, TestParseErrors
from .test_value import TestValue
from .test_fpl import TestFPL, TestOptions
from .test_logger import Testlogger

logger.setLevel(logging.INFO)

if __name__ == "__main__":
    unittest.main()
