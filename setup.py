import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('fpl/__init__.py').read())

setup(
    name = "fpl",
    version = __version__,
    packages = ['fpl'],

    requires = [],
    install_requires = [],

    package_data = {'fpl': ['py.typed']},

    test_suite = 'tests.__main__',

    description = "a lexer and parser for the FPL block configuration format",
    license = "MIT",
    keywords = "FPL configuration parser lexer",
    long_description='''
FPL is a small, human-authored configuration format made of named blocks:

    @window { width: 640, title: "Main", flags: [1, 2, 3] }
    @theme { colors: { fg: "#fff", bg: "#000" } }  # comments run to end of line

``fpl.parse(text)`` turns it into a Document, a mapping from block name to a
mapping of property keys to values (strings, numbers, booleans, arrays and
nested objects).
''',

    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: General",
        "License :: OSI Approved :: MIT License",
    ],
)
