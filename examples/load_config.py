"""
Loading a configuration
=======================

Parses an FPL text and reads a few typed settings out of it.
"""
import sys
import logging

from fpl import FPL, FPLError, logger

text = '''
# Window settings
@window {
    width: 640, height: 480,
    title: "Main window",
    fullscreen: false,
}

@theme {
    colors: { fg: "#ffffff", bg: "#202020" },
    fonts: ["Mono", "Sans"],
}
'''


def main():
    verbose = '-v' in sys.argv
    if verbose:
        logger.setLevel(logging.DEBUG)
    parser = FPL(debug=verbose)
    try:
        doc = parser.parse(text)
    except FPLError as e:
        print("Invalid configuration:", e)
        return 1

    window = doc['window']
    print(window['width'].as_number(), window['height'].as_number(), window['title'].as_string())
    print(doc['theme'].to_python())
    print(doc.pretty())
    return 0


if __name__ == '__main__':
    sys.exit(main())
