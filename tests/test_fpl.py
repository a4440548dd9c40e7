import os
import shutil
import tempfile
import threading
from unittest import TestCase, main

from fpl import FPL, FPLOptions, ConfigurationError, TokenType, UnexpectedToken, parse
from fpl.aid import FPLParser
from io import StringIO


class TestFPL(TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf8') as f:
            f.write(text)
        return path

    def test_parse(self):
        d = FPL().parse('@server { host: "localhost", port: 8080 }')
        self.assertEqual(d['server']['port'].as_number(), 8080.0)

    def test_instance_is_reusable(self):
        p = FPL()
        self.assertEqual(p.parse('@a {x: 1}'), p.parse('@a {x: 1}'))
        self.assertEqual(p.parse('@b {}').to_python(), {'b': {}})

    def test_open(self):
        path = self._write('settings.fpl', '# settings\n@window { width: 640, title: "Main" }\n')
        d = FPL.open(path)
        self.assertEqual(d.to_python(), {'window': {'width': 640.0, 'title': 'Main'}})

    def test_open_rel_to(self):
        self._write('x.fpl', '@a { ok: true }')
        d = FPL.open('x.fpl', rel_to=os.path.join(self.tmpdir, 'anything.py'))
        self.assertTrue(d['a']['ok'].as_boolean())

    def test_open_reports_path(self):
        path = self._write('bad.fpl', '@a {\n x: }')
        with self.assertRaises(UnexpectedToken) as cm:
            FPL.open(path)
        self.assertEqual(cm.exception.source_path, path)
        self.assertIn(path, str(cm.exception))

    def test_lex(self):
        tokens = list(FPL().lex('@a {}'))
        self.assertEqual([t.type for t in tokens], [
            TokenType.BLOCK_START, TokenType.IDENTIFIER, TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE, TokenType.EOF])

    def test_lexer_callbacks(self):
        renames = {'colour': 'color'}

        def rename(t):
            return t.update(value=renames.get(t.value, t.value))

        d = FPL(lexer_callbacks={TokenType.IDENTIFIER: rename}).parse('@a { colour: "red" }')
        self.assertEqual(d.to_python(), {'a': {'color': 'red'}})

    def test_concurrent_parses(self):
        p = FPL()
        results = {}

        def work(i):
            results[i] = p.parse('@b%d { n: %d, l: [%d, %d] }' % (i, i, i, i + 1))

        threads = [threading.Thread(target=work, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i in range(8):
            self.assertEqual(results[i].to_python(), {'b%d' % i: {'n': float(i), 'l': [float(i), float(i + 1)]}})

    def test_embedded_facade(self):
        text = '@a { x: [1, {y: "z"}] } @b { "k": false }'
        self.assertEqual(FPLParser().parse(StringIO(text)), parse(text))
        self.assertEqual(FPLParser().parse(text), parse(text))


class TestOptions(TestCase):
    def test_defaults(self):
        o = FPLOptions({})
        self.assertFalse(o.debug)
        self.assertEqual(o.lexer_callbacks, {})
        self.assertIsNone(o.source_path)

    def test_bool_coercion(self):
        self.assertIs(FPLOptions({'debug': 1}).debug, True)

    def test_unknown_option(self):
        self.assertRaises(ConfigurationError, FPL, bogus=True)
        self.assertRaises(ConfigurationError, parse, '', bogus=True)

    def test_bad_callback_key(self):
        self.assertRaises(ConfigurationError, FPL, lexer_callbacks={'IDENTIFIER': lambda t: t})

    def test_setattr(self):
        o = FPLOptions({})
        o.debug = True
        self.assertTrue(o.debug)
        with self.assertRaises(ConfigurationError):
            o.not_an_option = 1

    def test_unknown_attribute(self):
        self.assertRaises(AttributeError, getattr, FPLOptions({}), 'nope')

    def test_repr(self):
        self.assertEqual(repr(FPL(source_path='a.fpl')), "FPL(source_path='a.fpl', debug=False)")


if __name__ == '__main__':
    main()
