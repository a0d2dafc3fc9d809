import io
import unittest
import contextlib
from unittest import mock
from powsearch import cli
from powsearch.config import Config


class TestCli(unittest.TestCase):

    def run_cli(self, argv):
        out = io.StringIO()
        with mock.patch.object(cli, 'get_config', return_value=Config()), contextlib.redirect_stdout(out):
            cli.main(argv)
        return out.getvalue()

    def test_search(self):
        out = self.run_cli(['search', '', '-z', '0'])
        self.assertIn("Searching...", out)
        self.assertIn(" 55 b8 52 78", out)
        self.assertIn("Increment was: 0", out)

    def test_errors(self):
        for argv in [
            ['search', 'x', '-z', '1', '-a', 'nope'],
            ['search', 'x', '-z', '1', '--encoding', 'hex'],
            ['search', 'x', '-z', '-1'],
        ]:
            out = io.StringIO()
            with self.assertRaises(SystemExit) as ctx:
                with mock.patch.object(cli, 'get_config', return_value=Config()), contextlib.redirect_stdout(out):
                    cli.main(argv)
            self.assertEqual(ctx.exception.code, 1)
            self.assertTrue(out.getvalue().startswith("[error]"))
            self.assertNotIn("Searching...", out.getvalue())

    def test_stop_on_wrap(self):
        with self.assertRaises(SystemExit):
            self.run_cli(['search', '', '-z', '1', '--stop-on-wrap'])

    def test_bench(self):
        out = self.run_cli(['bench', '--start', '0', '--stop', '2', '--target', '6'])
        self.assertIn('Zeroes', out)
        self.assertEqual(len(out.strip().splitlines()), 5)

    def test_algorithm_after_subcommand(self):
        out = self.run_cli(['search', '', '-z', '0', '-a', 'sha512'])
        self.assertIn("Increment was: 0", out)
        self.assertIn(" 3e da 27 f9 7a 32 38 a5", out)
        out = self.run_cli(['bench', '-a', 'sha1', '--stop', '1', '--target', '5'])
        self.assertIn('Zeroes', out)

    def test_interrupted(self):
        out = io.StringIO()
        with mock.patch.object(cli, 'search_command', side_effect=KeyboardInterrupt):
            with self.assertRaises(SystemExit) as ctx:
                with mock.patch.object(cli, 'get_config', return_value=Config()), contextlib.redirect_stdout(out):
                    cli.main(['search', 'x', '-z', '1'])
        self.assertEqual(ctx.exception.code, 130)
        self.assertEqual(out.getvalue(), "[interrupted]\n")
