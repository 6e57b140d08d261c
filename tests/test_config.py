import unittest
import gfpoly


class Configuration(unittest.TestCase):

    def test_version(self):
        self.assertIsInstance(gfpoly.__version__, str)
        self.assertEqual(gfpoly.__license__, 'MIT License')

    def test_arg_parser(self):
        parser = gfpoly.get_arg_parser()
        options = parser.parse_args([])
        self.assertEqual(options.log_level, 'info')
        self.assertFalse(options.no_log)
        self.assertFalse(options.VERSION)
        options = parser.parse_args(['--log-level', 'debug', '--no-log', '-V'])
        self.assertEqual(options.log_level, 'debug')
        self.assertTrue(options.no_log)
        self.assertTrue(options.VERSION)
        options, args = parser.parse_known_args(['-p', '3', '1', '0', '1'])
        self.assertEqual(args, ['-p', '3', '1', '0', '1'])


if __name__ == "__main__":
    unittest.main()
