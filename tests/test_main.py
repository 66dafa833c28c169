import unittest
import contextlib
import io
import os
import sys
import tempfile

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nucmotif.generator import generate_from_config
from nucmotif.main import build_parser, main
from nucmotif.models import CounterConfig, GeneratorConfig
from nucmotif.utils import parse_probabilities


class CommandLineTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "nucleotide_database.txt")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _run(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate_then_count(self):
        code, out = self._run(["generate", "-n", "50", "-m", "20", "--seed", "4", "-o", self.path])
        self.assertEqual(code, 0)
        self.assertIn("Generating and writing sequences...", out)
        self.assertIn("Sequences generated and written to the file.", out)
        self.assertTrue(os.path.exists(self.path))

        code, out = self._run(["count", "-s", "2", "-i", self.path])
        self.assertEqual(code, 0)
        self.assertRegex(out, r"The best motif is: [ACGT]{2}\n")

    def test_count_reports_best_and_top(self):
        with open(self.path, "w") as f:
            f.write("AAAAAAA\nACGTACG\n")
        code, out = self._run(["count", "-s", "3", "-i", self.path, "--top", "2"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "The best motif is: AAA")
        self.assertEqual(lines[1], "AAA\t5")

    def test_pure_python_flag(self):
        with open(self.path, "w") as f:
            f.write("CCCCGG\n")
        code, out = self._run(["count", "-s", "2", "-i", self.path, "--pure-python"])
        self.assertEqual(code, 0)
        self.assertIn("The best motif is: CC", out)

    def test_generate_matches_config_helper(self):
        code, _ = self._run(["generate", "-n", "30", "-m", "16", "--seed", "8", "-o", self.path])
        self.assertEqual(code, 0)
        with open(self.path) as f:
            from_cli = f.read()

        other = os.path.join(self.tmpdir.name, "other.txt")
        generate_from_config(GeneratorConfig(n=30, m=16, output_path=other, seed=8))
        with open(other) as f:
            self.assertEqual(f.read(), from_cli)

    def test_verbose_count_with_small_motif_chunk(self):
        with open(self.path, "w") as f:
            f.write("GGGGTA\nGGGA\n")
        code, out = self._run(["count", "-s", "2", "-i", self.path, "--motif-chunk", "3", "--verbose"])
        self.assertEqual(code, 0)
        self.assertIn("The best motif is: GG", out)
        self.assertIn("[count] 16 motifs over 2 lines", out)

    def test_defaults_come_from_config(self):
        parser = build_parser()
        gen_args = parser.parse_args(["generate"])
        self.assertEqual(gen_args.output, GeneratorConfig().output_path)
        self.assertEqual(gen_args.n, GeneratorConfig().n)
        cnt_args = parser.parse_args(["count"])
        self.assertEqual(cnt_args.input, CounterConfig().input_path)
        self.assertEqual(cnt_args.motif_chunk, CounterConfig().motif_chunk)
        self.assertEqual(cnt_args.s, CounterConfig().s)

    def test_missing_input_exits_with_error(self):
        missing = os.path.join(self.tmpdir.name, "missing.txt")
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(["count", "-i", missing])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Error:", out.getvalue())
        self.assertNotIn("The best motif is", out.getvalue())

    def test_bad_probabilities_rejected_by_parser(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["generate", "--probabilities", "0.5,0.5", "-o", self.path])
        self.assertEqual(ctx.exception.code, 2)


class ParseProbabilitiesTests(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(parse_probabilities("0.1, 0.2,0.3,0.4"), (0.1, 0.2, 0.3, 0.4))

    def test_wrong_arity(self):
        with self.assertRaises(ValueError):
            parse_probabilities("1,0,0")


if __name__ == "__main__":
    unittest.main()
