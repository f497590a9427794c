"""
Tests for corpus reading, cleaning, windowing and the command-line entry point.
"""

import contextlib
import io
import json
import sys
import tempfile
import unittest
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_ngram.cli import main
from char_ngram.datasets import load_corpus_csv, read_corpus
from char_ngram.text_cleaning import CleanTextConfig, clean_text
from char_ngram.windows import char_ngrams, iter_transitions


class TestWindows(unittest.TestCase):
    """Tests for window helpers."""

    def test_char_ngrams(self):
        """Test listing character windows."""
        self.assertEqual(char_ngrams("abcd", 2), ["ab", "bc", "cd"])
        self.assertEqual(char_ngrams("ab", 3), [])

    def test_iter_transitions(self):
        """Test window to next-character pairs."""
        self.assertEqual(
            list(iter_transitions("abcd", 2)),
            [("ab", "c"), ("bc", "d")],
        )
        self.assertEqual(list(iter_transitions("ab", 2)), [])
        self.assertEqual(list(iter_transitions("a", 2)), [])

    def test_non_positive_n(self):
        """Test rejection of non-positive window sizes."""
        with self.assertRaises(ValueError):
            char_ngrams("abc", 0)
        with self.assertRaises(ValueError):
            list(iter_transitions("abc", -1))


class TestTextCleaning(unittest.TestCase):
    """Tests for corpus normalization."""

    def test_defaults_keep_text(self):
        """Test default cleaning keeps tabs and newlines."""
        self.assertEqual(clean_text("Hello,\tWorld!\n"), "Hello,\tWorld!\n")

    def test_defaults_drop_control_chars(self):
        """Test default cleaning drops control characters."""
        self.assertEqual(clean_text("a\x00b\x07c"), "abc")

    def test_full_cleaning(self):
        """Test lowercasing, accent stripping and whitespace collapsing."""
        cfg = CleanTextConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual(clean_text("  Café \n\n Crème  ", cfg), "cafe creme")


class TestDatasets(unittest.TestCase):
    """Tests for corpus readers."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_read_corpus(self):
        """Test reading a UTF-8 text corpus."""
        path = self.dir / "corpus.txt"
        path.write_text("héllo\nworld", encoding="utf-8")
        self.assertEqual(read_corpus(path), "héllo\nworld")

    def test_read_missing_file_raises(self):
        """Test read errors propagate."""
        with self.assertRaises(OSError):
            read_corpus(self.dir / "missing.txt")

    def test_load_corpus_csv(self):
        """Test joining a CSV text column into one corpus."""
        path = self.dir / "corpus.csv"
        path.write_text("text,label\nfirst line,a\nsecond line,b\n", encoding="utf-8")
        self.assertEqual(load_corpus_csv(path), "first line\nsecond line")

    def test_load_corpus_csv_missing_column(self):
        """Test a CSV without the text column."""
        path = self.dir / "corpus.csv"
        path.write_text("body\nsomething\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_corpus_csv(path)


class TestCli(unittest.TestCase):
    """Tests for the char-ngram command."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.corpus = self.dir / "corpus.txt"
        self.corpus.write_text("abab", encoding="utf-8")

    def tearDown(self):
        self.tmp.cleanup()

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_generate(self):
        """Test generating from command-line options."""
        code, out, _ = self._run([str(self.corpus), "-n", "2", "-s", "1", "-t", "ab", "-l", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "abab\n")

    def test_defaults_to_corpus_prefix(self):
        """Test the corpus prefix is the default seed text."""
        code, out, _ = self._run([str(self.corpus), "-n", "2", "-l", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "abab\n")

    def test_show_model(self):
        """Test printing the model table."""
        code, out, _ = self._run([str(self.corpus), "-n", "2", "-l", "0", "--show-model"])
        self.assertEqual(code, 0)
        self.assertIn("ab : ((a 1 1.0 1.0))", out)
        self.assertIn("ba : ((b 1 1.0 1.0))", out)

    def test_config_file(self):
        """Test options read from a JSON config file."""
        config = self.dir / "model.json"
        config.write_text(
            json.dumps({"window_length": 2, "seed": 3, "initial_text": "ba", "length": 1}),
            encoding="utf-8",
        )
        code, out, _ = self._run([str(self.corpus), "--config", str(config)])
        self.assertEqual(code, 0)
        self.assertEqual(out, "bab\n")

    def test_invalid_window_length_exits_2(self):
        """Test a non-positive window length exits with status 2."""
        code, out, err = self._run([str(self.corpus), "-n", "0"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("window_length", err)

    def test_missing_corpus(self):
        """Test an unreadable corpus exits with status 1."""
        code, out, _ = self._run([str(self.dir / "missing.txt"), "-n", "2"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_missing_config_file(self):
        """Test a missing config file exits with status 1."""
        code, out, _ = self._run(
            [str(self.corpus), "-n", "2", "--config", str(self.dir / "nope.json")]
        )
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_malformed_config_file(self):
        """Test invalid JSON in the config file exits with status 2."""
        config = self.dir / "model.json"
        config.write_text("{not json", encoding="utf-8")
        code, out, err = self._run([str(self.corpus), "-n", "2", "--config", str(config)])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("not valid JSON", err)

    def test_config_file_not_an_object(self):
        """Test a JSON config that is not an object exits with status 2."""
        config = self.dir / "model.json"
        config.write_text("[2, 3]", encoding="utf-8")
        code, out, err = self._run([str(self.corpus), "--config", str(config)])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("JSON object", err)


if __name__ == "__main__":
    unittest.main()
