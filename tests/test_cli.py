"""
Unit tests for the command-line interface.
"""

import io
import json
import logging
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_camera.cli import coerce_int, create_parser, format_settings, main, setup_logging
from voxel_camera.settings import BlenderSettings


def run_cli(*argv):
    """Run main() and capture (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestCoerceInt(unittest.TestCase):
    """Tests for input coercion."""

    def test_numbers(self):
        """Test integer text is read as-is."""
        assert coerce_int("12") == 12
        assert coerce_int(" 7 ") == 7
        assert coerce_int(5) == 5

    def test_non_numeric(self):
        """Test non-numeric text reads as zero."""
        assert coerce_int("") == 0
        assert coerce_int("abc") == 0
        assert coerce_int("3.5") == 0
        assert coerce_int(None) == 0


class TestFormatting(unittest.TestCase):
    """Tests for settings output."""

    def test_format_settings(self):
        """Test the text block shown to the user."""
        text = format_settings(BlenderSettings(width=96, height=68, scale=2.8284271247))

        assert "Resolution X: 96" in text
        assert "Resolution Y: 68" in text
        assert "Orthographic Scale: 2.82843" in text
        assert "Camera Rotation: X 60, Y 0, Z 45" in text

    def test_decimals(self):
        """Test the scale precision option."""
        text = format_settings(BlenderSettings(1, 1, 1.23456789), decimals=2)
        assert "Orthographic Scale: 1.23" in text


class TestMain(unittest.TestCase):
    """Tests for the main entry point."""

    def test_defaults(self):
        """Test parser defaults."""
        args = create_parser().parse_args([])
        assert args.tile_size == 32
        assert (args.x_tiles, args.y_tiles, args.z_tiles) == (1, 1, 1)

    def test_text_output(self):
        """Test a landscape room."""
        code, out, _ = run_cli("-t", "32", "-x", "3", "-y", "3", "-z", "1")

        assert code == 0
        assert "Resolution X: 96" in out
        assert "Resolution Y: 68" in out
        assert "Orthographic Scale: 2.82843" in out

    def test_json_output(self):
        """Test JSON output of a tower."""
        code, out, _ = run_cli("-x", "1", "-y", "1", "-z", "5", "--json")

        assert code == 0
        data = json.loads(out)
        assert data["width"] == 32
        assert data["height"] == 114
        assert abs(data["scale"] - 5.03723) < 1e-5

    def test_non_numeric_argument(self):
        """Test non-numeric tile counts are treated as zero."""
        code, out, _ = run_cli("-x", "abc", "-y", "2", "-z", "0", "--json")

        assert code == 0
        assert json.loads(out)["width"] == 32

    def test_preview(self):
        """Test writing a preview file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "frame.png"
            code, _, _ = run_cli("-x", "2", "-y", "2", "--preview", str(path))

            assert code == 0
            assert path.exists()

    def test_preview_error(self):
        """Test an empty frame reports an error."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "frame.png"
            code, _, err = run_cli("-t", "0", "--preview", str(path))

            assert code == 1
            assert err.startswith("Error:")
            assert not path.exists()

    def test_preview_error_prints_no_settings(self):
        """Test a failed run leaves stdout empty."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "frame.png"
            code, out, _ = run_cli("-t", "0", "--json", "--preview", str(path))

            assert code == 1
            assert out == ""


class TestSetupLogging(unittest.TestCase):
    """Tests for console logging setup."""

    def setUp(self):
        self.logger = logging.getLogger("voxel_camera")
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self):
        handlers, level, propagate = self.saved
        self.logger.handlers = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_warnings_print_once(self):
        """Test package records do not also reach the root logger."""
        root_records = []

        class Collect(logging.Handler):
            def emit(self, record):
                root_records.append(record)

        root = logging.getLogger()
        collector = Collect()
        root.addHandler(collector)
        try:
            logger = setup_logging(verbose=False)
            assert logger.propagate is False
            assert len(logger.handlers) == 1

            logging.getLogger("voxel_camera.settings").warning("flat frame")
            assert root_records == []
        finally:
            root.removeHandler(collector)

    def test_repeat_setup_keeps_one_handler(self):
        """Test calling setup twice does not duplicate output."""
        setup_logging(verbose=False)
        logger = setup_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG


if __name__ == "__main__":
    unittest.main(verbosity=2)
