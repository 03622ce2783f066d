import unittest
import os
import shutil
import tempfile
from unittest.mock import patch
import scalefinder.analyzer
from scalefinder.analyzer import ScaleAnalyzer
from scalefinder.constants import DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE
from scalefinder.pitch import PitchClass
from scalefinder.shapes import RegistryFormatError, ShapeNotFoundError
from scalefinder.weights import InputChord

INPUT = [
    InputChord(PitchClass.C, "dur"),
    InputChord(PitchClass.D, "mi"),
    InputChord(PitchClass.F, "maj"),
]


class TestScaleAnalyzer(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.chords_path = self._write("chords", "dur:0:4:7\nmi:0:3:7\nmaj:0:4:7:11\n")
        self.scales_path = self._write("scales", "major:0:2:4:5:7:9:11\n")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write(self, name, text):
        path = os.path.join(self.test_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_analyze_ranks(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        ranked = analyzer.analyze(INPUT)
        self.assertEqual([str(m) for m in ranked],
                         ["C major", "F major", "Bb major", "D# major", "G major"])

    def test_scales_reloaded_each_analysis(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        self.assertEqual(len(analyzer.analyze(INPUT)), 5)
        self._write("scales", "major:0:2:4:5:7:9:11\nmajor:0:2:4:5:7:9:11\n")
        self.assertEqual(len(analyzer.analyze(INPUT)), 10)

    def test_chords_loaded_once(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        self._write("chords", "dur:0:4:7\n")
        # The session still knows 'mi' and 'maj'
        self.assertTrue(analyzer.analyze(INPUT))
        self.assertEqual(analyzer.chord_shapes.names(), ["dur", "mi", "maj"])

    def test_suitable_chords(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        f_major = analyzer.analyze(INPUT)[1]
        groups = analyzer.suitable_chords(f_major)
        self.assertEqual([str(c) for c in groups[0][1]], ["Fdur", "Fmaj"])

    def test_custom_threshold(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path, required_accuracy=0.9)
        self.assertEqual([m.percent for m in analyzer.analyze(INPUT)], [100, 100, 91])

    def test_empty_input(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        self.assertEqual(analyzer.analyze([]), [])

    def test_unknown_shape(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        with self.assertRaises(ShapeNotFoundError):
            analyzer.analyze([InputChord(PitchClass.C, "moll")])

    def test_broken_scale_file_surfaces_on_analyze(self):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path)
        self._write("scales", "major:0:2:4:five\n")
        with self.assertRaises(RegistryFormatError):
            analyzer.analyze(INPUT)

    @patch("builtins.print")
    def test_verbose_logging(self, mock_print):
        analyzer = ScaleAnalyzer(self.chords_path, self.scales_path, verbose=True)
        analyzer.analyze(INPUT)
        messages = [c.args[0] for c in mock_print.call_args_list]
        self.assertTrue(all(m.startswith("[ScaleAnalyzer]") for m in messages))
        self.assertIn(f"[ScaleAnalyzer] 3 chord shapes loaded from {self.chords_path}", messages)

    @patch("builtins.print")
    def test_quiet_by_default(self, mock_print):
        ScaleAnalyzer(self.chords_path, self.scales_path).analyze(INPUT)
        mock_print.assert_not_called()

    def test_bundled_databases_ship_inside_package(self):
        package_dir = os.path.dirname(os.path.abspath(scalefinder.analyzer.__file__))
        for path in (DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE):
            self.assertEqual(os.path.commonpath([package_dir, os.path.abspath(path)]), package_dir)
            self.assertTrue(os.path.isfile(path))

    def test_default_session_uses_bundled_databases(self):
        analyzer = ScaleAnalyzer()
        self.assertIn("dur", analyzer.chord_shapes)
        self.assertTrue(analyzer.load_scales())

    def test_bundled_databases(self):
        analyzer = ScaleAnalyzer(DEFAULT_CHORDS_FILE, DEFAULT_SCALES_FILE)
        ranked = analyzer.analyze(INPUT)
        self.assertIn("F major", [str(m) for m in ranked])
        for m in ranked:
            self.assertGreater(m.accuracy, 0.7)
            self.assertLessEqual(m.accuracy, 1.0)


if __name__ == "__main__":
    unittest.main()
