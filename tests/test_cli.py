"""CLI exit codes, configuration loading and the experiment pipeline."""

from contextlib import redirect_stdout
from pathlib import Path
import io
import json
import os
import sys
import tempfile
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config_manager import ConfigManager
from saqueens.analysis import cli, settings


SETTING_NAMES = (
    "N_VALUES", "RUNS_SA", "BASE_SEED", "OUT_DIR", "NUM_PROCESSES",
    "DATE_IN_FILENAMES", "RUN_TAG",
)


class CliTestCase(unittest.TestCase):

    def setUp(self):
        self._saved = {name: getattr(settings, name) for name in SETTING_NAMES}
        self.tmp = tempfile.TemporaryDirectory()
        self.out_dir = os.path.join(self.tmp.name, "out")
        self.config_path = os.path.join(self.tmp.name, "config.json")
        with open(self.config_path, "w") as f:
            json.dump(
                {
                    "experiment_settings": {
                        "N_values": [2, 4],
                        "runs_sa": 2,
                        "base_seed": 3,
                        "output_dir": self.out_dir,
                    },
                    "execution_settings": {"num_processes": 1},
                    "output_settings": {"date_in_filenames": False, "run_tag": "ci"},
                },
                f,
            )

    def tearDown(self):
        for name, value in self._saved.items():
            setattr(settings, name, value)
        self.tmp.cleanup()

    def run_main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            try:
                cli.main(argv)
            except SystemExit as exc:
                return exc.code, buf.getvalue()
        return None, buf.getvalue()


class SolveCommandTests(CliTestCase):

    def test_solved_board_exits_zero(self):
        code, out = self.run_main(["5", "--seed", "3"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("  54321\n"))
        self.assertEqual(out.count("Q"), 5)
        self.assertIn("N=5: solved", out)

    def test_unsolvable_board_exits_one(self):
        code, out = self.run_main(["3", "--seed", "1"])
        self.assertEqual(code, 1)
        self.assertIn("exhausted the cooling schedule after 1001 iterations", out)

    def test_quiet(self):
        code, out = self.run_main(["1", "--quiet"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")

    def test_invalid_size_exits_one(self):
        code, out = self.run_main(["0"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid board size", out)

    def test_missing_size_is_a_usage_error(self):
        with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])
        self.assertEqual(ctx.exception.code, 2)


class ConfigurationTests(CliTestCase):

    def test_apply_configuration(self):
        with redirect_stdout(io.StringIO()):
            cli.apply_configuration(self.config_path)
        self.assertEqual(settings.N_VALUES, [2, 4])
        self.assertEqual(settings.RUNS_SA, 2)
        self.assertEqual(settings.BASE_SEED, 3)
        self.assertEqual(settings.NUM_PROCESSES, 1)
        self.assertEqual(settings.OUT_DIR, self.out_dir)
        self.assertFalse(settings.DATE_IN_FILENAMES)
        self.assertEqual(settings.RUN_TAG, "ci")

    def test_invalid_n_values(self):
        manager = ConfigManager(self.config_path)
        with redirect_stdout(io.StringIO()):
            manager.update_setting("experiment_settings", "N_values", [0, 4])
        with self.assertRaises(ValueError):
            cli.apply_configuration(self.config_path)

    def test_config_manager_round_trip(self):
        manager = ConfigManager(self.config_path)
        self.assertEqual(manager.get_experiment_settings()["runs_sa"], 2)
        self.assertEqual(manager.get_execution_settings(), {"num_processes": 1})
        with redirect_stdout(io.StringIO()):
            manager.update_setting("output_settings", "run_tag", "nightly")
        self.assertEqual(ConfigManager(self.config_path).get_output_settings()["run_tag"], "nightly")

    def test_missing_config_file(self):
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self.tmp.name, "absent.json"))
        code, out = self.run_main(["--experiments", "--config", os.path.join(self.tmp.name, "absent.json")])
        self.assertEqual(code, 1)
        self.assertIn("Configuration file not found", out)

    def write_experiment_settings(self, **overrides):
        manager = ConfigManager(self.config_path)
        with redirect_stdout(io.StringIO()):
            for key, value in overrides.items():
                manager.update_setting("experiment_settings", key, value)

    def test_null_runs_is_a_configuration_error(self):
        self.write_experiment_settings(runs_sa=None)
        code, out = self.run_main(["--experiments", "--config", self.config_path])
        self.assertEqual(code, 1)
        self.assertIn("Configuration error", out)
        self.assertIn("runs_sa", out)

    def test_malformed_values_are_configuration_errors(self):
        for overrides in ({"N_values": None}, {"N_values": [4, None]}, {"base_seed": "abc"}, {"runs_sa": True}):
            with self.subTest(overrides=overrides):
                self.write_experiment_settings(**overrides)
                code, out = self.run_main(["--experiments", "--config", self.config_path])
                self.assertEqual(code, 1)
                self.assertIn("Configuration error", out)
                self.write_experiment_settings(N_values=[2, 4], base_seed=3, runs_sa=2)


class ExperimentCommandTests(CliTestCase):

    def test_sequential_pipeline_writes_reports(self):
        code, out = self.run_main(
            ["--experiments", "--mode", "sequential", "--config", self.config_path, "--validate"]
        )
        self.assertIsNone(code)
        self.assertIn("N=2: 0/2 solved", out)
        self.assertIn("N=4: 2/2 solved", out)
        written = sorted(os.listdir(self.out_dir))
        self.assertIn("results_SA_ci.csv", written)
        self.assertIn("raw_data_SA_ci.csv", written)
        self.assertIn("01_success_rate_vs_N_ci.png", written)

    def test_runs_override_and_no_plots(self):
        code, _ = self.run_main(
            ["--experiments", "--mode", "sequential", "--config", self.config_path, "--runs", "1", "--no-plots"]
        )
        self.assertIsNone(code)
        self.assertEqual(settings.RUNS_SA, 1)
        self.assertFalse(any(name.endswith(".png") for name in os.listdir(self.out_dir)))

    def test_interrupt_exits_130(self):
        with mock.patch.object(cli, "run_pipeline", side_effect=KeyboardInterrupt):
            code, out = self.run_main(["--experiments", "--config", self.config_path])
        self.assertEqual(code, 130)
        self.assertIn("Execution interrupted by user", out)


if __name__ == "__main__":
    unittest.main()
