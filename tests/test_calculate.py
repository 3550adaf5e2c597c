import unittest

from core.calculate import build_input, run_calculation
from core.errors import InvalidInput, MissingRequiredArgument, UnknownGauge


class TestBuildInput(unittest.TestCase):
    def test_gauges_string(self):
        p = build_input(voltage=12, current=10, distance_ft=25, gauges="10, 2/0")
        self.assertEqual(frozenset({"10", "2/0"}), p.gauge_filter)
        self.assertAlmostEqual(3.0, p.max_drop_percent)
        self.assertAlmostEqual(50.0, p.round_trip_distance_ft)

    def test_empty_selection_is_all(self):
        self.assertIsNone(build_input(voltage=12, current=10, distance_ft=25, gauges=[]).gauge_filter)
        self.assertIsNone(build_input(voltage=12, current=10, distance_ft=25, gauges="").gauge_filter)

    def test_missing_required(self):
        with self.assertRaises(MissingRequiredArgument) as ctx:
            build_input(voltage=12, current=None, distance_ft=25)
        self.assertEqual("current", ctx.exception.name)
        self.assertIsInstance(ctx.exception, InvalidInput)

    def test_unknown_gauge_rejected_on_run(self):
        p = build_input(voltage=12, current=10, distance_ft=25, gauges="10,13")
        with self.assertRaises(UnknownGauge):
            run_calculation(p)

    def test_numeric_error_reported_before_unknown_gauge(self):
        p = build_input(voltage=0, current=10, distance_ft=25, gauges="11")
        with self.assertRaises(InvalidInput) as ctx:
            run_calculation(p)
        self.assertNotIsInstance(ctx.exception, UnknownGauge)
        self.assertIn("voltage", str(ctx.exception))


class TestRunCalculation(unittest.TestCase):
    def test_result_bundle(self):
        res = run_calculation(build_input(voltage=14.5, current=8, distance_ft=10, gauges="8,14,22"))
        self.assertEqual(["22", "14", "8"], [r.gauge.identifier for r in res.results])
        self.assertTrue(res.has_recommendation)
        self.assertEqual("14", res.recommendation.gauge.identifier)

    def test_logs_rejection(self):
        with self.assertLogs("core.calculate", level="WARNING") as logs:
            with self.assertRaises(InvalidInput):
                run_calculation(build_input(voltage=0, current=8, distance_ft=10))
        self.assertTrue(any("Rejected input" in m for m in logs.output))

    def test_logs_recommendation(self):
        with self.assertLogs("core.calculate", level="INFO") as logs:
            run_calculation(build_input(voltage=14.5, current=8, distance_ft=10, gauges=["8", "14", "22"]))
        self.assertTrue(any("Recommended 14 AWG" in m for m in logs.output))


if __name__ == "__main__":
    unittest.main()
