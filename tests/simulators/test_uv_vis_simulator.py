import pytest

from labsim.errors import DegenerateInputError, NotFoundError
from labsim.random_source import QuietRandomSource, RandomSource
from labsim.simulators.uv_vis import COMPOUNDS, UvVisResult, UvVisSimulator


@pytest.fixture
def uv():
    return UvVisSimulator(random_source=QuietRandomSource())


class TestScan:

    def test_scan_range(self, uv):
        curve = uv.scan("ibuprofen")
        assert len(curve) == 101
        assert curve.xs[0] == 200.0
        assert curve.xs[-1] == pytest.approx(400.0)

    def test_maximum_at_lambda_max(self, uv):
        curve = uv.scan("ibuprofen")
        assert curve.y_at(222.0) == pytest.approx(0.8)
        assert curve.max_y == pytest.approx(0.8)

    def test_scan_never_negative(self):
        curve = UvVisSimulator(random_source=RandomSource(4)).scan("metronidazole")
        assert min(curve.ys) >= 0.0

    def test_unknown_compound(self, uv):
        with pytest.raises(NotFoundError):
            uv.scan("water")


class TestCalibration:

    def test_standards_follow_beer_lambert(self, uv):
        calibration = uv.calibrate("paracetamol")
        assert [s.concentration for s in calibration.standards] == [2.0, 4.0, 6.0, 8.0, 10.0]
        assert [s.absorbance for s in calibration.standards] == pytest.approx(
            [0.143, 0.286, 0.429, 0.572, 0.715]
        )
        assert calibration.fit.slope == pytest.approx(0.0715)
        assert calibration.fit.intercept == pytest.approx(0.0, abs=1e-9)
        assert calibration.fit.r_squared == pytest.approx(1.0)
        assert calibration.wavelength == 245

    def test_noisy_calibration_is_still_linear(self):
        calibration = UvVisSimulator(random_source=RandomSource(17)).calibrate("caffeine")
        assert calibration.fit.r_squared > 0.99

    def test_absorbance_rounded_to_three_places(self):
        calibration = UvVisSimulator(random_source=RandomSource(5)).calibrate("aspirin")
        for standard in calibration.standards:
            assert round(standard.absorbance, 3) == standard.absorbance

    def test_equation_text(self, uv):
        assert uv.calibrate("aspirin").equation.startswith("y = 0.050x + ")

    def test_identical_standards_degenerate(self, uv):
        with pytest.raises(DegenerateInputError):
            uv.calibrate("aspirin", [5.0, 5.0, 5.0])


class TestUnknown:

    def test_back_calculated_concentration(self, uv):
        calibration = uv.calibrate("paracetamol")
        unknown = uv.measure_unknown("paracetamol", 5.0, calibration)
        assert unknown.absorbance == pytest.approx(0.3575)
        assert unknown.calculated_concentration == pytest.approx(5.0)

    def test_noisy_unknown_close_to_truth(self):
        uv = UvVisSimulator(random_source=RandomSource(23))
        calibration = uv.calibrate("theophylline")
        unknown = uv.measure_unknown("theophylline", 6.0, calibration)
        assert unknown.calculated_concentration == pytest.approx(6.0, abs=0.3)


class TestRunAnalysis:

    def test_full_workflow(self, uv):
        run = uv.run_analysis("paracetamol", {"unknown_concentration": 5.0})
        assert isinstance(run.result, UvVisResult)
        assert run.result.lambda_max == 245
        assert run.result.unknown.calculated_concentration == pytest.approx(5.0)
        assert len(run.curve) == 101

    def test_unknown_skipped_by_default(self, uv):
        assert uv.run_analysis("caffeine").result.unknown is None

    def test_custom_standards_and_wavelength(self, uv):
        run = uv.run_analysis(
            "caffeine",
            {"standard_concentrations": [1, 3, 5], "analysis_wavelength": 280},
        )
        assert len(run.result.calibration.standards) == 3
        assert run.result.calibration.wavelength == 280

    def test_library_has_ten_compounds(self):
        assert len(COMPOUNDS) == 10
        assert COMPOUNDS.lookup("salbutamol")["absorptivity"] == 0.055
