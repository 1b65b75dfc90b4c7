import pytest

from labsim.errors import DegenerateInputError
from labsim.models import Peak
from labsim.response import (
    absorbance_peak,
    analyzer_transmission,
    collision_energy_factor,
    column_factor,
    detection_efficiency,
    elution_time,
    liquid_peak_height,
    liquid_retention_time,
    lognormal_peak,
    mass_resolution_bar_width,
    normalize_intensities,
    oven_temperature,
    standard_absorbance,
)


# ─── Liquid chromatography ───────────────────────────────────────────────────


class TestLiquidRetention:

    def test_baseline_conditions_keep_base_time(self):
        assert liquid_retention_time(3.8, 1.0, 60.0) == 3.8

    def test_doubling_flow_halves_retention(self):
        assert liquid_retention_time(3.8, 2.0, 60.0) == 1.9

    def test_weaker_mobile_phase_retains_longer(self):
        assert liquid_retention_time(3.8, 1.0, 30.0) == 7.6

    def test_rounded_to_two_decimals(self):
        assert liquid_retention_time(2.9, 1.0, 70.0) == 2.49

    def test_zero_flow_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            liquid_retention_time(3.8, 0.0, 60.0)

    def test_zero_composition_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            liquid_retention_time(3.8, 1.0, 0.0)


class TestDetection:

    def test_full_efficiency_at_optimum(self):
        assert detection_efficiency(245.0, 245.0) == 1.0

    def test_linear_falloff(self):
        assert detection_efficiency(270.0, 245.0) == pytest.approx(0.5)
        assert detection_efficiency(220.0, 245.0) == pytest.approx(0.5)

    def test_never_negative(self):
        assert detection_efficiency(400.0, 245.0) == 0.0

    def test_peak_height(self):
        assert liquid_peak_height(20.0, 1.0) == pytest.approx(60.0)
        assert liquid_peak_height(100.0, 0.5) == pytest.approx(150.0)


# ─── Gas chromatography ──────────────────────────────────────────────────────


class TestElution:

    def test_column_factor(self):
        assert column_factor(78.0) == pytest.approx(0.656)

    def test_ethanol_elution_time(self):
        assert elution_time(78.0, 50.0, 10.0) == pytest.approx(3.456)

    def test_faster_ramp_elutes_sooner(self):
        assert elution_time(97.0, 50.0, 20.0) < elution_time(97.0, 50.0, 10.0)

    def test_zero_ramp_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            elution_time(78.0, 50.0, 0.0)

    def test_oven_ramps_then_holds(self):
        assert oven_temperature(0.0, 50.0, 10.0) == 50.0
        assert oven_temperature(5.0, 50.0, 10.0) == 100.0
        assert oven_temperature(30.0, 50.0, 10.0) == 250.0


# ─── Mass spectrometry ───────────────────────────────────────────────────────


class TestMassSpecResponse:

    def test_collision_energy_factor_range(self):
        assert collision_energy_factor(10.0) == pytest.approx(1.0)
        assert collision_energy_factor(100.0) == pytest.approx(0.1)
        assert collision_energy_factor(20.0) == pytest.approx(0.9)

    def test_normalize_scales_top_to_100_and_sorts(self):
        peaks = [Peak(194, 10, 1), Peak(109, 55, 1), Peak(55, 35, 1)]
        normalized = normalize_intensities(peaks)
        assert [p.center for p in normalized] == [55, 109, 194]
        assert normalized[1].intensity == pytest.approx(100.0)
        assert normalized[2].intensity == pytest.approx(10 / 55 * 100)

    def test_normalize_all_zero_returns_unscaled(self):
        peaks = [Peak(50, 0, 1), Peak(10, 0, 1)]
        assert [p.intensity for p in normalize_intensities(peaks)] == [0, 0]

    def test_normalize_does_not_mutate_input(self):
        peaks = [Peak(109, 50, 1)]
        normalize_intensities(peaks)
        assert peaks[0].intensity == 50

    @pytest.mark.parametrize(
        "resolution, width",
        [(500, 5), (1999, 5), (2000, 2), (9999, 2), (10000, 1), (50000, 1)],
    )
    def test_bar_width(self, resolution, width):
        assert mass_resolution_bar_width(resolution) == width


# ─── UV-Vis, particle sizing, polarimetry ────────────────────────────────────


class TestOtherLaws:

    def test_absorbance_peak_shape(self):
        peak = absorbance_peak(245.0, label="Paracetamol")
        assert peak.center == 245.0
        assert peak.intensity == pytest.approx(0.8)
        assert peak.width == pytest.approx(40.0)

    def test_beer_lambert(self):
        assert standard_absorbance(0.715, 10.0) == pytest.approx(0.715)
        assert standard_absorbance(0.5, 0.0) == 0.0

    def test_lognormal_peak_width_in_log_space(self):
        peak = lognormal_peak(Peak(center=120.0, intensity=100.0, width=18.0))
        assert peak.center == 120.0
        assert peak.width == pytest.approx(0.18)

    def test_analyzer_transmission(self):
        assert analyzer_transmission(54.5, 54.5) == pytest.approx(100.0)
        assert analyzer_transmission(144.5, 54.5) == pytest.approx(0.0, abs=1e-9)
        assert analyzer_transmission(0.0, 45.0) == pytest.approx(50.0)
