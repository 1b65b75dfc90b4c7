import pytest

from labsim.random_source import QuietRandomSource, RandomSource
from labsim.simulators.psa import PsaResult, PsaSimulator


@pytest.fixture
def psa():
    return PsaSimulator(random_source=QuietRandomSource())


class TestDistribution:

    def test_log_size_axis(self, psa):
        run = psa.run_analysis("liposomes")
        assert len(run.curve) == 250
        assert run.curve.xs[0] == pytest.approx(1.0)
        assert run.curve.xs[-1] == pytest.approx(1.0e4)

    def test_renormalized_to_100(self, psa):
        assert psa.run_analysis("raw_powder").curve.max_y == pytest.approx(100.0)

    def test_mode_near_preset_mean(self, psa):
        curve = psa.run_analysis("liposomes").curve
        mode = max(curve, key=lambda point: point[1])[0]
        assert 100.0 < mode < 130.0


class TestStatistics:

    def test_monodisperse_good(self, psa):
        result = psa.run_analysis("liposomes").result
        assert isinstance(result, PsaResult)
        assert result.statistics.z_average_nm == pytest.approx(120.0)
        assert result.statistics.quality == "Good"

    def test_aggregated_protein_warns(self, psa):
        stats = psa.run_analysis("aggregated_protein").result.statistics
        assert len(stats.peaks) == 2
        assert stats.quality == "Warning"

    def test_random_pdi_range(self):
        sim = PsaSimulator(random_source=RandomSource(31))
        for _ in range(10):
            pdi = sim.run_analysis("microemulsion").result.statistics.polydispersity_index
            assert 0.05 <= pdi < 0.15


class TestSettings:

    def test_dispersant_viscosity(self, psa):
        assert psa.run_analysis("liposomes").result.viscosity_cp == 0.89
        assert psa.run_analysis("liposomes", {"dispersant": "ethanol"}).result.viscosity_cp == 1.07

    def test_viscosity_override(self, psa):
        assert psa.run_analysis("liposomes", {"viscosity": 1.5}).result.viscosity_cp == 1.5

    def test_invalid_settings_fall_back(self, psa):
        run = psa.run_analysis("liposomes", {"dispersant": "acetone", "number_of_runs": 0})
        assert run.result.dispersant == "water"
        assert run.parameters.number_of_runs == 3

    def test_run_log(self, psa):
        log = psa.run_analysis("microemulsion", {"dispersant": "ethanol"}).result.run_log
        assert log[0] == "Sample: Microemulsion"
        assert log[1] == "Dispersant: Ethanol (1.07 cP)"
        assert log[2] == "Equilibration: 120s, Runs: 3"
