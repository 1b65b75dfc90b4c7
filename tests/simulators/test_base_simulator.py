import logging

import pytest

from labsim.errors import NotFoundError, SimulatorError
from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Domain, Peak, SampledCurve
from labsim.parameters import SimulatorParameters
from labsim.random_source import QuietRandomSource
from labsim.simulators.base_simulator import BaseSimulator, RunContext
from labsim.simulators.hplc import HplcSimulator


class DummyParameters(SimulatorParameters):
    fail: bool = False
    height: float = 1.0


class DummySimulator(BaseSimulator[float]):
    kind = "dummy"
    parameters_model = DummyParameters
    library = ReferenceLibrary(
        [Analyte(id="a", name="Alpha", peaks=(Peak(5.0, 1.0, 1.0),)), Analyte(id="b", name="Beta")],
        kind="dummy analyte",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = 0

    def _simulate(self, entry, params, rng):
        self.calls += 1
        if params.fail:
            raise ValueError("detector saturated")
        peaks = tuple(Peak(p.center, params.height, p.width) for p in entry.peaks)
        curve = SampledCurve(xs=(0.0, 1.0), ys=(0.0, params.height))
        return peaks, curve, params.height


class IncompleteSimulator(BaseSimulator):
    """Missing library and _simulate to test ABC enforcement."""


# ─── Construction ────────────────────────────────────────────────────────────


class TestConstruction:

    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            BaseSimulator()

    def test_cannot_instantiate_incomplete_subclass(self):
        with pytest.raises(TypeError):
            IncompleteSimulator()

    def test_defaults(self):
        sim = DummySimulator()
        assert sim.name == "DummySimulator"
        assert sim.animation_duration_ms == 4000.0
        assert sim.default_parameters == DummyParameters()
        assert sim.playback is None

    def test_logger_is_named_after_instance(self):
        sim = DummySimulator(name="bench_dummy")
        assert sim.logger.name.endswith(".bench_dummy")

    def test_constructor_parameters_coerced(self):
        sim = DummySimulator(parameters={"height": -1, "fail": "nope"})
        assert sim.default_parameters.fail is False


# ─── list_analytes / run_analysis ────────────────────────────────────────────


class TestRunAnalysis:

    def test_list_analytes(self):
        summaries = DummySimulator().list_analytes()
        assert [(s.id, s.display_name) for s in summaries] == [("a", "Alpha"), ("b", "Beta")]

    def test_returns_run_context(self):
        run = DummySimulator().run_analysis("a", {"height": 3.0})
        assert isinstance(run, RunContext)
        assert run.simulator == "dummy"
        assert run.analyte_id == "a"
        assert run.result == 3.0
        assert run.peaks[0].intensity == 3.0
        assert run.parameters.height == 3.0

    def test_unknown_id_raises_before_simulating(self):
        sim = DummySimulator()
        with pytest.raises(NotFoundError):
            sim.run_analysis("zzz")
        assert sim.calls == 0

    def test_mapping_merged_onto_instance_defaults(self):
        sim = DummySimulator(parameters={"height": 7.0})
        run = sim.run_analysis("a", {"fail": False})
        assert run.parameters.height == 7.0

    def test_parameter_model_replaces_defaults(self):
        sim = DummySimulator(parameters={"height": 7.0})
        run = sim.run_analysis("a", DummyParameters(height=2.0))
        assert run.parameters.height == 2.0

    def test_seed_recorded(self):
        run = DummySimulator().run_analysis("a", rng_seed=12)
        assert run.seed == 12

    def test_seeded_runs_reproduce(self):
        from labsim.simulators.uv_vis import UvVisSimulator

        sim = UvVisSimulator()
        first = sim.run_analysis("caffeine", rng_seed=99)
        second = sim.run_analysis("caffeine", rng_seed=99)
        assert first.curve == second.curve
        assert first.result == second.result

    def test_logs_run(self, caplog):
        with caplog.at_level(logging.INFO):
            DummySimulator().run_analysis("a")
        assert "Running dummy analysis of 'a'" in caplog.text


# ─── Error handling ──────────────────────────────────────────────────────────


class TestHandleError:

    def test_foreign_exception_wrapped(self):
        sim = DummySimulator()
        with pytest.raises(SimulatorError) as exc_info:
            sim.run_analysis("a", {"fail": True})
        assert "detector saturated" in str(exc_info.value)
        assert "run_analysis('a')" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_simulator_error_passes_through(self):
        sim = DummySimulator()
        original = SimulatorError("already wrapped")
        with pytest.raises(SimulatorError) as exc_info:
            sim.handle_error(original, "processing")
        assert exc_info.value is original

    def test_error_is_logged(self, caplog):
        sim = DummySimulator()
        with caplog.at_level(logging.ERROR):
            with pytest.raises(SimulatorError):
                sim.run_analysis("a", {"fail": True})
        assert "detector saturated" in caplog.text


# ─── Animation ───────────────────────────────────────────────────────────────


class TestAnimation:

    def test_drive_animation_uses_instance_duration(self):
        sim = DummySimulator(animation_duration_ms=1500)
        run = sim.run_analysis("a")
        playback = sim.drive_animation(run.curve)
        assert playback.duration_ms == 1500
        assert sim.playback is playback

    @pytest.mark.parametrize("duration", [-250, 0, float("inf"), float("nan")])
    def test_unusable_duration_falls_back_to_instance_default(self, duration):
        sim = DummySimulator(animation_duration_ms=1500)
        playback = sim.drive_animation(sim.run_analysis("a").curve, duration_ms=duration)
        assert playback.duration_ms == 1500

    def test_unusable_instance_duration_falls_back_to_class_default(self):
        assert DummySimulator(animation_duration_ms=-10).animation_duration_ms == 4000.0

    def test_new_animation_cancels_previous(self):
        sim = DummySimulator()
        run = sim.run_analysis("a")
        first = sim.drive_animation(run.curve)
        second = sim.drive_animation(run.curve, duration_ms=10)
        assert first.is_cancelled
        assert second.is_active

    def test_successful_run_cancels_animation(self):
        sim = DummySimulator()
        playback = sim.drive_animation(sim.run_analysis("a").curve)
        sim.run_analysis("b")
        assert playback.is_cancelled
        assert sim.playback is None

    def test_failed_run_leaves_animation_running(self):
        sim = DummySimulator()
        playback = sim.drive_animation(sim.run_analysis("a").curve)
        with pytest.raises(SimulatorError):
            sim.run_analysis("a", {"fail": True})
        with pytest.raises(NotFoundError):
            sim.run_analysis("zzz")
        assert playback.is_active
        assert sim.playback is playback

    def test_cancel_animation_is_idempotent(self):
        sim = DummySimulator()
        sim.cancel_animation()
        sim.drive_animation(SampledCurve(xs=(0.0,), ys=(0.0,)))
        sim.cancel_animation()
        sim.cancel_animation()
        assert sim.playback is None

    def test_tick_reveals_real_curve(self):
        sim = HplcSimulator(random_source=QuietRandomSource())
        run = sim.run_analysis("paracetamol")
        revealed = []
        playback = sim.drive_animation(run.curve, on_tick=revealed.append)
        playback.tick(0.0)
        playback.tick(2000.0)
        playback.tick(4000.0)
        assert [len(c) for c in revealed] == [0, 250, 501]
        assert playback.is_done
