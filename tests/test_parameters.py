import logging
import math

import pytest
from pydantic import ValidationError

from labsim.simulators.ftir.models import FtirParameters
from labsim.simulators.gc.models import GcParameters
from labsim.simulators.hplc import HplcSimulator
from labsim.simulators.hplc.models import HplcParameters
from labsim.simulators.psa.models import PsaParameters
from labsim.simulators.uv_vis.models import UvVisParameters


class TestCoerce:

    def test_none_gives_defaults(self):
        params = HplcParameters.coerce(None)
        assert params.flow_rate == 1.0
        assert params.composition == 60.0
        assert params.injection_volume == 20.0
        assert params.detection_wavelength == 254.0
        assert params.run_time == 10.0

    def test_valid_values_kept(self):
        params = HplcParameters.coerce({"flow_rate": 2.0, "run_time": 5})
        assert params.flow_rate == 2.0
        assert params.run_time == 5.0

    def test_numeric_string_is_parsed(self):
        assert HplcParameters.coerce({"flow_rate": "1.5"}).flow_rate == 1.5

    def test_unparseable_value_falls_back(self):
        assert HplcParameters.coerce({"flow_rate": "fast"}).flow_rate == 1.0

    def test_out_of_range_value_falls_back(self):
        params = HplcParameters.coerce({"flow_rate": -1.0, "composition": 150})
        assert params.flow_rate == 1.0
        assert params.composition == 60.0

    def test_zero_flow_falls_back(self):
        assert HplcParameters.coerce({"flow_rate": 0}).flow_rate == 1.0

    def test_fallback_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="labsim.parameters"):
            HplcParameters.coerce({"flow_rate": -1.0})
        assert "flow_rate" in caplog.text

    def test_unknown_keys_ignored(self):
        params = HplcParameters.coerce({"temperature": 40})
        assert not hasattr(params, "temperature")

    def test_non_mapping_gives_defaults(self):
        assert HplcParameters.coerce(42) == HplcParameters()

    def test_instance_passes_through(self):
        params = HplcParameters(flow_rate=2.0)
        assert HplcParameters.coerce(params) is params

    def test_literal_field_falls_back(self):
        assert PsaParameters.coerce({"dispersant": "acetone"}).dispersant == "water"

    def test_optional_field_accepts_none(self):
        assert UvVisParameters.coerce({"unknown_concentration": None}).unknown_concentration is None

    def test_short_standard_list_falls_back(self):
        params = UvVisParameters.coerce({"standard_concentrations": [1.0]})
        assert params.standard_concentrations == (2.0, 4.0, 6.0, 8.0, 10.0)


class TestNonFiniteValues:

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, "inf", "-inf", "nan"])
    def test_falls_back_to_field_default(self, value):
        params = HplcParameters.coerce({"run_time": value, "injection_volume": value})
        assert params.run_time == 10.0
        assert params.injection_volume == 20.0

    @pytest.mark.parametrize("value", [math.inf, "inf", math.nan])
    def test_gc_ramp_rate_falls_back(self, value):
        assert GcParameters.coerce({"ramp_rate": value}).ramp_rate == 10.0

    def test_optional_float_falls_back_to_none(self):
        params = UvVisParameters.coerce({"unknown_concentration": math.inf})
        assert params.unknown_concentration is None

    def test_infinite_run_time_keeps_axis_finite(self):
        run = HplcSimulator().run_analysis("paracetamol", {"run_time": "inf"})
        assert run.parameters.run_time == 10.0
        assert all(math.isfinite(x) for x in run.curve.xs)
        assert run.curve.xs[-1] == pytest.approx(10.0)
        assert all(b > a for a, b in zip(run.curve.xs, run.curve.xs[1:]))

    def test_infinite_injection_keeps_peak_table_finite(self):
        run = HplcSimulator().run_analysis("mixture", {"injection_volume": math.inf})
        rows = run.result.peaks
        assert rows
        assert all(math.isfinite(row.area) for row in rows)
        assert sum(row.percent_area for row in rows) == pytest.approx(100.0)


class TestFtirStandardSelection:

    @pytest.mark.parametrize("value", ["none", "None", ""])
    def test_none_option_means_no_standard(self, value):
        assert FtirParameters.coerce({"standard": value}).standard is None

    def test_library_id_kept(self):
        assert FtirParameters.coerce({"standard": "ipa"}).standard == "ipa"


class TestMerged:

    def test_overrides_applied_on_top(self):
        base = HplcParameters.coerce({"flow_rate": 2.0})
        merged = base.merged({"run_time": 5.0})
        assert merged.flow_rate == 2.0
        assert merged.run_time == 5.0

    def test_invalid_override_falls_back_to_field_default(self):
        base = HplcParameters.coerce({"flow_rate": 2.0})
        assert base.merged({"flow_rate": -3}).flow_rate == 1.0

    def test_empty_overrides_return_self(self):
        base = HplcParameters()
        assert base.merged({}) is base
        assert base.merged(None) is base

    def test_parameters_are_frozen(self):
        with pytest.raises(ValidationError):
            HplcParameters().flow_rate = 3.0
