from .bench import Bench
from .loader import load_bench_from_yaml, load_bench_from_yaml_safe
from .registry import SIMULATOR_REGISTRY
from .yaml_schema import BenchYamlSchema, SimulatorYamlEntry

__all__ = [
    "Bench",
    "BenchYamlSchema",
    "SimulatorYamlEntry",
    "SIMULATOR_REGISTRY",
    "load_bench_from_yaml",
    "load_bench_from_yaml_safe",
]
