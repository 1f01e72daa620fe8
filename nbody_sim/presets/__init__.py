"""Preset scenarios for N-body simulations."""

from typing import List
from nbody_sim.presets.base import Preset
from nbody_sim.presets.two_body import SunEarth
from nbody_sim.presets.inner_planets import InnerPlanets
from nbody_sim.presets.random_disk import RandomDisk

PRESETS = {
    'sun_earth': SunEarth,
    'inner_planets': InnerPlanets,
    'random_disk': RandomDisk,
}


def list_presets() -> List[str]:
    """List registered preset names."""
    return list(PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "SunEarth",
    "InnerPlanets",
    "RandomDisk",
    "PRESETS",
    "get_preset",
    "list_presets",
]
