from __future__ import annotations

from pathlib import Path

import pytest

from flocksim.sim.core.config import FlockParams, HuntParams, SimulationConfig, load_config, load_params

DEFAULT_YAML = Path(__file__).resolve().parents[2] / "config" / "default.yaml"


def test_defaults_match_shipped_yaml():
    loaded = SimulationConfig.from_yaml(DEFAULT_YAML)
    assert loaded == SimulationConfig()


def test_load_config_merges_sections():
    config = load_config(
        {
            "seed": 3,
            "prey_count": 12,
            "flock": {"alignment_strength": 2.5},
            "hunt": {"kill_radius": 10.0},
            "bounds": {"padding": 0.0},
        }
    )
    assert config.seed == 3
    assert config.prey_count == 12
    assert config.flock.alignment_strength == 2.5
    assert config.flock.cohesion_strength == FlockParams().cohesion_strength
    assert config.hunt == HuntParams(hunt_strength=2.0, kill_radius=10.0)
    assert config.bounds.padding == 0.0
    assert config.bounds.half_width == 1600.0


def test_unknown_keys_are_rejected():
    with pytest.raises(TypeError):
        load_config({"flock": {"speed": 1.0}})


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SimulationConfig.from_yaml(path) == SimulationConfig()
    assert load_params(path) == (FlockParams(), HuntParams())
