from __future__ import annotations

import numpy as np
import pytest

from cube_core.config import Config
from cube_core.sim.cube_state import CubeState


@pytest.fixture
def cube() -> CubeState:
    return CubeState()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(results_dir=tmp_path / "results", seed=7)
