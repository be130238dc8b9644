from __future__ import annotations
import pytest

import numpy as np
from tropism_tree.tree_parameters import TreeParameters


@pytest.fixture()
def tt_seeded():
    import tropism_tree as tt

    with tt.use(seed=0):
        yield tt


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.Generator(np.random.PCG64(0))


@pytest.fixture
def deterministic_params() -> TreeParameters:
    """
    Parameters with every random path disabled:
        fixed zero offsets, angle decrement mode, constant fan-out,
        no environment points.
    """
    return TreeParameters(
        depth=3,
        n_branches=3,
        branch_len=30.0,
        branch_d=6.0,
        ang=30.0,
        ang_dec=4.0,
        branch_xoffset=0.0,
        branch_yoffset=0.0,
        fixed_xoffset=True,
        fixed_yoffset=True,
    )
