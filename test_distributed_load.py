"""Test distributed load functionality."""
import numpy as np

from beam_model import BeamModel, SupportKind
from distributed_load import DistributedLoad
from reactions import compute_reactions
from shear_moment import sample_positions, shear_moment


def test_distributed_load_geometry():
    load = DistributedLoad(position=1.0, span_length=3.0, intensity=5.0)
    assert load.end == 4.0
    assert load.total_force == 15.0
    assert load.centroid == 2.5


def test_partial_overlap_acts_at_overlap_centroid():
    """A cut inside the loaded span only sees the part to its left."""
    model = BeamModel(
        length=10.0,
        support_kind=SupportKind.CANTILEVER_RIGHT,
        loads=[DistributedLoad(position=2.0, span_length=4.0, intensity=3.0)],
    )
    x = sample_positions(model, 10)
    shear, moment = shear_moment(model, compute_reactions(model), x)

    # cut at x=4: 2 m loaded, resultant 6 kN at x=3
    assert np.isclose(shear[4], -6.0)
    assert np.isclose(moment[4], -6.0)
    # beyond the load the full 12 kN acts at x=4
    assert np.isclose(shear[8], -12.0)
    assert np.isclose(moment[8], -12.0 * 4.0)
    # untouched before the load starts
    assert shear[2] == 0.0 and moment[2] == 0.0


def test_multiple_distributed_loads():
    """Test a beam with multiple distributed loads."""
    model = BeamModel(
        length=3.0,
        loads=[
            DistributedLoad(position=0.0, span_length=1.0, intensity=0.5),
            DistributedLoad(position=2.0, span_length=1.0, intensity=1.0),
        ],
    )
    r = compute_reactions(model)
    # moments about A: 0.5*0.5 + 1.0*2.5 = 2.75 -> R_B = 2.75 / 3
    np.testing.assert_allclose(r.vertical_b, 2.75 / 3)
    np.testing.assert_allclose(r.vertical_a + r.vertical_b, 1.5)

    x = sample_positions(model, 150)
    shear, moment = shear_moment(model, r, x)
    assert np.isclose(moment[-1], 0.0, atol=1e-9)
    assert np.isclose(shear[-1], -r.vertical_b)


def test_tail_past_beam_end_is_not_clipped():
    model = BeamModel(
        length=10.0,
        support_kind=SupportKind.CANTILEVER_LEFT,
        loads=[DistributedLoad(position=8.0, span_length=4.0, intensity=1.0)],
    )
    r = compute_reactions(model)
    assert np.isclose(r.vertical_a, 4.0)
    assert np.isclose(r.moment_a, 4.0 * 10.0)
