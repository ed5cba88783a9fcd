import numpy as np
import pytest

from beam_model import BeamModel, SupportKind
from concentrated_moment import ConcentratedMoment
from distributed_load import DistributedLoad
from point_load import PointLoad
from reactions import Reactions, compute_reactions, load_moment_sum


def _beam(kind=SupportKind.SIMPLE, loads=None, **kwargs):
    return BeamModel(
        length=10.0,
        support_kind=kind,
        elastic_modulus=200.0,
        inertia=8356.0,
        loads=list(loads or []),
        **kwargs,
    )


def _mixed_loads():
    return [
        PointLoad(position=3.0, magnitude=12.0),
        DistributedLoad(position=1.0, span_length=4.0, intensity=2.5),
        ConcentratedMoment(position=7.0, magnitude=-8.0),
        PointLoad(position=9.5, magnitude=4.0),
    ]


def _moment_residual(model: BeamModel, r: Reactions, pivot: float) -> float:
    total = load_moment_sum(model, pivot)
    if r.support_kind is SupportKind.SIMPLE:
        total += r.vertical_a * (model.support_a - pivot) + r.vertical_b * (model.support_b - pivot)
    elif r.support_kind is SupportKind.CANTILEVER_LEFT:
        total += r.vertical_a * (model.support_a - pivot) + r.moment_a
    else:
        total += r.vertical_b * (model.length - pivot) + r.moment_a
    return total


def test_simple_span_midspan_point_load():
    r = compute_reactions(_beam(loads=[PointLoad(position=5.0, magnitude=10.0)]))
    assert np.isclose(r.vertical_a, 5.0)
    assert np.isclose(r.vertical_b, 5.0)
    assert r.moment_a == 0.0


def test_simple_span_full_udl():
    r = compute_reactions(_beam(loads=[DistributedLoad(position=0.0, span_length=10.0, intensity=2.0)]))
    assert np.isclose(r.vertical_a, 10.0)
    assert np.isclose(r.vertical_b, 10.0)


def test_simple_span_with_overhang_lifts_back_support():
    beam = _beam(loads=[PointLoad(position=10.0, magnitude=10.0)], support_a=0.0, support_b=5.0)
    r = compute_reactions(beam)
    assert np.isclose(r.vertical_b, 20.0)
    assert np.isclose(r.vertical_a, -10.0)


def test_simple_span_couple_only_gives_opposing_pair():
    r = compute_reactions(_beam(loads=[ConcentratedMoment(position=5.0, magnitude=10.0)]))
    assert np.isclose(r.vertical_a, 1.0)
    assert np.isclose(r.vertical_b, -1.0)


def test_cantilever_left_tip_load():
    r = compute_reactions(_beam(SupportKind.CANTILEVER_LEFT, [PointLoad(position=10.0, magnitude=10.0)]))
    assert np.isclose(r.vertical_a, 10.0)
    assert np.isclose(r.moment_a, 100.0)
    assert r.vertical_b == 0.0


def test_cantilever_right_tip_load():
    beam = _beam(SupportKind.CANTILEVER_RIGHT, [PointLoad(position=0.0, magnitude=10.0)])
    r = compute_reactions(beam)
    assert r.vertical_a == 0.0
    assert np.isclose(r.vertical_b, 10.0)
    assert np.isclose(r.moment_a, -100.0)
    assert r.fixed_end_position(beam) == 10.0
    assert r.support_actions(beam) == []


def test_coincident_supports_fall_back_to_zero():
    beam = _beam(loads=[PointLoad(position=5.0, magnitude=10.0)], support_a=4.0, support_b=4.0)
    r = compute_reactions(beam)
    assert (r.vertical_a, r.vertical_b, r.moment_a) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("kind", list(SupportKind))
def test_no_loads_no_reactions(kind):
    r = compute_reactions(_beam(kind))
    assert (r.vertical_a, r.vertical_b, r.moment_a) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("kind", list(SupportKind))
def test_force_equilibrium(kind):
    beam = _beam(kind, _mixed_loads(), support_a=0.5, support_b=8.0)
    r = compute_reactions(beam)
    assert np.isclose(r.vertical_a + r.vertical_b, beam.total_load)
    assert np.isclose(beam.total_load, 12.0 + 10.0 + 4.0)


@pytest.mark.parametrize("kind", list(SupportKind))
@pytest.mark.parametrize("pivot", [0.0, 3.3, 10.0, -4.0])
def test_moment_equilibrium_about_any_point(kind, pivot):
    beam = _beam(kind, _mixed_loads(), support_a=0.5, support_b=8.0)
    r = compute_reactions(beam)
    assert np.isclose(_moment_residual(beam, r, pivot), 0.0, atol=1e-9)
