import numpy as np

from beam_model import BeamModel
from catalog import material_by_name, profile_by_name
from diagrams import compute_diagrams
from point_load import PointLoad
from reactions import compute_reactions
from summary import NO_STRESS_SAFETY_FACTOR, bending_stress, summarize


def _solve():
    model = BeamModel(length=10.0, inertia=869.0, loads=[PointLoad(position=5.0, magnitude=10.0)])
    reactions = compute_reactions(model)
    return compute_diagrams(model, reactions=reactions), reactions


def test_bending_stress_units():
    # 25 kN*m over 109 cm^3
    np.testing.assert_allclose(bending_stress(25.0, 109.0), 25e3 / 109e-6 / 1e6, rtol=1e-9)
    assert bending_stress(25.0, 0.0) == 0.0
    assert bending_stress(25.0, None) == 0.0


def test_summary_peaks_and_safety_factor():
    result, reactions = _solve()
    profile = profile_by_name("IPE 160")
    steel = material_by_name("Steel (Structure)")
    summary = summarize(result, reactions, profile.section_modulus, steel.yield_strength)

    np.testing.assert_allclose(summary.max_moment, 25.0, rtol=1e-9)
    np.testing.assert_allclose(summary.max_shear, 5.0)
    expected_stress = 25e3 / 109e-6 / 1e6
    np.testing.assert_allclose(summary.max_stress, expected_stress, rtol=1e-9)
    np.testing.assert_allclose(summary.safety_factor, 240.0 / expected_stress, rtol=1e-9)
    assert summary.is_safe
    assert summary.max_deflection > 0
    assert summary.reactions is reactions


def test_summary_flags_yield_exceeded():
    result, reactions = _solve()
    summary = summarize(result, reactions, section_modulus=34.2, yield_strength=240.0)
    assert summary.max_stress > 240.0
    assert not summary.is_safe
    assert summary.safety_factor < 1.0


def test_summary_without_section_has_no_stress():
    result, reactions = _solve()
    summary = summarize(result, reactions)
    assert summary.max_stress == 0.0
    assert summary.safety_factor == NO_STRESS_SAFETY_FACTOR
    assert summary.is_safe
