import logging
from typing import Tuple

import numpy as np

from beam_model import BeamModel, SupportKind
from reactions import SUPPORT_TOLERANCE

logger = logging.getLogger(__name__)


def _cumulative_trapz(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    if len(x) < 2:
        return np.zeros_like(x)
    dx = np.diff(x)
    avg = 0.5 * (y[1:] + y[:-1])
    return np.concatenate(([0.0], np.cumsum(avg * dx)))


def integrate_moment(x: np.ndarray, moment: np.ndarray, EI: float) -> Tuple[np.ndarray, np.ndarray]:
    """Slope and deflection before the integration constants are applied.

    Both start at zero at x[0]; units follow EI, so with M in kN*m and
    EI in kN*m^2 the deflection comes out in metres.
    """
    theta0 = _cumulative_trapz(x, moment / EI)
    y0 = _cumulative_trapz(x, theta0)
    return theta0, y0


def _nearest_index(x: np.ndarray, position: float) -> int:
    dx = (x[-1] - x[0]) / max(len(x) - 1, 1)
    if dx <= 0:
        return 0
    # half-up, so a support midway between samples takes the later one
    return int(min(max(np.floor(position / dx + 0.5), 0), len(x) - 1))


def integration_constants(
    model: BeamModel, x: np.ndarray, theta0: np.ndarray, y0: np.ndarray
) -> Tuple[float, float]:
    """Resolve C1 (slope) and C2 (deflection) from the support conditions."""
    kind = model.support_kind

    if kind is SupportKind.CANTILEVER_LEFT:
        i = _nearest_index(x, model.support_a)
        c1 = -theta0[i]
        return c1, -y0[i] - c1 * model.support_a

    if kind is SupportKind.CANTILEVER_RIGHT:
        c1 = -theta0[-1]
        return c1, -y0[-1] - c1 * model.length

    # Simple span: y(A) = 0 and y(B) = 0
    span = model.support_b - model.support_a
    if abs(span) < SUPPORT_TOLERANCE:
        return 0.0, 0.0
    y_a = y0[_nearest_index(x, model.support_a)]
    y_b = y0[_nearest_index(x, model.support_b)]
    c1 = (y_a - y_b) / span
    return c1, -y_a - c1 * model.support_a


def slope_deflection(model: BeamModel, x: np.ndarray, moment: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Slope [rad] and deflection [m] satisfying the support conditions.

    Undefined configurations (no flexural stiffness, coincident simple
    supports) come back as zeros rather than inf/nan.
    """
    EI = model.flexural_stiffness
    if not np.isfinite(EI) or EI <= 0:
        logger.debug("Flexural stiffness %s is not positive; slope and deflection set to zero", EI)
        return np.zeros_like(x, dtype=float), np.zeros_like(x, dtype=float)
    if model.support_kind is SupportKind.SIMPLE and abs(model.support_b - model.support_a) < SUPPORT_TOLERANCE:
        logger.debug("Coincident supports; slope and deflection set to zero")
        return np.zeros_like(x, dtype=float), np.zeros_like(x, dtype=float)

    theta0, y0 = integrate_moment(x, moment, EI)
    c1, c2 = integration_constants(model, x, theta0, y0)
    return theta0 + c1, y0 + c1 * x + c2
