"""Adaptive ODE integration for the slow-response moisture states.

A Dormand-Prince 5(4) embedded Runge-Kutta integrator with error-controlled
step sizing, written against numpy arrays. The timelag moisture models hand
it a right-hand side ``rhs(t, y)`` and a span and read back the final state.

Failures are never swallowed: a non-finite state, a step size that collapses
or an exhausted step budget raises ``SolverError`` carrying the parameters of
the attempted integration.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging
import numpy as np

from wildland_fire.exceptions import SolverError

logger = logging.getLogger(__name__)

# Dormand-Prince tableau
_C = np.array([0.0, 1/5, 3/10, 4/5, 8/9, 1.0, 1.0])
_A = [
    np.array([]),
    np.array([1/5]),
    np.array([3/40, 9/40]),
    np.array([44/45, -56/15, 32/9]),
    np.array([19372/6561, -25360/2187, 64448/6561, -212/729]),
    np.array([9017/3168, -355/33, 46732/5247, 49/176, -5103/18656]),
    np.array([35/384, 0.0, 500/1113, 125/192, -2187/6784, 11/84]),
]
_B = np.array([35/384, 0.0, 500/1113, 125/192, -2187/6784, 11/84, 0.0])
_E = np.array([71/57600, 0.0, -71/16695, 71/1920, -17253/339200, 22/525, -1/40])

_SAFETY = 0.9
_MIN_FACTOR = 0.2
_MAX_FACTOR = 5.0


@dataclass(frozen=True)
class ODESolution:
    """Accepted steps of an integration.

    Attributes:
        t (np.ndarray): Times of the accepted steps, starting at t0.
        y (np.ndarray): States at those times, shape (len(t), n).
        n_steps (int): Number of attempted steps (accepted and rejected).
    """
    t: np.ndarray
    y: np.ndarray
    n_steps: int

    @property
    def t_final(self) -> float:
        return float(self.t[-1])

    @property
    def y_final(self) -> np.ndarray:
        return self.y[-1]


def solve_ode(rhs: Callable[[float, np.ndarray], np.ndarray], y0, t_span: Tuple[float, float],
              rtol: float = 1e-8, atol: float = 1e-10, max_steps: int = 10000,
              first_step: Optional[float] = None) -> ODESolution:
    """Integrates ``dy/dt = rhs(t, y)`` from t_span[0] to t_span[1].

    Args:
        rhs (Callable): Right-hand side, returns an array shaped like y.
        y0: Initial state (scalar or 1-D array).
        t_span (Tuple[float, float]): Start and end time.
        rtol (float, optional): Relative tolerance. Defaults to 1e-8.
        atol (float, optional): Absolute tolerance. Defaults to 1e-10.
        max_steps (int, optional): Step budget. Defaults to 10000.
        first_step (float, optional): Initial step size. Defaults to 1% of the span.

    Raises:
        SolverError: If the integration cannot be completed.

    Returns:
        ODESolution: accepted times and states.
    """
    t0, t1 = float(t_span[0]), float(t_span[1])
    y = np.atleast_1d(np.asarray(y0, dtype=float)).copy()

    params = {"y0": y0, "t_span": (t0, t1), "rtol": rtol, "atol": atol, "max_steps": max_steps}

    if not (np.isfinite(t0) and np.isfinite(t1)):
        raise SolverError("Integration span must be finite", parameters=params)

    if not np.all(np.isfinite(y)):
        raise SolverError("Initial state is not finite", parameters=params)

    if rtol <= 0 or atol <= 0:
        raise SolverError("Tolerances must be positive", parameters=params)

    if t1 < t0:
        raise SolverError("Integration span must move forward in time", parameters=params)

    if t1 == t0:
        return ODESolution(t=np.array([t0]), y=y[np.newaxis, :], n_steps=0)

    span = t1 - t0
    h = first_step if first_step is not None else 0.01 * span
    if not h > 0:
        raise SolverError("First step must be positive", parameters=params)

    t = t0
    k = np.empty((7, y.size))
    k[0] = _eval_rhs(rhs, t, y, params)

    ts = [t0]
    ys = [y.copy()]
    n_steps = 0

    while t < t1:
        if n_steps >= max_steps:
            raise SolverError(f"Step budget exhausted at t={t:.6g}", parameters=params)

        h = min(h, t1 - t)
        if h <= 1e-14 * max(1.0, abs(t)):
            raise SolverError(f"Step size underflow at t={t:.6g}", parameters=params)

        for i in range(1, 7):
            y_stage = y + h * np.dot(_A[i], k[:i])
            k[i] = _eval_rhs(rhs, t + _C[i] * h, y_stage, params)

        y_new = y + h * np.dot(_B, k)
        err = h * np.dot(_E, k)

        if not np.all(np.isfinite(y_new)):
            raise SolverError(f"State became non-finite at t={t:.6g}", parameters=params)

        scale = atol + rtol * np.maximum(np.abs(y), np.abs(y_new))
        err_norm = float(np.sqrt(np.mean((err / scale) ** 2)))
        n_steps += 1

        if err_norm <= 1.0:
            # Land exactly on t1 for the last step
            t = t1 if t1 - t <= h else t + h
            y = y_new
            k[0] = k[6]
            ts.append(t)
            ys.append(y.copy())

            if err_norm == 0:
                factor = _MAX_FACTOR
            else:
                factor = min(_MAX_FACTOR, _SAFETY * err_norm ** -0.2)
        else:
            factor = max(_MIN_FACTOR, _SAFETY * err_norm ** -0.2)

        h *= factor

    logger.debug("ODE integration over %s finished in %d steps", (t0, t1), n_steps)

    return ODESolution(t=np.array(ts), y=np.array(ys), n_steps=n_steps)


def _eval_rhs(rhs, t, y, params) -> np.ndarray:
    dy = np.atleast_1d(np.asarray(rhs(t, y), dtype=float))

    if dy.shape != y.shape:
        raise SolverError(f"Right-hand side returned shape {dy.shape}, expected {y.shape}",
                          parameters=params)

    if not np.all(np.isfinite(dy)):
        raise SolverError(f"Derivative is not finite at t={t:.6g}", parameters=params)

    return dy
