"""
Numerical tolerances.

FLOAT_TOL is the threshold below which a floating-point quantity is
treated as zero by the QR engine and the Gram-Schmidt driver. The
ToleranceTier constants are comparison tolerances used by the test suite
when checking results against NumPy/SciPy references.
"""

from dataclasses import dataclass


# Zero threshold for norms and pivots
FLOAT_TOL = 1e-6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems: agree with LAPACK to near machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK reference',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the comparison tier for a problem."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
