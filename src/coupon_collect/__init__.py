"""Top-level package for coupon_collect.

Exact single-draw distributions for weighted pack openings.

Provides subpackages:
- coupon_collect.core – population and composition models, error taxonomy
- coupon_collect.enumeration – weak composition enumeration
- coupon_collect.probability – multinomial frequency and draw distributions
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("coupon-collect")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .core import (  # noqa: E402
    Composition,
    ConfigurationError,
    ContractViolation,
    CouponCollectError,
    PopulationFrozenError,
    TransitionOutcome,
    WeightedPopulation,
)
from .enumeration import CompositionEnumerator, count_compositions  # noqa: E402
from .probability import (  # noqa: E402
    DistributionConfig,
    TransitionDistribution,
    compute_distribution,
    frequency,
    probability,
)

__all__: list[str] = [
    "__version__",
    "Composition",
    "CompositionEnumerator",
    "ConfigurationError",
    "ContractViolation",
    "CouponCollectError",
    "DistributionConfig",
    "PopulationFrozenError",
    "TransitionDistribution",
    "TransitionOutcome",
    "WeightedPopulation",
    "compute_distribution",
    "count_compositions",
    "frequency",
    "probability",
]
