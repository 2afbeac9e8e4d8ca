import pytest
import sys
from fractions import Fraction
from pathlib import Path

# Add src to sys.path so we can import coupon_collect
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from coupon_collect.core.models import WeightedPopulation  # noqa: E402


# Common test fixtures
@pytest.fixture
def fair_coin_pack() -> WeightedPopulation:
    """Two equally weighted kinds, three items per pack."""
    return WeightedPopulation.from_weights(3, [1, 1])


@pytest.fixture
def single_draw_three_kinds() -> WeightedPopulation:
    """Three equally weighted kinds, one item per pack."""
    return WeightedPopulation.from_weights(1, [1, 1, 1])


@pytest.fixture
def rarity_pack() -> WeightedPopulation:
    """Common/uncommon/rare/mythic weights typical of a trading card pack."""
    return WeightedPopulation.from_weights(
        5, [10, 3, 1, Fraction(1, 8)]
    )
