from enum import Enum, auto
from functools import total_ordering


class ConversationState(Enum):
    """Tracks the current stage of the prompt flow."""
    COLLECT_NAME = auto()
    COLLECT_PIN = auto()
    COLLECT_AMOUNT = auto()
    COLLECT_HORIZON = auto()
    DONE = auto()


class Sector(Enum):
    """Industry classification of a catalog company."""
    TECH = "Tech"
    DEFENCE = "Defence"
    ENERGY = "Energy"
    FINANCE = "Finance"
    REAL_ESTATE = "RealEstate"
    PSU = "PSU"


class InvestmentHorizon(Enum):
    """Investment time horizon categories."""
    SHORT = "short"
    LONG = "long"


@total_ordering
class RiskLevel(Enum):
    """Ordinal portfolio risk tier (LOW < MEDIUM < HIGH)."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.value < other.value
