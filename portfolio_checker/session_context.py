from dataclasses import dataclass
from typing import Optional

from portfolio_checker.enums import ConversationState, InvestmentHorizon
from portfolio_checker.portfolio_engine import PortfolioOutcome


@dataclass
class SessionContext:
    """
    Holds all state gathered during a single prompt session.
    Tracks the current stage and any data collected from the user.
    """
    state: ConversationState = ConversationState.COLLECT_NAME

    # User profile inputs
    name: Optional[str] = None
    pin: Optional[int] = None
    amount: Optional[int] = None
    horizon: Optional[InvestmentHorizon] = None

    # Outcome of the last build_portfolio call
    outcome: Optional[PortfolioOutcome] = None

    def is_complete(self) -> bool:
        """Return True when the session has fully finished."""
        return self.state == ConversationState.DONE

    def reset(self):
        """Reset the session to its initial state."""
        self.__init__()
