import logging
from typing import Optional, Sequence

from portfolio_checker.config import MINIMUM_INVESTMENT
from portfolio_checker.data_loader import Company
from portfolio_checker.enums import ConversationState
from portfolio_checker.input_parser import InputParser
from portfolio_checker.portfolio_engine import PortfolioEngine
from portfolio_checker.response_generator import ResponseGenerator
from portfolio_checker.session_context import SessionContext

logger = logging.getLogger(__name__)


class ConversationManager:
    """
    Drives the prompt session via a finite-state machine::

        COLLECT_NAME
          → COLLECT_PIN
          → COLLECT_AMOUNT
          → COLLECT_HORIZON
          → DONE

    Invalid answers keep the current state so the caller simply asks again.
    Input errors are handled here and never reach :class:`PortfolioEngine`.
    """

    def __init__(self, catalog: Optional[Sequence[Company]] = None):
        self.context = SessionContext()
        self.parser = InputParser()
        self.generator = ResponseGenerator()
        self._catalog = catalog

    # ------------------------------------------------------------------ #
    #  Public entry points (called by main.py)
    # ------------------------------------------------------------------ #

    def prompt(self) -> str:
        """Return the question for the current state."""
        prompts = {
            ConversationState.COLLECT_NAME:    self.generator.ask_name,
            ConversationState.COLLECT_PIN:     self.generator.ask_pin,
            ConversationState.COLLECT_AMOUNT:  self.generator.ask_amount,
            ConversationState.COLLECT_HORIZON: self.generator.ask_horizon,
        }
        ask = prompts.get(self.context.state)
        return ask() if ask else ""

    def handle_message(self, user_input: str) -> str:
        """Process one answer and return the text to show (may be empty)."""
        # Any text is a valid name, including "q"
        in_name = self.context.state == ConversationState.COLLECT_NAME
        if not in_name and self.parser.is_quit(user_input):
            self.context.state = ConversationState.DONE
            return self.generator.quit_message()

        handlers = {
            ConversationState.COLLECT_NAME:    self._handle_name,
            ConversationState.COLLECT_PIN:     self._handle_pin,
            ConversationState.COLLECT_AMOUNT:  self._handle_amount,
            ConversationState.COLLECT_HORIZON: self._handle_horizon,
        }
        handler = handlers.get(self.context.state)
        if handler is None:
            return self.generator.quit_message()
        return handler(user_input.strip())

    # ------------------------------------------------------------------ #
    #  Per-state handlers
    # ------------------------------------------------------------------ #

    def _handle_name(self, text: str) -> str:
        if not text:
            return self.generator.invalid_name()
        self.context.name = text
        self.context.state = ConversationState.COLLECT_PIN
        return ""

    def _handle_pin(self, text: str) -> str:
        pin = self.parser.extract_pin(text)
        if pin is None:
            return self.generator.invalid_pin()
        self.context.pin = pin
        self.context.state = ConversationState.COLLECT_AMOUNT
        return ""

    def _handle_amount(self, text: str) -> str:
        amount = self.parser.extract_amount(text)
        if amount is None:
            return self.generator.invalid_amount()
        if amount < MINIMUM_INVESTMENT:
            return self.generator.insufficient_amount()
        self.context.amount = amount
        self.context.state = ConversationState.COLLECT_HORIZON
        return ""

    def _handle_horizon(self, text: str) -> str:
        horizon = self.parser.extract_horizon(text)
        if horizon is None:
            return self.generator.invalid_horizon()
        self.context.horizon = horizon

        logger.debug("Building portfolio for amount=%d horizon=%s",
                     self.context.amount, horizon.value)
        outcome = PortfolioEngine.build_portfolio(
            self.context.amount, horizon, self._catalog
        )
        self.context.outcome = outcome
        self.context.state = ConversationState.DONE
        return self.generator.render_outcome(outcome, self.context.name)
