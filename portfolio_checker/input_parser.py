import re
from typing import Optional

from portfolio_checker.config import PIN_MAX, PIN_MIN
from portfolio_checker.enums import InvestmentHorizon


_QUIT_WORDS = {"exit", "quit", "q"}

_HORIZON_WORDS = {
    "short": InvestmentHorizon.SHORT,
    "long":  InvestmentHorizon.LONG,
}

# Optional rupee prefix, digits with optional thousands separators
# (both 1,000,000 and Indian 10,00,000 grouping), optional leading minus.
_AMOUNT_RE = re.compile(
    r"^(-?)\s*(?:₹|rs\.?|inr)?\s*(\d{1,3}(?:,\d{2,3})*|\d+)$", re.IGNORECASE
)


class InputParser:
    """
    Turns raw prompt answers into typed values.

    Each extractor returns ``None`` for anything it cannot accept so the
    caller can re-prompt; none of them raise.
    """

    def is_quit(self, text: str) -> bool:
        return text.strip().lower() in _QUIT_WORDS

    def extract_pin(self, text: str) -> Optional[int]:
        """Return the code when it is an integer in [PIN_MIN, PIN_MAX]."""
        value = self._to_int(text.strip())
        if value is None or not PIN_MIN <= value <= PIN_MAX:
            return None
        return value

    def extract_amount(self, text: str) -> Optional[int]:
        """
        Parse an integer amount such as ``1000``, ``₹1,000`` or
        ``Rs 10,00,000``. Negative numbers parse; the minimum check is the
        caller's job.
        """
        match = _AMOUNT_RE.match(text.strip())
        if not match:
            return None
        sign, digits = match.groups()
        value = int(digits.replace(",", ""))
        return -value if sign else value

    def extract_horizon(self, text: str) -> Optional[InvestmentHorizon]:
        """Case-insensitive exact match on 'short' / 'long'."""
        return _HORIZON_WORDS.get(text.strip().lower())

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _to_int(text: str) -> Optional[int]:
        try:
            return int(text)
        except ValueError:
            return None
