from __future__ import annotations


class DiceError(ValueError):
    """User-facing evaluation errors. The message starts with a stable error code."""


class NoFormulaFound(DiceError):
    """The text contains nothing that looks like dice notation."""

    def __init__(self) -> None:
        super().__init__("[NO_FORMULA_FOUND] No dice found in text.")


class NoDiceInFormula(DiceError):
    def __init__(self, formula: str) -> None:
        super().__init__(
            f"[NO_DICE_IN_FORMULA] No dice term found in '{formula}'. Example: '2d6+3' or 'd20'."
        )
        self.formula = formula


class MalformedTerm(DiceError):
    def __init__(self, term: str, reason: str) -> None:
        super().__init__(f"[MALFORMED_TERM] Term '{term}' {reason}. Example: '2d6'.")
        self.term = term
