from __future__ import annotations

import logging
import secrets

from .errors import DiceError
from .models import DiceTerm, FormulaResult, Mode, ParsedFormula
from .parser import find_formulas, parse_formula
from .rng import TokenBytes, random_int


logger = logging.getLogger(__name__)


def average_term(term: DiceTerm) -> int:
    """Expected value of ``count`` dice with ``sides`` faces, rounded up."""

    # ceil(count * (sides + 1) / 2) without going through floats.
    return (term.count * (term.sides + 1) + 1) // 2


def simulate_term(term: DiceTerm, token_bytes: TokenBytes = secrets.token_bytes) -> int:
    return sum(random_int(1, term.sides, token_bytes) for _ in range(term.count))


def _constant_total(parsed: ParsedFormula) -> int:
    return sum(c.value for c in parsed.constants)


def average(parsed: ParsedFormula) -> int:
    return sum(average_term(t) for t in parsed.dice) + _constant_total(parsed)


def simulate(parsed: ParsedFormula, token_bytes: TokenBytes = secrets.token_bytes) -> int:
    return sum(simulate_term(t, token_bytes) for t in parsed.dice) + _constant_total(parsed)


def evaluate_formula(formula: str, mode: Mode, token_bytes: TokenBytes = secrets.token_bytes) -> int:
    """Parse and evaluate a single formula. Raises DiceError for invalid input."""

    logger.debug("Calculating %s (%s)", formula, mode)
    parsed = parse_formula(formula, mode)
    if mode == "average":
        return average(parsed)
    return simulate(parsed, token_bytes)


def evaluate_text(text: str, mode: Mode, token_bytes: TokenBytes = secrets.token_bytes) -> list[FormulaResult]:
    """Evaluate every formula found in ``text``.

    Raises NoFormulaFound when the text holds no formula at all. A formula
    that fails to evaluate is reported on its own result and does not stop
    the others.
    """

    formulas = find_formulas(text)
    logger.info("Calculating for %d formulas", len(formulas))

    results: list[FormulaResult] = []
    for formula in formulas:
        try:
            total = evaluate_formula(formula, mode, token_bytes)
        except DiceError as e:
            logger.warning("Could not evaluate %r: %s", formula, e)
            results.append(FormulaResult(formula=formula, mode=mode, error=str(e)))
            continue
        results.append(FormulaResult(formula=formula, mode=mode, total=total))
    return results
