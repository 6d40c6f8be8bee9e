from __future__ import annotations

import logging
import re

from .errors import MalformedTerm, NoDiceInFormula, NoFormulaFound
from .models import ConstantTerm, DiceTerm, Mode, ParsedFormula
from .rng import BYTE_DOMAIN


logger = logging.getLogger(__name__)

# Anything starting with a dice term, up to the next space or line break.
_FORMULA_RE = re.compile(r"\d*d\d+.*?(?= |\n|$)", re.IGNORECASE)

# Simulate mode only accepts dice with an explicit count; a bare 'd6' is skipped.
_DICE_RE: dict[Mode, re.Pattern[str]] = {
    "average": re.compile(r"(?P<count>\d*)d(?P<sides>\d+)", re.IGNORECASE),
    "simulate": re.compile(r"(?P<count>\d+)d(?P<sides>\d+)", re.IGNORECASE),
}

# A constant is only recognised between '+' and another '+' or the end.
_CONSTANT_RE = re.compile(r"(?<=\+)(\d+)(?=\+|$)")


def find_formulas(text: str) -> list[str]:
    """Return every dice formula in ``text``, in order of appearance."""

    formulas = _FORMULA_RE.findall(text)
    if not formulas:
        raise NoFormulaFound()
    logger.debug("Found %d formulas", len(formulas))
    return formulas


def _to_int(digits: str, term: str) -> int:
    try:
        return int(digits)
    except ValueError:
        raise MalformedTerm(term, "has a number that is too long") from None


def _parse_dice(formula: str, mode: Mode) -> list[DiceTerm]:
    dice: list[DiceTerm] = []
    for m in _DICE_RE[mode].finditer(formula):
        term = m.group(0)
        count_str = m.group("count")
        count = _to_int(count_str, term) if count_str else 1
        sides = _to_int(m.group("sides"), term)

        if count <= 0:
            raise MalformedTerm(term, "must roll at least one die")
        if sides <= 0:
            raise MalformedTerm(term, "must have at least one side")
        if mode == "simulate" and sides > BYTE_DOMAIN:
            raise MalformedTerm(term, f"has more than {BYTE_DOMAIN} sides and cannot be simulated")

        dice.append(DiceTerm(count=count, sides=sides))
    return dice


def parse_formula(formula: str, mode: Mode) -> ParsedFormula:
    """Split a formula into its dice terms and its '+K' constants.

    Dice and constants come from two independent scans of the same string.
    Raises NoDiceInFormula when no dice term matches, even if constants do.
    """

    dice = _parse_dice(formula, mode)
    if not dice:
        raise NoDiceInFormula(formula)
    logger.debug("Found %d dice in %r", len(dice), formula)

    constants = [ConstantTerm(value=_to_int(c, c)) for c in _CONSTANT_RE.findall(formula)]
    if constants:
        logger.debug("Found %d additions in %r", len(constants), formula)

    return ParsedFormula(formula=formula, mode=mode, dice=dice, constants=constants)
