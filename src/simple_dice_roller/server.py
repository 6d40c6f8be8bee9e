from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import Settings, settings
from .dice import evaluate_text
from .errors import DiceError
from .models import Mode


logger = logging.getLogger(__name__)


def _notices(text: str, mode: Mode) -> list[str]:
    try:
        results = evaluate_text(text, mode)
    except DiceError as e:
        # Surface the stable error code, not the traceback.
        raise ValueError(str(e)) from None
    return [r.notice for r in results]


def average_dice(text: str) -> list[str]:
    """Calculate the average of every dice formula in a block of text.

    Input: text (string), e.g. a note containing 'Longsword 1d8+3'
    Output: one line per formula, e.g. 'Average of 1d8+3: 8'

    Raises an error if the text contains no dice at all.
    """

    return _notices(text, "average")


def simulate_dice(text: str) -> list[str]:
    """Roll every dice formula in a block of text.

    Input: text (string)
    Output: one line per formula, e.g. 'Simulated 2d6+3: 9'

    Dice need an explicit count here ('1d6', not 'd6').
    Raises an error if the text contains no dice at all.
    """

    return _notices(text, "simulate")


def build_server(config: Settings | None = None) -> FastMCP:
    config = config or settings
    server = FastMCP("simple-dice-roller")
    if config.average_tool_enabled:
        server.add_tool(average_dice)
    if config.simulate_tool_enabled:
        server.add_tool(simulate_dice)
    return server


mcp = build_server()


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting simple-dice-roller (average=%s, simulate=%s)",
        settings.average_tool_enabled,
        settings.simulate_tool_enabled,
    )
    # Default transport is stdio; logging goes to stderr.
    mcp.run()


if __name__ == "__main__":
    run()
