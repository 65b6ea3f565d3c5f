from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .config import AdventureConfig
from .engine import MENU_PROMPT, QUIT_KEY, Game, TurnKind
from .reporting import ResultReporter

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

WELCOME_LINES = (
    "Welcome to the Epic Text Adventure!",
    "You are Steve, a farmer in the Middle Ages who woke up far away from home.",
)


def _read(input_fn: InputFn, prompt: str, on_eof: str = "") -> str:
    try:
        return input_fn(prompt)
    except EOFError:
        logger.debug("End of input at prompt %r", prompt)
        return on_eof


def run_console(
    config: Optional[AdventureConfig] = None,
    player_name: Optional[str] = None,
    results_path: Optional[Path | str] = None,
    input_fn: Optional[InputFn] = None,
    output: OutputFn = print,
) -> int:
    """Play one session against a line-based console.

    Reads decisions through ``input_fn`` and writes narration through
    ``output``; both default to the real terminal. End of input at the menu
    counts as quitting. Returns the process exit code.
    """
    config = config or AdventureConfig()
    input_fn = input_fn or input
    for line in WELCOME_LINES:
        output(line)

    if player_name is None:
        player_name = _read(input_fn, "Enter your name: ")
    game = Game(player_name, config)

    while not game.is_over:
        output("")
        for line in game.menu():
            output(line)
        choice = _read(input_fn, MENU_PROMPT, on_eof=QUIT_KEY)

        answer = None
        question = game.question_for(choice)
        if question is not None:
            output("")
            for line in question.lines:
                output(line)
            answer = _read(input_fn, question.prompt)

        result = game.play_turn(choice, answer)
        if result.kind is TurnKind.ENCOUNTER and question is None:
            output("")
        for line in result.lines:
            output(line)

    output("")
    output(game.farewell())
    summary = game.summary()
    output(summary)

    reporter = ResultReporter(results_path or config.results_file)
    if reporter.persist(summary):
        output("")
        output(f"Game result saved to '{reporter.path}'.")
    else:
        output(f"Error writing file: {reporter.last_error}")
    logger.info("Session finished: status=%s turns=%d", game.status.value, game.turns)
    return 0
