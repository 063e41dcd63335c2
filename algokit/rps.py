"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import enum
import os
import random
import subprocess
from collections.abc import Sequence
from typing import Protocol


class Choice(enum.Enum):
    ROCK = "R"
    PAPER = "P"
    SCISSORS = "S"


class _Chooser(Protocol):
    def choice(self, seq: Sequence[Choice]) -> Choice: ...


TIE_MESSAGE = "Tie!"
USER_WINS_MESSAGE = "You win!"

_COMPUTER_WINS = {
    (Choice.SCISSORS, Choice.ROCK): "Rock beats scissors, I win!",
    (Choice.PAPER, Choice.SCISSORS): "Scissors beats paper! I win!",
    (Choice.ROCK, Choice.PAPER): "Paper beat rock, I win!",
}


def parse_choice(text: str) -> Choice:
    """Read a choice from the first letter of text (R, P or S, any case)."""
    letter = text[:1].upper()
    if letter not in {choice.value for choice in Choice}:
        raise ValueError(f"not a choice: {text!r}")
    return Choice(letter)


def judge(user: Choice, computer: Choice) -> str:
    """The message announcing the result of user's choice against computer's."""
    if user is computer:
        return TIE_MESSAGE
    return _COMPUTER_WINS.get((user, computer), USER_WINS_MESSAGE)


def play_round(user_text: str, rng: _Chooser) -> tuple[Choice, Choice, str]:
    """Play one round: returns the user's choice, the computer's and the result."""
    user = parse_choice(user_text)
    computer = rng.choice(list(Choice))
    return user, computer, judge(user, computer)


def _clear_screen() -> None:
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Play rounds read from standard input until it ends."""
    parser = argparse.ArgumentParser(prog="rps", description="Play rock, paper, scissors.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's choices")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen first")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if not args.no_clear:
        _clear_screen()

    while True:
        print("\n")
        print("Rock, Paper, Scissors - Shoot!")
        try:
            text = input("Choose your weapon [R]ock, [P]aper, or [S]cissors: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        try:
            _, computer, message = play_round(text, rng)
        except ValueError:
            print("Please choose a letter:")
            print("[R]ock, [S]cissors or [P]aper.")
            continue
        print(f"You chose: {text}")
        print(f"I chose: {computer.value}")
        print(message)