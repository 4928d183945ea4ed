"""Terminal version of the game."""
import argparse
import logging

from characters import load_characters
from config import load_settings
from feedback import PLACEHOLDER
from game import GuessStatus
from session import GameSession

VERDICT_LABELS = {"green": "Correct", "yellow": "Partial", "red": "Wrong"}


def print_row(session, name, row):
    labels = {c.key: c.label for c in session.categories}
    print(f"Guess: {name}")
    for cell in row:
        print(f"  {labels[cell.key]}: {VERDICT_LABELS[cell.verdict.value]}---{cell.display}")


def print_hint(session):
    hint = session.letter_hint
    if hint:
        print("Hint:", hint)


def build_parser():
    parser = argparse.ArgumentParser(description="Guess the character in your terminal")
    parser.add_argument("--data", default=None, help="Path to a JSON or CSV dataset")
    parser.add_argument("--no-hint", action="store_true", help="Disable the letter hint")
    return parser


def play(session, read=input):
    """Run rounds until the player quits. Returns the number of rounds won."""
    wins = 0
    if session.new_round() is None:
        print("No characters loaded.")
        return wins
    print("Welcome to Guess the Character!")
    print("Enter 'quit' to exit, 'reveal' to give up, 'new' for a new round, '?text' for suggestions")

    while True:
        try:
            text = read("\nEnter your guess: ").strip()
        except EOFError:
            text = "quit"
        command = text.lower()
        if command == "quit":
            print("Thanks for playing!")
            return wins
        if command == "new":
            session.new_round()
            print("New round started. Make a guess!")
            continue
        if command == "reveal":
            row = session.reveal()
            print(f"Revealed — it's {session.round.secret.name}!")
            print_row(session, session.round.secret.name, row)
            session.new_round()
            print("New round started. Make a guess!")
            continue
        if text.startswith("?"):
            names = [c.name for c in session.suggestions(text[1:])]
            print("Suggestions:", ", ".join(names) or PLACEHOLDER)
            continue

        outcome = session.guess(text)
        if outcome.status is GuessStatus.UNRESOLVED:
            print("Character not found. Try again.")
            continue
        if outcome.status is GuessStatus.EMPTY:
            continue
        print_row(session, outcome.guess.name, outcome.row)
        if outcome.status is GuessStatus.WON:
            wins += 1
            print(f"Correct! The character was {outcome.state.secret.name}!")
            session.new_round()
            print("New round started. Make a guess!")
        else:
            print("Incorrect.")
            print_hint(session)


def main(argv=None):
    logging.basicConfig(level=logging.WARNING)
    args = build_parser().parse_args(argv)
    settings = load_settings()
    session = GameSession.from_settings(settings)
    if args.data:
        session.load(load_characters(args.data))
    if args.no_hint:
        session.set_letter_hint(False)
    play(session)


if __name__ == "__main__":
    main()
