"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame

Set GRIDSNAKE_LOG_LEVEL=DEBUG for verbose logs and GRIDSNAKE_HIGHSCORES
to move the high-score file.
"""

import logging
import os

from gridsnake.controller import GameController


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("GRIDSNAKE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    GameController().run()


if __name__ == "__main__":
    main()
