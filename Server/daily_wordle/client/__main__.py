"""
Terminal front end: play today's word against a running server.

usage:
  python -m daily_wordle.client --user alice
  python -m daily_wordle.client --user alice --api http://127.0.0.1:5000 --name "Alice Smith"

Type a whole word and press return to submit it; "-" deletes the last
letter of a rejected word; "stats" and "top" show statistics and the
leaderboard; "quit" leaves.
"""

import argparse
import sys

from . import (
    GameClient, WordCheckClient, KEY_ENTER, KEY_BACKSPACE, KEYBOARD_LAYOUT,
    keyboard_theme, status_message
)
from ..config import config
from ..config.game_settings import WORD_LENGTH
from ..services.storage_service import initialize_storage_service
from ..services.achievement_service import get_achievement_progress
from ..utils.helpers import get_time_until_next_word, calculate_win_percentage


class Ansi:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_GREY = "\033[100m"


THEME_STYLE = {'correct': Ansi.GREEN, 'absent': Ansi.RED, 'emphasis': Ansi.BOLD, 'default': ''}


def render_grid(session) -> str:
    lines = []
    for row in session.rows:
        tiles = []
        for cell in row:
            char = cell.char or '.'
            if cell.exact:
                tiles.append(f"{Ansi.BG_GREEN}{Ansi.BOLD} {char} {Ansi.RESET}")
            elif cell.misplaced:
                tiles.append(f"{Ansi.BG_YELLOW}{Ansi.BOLD} {char} {Ansi.RESET}")
            elif cell.char and char in session.absent_letters:
                tiles.append(f"{Ansi.BG_GREY} {char} {Ansi.RESET}")
            else:
                tiles.append(f" {char} ")
        lines.append(''.join(tiles))
    return '\n'.join(lines)


def render_keyboard(session) -> str:
    theme = keyboard_theme(session)
    lines = []
    for row in KEYBOARD_LAYOUT:
        keys = [f"{THEME_STYLE[theme[key]]}{key}{Ansi.RESET}" for key in row if len(key) == 1]
        lines.append(' '.join(keys))
    return '\n'.join(lines)


def render_stats(stats) -> str:
    progress = get_achievement_progress(stats)
    lines = [
        f"Played {stats.games_played}  Win % {calculate_win_percentage(stats.games_played, stats.games_won)}"
        f"  Streak {stats.current_streak}  Max {stats.max_streak}  Avg {stats.average_guesses}",
    ]
    for index, count in enumerate(stats.guess_distribution, start=1):
        lines.append(f"  {index}: {'#' * count} {count}")
    if progress['streak']['next']:
        lines.append(f"  Next streak badge at {progress['streak']['next']}")
    for achievement in stats.achievements:
        lines.append(f"  * {achievement.get('title')}")
    return '\n'.join(lines)


def submit_word(client: GameClient, word: str):
    """Replace whatever is left in the active row with `word` and submit it."""
    while client.session.active_word:
        client.on_key_down(KEY_BACKSPACE)
    for char in word:
        client.on_key_down(char)
    client.on_key_down(KEY_ENTER)


def main(argv=None) -> int:
    defaults = config['default']

    parser = argparse.ArgumentParser(description="Play the daily word in your terminal")
    parser.add_argument('--user', required=True, help="user id to save progress under")
    parser.add_argument('--name', help="display name shown on the leaderboard")
    parser.add_argument('--api', default=defaults.API_BASE_URL, help="server base URL")
    args = parser.parse_args(argv)

    store = initialize_storage_service(defaults)
    checker = WordCheckClient(args.api, defaults.REQUEST_TIMEOUT_SECONDS)
    client = GameClient(args.user, store, checker)
    if args.name:
        client.stats_service.save_profile(args.user, {'displayName': args.name})
    client.load()

    while True:
        print()
        print(render_grid(client.session))
        print()
        print(render_keyboard(client.session))
        print(status_message(client.session))

        if client.session.is_over:
            print(render_stats(client.stats))
            print(f"Next word in {get_time_until_next_word()['time_string']}")
            return 0

        try:
            line = input('> ').strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if line == 'quit':
            return 0
        if line == 'stats':
            print(render_stats(client.stats))
        elif line == 'top':
            board = checker.get_leaderboard()
            for rank, entry in enumerate(board['leaderboard'], start=1):
                print(f"{rank:>3}. {entry['displayName']:<20} {entry['stats']['winRate']}%")
        elif line == '-':
            client.on_key_down(KEY_BACKSPACE)
        elif line == '--':
            for _ in range(WORD_LENGTH):
                client.on_key_down(KEY_BACKSPACE)
        elif len(line) == WORD_LENGTH:
            submit_word(client, line)
        else:
            print(f"Type a {WORD_LENGTH}-letter word")


if __name__ == '__main__':
    sys.exit(main())
