"""Entry point for Battle Ataxx AI. Load config, wire players, start Ataxxgame."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from Ataxxgame import Ataxxgame
    from Board import RED, BLUE
except ImportError:
    from Battle_Ataxx_AI.utils.cli import parse_args
    from Battle_Ataxx_AI.utils.logger import log_event
    from Battle_Ataxx_AI.Ataxxgame import Ataxxgame
    from Battle_Ataxx_AI.Board import RED, BLUE


PROJECT_DIR = Path(__file__).resolve().parent

# (red is manual, blue is manual) per mode
MODES = {
    "ai-vs-ai": (False, False),
    "human-vs-ai": (True, False),
    "ai-vs-human": (False, True),
    "human-vs-human": (True, True),
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Ataxx_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_game(args, settings, read_line=None, logger=None):
    mode = args.mode or settings.get("mode", "human-vs-ai")
    if mode not in MODES:
        raise ValueError(f"Unsupported mode: {mode}")
    depth = args.depth or settings.get("search_depth", 4)
    seed = args.seed if args.seed is not None else settings.get("seed")
    randomize_ties = args.randomize_ties or bool(settings.get("randomize_ties", False))
    if logger is None:
        timestamps = args.log_timestamps or bool(settings.get("log_timestamps", False))
        logger = log_event if timestamps else print

    game = Ataxxgame(
        read_line=read_line if read_line is not None else input,
        logger=logger,
        depth=depth,
        seed=seed,
        randomize_ties=randomize_ties,
    )
    red_manual, blue_manual = MODES[mode]
    for color, manual in ((RED, red_manual), (BLUE, blue_manual)):
        game.players[color] = game.manual_player(color) if manual else game.auto_player(color)
    return game


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    game = build_game(args, settings)
    if args.load:
        game.execute(f"load {args.load}")
    game.run()


if __name__ == "__main__":
    main()
