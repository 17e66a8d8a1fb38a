"""CLI options for selecting players, search depth, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Ataxx AI")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays red/blue; default from settings)",
    )
    parser.add_argument("--depth", type=int, help="Search depth for AI")
    parser.add_argument("--seed", type=int, help="Seed for the AI's random source")
    parser.add_argument("--randomize-ties", action="store_true", help="Shuffle equally ranked AI moves")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--load", metavar="FILE", help="Run commands from FILE before reading input")
    parser.add_argument("--log-timestamps", action="store_true", help="Prefix output lines with the time")
    return parser.parse_args(argv)
