"""CLI for PassMeter — score a password, show the example passphrase, serve the API or open the GUI."""

import argparse
import logging
from getpass import getpass

from rich import print, print_json
from rich.markup import escape
from rich.panel import Panel

from .config import load_config
from .display import feedback_lines, fill_style, format_entropy, format_score
from .evaluator import evaluate

logger = logging.getLogger(__name__)

# rich colour per meter style
STYLE_COLOURS = {
    "fill-veryweak": "bold red",
    "fill-weak": "dark_orange",
    "fill-fair": "yellow",
    "fill-strong": "green",
    "fill-verystrong": "bold green",
}

def _render(result):
    style, _ = fill_style(result.label)
    colour = STYLE_COLOURS.get(style, "white")
    header = f"[{colour}]{result.label}[/{colour}]"
    body = f"{format_score(result)}\n{format_entropy(result)}"
    print(Panel(body, title=header))
    print("[bold]Feedback:[/bold]")
    for line in feedback_lines(result):
        print(f" • {escape(line)}")

def cmd_score(args):
    pw = args.password
    if pw is None:
        try:
            pw = getpass("Password (input hidden): ")
        except (EOFError, KeyboardInterrupt):
            print("\n[red]No password entered — aborting.[/red]")
            return
    result = evaluate(pw)
    if args.json:
        print_json(data=result.to_dict())
    else:
        _render(result)

def cmd_example(args):
    sample = args.cfg["example_password"]
    print(f"[bold]Example passphrase:[/bold] {escape(sample)}")
    _render(evaluate(sample))

def cmd_serve(args):
    from .api import app
    logger.info("serving PassMeter API on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port)

def cmd_gui(args):
    from .gui import main as gui_main
    gui_main()

def build_parser():
    parser = argparse.ArgumentParser(prog="passmeter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password and show feedback")
    sc.add_argument("password", type=str, nargs="?", help="Password to evaluate (prompted if omitted)")
    sc.add_argument("--json", action="store_true", help="Print the result as JSON")
    sc.set_defaults(func=cmd_score)

    ex = sub.add_parser("example", help="Show the example passphrase and its score")
    ex.set_defaults(func=cmd_example)

    sv = sub.add_parser("serve", help="Run the JSON scoring API")
    sv.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    sv.add_argument("--port", type=int, default=5000, help="Port")
    sv.set_defaults(func=cmd_serve)

    gu = sub.add_parser("gui", help="Open the desktop strength meter")
    gu.set_defaults(func=cmd_gui)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.cfg = load_config()
    level = logging.DEBUG if args.verbose else str(args.cfg.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == "__main__":
    main()
