"""CLI for PassGauge: score, suggest, requirements, patterns export."""

import argparse
import logging
import sys

from rich import print, print_json
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import ConfigError, config_path, load_config, save_config
from .evaluator import evaluate
from .generator import suggest_many
from .suggestions import requirements_text, suggest_improvements

logger = logging.getLogger(__name__)

# rich color names for each label, closest to the hex tokens in the report
LABEL_STYLES = {
    "Very Weak": "red",
    "Weak": "dark_orange",
    "Fair": "yellow",
    "Good": "green",
    "Strong": "bold green",
}


def cmd_score(args, cfg):
    result = suggest_improvements(args.password, cfg)
    if args.json:
        print_json(data=result)
        return 0

    style = LABEL_STYLES[result["label"]]
    header = f"[{style}]{result['label']}[/{style}] ({result['score']:.1f} / 4)"
    table = Table(show_header=False, box=None)
    table.add_column("", width=2)
    table.add_column("Requirement")
    for r in result["requirements"]:
        mark = "[green]✓[/green]" if r["met"] else ("[dark_orange]✗[/dark_orange]" if r["optional"] else "[red]✗[/red]")
        text = r["label"] + (" (recommended)" if r["optional"] else "")
        table.add_row(mark, text)
    print(Panel(table, title=header))

    print("[bold]Feedback:[/bold]")
    for f in result["feedback"]:
        print(f" • {f}")
    if result["examples"]:
        print("\n[bold]Try something like:[/bold]")
        for ex in result["examples"]:
            print(f" • {ex}")
    return 0


def cmd_suggest(args, cfg):
    if args.copies <= 0:
        print("[red]--copies must be at least 1[/red]")
        return 2
    for i, pw in enumerate(suggest_many(args.copies)):
        line = f"[bold green]Suggestion #{i+1}:[/bold green] {pw}"
        if args.check:
            report = evaluate(pw, cfg)
            line += f"  ({report.label.value}, {report.score:.1f})"
        print(line)
    return 0


def cmd_requirements(args, cfg):
    print(requirements_text())
    return 0


def cmd_patterns_export(args, cfg):
    out = args.output or config_path()
    try:
        save_config(cfg, out)
    except OSError as e:
        print(f"[red]Failed to write pattern file: {escape(str(e))}[/red]")
        return 1
    print(f"[green]Wrote pattern config to:[/green] {escape(out)}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="passgauge")
    parser.add_argument("--config", "-c", type=str, help="Path to a JSON pattern file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Evaluate a password and show feedback")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--json", action="store_true", help="Print the result as JSON")
    sc.set_defaults(func=cmd_score)

    sg = sub.add_parser("suggest", help="Suggest memorable strong passwords")
    sg.add_argument("--copies", type=int, default=1, help="How many suggestions to print")
    sg.add_argument("--check", action="store_true", help="Show the evaluated strength of each suggestion")
    sg.set_defaults(func=cmd_suggest)

    rq = sub.add_parser("requirements", help="Show the password policy")
    rq.set_defaults(func=cmd_requirements)

    pt = sub.add_parser("patterns", help="Pattern list operations")
    psub = pt.add_subparsers(dest="pcmd", required=True)
    pt_export = psub.add_parser("export", help="Write the active pattern lists to a JSON file")
    pt_export.add_argument("--output", "-o", type=str, help="Output path (default: user config path)")
    pt_export.set_defaults(func=cmd_patterns_export)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2
    logger.debug("running %s", args.cmd)
    return args.func(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
