"""CLI for StrictPass — check, explain, generate, config."""

import argparse
import sys
from getpass import getpass

from rich import print
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from .config import load_config, save_config
from .evaluator import CLASS_BOUNDS, MAX_SINGLE_CHAR_PERCENT, OTHER_ESCAPE_PERCENT, analyze
from .generator import generate_compliant
from .log import configure_logging
from .policy import check_password
from .suggestions import advice_for
from .verdict import CharClass

def _read_password(args) -> str:
    return args.password if args.password is not None else getpass("Password to check: ")

def cmd_check(args, cfg):
    pw = _read_password(args)
    try:
        verdict = check_password(pw, dictionary_path=args.dict or cfg.get("dictionary_path"))
    except OSError as e:
        print(f"[red]Could not read word list: {escape(str(e))}[/red]")
        return 1
    if verdict:
        print(Panel("Password accepted", title="[bold green]OK[/bold green]"))
        return 0
    print(Panel(verdict.reason, title="[bold red]Rejected[/bold red]"))
    for s in advice_for(verdict):
        print(f" • {s}")
    return 1

def cmd_explain(args, cfg):
    stats = analyze(args.password)
    if stats.length == 0:
        print("[yellow]Empty password.[/yellow]")
        return 0
    bounds = {c: (max_pct, min_pct) for c, max_pct, min_pct, _, _ in CLASS_BOUNDS}
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Class")
    table.add_column("Count", justify="right")
    table.add_column("Percent", justify="right")
    table.add_column("Allowed")
    for cls in CharClass:
        max_pct, min_pct = bounds.get(cls, (None, None))
        if max_pct is None:
            allowed = f">= {OTHER_ESCAPE_PERCENT}% skips class bounds"
        else:
            allowed = f"{min_pct or 0}-{max_pct}%"
        table.add_row(cls.value, str(stats.classes[cls]), f"{stats.class_percent(cls)}%", allowed)
    print(table)
    top = max(stats.bytes_seen)
    print(f"Length: {stats.length}  most frequent byte: {top * 100 // stats.length}% (max {MAX_SINGLE_CHAR_PERCENT}%)")
    return 0

def cmd_generate(args, cfg):
    for i in range(args.copies):
        try:
            pw = generate_compliant(length=args.length, symbols=args.symbols)
        except (ValueError, RuntimeError) as e:
            print(f"[red]{escape(str(e))}[/red]")
            return 1
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return 0

def cmd_config(args, cfg):
    changed = False
    if args.dict is not None:
        cfg["dictionary_path"] = args.dict or None
        changed = True
    if args.log_level is not None:
        cfg["log_level"] = args.log_level.upper()
        changed = True
    if changed:
        path = save_config(cfg, args.config)
        print(f"[green]Saved settings to:[/green] {path}")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting")
    table.add_column("Value")
    for k, v in cfg.items():
        table.add_row(k, escape(str(v)))
    print(table)
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strictpass")
    parser.add_argument("--config", "-c", type=str, help="Path to settings file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    chk = sub.add_parser("check", help="Check a password against the policy")
    chk.add_argument("password", nargs="?", help="Password to check (prompted for when omitted)")
    chk.add_argument("--dict", type=str, help="Word list for the dictionary check")
    chk.set_defaults(func=cmd_check)

    ex = sub.add_parser("explain", help="Show character class statistics for a password")
    ex.add_argument("password", type=str, help="Password to analyze (wrap in quotes)")
    ex.set_defaults(func=cmd_explain)

    gen = sub.add_parser("generate", help="Generate passwords that pass the policy")
    gen.add_argument("--length", type=int, default=16, help="Password length")
    gen.add_argument("--symbols", type=str, help="Punctuation characters to draw from")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    cf = sub.add_parser("config", help="Show or change settings")
    cf.add_argument("--dict", type=str, help="Default word list ('' to use the built-in list)")
    cf.add_argument("--log-level", type=str, help="Logging level, e.g. INFO or DEBUG")
    cf.set_defaults(func=cmd_config)
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    configure_logging(cfg.get("log_level", "INFO"))
    return args.func(args, cfg)

if __name__ == "__main__":
    sys.exit(main())
