# treewright/cli.py
from __future__ import annotations

"""Command-line interface
------------------------
Inspect selectors and recorded element trees from the shell: parse a
selector, print a snapshot tree, list matches, or run an expectation against
a snapshot. Attaching to live processes is left to platform backends.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from treewright.core.expect import expect
from treewright.core.page import Page
from treewright.errors import InvalidSelector, WaitTimeout
from treewright.selectors.matcher import find
from treewright.selectors.parser import parse
from treewright.tree.element import Element, describe
from treewright.tree.memory import MemoryDispatcher
from treewright.tree.snapshot import SnapshotError, load_tree
from treewright.utils.config import get_settings
from treewright.utils.logger import attach_file_logger, bind, detach_file_logger, set_log_level, unbind

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

CONDITIONS = ("exists", "not-exists", "enabled", "disabled", "focused")


# -------- helpers --------


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _load_or_exit(snapshot: str):
    try:
        return load_tree(snapshot)
    except (SnapshotError, FileNotFoundError) as e:
        click.echo(f"ERR {e}", err=True)
        sys.exit(EXIT_USAGE)


def _rich_tree(node: Element, branch: Optional[Tree] = None) -> Tree:
    label = escape(describe(node))
    current = Tree(label) if branch is None else branch.add(label)
    for child in node.children:
        _rich_tree(child, current)
    return current


# -------- CLI root --------


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from settings",
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write JSON logs to this file")
@click.version_option(package_name="treewright")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], log_file: Optional[str]):
    _ = get_settings()
    if log_level:
        set_log_level(log_level.upper())
    if log_file:
        handler = attach_file_logger(log_file)
        ctx.call_on_close(lambda: detach_file_logger(handler))


# -------- commands --------


@cli.command("config")
def cmd_config():
    """Print effective configuration (after .env & env vars)."""
    s = get_settings()
    _echo_json(s.model_dump(mode="json"))


@cli.command("parse")
@click.argument("selector")
def cmd_parse(selector: str):
    """Parse SELECTOR and print its steps as JSON."""
    try:
        parsed = parse(selector)
    except InvalidSelector as e:
        click.echo(f"ERR {e}", err=True)
        sys.exit(EXIT_USAGE)
    _echo_json(parsed.model_dump(mode="json"))


@cli.command("tree")
@click.argument("snapshot", type=click.Path(dir_okay=False))
def cmd_tree(snapshot: str):
    """Print the element tree stored in SNAPSHOT."""
    root = _load_or_exit(snapshot)
    Console(soft_wrap=True).print(_rich_tree(root))


@cli.command("find")
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.argument("selector")
def cmd_find(snapshot: str, selector: str):
    """List every element in SNAPSHOT matching SELECTOR."""
    root = _load_or_exit(snapshot)
    try:
        matches = find(parse(selector), root)
    except InvalidSelector as e:
        click.echo(f"ERR {e}", err=True)
        sys.exit(EXIT_USAGE)

    if not matches:
        click.echo(f"No elements match {selector!r}.")
        sys.exit(EXIT_FAILED)

    click.echo(f"Found {len(matches)} element(s):")
    for element in matches:
        click.echo(f" - {describe(element)}")


@cli.command("expect")
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.argument("selector")
@click.argument("condition", type=click.Choice(CONDITIONS))
@click.option("--timeout", "timeout_ms", type=int, default=1000, show_default=True, help="Wait budget in ms")
def cmd_expect(snapshot: str, selector: str, condition: str, timeout_ms: int):
    """
    Assert CONDITION for SELECTOR against SNAPSHOT.

    Examples:
      treewright expect app.yaml "window dialog button#confirm" enabled
      treewright expect app.yaml "#spinner" not-exists --timeout 200
    """
    root = _load_or_exit(snapshot)
    page = Page(root, MemoryDispatcher(root))
    expectation = expect(page.locator(selector, timeout_ms=timeout_ms))
    checks = {
        "exists": expectation.to_exist,
        "not-exists": expectation.to_not_exist,
        "enabled": expectation.to_be_enabled,
        "disabled": expectation.to_be_disabled,
        "focused": expectation.to_be_focused,
    }

    bind(snapshot=str(Path(snapshot).name))
    try:
        checks[condition]()
    except InvalidSelector as e:
        click.echo(f"ERR {e}", err=True)
        sys.exit(EXIT_USAGE)
    except WaitTimeout as e:
        click.echo(f"FAIL {e}")
        sys.exit(EXIT_FAILED)
    finally:
        unbind("snapshot")

    click.echo(f"OK  {selector} {condition}")


def main() -> None:
    cli(prog_name="treewright")


if __name__ == "__main__":
    main()
