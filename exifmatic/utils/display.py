"""Utility functions to print formatted CLI messages for rename results."""

from __future__ import annotations

from typing import Mapping

import click

__all__ = ["echo_rename", "echo_variables", "echo_warning"]


def echo_rename(source: str, target: str, *, dry_run: bool = False) -> None:
    """Echo one ``source -> target`` line.

    Args:
        source: Original path as supplied by the user.
        target: Computed destination.
        dry_run: Prefix the line so trial runs are easy to tell apart.
    """
    prefix = "[dry-run] " if dry_run else ""
    click.echo(f"{prefix}{source} -> {target}")


def echo_warning(text: str) -> None:
    """Echo a yellow warning on stderr."""
    click.secho(f"! {text}", fg="yellow", err=True)


def echo_variables(variables: Mapping[str, str]) -> None:
    """Print *variables* as ``key = value`` lines sorted by key.

    Args:
        variables: Merged variable mapping.
    """
    if not variables:
        click.echo("No variables available.")
        return
    width = max(len(key) for key in variables)
    for key in sorted(variables):
        click.echo(f"{key:<{width}} = {variables[key]}")
