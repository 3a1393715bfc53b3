"""Expose the project-wide Click group for the ``exifmatic-cli`` script.

The module:

* declares a single Click *group* called :pyfunc:`main`;
* wires common global flags (configuration file, verbosity, log mirror);
* sets up logging via :pyfunc:`exifmatic.utils.logging.setup_logging`;
* loads the YAML configuration once and stores it in the Click context;
* registers every sub-command located in sibling modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import click

from exifmatic import __version__
from exifmatic.config import load_config
from exifmatic.utils.errors import ConfigError
from exifmatic.utils.logging import setup_logging


class LazyGroup(click.Group):
    """Click group that imports sub-commands lazily."""

    def __init__(self, *args, **kwargs):
        """Initialise the base class and prepare the lazy registry."""
        self._lazy: dict[str, str] = {}
        super().__init__(*args, **kwargs)

    def set_lazy_command(self, name: str, target: str) -> None:
        """Register *name* to be imported from ``target`` on first use."""

        self._lazy[name] = target

    def list_commands(self, ctx):  # noqa: D401 - Click signature
        """Return eager and lazy command names for the help screen."""
        return sorted(set(super().list_commands(ctx)) | set(self._lazy))

    def get_command(self, ctx, cmd_name):  # noqa: D401 - Click signature
        """Resolve *cmd_name* from the eager map or import table."""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        target = self._lazy.get(cmd_name)
        if not target:
            return None
        module_name, attr = target.split(":", 1)
        import importlib

        module = importlib.import_module(module_name)
        cmd = getattr(module, attr)
        self.add_command(cmd, name=cmd_name)
        return cmd

# ─────────────────────────────────────────────────────────────────────────────
# Context settings shared by the entire Click hierarchy
# ─────────────────────────────────────────────────────────────────────────────
_CTX: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    show_default=True,
    max_content_width=120,
)


@click.group(
    cls=LazyGroup,
    context_settings=_CTX,
    help="""\b
exifmatic-cli – rename photos from EXIF metadata dumps.

Patterns use {name} placeholders, e.g. "{y}{m}{D}_{t}_{T2}_{r}.{e}".
Run `exifmatic-cli vars -e FILE` to list the variables available.
""",
)
@click.version_option(__version__)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration (default: ./exifmatic.yaml, then the packaged default).",
)
@click.option("-v", "--verbose", is_flag=True, help="INFO-level console output.")
@click.option("--debug", is_flag=True, help="DEBUG console output.")
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror console output into this plain-text file.",
)
@click.pass_context
def main(  # noqa: D401 – Click requires the callback to be named “main”.
    ctx: click.Context,
    config_path: Path | None,
    verbose: bool,
    debug: bool,
    save_logfile: Path | None,
) -> None:
    """Root command executed by *exifmatic-cli*.

    Args:
        ctx: Click runtime context that carries objects across sub-commands.
        config_path: Explicit YAML configuration supplied via ``--config``.
        verbose: Emit INFO-level messages on the console.
        debug: Emit DEBUG-level messages.
        save_logfile: Optional path for a plain-text log that mirrors console
            output.

    Raises:
        click.ClickException: When the configuration cannot be loaded.
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    # Logging must be configured before any output is produced ----------------
    setup_logging(
        log_dir=cfg.log_dir,
        verbose=verbose,
        debug=debug,
        extra_text_log=save_logfile,
    )

    ctx.obj = {
        "cfg": cfg,
        "verbose": verbose,
        "debug": debug,
    }


main.set_lazy_command("rename", "exifmatic.cli.rename:cli")
main.set_lazy_command("vars", "exifmatic.cli.vars:cli")

# The public symbol exported by this module.  Required for ``python -m`` entry-points.
cli = main
__all__: list[str] = ["main"]
