#!/usr/bin/env python3
"""
blankindent: snap the indentation of blank lines to their neighbours.

Usage:
  blankindent [OPTIONS] FILE...

Options:
  -d, --debug           Print per-line diagnostics and keep the original file;
                        the result is left in FILE.indent.
  -t, --tab-width INT   Tab width used to expand leading tabs (default 2).
  -h, --help            Show this message and exit.

Defaults for the tab width and the maximum file size can also be set with
BLANKINDENT_TAB_WIDTH and BLANKINDENT_MAX_SIZE, in a .env file in the current
directory or in the environment.

Requirements:
  pip install click pydantic python-dotenv termcolor tqdm
"""
from typing import List

import click
from pydantic import ValidationError
from termcolor import colored
from tqdm import tqdm as pb

from blankindent.config import build_config, load_env_defaults
from blankindent.errors import ReindentError
from blankindent.handler import handle_file


def _validation_messages(exc: ValidationError) -> List[str]:
    errors: List[str] = []
    for err in exc.errors():
        loc = err.get("loc", ["field"])[0]
        msg = err.get("msg", "")
        errors.append(f"{loc}: {msg}")
    return errors


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("-d", "--debug", is_flag=True, help="Debug info, don't overwrite files.")
@click.option("-t", "--tab-width", type=int, default=None, help="Tab 'width', for conversion to spaces (default 2).")
def main(files, debug, tab_width):
    """Normalize the indentation of blank lines in FILES."""
    try:
        config = build_config(debug=debug, tab_width=tab_width, env=load_env_defaults())
    except ValidationError as exc:
        raise click.UsageError("; ".join(_validation_messages(exc)))
    except ValueError as exc:
        raise click.UsageError(str(exc))

    log = click.echo if config.debug else None

    # the bar only shows on an interactive stderr with several files
    with pb(files, desc="Reindenting", unit="file", disable=True if config.debug or len(files) < 2 else None) as pbar:
        for path in pbar:
            if config.debug:
                click.echo(colored(f"[{path}]", "cyan"))
            try:
                handle_file(path, config, log=log)
            except (ReindentError, OSError) as e:
                with pb.external_write_mode():
                    click.echo(colored(f"{path} {e}", "red"))


if __name__ == "__main__":
    main()
