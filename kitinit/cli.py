"""kitinit command line."""

import json
import logging
from pathlib import Path

import typer

from kitinit.exceptions import KitInitError
from kitinit.logging import configure_logging, get_logger
from kitinit.options import InitOptions

app = typer.Typer(
    add_completion=False,
    help="Resolve a directory or HuggingFace repository and show its ModelKit package defaults.",
)

logger = get_logger("cli")


@app.command()
def init(
    path: str = typer.Argument(..., help="Local directory, org/repo, or huggingface.co URL"),
    name: str = typer.Option("", "--name", help="Name for the ModelKit"),
    description: str = typer.Option("", "--desc", help="Description for the ModelKit"),
    author: str = typer.Option("", "--author", help="Author for the ModelKit"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite the output file if present"),
    ref: str = typer.Option(None, "--ref", help="Branch or tag for remote repositories [default: main]"),
    token: str = typer.Option(None, "--token", help="HuggingFace token [default: $HF_TOKEN]"),
    output: str = typer.Option("", "--output", "-o", help="Write the summary to this file instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution decisions"),
) -> None:
    """Resolve PATH and print its package defaults as JSON."""
    if verbose:
        configure_logging(level=logging.DEBUG)

    try:
        opts = InitOptions.from_env(
            path,
            ref=ref,
            token=token,
            name=name,
            description=description,
            author=author,
            output_path=output,
            force=force,
        )
        opts.complete()
        opts.check_source()
        rendered = json.dumps(opts.summary(), indent=2)

        if output:
            opts.check_output(output)
            Path(output).write_text(rendered + "\n", encoding="utf-8")
            logger.info("Saved to path '%s'", output)
        else:
            typer.echo(rendered)
    except KitInitError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e
    except OSError as e:
        typer.echo(f"Error: failed to write {output}: {e}", err=True)
        raise typer.Exit(code=1) from e


def main() -> None:
    app()


if __name__ == "__main__":
    main()
