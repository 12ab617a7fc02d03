import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from headmeta import page_file
from headmeta.json_utils import json_dumps
from headmeta.serializer import to_vue_meta_json

try:
    __version__ = version("headmeta")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="HEADMETA_LOG_FILE",
)
@click.version_option(__version__, prog_name="headmeta")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument(
    "page_path", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
@click.option("--pretty", is_flag=True, help="Indent the JSON output.")
def render(
    page_path: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
    pretty: bool = False,
) -> None:
    """Render a page description as a Vue Meta document.

    Args:
        page_path: JSON or YAML file describing the page metadata.
        output_path: Optional file or directory path for the document.
            If a directory is provided, the file name is derived from the
            name of the page description.
        output_format: Format of the document.
        pretty: Indent JSON output.
    """

    source = Path(page_path)

    # Build the metadata model and serialize it.
    try:
        metadata = page_file.load_page_file(source)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Invalid page description: {exc}") from exc
    doc = to_vue_meta_json(metadata)

    # Determine the output file path if one was provided. When the user
    # passes a directory, name the file after the page description.
    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            final_path = final_path / f"{source.stem}.{output_format}"

    if output_format == "json":
        content = json_dumps(doc, indent=pretty)
    else:
        content = yaml.safe_dump(doc, allow_unicode=True, sort_keys=False)

    if final_path:
        final_path.write_text(content, encoding="utf-8")
        logging.debug(f"Wrote {output_format} document to {final_path}")
    else:
        click.echo(content)
