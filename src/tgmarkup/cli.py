"""Command-line entry point: render a Bot API message JSON as markup.

Usage:
    tgmarkup-render --dialect html message.json
    cat message.json | tgmarkup-render --dialect markdownv2 --urled -
"""

from __future__ import annotations

import json
import logging
import os
import sys

import click
from dotenv import load_dotenv

from .config import load_settings
from .entities import Dialect
from .errors import MarkupError
from .message import MessagePayload, render_message

logger = logging.getLogger(__name__)

_DIALECTS = {
    "html": Dialect.HTML,
    "markdown": Dialect.MARKDOWN,
    "markdownv2": Dialect.MARKDOWN_V2,
}


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, log_level, logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)


@click.command()
@click.option(
    "--dialect",
    "-d",
    type=click.Choice(sorted(_DIALECTS), case_sensitive=False),
    default="html",
    show_default=True,
    help="Output markup dialect.",
)
@click.option("--caption", is_flag=True, help="Render the caption instead of the text.")
@click.option("--urled", is_flag=True, help="Turn bare URLs into links.")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def main(dialect: str, caption: bool, urled: bool, source) -> None:  # type: ignore[no-untyped-def]
    """Render the text (or caption) of the message JSON in SOURCE."""
    load_dotenv()
    _configure_logging()

    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="SOURCE") from e
    if not isinstance(data, dict):
        raise click.BadParameter("expected a JSON object", param_hint="SOURCE")

    try:
        payload = MessagePayload.from_dict(data)
        rendered = render_message(
            payload,
            _DIALECTS[dialect.lower()],
            caption=caption,
            auto_link_urls=urled,
            settings=load_settings(),
        )
    except MarkupError as e:
        raise click.UsageError(str(e)) from e
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="SOURCE") from e

    if rendered is None:
        logger.info("Message has no %s", "caption" if caption else "text")
        sys.exit(1)

    click.echo(rendered)


if __name__ == "__main__":
    main()
