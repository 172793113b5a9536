"""`stats:*` tasks: a short report on the manuscript's size."""

from __future__ import annotations

import typer

from ..errors import ParseError
from ..orchestrator import task
from ..orchestrator import utils
from .. import scrape, staging
from . import tool_runner


@task(name="stats:report", prerequisites=["header", "wc", "pages", "footer"])
def report(params: dict):
    pass


@task(name="stats:header")
def header(params: dict):
    typer.echo("")
    typer.echo("** Stats report **")


@task(name="stats:wc")
def wc(params: dict):
    chapters = staging.chapter_files(utils.text_dir(params), utils.extension(params))
    if not chapters:
        raise ParseError(f"no chapter files under {utils.text_dir(params)}")
    output = tool_runner(params)(
        utils.wc_command(params) + [str(p) for p in chapters], capture=True
    )
    count = scrape.parse_word_count(output)
    typer.echo(f"Total word count is \t{count}")


@task(name="stats:pages")
def pages(params: dict):
    pdf = utils.stats_pdf(params)
    if not pdf.is_file():
        raise ParseError(f"cannot count pages, PDF not built: {pdf}")
    count = scrape.parse_page_count(pdf.read_bytes())
    typer.echo(f"Current page count is \t{count}")


@task(name="stats:momentum")
def momentum(params: dict):
    pass


@task(name="stats:footer")
def footer(params: dict):
    typer.echo("")
