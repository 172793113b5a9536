"""`build:*` tasks: stage the output tree and convert the merged manuscript."""

from __future__ import annotations

from ..orchestrator import task
from ..orchestrator import utils
from ..orchestrator.logging import active_log_files, get_logger
from .. import staging
from . import converter


log = get_logger("build")


@task(name="build:all", prerequisites=["html", "latex", "pdf", "html_pdf"])
def build_all(params: dict):
    """Every output format."""


@task(
    name="build:setup",
    prerequisites=["clobber", "make_directories", "merge", "copy_assets"],
)
def setup(params: dict):
    """Fresh output tree with the merged manuscript and assets staged."""


@task(name="build:clobber")
def clobber(params: dict):
    out = utils.output_dir(params)
    log.info("Clobbering %s", out)
    staging.clobber(out)


@task(name="build:make_directories")
def make_directories(params: dict):
    staging.make_directories(utils.output_dir(params), utils.formats(params))


@task(name="build:merge")
def merge(params: dict):
    chapters = staging.chapter_files(utils.text_dir(params), utils.extension(params))
    staging.merge(chapters, utils.merged_path(params))


@task(name="build:copy_assets")
def copy_assets(params: dict):
    html_dir = utils.output_dir(params) / "html"
    staging.copy_file(utils.stylesheet(params), html_dir / "style.css", "stylesheet")
    staging.copy_tree_contents(utils.images_dir(params), html_dir, "image directory")
    staging.copy_file(utils.preamble(params), utils.preamble_dest(params), "preamble")


@task(name="build:html", prerequisites=["setup"])
def html(params: dict):
    converter(params).to_html(utils.merged_path(params), utils.html_path(params))
    log.info("Done with html: %s", utils.html_path(params))


@task(name="build:html_pdf", prerequisites=["setup", "html"])
def html_pdf(params: dict):
    converter(params).html_to_pdf(utils.html_path(params), utils.html_pdf_path(params))
    log.info("Done with html-pdf: %s", utils.html_pdf_path(params))


@task(name="build:pdf", prerequisites=["setup"])
def pdf(params: dict):
    converter(params).to_pdf(utils.merged_path(params), utils.pdf_path(params))
    # LaTeX leaves its byproducts in the working directory
    staging.remove_matching(
        utils.root(params), utils.cleanup_patterns(params), keep=active_log_files()
    )
    log.info("Done with pdf: %s", utils.pdf_path(params))


@task(name="build:latex", prerequisites=["setup"])
def latex(params: dict):
    converter(params).to_latex(utils.merged_path(params), utils.tex_path(params))
    log.info("Done with tex: %s", utils.tex_path(params))


@task(name="build:publish")
def publish(params: dict):
    log.warning("build:publish has no publishing target configured; nothing to do")
