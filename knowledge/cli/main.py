"""CLI entry point for the knowledge base."""

import sys
from functools import wraps
from pathlib import Path

import click

from knowledge.contracts.analysis import AnalysisReport
from knowledge.corpus.loader import DocumentLoader
from knowledge.corpus.search import SearchEngine
from knowledge.corpus.storage import DocumentStorage
from knowledge.errors import KnowledgeBaseError
from knowledge.logging_config import configure_logging
from knowledge.processing.analyzer import Analyzer
from knowledge.processing.pipeline import ProcessPipeline
from knowledge.settings import get_settings


def handle_errors(command):
    """Report knowledge base errors on stderr and exit with status 1."""

    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except KnowledgeBaseError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper


def print_report(report: AnalysisReport) -> None:
    stats = report.stats
    click.echo(f"=== Analysis: {report.filename} ===")
    click.echo(
        f"Lines: {stats.lines}  Words: {stats.words}  Headings: {stats.headings}  "
        f"Code blocks: {stats.code_blocks}  Links: {stats.links}"
    )
    if report.suggested_filename:
        click.echo(f"Suggested filename: {report.suggested_filename}")

    if report.issues:
        click.echo("\nIssues:")
        for issue in report.issues:
            click.echo(f"  - {issue}")

    if report.suggestions:
        click.echo("\nSuggestions:")
        for suggestion in report.suggestions:
            click.echo(f"  - {suggestion}")


@click.group()
@click.option(
    "--kb-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Path to knowledge base directory (default: KNOWLEDGE_BASE_DIR)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def app(ctx: click.Context, kb_dir: Path | None, verbose: bool):
    """Knowledge base - analyze, normalize and search markdown documents."""
    ctx.ensure_object(dict)

    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    storage = DocumentStorage(kb_dir or settings.knowledge_base_dir)
    ctx.obj["loader"] = DocumentLoader(storage)


@app.command("list")
@click.pass_context
@handle_errors
def list_documents(ctx: click.Context):
    """List documents, most recent first."""
    loader: DocumentLoader = ctx.obj["loader"]
    for doc in loader.list_all():
        tags = f"  [{', '.join(doc.tags)}]" if doc.tags else ""
        click.echo(f"{doc.date:%Y-%m-%d}  {doc.identifier}  {doc.title}{tags}")


@app.command()
@click.pass_context
@handle_errors
def files(ctx: click.Context):
    """List raw document files with size and modification time."""
    loader: DocumentLoader = ctx.obj["loader"]
    for entry in loader.list_files():
        click.echo(f"{entry.modified:%Y-%m-%d %H:%M}  {entry.size:>8}  {entry.filename}")


@app.command()
@click.pass_context
@handle_errors
def tags(ctx: click.Context):
    """List all tags used across the knowledge base."""
    loader: DocumentLoader = ctx.obj["loader"]
    for tag in loader.all_tags():
        click.echo(tag)


@app.command()
@click.argument("identifier")
@click.pass_context
@handle_errors
def show(ctx: click.Context, identifier: str):
    """Print a document by identifier."""
    loader: DocumentLoader = ctx.obj["loader"]
    doc = loader.get_by_identifier(identifier)
    if doc is None:
        click.echo(f"Error: Document not found: {identifier}", err=True)
        sys.exit(1)

    click.echo(f"# {doc.title}")
    click.echo(f"Date: {doc.date:%Y-%m-%d}")
    if doc.tags:
        click.echo(f"Tags: {', '.join(doc.tags)}")
    click.echo()
    click.echo(doc.content)


@app.command()
@click.argument("ref")
@click.pass_context
@handle_errors
def analyze(ctx: click.Context, ref: str):
    """Analyze a document (filename or identifier) and suggest improvements."""
    analyzer = Analyzer(ctx.obj["loader"])
    print_report(analyzer.analyze(ref))


@app.command()
@click.argument("ref")
@click.option("--rename", "-r", "new_filename", default=None, help="Save under a new filename")
@click.option(
    "--suggested",
    is_flag=True,
    help="Rename to the filename suggested by the first H1 heading",
)
@click.pass_context
@handle_errors
def process(ctx: click.Context, ref: str, new_filename: str | None, suggested: bool):
    """Rewrite a document with complete frontmatter and normalized markdown."""
    loader: DocumentLoader = ctx.obj["loader"]

    if suggested and new_filename is None:
        new_filename = Analyzer(loader).analyze(ref).suggested_filename

    result = ProcessPipeline(loader).process(ref, new_filename)

    print_report(result.analysis)
    click.echo()
    if result.renamed:
        click.echo(f"Saved {result.analysis.filename} as {result.filename}")
    else:
        click.echo(f"Saved {result.filename}")


@app.command()
@click.argument("query", nargs=-1)
@click.option("--limit", "-n", type=int, default=10, help="Maximum number of results")
@click.pass_context
@handle_errors
def search(ctx: click.Context, query: tuple[str, ...], limit: int):
    """Search titles, tags, descriptions and excerpts."""
    engine = SearchEngine(ctx.obj["loader"])
    matches = engine.rank(" ".join(query))

    if not matches:
        click.echo("No results")
        return

    top_score = matches[0].score
    for match in matches[:limit]:
        doc = match.document
        click.echo(f"{match.percent(top_score):>3}%  {doc.identifier}  {doc.title}")
