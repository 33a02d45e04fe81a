"""Interactive command-line front-end for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import argparse
import asyncio
from typing import TYPE_CHECKING

# Third-party (alphabetical)
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

# Local imports (core first, then alphabetical)
from catalog_search._version import __version__
from catalog_search.catalog import load_catalog
from catalog_search.core.constants import DEFAULT_PROMPT, EXIT_COMMANDS, SOURCE_KEY
from catalog_search.core.exceptions import CatalogSearchError
from catalog_search.core.settings import CatalogSearchSettings, load_settings
from catalog_search.embeddings import IngestionPipeline, PydanticAIEmbeddingProvider, QueryService, VectorStore
from catalog_search.infra.instrumentation import configure_instrumentation, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from catalog_search.core.protocols import EmbeddingProvider
    from catalog_search.core.types import SearchResult

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("build_parser", "build_service", "main", "render_results", "run_repl", "run_query")

logger = get_logger("cli")


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_parser() -> argparse.ArgumentParser:
    """Build the ``catalog-search`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalog-search",
        description="Semantic search over a JSON product catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session over products.json
  catalog-search products.json

  # One-shot query returning five results
  catalog-search products.json -k 5 -q "I want to buy a watch"
""",
    )
    parser.add_argument("catalog", nargs="?", default=None, help="Catalog JSON file (default: settings.catalog_path)")
    parser.add_argument("-k", "--top-k", dest="default_k", type=_positive_int, default=None, help="Results per query")
    parser.add_argument("-q", "--query", default=None, help="Run a single query and exit")
    parser.add_argument("-m", "--model", dest="embedding_model", default=None, help="Embedding model identifier")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


async def build_service(settings: CatalogSearchSettings, provider: EmbeddingProvider | None = None) -> QueryService:
    """Load the catalog, ingest it and return a query service over the result.

    Raises:
        CatalogSearchError: If loading or ingestion fails.
    """
    provider = provider or PydanticAIEmbeddingProvider(settings.embedding_model)
    store = VectorStore()
    products = load_catalog(settings.catalog_path)
    await IngestionPipeline(store, provider).ingest_products(products)
    return QueryService(store, provider)


def render_results(console: Console, query: str, results: Sequence[SearchResult]) -> None:
    """Print search results as a table."""
    if not results:
        console.print(f"[yellow]No results for[/yellow] {query!r}")
        return

    table = Table(title=f"Results for {query!r}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Source", style="cyan")
    table.add_column("Content")
    table.add_column("Score", justify="right", style="green")
    for rank, result in enumerate(results, start=1):
        table.add_row(str(rank), str(result.get(SOURCE_KEY, "")), result["content"], f"{result['score']:.4f}")
    console.print(table)


async def run_query(service: QueryService, query: str, k: int, console: Console) -> bool:
    """Run one query and render it. Returns ``False`` when the query failed."""
    try:
        results = await service.search(query, k)
    except Exception as exc:
        logger.exception("Query failed", query=query)
        console.print(f"[red]Error:[/red] {exc}")
        return False
    render_results(console, query, results)
    return True


def run_repl(
    runner: asyncio.Runner,
    service: QueryService,
    k: int,
    console: Console,
    *,
    read_line: Callable[[str], str] | None = None,
) -> None:
    """Read queries until EOF, interrupt or an exit command.

    Input is read on the main thread so Ctrl-C reaches the prompt; each query
    runs to completion on ``runner``'s event loop.
    """
    reader = read_line or console.input
    console.print(f"[dim]Type a query, or {' / '.join(sorted(EXIT_COMMANDS))} to leave.[/dim]")
    while True:
        try:
            line = reader(DEFAULT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        query = line.strip()
        if not query:
            continue
        if query.lower() in EXIT_COMMANDS:
            break
        runner.run(run_query(service, query, k, console))


def _run(args: argparse.Namespace, console: Console, provider: EmbeddingProvider | None = None) -> int:
    try:
        settings = load_settings(
            catalog_path=args.catalog,
            default_k=args.default_k,
            embedding_model=args.embedding_model,
        )
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid settings: {exc}")
        return 1
    configure_instrumentation(environment=settings.environment, send_to_logfire=settings.send_to_logfire)

    with asyncio.Runner() as runner:
        try:
            with console.status(f"Indexing {settings.catalog_path}..."):
                service = runner.run(build_service(settings, provider))
        except CatalogSearchError as exc:
            logger.error("Startup failed: {error}", error=str(exc))
            console.print(f"[red]Error:[/red] {exc}")
            return 1

        console.print(f"[green]✓[/green] Indexed {service.store.size()} products from {settings.catalog_path}")

        if args.query is not None:
            return 0 if runner.run(run_query(service, args.query, settings.default_k, console)) else 1

        run_repl(runner, service, settings.default_k, console)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``catalog-search`` command."""
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        return _run(args, console)
    except KeyboardInterrupt:
        return 0
