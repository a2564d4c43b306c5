"""Command line search over GitHub repositories."""
import asyncio
import sys

import click
from loguru import logger

from .config import Settings, configure_logging, get_settings
from .datasources.github_adapter import GitHubAdapter
from .errors import QueryValidationError, SearchError
from .schemas import SearchResult
from .services.query_builder import SearchQuery, build_search_query
from .services.table import write_table


async def fetch_results(query: SearchQuery, settings: Settings) -> SearchResult:
    adapter = GitHubAdapter(settings, log=logger.bind(component="cli"))
    try:
        return await adapter.fetch(query.encode())
    finally:
        await adapter.aclose()


@click.command()
@click.option("--name", default="", help="name of repository to search.")
@click.option("--lang", default="", help="filter results based on programming language.")
@click.option("--count", default=10, type=int, show_default=True, help="how many results to return per page.")
@click.option("--page", default=1, type=int, show_default=True, help="page of the results to fetch.")
@click.option(
    "--sort",
    default="stars",
    show_default=True,
    help="how to sort the results. Supported values are: stars, forks, help-wanted-issues, updated.",
)
@click.option(
    "--scope",
    default="",
    help="restrict search to the repository name, description, topics, or contents of README. "
    "Supported values are: name, description, topics, readme.",
)
@click.option(
    "--order",
    default="desc",
    show_default=True,
    help="how to sort the search results. Supported values are: asc, desc.",
)
@click.option("--show-repo-url", is_flag=True, help="show repository url in results.")
def main(name, lang, count, page, sort, scope, order, show_repo_url):
    """Search GitHub repositories by name."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        query = build_search_query(
            name,
            scope=scope or None,
            language=lang or None,
            sort=sort or None,
            order=order,
            page=page,
            count=count,
        )
    except QueryValidationError as exc:
        raise click.ClickException(str(exc))

    try:
        result = asyncio.run(fetch_results(query, settings))
    except SearchError as exc:
        raise click.ClickException(str(exc))

    write_table(result, sys.stdout, show_repo_url=show_repo_url)


if __name__ == "__main__":
    main()
