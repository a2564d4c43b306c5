from typing import TextIO

from rich.console import Console
from rich.table import Table

from ..schemas import SearchResult

NO_RESULTS = "Query did not return any results"
# wide enough that long repository URLs are never wrapped
CONSOLE_WIDTH = 512


def build_table(result: SearchResult, show_repo_url: bool = False) -> Table:
    table = Table(box=None, padding=(0, 1), pad_edge=False, show_header=True, header_style="bold")
    table.add_column("Name", no_wrap=True)
    table.add_column("Owner", no_wrap=True)
    table.add_column("Stars", no_wrap=True)
    table.add_column("Issues", no_wrap=True)
    if show_repo_url:
        table.add_column("URL", no_wrap=True)

    for repo in result.items:
        cells = [repo.name, repo.owner.username, str(repo.stars), str(repo.open_issues_count)]
        if show_repo_url:
            cells.append(repo.html_url)
        table.add_row(*cells)
    return table


def write_table(result: SearchResult, out: TextIO, show_repo_url: bool = False) -> None:
    """Write the repositories as column-aligned text, in the order GitHub returned them."""
    if result.total_count == 0:
        out.write(NO_RESULTS + "\n")
        return

    console = Console(file=out, width=CONSOLE_WIDTH, color_system=None, force_terminal=False)
    console.print(build_table(result, show_repo_url))
