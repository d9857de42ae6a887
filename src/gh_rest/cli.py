"""CLI entry point for gh-rest.

Commands:
- get: Send a GET request and print the JSON body
- rate-limit: Show the rate limit of every category
"""

import asyncio
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from gh_rest import __version__
from gh_rest.config import Config, load_config
from gh_rest.core.errors import APIError, GitHubError
from gh_rest.core.http import GitHubClient, Response
from gh_rest.core.ratelimit import RateLimits
from gh_rest.logging import setup_logging

console = Console()


def _parse_params(params: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {item!r}"
            raise click.BadParameter(msg, param_hint="--param")
        parsed[key] = value
    return parsed


def _print_error(error: GitHubError) -> None:
    console.print(f"[bold red]Error:[/bold red] {error}")
    if isinstance(error, APIError) and error.documentation_url:
        console.print(f"[dim]See {error.documentation_url}[/dim]")


def _print_page_info(response: Response[Any]) -> None:
    if not response.cursors.is_empty:
        console.print(
            f"[dim]Pages: next={response.next_page} last={response.last_page} "
            f"next_url={response.cursors.next}[/dim]"
        )
    if response.rate is not None:
        console.print(
            f"[dim]Rate limit ({response.rate.resource or 'core'}): "
            f"{response.rate.remaining}/{response.rate.limit}, "
            f"resets in {response.rate.seconds_until_reset:.0f}s[/dim]"
        )


@click.group()
@click.version_option(version=__version__, prog_name="gh-rest")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to config.yaml file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """Command line access to the GitHub REST API.

    Authenticates with the token in GITHUB_TOKEN (or the variable named by
    client.token_env in the config file).

    \b
    Examples:
        gh-rest get repos/octocat/hello-world
        gh-rest get user/repos -p per_page=5
        gh-rest rate-limit
    """
    cfg = load_config(config) if config is not None else Config()
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = cfg
    setup_logging(verbose=verbose or cfg.logging.verbose, json_format=cfg.logging.json_format)


async def _get(
    cfg: Config, path: str, params: dict[str, str], accept: str | None
) -> Response[Any]:
    async with GitHubClient(config=cfg.client) as client:
        return await client.request("GET", path, Any, options=params, media_type=accept)


@main.command()
@click.argument("path")
@click.option("--param", "-p", "params", multiple=True, help="Query parameter as key=value")
@click.option("--accept", default=None, help="Override the Accept media type")
@click.pass_context
def get(ctx: click.Context, path: str, params: tuple[str, ...], accept: str | None) -> None:
    """GET PATH (relative to the API base URL) and print the JSON body."""
    cfg: Config = ctx.obj["config"]
    query = _parse_params(params)

    try:
        response = asyncio.run(_get(cfg, path, query, accept))
    except GitHubError as e:
        _print_error(e)
        raise click.Abort() from e

    if response.accepted:
        console.print("[yellow]202 Accepted: GitHub is still computing the result, retry later[/yellow]")
    elif response.data is None:
        console.print(f"[green]{response.status_code} {response.reason_phrase}[/green]")
    else:
        console.print_json(data=response.data)
    _print_page_info(response)


async def _rate_limits(cfg: Config) -> RateLimits | None:
    async with GitHubClient(config=cfg.client) as client:
        response = await client.get_rate_limits()
        return response.data


@main.command(name="rate-limit")
@click.pass_context
def rate_limit(ctx: click.Context) -> None:
    """Show remaining requests per rate limit category."""
    cfg: Config = ctx.obj["config"]

    try:
        limits = asyncio.run(_rate_limits(cfg))
    except GitHubError as e:
        _print_error(e)
        raise click.Abort() from e

    if limits is None:
        console.print("[yellow]No rate limit information returned[/yellow]")
        return

    table = Table(title="GitHub rate limits")
    table.add_column("Category", style="cyan")
    table.add_column("Used", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Resets at", style="dim")

    for name, rate in sorted(limits.resources.items()):
        remaining_style = "red" if rate.is_exhausted() else "green"
        table.add_row(
            name,
            str(rate.used),
            f"[{remaining_style}]{rate.remaining}[/{remaining_style}]",
            str(rate.limit),
            rate.reset.strftime("%Y-%m-%d %H:%M:%S UTC"),
        )

    console.print(table)


if __name__ == "__main__":
    main()
