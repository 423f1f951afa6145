"""Command-line interface for repo-cleaner."""

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from repo_cleaner import __version__
from repo_cleaner.approval.prompter import ConsoleApprovalPrompter
from repo_cleaner.cleanup.workflow import RepoCleanupWorkflow
from repo_cleaner.config import ConfigurationError, RepoCleanerConfig
from repo_cleaner.fleet import FleetRunner, RepoListNotFoundError, load_repo_list
from repo_cleaner.models import FleetSummary
from repo_cleaner.vcs.git import GitCloner, GitGateway

app = typer.Typer(
    name="repo-cleaner",
    help="Find stale remote branches across repositories and delete them after approval",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # GitPython logs every command it runs at debug level
    if not verbose:
        logging.getLogger("git").setLevel(logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"repo-cleaner version {__version__}")
        raise typer.Exit()


def _load_config(
    env_file: str | None,
    repo_list: Path | None,
    max_age_months: int | None,
    remote: str | None,
) -> RepoCleanerConfig:
    """Load configuration, letting command-line values override settings.

    Args:
        env_file: Optional custom environment file
        repo_list: Repository list override
        max_age_months: Threshold override
        remote: Remote name override

    Returns:
        Loaded configuration
    """
    overrides: dict[str, object] = {}
    if repo_list is not None:
        overrides["repo_list_file"] = repo_list
    if max_age_months is not None:
        overrides["max_age_months"] = max_age_months
    if remote is not None:
        overrides["remote_name"] = remote
    return RepoCleanerConfig(env_file=env_file, **overrides)


def _display_header(config: RepoCleanerConfig) -> None:
    console.print("\n[bold cyan]Stale Branch Cleanup[/bold cyan]")
    console.print(f"  Repository list: {config.repo_list_file}")
    console.print(f"  Remote: {config.remote_name}")
    console.print(f"  Max age: {config.max_age_months} months")


def _display_fleet_summary(summary: FleetSummary) -> None:
    """Display results for the whole repository list.

    Args:
        summary: Fleet summary to display
    """
    console.print("\n[bold]Cleanup Summary:[/bold]")
    console.print(f"  Repositories processed: {summary.repositories_processed}")
    console.print(f"  [green]Branches deleted: {summary.branches_deleted}[/green]")
    if summary.branches_failed:
        console.print(f"  [red]Deletions failed: {summary.branches_failed}[/red]")
    if summary.repositories_skipped:
        console.print(f"  [yellow]Repositories skipped: {summary.repositories_skipped}[/yellow]")

    console.print("\n[bold]Per-Repository Results:[/bold]")
    for result in summary.results:
        console.print(f"  {result.repository.identifier}: {result.status.display_name}")
        for outcome in result.outcomes:
            status = "[green]✓[/green]" if outcome.succeeded else "[red]✗[/red]"
            console.print(f"      {status} {outcome.branch}")
        if result.error_message:
            console.print(f"      [red]Error: {result.error_message}[/red]")


@app.command()
def clean(
    repo_list: Path | None = typer.Option(
        None,
        "--repo-list",
        "-r",
        help="Repository list file (default: masterRepolist.txt)",
    ),
    max_age_months: int | None = typer.Option(
        None,
        "--max-age-months",
        "-m",
        help="Age threshold in calendar months (default: 12)",
    ),
    remote: str | None = typer.Option(
        None,
        "--remote",
        help="Remote to audit (default: origin)",
    ),
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help="Path to custom environment file (default: .env.repocleaner or .env)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """Delete stale remote branches in every listed repository.

    Each stale branch is only deleted after you approve it. Deletion
    failures are reported but never change the exit code.
    """
    setup_logging(verbose)

    try:
        config = _load_config(env_file, repo_list, max_age_months, remote)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    _display_header(config)

    try:
        identifiers = load_repo_list(config.repo_list_file)
    except RepoListNotFoundError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return

    if not identifiers:
        console.print(f"[yellow]No repositories found in {config.repo_list_file}[/yellow]")
        return

    try:
        workflow = RepoCleanupWorkflow.create(
            gateway=GitGateway(config.remote_name),
            prompter=ConsoleApprovalPrompter(console),
            max_age_months=config.max_age_months,
            console=console,
        )
        runner = FleetRunner(workflow, GitCloner(), config.resolved_clone_root, console)
        summary = runner.run(identifiers)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_fleet_summary(summary)


if __name__ == "__main__":
    app()
