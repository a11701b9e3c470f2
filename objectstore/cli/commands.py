"""CLI commands for objectstore."""

import shlex
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from objectstore import __version__, __logo__
from objectstore.store import Repository, Result

app = typer.Typer(
    name="objectstore",
    help=f"{__logo__} objectstore - In-memory git-like object store",
    no_args_is_help=True,
)

console = Console()

USAGE = """Commands:
  add <name> <value>      stage an object
  rm <name>               schedule an object for removal
  commit <message>        commit staged changes
  checkout <hash>         reset the current branch to a commit
  branch                  list branches
  branch -c <name>        create a branch
  branch -s <name>        switch to a branch
  branch -d <name>        remove a branch
  log                     show history of the current branch
  head                    show the latest commit
  get <name>              read a committed object"""


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} objectstore v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """objectstore - In-memory git-like object store."""
    pass


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")


# ============================================================================
# Command grammar
# ============================================================================


def _branch_command(repo: Repository, args: list[str]) -> Result[Any]:
    manager = repo.branch()
    if not args:
        return manager.list()
    
    if len(args) != 2:
        return Result.fail("Usage: branch [-c|-s|-d <name>]")
    
    flag, name = args
    if flag == "-c":
        return manager.create(name)
    if flag == "-s":
        return manager.checkout(name)
    if flag == "-d":
        return manager.remove(name)
    return Result.fail(f"Unknown branch option '{flag}'")


def execute_line(repo: Repository, line: str) -> Result[Any] | None:
    """
    Run one command line against a repository.
    
    Args:
        repo: Target repository.
        line: Command text, e.g. ``add README "hello world"``.
    
    Returns:
        The operation's result, or None for blank lines and comments.
    """
    try:
        parts = shlex.split(line, comments=True)
    except ValueError as e:
        return Result.fail(f"Cannot parse '{line.strip()}': {e}")
    
    if not parts:
        return None
    
    command, args = parts[0], parts[1:]
    
    if command == "add" and len(args) >= 2:
        return repo.add(args[0], " ".join(args[1:]))
    if command == "commit" and args:
        return repo.commit(" ".join(args))
    if command == "rm" and len(args) == 1:
        return repo.remove(args[0])
    if command == "checkout" and len(args) == 1:
        return repo.checkout(args[0])
    if command == "branch":
        return _branch_command(repo, args)
    if command == "log" and not args:
        return repo.log()
    if command == "head" and not args:
        return repo.head()
    if command == "get" and len(args) == 1:
        return repo.get(args[0])
    
    return Result.fail(f"Unknown or malformed command: {line.strip()}")


def _print_result(result: Result[Any]) -> None:
    if result.is_error():
        console.print(f"[red]✗ {escape(result.message)}[/red]", highlight=False)
        return
    
    console.print(result.message, highlight=False, markup=False)
    if isinstance(result.payload, str):
        console.print(f"  [dim]{escape(result.payload)}[/dim]", highlight=False)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def run(
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one command per line"),
    keep_going: bool = typer.Option(None, "--keep-going", "-k", help="Continue after a failed command"),
    verbose: bool = typer.Option(None, "--verbose", help="Verbose output"),
):
    """Run a script of store commands against a fresh repository."""
    from objectstore.config.loader import load_config
    
    config = load_config()
    keep_going = config.cli.keep_going if keep_going is None else keep_going
    _setup_logging(config.cli.verbose if verbose is None else verbose)
    
    repo = Repository(config.store)
    failed = False
    
    for lineno, line in enumerate(script.read_text(encoding="utf-8").splitlines(), start=1):
        result = execute_line(repo, line)
        if result is None:
            continue
        
        _print_result(result)
        if result.is_error():
            failed = True
            if not keep_going:
                console.print(f"[dim]Stopped at line {lineno}[/dim]")
                break
    
    if failed:
        raise typer.Exit(1)


@app.command()
def shell(
    verbose: bool = typer.Option(None, "--verbose", help="Verbose output"),
):
    """Start an interactive session on a fresh repository."""
    from objectstore.config.loader import load_config
    
    config = load_config()
    _setup_logging(config.cli.verbose if verbose is None else verbose)
    
    repo = Repository(config.store)
    console.print(f"{__logo__} Interactive mode (type 'help', Ctrl+C to exit)\n")
    
    while True:
        try:
            line = console.input(f"[bold blue]{repo.branch_manager.current_branch.name}>[/bold blue] ")
        except (KeyboardInterrupt, EOFError):
            console.print("\nGoodbye!")
            break
        
        if line.strip() in ("exit", "quit"):
            break
        if line.strip() == "help":
            console.print(USAGE, markup=False)
            continue
        
        result = execute_line(repo, line)
        if result is not None:
            _print_result(result)


@app.command()
def status():
    """Show effective configuration."""
    from objectstore.config.loader import get_config_path, load_config
    
    config_path = get_config_path()
    config = load_config()
    
    console.print(f"{__logo__} objectstore Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[dim]defaults[/dim]'}")
    
    table = Table(title="Store Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")
    
    for key, value in config.store.model_dump().items():
        table.add_row(key, repr(value))
    
    console.print(table)


@app.command()
def onboard():
    """Write a default configuration file."""
    from objectstore.config.loader import get_config_path, save_config
    from objectstore.config.schema import Config
    
    config_path = get_config_path()
    
    if config_path.exists():
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit()
    
    save_config(Config())
    console.print(f"[green]✓[/green] Created config at {config_path}")


if __name__ == "__main__":
    app()
