"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..conversation import EditorSession, initial_state
from ..render import project, render_chat
from .providers import get_participant_store

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatmock",
    help="Editor for fake chat-conversation screenshots",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

StoreOption = typer.Option(
    None,
    "--store",
    help="Participant store backend: memory or sqlite (env: CHATMOCK_STORE)",
)
StorePathOption = typer.Option(
    None,
    "--store-path",
    help="SQLite file for saved participants (env: CHATMOCK_STORE_PATH)",
)


@app.command()
def run(
    store: str | None = StoreOption,
    store_path: Path | None = StorePathOption,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level: debug, info, warning, error"
    ),
):
    """Open the mockup editor."""
    from ..ui import run_textual_tui

    async def _run():
        participant_store = get_participant_store(store, store_path)
        try:
            await participant_store.backend.connect()
            session = await EditorSession.open(participant_store)
            await run_textual_tui(session, log_level=log_level)
        finally:
            await participant_store.backend.disconnect()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def show(
    store: str | None = StoreOption,
    store_path: Path | None = StorePathOption,
):
    """Show the participants the editor starts with."""
    async def _show():
        participant_store = get_participant_store(store, store_path)
        try:
            await participant_store.backend.connect()
            saved = await participant_store.backend.get_item(participant_store.key)
            participants = await participant_store.load()
        finally:
            await participant_store.backend.disconnect()

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Side", style="dim", width=6)
        table.add_column("Id", style="cyan")
        table.add_column("Name")
        table.add_column("Avatar", style="dim", overflow="ellipsis", max_width=40)

        for side, p in zip(("left", "right"), participants):
            avatar = p.avatar if len(p.avatar) <= 40 else f"{p.avatar[:30]}... ({len(p.avatar):,} chars)"
            table.add_row(side, p.id, p.name, avatar)

        console.print(table)
        if saved is None:
            console.print("[dim]No saved participants; showing defaults.[/dim]")

    asyncio.run(_show())


@app.command()
def preview(
    store: str | None = StoreOption,
    store_path: Path | None = StorePathOption,
):
    """Print the seed conversation with the saved participants."""
    async def _preview():
        participant_store = get_participant_store(store, store_path)
        try:
            await participant_store.backend.connect()
            participants = await participant_store.load()
        finally:
            await participant_store.backend.disconnect()
        console.print(render_chat(project(initial_state(participants))))

    asyncio.run(_preview())


@app.command()
def reset(
    store: str | None = StoreOption,
    store_path: Path | None = StorePathOption,
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation prompt"
    ),
):
    """Forget the saved participants."""
    async def _reset():
        if not yes:
            confirm = typer.confirm("Restore the default participants?")
            if not confirm:
                console.print("[dim]Aborted.[/dim]")
                return

        participant_store = get_participant_store(store, store_path)
        try:
            await participant_store.backend.connect()
            await participant_store.reset()
            console.print("[green]Participants reset![/green]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await participant_store.backend.disconnect()

    asyncio.run(_reset())


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
