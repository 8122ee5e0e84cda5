"""Main CLI application using Typer."""
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..history import create_history_state
from .settings import get_log_level, get_viewport, load_messages, make_debug_printer

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatscroll",
    help="Render a line-wrapped chat history into a fixed-size terminal viewport",
    no_args_is_help=True,
    add_completion=False,
)

# Diagnostics go to stderr so rendered frames stay clean on stdout
console = Console(stderr=True)

CONTENT_PREVIEW_LENGTH = 60


@app.command()
def render(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON Lines file with one message per line"
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        "-w",
        min=0,
        help="Viewport width in cells (default: CHATSCROLL_WIDTH or terminal width)"
    ),
    height: int | None = typer.Option(
        None,
        "--height",
        "-h",
        min=0,
        help="Viewport height in rows (default: CHATSCROLL_HEIGHT or terminal height)"
    ),
    up: int = typer.Option(
        0,
        "--up",
        "-u",
        min=0,
        help="Move the selection this many messages toward older ones"
    ),
    down: int = typer.Option(
        0,
        "--down",
        "-d",
        min=0,
        help="Move the selection this many messages toward newer ones"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Diagnostics level: debug, info, warning, error"
    )
):
    """Render one frame of the history to stdout."""
    try:
        rows, cols = get_viewport(width, height, console)
        state = create_history_state(
            height=rows,
            width=cols,
            debug_callback=make_debug_printer(console, get_log_level(log_level)),
        )
        for message in load_messages(file):
            state.new(message)
        for _ in range(up):
            state.cursor_up()
        for _ in range(down):
            state.cursor_down()

        state.render(typer.get_binary_stream("stdout"))

    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def show(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON Lines file with one message per line"
    )
):
    """List the messages of a history file in timestamp order."""
    try:
        messages = load_messages(file)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    state = create_history_state()
    for message in messages:
        state.new(message)

    table = Table(title=f"{len(state.history)} messages")
    table.add_column("Timestamp", style="cyan", justify="right")
    table.add_column("User", style="bold")
    table.add_column("UUID", style="dim")
    table.add_column("Content")

    for message in state.history:
        content = message.content.replace("\n", " ")
        if len(content) > CONTENT_PREVIEW_LENGTH:
            content = content[:CONTENT_PREVIEW_LENGTH] + "..."
        table.add_row(
            str(message.timestamp),
            escape(message.username),
            message.uuid,
            escape(content)
        )

    Console().print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
