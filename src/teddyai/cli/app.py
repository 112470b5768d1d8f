"""Main CLI application using Typer."""
import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..companion import TeddyCompanion
from ..config import ENV_VARS, configure_logging
from ..llm import Success
from ..session import Session
from .providers import get_camera, get_client, get_recognizer, get_settings, get_speaker

# Create Typer app
app = typer.Typer(
    name="teddyai",
    help="A friendly AI teddy bear companion for toddlers",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def chat(
    idle_window: float | None = typer.Option(
        None,
        "--idle-window",
        "-i",
        help="Seconds of silence before Teddy speaks up"
    ),
    speaker: str | None = typer.Option(
        None,
        "--speaker",
        help="Speech output backend (silent, pyttsx3)"
    ),
    camera: int | None = typer.Option(
        None,
        "--camera",
        "-c",
        help="OpenCV camera index for the preview"
    ),
    recognizer: str | None = typer.Option(
        None,
        "--recognizer",
        help="Speech input backend (none, vosk)"
    ),
    script: list[str] | None = typer.Option(
        None,
        "--say",
        help="Transcript played back by the Speak button (repeatable)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level (debug, info, warning, error)"
    ),
):
    """Open the teddy bear chat window."""
    settings = get_settings(
        console,
        idle_window=idle_window,
        speaker=speaker,
        recognizer=recognizer,
        camera_index=camera,
        log_level=log_level,
    )
    configure_logging(settings.log_level)

    async def _chat():
        from ..ui import run_textual_tui

        companion = TeddyCompanion(
            Session(),
            get_client(settings, console),
            speaker=get_speaker(settings, console),
            recognizer=get_recognizer(settings, script, console),
        )
        await run_textual_tui(
            companion,
            idle_window=settings.idle_window,
            camera=get_camera(settings, console),
        )

    asyncio.run(_chat())


@app.command()
def ask(
    text: str = typer.Argument(..., help="What to say to Teddy"),
    speak: bool = typer.Option(
        False,
        "--speak",
        "-s",
        help="Read the reply aloud"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level (debug, info, warning, error)"
    ),
):
    """Send one message to Teddy and print the reply."""
    settings = get_settings(console, log_level=log_level)
    configure_logging(settings.log_level)

    async def _ask() -> bool:
        client = get_client(settings, console)
        speaker_ = get_speaker(settings, console) if speak else None
        session = Session()
        async with TeddyCompanion(session, client, speaker=speaker_) as companion:
            reply = await companion.send(text)
            ok = isinstance(companion.last_result, Success)
        if reply is None:
            console.print("[yellow]Nothing to send.[/yellow]")
            return False
        style = "green" if ok else "red"
        console.print(Panel(Text(reply.text), title="Teddy", border_style=style))
        return ok

    if not asyncio.run(_ask()):
        raise typer.Exit(code=1)


@app.command()
def config():
    """Show the effective settings."""
    settings = get_settings(console)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Variable", style="dim")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for var, field in ENV_VARS.items():
        value = settings.masked_api_key() if field == "api_key" else getattr(settings, field)
        table.add_row(var, field, "" if value is None else str(value))

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
