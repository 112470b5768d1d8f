"""Provider factory functions for CLI.

Centralizes creation of settings, completion client, speaker, camera and
recognizer. Hides configuration details from command implementations.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

from ..camera import Camera
from ..config import TeddySettings, load_settings
from ..exceptions import ConfigurationError, SpeechRecognitionError
from ..llm import CompletionClient, create_completion_client
from ..speech import Speaker, SpeechRecognizer, create_recognizer, create_speaker

# Default console for output
_console = Console()


def get_settings(console: Console | None = None, **overrides: Any) -> TeddySettings:
    """Load settings from the environment and command-line overrides.

    Raises:
        SystemExit: If a setting is invalid
    """
    import typer

    con = console or _console
    try:
        settings = load_settings(**overrides)
    except ConfigurationError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if not settings.api_key:
        con.print("[yellow]Warning: OPENROUTER_API_KEY not set, requests will be rejected[/yellow]")
    return settings


def get_client(settings: TeddySettings, console: Console | None = None) -> CompletionClient:
    """Create the completion client described by ``settings``.

    Raises:
        SystemExit: If the provider is not supported
    """
    import typer

    con = console or _console
    try:
        return create_completion_client(settings.provider, **settings.client_config())
    except ConfigurationError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def get_speaker(settings: TeddySettings, console: Console | None = None) -> Speaker:
    """Create the text-to-speech speaker, falling back to silence.

    Environment variables:
        TEDDY_SPEAKER: silent (default) or pyttsx3
    """
    con = console or _console
    try:
        return create_speaker(settings.speaker, locale=settings.locale)
    except ConfigurationError as e:
        con.print(f"[yellow]Warning: {escape(str(e))}; speech output disabled[/yellow]")
    except ImportError:
        con.print(
            f"[yellow]Warning: speaker '{settings.speaker}' needs the 'voice' extra; "
            "speech output disabled[/yellow]"
        )
    return create_speaker("silent", locale=settings.locale)


def get_camera(settings: TeddySettings, console: Console | None = None) -> Camera | None:
    """Create the camera, or None if disabled or OpenCV is missing.

    Environment variables:
        TEDDY_CAMERA: OpenCV device index (unset disables the camera)
    """
    if settings.camera_index is None:
        return None

    con = console or _console
    try:
        from ..camera.opencv import OpenCVCamera
        return OpenCVCamera(index=settings.camera_index)
    except ImportError:
        con.print("[yellow]Warning: camera needs the 'vision' extra; continuing without video[/yellow]")
        return None


def get_recognizer(
    settings: TeddySettings,
    script: list[str] | None = None,
    console: Console | None = None,
) -> SpeechRecognizer | None:
    """Create the speech recognizer, or None if speech input is off.

    A script always wins: its transcripts are replayed by the Speak button.

    Environment variables:
        TEDDY_RECOGNIZER: none (default) or vosk
        TEDDY_VOSK_MODEL: Directory of the Vosk model
    """
    if script:
        return create_recognizer("scripted", items=script, locale=settings.locale)
    if settings.recognizer == "none":
        return None

    con = console or _console
    try:
        return create_recognizer(settings.recognizer, model_path=settings.vosk_model, locale=settings.locale)
    except (ConfigurationError, SpeechRecognitionError) as e:
        con.print(f"[yellow]Warning: {escape(str(e))}; speech input disabled[/yellow]")
    except ImportError:
        con.print(
            f"[yellow]Warning: recognizer '{settings.recognizer}' needs the 'listen' extra; "
            "speech input disabled[/yellow]"
        )
    return None
