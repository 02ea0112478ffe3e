"""Command-line interface using Typer."""

import asyncio
from typing import Optional
from uuid import uuid4

import typer
from rich.console import Console
from rich.table import Table

from tubevote import __version__
from tubevote.logging import setup_logging

# Setup logging
setup_logging()

app = typer.Typer(
    name="tubevote",
    help="TubeVote - video recommendation and voting service",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"TubeVote v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """TubeVote - recommend videos, vote on them, track scores."""
    pass


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the API server."""
    import uvicorn

    from tubevote.config import settings

    uvicorn.run(
        "tubevote.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload or settings.api_reload,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create any missing database tables."""
    from sqlalchemy.exc import SQLAlchemyError

    from tubevote.db.session import init_db

    try:
        init_db()
    except SQLAlchemyError as e:
        console.print(f"[bold red]Database error: {e}[/bold red]")
        raise typer.Exit(code=1)

    console.print("[bold green]✓ Database schema ready[/bold green]")


@app.command()
def videos(
    session_id: Optional[str] = typer.Option(
        None, "--session", "-s", help="Session ID whose votes to show"
    ),
) -> None:
    """List videos with metadata and vote counts."""
    from tubevote.db.session import get_session_context
    from tubevote.services.metadata_cache import get_metadata_provider
    from tubevote.services.videos import VideoService

    async def list_videos() -> list:
        provider = get_metadata_provider()
        try:
            with get_session_context() as session:
                service = VideoService(session, provider=provider)
                return await service.list_videos(session_id or str(uuid4()))
        finally:
            await provider.close()

    views = asyncio.run(list_videos())

    table = Table(title="Videos")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Likes", justify="right", style="green")
    table.add_column("Dislikes", justify="right", style="red")
    table.add_column("Your vote")

    for view in views:
        mine = "like" if view.session_like else "dislike" if view.session_dislike else ""
        table.add_row(view.id, view.title or "[dim]-[/dim]", str(view.likes), str(view.dislikes), mine)

    console.print(table)


@app.command()
def submit(
    video_id: str = typer.Argument(..., help="11-character video ID"),
    session_id: str = typer.Option(..., "--session", "-s", help="Submitting session ID"),
) -> None:
    """Recommend a video on behalf of a session."""
    from tubevote.db.session import get_session_context
    from tubevote.domain.validation import ValidationError
    from tubevote.services.metadata_cache import get_metadata_provider
    from tubevote.services.videos import VideoService

    try:
        with get_session_context() as session:
            VideoService(session, provider=get_metadata_provider()).submit_video(
                session_id, video_id
            )
    except ValidationError as e:
        console.print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=2)

    console.print(f"[green]Submitted {video_id}[/green]")


@app.command()
def vote(
    video_id: str = typer.Argument(..., help="11-character video ID"),
    value: str = typer.Argument(..., help="like or dislike"),
    session_id: str = typer.Option(..., "--session", "-s", help="Voting session ID"),
) -> None:
    """Cast a vote on behalf of a session."""
    from tubevote.db.session import get_session_context
    from tubevote.domain.validation import ValidationError
    from tubevote.services.metadata_cache import get_metadata_provider
    from tubevote.services.videos import VideoService

    try:
        with get_session_context() as session:
            tally = VideoService(session, provider=get_metadata_provider()).cast_vote(
                session_id, video_id, value
            )
    except ValidationError as e:
        console.print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=2)

    console.print(
        f"{video_id}: [green]{tally.likes} likes[/green], "
        f"[red]{tally.dislikes} dislikes[/red] (you: {tally.session_vote})"
    )


@app.command()
def score(
    session_id: str = typer.Option(..., "--session", "-s", help="Session ID"),
) -> None:
    """Show a session's recommendation score."""
    from tubevote.db.session import get_session_context
    from tubevote.services.metadata_cache import get_metadata_provider
    from tubevote.services.videos import VideoService

    with get_session_context() as session:
        total = VideoService(session, provider=get_metadata_provider()).session_score(session_id)

    console.print(f"Score: [bold]{total}[/bold]")


if __name__ == "__main__":
    app()
