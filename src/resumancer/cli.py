"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from resumancer.config import load_config
from resumancer.errors import IdeaGenerationError
from resumancer.models.idea import NoUsableIdeas
from resumancer.models.request import Constraints, GenerationRequest
from resumancer.pipeline.orchestrator import IdeaOrchestrator

app = typer.Typer(
    name="resumancer",
    help="Mood-conditioned career idea generator",
    no_args_is_help=True,
)
console = Console()

CATEGORY_COLORS = {"practical": "green", "creative": "blue", "absurd": "magenta"}


@app.command()
def generate(
    mood: float = typer.Option(5, "--mood", "-m", help="0 (realistic) to 10 (delusional)"),
    role: str = typer.Option("", "--role", help="Target role"),
    industry: str = typer.Option("", "--industry", help="Target industry"),
    skills: list[str] = typer.Option(None, "--skill", help="A skill (repeatable)"),
    interests: list[str] = typer.Option(None, "--interest", help="An interest (repeatable)"),
    background: str = typer.Option("", "--background", help="Short background summary"),
    context: str = typer.Option("", "--context", help="Anything else the model should know"),
    remote_only: bool = typer.Option(False, "--remote-only", help="Remote-only ideas"),
    no_coding: bool = typer.Option(False, "--no-coding", help="No-code ideas only"),
    part_time: bool = typer.Option(False, "--part-time", help="Must fit a part-time schedule"),
    budget: str = typer.Option("", "--budget", help="Budget ceiling, e.g. '$200'"),
    horizon: str = typer.Option("30 days", "--horizon", help="Time horizon"),
    avoid: list[str] = typer.Option(None, "--avoid", help="Title to avoid repeating (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate three career ideas for the given situation."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    config = load_config()
    orchestrator = IdeaOrchestrator.from_config(config)

    request = GenerationRequest(
        mood=mood,
        target_role=role,
        industry=industry,
        skills=skills or [],
        interests=interests or [],
        background=background,
        additional_context=context,
        constraints=Constraints(
            remote_only=remote_only,
            no_coding=no_coding,
            part_time_ok=part_time,
            max_budget=budget,
        ),
        time_horizon=horizon,
        previous_titles=avoid or [],
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Cooking up ideas...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            if verbose and detail:
                progress.update(task, description=f"{phase}: {detail}")

        try:
            outcome = asyncio.run(orchestrator.generate(request, on_phase=on_phase))
        except IdeaGenerationError as e:
            progress.stop()
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1)

    if isinstance(outcome, NoUsableIdeas):
        console.print(f"[yellow]No usable ideas this time: {outcome.message}. Try again.[/yellow]")
        if verbose:
            console.print(f"[dim]{outcome.raw}[/dim]")
        raise typer.Exit(1)

    console.print(f"[dim]Mood {outcome.mood}/10, temperature {outcome.temperature:.2f}[/dim]")
    for idea in outcome.ideas:
        color = CATEGORY_COLORS.get(idea.category, "white")
        body = (
            f"[bold]Why it fits:[/bold] {idea.why}\n\n"
            f"[bold]Plan:[/bold]\n{idea.plan}\n\n"
            f"[bold]Opener:[/bold] {idea.opener}"
        )
        if idea.suggested_timeframe:
            body += f"\n\n[dim]Timeframe: {idea.suggested_timeframe}[/dim]"
        console.print(
            Panel(body, title=f"[{color}]{idea.category.capitalize()}[/{color}] {idea.title}")
        )


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Port"),
    debug: bool = typer.Option(False, "--debug", help="Flask debug mode"),
) -> None:
    """Run the HTTP API (POST /api/ideas)."""
    from resumancer.api.app import create_app

    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    console.print(f"[green]Serving on http://{host}:{port}[/green]")
    create_app().run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    app()
