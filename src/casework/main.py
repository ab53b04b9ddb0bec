"""
Casework Coach - CLI Entry Point.

Usage:
    casework recommend -c housing -u high    Next best action for a case
    casework crisis-types                    List crisis types
    casework playbooks --strict              Validate the playbook table
    casework plan "housing" -u high          Generate a case plan
    casework docs list                       Manage reference documents
    casework health                          Check configuration
    casework serve                           Run the web API
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from casework.models.actions import CrisisType, UrgencyLevel

app = typer.Typer(
    name="casework",
    help="Casework Coach - next-best-action guidance for recovery caseworkers.",
    add_completion=False,
)
docs_app = typer.Typer(help="Manage organizational reference documents.")
app.add_typer(docs_app, name="docs")

console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    from casework.logging_config import configure_logging

    configure_logging(verbose=verbose)


@app.command()
def recommend(
    crisis_type: CrisisType = typer.Option(..., "--crisis-type", "-c", help="Client's situation"),
    urgency: UrgencyLevel = typer.Option(..., "--urgency", "-u", help="Response priority"),
    client: str = typer.Option(None, "--client", help="Client initials, e.g. J.D."),
    worker: str = typer.Option(None, "--worker", help="Your name, used in the script"),
) -> None:
    """Show the next best action for a case."""
    from casework.engine import select_action
    from casework.models.actions import CaseInput

    case = CaseInput(
        crisis_type=crisis_type,
        urgency=urgency,
        client_initials=client,
        caseworker_name=worker,
    )
    rec = select_action(case)

    console.print(
        Panel(
            f"[bold]{rec.action}[/bold]\n\n"
            f"[cyan]Script:[/cyan] {rec.personalized_script}\n\n"
            f"[cyan]Resource:[/cyan] {rec.resource_label} ({rec.button_type.value}: {rec.resource_link})\n\n"
            f"[dim]{rec.rationale}[/dim]\n\n"
            f"[italic green]{rec.compassion_note}[/italic green]",
            title=f"{rec.domain} - {crisis_type.label}",
            subtitle=rec.id,
            border_style="red" if rec.id == "escalate-supervisor" else "blue",
        )
    )


@app.command("crisis-types")
def list_crisis_types() -> None:
    """List crisis types and their labels."""
    from casework.engine import crisis_types

    table = Table(title="Crisis Types")
    table.add_column("Value", style="cyan")
    table.add_column("Label")
    for option in crisis_types():
        table.add_row(option.value.value, option.label)
    console.print(table)


@app.command()
def playbooks(
    path: Path = typer.Option(None, "--path", "-p", help="Playbook JSON file (default: packaged table)"),
    strict: bool = typer.Option(False, "--strict", help="Fail on duplicate trigger pairs"),
) -> None:
    """Validate and list the playbook table."""
    from casework.engine import load_playbooks
    from casework.errors import PlaybookConfigError

    try:
        loaded = load_playbooks(path, strict=strict)
    except PlaybookConfigError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Playbooks ({len(loaded)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Crisis type")
    table.add_column("Urgency")
    table.add_column("Button")
    for i, playbook in enumerate(loaded):
        table.add_row(
            str(i),
            playbook.id,
            playbook.triggers.crisis_type.value,
            playbook.triggers.urgency.value,
            playbook.button_type.value,
        )
    console.print(table)

    for triggers in loaded.duplicate_triggers():
        console.print(
            f"⚠️  Duplicate triggers {triggers.crisis_type.value}/{triggers.urgency.value}: "
            "only the first playbook is reachable"
        )


@app.command()
def plan(
    need: str = typer.Argument(..., help="Primary need, e.g. 'housing'"),
    urgency: UrgencyLevel = typer.Option(UrgencyLevel.MEDIUM, "--urgency", "-u"),
    client: str = typer.Option(None, "--client", help="Client initials"),
    worker: str = typer.Option(None, "--worker", help="Caseworker name"),
    zip_code: str = typer.Option(None, "--zip", help="ZIP code for local resources"),
    context: str = typer.Option(None, "--context", help="Additional context"),
    research: bool = typer.Option(False, "--research", help="Add a research pass first"),
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log LLM prompts to prompt_logs/"),
) -> None:
    """Generate a case plan."""
    from casework.llm.prompt_logger import enable_prompt_logging, get_session_log_dir
    from casework.models.records import CasePlanRequest
    from casework.services import generate_case_plan

    if log_prompts:
        enable_prompt_logging(True)

    request = CasePlanRequest(
        primary_need=need,
        urgency=urgency,
        client_initials=client,
        caseworker_name=worker,
        zip_code=zip_code,
        additional_context=context,
        include_research=research,
    )

    try:
        with console.status("[dim]Generating case plan...[/dim]"):
            result = asyncio.run(generate_case_plan(request))
    except Exception as e:
        console.print(f"[red]❌ Failed to generate case plan: {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel(result.content, title="Case Plan", border_style="blue"))
    console.print(f"[dim]Model: {result.metadata.get('model')}[/dim]")

    if log_prompts:
        log_dir = get_session_log_dir()
        if log_dir:
            console.print(f"[dim]Prompts logged to {log_dir}[/dim]")


# =============================================================================
# Documents
# =============================================================================


@docs_app.command("list")
def docs_list() -> None:
    """List registered documents."""
    from casework.knowledge import get_document_library

    library = get_document_library()
    docs = library.list_documents()
    if docs:
        table = Table(title="Documents")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Category")
        table.add_column("Size", justify="right")
        for doc in docs:
            table.add_row(doc.id, doc.original_name, doc.category or "", str(doc.size))
        console.print(table)
    else:
        console.print("[dim]No documents registered.[/dim]")

    for path in library.legacy_documents():
        console.print(f"[dim]legacy: {path.name}[/dim]")


@docs_app.command("add")
def docs_add(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Document to register"),
    category: str = typer.Option(None, "--category", help="e.g. 'policy', 'protocol'"),
    description: str = typer.Option(None, "--description"),
) -> None:
    """Register a reference document (.docx, .pdf, .txt, .md)."""
    from casework.knowledge import get_document_library

    doc = get_document_library().save(
        file.read_bytes(),
        original_name=file.name,
        file_type=file.suffix.lstrip(".").lower(),
        category=category,
        description=description,
    )
    console.print(f"✅ Registered {doc.original_name} as {doc.id}")


@docs_app.command("remove")
def docs_remove(doc_id: str = typer.Argument(..., help="Document ID")) -> None:
    """Remove a registered document."""
    from casework.errors import DocumentNotFoundError
    from casework.knowledge import get_document_library

    try:
        get_document_library().delete(doc_id)
    except DocumentNotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    console.print(f"✅ Removed {doc_id}")


# =============================================================================
# Operations
# =============================================================================


@app.command()
def health() -> None:
    """Check system health and configuration."""
    from casework.config import get_settings
    from casework.engine import get_default_table

    console.print("\n[bold]Casework Coach Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("✅ Configuration loaded")
        console.print(f"   Environment: {settings.casework_env}")
        console.print(f"   Log level: {settings.log_level}")

        table = get_default_table()
        console.print(f"✅ Playbook table: {len(table)} playbooks")
        for triggers in table.duplicate_triggers():
            console.print(f"⚠️  Duplicate triggers {triggers.crisis_type.value}/{triggers.urgency.value}")

        if settings.openai_api_key:
            console.print("✅ OpenAI API key configured")
        else:
            console.print("⚠️  OpenAI API key missing (generation disabled)")

        if settings.perplexity_api_key:
            console.print("✅ Perplexity API key configured")
        else:
            console.print("ℹ️  Perplexity API key missing (research and client handouts disabled)")

        if settings.two_one_one_api_key:
            console.print("✅ 211 API key configured")
        else:
            console.print("ℹ️  211 API key missing (local resources fall back to the LLM)")

        if settings.supabase_url and settings.supabase_url.startswith("https://"):
            console.print("✅ Supabase URL configured")
        else:
            console.print("ℹ️  Supabase not configured (records and metrics disabled)")

        console.print("\n[green]All checks passed![/green]")

    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from casework import __version__

    console.print(f"Casework Coach version {__version__}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port", "-p"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the web API."""
    import uvicorn

    uvicorn.run("casework.web.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
