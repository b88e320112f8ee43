"""Typer CLI for hotel-gate."""

import asyncio

import typer
from rich.console import Console

app = typer.Typer(name="hotelgate", help="hotel-gate: entitlement-gated hotel API")
console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8080, help="Bind port"),
):
    """Start the hotel-gate API server."""
    import uvicorn
    from hotel_gate.app import create_app

    console.print(f"[bold green]Starting hotel-gate on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port)


async def _issue_token(user_id: int) -> str | None:
    from hotel_gate.deps import get_db, get_user_service

    db = get_db()
    await db.init()
    await db.create_all()
    svc = get_user_service()
    try:
        async with db.get_session() as session:
            if await svc.get_by_id(session, user_id) is None:
                return None
            return await svc.create_session(session, user_id)
    finally:
        await db.close()


@app.command()
def token(
    user_id: int = typer.Argument(..., help="Id of an existing user"),
):
    """Open a session for a user and print its bearer token."""
    issued = asyncio.run(_issue_token(user_id))
    if issued is None:
        console.print(f"[bold red]NOT_FOUND[/bold red] — no user with id {user_id}")
        raise typer.Exit(1)
    console.print(issued)


@app.command()
def health(
    url: str = typer.Option("http://localhost:8080", help="Server URL"),
):
    """Check hotel-gate server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/health", timeout=5)
        data = resp.json()
        console.print(f"[bold green]{data['status']}[/bold green] — v{data['version']}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
