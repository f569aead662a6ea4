"""Typer CLI for Gallery-Engine."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(name="gallery", help="Gallery-Engine: multi-tenant artist gallery backend")
console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind host"),
    port: int = typer.Option(8080, help="Bind port"),
):
    """Start the Gallery-Engine API server."""
    import uvicorn
    from gallery_engine.app import create_app

    console.print(f"[bold green]Starting Gallery-Engine on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port)


@app.command()
def resolve(
    host: str = typer.Argument(..., help="Host header value, e.g. www.grim-sil.com"),
    vip_id: Optional[str] = typer.Option(None, "--vip-id", help="Explicit vipId override"),
):
    """Show which artist id a host resolves to (no DB required)."""
    from gallery_engine.tenancy.resolver import resolver_from_settings

    resolution = resolver_from_settings()(host, vip_id)
    console.print(f"[bold]{resolution.artist_id}[/bold] ({resolution.source.value})")


@app.command("create-vip")
def create_vip(
    name: str = typer.Argument(..., help="Artist display name"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Initial admin password"),
    free: bool = typer.Option(False, "--free", help="Create a free-plan gallery"),
):
    """Create a VIP gallery directly in the configured database."""
    from gallery_engine.artists.service import gallery_url
    from gallery_engine.common.config import get_settings
    from gallery_engine.deps import get_artist_service, get_db

    settings = get_settings()

    async def _create():
        db = get_db()
        await db.init()
        await db.create_all()
        try:
            async with db.get_session() as session:
                return await get_artist_service().create_vip_artist(
                    session,
                    name=name,
                    password=password,
                    is_free=free,
                    subscription_price=None if free else settings.vip_subscription_price,
                )
        finally:
            await db.close()

    artist = asyncio.run(_create())
    table = Table(title="VIP gallery created")
    table.add_column("artist_id")
    table.add_column("link_id")
    table.add_column("url")
    table.add_row(artist.id, artist.link_id, gallery_url(settings.site_url, artist.link_id))
    console.print(table)


@app.command()
def health(
    url: str = typer.Option("http://localhost:8080", help="Server URL"),
):
    """Check Gallery-Engine server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/health", timeout=5)
        data = resp.json()
        console.print(f"[bold green]{data['status']}[/bold green] - v{data['version']}")
    except (httpx.HTTPError, ValueError, KeyError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
