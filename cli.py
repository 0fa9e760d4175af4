#!/usr/bin/env python3
"""
CLI for running and inspecting the Cricket League Manager
"""
import os

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from app.auth.service import IdentityService
from app.database import init_db, get_session
from app.errors import LeagueError
from app.generators import LeagueGenerator
from app.models.user import UserRole
from app.store import UserStore, TeamStore, PlayerStore, TournamentStore

console = Console()


@click.group()
def cli():
    """Cricket League Manager"""
    pass


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
@click.option("--name", required=True, help="Display name")
@click.option("--email", required=True, help="Login email")
@click.password_option(help="Login password")
def create_admin(name: str, email: str, password: str):
    """Create an admin account"""
    init_db()
    session = get_session()
    try:
        user, _ = IdentityService(session).register(name, email, password, UserRole.ADMIN)
        console.print(f"[green]Admin {user.email} created ({user.id})[/green]")
    except LeagueError as e:
        raise click.ClickException(e.message)
    finally:
        session.close()


@cli.command()
@click.option("--owner", "owner_email", required=True, help="Email of the admin/manager who will own the records")
@click.option("--teams", "team_count", default=4, type=click.IntRange(2, 8), help="Number of teams")
@click.option("--players-per-team", default=11, type=click.IntRange(1, 25), help="Squad size")
def seed(owner_email: str, team_count: int, players_per_team: int):
    """Seed a demo league: teams, squads, a tournament and its fixtures"""
    init_db()
    session = get_session()
    try:
        owner = UserStore(session).find_by_email(owner_email)
        if owner is None:
            raise click.ClickException(f"No user with email {owner_email}")

        console.print(f"[yellow]Seeding {team_count} teams...[/yellow]")
        result = LeagueGenerator(session, owner).seed(team_count, players_per_team)
        console.print(Panel(
            f"Teams: {result['teams']}\n"
            f"New players: {result['players']}\n"
            f"Tournament: {result['tournament']}\n"
            f"Matches: {result['matches']}",
            title="Seeded",
        ))
    except LeagueError as e:
        raise click.ClickException(e.message)
    finally:
        session.close()


@cli.command()
def summary():
    """Show teams, squads and tournaments"""
    session = get_session()
    try:
        teams = TeamStore(session).find_all()
        if not teams:
            console.print("[red]No teams found. Run 'seed' first.[/red]")
            return

        players = PlayerStore(session)
        table = Table(title=f"Teams ({len(teams)} total)")
        table.add_column("ID")
        table.add_column("Name", style="cyan")
        table.add_column("City")
        table.add_column("Coach")
        table.add_column("Squad", justify="right", style="green")
        for team in teams:
            table.add_row(
                team.id,
                team.name,
                team.city,
                team.coach or "-",
                str(len(players.find_by_team(team.id))),
            )
        console.print(table)

        tournaments = TournamentStore(session).find_all()
        table = Table(title="Tournaments")
        table.add_column("Name", style="cyan")
        table.add_column("Format")
        table.add_column("Status", style="magenta")
        table.add_column("Dates")
        table.add_column("Teams", justify="right")
        table.add_column("Matches", justify="right")
        for t in tournaments:
            table.add_row(
                t.name,
                t.format.value,
                t.status.value,
                f"{t.start_date} - {t.end_date}",
                str(len(t.teams or [])),
                str(len(t.matches or [])),
            )
        console.print(table)
    finally:
        session.close()


@cli.command()
@click.option("--host", default=lambda: os.environ.get("HOST", "0.0.0.0"), help="Bind address")
@click.option("--port", default=lambda: int(os.environ.get("PORT", "5000")), type=int, help="Listen port")
def serve(host: str, port: int):
    """Run the API server"""
    import uvicorn
    console.print(f"[green]Serving on {host}:{port}[/green]")
    uvicorn.run("main:app", host=host, port=port)


if __name__ == "__main__":
    cli()
