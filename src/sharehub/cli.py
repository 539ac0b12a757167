"""ShareHub command line: schema creation, seeding and serving."""

import asyncio

import typer
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession

from sharehub import __version__
from sharehub.core.auth.backend import hash_password
from sharehub.core.database import async_session_factory, create_schema
from sharehub.core.permissions import Role
from sharehub.modules.accounts.models import Account
from sharehub.modules.accounts.repos import AccountRepository
from sharehub.modules.categories.models import Category
from sharehub.modules.categories.repos import CategoryRepository


console = Console()

app = typer.Typer(
    name="sharehub",
    help="Manage the ShareHub database and server.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

DEFAULT_ADMIN_EMAIL = "admin@example.com"
DEFAULT_ADMIN_NAME = "Admin User"
DEFAULT_CATEGORY = "Example Category"


async def ensure_admin_account(
    session: AsyncSession,
    email: str,
    name: str,
    password: str,
) -> tuple[Account, bool]:
    """Create the first administrator unless one already exists.

    Returns:
        Tuple of (administrator, created)
    """
    repo = AccountRepository(session)

    existing = await repo.get_first_admin()
    if existing:
        return existing, False

    account = await repo.get_by_email(email)
    if account:
        # An ordinary account with that email becomes the administrator
        return await repo.set_role(account, Role.ADMIN), True

    account = Account(
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=Role.ADMIN,
    )
    return await repo.create(account), True


async def ensure_category(session: AsyncSession, name: str) -> tuple[Category, bool]:
    """Create a category unless one with the same name exists, ignoring case."""
    repo = CategoryRepository(session)

    existing = await repo.get_by_name(name)
    if existing:
        return existing, False
    return await repo.create(Category(name=name)), True


async def _seed_admin(email: str, name: str, password: str) -> tuple[Account, bool]:
    async with async_session_factory() as session:
        account, created = await ensure_admin_account(session, email, name, password)
        await session.commit()
    return account, created


async def _seed_category(name: str) -> tuple[Category, bool]:
    async with async_session_factory() as session:
        category, created = await ensure_category(session, name)
        await session.commit()
    return category, created


@app.command(name="init-db")
def init_db() -> None:
    """Create every table that does not exist yet."""
    asyncio.run(create_schema())
    console.print("[green]✓[/green] Database schema is up to date")


@app.command(name="seed-admin")
def seed_admin(
    email: str = typer.Option(DEFAULT_ADMIN_EMAIL, "--email", "-e", help="Administrator email"),
    name: str = typer.Option(DEFAULT_ADMIN_NAME, "--name", "-n", help="Display name"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Administrator password",
    ),
) -> None:
    """Create the first administrator account.

    Does nothing when an administrator already exists.
    """
    account, created = asyncio.run(_seed_admin(email, name, password))
    if created:
        console.print(f"[green]✓[/green] Administrator created: {account.email}")
    else:
        console.print(f"[yellow]Administrator already exists:[/yellow] {account.email}")


@app.command(name="seed-category")
def seed_category(
    name: str = typer.Argument(DEFAULT_CATEGORY, help="Category name"),
) -> None:
    """Create a category so uploads have somewhere to go."""
    name = name.strip()
    if not name:
        console.print("[red]Error:[/red] Category name is required")
        raise typer.Exit(1)

    category, created = asyncio.run(_seed_category(name))
    if created:
        console.print(f"[green]✓[/green] Category created: {category.name}")
    else:
        console.print(f"[yellow]Category already exists:[/yellow] {category.name}")


@app.command(name="serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "sharehub.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """ShareHub CLI - manage the database and run the server."""
    if version:
        console.print(f"[bold cyan]sharehub[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
