# type: ignore
from invoke import task


@task
def venv(ctx):
    """Initialize development environment with uv."""
    print("Initializing development environment with uv...")
    ctx.run("uv sync --extra test")
    print("Development environment initialization complete!")


@task
def clean(ctx):
    """
    Remove files that are not under version control.
    Asks before deleting anything.
    """

    ctx.run("git clean -nfdx")

    response = (
        input("Are you sure you want to remove all untracked files? (y/n) [n]: ")
        .strip()
        .lower()
    )
    if response == "y":
        ctx.run("git clean -fdx")


@task
def lint(ctx):
    """
    Run ruff and mypy over the package.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=btmenu --cov-report=term-missing", pty=True)


@task
def menu(ctx, loglevel="DEBUG"):
    """Open the menu with verbose logging on stderr."""
    ctx.run(f"uv run btmenu --log-level {loglevel}", pty=True)


@task
def build_package(ctx):
    """
    Build package using uv.
    """

    ctx.run("rm -rf dist")
    ctx.run("uv build")
