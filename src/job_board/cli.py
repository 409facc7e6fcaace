"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from job_board.admin.category_stats import aggregate_by_id, export_csv, overview
from job_board.config import AppConfig, load_config
from job_board.dashboard.summary import DashboardBuilder
from job_board.errors import JobBoardError
from job_board.models.actions import PriorityTier
from job_board.models.profile import DashboardSnapshot
from job_board.parsers.snapshot_parser import load_snapshot
from job_board.skills.levels import classify
from job_board.skills.registry import SkillRegistry

app = typer.Typer(
    name="job-board",
    help="Student job board: dashboard, recommendations and category stats",
    no_args_is_help=True,
)
skills_app = typer.Typer(help="Manage a student's skills", no_args_is_help=True)
app.add_typer(skills_app, name="skills")
console = Console()

TIER_COLORS = {
    PriorityTier.HIGH: "red",
    PriorityTier.MEDIUM: "yellow",
    PriorityTier.LOW: "dim",
}


def _config() -> AppConfig:
    return load_config(os.getenv("JOB_BOARD_CONFIG"))


def _snapshot(path: Path) -> DashboardSnapshot:
    try:
        return load_snapshot(path)
    except FileNotFoundError:
        console.print(f"[red]Snapshot file not found: {path}[/red]")
        raise typer.Exit(1)
    except (PydanticValidationError, ValueError) as exc:
        console.print(f"[red]Invalid snapshot {path}: {exc}[/red]")
        raise typer.Exit(1)


def _registry(config: AppConfig) -> SkillRegistry:
    return SkillRegistry(
        db_path=config.skills.resolved_db_path,
        max_years=config.skills.max_years,
        max_skills=config.skills.max_skills,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def dashboard(
    snapshot: Path = typer.Argument(help="Snapshot file (.json/.yaml)"),
    limit: int = typer.Option(None, "--limit", "-n", help="Number of recommendations"),
) -> None:
    """Show the student dashboard for a snapshot."""
    data = _snapshot(snapshot)
    try:
        result = DashboardBuilder(_config()).build(data, limit=limit)
    except JobBoardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    view = result.view
    console.print(
        Panel(
            f"Available jobs: {view.total_jobs}\n"
            f"Applications sent: {view.applied_jobs}\n"
            f"Saved jobs: {view.saved_jobs}\n"
            f"[bold]Success rate: {view.success_rate}%[/bold]\n"
            f"Profile: {result.completeness.percentage}% ({result.completeness.level})",
            title="Overview",
        )
    )

    table = Table(title="Jobs")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Company")
    table.add_column("Status")
    for entry in view.jobs:
        table.add_row(
            str(entry.job.id), entry.job.title, entry.job.company_name, entry.status.value
        )
    console.print(table)

    if result.recommendations:
        console.print("\n[bold]Recommended for you:[/bold]")
        for job in result.recommendations:
            console.print(f"  - {job.title} ({job.company_name}) [dim]{job.id}[/dim]")
    else:
        console.print("\n[dim]No recommendations right now.[/dim]")

    console.print("\n[bold]Quick actions:[/bold]")
    for action in result.quick_actions:
        color = TIER_COLORS[action.priority_tier]
        badge = f" [{color}]\\[{action.badge}][/{color}]" if action.badge else ""
        console.print(f"  [{color}]{action.priority_tier.value:<6}[/{color}] {action.title}{badge}")


@app.command("category-stats")
def category_stats(
    snapshot: Path = typer.Argument(help="Snapshot file (.json/.yaml)"),
    category_id: str = typer.Argument(help="Category ID"),
) -> None:
    """Show job and application counts for one category."""
    data = _snapshot(snapshot)
    # Snapshot ids may be ints; match on the text form
    ids = {str(c.id): c.id for c in data.categories}
    try:
        stats = aggregate_by_id(
            ids.get(category_id, category_id), data.categories, data.jobs, data.applications
        )
    except JobBoardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"Jobs: {stats.job_count} | Active: {stats.active_job_count} | "
            f"Applications: {stats.total_applications}",
            title=f"{stats.category.name} ({'active' if stats.category.is_active else 'inactive'})",
        )
    )
    if stats.job_type_distribution:
        table = Table(title="Job types")
        table.add_column("Type")
        table.add_column("Jobs", justify="right")
        for item in stats.job_type_distribution:
            table.add_row(item.job_type or "-", str(item.count))
        console.print(table)


@app.command()
def categories(
    snapshot: Path = typer.Argument(help="Snapshot file (.json/.yaml)"),
    output: Path = typer.Option(None, "--output", "-o", help="Write CSV export to this path"),
) -> None:
    """Show the category overview, optionally exporting CSV."""
    data = _snapshot(snapshot)
    config = _config()
    summary = overview(
        data.categories,
        data.jobs,
        data.applications,
        recent_days=config.dashboard.recent_category_days,
        top=config.dashboard.top_categories,
    )
    console.print(
        Panel(
            f"Categories: {summary.total_categories} "
            f"(active {summary.active_categories}, inactive {summary.inactive_categories})\n"
            f"Added in last {config.dashboard.recent_category_days} days: {summary.recent_categories}\n"
            f"Jobs: {summary.total_jobs} ({summary.average_jobs_per_category} avg per category)\n"
            f"Applications: {summary.total_applications}",
            title="Categories",
        )
    )
    for stats in summary.top_performing:
        console.print(f"  {stats.category.name}: {stats.job_count} jobs, "
                      f"{stats.total_applications} applications")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(export_csv(data.categories, data.jobs, data.applications), encoding="utf-8")
        console.print(f"[green]CSV saved: {output}[/green]")


@skills_app.command("add")
def skills_add(
    profile: str = typer.Argument(help="Student profile ID"),
    name: str = typer.Argument(help="Skill name"),
    level: str = typer.Option("BEGINNER", "--level", "-l", help="BEGINNER/INTERMEDIATE/ADVANCED/EXPERT"),
    years: int = typer.Option(0, "--years", "-y", help="Years of experience"),
) -> None:
    """Add a skill to a profile."""
    registry = _registry(_config())
    try:
        skill = registry.add_skill(
            profile, {"name": name, "level": level, "years_of_experience": years}
        )
    except JobBoardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Added {skill.name} ({classify(skill.level).label}): {skill.id}[/green]")


@skills_app.command("list")
def skills_list(
    profile: str = typer.Argument(help="Student profile ID"),
) -> None:
    """List a profile's skills."""
    skills = _registry(_config()).list_skills(profile)
    if not skills:
        console.print("[yellow]No skills yet.[/yellow]")
        return
    table = Table(title=f"Skills of {profile}")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Level")
    table.add_column("Years", justify="right")
    for skill in skills:
        table.add_row(skill.id, skill.name, classify(skill.level).label, str(skill.years_of_experience))
    console.print(table)


@skills_app.command("update")
def skills_update(
    profile: str = typer.Argument(help="Student profile ID"),
    skill_id: str = typer.Argument(help="Skill ID"),
    name: str = typer.Option(None, "--name", help="New name"),
    level: str = typer.Option(None, "--level", "-l", help="New level"),
    years: int = typer.Option(None, "--years", "-y", help="New years of experience"),
) -> None:
    """Change a skill's name, level or years."""
    patch = {
        key: value
        for key, value in (("name", name), ("level", level), ("years_of_experience", years))
        if value is not None
    }
    try:
        skill = _registry(_config()).update_skill(profile, skill_id, patch)
    except JobBoardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Updated {skill.name} ({classify(skill.level).label})[/green]")


@skills_app.command("remove")
def skills_remove(
    profile: str = typer.Argument(help="Student profile ID"),
    skill_id: str = typer.Argument(help="Skill ID"),
) -> None:
    """Remove a skill from a profile."""
    try:
        _registry(_config()).remove_skill(profile, skill_id)
    except JobBoardError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    console.print("[green]Skill removed.[/green]")


if __name__ == "__main__":
    app()
