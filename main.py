#!/usr/bin/env python3
"""Demo of the readiness engine over the sample catalog"""
import json
from pathlib import Path
from rich.console import Console
from rich.table import Table

from readiness import LearnerSession, load_catalog, rank_jobs
from readiness.recommendation import browse_roles
from readiness.utils import logger, monitor

console = Console()

CATALOG_PATH = "data/sample_catalog.yaml"
JOBS_PATH = "data/sample_jobs.json"


def display_roles(role_matches):
    """Display role browsing results in a table"""
    table = Table(title="Roles by Quick Match")
    table.add_column("Role", style="magenta")
    table.add_column("Quick Match", style="yellow", width=12)
    table.add_column("Overlap", style="blue", width=10)
    table.add_column("Time to Ready", style="green")

    for match in role_matches:
        table.add_row(
            match.role.title,
            f"{match.quick_match:.1f}%",
            f"{match.overlap}%",
            match.time_to_ready,
        )

    console.print(table)


def display_jobs(ranked_jobs):
    """Display ranked jobs in a table"""
    table = Table(title="Job Opportunities")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Job Title", style="magenta")
    table.add_column("Company", style="green")
    table.add_column("Match Score", style="yellow", width=12)
    table.add_column("Matching Skills", style="blue")

    for i, job in enumerate(ranked_jobs, 1):
        table.add_row(
            str(i),
            job.title,
            job.company,
            f"{job.match_score}%",
            ", ".join(job.matching_skills) or "-",
        )

    console.print(table)


def main():
    """Main workflow"""
    console.print("[bold blue]Skill-Gap Readiness Engine[/bold blue]\n")

    catalog = load_catalog(CATALOG_PATH)
    skills = catalog.skill_index()

    with LearnerSession("demo_learner", catalog=catalog) as session:
        session.add_skill(skills["js"], "advanced")
        session.add_skill(skills["react"], "beginner")
        session.add_skill(skills["html"], "advanced")

        display_roles(browse_roles(session.inventory, catalog.roles))

        session.select_role(catalog.get_role("frontend-dev"))
        analysis = session.analyze()
        console.print(f"\n[cyan]Readiness for {session.role.title}:[/cyan] {analysis.readiness_score}%")

        roadmap = session.generate_roadmap()
        console.print(f"[cyan]Roadmap:[/cyan] {', '.join(item.skill_name for item in roadmap)}")

        for item in roadmap[:2]:
            result = session.toggle(item.id)
            console.print(
                f"[green]✓[/green] Completed {item.skill_name}: "
                f"readiness {result.analysis.readiness_score}%, "
                f"roadmap {result.roadmap_progress.progress}%"
            )

        progress = session.progress
        console.print(
            f"\n[cyan]Progress:[/cyan] {progress.initial_score}% -> {progress.current_score}% "
            f"({progress.score_improvement:+d}), {progress.completed_roadmap_items} items completed"
        )

        if Path(JOBS_PATH).exists():
            with open(JOBS_PATH, 'r') as f:
                jobs = json.load(f)
            display_jobs(rank_jobs(jobs, session.inventory))

    logger.info(f"Performance: {monitor.get_report()}")


if __name__ == "__main__":
    main()
