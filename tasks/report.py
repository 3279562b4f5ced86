"""Console report for scoring runs."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tasks.evaluate import CreatorReport, RankingReport


def render_ranking(report: RankingReport, console: Console) -> None:
    """Print the ranking table, bucket summary and top pick."""
    table = Table(title=f"Creator ranking for {report.brand}", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("", justify="center")
    table.add_column("Creator", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Rating")
    table.add_column("Action")

    for position, entry in enumerate(report.ranked_creators, start=1):
        table.add_row(
            str(position),
            entry.rating.marker,
            f"@{entry.username or 'unknown'}",
            f"{entry.overall_score}/100",
            entry.rating.label,
            str(entry.recommendation.action),
        )

    console.print(table)

    summary = report.summary
    console.print(
        f"Summary: {summary.excellent} excellent, {summary.good} good, "
        f"{summary.moderate} moderate, {summary.weak} weak"
    )
    if report.top_pick is not None:
        console.print(f"[bold green]Top pick:[/] @{report.top_pick.username}")


def render_creator(report: CreatorReport, console: Console, *, findings_limit: int = 2) -> None:
    """Print one creator's score, recommendation and leading findings."""
    result = report.compatibility
    lines = [
        f"{result.overall_score}/100 ({result.rating.label})",
        f"Recommendation: {str(result.recommendation.action).upper()}",
    ]
    if result.strengths:
        lines.append(f"Strengths: {'; '.join(result.strengths[:findings_limit])}")
    if result.flags:
        lines.append(f"Concerns: {'; '.join(result.flags[:findings_limit])}")

    console.print(
        Panel(
            "\n".join(lines),
            title=f"{result.rating.marker} @{report.username or 'unknown'}",
            title_align="left",
            box=box.ROUNDED,
        )
    )


def render(
    output: list[CreatorReport] | RankingReport,
    console: Console,
    *,
    findings_limit: int = 2,
) -> None:
    """Print the report for either run mode."""
    if isinstance(output, RankingReport):
        render_ranking(output, console)
    else:
        for report in output:
            render_creator(report, console, findings_limit=findings_limit)
    console.rule("Analysis complete")
