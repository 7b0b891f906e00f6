"""Output formatters for generated meals and meal plans."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pantryplan.generator.models import Meal, MealPlan, MealType

OUTPUT_FORMATS = ("table", "json", "markdown")


def _sorted_plans(plans: Mapping[date, MealPlan] | Sequence[MealPlan]) -> list[MealPlan]:
    values = plans.values() if isinstance(plans, Mapping) else plans
    return sorted(values, key=lambda p: p.date)


def format_long_date(day: date) -> str:
    """Format like 'Monday, January 1, 2024'."""
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"


class TableFormatter:
    """Format meals and plans as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format_meals(self, meals: Sequence[Meal], title: str = "Meal Suggestions") -> None:
        """Print one panel per meal."""
        if not meals:
            self.console.print("[yellow]No meals could be generated from these materials.[/yellow]")
            return

        self.console.print(f"[bold]{title}[/bold]")
        for meal in meals:
            self.console.print(self._meal_panel(meal))

    def format_plans(self, plans: Mapping[date, MealPlan] | Sequence[MealPlan]) -> None:
        """Print a calendar table with one row per planned date."""
        ordered = _sorted_plans(plans)
        if not ordered:
            self.console.print("[yellow]No meal plans to show.[/yellow]")
            return

        table = Table(title="Meal Plans")
        table.add_column("Date", style="cyan", no_wrap=True)
        for meal_type in MealType:
            table.add_column(meal_type.display_name, max_width=28)
        table.add_column("Prep", justify="right")
        table.add_column("Calories", justify="right", style="green")
        table.add_column("Done", justify="center")

        for plan in ordered:
            slots = [
                plan.meals[m].name if plan.meals[m] else "[dim]-[/dim]" for m in MealType
            ]
            calories = plan.total_calories
            table.add_row(
                plan.date.strftime("%a %Y-%m-%d"),
                *slots,
                f"{plan.total_preparation_time} min",
                str(calories) if calories is not None else "-",
                "[green]✓[/green]" if plan.is_completed else "",
            )

        self.console.print(table)

    def format_plan_detail(self, plan: MealPlan) -> None:
        """Print every meal of a single plan in full."""
        header = [f"[bold]{format_long_date(plan.date)}[/bold]"]
        if plan.notes:
            header.append(plan.notes)
        if plan.is_completed:
            header.append("[green]Completed[/green]")
        self.console.print(Panel("\n".join(header), title="Meal Plan"))

        for meal_type in MealType:
            meal = plan.meals[meal_type]
            if meal is not None:
                self.console.print(self._meal_panel(meal))

    def _meal_panel(self, meal: Meal) -> Panel:
        lines = [
            meal.description,
            "",
            f"[bold]Materials:[/bold] {', '.join(m.name for m in meal.materials)}",
            f"[bold]Prep:[/bold] {meal.preparation_time} min"
            + (f"   [bold]Calories:[/bold] {meal.calories}" if meal.calories is not None else ""),
            f"[bold]Tags:[/bold] {', '.join(meal.tags)}",
            "",
            *meal.instructions,
        ]
        title = f"{meal.meal_type.emoji} {meal.meal_type.display_name}: {meal.name}"
        return Panel("\n".join(lines), title=title, title_align="left")


class JSONFormatter:
    """Format meals and plans as JSON."""

    def format_meals(self, meals: Sequence[Meal]) -> str:
        data = {
            "timestamp": datetime.now().isoformat(),
            "meals": [meal.to_dict() for meal in meals],
        }
        return json.dumps(data, indent=2)

    def format_plans(self, plans: Mapping[date, MealPlan] | Sequence[MealPlan]) -> str:
        data = {
            "timestamp": datetime.now().isoformat(),
            "plans": [plan.to_dict() for plan in _sorted_plans(plans)],
        }
        return json.dumps(data, indent=2)


def read_plans_json(text: str) -> list[MealPlan]:
    """Parse plans written by ``JSONFormatter.format_plans``.

    A bare list of plan dictionaries is accepted too.

    Raises:
        ValueError: If the text is not valid JSON or a plan is malformed
    """
    data = json.loads(text)
    entries = data.get("plans", []) if isinstance(data, dict) else data
    try:
        return [MealPlan.from_dict(entry) for entry in entries]
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed meal plan entry: {e!r}") from e


class MarkdownFormatter:
    """Format meals and plans as Markdown."""

    def format_meal(self, meal: Meal, heading: str = "###") -> str:
        lines = [
            f"{heading} {meal.meal_type.display_name}: {meal.name}",
            "",
            meal.description,
            "",
            f"- **Materials:** {', '.join(m.name for m in meal.materials)}",
            f"- **Prep time:** {meal.preparation_time} min",
        ]
        if meal.calories is not None:
            lines.append(f"- **Calories:** {meal.calories}")
        lines.append(f"- **Tags:** {', '.join(meal.tags)}")
        lines.append("")
        lines.extend(meal.instructions)
        return "\n".join(lines)

    def format_meals(self, meals: Sequence[Meal]) -> str:
        lines = ["# Meal Suggestions", ""]
        for meal in meals:
            lines.extend([self.format_meal(meal, heading="##"), ""])
        return "\n".join(lines).rstrip() + "\n"

    def format_plans(self, plans: Mapping[date, MealPlan] | Sequence[MealPlan]) -> str:
        lines = ["# Meal Plan", ""]
        for plan in _sorted_plans(plans):
            lines.extend([f"## {format_long_date(plan.date)}", ""])
            if plan.notes:
                lines.extend([f"_{plan.notes}_", ""])
            for meal in plan.all_meals:
                lines.extend([self.format_meal(meal), ""])
            calories = plan.total_calories
            summary = f"**Total prep:** {plan.total_preparation_time} min"
            if calories is not None:
                summary += f" | **Total calories:** {calories}"
            lines.extend([summary, ""])
        return "\n".join(lines).rstrip() + "\n"


def plan_share_text(plan: MealPlan, include_emoji: bool = True) -> str:
    """Plain-text rendering of a plan for pasting into messages.

    Args:
        plan: Plan to share
        include_emoji: Decorate headings with emoji

    Returns:
        Multi-line text
    """
    lines: list[str] = []
    if include_emoji:
        lines.extend(["\U0001f37d️ MEAL PLAN", "═" * 20])
    else:
        lines.extend(["MEAL PLAN", "=" * 20])
    lines.extend([f"Date: {format_long_date(plan.date)}", ""])

    for meal_type in MealType:
        meal = plan.meals[meal_type]
        if meal is None:
            continue
        heading = meal_type.display_name.upper()
        lines.append(f"{meal_type.emoji} {heading}" if include_emoji else heading)
        lines.append(f"• {meal.name}")
        lines.append(f"  {meal.description}")

        details = []
        if meal.preparation_time > 0:
            details.append(f"Prep: {meal.preparation_time} min")
        if meal.calories is not None:
            details.append(f"{meal.calories} cal")
        if details:
            lines.append("  " + " • ".join(details))

        lines.append(f"  Materials: {', '.join(m.name for m in meal.materials)}")
        lines.extend(f"  {step}" for step in meal.instructions)
        lines.append("")

    if include_emoji:
        lines.extend(["\U0001f4ca SUMMARY", "─" * 20])
    else:
        lines.extend(["SUMMARY", "-" * 20])
    lines.append(f"Total meals: {len(plan.all_meals)}")
    lines.append(f"Total prep time: {plan.total_preparation_time} minutes")
    if plan.total_calories is not None:
        lines.append(f"Total calories: {plan.total_calories}")

    return "\n".join(lines) + "\n"


def format_meals(
    meals: Sequence[Meal],
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format generated meals in the specified format.

    Args:
        meals: Meals to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format_meals(meals)
        return None
    elif output_format == "json":
        return JSONFormatter().format_meals(meals)
    elif output_format == "markdown":
        return MarkdownFormatter().format_meals(meals)
    else:
        raise ValueError(f"Unknown output format: {output_format}")


def format_plans(
    plans: Mapping[date, MealPlan] | Sequence[MealPlan],
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format meal plans in the specified format.

    Args:
        plans: Plans keyed by date, or a list of plans
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format_plans(plans)
        return None
    elif output_format == "json":
        return JSONFormatter().format_plans(plans)
    elif output_format == "markdown":
        return MarkdownFormatter().format_plans(plans)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
