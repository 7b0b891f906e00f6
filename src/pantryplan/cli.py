"""CLI interface using Typer."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pantryplan.config import get_settings, reload_settings
from pantryplan.config.settings import Settings
from pantryplan.db import MaterialQueries, MealPlanQueries, get_db
from pantryplan.export.formatters import (
    OUTPUT_FORMATS,
    JSONFormatter,
    TableFormatter,
    format_meals,
    format_plans,
    plan_share_text,
    read_plans_json,
)
from pantryplan.generator import (
    GenerationError,
    MealPlanGenerator,
    MealType,
    parse_meal_type,
)
from pantryplan.materials import (
    DEFAULT_MATERIALS,
    Material,
    MaterialCategory,
    load_materials_csv,
)

app = typer.Typer(
    help="Meal suggestions and meal plans from what is in your pantry",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Subcommand groups
materials_app = typer.Typer(help="Manage pantry materials")
generate_app = typer.Typer(help="Generate meal suggestions")
plan_app = typer.Typer(help="Generate and manage calendar meal plans")
config_app = typer.Typer(help="Show or create the configuration file")

app.add_typer(materials_app, name="materials")
app.add_typer(generate_app, name="generate")
app.add_typer(plan_app, name="plan")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml (default ~/.pantryplan/config.yaml)"
    ),
) -> None:
    """Pantry-driven meal planning."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    if config_path is not None:
        try:
            reload_settings(config_path)
        except ValueError as e:
            err_console.print(f"[red]Invalid config file: {e}[/red]")
            raise typer.Exit(1)


# ============================================================================
# Helpers
# ============================================================================


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def emit(output: Optional[str]) -> None:
    """Print formatter output (table formats print themselves)."""
    if output is not None:
        print(output)


def parse_date_arg(value: Optional[str], default: Optional[date] = None) -> date:
    """Parse a YYYY-MM-DD argument, falling back to ``default`` (today)."""
    if value is None:
        return default or date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        fail(f"Invalid date '{value}'. Use YYYY-MM-DD.")


def parse_month_arg(value: Optional[str]) -> date:
    """Parse YYYY-MM (or a full date) into the first day of that month."""
    if value is None:
        return date.today().replace(day=1)
    try:
        if len(value) == 7:
            year, month = value.split("-")
            return date(int(year), int(month), 1)
        return date.fromisoformat(value).replace(day=1)
    except ValueError:
        fail(f"Invalid month '{value}'. Use YYYY-MM.")


def parse_meal_types(values: Optional[list[str]], settings: Settings) -> list[MealType]:
    if not values:
        return list(settings.defaults.meal_types)
    try:
        return [parse_meal_type(v) for v in values]
    except ValueError as e:
        fail(str(e))


def parse_single_meal_type(value: str) -> MealType:
    try:
        return parse_meal_type(value)
    except ValueError as e:
        fail(str(e))


def resolve_restrictions(values: Optional[list[str]], settings: Settings) -> list[str]:
    return list(values) if values else list(settings.defaults.restrictions)


def resolve_output(output: Optional[str], settings: Settings) -> str:
    """Pick the output format (option, else config) and check it is known."""
    output_format = (output or settings.defaults.output_format).lower()
    if output_format not in OUTPUT_FORMATS:
        fail(
            f"Unknown output format '{output_format}'. "
            f"Valid: {', '.join(OUTPUT_FORMATS)}"
        )
    return output_format


def build_generator(settings: Settings, seed: Optional[int]) -> MealPlanGenerator:
    """Generator from settings; ``seed`` overrides the configured one for this call."""
    if seed is not None:
        settings = replace(settings, generation=replace(settings.generation, seed=seed))
    return MealPlanGenerator.from_settings(settings)


def load_pool(settings: Settings) -> list[Material]:
    """Load the material pool from the store, honoring skip_unavailable."""
    db = get_db()
    with db.get_connection() as conn:
        materials = MaterialQueries.get_all_materials(
            conn, available_only=settings.defaults.skip_unavailable
        )
    if not materials:
        fail(
            "No materials in the pantry. "
            "Run: pantryplan materials seed  (or materials import <file.csv>)"
        )
    return materials


def load_materials_by_id(material_ids: list[str]) -> list[Material]:
    db = get_db()
    with db.get_connection() as conn:
        materials = MaterialQueries.get_materials_by_ids(conn, material_ids)
    missing = set(material_ids) - {m.id for m in materials}
    if missing:
        fail(f"Unknown material id(s): {', '.join(sorted(missing))}")
    return materials


def save_plans(plans) -> None:
    db = get_db()
    with db.get_connection() as conn:
        saved = MealPlanQueries.save_plans(conn, plans)
    err_console.print(f"[green]Saved {saved} plan(s).[/green]")


def parse_category(value: str) -> MaterialCategory:
    try:
        return MaterialCategory(value.strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in MaterialCategory)
        fail(f"Unknown category '{value}'. Valid: {valid}")


def print_materials(materials: list[Material], title: str) -> None:
    if not materials:
        console.print("[yellow]No materials found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Available", justify="center")
    table.add_column("Notes", max_width=40)
    for m in materials:
        table.add_row(
            m.id,
            m.name,
            f"{m.category.emoji} {m.category.display_name}",
            "[green]yes[/green]" if m.is_available else "[red]no[/red]",
            ", ".join(m.nutritional_info),
        )
    console.print(table)


# ============================================================================
# Materials
# ============================================================================


@materials_app.command("seed")
def materials_seed() -> None:
    """Load the built-in pantry staples."""
    db = get_db()
    with db.get_connection() as conn:
        count = MaterialQueries.upsert_materials(conn, DEFAULT_MATERIALS)
    console.print(f"[green]Loaded {count} default materials.[/green]")


@materials_app.command("import")
def materials_import(
    csv_path: Path = typer.Argument(..., help="CSV with id,name,category columns"),
) -> None:
    """Import materials from a CSV file."""
    if not csv_path.exists():
        fail(f"File not found: {csv_path}")
    try:
        materials = load_materials_csv(csv_path)
    except ValueError as e:
        fail(str(e))

    db = get_db()
    with db.get_connection() as conn:
        count = MaterialQueries.upsert_materials(conn, materials)
    console.print(f"[green]Imported {count} materials from {csv_path}.[/green]")


@materials_app.command("list")
def materials_list(
    available: bool = typer.Option(False, "--available", help="Only available materials"),
) -> None:
    """List pantry materials."""
    db = get_db()
    with db.get_connection() as conn:
        materials = MaterialQueries.get_all_materials(conn, available_only=available)
    print_materials(materials, "Pantry Materials")


@materials_app.command("search")
def materials_search(
    query: str = typer.Argument(..., help="Text to look for in names and descriptions"),
) -> None:
    """Search materials by name or description."""
    db = get_db()
    with db.get_connection() as conn:
        materials = MaterialQueries.search_materials(conn, query)
    print_materials(materials, f"Materials matching '{query}'")


@materials_app.command("stats")
def materials_stats() -> None:
    """Show how many materials each category holds."""
    db = get_db()
    with db.get_connection() as conn:
        counts = MaterialQueries.count_by_category(conn)

    table = Table(title="Materials by Category")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    for category, count in counts.items():
        table.add_row(f"{category.emoji} {category.display_name}", str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{sum(counts.values())}[/bold]")
    console.print(table)


@materials_app.command("add")
def materials_add(
    material_id: str = typer.Argument(..., help="Unique material id"),
    name: str = typer.Option(..., "--name", "-n", help="Display name"),
    category: str = typer.Option(..., "--category", "-c", help="meat, seafood, poultry, vegetables, grains, dairy or spices"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Longer description"),
    info: Optional[list[str]] = typer.Option(None, "--info", help="Nutrition note. Repeatable."),
    available: bool = typer.Option(True, "--available/--unavailable", help="In the pantry now"),
) -> None:
    """Add a new material."""
    material = Material(
        id=material_id,
        name=name,
        category=parse_category(category),
        is_available=available,
        nutritional_info=tuple(info or ()),
        description=description,
    )
    db = get_db()
    with db.get_connection() as conn:
        if MaterialQueries.get_material_by_id(conn, material_id) is not None:
            fail(f"Material {material_id} already exists (use materials edit).")
        MaterialQueries.add_material(conn, material)
    console.print(f"[green]Added {material.name} ({material_id}).[/green]")


@materials_app.command("edit")
def materials_edit(
    material_id: str = typer.Argument(..., help="Material id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New display name"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="New category"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    info: Optional[list[str]] = typer.Option(None, "--info", help="Replace nutrition notes. Repeatable."),
) -> None:
    """Change fields of an existing material."""
    changes: dict = {}
    if name is not None:
        changes["name"] = name
    if category is not None:
        changes["category"] = parse_category(category)
    if description is not None:
        changes["description"] = description
    if info:
        changes["nutritional_info"] = tuple(info)
    if not changes:
        fail("Nothing to change. Pass --name, --category, --description or --info.")

    db = get_db()
    with db.get_connection() as conn:
        existing = MaterialQueries.get_material_by_id(conn, material_id)
        if existing is None:
            fail(f"Unknown material id: {material_id}")
        MaterialQueries.update_material(conn, replace(existing, **changes))
    console.print(f"[green]Updated {material_id}.[/green]")


@materials_app.command("remove")
def materials_remove(
    material_id: str = typer.Argument(..., help="Material id"),
) -> None:
    """Delete a material from the pantry."""
    db = get_db()
    with db.get_connection() as conn:
        found = MaterialQueries.delete_material(conn, material_id)
    if not found:
        fail(f"Unknown material id: {material_id}")
    console.print(f"[green]Removed {material_id}.[/green]")


@materials_app.command("toggle")
def materials_toggle(
    material_id: str = typer.Argument(..., help="Material id"),
    available: bool = typer.Option(
        True, "--available/--unavailable", help="New availability"
    ),
) -> None:
    """Mark a material as available or unavailable."""
    db = get_db()
    with db.get_connection() as conn:
        found = MaterialQueries.set_available(conn, material_id, available)
    if not found:
        fail(f"Unknown material id: {material_id}")
    state = "available" if available else "unavailable"
    console.print(f"[green]{material_id} is now {state}.[/green]")


# ============================================================================
# Generate
# ============================================================================


@generate_app.command("meals")
def generate_meals_cmd(
    meal_type: str = typer.Option("dinner", "--type", "-t", help="breakfast, lunch, dinner or snack"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of suggestions"),
    restrict: Optional[list[str]] = typer.Option(
        None, "--restrict", "-r", help="Dietary restriction (vegetarian, vegan, pescatarian, gluten-free). Repeatable."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible suggestions"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """Suggest meals for one meal type."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    kind = parse_single_meal_type(meal_type)
    pool = load_pool(settings)
    generator = build_generator(settings, seed)

    try:
        meals = generator.generate_meals(
            pool,
            kind,
            count=count if count is not None else settings.generation.meal_count,
            restrictions=resolve_restrictions(restrict, settings),
        )
    except GenerationError as e:
        fail(str(e))

    emit(format_meals(meals, output_format, console))


@generate_app.command("custom")
def generate_custom_cmd(
    require: list[str] = typer.Option(..., "--require", help="Material id that must be used. Repeatable."),
    meal_type: str = typer.Option("dinner", "--type", "-t", help="breakfast, lunch, dinner or snack"),
    extra: Optional[list[str]] = typer.Option(
        None, "--with", help="Additional material id to draw from (default: whole pantry). Repeatable."
    ),
    restrict: Optional[list[str]] = typer.Option(None, "--restrict", "-r", help="Dietary restriction. Repeatable."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """Build one meal around specific materials."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    kind = parse_single_meal_type(meal_type)
    required = load_materials_by_id(require)
    additional = load_materials_by_id(extra) if extra else load_pool(settings)
    generator = build_generator(settings, seed)

    try:
        meal = generator.generate_custom_meal(
            required,
            kind,
            additional_materials=additional,
            restrictions=resolve_restrictions(restrict, settings),
        )
    except GenerationError as e:
        fail(str(e))

    if meal is None:
        fail("No valid meal could be built around those materials.")
    emit(format_meals([meal], output_format, console))


# ============================================================================
# Plans
# ============================================================================


@plan_app.command("day")
def plan_day(
    day: Optional[str] = typer.Argument(None, help="Date (YYYY-MM-DD), default today"),
    meal_type: Optional[list[str]] = typer.Option(None, "--meal-type", "-t", help="Meal type to include. Repeatable."),
    restrict: Optional[list[str]] = typer.Option(None, "--restrict", "-r", help="Dietary restriction. Repeatable."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save the plan"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """Generate a plan for a single day."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    target = parse_date_arg(day)
    types = parse_meal_types(meal_type, settings)
    pool = load_pool(settings)
    generator = build_generator(settings, seed)

    try:
        plan = generator.generate_daily_plan(
            target, pool, types, resolve_restrictions(restrict, settings)
        )
    except GenerationError as e:
        fail(str(e))

    if plan is None:
        fail(f"No meals could be generated for {target}.")
    if save:
        save_plans([plan])
    emit(format_plans({plan.date: plan}, output_format, console))


@plan_app.command("week")
def plan_week(
    start: Optional[str] = typer.Option(None, "--start", "-s", help="First day (YYYY-MM-DD), default today"),
    meal_type: Optional[list[str]] = typer.Option(None, "--meal-type", "-t", help="Meal type to include. Repeatable."),
    restrict: Optional[list[str]] = typer.Option(None, "--restrict", "-r", help="Dietary restriction. Repeatable."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save the plans"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """Generate plans for 7 consecutive days."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    start_date = parse_date_arg(start)
    types = parse_meal_types(meal_type, settings)
    pool = load_pool(settings)
    generator = build_generator(settings, seed)

    try:
        plans = generator.generate_weekly_plan(
            start_date, pool, types, resolve_restrictions(restrict, settings)
        )
    except GenerationError as e:
        fail(str(e))

    if save and plans:
        save_plans(plans.values())
    emit(format_plans(plans, output_format, console))


@plan_app.command("month")
def plan_month(
    month: Optional[str] = typer.Option(None, "--month", "-m", help="Month (YYYY-MM), default this month"),
    meal_type: Optional[list[str]] = typer.Option(None, "--meal-type", "-t", help="Meal type to include. Repeatable."),
    restrict: Optional[list[str]] = typer.Option(None, "--restrict", "-r", help="Dietary restriction. Repeatable."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save the plans"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """Generate plans across a month (one weekday per week)."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    first = parse_month_arg(month)
    types = parse_meal_types(meal_type, settings)
    pool = load_pool(settings)
    generator = build_generator(settings, seed)

    try:
        plans = generator.generate_monthly_plan(
            first, pool, types, resolve_restrictions(restrict, settings)
        )
    except GenerationError as e:
        fail(str(e))

    if save and plans:
        save_plans(plans.values())
    emit(format_plans(plans, output_format, console))


@plan_app.command("replace")
def plan_replace(
    day: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
    meal_type: str = typer.Option(..., "--type", "-t", help="Slot to regenerate"),
    restrict: Optional[list[str]] = typer.Option(None, "--restrict", "-r", help="Dietary restriction. Repeatable."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Regenerate one meal of a saved plan."""
    settings = get_settings()
    target = parse_date_arg(day)
    kind = parse_single_meal_type(meal_type)
    pool = load_pool(settings)
    generator = build_generator(settings, seed)

    db = get_db()
    with db.get_connection() as conn:
        existing = MealPlanQueries.get_plan_for_date(conn, target)
    current = existing.get_meal(kind) if existing else None

    try:
        # Ask for one extra suggestion so the current meal can be skipped
        candidates = generator.generate_meals(
            pool, kind, count=2, restrictions=resolve_restrictions(restrict, settings)
        )
    except GenerationError as e:
        fail(str(e))

    fresh = [m for m in candidates if current is None or m.material_ids != current.material_ids]
    if not fresh:
        fail(f"No alternative {kind.value} could be generated.")

    with db.get_connection() as conn:
        plan = MealPlanQueries.replace_meal(conn, target, kind, fresh[0])
    TableFormatter(console).format_plan_detail(plan)


@plan_app.command("show")
def plan_show(
    day: Optional[str] = typer.Argument(None, help="Date (YYYY-MM-DD), default today"),
) -> None:
    """Show the saved plan for a date."""
    target = parse_date_arg(day)
    db = get_db()
    with db.get_connection() as conn:
        plan = MealPlanQueries.get_plan_for_date(conn, target)
    if plan is None:
        fail(f"No meal plan for {target}.")
    TableFormatter(console).format_plan_detail(plan)


@plan_app.command("list")
def plan_list(
    start: Optional[str] = typer.Option(None, "--start", "-s", help="First date, default today"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="Last date, default start + 6 days"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: table, json, markdown"),
) -> None:
    """List saved plans in a date range."""
    settings = get_settings()
    output_format = resolve_output(output, settings)
    start_date = parse_date_arg(start)
    end_date = parse_date_arg(end, default=start_date + timedelta(days=6))
    db = get_db()
    with db.get_connection() as conn:
        plans = MealPlanQueries.get_plans_in_range(conn, start_date, end_date)
    emit(format_plans(plans, output_format, console))


@plan_app.command("complete")
def plan_complete(
    day: Optional[str] = typer.Argument(None, help="Date (YYYY-MM-DD), default today"),
    undo: bool = typer.Option(False, "--undo", help="Mark as not completed"),
) -> None:
    """Mark a day's plan as completed."""
    target = parse_date_arg(day)
    db = get_db()
    with db.get_connection() as conn:
        found = MealPlanQueries.mark_completed(conn, target, not undo)
    if not found:
        fail(f"No meal plan for {target}.")
    console.print(f"[green]{target} marked {'not ' if undo else ''}completed.[/green]")


@plan_app.command("copy")
def plan_copy(
    source: str = typer.Argument(..., help="Date to copy from"),
    target: str = typer.Argument(..., help="Date to copy to"),
) -> None:
    """Copy a day's plan onto another date."""
    source_date = parse_date_arg(source)
    target_date = parse_date_arg(target)
    db = get_db()
    with db.get_connection() as conn:
        copied = MealPlanQueries.copy_plan(conn, source_date, target_date)
    if copied is None:
        fail(f"No meal plan for {source_date}.")
    console.print(f"[green]Copied {source_date} to {target_date}.[/green]")


@plan_app.command("share")
def plan_share(
    day: Optional[str] = typer.Argument(None, help="Date (YYYY-MM-DD), default today"),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Plain headings"),
) -> None:
    """Print a plan as shareable plain text."""
    target = parse_date_arg(day)
    db = get_db()
    with db.get_connection() as conn:
        plan = MealPlanQueries.get_plan_for_date(conn, target)
    if plan is None:
        fail(f"No meal plan for {target}.")
    print(plan_share_text(plan, include_emoji=not no_emoji))


@plan_app.command("stats")
def plan_stats() -> None:
    """Show plan and meal counts."""
    db = get_db()
    with db.get_connection() as conn:
        stats = MealPlanQueries.get_statistics(conn)

    table = Table(title="Meal Plan Statistics")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Plans", str(stats["total_plans"]))
    table.add_row("Completed", str(stats["completed_plans"]))
    table.add_row("Meals", str(stats["total_meals"]))
    for meal_type, count in stats["meals_by_type"].items():
        table.add_row(f"  {meal_type}", str(count))
    console.print(table)


@plan_app.command("delete")
def plan_delete(
    day: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
) -> None:
    """Delete the saved plan for a date."""
    target = parse_date_arg(day)
    db = get_db()
    with db.get_connection() as conn:
        found = MealPlanQueries.delete_plan(conn, target)
    if not found:
        fail(f"No meal plan for {target}.")
    console.print(f"[green]Deleted the plan for {target}.[/green]")


@plan_app.command("export")
def plan_export(
    output_path: Path = typer.Argument(..., help="JSON file to write"),
    start: Optional[str] = typer.Option(None, "--start", "-s", help="First date, default today"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="Last date, default start + 6 days"),
) -> None:
    """Write saved plans in a date range to a JSON file."""
    start_date = parse_date_arg(start)
    end_date = parse_date_arg(end, default=start_date + timedelta(days=6))
    db = get_db()
    with db.get_connection() as conn:
        plans = MealPlanQueries.get_plans_in_range(conn, start_date, end_date)

    output_path.write_text(JSONFormatter().format_plans(plans))
    console.print(f"[green]Exported {len(plans)} plan(s) to {output_path}[/green]")


@plan_app.command("import")
def plan_import(
    input_path: Path = typer.Argument(..., help="JSON file written by plan export"),
) -> None:
    """Load plans from a JSON export, replacing plans on the same dates."""
    if not input_path.exists():
        fail(f"File not found: {input_path}")
    try:
        plans = read_plans_json(input_path.read_text())
    except ValueError as e:
        fail(f"Invalid plan file: {e}")
    save_plans(plans)


# ============================================================================
# Config
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the active configuration."""
    import yaml

    console.print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config.yaml with default values."""
    target = path or Path.home() / ".pantryplan" / "config.yaml"
    if target.exists() and not force:
        fail(f"{target} already exists (use --force to overwrite).")
    Settings().save(target)
    console.print(f"[green]Wrote {target}[/green]")


if __name__ == "__main__":
    app()
