#!/usr/bin/env python3
"""
fitness-engine CLI.

Strength classification, calorie estimates and cardio targets from JSON
inputs, plus a data audit for exercise store exports.

Usage:
    fitness-engine classify profile.json "bench press" 150 --unit kg
    fitness-engine thresholds profile.json "squat" --unit lbs
    fitness-engine calories profile.json workout.json --history logs.json
    fitness-engine cardio-targets profile.json --history logs.json
    fitness-engine registry-audit export.json --apply fixed.json
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_settings
from .exceptions import ExerciseNotFoundError, FitnessEngineError, ValidationError
from .metrics.cardio_targets import calculate_weekly_cardio_targets, summarize_weekly_cardio
from .metrics.strength import calculate_strength_thresholds, classify_strength_level
from .models.profile import UserProfile
from .models.workouts import PersonalRecord, StrengthLevel, WorkoutLog
from .registry.cache import RegistryCache
from .registry.cleanup import apply_fix, find_duplicate_prefixes
from .registry.export import load_registry_export, write_registry_export
from .registry.normalization import resolve, suggest_exercises
from .registry.registry import ExerciseRegistry, build_fallback_registry
from .services.records import attach_calories
from .utils.log_sanitizer import install_log_sanitizer

console = Console()

M = TypeVar("M", bound=BaseModel)


def get_level_color(level: StrengthLevel) -> str:
    """Get rich color for a strength tier."""
    colors = {
        StrengthLevel.BEGINNER: "blue",
        StrengthLevel.INTERMEDIATE: "green",
        StrengthLevel.ADVANCED: "yellow",
        StrengthLevel.ELITE: "magenta",
    }
    return colors.get(level, "white")


def _read_json(path: str):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read {path}: {e}", field=path)


def load_model(path: str, model: Type[M]) -> M:
    """Parse a JSON file into a model."""
    try:
        return model.model_validate(_read_json(path))
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {model.__name__} in {path}",
            field=path,
            details={"errors": e.errors(include_url=False)},
        )


def load_logs(path: Optional[str]) -> List[WorkoutLog]:
    """Parse a JSON list of workout logs (empty when no path is given)."""
    if not path:
        return []
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValidationError(f"{path} must contain a list of workout logs", field=path)
    try:
        return [WorkoutLog.model_validate(item) for item in data]
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid workout log in {path}",
            field=path,
            details={"errors": e.errors(include_url=False)},
        )


def get_registry(path: Optional[str]) -> ExerciseRegistry:
    """Registry from an export file (argument or settings), else the built-in table."""
    settings = get_settings()
    source = Path(path) if path else settings.registry_path
    if source is None:
        return build_fallback_registry()

    def load_exercises():
        return load_registry_export(source)[0]

    def load_aliases():
        return load_registry_export(source)[1]

    cache = RegistryCache.from_settings(load_exercises, load_aliases)
    registry = cache.get_registry()
    if cache.using_fallback:
        console.print(f"[yellow]Could not use {source}; using built-in exercises[/yellow]")
    return registry


def require_exercise(name: str, registry: ExerciseRegistry) -> None:
    """Raise with close matches when a name does not resolve."""
    if resolve(name, registry) is None:
        suggestions = suggest_exercises(name, registry.strength_exercise_names())
        error = ExerciseNotFoundError(name)
        error.details["suggestions"] = [s for s, _ in suggestions[:5]]
        raise error


def cmd_classify(args):
    """Classify a single lift."""
    registry = get_registry(args.registry)
    profile = load_model(args.profile, UserProfile)
    require_exercise(args.exercise, registry)

    record = PersonalRecord(exercise_name=args.exercise, weight=args.weight, weight_unit=args.unit)
    level = classify_strength_level(record, profile, registry)

    console.print()
    console.print(
        Panel(
            Text(level.value, style=f"bold {get_level_color(level)}"),
            title=f"{args.exercise} - {args.weight:g} {args.unit}",
            expand=False,
        )
    )
    if level == StrengthLevel.NOT_AVAILABLE:
        console.print("[dim]No standards for this exercise, or profile is missing gender/weight.[/dim]")


def cmd_thresholds(args):
    """Show the weight needed for each tier."""
    registry = get_registry(args.registry)
    profile = load_model(args.profile, UserProfile)
    require_exercise(args.exercise, registry)

    thresholds = calculate_strength_thresholds(args.exercise, profile, registry, args.unit)
    if thresholds is None:
        console.print("[yellow]Thresholds not available for this exercise and profile.[/yellow]")
        return

    table = Table(title=f"Strength Thresholds: {args.exercise}", box=box.ROUNDED)
    table.add_column("Tier", style="cyan")
    table.add_column(f"Weight ({thresholds.unit})", justify="right")
    table.add_row("Intermediate", str(thresholds.intermediate))
    table.add_row("Advanced", str(thresholds.advanced))
    table.add_row("Elite", str(thresholds.elite))
    console.print()
    console.print(table)


def cmd_calories(args):
    """Estimate calories for each exercise in a workout log."""
    profile = load_model(args.profile, UserProfile)
    log = load_model(args.workout, WorkoutLog)
    history = load_logs(args.history)

    updated = attach_calories(log, profile, history)

    table = Table(title=f"Calories: {log.id}", box=box.ROUNDED)
    table.add_column("Exercise", style="cyan")
    table.add_column("Category")
    table.add_column("kcal", justify="right")
    total = 0.0
    for before, after in zip(log.exercises, updated.exercises):
        kcal = after.calories or 0
        total += kcal
        source = " [dim](est.)[/dim]" if kcal and not before.calories else ""
        table.add_row(after.name, after.category.value, (f"{kcal:g}" if kcal else "-") + source)
    table.add_row("[bold]Total[/bold]", "", f"[bold]{total:g}[/bold]")
    console.print()
    console.print(table)


def cmd_cardio_targets(args):
    """Show weekly cardio goals and recent weekly totals."""
    profile = load_model(args.profile, UserProfile)
    logs = load_logs(args.history)
    today = datetime.strptime(args.today, "%Y-%m-%d").date() if args.today else date.today()

    summary = summarize_weekly_cardio(logs, profile, today)
    targets = calculate_weekly_cardio_targets(profile, summary.recent_weekly_average)

    table = Table(title="Weekly Cardio Targets", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("kcal", justify="right")
    table.add_row("Base goal", str(targets.base_goal))
    table.add_row("Stretch goal", str(targets.stretch_goal))
    table.add_row(
        "Goal in use",
        str(summary.weekly_goal) if summary.weekly_goal is not None else "[dim]not set[/dim]",
    )
    if summary.recent_weekly_average is not None:
        table.add_row("Recent weekly average", f"{summary.recent_weekly_average:.0f}")
    console.print()
    console.print(table)

    if logs:
        weeks = Table(title="Completed Weeks", box=box.SIMPLE)
        weeks.add_column("Week of", style="cyan")
        weeks.add_column("kcal", justify="right")
        for week in summary.weeks:
            weeks.add_row(week.week_start.isoformat(), f"{week.calories:.0f}")
        console.print(weeks)


def cmd_registry_audit(args):
    """Report name conflicts and doubled equipment prefixes in an export."""
    exercises, aliases = load_registry_export(args.export)
    registry = ExerciseRegistry.from_records(exercises, aliases, strict=False)
    fixes = find_duplicate_prefixes(exercises)

    console.print()
    console.print(Panel(f"[bold]Registry audit[/bold]: {args.export}", expand=False))
    console.print(f"Active exercises: {len(registry)}  Aliases: {len(registry.aliases())}")

    if registry.conflicts:
        table = Table(title="Name Conflicts", box=box.ROUNDED)
        table.add_column("Name", style="cyan")
        table.add_column("Kept")
        table.add_column("Rejected", style="red")
        for conflict in registry.conflicts:
            table.add_row(conflict.name, conflict.existing_id, conflict.rejected_id)
        console.print(table)
    else:
        console.print("[green]No name conflicts[/green]")

    if fixes:
        table = Table(title="Doubled Prefixes", box=box.ROUNDED)
        table.add_column("Record", style="cyan")
        table.add_column("Field")
        table.add_column("Before", style="red")
        table.add_column("After", style="green")
        for fix in fixes:
            for name, (before, after) in fix.changes.items():
                table.add_row(fix.record_id, name, before, after)
        console.print(table)
    else:
        console.print("[green]No doubled prefixes[/green]")

    if args.apply:
        by_id = {fix.record_id: fix for fix in fixes}
        repaired = [apply_fix(e, by_id[e.id]) if e.id in by_id else e for e in exercises]
        renamed = {fix.record_id: fix.changes["id"][1] for fix in fixes if "id" in fix.changes}
        repaired_aliases = [
            a.model_copy(update={"canonical_id": renamed[a.canonical_id]})
            if a.canonical_id in renamed else a
            for a in aliases
        ]
        write_registry_export(args.apply, repaired, repaired_aliases)
        console.print(f"[green]Wrote {len(fixes)} fixes to {args.apply}[/green]")

    return 1 if registry.conflicts else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="fitness-engine - strength levels, calories and cardio targets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fitness-engine classify profile.json "bench press" 150
  fitness-engine thresholds profile.json squat --unit lbs
  fitness-engine calories profile.json workout.json --history logs.json
  fitness-engine cardio-targets profile.json --history logs.json --today 2024-06-12
  fitness-engine registry-audit export.json --apply fixed.json
        """,
    )
    parser.add_argument("--registry", help="Exercise store export (JSON) to use")
    parser.add_argument("--log-level", help="Logging level (default from settings)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Classify command
    classify_p = subparsers.add_parser("classify", help="Classify a lift")
    classify_p.add_argument("profile", help="Profile JSON file")
    classify_p.add_argument("exercise", help="Exercise name")
    classify_p.add_argument("weight", type=float, help="Weight lifted")
    classify_p.add_argument("--unit", choices=["kg", "lbs"], default="kg")

    # Thresholds command
    thresholds_p = subparsers.add_parser("thresholds", help="Weight needed per tier")
    thresholds_p.add_argument("profile", help="Profile JSON file")
    thresholds_p.add_argument("exercise", help="Exercise name")
    thresholds_p.add_argument("--unit", choices=["kg", "lbs"], default="kg")

    # Calories command
    calories_p = subparsers.add_parser("calories", help="Estimate workout calories")
    calories_p.add_argument("profile", help="Profile JSON file")
    calories_p.add_argument("workout", help="Workout log JSON file")
    calories_p.add_argument("--history", help="JSON list of past workout logs")

    # Cardio targets command
    cardio_p = subparsers.add_parser("cardio-targets", help="Weekly cardio goals")
    cardio_p.add_argument("profile", help="Profile JSON file")
    cardio_p.add_argument("--history", help="JSON list of past workout logs")
    cardio_p.add_argument("--today", help="Reference date (YYYY-MM-DD)")

    # Registry audit command
    audit_p = subparsers.add_parser("registry-audit", help="Audit an exercise store export")
    audit_p.add_argument("export", help="Exercise store export (JSON)")
    audit_p.add_argument("--apply", metavar="OUTPUT", help="Write the repaired export here")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    install_log_sanitizer()

    try:
        # Route to appropriate command
        if args.command == "classify":
            cmd_classify(args)
        elif args.command == "thresholds":
            cmd_thresholds(args)
        elif args.command == "calories":
            cmd_calories(args)
        elif args.command == "cardio-targets":
            cmd_cardio_targets(args)
        elif args.command == "registry-audit":
            return cmd_registry_audit(args)
        else:
            parser.print_help()
            return 1
    except FitnessEngineError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        suggestions = e.details.get("suggestions")
        if suggestions:
            console.print(f"Did you mean: {escape(', '.join(suggestions))}?")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
