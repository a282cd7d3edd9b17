"""Command-line interface: generate a week's schedule or list calendar events."""

from __future__ import annotations

import argparse
from datetime import date, timedelta

from shiftplanner.ai.proposer import AnthropicShiftProposer
from shiftplanner.domain.calendar import StaticEventCalendar
from shiftplanner.domain.models import ScheduleRequest
from shiftplanner.engine.orchestrator import ScheduleGenerator
from shiftplanner.io.config import load_config
from shiftplanner.io.export_csv import export_schedule_csv, write_schedule_csv
from shiftplanner.io.import_csv import read_employees_csv, read_events_csv, read_forecasts_csv
from shiftplanner.services.timeplan import plain_number


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def _cmd_generate(args: argparse.Namespace) -> None:
    """Generate a schedule for one week."""
    try:
        cfg = load_config(args.config)
        employees = read_employees_csv(args.employees)
        forecasts = read_forecasts_csv(args.forecasts)
        events = read_events_csv(args.events) if args.events else []
    except (OSError, ValueError) as e:
        raise SystemExit(f"[ERROR] {e}")

    week_end = args.week + timedelta(days=6)
    forecasts = [f for f in forecasts if args.week <= f.date <= week_end]
    if not forecasts:
        raise SystemExit(f"No forecasts found for week of {args.week}")

    proposer = None
    if not args.offline and cfg.proposer.enabled:
        proposer = AnthropicShiftProposer(cfg.proposer)

    request = ScheduleRequest(
        week_start_date=args.week,
        employees=employees,
        forecasts=forecasts,
        special_events=events,
        constraints=cfg.constraints,
    )
    generator = ScheduleGenerator(proposer=proposer, calendar=StaticEventCalendar.annual(), cfg=cfg)
    result = generator.generate(request)
    schedule = result.schedule

    if args.out:
        write_schedule_csv(args.out, schedule, employees)
    else:
        print(export_schedule_csv(schedule, employees))

    print(f"\nSource: {result.source}")
    print(f"Shifts: {len(schedule.shifts)}")
    print(f"Labor: {plain_number(schedule.total_labor_hours)}h, ${schedule.total_labor_cost:.2f} "
          f"({schedule.labor_percentage:.1f}% of ${schedule.projected_revenue:.2f})")
    for rec in result.recommendations:
        print(f"[INFO] {rec}")
    for warning in result.warnings:
        print(f"[WARN] {warning}")


def _cmd_events(args: argparse.Namespace) -> None:
    """List built-in calendar events in a date range."""
    end = args.end or args.start + timedelta(days=30)
    events = StaticEventCalendar.annual().events_for_date_range(args.start, end)
    if not events:
        print(f"No events between {args.start} and {end}")
        return
    for event in sorted(events, key=lambda e: e.date):
        print(f"{event.date}  {event.name:<28} {event.impact:<10} x{event.impact_multiplier:g}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="shiftplanner")
    sub = parser.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a schedule for a week")
    g.add_argument("--week", required=True, type=_parse_date, help="Week start (Monday), YYYY-MM-DD")
    g.add_argument("--employees", required=True, help="Roster CSV")
    g.add_argument("--forecasts", required=True, help="Daily forecast CSV")
    g.add_argument("--events", help="Special events CSV")
    g.add_argument("--config", help="YAML or JSON config")
    g.add_argument("--offline", action="store_true", help="Skip the shift proposer")
    g.add_argument("--out", help="Output CSV (prints to stdout when omitted)")
    g.set_defaults(func=_cmd_generate)

    e = sub.add_parser("events", help="List built-in special events")
    e.add_argument("--start", required=True, type=_parse_date)
    e.add_argument("--end", type=_parse_date, help="Defaults to 30 days after --start")
    e.set_defaults(func=_cmd_events)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
