"""
CLI tool for seeding tracks and generating their sessions.

Usage examples:
    # Insert the canonical tracks
    python -m scripts.tools.track_cli seed

    # Generate eight weeks for one track
    python -m scripts.tools.track_cli generate medeiros-method --weeks 8

    # Generate every track, exit non-zero if any failed
    python -m scripts.tools.track_cli generate-all --start-week 1 --weeks 8

    # Show what has been generated
    python -m scripts.tools.track_cli coverage compete
"""
import argparse
import asyncio
import sys

from app.core.exceptions import DomainError
from app.core.logging import configure_logging
from scripts.tools.track_manager import TrackManager


async def seed_command(args) -> int:
    """Handle seed command."""
    async with TrackManager() as manager:
        created = await manager.seed()
    print(f"\n✅ Seeded {created} track(s)")
    return 0


async def generate_command(args) -> int:
    """Handle generate command."""
    try:
        async with TrackManager() as manager:
            result = await manager.generate(args.slug, args.start_week, args.weeks, args.seed)
    except DomainError as e:
        print(f"\n❌ {e.code}: {e.message}")
        return 1

    print(f"\n✅ Generated {result.workouts_created} workouts for {result.track_name}")
    print(f"   📅 Weeks: {result.start_week}-{result.start_week + result.weeks_generated - 1}")
    return 0


async def generate_all_command(args) -> int:
    """Handle generate-all command."""
    async with TrackManager() as manager:
        results = await manager.generate_all(args.start_week, args.weeks, args.seed)

    print("\n=== Generation Summary ===")
    for result in results["successful"]:
        print(f"✅ {result.track}: {result.workouts_created} workouts")
    for slug, error in results["failed"]:
        print(f"❌ {slug}: {error.code} {error.message}")
    print(f"\nSuccessful: {len(results['successful'])}  Failed: {len(results['failed'])}")

    return 1 if results["failed"] else 0


async def coverage_command(args) -> int:
    """Handle coverage command."""
    try:
        async with TrackManager() as manager:
            reports = await manager.coverage(args.slug)
    except DomainError as e:
        print(f"\n❌ {e.code}: {e.message}")
        return 1

    for report in reports:
        print(f"\n🎯 {report.track_name} ({report.track})")
        print(f"   Sessions: {report.total_sessions}")
        print(f"   Week Range: {report.week_range or 'None'}")
        print(f"   Expected per week: {report.expected_sessions_per_week} sessions")
        for week in report.weeks:
            if week.missing_days:
                print(f"   ⚠️  Week {week.week_number}: missing days {week.missing_days}")
        if report.missing_weeks:
            print(f"   ❌ Missing weeks: {', '.join(str(w) for w in report.missing_weeks)}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Track Workout CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m scripts.tools.track_cli seed
  python -m scripts.tools.track_cli generate compete --start-week 1 --weeks 4
  python -m scripts.tools.track_cli generate-all --weeks 8
  python -m scripts.tools.track_cli coverage
        """
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_range_arguments(sub):
        sub.add_argument("--start-week", type=int, default=1, help="First week to generate")
        sub.add_argument("--weeks", type=int, default=1, help="Number of weeks to generate")
        sub.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    
    subparsers.add_parser(
        "seed",
        help="Insert the canonical tracks if absent"
    ).set_defaults(func=seed_command)
    
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate sessions for one track"
    )
    generate_parser.add_argument("slug", help="Track slug")
    add_range_arguments(generate_parser)
    generate_parser.set_defaults(func=generate_command)
    
    generate_all_parser = subparsers.add_parser(
        "generate-all",
        help="Generate sessions for every active track"
    )
    add_range_arguments(generate_all_parser)
    generate_all_parser.set_defaults(func=generate_all_command)
    
    coverage_parser = subparsers.add_parser(
        "coverage",
        help="Show generated weeks and gaps"
    )
    coverage_parser.add_argument("slug", nargs="?", help="Track slug (all tracks when omitted)")
    coverage_parser.set_defaults(func=coverage_command)
    
    return parser


def main():
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args()
    
    if not args.command:
        parser.print_help()
        sys.exit(1)
    
    configure_logging()
    sys.exit(asyncio.run(args.func(args)))


if __name__ == "__main__":
    main()
