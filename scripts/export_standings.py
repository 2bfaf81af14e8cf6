#!/usr/bin/env python3
"""
Standings Export Script

Writes a tournament's standings (or one player's summary) to a CSV file,
using the same computation and format as the download endpoints.

Usage:
    python scripts/export_standings.py spring-open                 # <name>_Standings.csv
    python scripts/export_standings.py spring-open -o out.csv      # custom path
    python scripts/export_standings.py spring-open --player <id>   # <player>_Summary.csv
"""

import sys
import os

# Add the backend directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
from pathlib import Path

from db.base import init_db, close_db
from services.player_service import PlayerService
from services.standings_service import StandingsService


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export tournament standings to CSV")
    parser.add_argument("tournament", help="Tournament id (UUID) or slug")
    parser.add_argument(
        "-o",
        "--output",
        help="Output file path (defaults to the download file name in the current directory)",
    )
    parser.add_argument(
        "--player",
        metavar="PLAYER_ID",
        help="Export this player's game summary instead of the standings",
    )
    args = parser.parse_args(argv)

    init_db()
    try:
        if args.player:
            export = PlayerService.export_player_summary(args.tournament, args.player)
            missing = f"Tournament '{args.tournament}' or player '{args.player}' not found"
        else:
            export = StandingsService.export_standings(args.tournament)
            missing = f"Tournament '{args.tournament}' not found"
    finally:
        close_db()

    if export is None:
        print(f"✗ {missing}", file=sys.stderr)
        return 1

    # Tournament and player names may contain path separators
    default_name = export.filename.replace("/", "-").replace("\\", "-")
    output = Path(args.output or default_name)
    try:
        output.write_text(export.content, encoding="utf-8")
    except OSError as e:
        print(f"✗ Could not write {output}: {e}", file=sys.stderr)
        return 1

    print(f"✓ Wrote {output} ({len(export.content.splitlines())} lines)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
