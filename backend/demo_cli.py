#!/usr/bin/env python3
"""
Fitness Risk Screening - Demo CLI

Evaluates an assessment and prints the screening report.

Usage:
    python demo_cli.py --sample               # Use sample assessment
    python demo_cli.py --file assessment.json # Evaluate a JSON payload
    python demo_cli.py --sample --json        # Print the raw RiskResult
    python demo_cli.py --sample --export      # Also print the log sheet row
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fitscreen.core.config import settings
from fitscreen.schemas import InputRecord, RiskResult
from fitscreen.services.risk_engine import get_fitness_risk_service
from fitscreen.services.submission import SUBMISSION_COLUMNS, build_submission_record

# ============================================================================
# Sample Assessment
# ============================================================================

SAMPLE_ASSESSMENT = {
    "subject": {
        "age": 65,
        "gender": "male",
        "company": "Sample Corp",
        "subject_id": "DEMO-001",
        "name": "Demo Subject",
    },
    "grip": {
        "right": {"attempt1": 30, "attempt2": 32},
        "left": {"attempt1": 28, "attempt2": 29},
    },
    "sit_to_stand": {"attempt1": 12, "attempt2": 16},
    "balance": {"attempt1": 1.5, "attempt2": 1.8},
    "flexion": {"attempt1": 8, "attempt2": 3},
}

# ============================================================================
# Display Helpers
# ============================================================================

class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'
    GRAY = '\033[90m'

def print_header(text: str, char: str = "="):
    """Print a formatted header."""
    width = 80
    print()
    print(f"{Colors.BOLD}{Colors.CYAN}{char * width}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text.center(width)}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{char * width}{Colors.END}")

def print_subheader(text: str):
    """Print a formatted subheader."""
    print()
    print(f"{Colors.BOLD}{Colors.YELLOW}{'─' * 80}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.YELLOW}  {text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.YELLOW}{'─' * 80}{Colors.END}")

def print_item(label: str, value: str, indent: int = 2):
    """Print a labeled item."""
    spaces = " " * indent
    print(f"{spaces}{Colors.GRAY}{label}:{Colors.END} {value}")

def print_flag(label: str, is_set: bool):
    """Print a screening flag line."""
    if is_set:
        print(f"  {Colors.RED}✗{Colors.END} {label}")
    else:
        print(f"  {Colors.GREEN}✓{Colors.END} {Colors.GRAY}{label}{Colors.END}")

def mark(value: float, warn: bool) -> str:
    """Highlight a table value when its item flag is set."""
    text = f"{value:g}"
    return f"{Colors.RED}{text}{Colors.END}" if warn else text

# ============================================================================
# Report
# ============================================================================

def display_result(record: InputRecord, result: RiskResult):
    """Print the screening report."""
    subject = record.subject

    print_subheader("SUBJECT")
    if subject.name:
        print_item("Name", subject.name)
    print_item("Age / gender", f"{subject.age} / {subject.gender.value}")
    print_item("Compared with", f"{result.age_group_label} reference")

    print_subheader("ADOPTED VALUES")
    adopted = result.adopted
    flags = result.item_flags
    print_item("Grip right (kg)", mark(adopted.grip_right, flags.grip))
    print_item("Grip left (kg)", mark(adopted.grip_left, flags.grip))
    print_item("Sit-to-stand (reps)", mark(adopted.sit_to_stand, flags.sit_to_stand))
    print_item("Balance (s)", mark(adopted.balance, flags.balance))
    print_item("Flexion (cm)", mark(adopted.flexion, flags.flexion))

    print_subheader("PROFILE (reference line 60)")
    for point in result.profile:
        bar = "█" * int(point.score // 5)
        print(f"  {point.label:<38} {point.score:6.1f} {Colors.BLUE}{bar}{Colors.END}")

    print_subheader("SCREENING")
    print_flag("Possible sarcopenia", result.is_sarcopenia_risk)
    print_flag("Possible locomotive syndrome", result.is_locomotive_risk)
    print_flag("High fall risk", result.is_fall_risk)
    print_flag("Low flexibility", result.is_flexibility_low)

    print_subheader("ADVICE")
    if result.messages:
        for message in result.messages:
            print(f"  • {message}")
    else:
        print(f"  {Colors.GREEN}No concerns found.{Colors.END}")

def load_payload(path: Path) -> dict:
    """Load an assessment payload from a JSON file."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)

# ============================================================================
# Main Entry Point
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Fitness Risk Screening - Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demo_cli.py --sample                 # Evaluate sample assessment
  python demo_cli.py --file assessment.json   # Evaluate file
  python demo_cli.py --sample --json          # Raw JSON result
"""
    )
    parser.add_argument('--file', '-f', help='Path to assessment JSON file')
    parser.add_argument('--sample', '-s', action='store_true', help='Use sample assessment')
    parser.add_argument('--json', '-j', action='store_true', help='Print RiskResult as JSON')
    parser.add_argument('--export', '-e', action='store_true', help='Print the log sheet row')

    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)

    if args.sample:
        payload = SAMPLE_ASSESSMENT
    elif args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: File not found: {args.file}")
            sys.exit(1)
        payload = load_payload(path)
    else:
        parser.print_help()
        sys.exit(1)

    service = get_fitness_risk_service()
    try:
        record = service.parse_payload(payload)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    result = service.evaluate(record)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print_header(settings.app_name.upper())
        display_result(record, result)

    if args.export:
        submission = build_submission_record(record, result)
        print_subheader("LOG SHEET ROW")
        for column, value in zip(SUBMISSION_COLUMNS, submission.as_row()):
            print_item(column, str(value))

if __name__ == "__main__":
    main()
