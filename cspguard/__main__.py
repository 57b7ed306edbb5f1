"""
cspguard CLI
"""
import argparse
import json
import sys

from cspguard.config.loader import get_settings
from cspguard.logging_config import setup_logging
from cspguard.models.report import parse_report, parse_report_string
from cspguard.policy import (
    CSPError,
    Disposition,
    DuplicatePolicy,
    Policy,
    parse_directives,
)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cspguard",
        description="cspguard - Content-Security-Policy parser and report decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a policy and print its canonical form
  cspguard check "default-src 'self'; script-src 'self' https:"

  # Check a report-only policy, keeping the first of any repeated directive
  cspguard check "default-src 'self'; default-src 'none'" --report-only --ignore-duplicates

  # Merge extra sources into a policy
  cspguard merge "script-src 'self'" "script-src https://cdn.example.com; img-src data:"

  # Decode a violation report
  cspguard report report.json
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    check_parser = subparsers.add_parser('check', help='Validate a policy string')
    check_parser.add_argument('policy', help='Serialized policy')
    check_parser.add_argument('--report-only', action='store_true',
                              help='Treat the policy as report-only')
    check_parser.add_argument('--ignore-duplicates', action='store_true',
                              help='Keep the first of repeated directives instead of failing')

    merge_parser = subparsers.add_parser('merge', help='Merge policies into a base policy')
    merge_parser.add_argument('policy', help='Base policy')
    merge_parser.add_argument('extra', nargs='+', help='Policies to merge into the base')

    report_parser = subparsers.add_parser('report', help='Decode a violation report')
    report_parser.add_argument('file', help="Report file, or '-' for stdin")

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_format=settings.log_json)

    try:
        if args.command == 'check':
            return cmd_check(args)
        elif args.command == 'merge':
            return cmd_merge(args)
        elif args.command == 'report':
            return cmd_report(args)
    except (CSPError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_check(args):
    """Parse a policy and print its header"""
    if args.ignore_duplicates:
        duplicates = DuplicatePolicy.ignore
    else:
        duplicates = get_settings().duplicate_directives
    disposition = Disposition.report_only if args.report_only else Disposition.enforce

    policy = Policy.parse(args.policy, disposition, duplicates=duplicates)
    name, value = policy.as_header()
    print(f"{name}: {value}")
    return 0


def cmd_merge(args):
    """Merge every directive of each extra policy into the base"""
    directives = parse_directives(args.policy)
    for extra in args.extra:
        for directive in parse_directives(extra):
            directives.merge_insert(directive)
    print(directives.serialize())
    return 0


def cmd_report(args):
    """Decode a report and print it as JSON"""
    if args.file == '-':
        report = parse_report_string(sys.stdin.read())
    else:
        with open(args.file, 'rb') as f:
            report = parse_report(f)
    print(json.dumps(report.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
