#!/usr/bin/env python3
"""Request statistics from restweb server logs."""

import argparse
import re
import statistics
import sys
from pathlib import Path
from typing import Any, Dict
from urllib.parse import unquote

MAIN_LOG = "restweb.log"
ACCESS_LOG = "restweb_access.log"

# Logged paths are percent-encoded, so fields never contain spaces or `|`
FIELD_PATTERN = re.compile(r'(\w+)=([^\s|]*)')
ENDPOINTS = {
    ('GET', '/api/hello'): 'hello',
    ('POST', '/api/echo'): 'echo',
    ('GET', '/api/health'): 'health',
}
GREET_PREFIX = '/api/greet/'


def parse_access_line(line: str) -> Dict[str, str]:
    """Split an access line into its key=value fields; the first occurrence wins."""
    fields = {}
    for key, value in FIELD_PATTERN.findall(line):
        fields.setdefault(key, value)
    return fields


def collect_stats(log_dir: Path) -> Dict[str, Any]:
    """Parse the main and access logs into request statistics."""
    stats = {
        'total_requests': 0,
        'hello': 0,
        'greet': 0,
        'echo': 0,
        'health': 0,
        'bad_requests': 0,
        'errors': 0,
        'warnings': 0,
        'clients': set(),
        'greeted_names': set(),
        'response_times': []
    }

    main_log = log_dir / MAIN_LOG
    if main_log.exists():
        with main_log.open('r', encoding='utf-8') as f:
            for line in f:
                if "| ERROR |" in line:
                    stats['errors'] += 1
                elif "| WARNING |" in line:
                    stats['warnings'] += 1

    access_log = log_dir / ACCESS_LOG
    if access_log.exists():
        with access_log.open('r', encoding='utf-8') as f:
            for line in f:
                fields = parse_access_line(line)
                if 'method' not in fields or 'path' not in fields:
                    continue
                stats['total_requests'] += 1

                method, path = fields['method'], fields['path']
                endpoint = ENDPOINTS.get((method, path))
                if endpoint:
                    stats[endpoint] += 1
                elif method == 'GET' and path.startswith(GREET_PREFIX):
                    name = path[len(GREET_PREFIX):]
                    if name and '/' not in name:
                        stats['greet'] += 1
                        stats['greeted_names'].add(unquote(name))

                if fields.get('status') == '400':
                    stats['bad_requests'] += 1

                client = fields.get('client')
                if client and client != 'unknown':
                    stats['clients'].add(client)

                response_time = fields.get('response_time', '')
                if response_time.endswith('s'):
                    try:
                        stats['response_times'].append(float(response_time[:-1]))
                    except ValueError:
                        pass

    stats['other'] = (stats['total_requests'] - stats['hello'] - stats['greet']
                      - stats['echo'] - stats['health'])
    return stats


def analyze_logs(log_dir: Path) -> None:
    stats = collect_stats(log_dir)

    print("=" * 60)
    print("RESTWEB LOG ANALYSIS")
    print("=" * 60)
    print(f"Total Requests:     {stats['total_requests']}")
    for label, key in (("Hello", 'hello'), ("Greet", 'greet'), ("Echo", 'echo'),
                       ("Health Checks", 'health'), ("Other", 'other')):
        print(f"  - {label + ':':<16}{stats[key]}")
    print(f"Bad Requests:       {stats['bad_requests']}")
    print(f"Errors:             {stats['errors']}")
    print(f"Warnings:           {stats['warnings']}")
    print(f"Unique Clients:     {len(stats['clients'])}")

    names = sorted(stats['greeted_names'])
    if names:
        shown = ', '.join(repr(name) for name in names[:10])
        if len(names) > 10:
            shown += f" (and {len(names) - 10} more)"
        print(f"Greeted Names:      {shown}")

    times = stats['response_times']
    if times:
        print(f"Response Time:      avg {statistics.mean(times):.3f}s, "
              f"median {statistics.median(times):.3f}s, max {max(times):.3f}s")
    print("=" * 60)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Request statistics from restweb logs")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                        help="Directory containing log files")
    args = parser.parse_args(argv)

    if not args.log_dir.is_dir():
        print(f"Log directory not found: {args.log_dir}")
        print("Make sure the server has been started at least once.")
        sys.exit(1)

    analyze_logs(args.log_dir)


if __name__ == "__main__":
    main()
