#!/usr/bin/env python3
"""
HTTP Request Demo

Issues one GET request to http://www.google.com and prints the error, the
response status code and the response body. Nothing is retried and no
timeout is set.

Usage:
    python scripts/request_google.py
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from starter_utils.http_request import DEFAULT_URL, format_outcome, request


def print_outcome(error, response, body):
    """Print the error, status code and body of a finished request."""
    for line in format_outcome(error, response, body):
        print(line)


def main():
    """Main execution function."""
    future = request(DEFAULT_URL, print_outcome)
    future.result()


if __name__ == "__main__":
    main()
