#!/usr/bin/env python3
"""Invoke the admin API handler locally with a hand-built event.

Reads configuration from the environment (or a .env file), builds the same
event shape the function host delivers, and prints the response.

Usage:
    python scripts/invoke_local.py poll
    python scripts/invoke_local.py list
    python scripts/invoke_local.py approve --id 64f0c1 --email jo@example.com --service "Dog walk"
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to path for handler import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from handlers.admin_api import handler


def build_event(args: argparse.Namespace) -> dict:
    headers = {"x-admin-key": args.key or os.environ.get("ADMIN_KEY", "")}
    if args.action in ("poll", "list"):
        return {"httpMethod": "GET", "headers": headers, "queryStringParameters": {"action": args.action}, "body": None}

    body = {
        "action": args.action,
        "id": args.id,
        "customerEmail": args.email,
        "customerName": args.name,
        "service": args.service,
        "start": args.start,
        "end": args.end,
        "message": args.message,
    }
    headers["content-type"] = "application/json"
    return {"httpMethod": "POST", "headers": headers, "queryStringParameters": None, "body": json.dumps(body)}


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Invoke the admin API handler locally.")
    parser.add_argument("action", choices=["poll", "list", "approve", "deny", "email", "cancel"])
    parser.add_argument("--key", help="Admin key (defaults to ADMIN_KEY)")
    parser.add_argument("--id", default="")
    parser.add_argument("--email", default="")
    parser.add_argument("--name", default="")
    parser.add_argument("--service", default="")
    parser.add_argument("--start", default="")
    parser.add_argument("--end", default="")
    parser.add_argument("--message", default="")
    args = parser.parse_args()

    response = handler(build_event(args), None)
    print(f"HTTP {response['statusCode']}")
    print(json.dumps(json.loads(response["body"]), indent=2))


if __name__ == "__main__":
    main()
