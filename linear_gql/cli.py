#!/usr/bin/env python3
"""
Command-line runner for the Linear GraphQL client.

A small set of read-only commands, mainly useful for checking that a
configuration and its API key work.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import aiohttp

from .client import LinearGraphQLClient
from .config import Config
from .errors import OperationFailure


def configure_logging(config: Config):
    """Log to stderr, and to a file when one is configured"""
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linear-gql", description="Query the Linear GraphQL API")
    parser.add_argument("--config", default="config.json", help="Path to config.json")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("me", help="Show the authenticated user")
    commands.add_parser("teams", help="List teams with their states and labels")

    search = commands.add_parser("search-issues", help="Search issues by title")
    search.add_argument("title", help="Substring of the issue title")
    search.add_argument("--first", type=int, default=50)

    project = commands.add_parser("get-project", help="Show a project")
    project.add_argument("id")

    return parser


async def run_command(client: LinearGraphQLClient, args: argparse.Namespace) -> dict:
    if args.command == "me":
        return await client.get_current_user()
    if args.command == "teams":
        return await client.get_teams()
    if args.command == "search-issues":
        return await client.search_issues({"title": {"containsIgnoreCase": args.title}}, first=args.first)
    if args.command == "get-project":
        return await client.get_project(args.id)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    config = Config(args.config)
    configure_logging(config)

    async with aiohttp.ClientSession() as session:
        client = LinearGraphQLClient.from_config(config, session=session)
        try:
            result = await run_command(client, args)
        except OperationFailure as e:
            logging.error(f"{args.command} failed: {e}")
            return 1

    print(json.dumps(result, indent=2))
    return 0


def run():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logging.info("Stopped by user")
        sys.exit(0)
    except Exception as e:
        logging.error(f"Linear client failed: {e}")
        sys.exit(1)
