#!/usr/bin/env python
"""CLI for knowledge search."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from knowledge_search.catalog import load_catalog
from knowledge_search.config import (
    KnowledgeSearchConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from knowledge_search.render import PROMPT_TEXT, render_result
from knowledge_search.session import SearchSession

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str | None = None
    config: Path | None = None
    catalog: Path | None = None
    seed: int | None = None
    stable: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config", "catalog")
    @classmethod
    def path_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


def build_config(args: CLIArgs) -> KnowledgeSearchConfig:
    """Load the config file (or defaults) and apply CLI overrides."""
    config = load_config(args.config) if args.config else KnowledgeSearchConfig()

    resolver_updates: dict[str, object] = {}
    if args.seed is not None:
        resolver_updates["seed"] = args.seed
    if args.stable:
        resolver_updates["stable_selection"] = True
    if resolver_updates:
        config = config.model_copy(
            update={"resolver": config.resolver.model_copy(update=resolver_updates)}
        )
    return config


def interactive(session: SearchSession) -> None:
    """Read one query per line and show the resolved article after each."""
    print(PROMPT_TEXT)
    for line in sys.stdin:
        result = session.update(line.rstrip("\n"))
        print(render_result(result, session.query))
        print()


def run(args: CLIArgs) -> None:
    """Build a session from the given configuration and run it.

    Args:
        args: Validated CLI arguments.
    """
    config = build_config(args)
    catalog = load_catalog(args.catalog) if args.catalog else None
    session, query_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
        catalog_override=catalog,
    )
    logger.info(f"Searching {len(session.catalog)} articles")

    try:
        if args.query is not None:
            result = session.update(args.query)
            print(render_result(result, args.query))
        else:
            interactive(session)
    finally:
        session.close()

    if query_logger and query_logger.last_log_path:
        logger.info(f"\nSession log written to: {query_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search the knowledge base as you type.")
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Query to resolve once (omit for interactive mode)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a YAML/JSON catalog file (overrides the config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for article selection",
    )
    parser.add_argument(
        "--stable",
        action="store_true",
        default=False,
        help="Keep the displayed article while it still matches",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Record every query evaluation to a JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path | None = ns.config
    if config_path is None and get_default_config_path().exists():
        config_path = get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            catalog=ns.catalog,
            seed=ns.seed,
            stable=ns.stable,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        run(args)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
