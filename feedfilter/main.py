"""Command-line entry point: filter a file of candidate items with a keyword query."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
import warnings
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from feedfilter.config.environment import EnvironmentConfig
from feedfilter.config.exceptions import ConfigurationError
from feedfilter.config.loader import load_config
from feedfilter.config.models import AppConfig
from feedfilter.config.validators import check_keywords, emit_warnings
from feedfilter.logging import get_logger
from feedfilter.logging.config import configure_logging
from feedfilter.matching.engine import KeywordFilter
from feedfilter.matching.utils import build_rationale_dict
from feedfilter.pipeline import FilterPipeline, ItemsFileError, load_items
from feedfilter.pipeline.models import PipelineRunResult

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path],
    query_override: Optional[str],
    log_level_override: Optional[str],
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve overrides.

    Priority for keywords and log level: CLI > environment > config file.
    FEEDFILTER_MAX_WORKERS overrides pipeline.max_workers.

    Args:
        config_path: Path to configuration file, or None for the default lookup
        query_override: Keywords from --query
        log_level_override: Log level from --log-level

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with overrides applied

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if query_override is not None:
        app_config.filter.keywords = query_override
        emit_warnings(check_keywords(query_override))
    elif env_config.filter_keywords:
        app_config.filter.keywords = env_config.filter_keywords
        emit_warnings(check_keywords(env_config.filter_keywords))

    if env_config.max_workers:
        app_config.pipeline.max_workers = env_config.max_workers

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    else:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def write_results(result: PipelineRunResult, explain: bool, out: TextIO) -> None:
    """Write kept items (or every item with its rationale) as JSON lines."""
    for item, match_result in result.evaluations:
        if explain:
            record = {"item": item.model_dump(), "rationale": build_rationale_dict(match_result)}
        elif match_result.is_match:
            record = item.model_dump()
        else:
            continue
        out.write(json.dumps(record, ensure_ascii=False) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedfilter",
        description="Filter scraped feed items with a keyword query",
        epilog=(
            'Query example: flood,"traffic jam",-"canvey island",-chelmsford,'
            'except("museum","country park")'
        ),
    )
    parser.add_argument(
        "--items",
        type=Path,
        required=True,
        help="YAML or JSON file with the candidate items",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--query",
        default=None,
        help="Keyword query (overrides config and environment)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Write every item with the reason it was kept or dropped",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for feedfilter.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors)
    """
    args = build_parser().parse_args(argv)

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UserWarning)
            app_config, env_config = load_runtime_config(args.config, args.query, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        # Warnings raised before logging was configured are replayed as log records
        for warning in caught:
            logger.warning(str(warning.message), extra={"event": "config.warning"})

        logger.info(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "config_path": str(args.config) if args.config else None,
                "has_keywords": bool(app_config.filter.keywords),
                "max_workers": app_config.pipeline.max_workers,
            },
        )

        keyword_filter = KeywordFilter.from_query(app_config.filter.keywords)
        items = load_items(args.items)

        pipeline = FilterPipeline(keyword_filter, max_workers=app_config.pipeline.max_workers)
        result = pipeline.run(items)

        write_results(result, args.explain, sys.stdout)
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            f"Configuration error: {e.message}",
            extra={"event": "config.error", "error_type": "ConfigurationError"},
        )
        return 1
    except ItemsFileError as e:
        print(f"Items Error: {e}", file=sys.stderr)
        logger.error(
            f"Items file error: {e}",
            extra={"event": "items.error", "error_type": "ItemsFileError"},
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
