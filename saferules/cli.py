from __future__ import annotations

import logging
import sys
from pathlib import Path

from saferules.config import Config, build_parser, resolve_config
from saferules.reporting.summary import build_summary
from saferules.reporting.writer import render_as, write_report
from saferules.rules.errors import NotFoundError, RuleError, UnknownCategoryError, UnknownSeverityError
from saferules.rules.loader import build_store
from saferules.rules.model import Rule, normalize_category, normalize_severity
from saferules.rules.query import by_id, select
from saferules.rules.store import RuleStore
from saferules.utils.logging import configure_logging

log = logging.getLogger("saferules")

EXIT_OK = 0
EXIT_UNKNOWN_FILTER = 1
EXIT_NOT_FOUND = 2
EXIT_USAGE = 3
EXIT_RUNTIME = 4


def _emit(cfg: Config, rules: list[Rule]) -> None:
    if cfg.output_cfg.out:
        write_report(Path(cfg.output_cfg.out), cfg.output_cfg.format, rules, overwrite=cfg.output_cfg.overwrite)
        return
    text = render_as(cfg.output_cfg.format, rules)
    if text:
        print(text.rstrip("\n"))


def _cmd_list(cfg: Config, store: RuleStore) -> int:
    category = severity = None
    try:
        if cfg.category is not None:
            category = normalize_category(cfg.category)
        if cfg.severity is not None:
            severity = normalize_severity(cfg.severity)
    except (UnknownCategoryError, UnknownSeverityError) as e:
        print(str(e), file=sys.stderr)
        return EXIT_UNKNOWN_FILTER

    rules = select(store, category=category, severity=severity)
    if not rules:
        log.warning("No rules matched (category=%s, severity=%s)", category or "any", severity or "any")
    _emit(cfg, rules)
    return EXIT_OK


def _cmd_get(cfg: Config, store: RuleStore) -> int:
    try:
        rule = by_id(store, cfg.rule_id or "")
    except NotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_NOT_FOUND
    _emit(cfg, [rule])
    return EXIT_OK


def _cmd_categories(store: RuleStore) -> int:
    summary = build_summary(store.all())
    for category, count in summary["by_category"].items():
        print(f"{category}: {count}")
    for severity, count in summary["by_severity"].items():
        print(f"{severity}: {count}")
    print(f"Total: {summary['total_rules']}")
    return EXIT_OK


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad usage, which would read as "rule not found".
        return EXIT_OK if e.code in (0, None) else EXIT_USAGE

    try:
        cfg = resolve_config(args)
    except ValueError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(cfg.logging.verbose, cfg.logging.quiet, cfg.logging.log_file)

    try:
        store = build_store(cfg.rules)
    except RuleError as e:
        print(f"Rule load error: {e}", file=sys.stderr)
        return EXIT_USAGE
    log.debug("Rule store ready: %d rules", len(store))

    try:
        if cfg.command == "list":
            return _cmd_list(cfg, store)
        if cfg.command == "get":
            return _cmd_get(cfg, store)
        if cfg.command == "categories":
            return _cmd_categories(store)
        raise ValueError(f"Unsupported command: {cfg.command}")
    except ValueError as e:
        print(f"Usage error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:  # noqa: BLE001
        log.exception("Unexpected failure")
        print(f"Runtime error: {e}", file=sys.stderr)
        return EXIT_RUNTIME


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
