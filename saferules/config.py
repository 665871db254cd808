from __future__ import annotations

import argparse
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

OUTPUT_FORMATS = {"text", "json", "csv", "md"}


@dataclass
class RulesConfig:
    builtin: bool = True
    files: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: str = "text"
    out: str | None = None
    overwrite: bool = False


@dataclass
class LoggingConfig:
    quiet: bool = False
    verbose: bool = False
    log_file: str | None = None


@dataclass
class Config:
    command: str = "list"
    category: str | None = None
    severity: str | None = None
    rule_id: str | None = None
    config_path: str | None = None

    rules: RulesConfig = field(default_factory=RulesConfig)
    output_cfg: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", dest="config_path")
    common.add_argument("--rules", action="append", help="Extra TOML rule file (repeatable)")
    common.add_argument("--no-builtin", action="store_true", help="Do not load the built-in rule catalog")
    common.add_argument("--quiet", action="store_true")
    common.add_argument("--verbose", action="store_true")
    common.add_argument("--log-file")

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--output", help="text, json, csv or md")
    output.add_argument("--out", help="Write to this file instead of stdout")
    output.add_argument("--overwrite", action="store_true")

    p = argparse.ArgumentParser(prog="saferules", description="Safety-critical C99 coding rule registry")
    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", parents=[common, output], help="List rules, optionally filtered")
    ls.add_argument("--category")
    ls.add_argument("--severity")

    get = sub.add_parser("get", parents=[common, output], help="Show one rule by id")
    get.add_argument("rule_id")

    sub.add_parser("categories", parents=[common], help="Count rules per category and severity")

    return p


def _deep_update(dst: dict[str, Any], src: dict[str, Any]) -> dict[str, Any]:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _deep_update(dst[k], v)
        else:
            dst[k] = v
    return dst


def _discover_config_path() -> Path | None:
    candidates = [
        Path("./saferules.toml"),
        Path("./.saferules.toml"),
        Path.home() / ".config" / "saferules" / "config.toml",
    ]
    for c in candidates:
        if c.exists():
            return c
    return None


def _load_toml(path: Path | None) -> dict[str, Any]:
    if not path:
        return {}
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file {path}: {e}") from e

    rules = data.get("rules", {})
    if not isinstance(rules, dict):
        raise ValueError(f"Config file {path}: [rules] must be a table")
    # Rule files named in a config file are relative to that file.
    files = rules.get("files")
    if isinstance(files, str):
        files = [files]
    if isinstance(files, list):
        base = path.parent
        rules["files"] = [str(f) if Path(f).is_absolute() else str(base / f) for f in files]
    return data


def _parse_env_value(raw: str) -> Any:
    low = raw.lower()
    if low in {"true", "false"}:
        return low == "true"
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        if "," in raw:
            return [x.strip() for x in raw.split(",") if x.strip()]
        return raw


def _load_env_overrides() -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith("SAFERULES_"):
            continue
        key = k[len("SAFERULES_") :].lower()
        parts = key.split("__")
        cur = out
        for part in parts[:-1]:
            cur = cur.setdefault(part, {})
        cur[parts[-1]] = _parse_env_value(v)
    return out


def _apply_cli_overrides(data: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    cli: dict[str, Any] = {"command": args.command}

    def sec(section: str) -> dict[str, Any]:
        return cli.setdefault(section, {})

    mapping = {
        (None, "category"): getattr(args, "category", None),
        (None, "severity"): getattr(args, "severity", None),
        (None, "rule_id"): getattr(args, "rule_id", None),
        ("rules", "files"): args.rules,
        ("output", "format"): getattr(args, "output", None),
        ("output", "out"): getattr(args, "out", None),
        ("logging", "log_file"): args.log_file,
    }
    for (s, k), v in mapping.items():
        if v is None:
            continue
        if s is None:
            cli[k] = v
        else:
            sec(s)[k] = v

    if args.no_builtin:
        sec("rules")["builtin"] = False
    if getattr(args, "overwrite", False):
        sec("output")["overwrite"] = True
    if args.quiet:
        sec("logging")["quiet"] = True
    if args.verbose:
        sec("logging")["verbose"] = True

    _deep_update(data, cli)
    return data


def _from_dict(d: dict[str, Any]) -> Config:
    rules = dict(d.get("rules", {}))
    if isinstance(rules.get("files"), str):
        rules["files"] = [rules["files"]]
    try:
        return Config(
            command=d.get("command", "list"),
            category=d.get("category"),
            severity=d.get("severity"),
            rule_id=d.get("rule_id"),
            config_path=d.get("config_path"),
            rules=RulesConfig(**rules),
            output_cfg=OutputConfig(**d.get("output", {})),
            logging=LoggingConfig(**d.get("logging", {})),
        )
    except TypeError as e:
        raise ValueError(f"Unknown config key: {e}") from e


def resolve_config(args: argparse.Namespace) -> Config:
    data: dict[str, Any] = {}

    config_path = Path(args.config_path) if args.config_path else _discover_config_path()
    if config_path:
        _deep_update(data, _load_toml(config_path))
        data["config_path"] = str(config_path)

    _deep_update(data, _load_env_overrides())
    _apply_cli_overrides(data, args)

    cfg = _from_dict(data)

    fmt = str(cfg.output_cfg.format).strip().lower()
    if fmt == "markdown":
        fmt = "md"
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {cfg.output_cfg.format}")
    cfg.output_cfg.format = fmt

    if cfg.command == "get" and not (cfg.rule_id or "").strip():
        raise ValueError("get requires a rule id")

    return cfg
