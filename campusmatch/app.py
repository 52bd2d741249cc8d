import argparse
import json
from pathlib import Path
from typing import Any, Iterable, Optional

from . import __version__
from .env import get_settings, load_env
from .logger import StructuredLogger, get_logger
from .normalize import clean_labels, split_labels
from .schema import validate_pair
from .similarity import jaccard_similarity, label_set


def compare_pair(a: Iterable[str], b: Iterable[str], case_sensitive: bool = False) -> dict:
    set_a = label_set(a, case_sensitive)
    set_b = label_set(b, case_sensitive)
    return {
        "score": jaccard_similarity(set_a, set_b, case_sensitive=True),
        "shared": sorted(set_a & set_b),
        "union_size": len(set_a | set_b),
        "case_sensitive": case_sensitive,
    }


def _build_logger() -> StructuredLogger:
    settings = get_settings()
    return get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_dir is not None,
    )


def _report(outcome: dict, logger: StructuredLogger) -> None:
    logger.record_comparison(outcome["score"])
    if outcome["union_size"] == 0:
        logger.record_empty_pair()
    logger.debug(
        "Compared label sets",
        score=outcome["score"],
        union_size=outcome["union_size"],
        case_sensitive=outcome["case_sensitive"],
    )
    print(f"Score: {outcome['score']:.4f}")
    print(f"Shared: {', '.join(outcome['shared']) if outcome['shared'] else '(none)'}")
    print(f"Union size: {outcome['union_size']}")


def _load_payload(input_path: Path, logger: StructuredLogger) -> Any:
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            logger.record_invalid_input("invalid_json")
            raise SystemExit(f"Invalid JSON in {input_path}: {e}")


def _fail_validation(errors: list, logger: StructuredLogger) -> None:
    for e in errors:
        logger.record_invalid_input(e.split(":")[0])
    logger.warning("Rejected comparison payload", errors=errors)
    print("Invalid:")
    for e in errors:
        print(f" - {e}")
    raise SystemExit(2)


def _resolve_case_sensitive(flag: Optional[bool], payload_value: Optional[bool] = None) -> bool:
    # Precedence: command line flag, then payload, then CAMPUSMATCH_CASE_SENSITIVE
    if flag is not None:
        return flag
    if payload_value is not None:
        return payload_value
    return get_settings().case_sensitive


def cmd_compare(args: argparse.Namespace) -> None:
    logger = _build_logger()
    case_sensitive = _resolve_case_sensitive(args.case_sensitive)
    outcome = compare_pair(split_labels(args.a), split_labels(args.b), case_sensitive)
    _report(outcome, logger)


def cmd_compare_file(args: argparse.Namespace) -> None:
    logger = _build_logger()
    payload = _load_payload(Path(args.input), logger)
    errors = validate_pair(payload)
    if errors:
        _fail_validation(errors, logger)
    case_sensitive = _resolve_case_sensitive(args.case_sensitive, payload.get("case_sensitive"))
    outcome = compare_pair(clean_labels(payload["a"]), clean_labels(payload["b"]), case_sensitive)
    _report(outcome, logger)


def cmd_validate(args: argparse.Namespace) -> None:
    logger = _build_logger()
    payload = _load_payload(Path(args.input), logger)
    errors = validate_pair(payload)
    if errors:
        _fail_validation(errors, logger)
    print("Valid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="campusmatch", description="Label set similarity scoring")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--stats", action="store_true", help="Log session metrics after the command")

    subparsers = parser.add_subparsers(dest="command")
    cmp_ = subparsers.add_parser("compare", help="Score two comma-separated label lists")
    cmp_.add_argument("--a", required=True, help="First label list. Example: \"Python,Go\"")
    cmp_.add_argument("--b", required=True, help="Second label list. Example: \"python,rust\"")
    cmp_.add_argument(
        "--case-sensitive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat labels differing only in case as distinct (default: CAMPUSMATCH_CASE_SENSITIVE)",
    )
    cmp_.set_defaults(func=cmd_compare)

    cmpf = subparsers.add_parser("compare-file", help="Score a JSON payload {\"a\": [...], \"b\": [...]}")
    cmpf.add_argument("--input", required=True, help="Path to comparison JSON input")
    cmpf.add_argument(
        "--case-sensitive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat labels differing only in case as distinct (overrides the payload)",
    )
    cmpf.set_defaults(func=cmd_compare_file)

    val = subparsers.add_parser("validate", help="Validate a comparison JSON payload")
    val.add_argument("--input", required=True, help="Path to comparison JSON input")
    val.set_defaults(func=cmd_validate)

    return parser


def main(argv=None):
    # Load .env if present (CAMPUSMATCH_LOG_LEVEL, CAMPUSMATCH_CASE_SENSITIVE, ...)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        finally:
            if args.stats:
                _build_logger().log_metrics_summary()
        return

    parser.print_help()


if __name__ == "__main__":
    main()
