"""verirun CLI: inspect locally saved verification-run reports."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Any, Optional


def _add_policy_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--include-satisfied",
        action="store_true",
        help="Report every non-VERIFIED rule, including rules without output files"
    )
    parser.add_argument(
        "--include-all",
        action="store_true",
        help="Report every rule that has output files, whatever its status"
    )
    parser.add_argument(
        "--rule-match",
        default=None,
        help="Also report rules whose path contains this substring (case-insensitive)"
    )


def _emit_json(data: Any, out: Optional[Path], quiet: bool) -> None:
    from ._internal.canonical_json import canonical_dumps

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(canonical_dumps(data, pretty=True) + "\n", encoding="utf-8")
        if not quiet:
            print(f"  Written: {out}")
    elif not quiet:
        print(canonical_dumps(data, pretty=True))


def main():
    """Main CLI entry point for verirun commands."""
    try:
        verirun_version = get_version("verirun")
    except PackageNotFoundError:
        verirun_version = "dev"

    parser = argparse.ArgumentParser(
        prog="verirun",
        description="verirun: failed rules, run metadata and assistant answers from prover reports"
    )
    parser.add_argument("--version", action="version", version=f"verirun {verirun_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # locate command
    locate_parser = subparsers.add_parser(
        "locate",
        help="Parse a result URL into origin, run id, output id and anonymous key",
        parents=[parent_parser]
    )
    locate_parser.add_argument("url", help="Result URL")

    # rules command
    rules_parser = subparsers.add_parser(
        "rules",
        help="List failed rules and their evidence URLs from a progress document",
        parents=[parent_parser]
    )
    rules_parser.add_argument(
        "--url",
        required=True,
        help="Result URL (.../output/<runId>/<outputId>?anonymousKey=...)"
    )
    rules_parser.add_argument(
        "--progress",
        type=Path,
        required=True,
        help="Path to the saved progress JSON"
    )
    _add_policy_arguments(rules_parser)
    rules_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write hits JSON to this file instead of stdout"
    )

    # meta command
    meta_parser = subparsers.add_parser(
        "meta",
        help="Summarize a saved output.json",
        parents=[parent_parser]
    )
    meta_parser.add_argument("output_json", type=Path, help="Path to output.json")
    meta_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write metadata JSON to this file instead of stdout"
    )

    # answer command
    answer_parser = subparsers.add_parser(
        "answer",
        help="Extract the final answer from an assistant CLI transcript",
        parents=[parent_parser]
    )
    answer_parser.add_argument("transcript", type=Path, help="Path to transcript text")

    # report command
    report_parser = subparsers.add_parser(
        "report",
        help="Address, metadata and selected rules for one run",
        parents=[parent_parser]
    )
    report_parser.add_argument("--url", required=True, help="Result URL")
    report_parser.add_argument(
        "--progress",
        type=Path,
        required=True,
        help="Path to the saved progress JSON"
    )
    report_parser.add_argument(
        "--output-json",
        type=Path,
        default=None,
        help="Path to the saved output.json (metadata)"
    )
    _add_policy_arguments(report_parser)
    report_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write report JSON to this file instead of stdout"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "locate":
            from .api import locate

            address = locate(args.url)
            _emit_json(address.model_dump(by_alias=True), None, args.quiet)
            if not address.is_complete and not args.quiet:
                print("  Note: URL does not address a run output", file=sys.stderr)

        elif args.command == "rules":
            from .api import find_rule_hits, policy_from_flags
            from ._internal.io.report_files import load_json_document

            progress = load_json_document(args.progress)
            policy = policy_from_flags(args.include_satisfied, args.include_all, args.rule_match)
            hits = find_rule_hits(args.url, progress, policy)

            _emit_json([hit.to_json_dict() for hit in hits], args.out, args.quiet)
            if not args.quiet:
                print("[OK] Rule scan complete")
                print(f"  Hits: {len(hits)}")

        elif args.command == "meta":
            from .api import summarize_job
            from ._internal.io.report_files import load_json_document

            metadata = summarize_job(load_json_document(args.output_json))
            if metadata is None:
                print(f"Error: {args.output_json} does not contain a JSON object", file=sys.stderr)
                sys.exit(1)

            _emit_json(metadata.model_dump(by_alias=True), args.out, args.quiet)
            if not args.quiet:
                print("[OK] Metadata summary complete")
                print(f"  Job status: {metadata.job_status}")
                if metadata.rules_summary is not None:
                    summary = metadata.rules_summary
                    print(f"  Rules: {summary.passed} passed, {summary.failed} failed, {summary.total} total")

        elif args.command == "answer":
            from .api import extract_answer
            from ._internal.io.report_files import load_transcript

            answer = extract_answer(load_transcript(args.transcript))
            if not args.quiet:
                print(answer)

        elif args.command == "report":
            from .api import build_run_report, policy_from_flags
            from ._internal.io.report_files import load_json_document

            progress = load_json_document(args.progress)
            output = load_json_document(args.output_json) if args.output_json else None
            policy = policy_from_flags(args.include_satisfied, args.include_all, args.rule_match)
            report = build_run_report(args.url, progress, output, policy)

            _emit_json(report.to_json_dict(), args.out, args.quiet)
            if not args.quiet:
                print("[OK] Run report complete")
                print(f"  Run: {report.address.run_id}/{report.address.output_id}")
                print(f"  Hits: {len(report.hits)}")

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
