"""secretgrab CLI: capture and encode commands."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for secretgrab commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        secretgrab_version = get_version("secretgrab")
    except PackageNotFoundError:
        secretgrab_version = "dev"

    parser = argparse.ArgumentParser(
        prog="secretgrab",
        description="secretgrab: capture versioned secrets from a live page and encode them"
    )
    parser.add_argument("--version", action="version", version=f"secretgrab {secretgrab_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # grab command
    grab_parser = subparsers.add_parser(
        "grab",
        help="Capture secrets from a live page and write artifacts",
        parents=[parent_parser]
    )
    grab_parser.add_argument(
        "--url",
        default=None,
        help="Page to open (defaults to https://open.spotify.com)"
    )
    grab_parser.add_argument(
        "--settle",
        type=float,
        default=None,
        help="Seconds to wait after navigation before reading captures"
    )
    grab_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Navigation timeout in seconds"
    )
    grab_parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window"
    )
    grab_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory for artifacts (defaults to 'secrets/')"
    )
    grab_parser.add_argument(
        "--dump-captures",
        type=Path,
        default=None,
        help="Also write the raw capture snapshot to this path"
    )

    # summarise command
    summarise_parser = subparsers.add_parser(
        "summarise",
        help="Run the pipeline over a saved capture snapshot",
        parents=[parent_parser]
    )
    summarise_parser.add_argument(
        "captures_path",
        type=Path,
        help="Path to capture snapshot JSON"
    )
    summarise_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output directory for artifacts (defaults to 'secrets/')"
    )

    # encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a single secret and print the result"
    )
    encode_parser.add_argument(
        "secret",
        help="Secret text to encode"
    )
    encode_parser.add_argument(
        "--secret-version",
        dest="secret_version",
        type=int,
        default=1,
        help="Version to attach to the encoded secret (default: 1)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    def _report_result(result) -> None:
        from .api import summary_lines

        if args.quiet:
            return
        if not result.ok:
            print(result.message)
            return
        print(f"[OK] Wrote {len(result.written)} artifacts")
        for name, path in result.written.items():
            print(f"  {name}: {path}")
        for line in summary_lines(result.artifacts):
            print(line)

    if args.command == "grab":
        # Lazy import: only load playwright when grab is invoked
        from .adapters.browser import CaptureError

        try:
            from .api import grab_live, run_pipeline, capture_lines
            from .config import GrabConfig
            from ._internal.io.captures import write_captures

            overrides = {"headless": not args.headed}
            if args.url is not None:
                overrides["target_url"] = args.url
            if args.settle is not None:
                overrides["settle_seconds"] = args.settle
            if args.timeout is not None:
                overrides["timeout_seconds"] = args.timeout
            if args.out is not None:
                overrides["output_dir"] = args.out.resolve()
            config = GrabConfig(**overrides)

            if not args.quiet:
                print(f"Opening {config.target_url}...")
            records = grab_live(config)

            if not args.quiet:
                for line in capture_lines(records):
                    print(line)

            if args.dump_captures is not None:
                dump_path = write_captures(records, args.dump_captures.resolve())
                if not args.quiet:
                    print(f"  Captures: {dump_path}")

            result = run_pipeline(records, config.output_dir)
            _report_result(result)
            sys.exit(0)
        except (CaptureError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "summarise":
        try:
            from .api import run_pipeline_from_path
            from ._internal.io.artifact_sink import DEFAULT_OUTPUT_DIR

            captures_path = Path(args.captures_path).resolve()
            output_dir = Path(args.out).resolve() if args.out else DEFAULT_OUTPUT_DIR

            result = run_pipeline_from_path(captures_path, output_dir)
            _report_result(result)
            sys.exit(0)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "encode":
        try:
            from .kernel.encoder import encode_secret
            from .kernel.formatter import to_code_points
            from .kernel.models import SecretBytes
            from ._internal.canonical_json import compact_dumps

            latest = SecretBytes(version=args.secret_version, secret=to_code_points(args.secret))
            encoded = encode_secret(latest)
            print(compact_dumps(encoded.model_dump()))
            sys.exit(0)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
