"""主程序入口 - 交互式计算器 / 单次求值 / 批处理"""
import argparse
import logging
import sys

from config.config import REPL_CONFIG, BATCH_CONFIG, LOGGING_CONFIG, validate_config
from repl.evaluator import LineEvaluator
from repl.session import Session, run_batch
from utils.formatting import format_rpn

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=(level or LOGGING_CONFIG['level']).upper(),
        format=LOGGING_CONFIG['format']
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-yard arithmetic calculator")

    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Evaluate every line of a file and save the results as CSV"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=BATCH_CONFIG['output_path'],
        help="Path to save batch results (default: %(default)s)"
    )
    parser.add_argument(
        "--show-rpn",
        action="store_true",
        help="Print the postfix (RPN) order before each result"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=REPL_CONFIG['prompt'],
        help="Prompt shown in interactive mode"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(args):
    validate_config()

    if args.expression is not None:
        result = LineEvaluator().evaluate_line(args.expression.rstrip())
        if args.show_rpn and result.ok and not result.is_empty:
            print(format_rpn(result.rpn))
        print(result.format())
        return 0 if result.ok else 1

    if args.input:
        logger.info(f"Batch mode: {args.input} -> {args.output}")
        try:
            results = run_batch(args.input, args.output)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Batch evaluation of {args.input} failed: {e}")
            print(f"{REPL_CONFIG['error_prefix']}: cannot process {args.input}: {e}", file=sys.stderr)
            return 1
        failed = int(results['error'].notna().sum())
        print(f"{len(results)} expressions evaluated, {failed} errors, results saved to {args.output}")
        return 0

    prompt = args.prompt if sys.stdin.isatty() else ""
    Session(prompt=prompt, show_rpn=args.show_rpn).run()
    return 0


def cli():
    args = build_parser().parse_args()
    setup_logging(args.log_level)
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
