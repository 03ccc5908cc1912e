"""主程序入口 - 命令行计算器"""
import argparse
import logging

from config.config import EVALUATOR_CONFIG, BATCH_CONFIG
from core import AngleMode, ExpressionEvaluator
from data.expression_loader import load_expressions, evaluate_frame, summarize_results
from session import CalculatorSession
from utils.formatting import format_number

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MEMORY_COMMANDS = ('M+', 'M-', 'MR', 'MC')


def run_expressions(expressions, angle_mode, strict):
    evaluator = ExpressionEvaluator(strict=strict)
    for expression in expressions:
        result = evaluator.evaluate(expression, angle_mode=angle_mode)
        print(f"{expression} = {format_number(result)}")


def run_batch(args, angle_mode):
    logger.info("=== Batch evaluation ===")
    frame = load_expressions(args.input_file, column=args.column)
    evaluator = ExpressionEvaluator(strict=args.strict)
    results = evaluate_frame(frame, column=args.column, angle_mode=angle_mode, evaluator=evaluator)

    summary = summarize_results(results)
    logger.info(f"Evaluated {summary['total']} expressions: "
                f"{summary['finite']} finite, {summary['infinite']} infinite, {summary['failed']} failed")
    logger.info(f"Compile cache: {evaluator.cache_info()}")

    logger.info(f"Saving results to {args.output_path}")
    results.to_csv(args.output_path, index=False)


def run_interactive(angle_mode, strict):
    """交互模式：逐行求值，支持 M+ / M- / MR / MC 记忆键和 ans"""
    session = CalculatorSession(angle_mode=angle_mode, evaluator=ExpressionEvaluator(strict=strict))
    current = ''
    print("Enter an expression, M+ / M- / MR / MC, deg / rad, or quit.")
    while True:
        try:
            line = input(f"[{session.angle_mode.value[:3]}] > ").strip()
        except EOFError:
            break
        if line.lower() in ('quit', 'exit'):
            break
        if line.lower() in ('deg', 'rad'):
            session.set_angle_mode(line)
            continue

        command = line.upper()
        if command in MEMORY_COMMANDS:
            if command == 'M+':
                session.memory_add(current)
            elif command == 'M-':
                session.memory_subtract(current)
            elif command == 'MR':
                current = session.memory_recall(current)
                print(current)
                continue
            else:
                session.memory_clear()
            print(f"M = {format_number(session.memory)}")
            continue

        current = line
        print(format_number(session.evaluate(line)))


def main(args):
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    angle_mode = AngleMode.RADIANS if args.radians else AngleMode.parse(EVALUATOR_CONFIG["angle_mode"])

    if args.input_file:
        run_batch(args, angle_mode)
    elif args.interactive:
        run_interactive(angle_mode, args.strict)
    elif args.expressions:
        run_expressions(args.expressions, angle_mode, args.strict)
    else:
        logger.warning("Nothing to evaluate, pass expressions, --input_file or --interactive")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Scientific calculator expression evaluator")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2(3+4)' 'sin(90)'"
    )
    parser.add_argument(
        "--radians",
        action="store_true",
        help="Interpret trigonometric arguments and results in radians (default: degrees)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unrecognized characters instead of skipping them"
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="CSV or text file with expressions to evaluate in batch"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in the CSV input"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["output_path"],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start an interactive session with memory keys"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args()
    main(args)
