"""主程序入口 - 交互式表达式计算器"""
import argparse
import logging
import sys

from config.config import *
from core import ExpressionCalculator, Status

logger = logging.getLogger(__name__)


def read_expression(stream, max_line_length=None):
    """
    从输入流读取一行。
    Returns:
        (line, too_long)；输入结束时返回 (None, False)。
        超长的行整行丢弃，line 为空字符串。
    """
    if max_line_length is None:
        max_line_length = CLI_CONFIG['max_line_length']

    raw = stream.readline()
    if not raw:
        return None, False

    line = raw.rstrip('\r\n')
    if len(line) > max_line_length:
        logger.info(f"Discarding input line of {len(line)} characters")
        return '', True
    return line, False


def format_outcome(result, calculator, show_postfix=False):
    """把一次计算的结果转成要输出的文本行"""
    if result.status == Status.SUCCESS:
        lines = []
        if show_postfix:
            lines.append(CLI_CONFIG['postfix_template'].format(postfix=result.postfix))
        lines.append(CLI_CONFIG['result_template'].format(value=calculator.format_result(result.value)))
        return lines
    if result.status == Status.MATH_ERROR:
        return [CLI_CONFIG['math_error_message'].format(reason=result.message)]
    return [CLI_CONFIG['syntax_error_message']]


def run_repl(calculator, stdin=None, stdout=None, show_postfix=False):
    """读取-求值-输出循环；输入 q 或输入结束时返回0"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(CLI_CONFIG['prompt'])
        stdout.flush()

        line, too_long = read_expression(stdin)
        if line is None:
            logger.debug("End of input")
            break
        if too_long:
            stdout.write(CLI_CONFIG['syntax_error_message'] + "\n")
            continue
        if line == CLI_CONFIG['quit_command']:
            break

        result = calculator.calculate(line)
        for text in format_outcome(result, calculator, show_postfix):
            stdout.write(text + "\n")

    return 0


def run_once(calculator, expression, stdout=None, show_postfix=False):
    """计算单个表达式，成功返回0，失败返回1"""
    stdout = stdout or sys.stdout

    if len(expression) > CLI_CONFIG['max_line_length']:
        stdout.write(CLI_CONFIG['syntax_error_message'] + "\n")
        return 1

    result = calculator.calculate(expression)
    for text in format_outcome(result, calculator, show_postfix):
        stdout.write(text + "\n")
    return 0 if result.ok else 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single-line arithmetic expression calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate one expression and exit instead of starting the prompt loop"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) form of each successfully evaluated expression"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=CLI_CONFIG['precision'],
        help="Number of fractional digits in printed results (default: 6)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, logs go to stderr (default: WARNING)"
    )
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error("--precision must be non-negative")
    return args


def main(args, stdin=None, stdout=None):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    calculator = ExpressionCalculator(precision=args.precision)
    if args.expression is not None:
        return run_once(calculator, args.expression, stdout=stdout, show_postfix=args.show_postfix)
    return run_repl(calculator, stdin=stdin, stdout=stdout, show_postfix=args.show_postfix)


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
