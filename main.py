"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, DISPLAY_CONFIG
from session import CalculatorSession

logger = logging.getLogger(__name__)

REPL_COMMANDS = (':history', ':clear', ':quit')


def read_expressions(input_path):
    """读取表达式文件，每行一个；跳过空行和注释"""
    expressions = []
    with open(input_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(CLI_CONFIG['comment_prefix']):
                continue
            expressions.append(line)
    logger.info(f"Loaded {len(expressions)} expressions from {input_path}")
    return expressions


def run_expression(session, expression):
    """计算一个表达式并输出；返回是否成功"""
    session.clear()
    session.append(expression)
    result = session.calculate()
    if result is None:
        return True
    print(f"{expression}{DISPLAY_CONFIG['history_separator']}{result}")
    return result != DISPLAY_CONFIG['error_text']


def run_repl(session, stdin=None):
    """交互模式"""
    stdin = stdin or sys.stdin
    print(f"Commands: {', '.join(REPL_COMMANDS)}")
    failures = 0
    while True:
        print(CLI_CONFIG['prompt'], end='', flush=True)
        line = stdin.readline()
        if not line:
            print()
            break
        line = line.strip()
        if not line:
            continue
        if line == ':quit':
            break
        if line == ':history':
            for entry in session.history:
                print(entry)
            continue
        if line == ':clear':
            session.clear_history()
            continue
        if not run_expression(session, line):
            failures += 1
    return failures


def main(args):
    session = CalculatorSession(history_limit=args.history_limit)

    expressions = list(args.expressions)
    if args.input_path:
        expressions.extend(read_expressions(args.input_path))

    if expressions:
        failures = sum(1 for expr in expressions if not run_expression(session, expr))
    else:
        failures = run_repl(session)

    if failures:
        logger.warning(f"{failures} expression(s) could not be evaluated")

    # 保存结果
    if args.save_history:
        history_path = args.history_path or CLI_CONFIG['history_path']
        logger.info(f"Saving history to {history_path}")
        session.save_history(history_path)

    return 1 if failures else 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Infix calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; starts an interactive session when omitted"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="File with one expression per line ('#' starts a comment)"
    )
    parser.add_argument(
        "--save_history",
        action="store_true",
        help="Save the calculation history as CSV"
    )
    parser.add_argument(
        "--history_path",
        type=str,
        default=CLI_CONFIG['history_path'],
        help="Path to save the history CSV"
    )
    parser.add_argument(
        "--history_limit",
        type=int,
        default=None,
        help="Keep only the newest N history entries"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG['log_level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser.parse_args(argv)


def cli(argv=None):
    args = parse_args(argv)
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
