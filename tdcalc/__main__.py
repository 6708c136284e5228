import argparse
import sys

from tdcalc import config
from tdcalc.displayer import Displayer, dump
from tdcalc.errors import LexerError, ParserError
from tdcalc.interpreter import Interpreter
from tdcalc.parser import Parser


###############################################################################
#                                                                             #
#   MAIN                                                                      #
#                                                                             #
###############################################################################

def build_arg_parser():
    parser = argparse.ArgumentParser(prog='tdcalc', description='tdcalc - integer expression calculator')
    parser.add_argument('source', nargs='?', default=None, help='expressions to evaluate')
    parser.add_argument('-f', '--file', help='read the expressions from a file')
    parser.add_argument('--tokens', action='store_true', help='Print every token')
    parser.add_argument('--parse', action='store_true', help='Print parser steps')
    parser.add_argument('--eval', action='store_true', help='Print every evaluated operation')
    parser.add_argument('--tree', action='store_true', help='Print the syntax tree')
    parser.add_argument('--html', metavar='PATH', help='Render the syntax tree chart to PATH')
    return parser


def report(error):
    """error line with its kind, e.g. `[Division by zero] InterpreterError: <2:3>: ...`
    """
    return f'[{error.error_type.value}] {error}'


def run(text, show_tree=False, html=None):
    """parse and evaluate `text`, return the exit code
    """
    try:
        tree = Parser(text).parse()
    except (LexerError, ParserError) as e:
        print(report(e))
        return 1

    if show_tree:
        print(dump(tree))

    if html:
        try:
            Displayer(tree).display(html)
        except RecursionError:
            # pyecharts serializes the chart data recursively
            print(f'chart not rendered: tree too deep for {html}')

    status = 0
    last = None
    for idx, value, error in Interpreter(tree).evaluate_each():
        if error is not None:
            print(f'stmt {idx}: {report(error)}')
            status = 1
        else:
            print(f'stmt {idx}: {value}')
        last = value

    if last is not None:
        print(f'Last Constant: {last}')
    return status


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    config.SHOULD_LOG_TOKENS = args.tokens
    config.SHOULD_LOG_PARSE = args.parse
    config.SHOULD_LOG_EVAL = args.eval

    if args.file:
        with open(args.file, 'r') as fin:
            text = fin.read()
    elif args.source is not None:
        text = args.source
    else:
        text = config.DEFAULT_SOURCE

    return run(text, show_tree=args.tree, html=args.html)


if __name__ == '__main__':
    sys.exit(main())
