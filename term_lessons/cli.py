import argparse

from term_lessons.types import DotDict


def positive_int(value):
    ivalue = int(value)
    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"Invalid value: {value}. Must be a positive integer.")
    return ivalue


def non_negative_float(value):
    fvalue = float(value)
    if fvalue < 0:
        raise argparse.ArgumentTypeError(f"Invalid value: {value}. Must not be negative.")
    return fvalue


def single_char(value):
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"Invalid value: {value!r}. Must be exactly one character.")
    return value


def add_common_arguments(parser):
    parser.add_argument('--renderer', type=str, help='Where to draw', choices=['terminal', 'window'])
    parser.add_argument('--log-level', type=str, help='Console logging level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('--log-file', type=str, help='File that receives the debug log')
    parser.add_argument('--poll-interval', type=non_negative_float, help='Seconds to sleep between empty input polls')
    parser.add_argument('--escape-timeout', type=non_negative_float, help='Seconds a lone ESC waits for the rest of its sequence')


def add_move_arguments(parser):
    parser.add_argument('--start-x', type=int, help='Starting column of the block')
    parser.add_argument('--start-y', type=int, help='Starting row of the block')
    parser.add_argument('--glyph', type=single_char, help='Character drawn for the block')


def add_board_arguments(parser):
    parser.add_argument('--columns', type=positive_int, help='Width of the color board')
    parser.add_argument('--rows', type=positive_int, help='Height of the color board')
    parser.add_argument('--seed', type=int, help='Seed for the random colors')


def handle_args(args, config: DotDict):
    for key, value in vars(args).items():
        if value is not None:
            setattr(config, key, value)


def cli(argv, config: DotDict):
    ap = argparse.ArgumentParser(prog='term-lessons', description='Small terminal control lessons')
    subparsers = ap.add_subparsers(dest='command', required=True)

    put_chars_parser = subparsers.add_parser('put-chars', help='LESSON 1: put characters at positions')
    add_common_arguments(put_chars_parser)

    read_keys_parser = subparsers.add_parser('read-keys', help='LESSON 2: show how key strokes are read')
    add_common_arguments(read_keys_parser)

    move_parser = subparsers.add_parser('move', help='LESSON 3: move a block with the arrow keys')
    add_common_arguments(move_parser)
    add_move_arguments(move_parser)

    colors_parser = subparsers.add_parser('colors', help='LESSON 4: colors and text attributes')
    add_common_arguments(colors_parser)

    random_colors_parser = subparsers.add_parser('random-colors', help='LESSON 5: random color board')
    add_common_arguments(random_colors_parser)
    add_board_arguments(random_colors_parser)

    args = ap.parse_args(argv)
    handle_args(args, config)
    return config
