import argparse
import sys
import time

from colorama import Fore

import utils
from decoder import LineDecoder, encode_line
from qcode import QCodeResolver, Strategy
from stream_buffer import EventKind, StreamBuffer
from tokenizer import SPACE
from utils import SYMBOLS, log_with_time, vlog


def _split_symbol_args(argv):
    """
    Pull out arguments made only of dots, dashes and spaces so argparse does
    not read groups such as '-...' as options. A bare '--' stays an
    argparse separator.
    """
    symbols, rest = [], []
    for arg in argv:
        if arg and arg != '--' and all(ch in SYMBOLS or ch == SPACE for ch in arg):
            symbols.append(arg)
        else:
            rest.append(arg)
    return symbols, rest


def _read_inputs(text):
    if text:
        return [' '.join(text)]
    return (line.rstrip('\n') for line in sys.stdin)


def run_line_mode(lines, strategy):
    decoder = LineDecoder(strategy=strategy)
    for line in lines:
        t0 = time.time()
        results = decoder.decode_tokens(line)
        failures = [r for r in results if r.error is not None]
        if failures:
            vlog(f"{len(failures)} of {len(results)} tokens failed", t0)
        print(''.join(r.text for r in results), flush=True)


def run_stream_mode(lines):
    buffer = StreamBuffer(QCodeResolver())
    for segment in lines:
        event = buffer.extend(segment)
        if event.kind is EventKind.RESOLVED:
            log_with_time(f"Q-code: {event.code}", color=Fore.GREEN)
        elif event.kind is EventKind.DISCARDED:
            log_with_time(f"Discarded {event.symbols} ({event.reason.value})", color=Fore.RED)
        else:
            vlog(f"Waiting, buffer: {event.symbols}")
    event = buffer.flush()
    if event is not None:
        log_with_time(f"Discarded {event.symbols} at end of input ({event.reason.value})", color=Fore.YELLOW)


def run_encode_mode(lines):
    for line in lines:
        try:
            print(encode_line(line), flush=True)
        except KeyError as e:
            log_with_time(f"Cannot encode character {e.args[0]!r}", color=Fore.RED)
            return 1
    return 0


def run_decoder(argv=None):
    parser = argparse.ArgumentParser(description="Morse / Q-code decoder")
    parser.add_argument("text", nargs="*", help="Symbols to decode (default: read lines from stdin)")
    parser.add_argument("--mode", choices=["line", "stream"], default="line",
                        help="line: space-separated groups; stream: spaceless Q-code buffer (default: line)")
    parser.add_argument("--q-strategy", choices=[s.value for s in Strategy], default=Strategy.FIXED.value,
                        help="How long tokens are resolved to Q-codes in line mode (default: fixed)")
    parser.add_argument("--encode", action="store_true", help="Encode text to symbols instead of decoding")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    if argv is None:
        argv = sys.argv[1:]
    symbol_args, argv = _split_symbol_args(argv)
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    lines = _read_inputs(symbol_args + args.text)
    if args.encode:
        return run_encode_mode(lines)
    if args.mode == "stream":
        run_stream_mode(lines)
    else:
        run_line_mode(lines, Strategy(args.q_strategy))
    return 0
