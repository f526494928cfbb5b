# --- utils.py ---

import time
import threading
from colorama import Fore, Style, init

init()

# Placeholder emitted for anything that cannot be decoded
FAILURE = '?'

# Dot/dash alphabet
DOT = '.'
DASH = '-'
SYMBOLS = (DOT, DASH)

# Fixed-strategy tokens start with a 6-symbol family prefix; suffixes are read in 3-symbol chunks
FIXED_PREFIX_LEN = 6
SUFFIX_CHUNK = 3

# Spaceless buffers are judged from MIN on and dropped once they grow past MAX
MIN_SPACELESS_LEN = 6
MAX_SPACELESS_LEN = 13

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
