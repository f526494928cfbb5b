from cli import run_decoder
import sys

if __name__ == '__main__':
    sys.exit(run_decoder(sys.argv[1:]))
