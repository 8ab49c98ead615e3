import sys, argparse
from .common import BadCondition
from .program import program, MalformedInput, UnresolvedTarget

def main(argv=None):
    parser = argparse.ArgumentParser(
                    prog='tinyleg-dump',
                    description='Disassembles a binary of big-endian LEGv8 instruction words into assembly.')
    parser.add_argument('-r', '--raw', action='store_true', help='print each word in binary with its opcode instead of assembly')
    parser.add_argument('-a', '--abi', action='store_true', help='print IP0, IP1, SP, FP, LR and XZR instead of X16, X17, X28..X31')
    parser.add_argument('-k', '--keep-going', action='store_true', help='report bad conditions and unresolved branch targets inline instead of stopping')
    parser.add_argument('-t', '--trace', action='store_true', help='print each decoded word to stderr')
    parser.add_argument('bin', help='binary file, a whole number of 4-byte instruction words')
    args = parser.parse_args(argv)
    try: prog = program.read(args.bin, abi=args.abi, lenient=args.keep_going, trace=args.trace)
    except OSError as e: print(f'error: cannot read {args.bin}: {e}', file=sys.stderr); return 1
    except MalformedInput as e: print(f'error: {args.bin}: {e}', file=sys.stderr); return 1
    try:
        for line in (prog.dump() if args.raw else prog.render()): print(line)
    except (BadCondition, UnresolvedTarget) as e: print(f'Error: {e}', file=sys.stderr); return 1
    return 0

if __name__ == '__main__': sys.exit(main())
