import argparse
import sys

from _oliword.reading import convert


def make_parser():
    parser = argparse.ArgumentParser(
        prog="oliword2rtf",
        description="Convert an Olivetti oliword document to RTF.",
    )
    parser.add_argument("inputfile", help="The oliword document to convert")
    parser.add_argument("outputfile", help="Path of the RTF file to create")
    return parser


def main(argv=None):
    """
    Command line entry point. Exits with code 2 when not given both
    an input file and an output file, and with code 1 when the input
    cannot be read or the output cannot be created.
    """
    parser = make_parser()
    args = parser.parse_args(argv)

    print(f"Input file: {args.inputfile}")
    print(f"Output file: {args.outputfile}")

    try:
        convert(args.inputfile, args.outputfile)
    except OSError as err:
        parser.exit(1, f"{parser.prog}: error: {err}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
