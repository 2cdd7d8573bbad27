# ------------------------------------------------------------------------------
# Purpose:       voices21 command line tool: reads a score, unifies its voice IDs
#                across measures, systems and pages, colors notes by voice, and
#                writes the result.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
#
import argparse
import sys
import typing as t

from music21 import converter
from music21.base import VERSION_STR
import voices21

def getInputFormatsList() -> t.List[str]:
    c = converter.Converter()
    inList = c.subconvertersList('input')
    result = []
    for subc in inList:
        if subc.registerInputExtensions:  # if this subc supports input at all
            for form in subc.registerFormats:
                result.append(form)
    return result

def getOutputFormatsList() -> t.List[str]:
    c = converter.Converter()
    outList = c.subconvertersList('output')
    result = []
    for subc in outList:
        if subc.registerOutputExtensions:  # if this subc supports output at all
            for form in subc.registerFormats:
                result.append(form)
    return result


# ------------------------------------------------------------------------------

# main entry point (parse arguments and do voice linking)
if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        prog='python3 -m voices21',
        description='Unify voice IDs (and colors) across a whole score'
    )
    parser.add_argument('input_file',
                        help='input music file (extension is used to determine '
                            + 'input format if --input-from/-f is not specified)')
    parser.add_argument('output_file',
                        help='output music file')
    parser.add_argument('-f', '--input-from',
                        choices=getInputFormatsList(),
                        help='format of the input file (only necessary if input file has no '
                            + 'supported extension)')
    parser.add_argument('-t', '--output-to', required=True,
                        choices=getOutputFormatsList(),
                        help='format of the output file (required)')
    parser.add_argument('--no-score-pass', action='store_true', default=False,
                        help='do not connect voices across page breaks')
    parser.add_argument('--no-color', action='store_true', default=False,
                        help='do not color notes by voice')

    print('music21 version:', VERSION_STR, file=sys.stderr)
    print('voices21 version:', voices21.SharedConstants.VOICES21_VERSION, file=sys.stderr)
    args = parser.parse_args()

    s = converter.parse(args.input_file, format=args.input_from)
    if not hasattr(s, 'parts'):
        print(f'{args.input_file} does not contain a score', file=sys.stderr)
        sys.exit(1)

    modifs: int = voices21.linkVoices(
        s,
        withScorePass=not args.no_score_pass,
        colorize=not args.no_color
    )
    print(f'{modifs} voice ID swaps', file=sys.stderr)

    s.write(fmt=args.output_to, fp=args.output_file)
    print('Success!  Output can be found in', args.output_file, file=sys.stderr)
