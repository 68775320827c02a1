# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from argparse import Action, ArgumentParser
from bf_program import Program
from collections.abc import Sequence

def program_args():
    """Return an ArgumentParser that lets the user specify a tape length and programs (as text or files), parsed into 'programs': Sequence[Program]. """
    ap = ArgumentParser(add_help=False)
    ap.add_argument('-c', '--cells', help='Tape length (number of cells)', type=int, default=1)
    ap.add_argument('-f', '--file', help='Include the program in this file', type=read_source, action=_AddProgramList)
    ap.add_argument('programs', help='Program texts', nargs='*', action=_AddProgramList, default=ProgramList())
    return ap

def read_source(path):
    with open(path) as f:
        return [f.read()]

class _AddProgramList(Action):
    def __call__(self, parser, namespace, values, option_string=None):
        if values and values is not self.default:
            namespace.programs._lists.append(values)

class ProgramList(Sequence):
    def __init__(self):
        self._lists = []

    def __len__(self):
        return sum(map(len, self._lists))

    def __getitem__(self, i):
        for l in self._lists:
            if i < len(l):
                return self._program(l[i])
            i -= len(l)
        raise IndexError('list index out of range')

    def __iter__(self):
        for l in self._lists:
            for text in l:
                yield self._program(text)

    def _program(self, text):
        if isinstance(text, Program):
            return text
        return Program.from_text(text)
