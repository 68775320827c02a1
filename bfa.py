#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from bf_closure import ReadBoundary, SealedHalt, close
from bf_machine import SYMBOLS, Configuration, read
from bf_program import ProgramError, check_tape_length
from bfa_utils import parse_word
from collections import deque
import logging
import tqdm

log = logging.getLogger('bfa')


class Automaton:
    '''
    The DFA over hex digits recognized by a program: state q has transitions trans[SYMBOLS*q:SYMBOLS*(q+1)],
    or None there if q is sealed (it halts or loops forever before reading again, so final[q] decides every input).
    State 0 is the start. Instances are read-only.
    '''
    __slots__ = ('trans', 'final', 'sealed', 'configs')
    start = 0

    def __init__(self, trans, final, sealed, configs):
        self.trans, self.final, self.sealed, self.configs = tuple(trans), tuple(final), tuple(sealed), tuple(configs)

    def __len__(self):
        return len(self.final)

    def states(self):
        return range(len(self))

    def is_sealed(self, q):
        return self.sealed[q]

    def is_final(self, q):
        return self.final[q]

    def transition(self, q, symbol):
        if not 0 <= symbol < SYMBOLS:
            raise ValueError(f'Input symbol out of range: {symbol!r}')
        if self.sealed[q]:
            raise ValueError(f'State {q} is sealed and has no transitions')
        return self.trans[SYMBOLS*q + symbol]

    def transitions(self, q):
        return () if self.sealed[q] else self.trans[SYMBOLS*q:SYMBOLS*(q+1)]

    def configuration(self, q):
        ''' The read-boundary configuration that state q stands for. '''
        return self.configs[q]

    def sealed_states(self):
        return [q for q in self.states() if self.sealed[q]]

    def final_states(self):
        return [q for q in self.states() if self.final[q]]

    def accepts(self, word):
        ''' Decide a word: a string of hex digits, or an iterable of ints in 0..15. '''
        q = self.start
        for s in parse_word(word):
            if self.sealed[q]:
                break
            q = self.trans[SYMBOLS*q + s]
        return self.final[q]

    def __repr__(self):
        return f'<Automaton: {len(self)} states, {len(self.sealed_states())} sealed>'


def build(program, tape_length, progress=False):
    ''' Explore the read-boundary configurations reachable from the all-zero tape, breadth-first, one state per configuration. '''
    check_tape_length(tape_length)
    state_id = {Configuration.initial(tape_length): 0}
    trans, final, sealed = [], [], []
    bfs_q = deque(state_id)
    with tqdm.tqdm(desc='states', unit='state', disable=not progress) as bar:
        while bfs_q:
            c0 = bfs_q.popleft()
            match close(c0, program):
                case SealedHalt(accept=accept):
                    final.append(accept)
                    sealed.append(True)
                    trans.extend([None]*SYMBOLS)
                case ReadBoundary(config=at_read, accept=accept):
                    final.append(accept)
                    sealed.append(False)
                    for s in range(SYMBOLS):
                        c1 = read(at_read, s)
                        try:
                            i1 = state_id[c1]
                        except KeyError:
                            i1 = state_id[c1] = len(state_id)
                            bfs_q.append(c1)
                        trans.append(i1)
            bar.update()
            bar.total = len(state_id)
    automaton = Automaton(trans, final, sealed, state_id)
    log.info('Program %s on %d cells: %d states, %d sealed', program, tape_length, len(automaton), sum(sealed))
    return automaton


def main(argv=None):
    from bfa_args import ArgumentParser, program_args
    from bfa_dot import dot, render_png, save_dot, show_png
    from bfa_utils import to_regex
    ap = ArgumentParser(description='Build the DFA over hex digits that a tape-machine program accepts.', parents=[program_args()])
    ap.add_argument('-o', '--output', help='Write DOT files with this name prefix instead of printing DOT.')
    ap.add_argument('-p', '--png', help='Render each DOT file to PNG (requires graphviz; implies -o).', action='store_true')
    ap.add_argument('-s', '--show', help='Display each PNG (implies -p).', action='store_true')
    ap.add_argument('--re', help='Print a regular expression instead (requires automata-lib).', action='store_true')
    ap.add_argument('-P', '--progress', help='Show a progress bar while exploring.', action='store_true')
    ap.add_argument('-v', '--verbose', help='Log synthesis details.', action='count', default=0)
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.WARNING - 10*min(args.verbose, 2), format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    if not args.programs:
        ap.error('no programs given')
    if args.show:
        args.png = True
    if args.png and not args.output:
        args.output = 'bfa'

    try:
        for i, program in enumerate(args.programs):
            automaton = build(program, args.cells, progress=args.progress)
            if args.re:
                print(program, to_regex(automaton), sep=', ')
            elif args.output:
                path = f'{args.output}_{i}.dot' if len(args.programs) > 1 else f'{args.output}.dot'
                save_dot(automaton, path)
                if args.png:
                    png = render_png(path)
                    if args.show:
                        show_png(png)
            else:
                print(dot(automaton), end='')
    except ProgramError as e:
        ap.error(str(e))


if __name__ == '__main__':
    main()
