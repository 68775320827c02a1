# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from collections import deque

HEX = '0123456789abcdef'
S = len(HEX)
EMPTY_LANGUAGE = '∅'


def parse_word(word):
    '''Return the input symbols of "word", given as a hex-digit string (either case) or an iterable of ints in 0..15.'''
    if isinstance(word, str):
        try:
            return [HEX.index(c) for c in word.lower()]
        except ValueError:
            raise ValueError(f'Not a hex-digit word: {word!r}') from None
    word = list(word)
    if not all(isinstance(s, int) and 0 <= s < S for s in word):
        raise ValueError(f'Input symbols must be ints in 0..{S-1}: {word!r}')
    return word


def bfs_ordered(automaton):
    '''Return (trans, labels) for an equivalent automaton with states ordered by breadth-first search from the start.
       labels[q] is (sealed, final); sealed states have None transitions. Isomorphic automatons give equal results.'''
    state_id = {automaton.start: 0}
    trans, labels = [], []
    bfs_q = deque(state_id)
    while bfs_q:
        q0 = bfs_q.popleft()
        labels.append((automaton.is_sealed(q0), automaton.is_final(q0)))
        if automaton.is_sealed(q0):
            trans.extend([None]*S)
            continue
        for q1 in automaton.transitions(q0):
            try:
                i1 = state_id[q1]
            except KeyError:
                i1 = state_id[q1] = len(state_id)
                bfs_q.append(q1)
            trans.append(i1)
    return trans, labels


def isomorphic(a, b):
    return bfs_ordered(a) == bfs_ordered(b)


def to_automata_dfa(automaton):
    '''Convert to an automata-lib DFA over the characters of HEX. A sealed state becomes a sink that keeps its verdict.'''
    from automata.fa import dfa
    transitions = {}
    for q in automaton.states():
        targets = [q]*S if automaton.is_sealed(q) else automaton.transitions(q)
        transitions[q] = {c: t for c, t in zip(HEX, targets)}
    return dfa.DFA(states=set(transitions), input_symbols=set(HEX), transitions=transitions,
                   initial_state=automaton.start, final_states=set(automaton.final_states()))


def to_regex(automaton):
    '''A regular expression over HEX for the accepted language, or EMPTY_LANGUAGE if nothing is accepted.'''
    from automata.fa import gnfa
    if not automaton.final_states():
        return EMPTY_LANGUAGE
    return gnfa.GNFA.from_dfa(to_automata_dfa(automaton)).to_regex()
