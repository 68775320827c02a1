# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from bf_machine import SYMBOLS, Advanced, Configuration, MarkedAndAdvanced, ReadAttempt, UnconditionalHalt, step
from dataclasses import dataclass
import logging

log = logging.getLogger('bfa.closure')


@dataclass(frozen=True)
class ReadBoundary:
    config: Configuration
    accept: bool
    visited: int

@dataclass(frozen=True)
class SealedHalt:
    config: Configuration
    accept: bool
    visited: int
    looped: bool = False

ClosureResult = ReadBoundary | SealedHalt


def step_bound(tape_length, program):
    '''Number of distinct (tape, head, ip) triples; the pending-accept flag can at most double what one walk records.'''
    return SYMBOLS**tape_length * tape_length * len(program)


def close(config, program):
    '''
    Run the machine from a read boundary until it tries to read again, halts, or repeats a configuration.
    "accept" in the result is the pending-accept flag at that moment:
    • ReadBoundary: accept if the input ends here; otherwise the caller feeds each symbol through bf_machine.read.
    • SealedHalt: the verdict for every continuation of the input. A repeat means an infinite loop with no read in it.
    The visited set holds whole configurations (flag included), never just instruction pointers.
    '''
    assert not config.pending_accept, 'Closures start at read boundaries, where the accept flag is clear.'
    visited = set()
    while config not in visited:
        visited.add(config)
        match step(config, program):
            case ReadAttempt(config=config):
                return ReadBoundary(config, config.pending_accept, len(visited))
            case UnconditionalHalt(config=config):
                return SealedHalt(config, config.pending_accept, len(visited))
            case Advanced(config=config) | MarkedAndAdvanced(config=config):
                pass
    log.debug('Infinite loop without reading at %s', config)
    return SealedHalt(config, config.pending_accept, len(visited), looped=True)
