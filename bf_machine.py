# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from bf_program import Op, UNMATCHED
from dataclasses import dataclass, replace

SYMBOLS = 16


@dataclass(frozen=True)
class Configuration:
    '''
    One deterministic machine state: a wrapping tape of nibbles, the head position on it,
    the instruction pointer, and whether an accept-check ran since the last successful read.
    Equal configurations behave identically from here on, so these are used as dict/set keys.
    '''
    tape: tuple[int, ...]
    head: int = 0
    ip: int = 0
    pending_accept: bool = False

    @classmethod
    def initial(cls, tape_length):
        return cls((0,) * tape_length)

    def poke(self, value, **changes):
        tape = self.tape[:self.head] + (value % SYMBOLS,) + self.tape[self.head+1:]
        return replace(self, tape=tape, **changes)

    def __str__(self):
        return f'[{"".join(f"{c:X}" for c in self.tape)}]@{self.head} ip={self.ip}{" ." if self.pending_accept else ""}'


@dataclass(frozen=True)
class Advanced:
    config: Configuration

@dataclass(frozen=True)
class MarkedAndAdvanced:
    config: Configuration

@dataclass(frozen=True)
class ReadAttempt:
    config: Configuration

@dataclass(frozen=True)
class UnconditionalHalt:
    config: Configuration

StepOutcome = Advanced | MarkedAndAdvanced | ReadAttempt | UnconditionalHalt


def step(config, program):
    ''' Execute one instruction. A "," is not executed: it is reported as a ReadAttempt on the unchanged configuration. '''
    if config.ip >= len(program):
        return UnconditionalHalt(config)
    insn = program[config.ip]
    cell = config.tape[config.head]
    next_ip = config.ip + 1
    match insn.op:
        case Op.INC:
            return Advanced(config.poke(cell + 1, ip=next_ip))
        case Op.DEC:
            return Advanced(config.poke(cell - 1, ip=next_ip))
        case Op.RIGHT:
            return Advanced(replace(config, head=(config.head + 1) % len(config.tape), ip=next_ip))
        case Op.LEFT:
            return Advanced(replace(config, head=(config.head - 1) % len(config.tape), ip=next_ip))
        case Op.LOOP_OPEN | Op.LOOP_CLOSE:
            if bool(cell) == (insn.op == Op.LOOP_OPEN):
                return Advanced(replace(config, ip=next_ip))
            if insn.target == UNMATCHED:
                return UnconditionalHalt(config)
            return Advanced(replace(config, ip=insn.target))
        case Op.ACCEPT:
            return MarkedAndAdvanced(replace(config, ip=next_ip, pending_accept=True))
        case Op.READ:
            return ReadAttempt(config)


def read(config, symbol):
    ''' The configuration after a successful read of "symbol" at a ReadAttempt. '''
    if not 0 <= symbol < SYMBOLS:
        raise ValueError(f'Input symbol out of range: {symbol!r}')
    return config.poke(symbol, ip=config.ip + 1, pending_accept=False)
