# SPDX-FileCopyrightText: 2023 Justin Blanchard <UncombedCoconut@gmail.com>
# SPDX-License-Identifier: Apache-2.0 OR MIT
from dataclasses import dataclass
from enum import IntEnum

UNMATCHED = -1


class ProgramError(ValueError):
    pass

class EmptyProgram(ProgramError):
    pass

class InvalidTapeLength(ProgramError):
    pass


class Op(IntEnum):
    INC, DEC, RIGHT, LEFT, LOOP_OPEN, LOOP_CLOSE, READ, ACCEPT = range(8)

    @property
    def char(self):
        return OP_CHARS[self]

OP_CHARS = '+-><[],.'


@dataclass(frozen=True)
class Instruction:
    op: Op
    pos: int
    partner: int = UNMATCHED

    @property
    def target(self):
        ''' Where a taken jump lands: just past the matching "]" for a "[", on the matching "[" for a "]". '''
        if self.partner == UNMATCHED:
            return UNMATCHED
        return self.partner + 1 if self.op == Op.LOOP_OPEN else self.partner

    def __str__(self):
        return self.op.char


class Program:
    __slots__ = ('instructions',)
    def __init__(self, instructions):
        self.instructions = tuple(instructions)
        if not self.instructions:
            raise EmptyProgram('Program contains no instructions')

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, ip):
        return self.instructions[ip]

    def __iter__(self):
        return iter(self.instructions)

    def __eq__(self, other):
        return isinstance(other, Program) and self.instructions == other.instructions

    def __hash__(self):
        return hash(self.instructions)

    def __str__(self):
        return ''.join(map(str, self.instructions))

    def __repr__(self):
        return f'Program.from_text({str(self)!r})'

    @classmethod
    def from_text(cls, text):
        ''' Parse program text. Characters outside "+-<>[],." are comments.
            Brackets are paired with a stack; any left without a partner are kept, tagged UNMATCHED. '''
        ops = [Op(OP_CHARS.index(c)) for c in text if c in OP_CHARS]
        partners = [UNMATCHED] * len(ops)
        open_loops = []
        for ip, op in enumerate(ops):
            if op == Op.LOOP_OPEN:
                open_loops.append(ip)
            elif op == Op.LOOP_CLOSE and open_loops:
                partner = open_loops.pop()
                partners[ip], partners[partner] = partner, ip
        return cls(Instruction(op, ip, partner) for ip, (op, partner) in enumerate(zip(ops, partners)))


def check_tape_length(tape_length):
    if isinstance(tape_length, bool) or not isinstance(tape_length, int) or tape_length < 1:
        raise InvalidTapeLength(f'Tape length must be a positive integer: {tape_length!r}')
    return tape_length
