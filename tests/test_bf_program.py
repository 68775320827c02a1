import pytest

from bf_program import UNMATCHED, EmptyProgram, InvalidTapeLength, Op, Program, check_tape_length


def test_comments_are_skipped():
    program = Program.from_text('read: , then accept: . (done)')
    assert [insn.op for insn in program] == [Op.READ, Op.ACCEPT]
    assert str(program) == ',.'


def test_positions_are_instruction_indices():
    program = Program.from_text('+ > [ - ]')
    assert [insn.pos for insn in program] == list(range(5))


def test_nested_loops_are_paired():
    program = Program.from_text('[[]+]')
    assert [insn.partner for insn in program] == [4, 2, 1, UNMATCHED, 0]
    assert program[0].target == 5
    assert program[1].target == 3
    assert program[2].target == 1
    assert program[4].target == 0


def test_unmatched_brackets_are_tagged_not_rejected():
    program = Program.from_text('][[]')
    assert program[0].partner == UNMATCHED
    assert program[0].target == UNMATCHED
    assert program[1].partner == UNMATCHED
    assert program[2].partner == 3


def test_empty_program():
    with pytest.raises(EmptyProgram):
        Program.from_text('')
    with pytest.raises(EmptyProgram):
        Program.from_text('no instructions here')


def test_programs_compare_by_instructions():
    assert Program.from_text('+[>.,,<]') == Program.from_text('+ [ > . , , < ]')
    assert hash(Program.from_text('+.')) == hash(Program.from_text('+x.'))
    assert Program.from_text('+.') != Program.from_text('.+')


@pytest.mark.parametrize('bad', [0, -3, 1.5, '2', True, None])
def test_invalid_tape_length(bad):
    with pytest.raises(InvalidTapeLength):
        check_tape_length(bad)


def test_program_errors_are_value_errors():
    assert issubclass(EmptyProgram, ValueError)
    assert issubclass(InvalidTapeLength, ValueError)
    assert check_tape_length(3) == 3


def test_instruction_characters_in_comments_count():
    # The hyphen in "even-length" is a decrement.
    assert str(Program.from_text('+[>.,,<] even-length words')) == '+[>.,,<]-'
