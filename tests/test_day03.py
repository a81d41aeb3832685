from aoc2024.day03 import part1, part2

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
CONDITIONAL = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE) == "161"


def test_part2_example_without_switches():
    assert part2(EXAMPLE) == "161"


def test_part2_honours_switches():
    assert part2(CONDITIONAL) == "48"


def test_part1_ignores_switches():
    assert part1(CONDITIONAL) == part1(CONDITIONAL.replace("don't()", "").replace("do()", ""))


def test_four_digit_operands_are_rejected():
    assert part1("xxmul(1234,5)xxxxx") == "0"


def test_spaces_invalidate_instruction():
    assert part1("xxmul( 2,4)xxxxx") == "0"


def test_part2_never_exceeds_part1():
    assert int(part2(CONDITIONAL)) <= int(part1(CONDITIONAL))