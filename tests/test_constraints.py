import pytest
from packages.engine import ALPHABET, ConstraintError, ConstraintModel, LetterSet
from packages.engine.constraints import parse_known, split_arg


def test_from_args_parses_all_three_kinds():
    m = ConstraintModel.from_args("q,x,z", "a,e", "1c,5e")
    assert str(m.excluded) == "qxz"
    assert str(m.required) == "ae"
    assert m.known == ("c", None, None, None, "e")
    assert m.word_length == 5
    assert m.known_pattern() == "c___e"


def test_exclude_and_require_tolerate_junk_tokens():
    m = ConstraintModel.from_args(exclude="a,bc,1,,D", require="e,??,")
    assert str(m.excluded) == "ad"
    assert str(m.required) == "e"


def test_known_tokens_are_case_insensitive_and_skip_empty():
    m = ConstraintModel.from_args(known="2O,,4n,")
    assert m.known == (None, "o", None, "n", None)


def test_known_accepts_multi_digit_positions():
    m = ConstraintModel.from_args(known="12s", word_length=12)
    assert m.known[11] == "s" and m.num_known() == 1


def test_known_same_letter_twice_is_fine():
    assert ConstraintModel.from_args(known="1a,1a").known[0] == "a"


def test_known_may_overlap_required():
    m = ConstraintModel.from_args(require="c", known="1c")
    assert "c" in m.required and m.known[0] == "c"


def test_split_arg():
    assert split_arg(None) == [] and split_arg("") == []
    assert split_arg("a,b") == ["a", "b"]


@pytest.mark.parametrize("kwargs,code", [
    (dict(exclude=",".join(ALPHABET)), "all_excluded"),
    (dict(require="a,b,c,d,e,f"), "too_many_required"),
    (dict(exclude="a,b", require="b,c"), "not_disjoint"),
    (dict(exclude="c", known="1c"), "known_excluded"),
    (dict(known="c1"), "bad_known_token"),
    (dict(known="12"), "bad_known_token"),
    (dict(known="1ab"), "bad_known_token"),
    (dict(known="x"), "bad_known_token"),
    (dict(known="6a"), "known_out_of_range"),
    (dict(known="0a"), "known_out_of_range"),
    (dict(known="1a,1b"), "known_conflict"),
    (dict(known="1a", word_length=1), "bad_word_length"),
    (dict(known="1a", word_length=17), "bad_word_length"),
])
def test_configuration_errors(kwargs, code):
    with pytest.raises(ConstraintError) as ei:
        ConstraintModel.from_args(**kwargs)
    assert ei.value.code == code
    assert str(ei.value)


def test_configuration_error_messages_are_distinct():
    cases = [
        dict(exclude=",".join(ALPHABET)),
        dict(require="a,b,c,d,e,f"),
        dict(exclude="a", require="a"),
        dict(exclude="c", known="1c"),
    ]
    messages = set()
    for kw in cases:
        with pytest.raises(ConstraintError) as ei:
            ConstraintModel.from_args(**kw)
        messages.add(str(ei.value))
    assert len(messages) == len(cases)


def test_twenty_five_excluded_letters_is_accepted():
    m = ConstraintModel.from_args(exclude=",".join(c for c in ALPHABET if c != "e"))
    assert m.excluded.cardinality() == 25
    assert str(m.allowed) == "e"


def test_required_up_to_word_length_is_accepted():
    m = ConstraintModel.from_args(require="a,b,c,d,e")
    assert m.required.cardinality() == 5


def test_direct_construction_validates_too():
    with pytest.raises(ConstraintError) as ei:
        ConstraintModel(LetterSet.from_letters("a"), LetterSet.from_letters("a"), (None,) * 5)
    assert ei.value.code == "not_disjoint"
    with pytest.raises(ConstraintError):
        ConstraintModel(LetterSet.empty(), LetterSet.empty(), ("1", None, None))


def test_known_is_stored_as_tuple():
    m = ConstraintModel(LetterSet.empty(), LetterSet.empty(), [None, "b", None])
    assert m.known == (None, "b", None)
    assert m == ConstraintModel.from_args(known="2b", word_length=3)


def test_strict_letter_tokens_raise():
    with pytest.raises(ConstraintError) as ei:
        LetterSet.from_tokens(["a", "bc"], strict=True)
    assert ei.value.code == "bad_letter_token"


def test_parse_known_length():
    assert parse_known([], 3) == (None, None, None)


def test_unconstrained_and_describe():
    m = ConstraintModel.unconstrained(6)
    assert m.is_unconstrained() and m.word_length == 6
    text = ConstraintModel.from_args("q", "a", "1c").describe()
    assert "Excluded letters:" in text and "[c____]" in text
