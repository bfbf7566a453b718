from songbook.text import fold_case, join, trim

# ---------------------------------------------------------------------------
# trim
# ---------------------------------------------------------------------------


def test_trim_strips_both_ends():
    assert trim("  Hurt  ") == "Hurt"


def test_trim_strips_tabs_and_newlines():
    assert trim("\t\nHurt\r\n\v\f") == "Hurt"


def test_trim_keeps_interior_whitespace():
    assert trim("  Johnny   Cash ") == "Johnny   Cash"


def test_trim_all_whitespace_is_empty():
    assert trim(" \t\n ") == ""
    assert trim("") == ""


def test_trim_leaves_non_ascii_whitespace():
    # U+00A0 (no-break space) is not ASCII whitespace
    assert trim("\u00a0Hurt\u00a0") == "\u00a0Hurt\u00a0"


# ---------------------------------------------------------------------------
# fold_case
# ---------------------------------------------------------------------------


def test_fold_case_lowercases_ascii():
    assert fold_case("Rock AND Roll") == "rock and roll"


def test_fold_case_leaves_digits_and_punctuation():
    assert fold_case("AC/DC 1979!") == "ac/dc 1979!"


def test_fold_case_leaves_non_ascii_unchanged():
    assert fold_case("ÄÖÜ Beyoncé") == "ÄÖÜ beyoncé"


# ---------------------------------------------------------------------------
# join
# ---------------------------------------------------------------------------


def test_join_default_separator():
    assert join(["pop", "live"]) == "pop, live"


def test_join_empty_sequence():
    assert join([]) == ""


def test_join_single_item_has_no_separator():
    assert join(["pop"]) == "pop"


def test_join_custom_separator():
    assert join(["a", "b", "c"], "|") == "a|b|c"
