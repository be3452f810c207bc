import pytest
from loguru import logger

from wordfilter import FilterOptions, Match, ProfanityFilter, canonical_form, mask


def test_basic_detection():
    f = ProfanityFilter(["badword", "verybad"])
    text = "This is a badword in the text."
    assert len(f.find(text)) == 1
    assert f.contains(text)


def test_detects_simple_words_and_positions():
    f = ProfanityFilter(["bad", "evil"])
    text = "This is bad and very evil indeed."
    m = f.find(text)
    assert sorted(x.word for x in m) == ["bad", "evil"]
    bad = next(x for x in m if x.word == "bad")
    evil = next(x for x in m if x.word == "evil")
    assert text[bad.start:bad.end] == "bad"
    assert text[evil.start:evil.end] == "evil"


@pytest.mark.parametrize(
    "txt",
    [
        "s7up!d",
        "$tup!d",
        "stup1d",
        "s t u p i d",
        "s.t.u.p.i.d",
        "ＳＴＵＰＩＤ",
        "ѕтupіd",
        "s\nt\nu\np\ni\nd",
    ],
)
def test_evasion_variants_detected(txt):
    f = ProfanityFilter(["stupid"])
    assert f.is_profane(txt)


def test_squashes_repeats_during_detection():
    f = ProfanityFilter(["bad"])
    assert len(f.find("baaad baddd baaaad")) >= 1


def test_stretched_pattern_matches_stretched_text():
    f = ProfanityFilter(["baad"])
    assert f.contains("baaaaaaad")


def test_false_positive():
    f = ProfanityFilter(["geci"])
    assert f.find("legend") == []


def test_overlap_completeness():
    f = ProfanityFilter(["bad", "badword", "word"])
    assert {m.word for m in f.find("badword")} == {"bad", "badword", "word"}


def test_multiple_occurrences():
    f = ProfanityFilter(["bad", "badword", "word"])
    m = f.find("badword and bad word")
    assert {"bad", "word", "badword"} <= {x.word for x in m}
    assert sum(1 for x in m if x.word == "bad") >= 2


def test_case_insensitive_and_round_trip():
    f = ProfanityFilter(["bAd"])
    text = "AAA bad BBB BaD ccc"
    m = f.find(text)
    assert len(m) >= 2
    for match in m:
        assert canonical_form(text[match.start:match.end]) == "bad"


@pytest.mark.parametrize(
    "text",
    ["", "clean text", "b.a.d", "BAD!!!", "xx bad", "😀bad😀", "baaaaad", "a bad, ugly, evil day"],
)
def test_match_bounds(text):
    f = ProfanityFilter(["bad", "ugly", "evil", "ad"])
    for m in f.find(text):
        assert 0 <= m.start < m.end <= len(text)


def test_empty_wordlist_and_text():
    assert ProfanityFilter([]).find("anything") == []
    assert not ProfanityFilter([]).is_profane("anything")
    assert ProfanityFilter(["bad"]).find("") == []


def test_override_containment():
    f = ProfanityFilter(["bad", "ugly"], ["notbad", "uglyduckling"])
    assert f.find("That was not bad at all.") == []
    assert f.find("The ugly duckling is a nice story.") == []
    m = f.find("A bad apple and an ugly truth.")
    assert sorted(x.word for x in m) == ["bad", "ugly"]


def test_override_written_with_spaces():
    f = ProfanityFilter(["bad"], ["not bad"])
    assert f.find("not bad") == []
    assert f.find("so bad") != []


def test_override_inside_larger_span():
    f = ProfanityFilter(["bad"], ["verybadindeed"])
    assert f.find("This is very bad indeed.") == []


def test_override_partial_cover_keeps_match():
    f = ProfanityFilter(["ugly"], ["prettyug"])
    m = f.find("This is pretty ugly actually")
    assert any(x.word == "ugly" for x in m)


def test_word_boundary_drops_compounds():
    f = ProfanityFilter(["cat"], options={"wordBoundary": True})
    assert f.find("concatenate") == []
    assert [m.span for m in f.find("the cat sat")] == [(4, 7)]
    assert f.contains("cat.")


def test_allow_compound_keeps_compounds():
    f = ProfanityFilter(["cat"], options=FilterOptions(word_boundary=True, allow_compound=True))
    m = f.find("concatenate")
    assert m == [Match("cat", 3, 6)]


def test_boundary_mode_requires_exact_round_trip():
    loose = ProfanityFilter(["ab"])
    strict = ProfanityFilter(["ab"], options={"word_boundary": True, "allow_compound": True})
    # the match starts on the second "a" of a squashed run
    assert loose.contains("aaab")
    assert not strict.contains("aaab")


def test_censor_keeps_punctuation():
    f = ProfanityFilter(["evil"])
    assert f.censor("very evil!") == "very ****!"


def test_censor_custom_mask():
    f = ProfanityFilter(["bad"])
    assert f.censor("bad example", "#").startswith("###")


def test_censor_leaves_clean_text_untouched():
    f = ProfanityFilter(["bad"])
    assert f.censor("all good here") == "all good here"


def test_censor_separators_inside_span():
    f = ProfanityFilter(["bad"])
    assert f.censor("b.a.d") == "*.*.*"


def test_censor_overlapping_matches():
    f = ProfanityFilter(["bad", "adw", "dwo", "word"])
    assert f.censor("badword", "#") == "#######"


def test_censor_rejects_long_mask():
    with pytest.raises(ValueError):
        ProfanityFilter(["bad"]).censor("bad", "**")


def test_mask_helper_matches_censor():
    f = ProfanityFilter(["evil"])
    text = "so evil, so very evil"
    assert mask(text, f.find(text)) == f.censor(text)
    assert mask(text, []) == text


def test_invalid_word_lists():
    with pytest.raises(TypeError):
        ProfanityFilter("bad")
    with pytest.raises(TypeError):
        ProfanityFilter(["bad", 3])
    with pytest.raises(TypeError):
        ProfanityFilter(["bad"], [None])
    with pytest.raises(TypeError):
        ProfanityFilter(["bad"], options={"unknown": True})


def test_words_are_exposed_canonical():
    f = ProfanityFilter(["B@D", "bad", "evil"], ["Not Bad"])
    assert f.words == ("bad", "evil")
    assert f.override_words == ("notbad",)


def test_match_to_dict():
    m = ProfanityFilter(["evil"]).find("evil")[0]
    assert m.to_dict() == {"word": "evil", "start": 0, "end": 4}


def test_log_profanity_emits_line():
    lines = []
    sink_id = logger.add(lines.append, level="INFO", format="{message}")
    try:
        ProfanityFilter(["evil"], options={"logProfanity": True}).find("so evil")
        ProfanityFilter(["evil"]).find("so evil")
    finally:
        logger.remove(sink_id)
    assert sum(1 for ln in lines if "Profanity detected" in ln) == 1


def test_long_input_still_finds_trailing_word():
    f = ProfanityFilter(["bad", "evil", "stupid", "ugly", "nasty", "gross"])
    paragraph = "This is a neutral paragraph without issues. "
    text = paragraph * 200 + "But here is a bad one at the end."
    m = f.find(text)
    assert any(x.word == "bad" for x in m)
    assert max(x.start for x in m) > len(paragraph) * 200


def test_greek_final_sigma_pattern_matches_itself():
    assert ProfanityFilter(["ΒΑΣ"]).contains("ΒΑΣ")
    assert [m.span for m in ProfanityFilter(["bao"]).find("ΒΑΣ")] == [(0, 3)]


def test_emoji_splits_runs_like_punctuation():
    f = ProfanityFilter(["ab"], options={"word_boundary": True, "allow_compound": True})
    assert f.find("aa.ab") == [Match("ab", 3, 5)]
    assert f.find("aa\U0001F600ab") == [Match("ab", 3, 5)]


@pytest.mark.parametrize("value", ["false", 0, 1, None])
def test_options_require_real_booleans(value):
    with pytest.raises(TypeError):
        ProfanityFilter(["bad"], options={"wordBoundary": value})
