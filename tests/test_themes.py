import unicodedata

import pytest
from selfreflect.models import Entry, WordStat
from selfreflect.services.themes import (
    MAX_THEMES,
    STOP_WORDS,
    corpus,
    extract_themes,
    tokenize,
)


def make_entry(i, past="", future="", **kw):
    return Entry(id=i, date="2025-01-15", mood=5, past=past, future=future, **kw)


def counts(stats):
    return {s.text: s.value for s in stats}


def test_scenario_sunshine_ranks_first():
    entries = [
        make_entry(1, past="I am grateful for sunshine and coffee", future="I hope for peace"),
        make_entry(2, past="More sunshine please", future=""),
    ]
    stats = extract_themes(entries)
    c = counts(stats)

    assert stats[0] == WordStat(text="sunshine", value=2)
    for word in ["grateful", "coffee", "hope", "peace", "please"]:
        assert c[word] == 1
    for word in ["i", "am", "for", "and", "more"]:
        assert word not in c
    assert len(stats) == 6


def test_empty_collection_gives_empty_result():
    assert extract_themes([]) == []


def test_only_stop_words_and_short_tokens():
    entries = [make_entry(1, past="I am at it, so to be", future="we go up")]
    assert extract_themes(entries) == []


def test_reflection_and_mood_label_are_ignored():
    entries = [make_entry(1, mood_label="Radiant", reflection="mountains mountains mountains")]
    assert extract_themes(entries) == []


def test_punctuation_is_stripped_and_case_folded():
    entries = [make_entry(1, past="Coffee! coffee, COFFEE... (family)", future="family's")]
    c = counts(extract_themes(entries))
    assert c["coffee"] == 3
    assert c["family"] == 1
    assert c["familys"] == 1


def test_unicode_letters_count_as_word_characters():
    entries = [make_entry(1, past="café café naïve", future="¡Olé!")]
    c = counts(extract_themes(entries))
    assert c["café"] == 2
    assert c["naïve"] == 1
    assert c["olé"] == 1


def test_composed_and_decomposed_spellings_are_one_word():
    decomposed = unicodedata.normalize("NFD", "café")
    assert decomposed != "café"
    stats = extract_themes([make_entry(1, past=f"café {decomposed}")])
    assert stats == [WordStat(text="café", value=2)]


def test_combining_marks_stay_inside_words():
    stats = extract_themes([make_entry(1, past="परिवार परिवार!", future="शांति")])
    assert stats == [WordStat(text="परिवार", value=2), WordStat(text="शांति", value=1)]


def test_tokenize_drops_empty_tokens():
    assert tokenize("  Hello,   world \n\t again ") == ["hello", "world", "again"]


def test_corpus_joins_past_and_future_in_order():
    entries = [make_entry(1, past="a", future="b"), make_entry(2, past="c", future="")]
    assert corpus(entries) == "a b c "


def test_ties_keep_first_seen_order():
    entries = [make_entry(1, past="zebra apple", future="mango"), make_entry(2, past="apple")]
    assert [s.text for s in extract_themes(entries)] == ["apple", "zebra", "mango"]


def test_result_is_truncated_to_forty():
    words = [f"word{i:03d}" for i in range(60)]
    entries = [make_entry(1, past=" ".join(words))]
    stats = extract_themes(entries)
    assert len(stats) == MAX_THEMES
    assert [s.text for s in stats] == words[:MAX_THEMES]


def test_length_bounded_by_distinct_meaningful_words():
    entries = [make_entry(1, past="river river forest", future="the of ox")]
    stats = extract_themes(entries)
    assert len(stats) == 2
    assert len(stats) <= MAX_THEMES


def test_extraction_is_pure():
    entries = [
        make_entry(1, past="quiet morning walk with coffee", future="calm weekend"),
        make_entry(2, past="coffee with friends", future="more walks"),
    ]
    first = extract_themes(entries)
    second = extract_themes(list(entries))
    assert first == second
    assert [s.to_dict() for s in first] == [s.to_dict() for s in second]


def test_adding_occurrence_never_lowers_count_or_rank():
    entries = [
        make_entry(1, past="garden garden books", future="travel"),
        make_entry(2, past="books music", future="garden"),
    ]
    before = extract_themes(entries)
    after = extract_themes(entries + [make_entry(3, past="music")])

    before_c, after_c = counts(before), counts(after)
    assert after_c["music"] >= before_c["music"]

    rank = {s.text: i for i, s in enumerate(after)}
    for word, value in after_c.items():
        if value < after_c["music"]:
            assert rank["music"] < rank[word]


@pytest.mark.parametrize("word", sorted(w for w in STOP_WORDS if len(w) > 2))
def test_stop_words_never_appear(word):
    entries = [make_entry(1, past=" ".join([word] * 10), future="sunrise")]
    assert [s.text for s in extract_themes(entries)] == ["sunrise"]
