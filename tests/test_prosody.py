from ghost_note.phonetics import analyze_line, extract_stress_from_phonemes, tokenize_line


def test_extract_stress_from_phonemes():
    assert extract_stress_from_phonemes(["HH", "AH0", "L", "OW1"]) == "01"
    assert extract_stress_from_phonemes(["AH2", "N", "D", "ER0", "S", "T", "AE1", "N", "D"]) == "201"
    assert extract_stress_from_phonemes(["HH", "M"]) == ""
    assert extract_stress_from_phonemes([]) == ""


def test_tokenize_line_keeps_inner_apostrophes():
    tokens, normalized = tokenize_line("'Don't' stop, BELIEVIN'!")

    assert tokens == ["Don't", "stop", "BELIEVIN"]
    assert normalized == ["don't", "stop", "believin"]


def test_tokenize_line_without_words():
    assert tokenize_line("") == ([], [])
    assert tokenize_line("123 !!! ...") == ([], [])


def test_analyze_line_mixes_dictionary_and_estimates(sample_dictionary):
    line = analyze_line("Hello cat, the river flobnar", sample_dictionary)

    assert [word.word for word in line.words] == ["Hello", "cat", "the", "river", "flobnar"]
    assert line.stress_pattern == "01101010"
    assert line.syllable_count == 8
    assert line.unknown_words == ["flobnar"]
    assert line.word_boundaries == [0, 2, 3, 4, 6]


def test_line_pattern_length_matches_syllable_count(sample_dictionary):
    for text in ("Understand the nation", "hmm hmm", "", "!!!", "a beautiful education"):
        line = analyze_line(text, sample_dictionary)
        assert len(line.stress_pattern) == line.syllable_count


def test_dictionary_secondary_stress_survives_line_analysis(sample_dictionary):
    assert "2" in analyze_line("understand", sample_dictionary).stress_pattern
    assert "2" not in analyze_line("flobnarian", sample_dictionary).stress_pattern
