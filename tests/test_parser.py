import logging

import pytest

from typedconll import ConlluParser, parse_file, parse_files, parse_text
from typedconll.errors import LineSyntaxError, NormalizationError, StructureError
from typedconll.lines import CommentLine, DecimalId, EllipsisLine, RangeId, SuperTokenLine, TokenLine
from typedconll.sentences.parser import split_lines

from .conftest import word_line


class TestSample:

    def test_sentence_count(self, sample):
        sentences = parse_file(sample)
        assert len(sentences) == 3
        assert [len(sentence.tokens) for sentence in sentences] == [4, 7, 5]

    def test_header_comments(self, sample):
        first = parse_file(sample)[0]
        assert first.lines[0] == CommentLine("# newdoc id = doc1")
        assert first.metadata == {"newdoc id": "doc1", "sent_id": "s1", "text": "Don't go."}

    def test_line_types(self, sample):
        first, second, third = parse_file(sample)
        assert isinstance(first.lines[3], SuperTokenLine)
        assert first.supertokens[0].id == RangeId(1, 2)
        assert isinstance(first.lines[4], TokenLine)
        assert second.ellipses == [line for line in second if isinstance(line, EllipsisLine)]
        assert second.ellipses[0].id == DecimalId(6, 1)
        assert second.tokens[4].deps == {DecimalId(6, 1): "nsubj"}
        assert third.tokens[3].deps == {2: "obl:на:loc"}

    def test_typed_values(self, sample):
        first = parse_file(sample)[0]
        do = first.tokens[0]
        assert do.feats == {"Mood": "Ind", "VerbForm": "Fin"}
        assert do.head == 3
        assert first.tokens[2].misc == {"SpaceAfter": "No"}
        assert first.tokens[1].feats is None

    def test_no_errors(self, sample):
        parser = ConlluParser(sample)
        parser()
        assert parser.errors == []

    def test_parallel_matches_serial(self, sample):
        assert parse_file(sample, n_jobs=2) == parse_file(sample)


class TestMalformedLines:

    def test_bad_lines_are_dropped(self, malformed):
        parser = ConlluParser(malformed)
        sentences = parser()
        assert len(sentences) == 2
        assert [token.id for token in sentences[0].tokens] == [1, 3]
        assert [token.id for token in sentences[1].tokens] == [1]

    def test_errors_keep_line_numbers(self, malformed):
        parser = ConlluParser(malformed)
        parser()
        assert [error.line_number for error in parser.errors] == [3, 8]
        assert parser.errors[0].text.startswith("2\tdog")
        assert "DEPREL" in parser.errors[0].message
        assert "HEAD" in parser.errors[1].message

    def test_errors_are_logged(self, malformed, caplog):
        with caplog.at_level(logging.WARNING):
            parse_file(malformed)
        assert "Skipping line 3" in caplog.text
        assert "Skipping line 8" in caplog.text

    def test_parallel_keeps_line_numbers(self, malformed):
        parser = ConlluParser(malformed, n_jobs=2)
        parser()
        assert [error.line_number for error in parser.errors] == [3, 8]

    def test_dropped_first_token_keeps_the_sentence(self):
        text = "\n".join(["# sent_id = 1", word_line(token_id="1", deprel="BAD"), word_line(token_id="2"),
                          word_line(token_id="3")])
        parser = ConlluParser()
        sentences = parser.parse_text(text)
        assert [error.line_number for error in parser.errors] == [2]
        assert len(sentences) == 1
        assert [token.id for token in sentences[0].tokens] == [2, 3]
        assert sentences[0].metadata == {"sent_id": "1"}

    def test_strict_raises_syntax_error(self, malformed):
        with pytest.raises(LineSyntaxError) as excinfo:
            parse_file(malformed, strict=True)
        assert excinfo.value.line_number == 3
        assert excinfo.value.column == "deprel"

    def test_strict_raises_normalization_error(self):
        text = "\n".join([word_line(token_id="1", head="0"), word_line(token_id="2", head="1-2")])
        with pytest.raises(NormalizationError) as excinfo:
            parse_text(text, strict=True)
        assert excinfo.value.line_number == 2


class TestRepeatedIds:

    def test_repeated_first_id_starts_new_sentence(self):
        text = "\n".join([word_line(token_id="1", form="a"), word_line(token_id="1", form="b")])
        sentences = parse_text(text)
        assert [[token.form for token in sentence.tokens] for sentence in sentences] == [["a"], ["b"]]


class TestStructure:

    def test_comment_inside_sentence(self, comment_inside):
        with pytest.raises(StructureError) as excinfo:
            parse_file(comment_inside)
        assert excinfo.value.line_number == 5
        assert excinfo.value.token_id == 3


class TestInput:

    def test_empty_file(self, empty):
        assert parse_file(empty) == []

    def test_blank_lines_only(self):
        assert parse_text("\n \n\t\n") == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_file(str(tmp_path / "missing.conllu"))

    def test_parse_files_checks_all_paths_first(self, sample, tmp_path, caplog):
        missing = str(tmp_path / "missing.conllu")
        with caplog.at_level(logging.INFO):
            with pytest.raises(FileNotFoundError) as excinfo:
                parse_files([sample, missing])
        assert missing in str(excinfo.value)
        assert "Parsing" not in caplog.text

    def test_parse_files(self, sample, empty):
        assert [len(sentences) for sentences in parse_files([sample, empty])] == [3, 0]

    @pytest.mark.parametrize("eol", ["\n", "\r\n", "\r"])
    def test_line_endings(self, tmp_path, eol):
        path = tmp_path / "eol.conllu"
        text = eol.join(["# sent_id = 1", word_line(token_id="1"), word_line(token_id="2"), "",
                         word_line(token_id="1")])
        path.write_bytes(text.encode("utf-8"))
        sentences = parse_file(str(path))
        assert [len(sentence) for sentence in sentences] == [3, 1]

    def test_split_lines(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]
        assert split_lines("a\n") == ["a"]
        assert split_lines("a\n\n") == ["a", ""]
        assert split_lines("") == []
