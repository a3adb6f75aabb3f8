import math

from src.models.line import ManuscriptLine, decorate_lines
from src.models.section import SectionRange


def test_heading_level_counts_leading_hashes():
    assert ManuscriptLine("## Exercises", 0).heading_level == 2
    assert ManuscriptLine("####Title", 0).heading_level == 4


def test_plain_line_has_infinite_heading_level():
    line = ManuscriptLine("Some prose about Exercises", 3)

    assert line.heading_level == math.inf
    assert not line.is_heading


def test_indented_hash_is_not_a_heading():
    assert not ManuscriptLine("  ## Exercises", 0).is_heading


def test_content_strips_heading_marker_and_whitespace():
    assert ManuscriptLine("###   Exercise 4: Foo  ", 0).content == "Exercise 4: Foo"
    assert ManuscriptLine("plain text", 0).content == "plain text"


def test_heading_level_tracks_modified_text():
    line = ManuscriptLine("## Exercises", 0)

    returned = line.modify(lambda text: "#" + text)

    assert returned is line
    assert line.heading_level == 3
    assert line.index == 0


def test_decorate_lines_keeps_trailing_empty_line():
    lines = decorate_lines("# Title\nbody\n")

    assert [line.text for line in lines] == ["# Title", "body", ""]
    assert [line.index for line in lines] == [0, 1, 2]


def test_section_range_membership():
    section = SectionRange(heading_index=2, content_start=3, content_end=5)

    assert list(section.indices()) == [3, 4, 5]
    assert 3 in section and 5 in section
    assert 2 not in section and 6 not in section
    assert not section.is_empty


def test_section_range_empty_when_terminated_immediately():
    section = SectionRange(heading_index=4, content_start=5, content_end=4)

    assert section.is_empty
    assert list(section.indices()) == []
