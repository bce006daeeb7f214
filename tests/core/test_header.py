import io

import pytest

from seqslice.core.header import HeaderInfo, is_header_line, scan_header
from seqslice.errors import InvalidFormat


def test_single_header_line():
    info = scan_header(io.BytesIO(b">seq1\nACGT\nAC\n"))
    assert info.header_length == 6
    assert info.line_width == 4
    assert info.terminator_width == 1
    assert info.header_lines == (">seq1",)


def test_header_and_comment_lines_are_accumulated():
    data = b">chr1 assembled\n;made by hand\n;\nACGTACGT\n"
    info = scan_header(io.BytesIO(data))
    assert info.header_length == len(b">chr1 assembled\n;made by hand\n;\n")
    assert info.line_width == 8
    assert info.name == "chr1"
    assert info.description == "chr1 assembled"


def test_no_header_lines():
    info = scan_header(io.BytesIO(b"ACGT\nACGT\n"))
    assert info.header_length == 0
    assert info.line_width == 4
    assert info.name is None


def test_crlf_terminator_width():
    info = scan_header(io.BytesIO(b">seq\r\nACGT\r\nAC\r\n"))
    assert info.header_length == 6
    assert info.line_width == 4
    assert info.terminator_width == 2
    assert info.header_lines == (">seq",)


def test_stray_whitespace_is_not_counted_in_width():
    info = scan_header(io.BytesIO(b">s\nAC GT \nAC\n"))
    assert info.line_width == 4
    assert info.terminator_width == 3


def test_data_line_without_terminator():
    info = scan_header(io.BytesIO(b">s\nACG"))
    assert info.line_width == 3
    assert info.terminator_width == 1


def test_scanning_stops_after_first_data_line():
    stream = io.BytesIO(b">s\nACGT\nTTTT\n")
    scan_header(stream)
    assert stream.tell() == len(b">s\nACGT\n")


def test_empty_file_is_invalid():
    with pytest.raises(InvalidFormat, match="empty"):
        scan_header(io.BytesIO(b""))


def test_header_only_file_is_invalid():
    with pytest.raises(InvalidFormat, match="no sequence data line"):
        scan_header(io.BytesIO(b">seq1\n;comment\n"))


@pytest.mark.parametrize("first_data", [b"\n", b"   \n", b"1234\n", b"\r\n"])
def test_first_data_line_without_sequence_is_invalid(first_data):
    with pytest.raises(InvalidFormat):
        scan_header(io.BytesIO(b">seq1\n" + first_data + b"ACGT\n"))


def test_single_character_lines_are_safe():
    assert not is_header_line(b"")
    assert is_header_line(b">")
    assert is_header_line(b";")
    assert not is_header_line(b"A")
    info = scan_header(io.BytesIO(b">\nA\nC\n"))
    assert info.header_length == 2
    assert info.line_width == 1


def test_header_info_is_frozen():
    info = HeaderInfo(header_length=6, line_width=4)
    with pytest.raises(AttributeError):
        info.line_width = 5  # type: ignore[misc]
