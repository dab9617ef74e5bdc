import os

import pytest

from book_bench.errors import JobError
from book_bench.jobs import process_file
from book_bench.transform import slow_uppercase


def test_scenario(make_book, read_lines, tmp_path):
    src = make_book("book.txt", ["abc", "Déjà vu", ""])
    dst = tmp_path / "book_OUT.txt"

    report = process_file(src, dst)

    assert read_lines(dst) == ["ABC", "DÉJÀ VU", ""]
    assert report.line_count == 3
    assert report.input_path == src
    assert report.output_path == dst
    assert report.duration >= 0
    assert report.cpu_time >= 0
    assert report.label == "book.txt -> book_OUT.txt"


def test_line_terminator_is_platform_linesep(make_book, tmp_path):
    src = make_book("book.txt", ["a", "b"])
    dst = tmp_path / "out.txt"
    process_file(src, dst)
    assert dst.read_bytes() == f"A{os.linesep}B{os.linesep}".encode("utf-8")


def test_line_count_and_order(make_book, read_lines, tmp_path):
    lines = [f"line {i}: the quick brown fox – naïve café" for i in range(500)]
    src = make_book("book.txt", lines)
    dst = tmp_path / "out.txt"

    report = process_file(src, dst)

    assert report.line_count == len(lines)
    assert read_lines(dst) == [slow_uppercase(line) for line in lines]


def test_mixed_line_endings_and_missing_final_newline(read_lines, tmp_path):
    src = tmp_path / "book.txt"
    src.write_bytes(b"one\r\ntwo\rthree\nfour")
    dst = tmp_path / "out.txt"

    report = process_file(src, dst)

    assert report.line_count == 4
    assert read_lines(dst) == ["ONE", "TWO", "THREE", "FOUR"]


def test_empty_input(make_book, tmp_path):
    src = make_book("empty.txt", [])
    dst = tmp_path / "out.txt"
    report = process_file(src, dst)
    assert report.line_count == 0
    assert dst.read_text(encoding="utf-8") == ""


def test_truncates_existing_output(make_book, read_lines, tmp_path):
    src = make_book("book.txt", ["x"])
    dst = tmp_path / "out.txt"
    dst.write_text("stale\nstale\nstale\n", encoding="utf-8")
    process_file(src, dst)
    assert read_lines(dst) == ["X"]


def test_input_untouched(make_book, tmp_path):
    src = make_book("book.txt", ["abc", "def"])
    before = src.read_bytes()
    process_file(src, tmp_path / "out.txt")
    assert src.read_bytes() == before


def test_missing_input(tmp_path):
    with pytest.raises(JobError) as exc_info:
        process_file(tmp_path / "nope.txt", tmp_path / "out.txt")
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert exc_info.value.input_path == tmp_path / "nope.txt"


def test_missing_output_dir(make_book, tmp_path):
    src = make_book("book.txt", ["abc"])
    with pytest.raises(JobError):
        process_file(src, tmp_path / "no" / "such" / "dir" / "out.txt")


def test_invalid_utf8(tmp_path):
    src = tmp_path / "book.txt"
    src.write_bytes(b"fine\n\xff\xfe broken\n")
    with pytest.raises(JobError) as exc_info:
        process_file(src, tmp_path / "out.txt")
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
