import pytest

from unirest import FileField
from unirest._utils import encode_values, multipart_files


class TestEncodeValues:
    def test_sorted_keys_and_ordered_values(self) -> None:
        assert encode_values({"b": ["2"], "a": ["x y", "1"]}) == "a=x+y&a=1&b=2"

    def test_empty(self) -> None:
        assert encode_values({}) == ""

    def test_escaping(self) -> None:
        assert encode_values({"k&": ["ü=1"]}) == "k%26=%C3%BC%3D1"


class TestMultipartFiles:
    def test_files_before_fields(self) -> None:
        entries = multipart_files(
            [FileField("f", "f.txt", b"F"), FileField("f", "g.txt", b"G")],
            {"z": ["1", "2"], "a": ["3"]},
        )

        assert entries == [
            ("f", ("f.txt", b"F", "application/octet-stream")),
            ("f", ("g.txt", b"G", "application/octet-stream")),
            ("z", (None, b"1")),
            ("z", (None, b"2")),
            ("a", (None, b"3")),
        ]

    def test_field_values_are_utf8(self) -> None:
        assert multipart_files([], {"name": ["héllo"]}) == [
            ("name", (None, "héllo".encode("utf-8")))
        ]

    def test_empty(self) -> None:
        assert multipart_files([], {}) == []

    def test_non_text_field_value(self) -> None:
        with pytest.raises(TypeError, match="form field 'n'"):
            multipart_files([], {"n": [1]})  # type: ignore[list-item]
