import pytest

from unirest import CloneMode, FileField, RequestSpec
from unirest._utils import canonical_header_key


class TestCanonicalHeaderKey:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("content-type", "Content-Type"),
            ("CONTENT-TYPE", "Content-Type"),
            ("x-request-id", "X-Request-Id"),
            ("accept", "Accept"),
            ("bad key", "bad key"),
            ("", ""),
        ],
    )
    def test_canonical_header_key(self, key: str, expected: str) -> None:
        assert canonical_header_key(key) == expected


class TestRequestSpec:
    def test_defaults(self) -> None:
        spec = RequestSpec()

        assert spec.method == "GET"
        assert spec.target == ""
        assert spec.body is None
        assert spec.basic_auth == ("", "")
        assert spec.query == {} and spec.headers == {} and spec.form == {}
        assert spec.files == []

    def test_copy_is_deep_for_mappings(self) -> None:
        spec = RequestSpec(
            query={"q": ["1"]},
            headers={"Accept": ["a"]},
            form={"f": ["x"]},
            files=[FileField("file", "a.txt", b"a")],
            body=b"body",
        )

        copied = spec.copy()
        copied.query["q"].append("2")
        copied.headers["Accept"].append("b")
        copied.form["g"] = ["y"]
        copied.files.append(FileField("file", "b.txt", b"b"))

        assert spec.query == {"q": ["1"]}
        assert spec.headers == {"Accept": ["a"]}
        assert spec.form == {"f": ["x"]}
        assert spec.files == [FileField("file", "a.txt", b"a")]
        assert copied.body is spec.body

    def test_header_helpers_are_case_insensitive(self) -> None:
        spec = RequestSpec()

        spec.add_header("x-token", "1")
        spec.add_header("X-TOKEN", "2")
        assert spec.headers == {"X-Token": ["1", "2"]}

        spec.set_header("content-type", "text/plain")
        spec.del_header("Content-type")
        assert "Content-Type" not in spec.headers

        # deleting a missing header is a no-op
        spec.del_header("Content-Type")


class TestCloneMode:
    def test_values(self) -> None:
        assert CloneMode("shared") is CloneMode.SHARED
        assert CloneMode("exclusive") is CloneMode.EXCLUSIVE
