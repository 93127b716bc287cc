import pytest

from farmrun import strutil


def test_strlen_empty_and_additive():
    assert strutil.strlen("") == 0
    assert strutil.strlen("ab" + "cde") == strutil.strlen("ab") + strutil.strlen("cde")


def test_strdup_equal_copy():
    assert strutil.strdup("farm") == "farm"


def test_strdup_rejects_non_string():
    with pytest.raises(TypeError):
        strutil.strdup(None)


def test_strchr_finds_first():
    text = "banana"
    index = strutil.strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strutil.strchr("abc", "z") is None
    assert strutil.strchr("abc", "\0") == len("abc")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strutil.strchr("abc", "ab")


def test_strrchr_finds_last():
    text = "banana"
    index = strutil.strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1 :]


def test_strrchr_missing_and_terminator():
    assert strutil.strrchr("abc", "q") is None
    assert strutil.strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_and_limited():
    assert strutil.strncmp("abc", "abc", 10) == 0
    assert strutil.strncmp("abcx", "abcy", 3) == 0
    assert strutil.strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strutil.strncmp("abc", "abd", 3) < 0
    assert strutil.strncmp("abd", "abc", 3) > 0
    assert strutil.strncmp("ab", "abc", 5) == -strutil.strncmp("abc", "ab", 5)


def test_strncmp_shorter_string_ends_with_zero():
    assert strutil.strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_length():
    haystack = "lorem ipsum dolor"
    index = strutil.strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index : index + len("ipsum")] == "ipsum"


def test_strnstr_needle_past_length():
    haystack = "lorem ipsum"
    assert strutil.strnstr(haystack, "ipsum", haystack.index("ipsum") + 2) is None


def test_strnstr_empty_needle():
    assert strutil.strnstr("anything", "", 0) == 0


def test_strlcpy_fits():
    assert strutil.strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    copied, total = strutil.strlcpy("hello", 3)
    assert copied == "hello"[:2]
    assert total == len("hello")


def test_strlcpy_zero_size():
    assert strutil.strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    assert strutil.strlcat("foo", "bar", 20) == ("foobar", len("foobar"))


def test_strlcat_truncates_keeping_terminator_slot():
    result, total = strutil.strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foobar")


def test_strlcat_size_not_above_dst():
    result, total = strutil.strlcat("foo", "bar", 2)
    assert result == "foo"
    assert total == 2 + len("bar")


def test_substr_basic_and_clamped():
    assert strutil.substr("carrot", 1, 3) == "carrot"[1:4]
    assert strutil.substr("carrot", 2, 100) == "carrot"[2:]


def test_substr_start_past_end():
    assert strutil.substr("pig", 3, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        strutil.substr("pig", -1, 2)


def test_strjoin_roundtrip_with_substr():
    joined = strutil.strjoin("farm", "house")
    assert strutil.substr(joined, 0, len("farm")) == "farm"
    assert strutil.substr(joined, len("farm"), len("house")) == "house"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strutil.strjoin("a", None)


def test_strtrim_both_ends():
    assert strutil.strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_or_nothing():
    assert strutil.strtrim("aaaa", "a") == ""
    assert strutil.strtrim("  keep  ", "") == "  keep  "


def test_split_drops_empty_pieces():
    assert strutil.split(",,one,,two,", ",") == ["one", "two"]


def test_split_no_words():
    assert strutil.split(",,,", ",") == []
    assert strutil.split("", ",") == []


def test_split_join_roundtrip():
    words = ["1111", "1PC1", "1E01"]
    assert strutil.split("\n".join(words) + "\n", "\n") == words


def test_split_bad_separator():
    with pytest.raises(ValueError):
        strutil.split("a b", "")


def test_strmapi_uses_index():
    result = strutil.strmapi("abc", lambda i, ch: ch * (i + 1))
    assert result == "a" + "bb" + "ccc"


def test_strmapi_identity():
    assert strutil.strmapi("same", lambda i, ch: ch) == "same"


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = strutil.striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result is chars
    assert "".join(chars) == "AbCd"


def test_striteri_none_leaves_unchanged():
    chars = list("keep")
    strutil.striteri(chars, lambda i, ch: None)
    assert chars == list("keep")