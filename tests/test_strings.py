import pytest

from alumgame.strings import (
    count_words,
    sort_argv,
    strchr,
    strcmp,
    strequ,
    strjoin,
    strlcat,
    strmap,
    strmapi,
    strncmp,
    strnequ,
    strnstr,
    strrchr,
    strsplit,
    strstr,
    strsub,
    strtrim,
)


def test_strcmp_equal_is_zero():
    assert strcmp("hello", "hello") == 0
    assert strcmp("", "") == 0


def test_strcmp_sign_and_antisymmetry():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("abc", "abd") == -strcmp("abd", "abc")


def test_strcmp_prefix_counts_end_as_zero():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("x", "y", 0) == 0


def test_strequ_and_none_handling():
    assert strequ("1", "1") is True
    assert strequ("1", "2") is False
    assert strequ(None, None) is True
    assert strequ("a", None) is False


def test_strnequ():
    assert strnequ("hello", "help", 3) is True
    assert strnequ("hello", "help", 4) is False
    assert strnequ(None, None, 5) is True
    assert strnequ(None, "x", 1) is False


def test_strstr():
    assert strstr("haystack", "stack") == 3
    assert strstr("haystack", "") == 0
    assert strstr("haystack", "needle") is None


def test_strnstr_respects_length():
    big = "lorem ipsum"
    assert strnstr(big, "ipsum", len(big)) == big.index("ipsum")
    assert strnstr(big, "ipsum", len(big) - 1) is None
    assert strnstr(big, "", 0) == 0


def test_strchr_and_strrchr():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strrchr(s, "a") == s.rindex("a")
    assert strchr(s, "z") is None
    assert strrchr(s, ord("n")) == s.rindex("n")


def test_strchr_nul_matches_end():
    assert strchr("abc", 0) == len("abc")
    assert strrchr("abc", 256) == len("abc")


def test_strchr_negative_code_wraps():
    assert strchr("a\u00ffb", -1) == 1


def test_strsplit_drops_empty_words():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]
    assert strsplit("****", "*") == []


def test_strsplit_bad_separator():
    with pytest.raises(ValueError):
        strsplit("a b", "ab")


def test_count_words_matches_split():
    for text in ["  one two  three ", "x", "   ", "a  b"]:
        assert count_words(text, " ") == len(strsplit(text, " "))
    assert count_words(None, " ") == 0


def test_strtrim():
    assert strtrim(" \t\n hello world \n\t ") == "hello world"
    assert strtrim(" \t\n") == ""
    assert strtrim("\vkeep\v") == "\vkeep\v"


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strsub():
    assert strsub("abcdef", 2, 3) == "cde"
    assert strsub("abcdef", 0, 0) == ""
    with pytest.raises(ValueError):
        strsub("abc", 2, 5)


def test_strmap_and_strmapi():
    assert strmap("abc", str.upper) == "ABC"
    assert strmapi("abc", lambda i, c: c * (i + 1)) == "abbccc"


def test_strlcat_fits():
    dst, total = strlcat("abc", "def", 10)
    assert dst == "abcdef"
    assert total == len("abc") + len("def")


def test_strlcat_truncates():
    dst, total = strlcat("abc", "defgh", 6)
    assert len(dst) == 6 - 1
    assert dst == "abcde"
    assert total == len("abc") + len("defgh")


def test_strlcat_size_too_small():
    dst, total = strlcat("abcdef", "xyz", 3)
    assert dst == "abcdef"
    assert total == 3 + len("xyz")


def test_sort_argv_orders_by_strcmp():
    args = ["pear", "Apple", "apple", "banana", "ban"]
    result = sort_argv(args)
    assert sorted(result) == sorted(args)
    for a, b in zip(result, result[1:]):
        assert strcmp(a, b) <= 0
    assert result[0] == "Apple"