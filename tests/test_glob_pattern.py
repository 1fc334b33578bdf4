"""
Test for the glob_pattern module's pattern matching functionality.
"""

import pytest

from edconf import glob_pattern as glob
from edconf.errors import PatternError
from edconf.glob_pattern import NumericRange


def test_asterisk_does_not_cross_separators():
    """Test simple * pattern."""
    assert glob.pattern_matches("/p", "a/*.c", "/p/a/main.c")
    assert not glob.pattern_matches("/p", "a/*.c", "/p/a/b/main.c")
    assert not glob.pattern_matches("/p", "a/*.c", "/p/a/main.h")


def test_pattern_without_slash_matches_at_any_depth():
    """Patterns without / match the file name anywhere below the base dir."""
    assert glob.pattern_matches("/proj/", "*.txt", "/proj/readme.txt")
    assert glob.pattern_matches("/proj/", "*.txt", "/proj/sub/readme.txt")
    assert glob.pattern_matches("/proj/", "*.txt", "/proj/a/b/c/readme.txt")
    assert not glob.pattern_matches("/proj/", "*.txt", "/other/readme.txt")
    assert not glob.pattern_matches("/proj/", "*.txt", "/proj/readme.md")


def test_extra_directories_do_not_change_result():
    for pattern in ["*.py", "Makefile", "file?.c", "*.{js,ts}", "v{1..3}.txt"]:
        for name in ["a.py", "Makefile", "file1.c", "x.ts", "v2.txt", "v4.txt", "z.rb"]:
            shallow = glob.pattern_matches("/base", pattern, f"/base/{name}")
            deep = glob.pattern_matches("/base", pattern, f"/base/x/y/{name}")
            assert shallow == deep, (pattern, name)


def test_pattern_with_slash_is_relative_to_base_dir():
    assert glob.pattern_matches("/p", "src/*.c", "/p/src/a.c")
    assert not glob.pattern_matches("/p", "src/*.c", "/p/lib/src/a.c")

    # A leading slash means the same thing
    assert glob.pattern_matches("/p", "/src/*.c", "/p/src/a.c")
    assert not glob.pattern_matches("/p", "/src/*.c", "/p/lib/src/a.c")


def test_question_mark():
    """Test ? pattern; it matches any single character."""
    assert glob.pattern_matches("/p", "file?.txt", "/p/file1.txt")
    assert glob.pattern_matches("/p", "file?.txt", "/p/fileA.txt")
    assert not glob.pattern_matches("/p", "file?.txt", "/p/file12.txt")
    assert not glob.pattern_matches("/p", "file?.txt", "/p/file.txt")
    assert glob.pattern_matches("/p", "a?b", "/p/a/b")


def test_character_class():
    """Test character class patterns."""
    assert glob.pattern_matches("/p", "file[123].txt", "/p/file1.txt")
    assert glob.pattern_matches("/p", "file[123].txt", "/p/file2.txt")
    assert not glob.pattern_matches("/p", "file[123].txt", "/p/file4.txt")

    assert glob.pattern_matches("/p", "file[!123].txt", "/p/file4.txt")
    assert not glob.pattern_matches("/p", "file[!123].txt", "/p/file1.txt")
    assert glob.pattern_matches("/p", "file[^123].txt", "/p/fileA.txt")
    assert not glob.pattern_matches("/p", "file[^123].txt", "/p/file3.txt")

    assert glob.pattern_matches("/p", "file[a-z].txt", "/p/filez.txt")
    assert not glob.pattern_matches("/p", "file[a-z].txt", "/p/file1.txt")


def test_character_class_never_spans_separator():
    # The [ becomes a literal, the rest is matched as written
    assert glob.pattern_matches("/p", "a[b/]c", "/p/a[b/]c")
    assert not glob.pattern_matches("/p", "a[b/]c", "/p/abc")


def test_unclosed_bracket_is_literal():
    assert glob.pattern_matches("/p", "file[.txt", "/p/file[.txt")
    assert not glob.pattern_matches("/p", "file[.txt", "/p/filea.txt")


def test_braces_alternation():
    """Test {s1,s2,s3} alternation."""
    assert glob.pattern_matches("/p", "*.{txt,py}", "/p/file.txt")
    assert glob.pattern_matches("/p", "*.{txt,py}", "/p/file.py")
    assert not glob.pattern_matches("/p", "*.{txt,py}", "/p/file.md")

    # Spaces after a comma are skipped
    assert glob.pattern_matches("/p", "*.{txt, py}", "/p/file.py")


def test_nested_braces():
    assert glob.pattern_matches("/p", "file{a,{b,c}}.txt", "/p/filea.txt")
    assert glob.pattern_matches("/p", "file{a,{b,c}}.txt", "/p/fileb.txt")
    assert glob.pattern_matches("/p", "file{a,{b,c}}.txt", "/p/filec.txt")
    assert not glob.pattern_matches("/p", "file{a,{b,c}}.txt", "/p/filed.txt")


def test_alternatives_are_globs():
    assert glob.pattern_matches("/p", "{*.c,lib/*.h}", "/p/main.c")
    assert glob.pattern_matches("/p", "{*.c,lib/*.h}", "/p/lib/util.h")
    # The pattern contains a / so it is anchored to the base dir
    assert not glob.pattern_matches("/p", "{*.c,lib/*.h}", "/p/x/main.c")


def test_unbalanced_braces_are_literal():
    assert glob.pattern_matches("/p", "{a,b", "/p/{a,b")
    assert not glob.pattern_matches("/p", "{a,b", "/p/a")
    assert glob.pattern_matches("/p", "a,b}", "/p/a,b}")
    assert not glob.pattern_matches("/p", "a,b}", "/p/a")
    assert glob.pattern_matches("/p", "{a,b}}", "/p/{a,b}}")
    assert not glob.pattern_matches("/p", "{a,b}}", "/p/a}")


def test_single_choice_braces_are_literal():
    assert glob.pattern_matches("/p", "{single}.b", "/p/{single}.b")
    assert not glob.pattern_matches("/p", "{single}.b", "/p/single.b")
    assert glob.pattern_matches("/p", "{}.b", "/p/{}.b")


def test_numeric_range():
    """{num1..num2} should match any integer in the range."""
    assert glob.pattern_matches("/p", "file{1..3}.txt", "/p/file1.txt")
    assert glob.pattern_matches("/p", "file{1..3}.txt", "/p/file3.txt")
    assert not glob.pattern_matches("/p", "file{1..3}.txt", "/p/file4.txt")
    assert not glob.pattern_matches("/p", "file{1..3}.txt", "/p/file0.txt")
    assert not glob.pattern_matches("/p", "file{1..3}.txt", "/p/filea.txt")


def test_numeric_range_rejects_leading_zero():
    assert glob.pattern_matches("/p", "{1..10}", "/p/7")
    assert glob.pattern_matches("/p", "{1..10}", "/p/10")
    assert not glob.pattern_matches("/p", "{1..10}", "/p/007")
    assert not glob.pattern_matches("/p", "{1..10}", "/p/07")


def test_multiple_numeric_ranges():
    pattern = "v{1..2}.{10..20}"
    assert glob.pattern_matches("/p", pattern, "/p/v1.15")
    assert not glob.pattern_matches("/p", pattern, "/p/v3.15")
    assert not glob.pattern_matches("/p", pattern, "/p/v1.25")


def test_reversed_numeric_range_never_matches():
    assert not glob.pattern_matches("/p", "{5..1}", "/p/3")


def test_non_numeric_range_is_literal():
    assert glob.pattern_matches("/p", "{a..b}", "/p/{a..b}")
    assert not glob.pattern_matches("/p", "{a..b}", "/p/a")


def test_escapes():
    assert glob.pattern_matches("/p", "\\*.txt", "/p/*.txt")
    assert not glob.pattern_matches("/p", "\\*.txt", "/p/a.txt")
    assert glob.pattern_matches("/p", "\\{a,b\\}", "/p/{a,b}")
    assert not glob.pattern_matches("/p", "\\{a,b\\}", "/p/a")
    assert glob.pattern_matches("/p", "a\\[b]", "/p/a[b]")
    assert glob.pattern_matches("/p", "\\?", "/p/?")
    assert not glob.pattern_matches("/p", "\\?", "/p/a")


def test_double_asterisk():
    assert glob.pattern_matches("/p", "a/**", "/p/a/b/c.txt")
    assert glob.pattern_matches("/p", "a/**/b.txt", "/p/a/b.txt")
    assert glob.pattern_matches("/p", "a/**/b.txt", "/p/a/x/y/b.txt")
    assert not glob.pattern_matches("/p", "a/**/b.txt", "/p/a/xb.txt")
    assert glob.pattern_matches("/p", "**.txt", "/p/deep/dir/file.txt")


def test_literal_characters_are_escaped():
    assert glob.pattern_matches("/p", "a+b (c).txt", "/p/a+b (c).txt")
    assert not glob.pattern_matches("/p", "a.b", "/p/axb")


def test_translate_pattern():
    assert glob.translate_pattern("*.c") == ("[^/]*\\.c", [])
    assert glob.translate_pattern("**") == (".*", [])
    assert glob.translate_pattern("a/**/b") == ("a(?:/|/.*/)b", [])
    assert glob.translate_pattern("{a,b}") == ("(?:a|b)", [])
    assert glob.translate_pattern("{a,b") == ("\\{a,b", [])
    assert glob.translate_pattern("x{1..3}") == ("x([0-9]+)", [NumericRange(1, 3)])
    assert glob.translate_pattern("[!ab]") == ("[^ab]", [])


def test_anchor_pattern():
    assert glob.anchor_pattern("*.c", "/p") == "/p/**/*.c"
    assert glob.anchor_pattern("*.c", "/p/") == "/p/**/*.c"
    assert glob.anchor_pattern("src/*.c", "/p") == "/p/src/*.c"
    assert glob.anchor_pattern("/src/*.c", "/p") == "/p/src/*.c"


def test_make_matcher_records_ranges():
    matcher = glob.make_matcher("{1..5}-{-3..3}.log", "/logs")
    assert matcher.ranges == (NumericRange(1, 5), NumericRange(-3, 3))
    assert matcher.matches("/logs/2-3.log")
    assert not matcher.matches("/logs/2-4.log")


def test_invalid_pattern_raises():
    with pytest.raises(PatternError):
        glob.make_matcher("[z-a]", "/p")


def test_base_dir_with_glob_characters_is_literal():
    """Brackets and braces in the config file's directory are plain text."""
    assert glob.anchor_pattern("*.tsx", "/app/[id]") == "/app/\\[id\\]/**/*.tsx"

    assert glob.pattern_matches("/work/app/[id]", "*.tsx", "/work/app/[id]/page.tsx")
    assert not glob.pattern_matches("/work/app/[id]", "*.tsx", "/work/app/i/page.tsx")
    assert glob.pattern_matches("/work/app/[id]", "sub/*.tsx", "/work/app/[id]/sub/a.tsx")

    # A lone { in the directory must not switch off alternation
    assert glob.pattern_matches("/home/u/a{b", "*.{c,h}", "/home/u/a{b/main.c")
    assert glob.pattern_matches("/home/u/a{b", "*.{c,h}", "/home/u/a{b/x/util.h")
    assert not glob.pattern_matches("/home/u/a{b", "*.{c,h}", "/home/u/a{b/main.py")

    assert glob.pattern_matches("/d/x,y*?", "*.c", "/d/x,y*?/main.c")
    assert not glob.pattern_matches("/d/x,y*?", "*.c", "/d/x,yzz/main.c")


def test_numeric_range_survives_unbalanced_braces():
    """Only alternation is disabled by unbalanced braces."""
    assert glob.pattern_matches("/p", "{1..3}}", "/p/2}")
    assert not glob.pattern_matches("/p", "{1..3}}", "/p/{1..3}}")
    assert not glob.pattern_matches("/p", "{1..3}}", "/p/4}")
