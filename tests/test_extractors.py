import pytest

from snippetmind.utils.extractors import (
    best_effort_html_span,
    detect_language,
    extract_fenced_code,
    extract_html_snippet,
    extract_image_url,
    run_heuristics,
    strip_comment_style,
    wrap_code_as_comment_style,
)


def test_fenced_code_with_tag():
    assert extract_fenced_code("```python\nprint(1)\n```") == ("python", "print(1)")


def test_fenced_code_trims_inner_whitespace():
    text = "Look:\n```js\n\n   console.log('hi');   \n\n```\nthanks"
    assert extract_fenced_code(text) == ("js", "console.log('hi');")


def test_fenced_code_only_first_block_used():
    text = "```python\na = 1\n```\nand\n```js\nlet b = 2\n```"
    assert extract_fenced_code(text) == ("python", "a = 1")


def test_fenced_code_without_tag_detects_language():
    assert extract_fenced_code("```\n#include <stdio.h>\nint main() {}\n```") == (
        "c", "#include <stdio.h>\nint main() {}"
    )


def test_single_line_fence_is_not_a_tag():
    assert extract_fenced_code("```print(1)```") == ("unknown", "print(1)")


def test_no_fence_returns_none():
    assert extract_fenced_code("just some words") is None
    assert extract_fenced_code("``only two``") is None


@pytest.mark.parametrize("code,expected", [
    ("<div>hi</div>", "html"),
    ("  <p>x</p>", "html"),
    ("function add(a, b) { return a + b }", "javascript"),
    ("console.log(1)", "javascript"),
    ("const f = () => 1", "javascript"),
    ("def main():\n    pass", "python"),
    ("import os from somewhere", "python"),
    ("#include <stdio.h>", "c"),
    ("int main() { return 0; }", "c"),
    ("SELECT * FROM t", "unknown"),
    ("", "unknown"),
])
def test_detect_language(code, expected):
    assert detect_language(code) == expected


def test_detect_language_first_match_wins():
    # arrow syntax is checked before python's def
    assert detect_language("def f(): pass\nx => y") == "javascript"


def test_html_snippet_balanced_pair():
    text = "Here is markup: <div class='a'><span>hi</span></div> and more > text"
    assert extract_html_snippet(text) == "<div class='a'><span>hi</span></div>"


def test_html_snippet_is_non_greedy():
    text = "<p>one</p> middle <p>two</p>"
    assert extract_html_snippet(text) == "<p>one</p>"


def test_html_snippet_falls_back_to_first_and_last_bracket():
    text = "broken <img src='a.png'> then a -> arrow"
    assert extract_html_snippet(text) == "<img src='a.png'> then a ->"


def test_html_snippet_requires_a_tag():
    assert extract_html_snippet("a < b and c > d") is None
    assert extract_html_snippet("plain text") is None


def test_best_effort_span_without_brackets():
    assert best_effort_html_span("nothing here") is None
    assert best_effort_html_span("> backwards <") is None


def test_image_url_from_markdown():
    assert extract_image_url("![a](https://x.png)") == "https://x.png"


def test_markdown_image_wins_over_earlier_bare_url():
    text = "https://a.com/first.jpg then ![alt](https://b.com/second.gif \"title\")"
    assert extract_image_url(text) == "https://b.com/second.gif"


def test_bare_image_url():
    assert extract_image_url("see https://example.com/pic.png") == "https://example.com/pic.png"


def test_bare_image_url_is_case_insensitive_and_stops_at_punctuation():
    assert extract_image_url("Logo: (https://cdn.io/Logo.SVG).") == "https://cdn.io/Logo.SVG"
    assert extract_image_url("x https://cdn.io/a.jpeg?w=100 y") == "https://cdn.io/a.jpeg"


def test_non_image_url_ignored():
    assert extract_image_url("visit https://example.com/page.html") is None
    assert extract_image_url("https://example.com/a.pngfile") is None


def test_wrap_html_code():
    assert wrap_code_as_comment_style("<b>x</b>") == "<!-- <b>x</b> -->"


def test_wrap_leaves_other_code_alone():
    assert wrap_code_as_comment_style("print(1)") == "print(1)"
    assert wrap_code_as_comment_style("") == ""
    assert wrap_code_as_comment_style(None) is None
    assert wrap_code_as_comment_style("<!-- <b>x</b> -->") == "<!-- <b>x</b> -->"


def test_strip_comment_style():
    assert strip_comment_style("<!-- <b>x</b> -->") == "<b>x</b>"
    assert strip_comment_style("<!--print(1)->") == "print(1)"
    assert strip_comment_style("print(1)") == "print(1)"


def test_run_heuristics_prefers_fenced_code_over_html():
    text = "```html\n<p>a</p>\n```"
    found = run_heuristics(text)
    assert found == {"Code": "<p>a</p>", "Language": "html", "ImageUrl": None}


def test_run_heuristics_html_snippet():
    found = run_heuristics("make this red: <h1>Title</h1> ![x](https://i.io/a.webp)")
    assert found["Code"] == "<h1>Title</h1>"
    assert found["Language"] == "html"
    assert found["ImageUrl"] == "https://i.io/a.webp"


def test_run_heuristics_nothing_found():
    assert run_heuristics("draw a cat") == {"Code": None, "Language": None, "ImageUrl": None}


@pytest.mark.parametrize("text,expected", [
    ("```c#\nConsole.WriteLine(1);\n```", ("c#", "Console.WriteLine(1);")),
    ("```c++\nint main() {}\n```", ("c++", "int main() {}")),
    ("```objective-c\n[obj run];\n```", ("objective-c", "[obj run];")),
    ("```shell-session\n$ ls\n```", ("shell-session", "$ ls")),
])
def test_fenced_code_tags_with_punctuation(text, expected):
    assert extract_fenced_code(text) == expected


def test_run_heuristics_keeps_punctuated_tag_out_of_code():
    found = run_heuristics("fix this:\n```c++\nint main() { return 1; }\n```")
    assert found["Language"] == "c++"
    assert found["Code"] == "int main() { return 1; }"
