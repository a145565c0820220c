from __future__ import annotations

import doctest
import re
from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

import htmlredline
from htmlredline import DiffConfig, RedlineDiffer, diff_operations, redline
from htmlredline import atomization, normalization, operations
from htmlredline.normalization import preprocess


PAIRS = [
    ("<p>hello world</p>", "<p>hello there world</p>"),
    ("<p>The cat sat</p>", "<p>The dog sat</p>"),
    ("<p>a <strong>bold</strong> b</p>", "<p>a b</p>"),
    ("<ul><li>one</li><li>two</li></ul>", "<ul><li>two</li><li>three</li></ul>"),
    ("<table><tr><td>a</td></tr></table>", "<table><tr><td>a</td><td>b</td></tr></table>"),
    ("<h1>Title</h1><p>Body text.</p>", "<h2>Title</h2><p>Body, text!</p>"),
    ("", "<p>new <em>content</em></p>"),
    ("stray < bracket", "stray <p>tag</p>"),
    ("<p>x</p>", '<p>x<a title="a&lt;b">link</a></p>'),
    ("<p>x</p>", '<p>x<a title="a&gt;b">link</a></p>'),
]

_marker_re = re.compile(r"<(ins|del)\b[^>]*>")


def _swap(op):
    action = {"insert": "delete", "delete": "insert"}.get(op.action, op.action)
    return (action, op.start_in_new, op.end_in_new, op.start_in_old, op.end_in_old)


@pytest.mark.parametrize("module", [htmlredline, normalization, atomization, operations])
def test_doctests(module):
    res = doctest.testmod(module, verbose=False)
    assert res.failed == 0


def test_identical_paragraph_has_no_markers():
    out = redline("<p>hello world</p>", "<p>hello world</p>")
    assert out == "<p>hello world</p>"


def test_inserted_word_is_wrapped_with_its_space():
    out = redline("<p>hello world</p>", "<p>hello there world</p>")
    assert out == '<p>hello <ins class="diffins">there </ins>world</p>'


def test_replaced_word_is_a_linked_delete_and_insert():
    out = redline("<p>The cat sat</p>", "<p>The dog sat</p>")
    assert out == '<p>The <del class="diffmod">cat</del><ins class="diffmod">dog</ins> sat</p>'


def test_nbsp_and_spaces_are_equal():
    assert redline("text &nbsp; here", "text   here") == "text   here"


def test_attribute_only_change_is_invisible():
    out = redline("<div class='a'>x</div>", "<div class='b'>x</div>")
    assert out == '<div class="b">x</div>'


def test_everything_inserted_into_empty_document():
    assert redline("", "new content") == '<ins class="diffins">new content</ins>'


def test_everything_deleted():
    assert redline("old content", "") == '<del class="diffdel">old content</del>'


def test_both_empty():
    assert redline("", "") == ""
    assert diff_operations("", "") == []


def test_no_overlap_is_one_replace():
    assert redline("alpha", "beta") == '<del class="diffmod">alpha</del><ins class="diffmod">beta</ins>'


def test_replace_can_use_plain_classes():
    config = DiffConfig()
    config.mark_replace_as_modified = False
    out = redline("alpha", "beta", config=config)
    assert out == '<del class="diffdel">alpha</del><ins class="diffins">beta</ins>'


def test_partial_config_object_falls_back_to_defaults():
    out = redline("", "x", config=SimpleNamespace(insert_class="added"))
    assert out == '<ins class="added">x</ins>'


def test_inserted_tags_are_emitted_outside_markers():
    out = redline(
        "<table><tr><td>a</td></tr></table>",
        "<table><tr><td>a</td></tr><tr><td>b</td></tr></table>",
    )
    assert '<tr><td><ins class="diffins">b</ins></td></tr>' in out


def test_deleted_tags_are_dropped():
    out = redline("<p>a <strong>bold</strong> b</p>", "<p>a b</p>")
    assert "<strong>" not in out and "</strong>" not in out
    assert '<del class="diffdel">bold</del>' in out
    assert out.startswith("<p>a ") and out.endswith("b</p>")


def test_formatting_aliases_compare_equal():
    assert redline("<b>x</b> <i>y</i>", "<strong>x</strong> <em>y</em>") == "<strong>x</strong> <em>y</em>"


def test_unknown_markup_is_rendered_as_text():
    out = redline("<blink>x</blink>", "<blink>x</blink>")
    assert out == "&lt;blink&gt;x&lt;/blink&gt;"


def test_stray_bracket_is_escaped_and_compared():
    out = redline("1 < 2", "1 < 3")
    assert out == '1 &lt; <del class="diffmod">2</del><ins class="diffmod">3</ins>'


def test_empty_elements_do_not_show_as_changes():
    assert redline("<p>a</p><p></p>", "<p>a</p>") == "<p>a</p>"


def test_whitespace_differences_can_be_ignored():
    assert "diffmod" in redline("a  b", "a b")
    config = DiffConfig()
    config.ignore_whitespace_differences = True
    assert redline("a  b", "a b", config=config) == "a b"


def test_block_expressions_mark_whole_units():
    assert redline("Due 2024-01-05", "Due 2024-01-09") == \
        'Due 2024-01-<del class="diffmod">05</del><ins class="diffmod">09</ins>'
    config = DiffConfig()
    config.block_expressions = (r"\d{4}-\d{2}-\d{2}",)
    assert redline("Due 2024-01-05", "Due 2024-01-09", config=config) == \
        'Due <del class="diffmod">2024-01-05</del><ins class="diffmod">2024-01-09</ins>'


@pytest.mark.parametrize("old_text,new_text", PAIRS)
def test_tokens_reproduce_the_canonical_text(old_text, new_text):
    differ = RedlineDiffer(old_text, new_text)
    assert "".join(t.text for t in differ.old_tokens) == preprocess(old_text)
    assert "".join(t.text for t in differ.new_tokens) == preprocess(new_text)


@pytest.mark.parametrize("text", [p[0] for p in PAIRS if p[0]] + [p[1] for p in PAIRS if p[1]])
def test_same_input_is_a_single_equal(text):
    differ = RedlineDiffer(text, text)
    ops = differ.get_operations()
    assert len(ops) == 1
    assert ops[0].action == "equal"
    assert (ops[0].end_in_old, ops[0].end_in_new) == (len(differ.old_tokens), len(differ.new_tokens))
    assert "<ins" not in differ.render() and "<del" not in differ.render()


@pytest.mark.parametrize("old_text,new_text", PAIRS)
def test_operations_tile_both_token_arrays(old_text, new_text):
    differ = RedlineDiffer(old_text, new_text)
    cur_old = cur_new = 0
    for op in differ.get_operations():
        assert (op.start_in_old, op.start_in_new) == (cur_old, cur_new)
        cur_old, cur_new = op.end_in_old, op.end_in_new
    assert (cur_old, cur_new) == (len(differ.old_tokens), len(differ.new_tokens))


@pytest.mark.parametrize("old_text,new_text", PAIRS + [
    ("The cat sat on the mat", "The dog sat on a mat"),
    ("", "new content"),
])
def test_swapping_inputs_swaps_insert_and_delete(old_text, new_text):
    forward = diff_operations(old_text, new_text)
    backward = diff_operations(new_text, old_text)
    assert [_swap(op) for op in forward] == [tuple(op) for op in backward]


@pytest.mark.parametrize("old_text,new_text", PAIRS)
def test_markers_never_contain_tags(old_text, new_text):
    out = redline(old_text, new_text)
    for m in _marker_re.finditer(out):
        rest = out[m.end():]
        # The first tag after an opening marker must be its own closing tag.
        assert re.match(r"[^<]*</%s>" % m.group(1), rest), out


def test_concurrent_calls_match_sequential_results():
    expected = [redline(a, b) for a, b in PAIRS]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda pair: redline(*pair), PAIRS))
    assert got == expected


def test_differ_exposes_stream_and_matches():
    differ = RedlineDiffer("<p>The cat sat</p>", "<p>The dog sat</p>")
    assert [tuple(m) for m in differ.get_matches()] == [(0, 0, 3), (4, 4, 3)]
    assert differ.get_diff_stream().render("html", encoding=None, strip_whitespace=False) == differ.render()


def test_spaced_brackets_are_never_turned_into_markup():
    out = redline("if x < b > y", "if x < b > z")
    assert out == 'if x &lt; b &gt; <del class="diffmod">y</del><ins class="diffmod">z</ins>'


def test_escaped_brackets_change_as_whole_characters():
    out = redline("1 < 2", "1 > 2")
    assert out == '1 <del class="diffmod">&lt;</del><ins class="diffmod">&gt;</ins> 2'


def test_brackets_inside_attribute_values_keep_the_tag_whole():
    out = redline("<p>x</p>", '<p>x<a title="a&gt;b">link</a></p>')
    assert out == '<p>x<a title="a>b"><ins class="diffins">link</ins></a></p>'
    out = redline("<p>x</p>", '<p>x<a title="a&lt;b">link</a></p>')
    assert out == '<p>x<a title="a&lt;b"><ins class="diffins">link</ins></a></p>'
