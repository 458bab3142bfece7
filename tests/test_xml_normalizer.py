from app.converter import parse_xml
from app.normalizers import ATTRIBUTES_KEY, TEXT_KEY, get_default_normalizer, merge_child, normalize


def n(xml: str):
    return normalize(parse_xml(xml))


def test_text_leaf_collapses_to_string():
    assert n("<a>T</a>") == "T"
    assert n("<a>\n   T  \t</a>") == "T"

def test_empty_leaf_is_empty_mapping():
    assert n("<a></a>") == {}
    assert n("<a/>") == {}
    assert n("<a>   \n  </a>") == {}

def test_attributes_only():
    assert n('<a x="1" y="two"/>') == {ATTRIBUTES_KEY: {"x": "1", "y": "two"}}

def test_attribute_values_untouched():
    assert n('<a x="  spaced  "/>') == {"@attributes": {"x": "  spaced  "}}

def test_attributes_and_text():
    assert n('<a a="1">T</a>') == {"@attributes": {"a": "1"}, "#text": "T"}

def test_single_child_is_not_a_list():
    assert n("<a><b>1</b></a>") == {"b": "1"}

def test_second_occurrence_promotes_to_list():
    assert n("<r><item>1</item><item>2</item></r>") == {"item": ["1", "2"]}

def test_further_occurrences_append_in_order():
    assert n("<r><item>1</item><item>2</item><item>3</item></r>") == {"item": ["1", "2", "3"]}

def test_scenario_attributes_and_repeated_children():
    assert n('<a x="1"><b>hi</b><b>bye</b></a>') == {"@attributes": {"x": "1"}, "b": ["hi", "bye"]}

def test_keys_keep_first_seen_order():
    out = n("<a><b/><c>x</c><b/></a>")
    assert list(out.keys()) == ["b", "c"]
    assert out["b"] == [{}, {}]

def test_nested_elements():
    assert n('<a><b><c>1</c><d k="v"/></b></a>') == {"b": {"c": "1", "d": {"@attributes": {"k": "v"}}}}

def test_mixed_content_keeps_text_next_to_children():
    out = n("<a>hello<b>x</b> world </a>")
    assert out == {"b": "x", TEXT_KEY: "helloworld"}

def test_whitespace_between_children_is_dropped():
    assert n("<a>\n  <b>1</b>\n  <c>2</c>\n</a>") == {"b": "1", "c": "2"}

def test_children_never_collapse_to_string():
    out = n("<a><b/></a>")
    assert out == {"b": {}}

def test_entities_are_decoded():
    assert n("<a>&lt;b&gt; &amp; c</a>") == "<b> & c"

def test_comment_splits_text_fragments():
    # each fragment is trimmed on its own, then joined without a separator
    assert normalize(parse_xml("<a>foo <!-- note --> bar</a>")) == "foobar"

def test_comments_and_pis_are_ignored():
    assert normalize(parse_xml("<a><!-- c --></a>")) == {}
    assert normalize(parse_xml("<a><?pi data?>t</a>")) == "t"
    assert normalize(parse_xml("<a><!-- c --><b>1</b><!-- d --><b>2</b></a>")) == {"b": ["1", "2"]}

def test_returns_fresh_objects():
    root = parse_xml('<a x="1"><b>1</b><b>2</b></a>')
    first = normalize(root)
    second = normalize(root)
    assert first == second
    assert first is not second
    first["b"].append("3")
    assert second["b"] == ["1", "2"]
    assert root.getAttribute("x") == "1"

def test_default_normalizer_matches_function():
    root = parse_xml("<a><b>1</b></a>")
    assert get_default_normalizer().normalize_element(root) == normalize(root)


# --- merge policy on its own ---
def test_merge_child_set_promote_append():
    obj = {}
    merge_child(obj, "k", "v1")
    assert obj == {"k": "v1"}
    merge_child(obj, "k", {"x": "1"})
    assert obj == {"k": ["v1", {"x": "1"}]}
    merge_child(obj, "k", "v3")
    assert obj == {"k": ["v1", {"x": "1"}, "v3"]}


# --- qualified names (no namespace resolution) ---
def test_prefixed_names_and_declarations_are_kept():
    out = n('<ns:a xmlns:ns="urn:x" xml:lang="en"><ns:b>1</ns:b></ns:a>')
    assert out == {"@attributes": {"xmlns:ns": "urn:x", "xml:lang": "en"}, "ns:b": "1"}

def test_default_namespace_child_keeps_plain_name():
    out = n('<a xmlns="urn:d"><b>1</b><b>2</b></a>')
    assert out == {"@attributes": {"xmlns": "urn:d"}, "b": ["1", "2"]}

def test_prefixed_attribute_on_child():
    out = n('<a xmlns:p="urn:p"><b p:id="7">t</b></a>')
    assert out["b"] == {"@attributes": {"p:id": "7"}, "#text": "t"}


# --- CDATA is not a text node ---
def test_cdata_sections_are_skipped():
    assert n("<a><![CDATA[x]]></a>") == {}
    assert n("<a>foo<![CDATA[ <raw> ]]>bar</a>") == "foobar"
    assert n('<a k="v"><![CDATA[x]]></a>') == {"@attributes": {"k": "v"}}


# --- depth ---
def test_very_deep_document():
    depth = 6000
    value = n("<a>" * depth + "x" + "</a>" * depth)
    for _ in range(depth - 1):
        assert list(value.keys()) == ["a"]
        value = value["a"]
    assert value == "x"
