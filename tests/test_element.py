from html_query_parser import HTMLElement, HTMLParser, css

def test_outer_html_includes_tags_and_text(select):
    html = select("h1").outer_html
    assert html == '<h1 class="title highlight">Hello World</h1>'

def test_outer_html_includes_attributes(select):
    html = select("#main-link").outer_html
    assert 'href="https://example.com"' in html
    assert html.index("href") < html.index("id=") < html.index("class=") < html.index("data-track")

def test_outer_html_excludes_tail_text():
    parser = HTMLParser("<p><b>bold</b> tail</p>")
    assert parser.select_first(css("b")).outer_html == "<b>bold</b>"

def test_inner_html_excludes_own_tags(select):
    html = select("header").inner_html
    assert "<header" not in html
    assert "<h1" in html

def test_inner_html_of_leaf_is_text(select):
    assert select("h1").inner_html.strip() == "Hello World"

def test_inner_html_of_container(select):
    html = select("#tag-list").inner_html
    assert "<li" in html
    assert "rust" in html

def test_inner_html_keeps_markup_escaped():
    parser = HTMLParser("<p>a &amp; b &lt;c&gt;</p>")
    assert parser.select_first(css("p")).inner_html == "a &amp; b &lt;c&gt;"

def test_inner_html_keeps_script_source_raw():
    parser = HTMLParser("<div><script>if (a < b && c) {}</script></div>")
    assert parser.select_first(css("script")).inner_html == "if (a < b && c) {}"

def test_text_of_leaf(select):
    assert select("h1").text.strip() == "Hello World"

def test_text_concatenates_descendants(select):
    text = select("#post-1").text
    assert "First Post" in text
    assert "First excerpt" in text
    assert text.index("First Post") < text.index("First excerpt")

def test_text_of_mixed_content():
    parser = HTMLParser("<p>one <b>two <i>three</i></b> four</p>")
    assert parser.select_first(css("p")).text == "one two three four"

def test_text_for_list_items(parser):
    tags = parser.select_many(css(".tag"))
    assert tags[0].text.strip() == "rust"
    assert tags[3].text.strip() == "wasm"

def test_id(select):
    assert select("#main-header").id == "main-header"

def test_id_is_none_without_id(select):
    assert select("h1").id is None
    assert select("main").id is None

def test_id_empty_value_is_not_none():
    parser = HTMLParser('<div id="">x</div>')
    assert parser.select_first(css("div")).id == ""

def test_tag_name_is_uppercase(select):
    assert select("h1").tag_name == "H1"
    assert select("article").tag_name == "ARTICLE"
    assert select("#main-link").tag_name == "A"
    assert select("#tag-list").tag_name == "UL"

def test_tag_name_ignores_source_case():
    parser = HTMLParser("<DIV Class='box'>x</DIV>")
    el = parser.select_first(css("div"))
    assert el.tag_name == "DIV"
    assert el.class_name == "box"

def test_class_name(select):
    assert select("#main-header").class_name == "header sticky"
    assert select("h2.post-title").class_name == "post-title"

def test_class_name_is_empty_string_without_class(select):
    el = select("main")
    assert el.class_name == ""
    assert el.id is None
    assert el.get_attribute("class") is None

def test_class_list(select):
    assert select("#main-header").class_list == ["header", "sticky"]
    assert select("h2.post-title").class_list == ["post-title"]
    assert select("main").class_list == []
    assert len(select("#post-1").class_list) == 2

def test_class_list_splits_on_any_whitespace():
    parser = HTMLParser('<div class="  a\tb\n c ">x</div>')
    assert parser.select_first(css("div")).class_list == ["a", "b", "c"]

def test_get_attribute(select):
    assert select("#main-link").get_attribute("href") == "https://example.com"
    assert select("#post-1").get_attribute("data-author") == "alice"
    assert select("#main-header").get_attribute("id") == "main-header"
    assert select("#main-header").get_attribute("class") == "header sticky"

def test_get_attribute_returns_strings(select):
    value = select("#post-1").get_attribute("data-views")
    assert value == "120"
    assert isinstance(value, str)

def test_get_attribute_missing(select):
    assert select("h1").get_attribute("href") is None
    assert select("h1").get_attribute("data-anything") is None

def test_attributes(select):
    attrs = select("#post-1").attributes
    assert attrs == {
        "id": "post-1",
        "class": "post featured",
        "data-author": "alice",
        "data-views": "120",
    }
    assert all(isinstance(value, str) for value in attrs.values())

def test_attributes_keep_source_order(select):
    assert list(select("#main-link").attributes) == ["href", "id", "class", "data-track"]

def test_attributes_empty(select):
    assert select("main").attributes == {}

def test_first_child(select):
    child = select("#nested-parent").first_child
    assert child is not None
    assert child.id == "nested-child-1"
    assert child.tag_name == "P"

def test_last_child(select):
    child = select("#nested-parent").last_child
    assert child is not None
    assert child.id == "nested-child-2"

def test_first_and_last_child_differ_with_several_children(select):
    parent = select("#nested-parent")
    assert parent.first_child != parent.last_child

def test_first_and_last_child_are_same_node_with_one_child(select):
    section = select("#nested")
    assert section.first_child == section.last_child
    assert section.first_child.node is section.last_child.node
    assert section.first_child.id == "nested-parent"

def test_children_are_none_on_leaf(select):
    assert select("h1").first_child is None
    assert select("h1").last_child is None

def test_children_skip_text_and_comments():
    parser = HTMLParser("<ul>text<!-- c --><li>First</li><li>Middle</li>more<li>Last</li><!-- end --></ul>")
    ul = parser.select_first(css("ul"))
    assert ul.first_child.text.strip() == "First"
    assert ul.last_child.text.strip() == "Last"
    assert [child.text for child in ul.children] == ["First", "Middle", "Last"]

def test_parent(select):
    assert select("h1").parent.id == "main-header"
    assert select("#nested-child-1").parent == select("#nested-parent")

def test_parent_of_root_is_none(parser):
    assert parser.root.parent is None

def test_str_is_outer_html(select):
    el = select("h1")
    assert str(el) == el.outer_html
    assert "<h1" in str(el)
    assert "Hello World" in str(el)

def test_repr(select):
    assert repr(select("#main-header")) == "<HTMLElement HEADER id='main-header'>"
    assert repr(select("main")) == "<HTMLElement MAIN>"

def test_handles_compare_by_node(parser):
    a = parser.select_first(css("#post-1"))
    b = parser.select_first(css("article"))
    c = parser.select_first(css("#post-2"))
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2
    assert a != "post-1"

def test_round_trip_through_outer_html(select):
    original = select("#post-1")
    reparsed = HTMLParser(original.outer_html).select_first(css("article"))
    assert isinstance(reparsed, HTMLElement)
    assert reparsed.tag_name == original.tag_name
    assert reparsed.attributes == original.attributes
    assert reparsed.text.split() == original.text.split()

def test_round_trip_of_link(select):
    original = select("#main-link")
    reparsed = HTMLParser(str(original)).select_first(css("a"))
    assert reparsed.attributes == original.attributes
    assert reparsed.text == original.text
