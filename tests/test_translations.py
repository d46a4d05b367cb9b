import pytest
from markupsafe import Markup

from i18n_catalog.core.errors import (
    ArgumentError,
    MissingParameterError,
    TranslationLookupError,
    UnknownKeyError,
    UnknownLanguageError,
)
from i18n_catalog.core.translations import Translations, create_intermediate_lookup, stringify


@pytest.fixture
def catalog(catalog_dir):
    return Translations(catalog_dir, "en").load()


def test_translate_escapes_parameter_values(catalog):
    text = catalog.translate("hello", "name", "<script>")
    assert text == "Hello &lt;script&gt;"
    assert isinstance(text, Markup)


def test_static_message_html_is_trusted(catalog):
    assert catalog.translate("plain") == Markup("<b>Static</b> text")


def test_all_special_characters_are_escaped(catalog):
    text = catalog.translate("hello", "name", "a & b \"c\" 'd'")
    assert text == "Hello a &amp; b &#34;c&#34; &#39;d&#39;"


def test_markup_value_is_escaped_too(catalog):
    assert catalog.translate("hello", "name", Markup("<i>x</i>")) == "Hello &lt;i&gt;x&lt;/i&gt;"


def test_repeated_placeholder_is_replaced_everywhere(catalog):
    assert catalog.translate("twice", "a", 1) == "1 and 1"


def test_nested_key_placeholder(catalog):
    assert catalog.translate("tyson.defeated", "boxer", "Tyson") == "Tyson was defeated"


def test_padded_placeholder_is_left_untouched(write_catalog):
    directory = write_catalog({"en.json": {"padded": "{{ boxer }} was defeated"}})
    catalog = Translations(directory, "en").load()
    assert catalog.store("en")["padded"].intermediates == ("boxer",)
    assert catalog.translate("padded", "boxer", "Tyson") == "{{ boxer }} was defeated"


def test_placeholders_are_replaced_in_order(write_catalog):
    directory = write_catalog({"en.json": {"pair": "{{a}} / {{b}}"}})
    catalog = Translations(directory, "en").load()
    assert catalog.translate("pair", "a", "{{b}}", "b", "B") == "B / B"


def test_render_accepts_a_mapping(catalog):
    assert catalog.render("hello", {"name": "Ada"}) == "Hello Ada"


def test_extra_parameters_are_ignored(catalog):
    assert catalog.translate("hello", "name", "Ada", "unused", 1) == "Hello Ada"


@pytest.mark.parametrize(
    "value, expected",
    [("x", "x"), (3, "3"), (2.5, "2.5"), (True, "true"), (False, "false"), (None, "None")],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_lookup_from_pairs():
    assert create_intermediate_lookup(("a", 1, "b", "x")) == {"a": 1, "b": "x"}
    assert create_intermediate_lookup(()) == {}


def test_odd_parameter_count(catalog):
    with pytest.raises(ArgumentError) as excinfo:
        catalog.translate("hello", "name")
    assert not isinstance(excinfo.value, MissingParameterError)


def test_non_string_parameter_name(catalog):
    with pytest.raises(ArgumentError):
        catalog.translate("hello", 1, "x")


def test_missing_parameter(catalog):
    with pytest.raises(MissingParameterError) as excinfo:
        catalog.translate("hello", "other", "x")
    assert excinfo.value.name == "name"
    assert excinfo.value.key == "hello"


def test_unknown_key(catalog):
    with pytest.raises(UnknownKeyError):
        catalog.translate("nope")


def test_unknown_language_from_resolver(catalog_dir):
    catalog = Translations(catalog_dir, "en", lambda: "fr").load()
    with pytest.raises(UnknownLanguageError):
        catalog.translate("hello", "name", "x")


def test_lookup_errors_share_a_base(catalog):
    with pytest.raises(TranslationLookupError):
        catalog.translate("nope")
    with pytest.raises(LookupError):
        catalog.translate("nope")


def test_translate_on_unloaded_catalog(catalog_dir):
    with pytest.raises(UnknownLanguageError):
        Translations(catalog_dir, "en").translate("hello", "name", "x")


def test_dynamic_selection_calls_resolver_each_time(catalog_dir):
    current = {"lang": "de"}
    calls = []

    def resolver():
        calls.append(current["lang"])
        return current["lang"]

    catalog = Translations(catalog_dir, "en", resolver).load()
    assert catalog.translate("hello", "name", "Ada") == "Hallo Ada"
    current["lang"] = "EN"
    assert catalog.translate("hello", "name", "Ada") == "Hello Ada"
    assert calls == ["de", "EN"]


@pytest.mark.parametrize("resolved", ["", "deu", "1a", None])
def test_dynamic_selection_falls_back_on_invalid_code(catalog_dir, resolved):
    catalog = Translations(catalog_dir, "en", lambda: resolved).load()
    assert catalog.current_language() == "en"
    assert catalog.translate("hello", "name", "Ada") == "Hello Ada"


def test_fixed_selection(catalog):
    german = catalog.for_language("de")
    assert german.language == "de"
    assert german.translate("hello", "name", "Ada") == "Hallo Ada"
    assert german("tyson.defeated", "boxer", "Ali") == "Ali wurde besiegt"


@pytest.mark.parametrize("code", ["xx", "deutsch", "", None])
def test_fixed_selection_falls_back_to_default(catalog, code):
    translator = catalog.for_language(code)
    assert translator.language == "en"
    assert translator.translate("hello", "name", "Ada") == "Hello Ada"


def test_fixed_selection_does_not_fall_back_per_key(catalog):
    with pytest.raises(UnknownKeyError):
        catalog.for_language("de").translate("plain")


def test_query_interface(catalog):
    assert catalog.languages() == ["de", "en"]
    assert catalog.default_language == "en"
    assert catalog.loaded
    with pytest.raises(UnknownLanguageError):
        catalog.store("fr")
