"""
Unit tests for the symbol table and the indexes derived from it.

Tests tables/symbols.py and tables/indexes.py: forward and reverse lookups,
names taken from unicodeit's data, generated family names, reverse-index
collisions, longest-first matching, and the variation-sequence list.
"""
import re

import pytest
import unicodeit
from unicodeit.data import REPLACEMENTS

from uni2tex.tables.indexes import (
    COMMAND_RE,
    FROM_SUBSCRIPT,
    FROM_SUPERSCRIPT,
    _alternation,
    _find_collisions,
    _index,
    from_tex,
    symbol_collisions,
)
from uni2tex.tables.styles import (
    SUBSCRIPT,
    SUBSCRIPT_LOOKALIKES,
    SUPERSCRIPT,
    SUPERSCRIPT_LOOKALIKES,
)
from uni2tex.tables.symbols import FAMILIES, NAMED_COMMANDS, SYMBOLS, to_tex
from uni2tex.tables.variations import VARIATION_SEQUENCES, variation_sequences_for


class TestForwardLookup:
    """Test character → TeX name."""

    @pytest.mark.parametrize(
        "char, name",
        [
            ("α", "alpha"),
            ("π", "pi"),
            ("∞", "infty"),
            ("→", "rightarrow"),
            ("≤", "leq"),
            ("ε", "varepsilon"),
            ("ϵ", "epsilonup"),
            ("φ", "varphi"),
            ("ϕ", "phi"),
            ("§", "S"),
            ("©", "copyright"),
            ("∯", "oiint"),
        ],
    )
    def test_named_symbols(self, char, name):
        assert to_tex(char) == name

    def test_last_name_in_data_order_wins(self):
        # listed as lnot, then neg
        assert to_tex("¬") == "neg"

    def test_preferred_name_beats_shorter_alias(self):
        assert to_tex("≠") == "neq"
        assert to_tex("←") == "leftarrow"

    def test_unmapped_returns_none(self):
        assert to_tex("a") is None
        assert to_tex("!") is None
        assert to_tex("½") is None

    def test_no_ascii_keys(self):
        assert all(not char.isascii() for char in SYMBOLS)

    def test_no_script_characters(self):
        scripts = set(SUPERSCRIPT.values()) | set(SUBSCRIPT.values())
        scripts |= set(SUPERSCRIPT_LOOKALIKES) | set(SUBSCRIPT_LOOKALIKES)
        assert not scripts & set(SYMBOLS)
        assert "ª" not in SYMBOLS

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SYMBOLS["a"] = "a"


class TestUnicodeitData:
    """The plain names are unicodeit's single-character commands."""

    def test_every_name_comes_from_unicodeit(self):
        known = set(REPLACEMENTS)
        assert NAMED_COMMANDS
        for name, char in NAMED_COMMANDS:
            assert ("\\" + name, char) in known

    def test_names_are_letters_only(self):
        assert all(re.fullmatch(r"[A-Za-z]+", name) for name, _char in NAMED_COMMANDS)

    @pytest.mark.parametrize(
        "name, char",
        [
            ("S", "§"),
            ("P", "¶"),
            ("copyright", "©"),
            ("oiint", "∯"),
            ("varnothing", "∅"),
            ("hslash", "ℏ"),
            ("to", "→"),
            ("le", "≤"),
            ("ne", "≠"),
            ("gets", "←"),
            ("lnot", "¬"),
        ],
    )
    def test_aliases_resolve(self, name, char):
        assert from_tex(name) == char

    def test_ascii_values_resolve_without_forward_entry(self):
        assert from_tex("lbrace") == "{"
        assert from_tex("vert") == "|"
        assert "{" not in SYMBOLS
        assert "|" not in SYMBOLS

    def test_accent_commands_excluded(self):
        assert from_tex("widehat") is None
        assert from_tex("mathring") is None

    def test_look_alike_names_resolve(self):
        assert from_tex("textordfeminine") == "ª"

    @pytest.mark.parametrize(
        "name",
        [
            "alpha", "beta", "pi", "infty", "sum", "forall", "exists",
            "nabla", "partial", "leq", "geq", "neq", "rightarrow", "times",
            "mathbb{R}", "mathbb{C}", "mathcal{L}", "mathfrak{g}", "mathfrak{R}",
            "mathbf{a}", r"mathbf{\alpha}", "mathbfit{x}", "mathsf{A}", "mathtt{0}",
        ],
    )
    def test_agrees_with_unicodeit_replace(self, name):
        assert from_tex(name) == unicodeit.replace("\\" + name)


class TestGeneratedFamilies:
    """Test parameterized names generated from the style tables."""

    def test_double_struck_letter(self):
        assert to_tex("ℝ") == "mathbb{R}"
        assert to_tex("ℂ") == "mathbb{C}"

    def test_bold_letter_and_digit(self):
        assert to_tex("\U0001d41a") == "mathbf{a}"
        assert to_tex("\U0001d7cf") == "mathbf{1}"

    def test_bold_greek_uses_command_argument(self):
        assert to_tex("\U0001d6c2") == r"mathbf{\alpha}"

    def test_script_hole(self):
        assert to_tex("ℒ") == "mathcal{L}"

    def test_family_name_replaces_alias(self):
        assert to_tex("ℜ") == "mathfrak{R}"
        assert from_tex("mathfrak{R}") == "ℜ"
        assert from_tex("Re") == "ℜ"
        assert from_tex("BbbR") == "ℝ"

    def test_capital_greek_uses_unicode_math_name(self):
        # Capital Alpha is only registered as upAlpha
        assert to_tex("\U0001d6a8") == r"mathbf{\upAlpha}"

    def test_italic_has_no_family(self):
        assert "ITALIC" not in FAMILIES.values()
        assert to_tex("\U0001d44e") == "mita"

    def test_every_family_contributes(self):
        names = set(SYMBOLS.values())
        for family in FAMILIES:
            assert any(name.startswith(family + "{") for name in names)


class TestReverseIndex:
    """Test TeX name → character and its collisions."""

    def test_simple_inverse(self):
        assert from_tex("alpha") == "α"
        assert from_tex("mathbb{R}") == "ℝ"
        assert from_tex(r"mathbf{\alpha}") == "\U0001d6c2"

    def test_unknown_name(self):
        assert from_tex("nosuchcommand") is None

    def test_registrations_have_no_collisions(self):
        assert symbol_collisions() == {}

    def test_collisions_keep_the_later_character(self):
        pairs = [("mu", "\u00b5"), ("pi", "π"), ("mu", "\u03bc")]
        assert _index(pairs)["mu"] == "\u03bc"
        assert _find_collisions(pairs) == {"mu": ("\u00b5", "\u03bc")}

    def test_repeated_pair_is_not_a_collision(self):
        assert _find_collisions([("pi", "π"), ("pi", "π")]) == {}

    def test_round_trip(self):
        for char, name in SYMBOLS.items():
            assert from_tex(name) == char, name

    def test_script_reverse_tables(self):
        assert FROM_SUPERSCRIPT["²"] == "2"
        assert FROM_SUBSCRIPT["ₓ"] == "x"
        assert len(FROM_SUPERSCRIPT) == len(SUPERSCRIPT) + len(SUPERSCRIPT_LOOKALIKES)
        assert len(FROM_SUBSCRIPT) == len(SUBSCRIPT) + len(SUBSCRIPT_LOOKALIKES)

    def test_ordinal_indicators_read_as_superscripts(self):
        assert SUPERSCRIPT_LOOKALIKES["ª"] == "a"
        assert SUPERSCRIPT_LOOKALIKES["º"] == "o"
        assert FROM_SUPERSCRIPT["ª"] == "a"

    def test_lookalikes_exclude_table_values(self):
        assert not set(SUPERSCRIPT_LOOKALIKES) & set(SUPERSCRIPT.values())
        assert not set(SUBSCRIPT_LOOKALIKES) & set(SUBSCRIPT.values())


class TestLongestMatch:
    """Test that the command pattern prefers the longest registered name."""

    @pytest.mark.parametrize(
        "source, name",
        [
            (r"\in", "in"),
            (r"\int", "int"),
            (r"\infty", "infty"),
            (r"\intercal", "intercal"),
            (r"\subseteqq", "subseteqq"),
            (r"\subseteq", "subseteq"),
            (r"\lll", "lll"),
            (r"\leq", "leq"),
            (r"\leftarrowtail", "leftarrowtail"),
        ],
    )
    def test_registered_prefixes(self, source, name):
        assert COMMAND_RE.match(source).group(1) == name

    def test_unregistered_command_matches_registered_prefix(self):
        assert COMMAND_RE.match(r"\inf").group(1) == "in"
        assert COMMAND_RE.match(r"\log").group(1) == "l"

    def test_synthetic_prefix_pair(self):
        pattern = re.compile(_alternation(["ab", "abc"]))
        assert pattern.match("abcd").group() == "abc"
        assert pattern.match("abd").group() == "ab"

    def test_alternation_order_does_not_depend_on_input_order(self):
        assert _alternation(["ab", "abc"]) == _alternation(["abc", "ab"])


class TestVariationSequences:
    """Test the informational variation-sequence list."""

    def test_all_use_variation_selector_1(self):
        assert all(v.selector == "\ufe00" for v in VARIATION_SEQUENCES)

    def test_sequence_property(self):
        union = variation_sequences_for("∪")
        assert len(union) == 1
        assert union[0].sequence == "∪\ufe00"
        assert union[0].description == "with serifs"

    def test_unknown_base(self):
        assert variation_sequences_for("a") == ()
