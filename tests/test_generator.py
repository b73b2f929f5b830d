"""
Tests for the Password Generator
================================
Tests hashing, category counting, encoding, acceptability checks and the
deterministic constraint repair in pwgen/generators/generator.py.
"""

import math
import random
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pwgen.generators import (
    CharRange,
    ComplexityConstraint,
    Generator,
    load_registry,
    derive_bytes,
    random_bytes,
    size_of,
)


ALNUM = [CharRange('0', '9'), CharRange('A', 'Z'), CharRange('a', 'z')]


@pytest.fixture(scope='module')
def registry():
    return load_registry()


@pytest.fixture
def ncname(registry):
    return registry.generator_of('NCName')


@pytest.fixture
def qwerty(registry):
    return registry.generator_of('qwerty')


@pytest.fixture
def qwerty_buffer():
    return derive_bytes(32, 'user', 'https://site.io/', 1000)


class TestHash:
    """Tests for the repair hash."""

    @pytest.mark.parametrize("text,expected", [
        ('abcd', 439553542),
        ('aAa', 1624527684),
        ('3aB', 1641301991),
        ('FaB', 1641306791),
    ])
    def test_reference_vectors(self, text, expected):
        assert Generator.hash_of(text) == expected

    def test_accepts_character_sequences(self):
        assert Generator.hash_of(['a', 'b', 'c', 'd']) == 439553542

    def test_fits_31_bits(self):
        for text in ('', 'x', 'pässwörd', '\U0001F600' * 9):
            assert 0 <= Generator.hash_of(text) <= 0x7FFFFFFF


class TestCountCategories:
    """Tests for simplified category counting."""

    def test_ab3(self):
        assert Generator.count_categories('aB3') == {'Ll': 1, 'Lu': 1, 'No': 1}

    def test_order_of_first_appearance(self):
        assert list(Generator.count_categories('3aB-a')) == ['No', 'Ll', 'Lu', 'Po']

    def test_simplified(self):
        counts = Generator.count_categories('ǅ€½ ')
        assert counts == {'Lu': 1, 'So': 1, 'No': 1, 'Co': 1}

    def test_sequence_input(self):
        assert Generator.count_categories(['c', 'm', 'F', '-', ';']) == {'Ll': 2, 'Lu': 1, 'Po': 2}


class TestConfiguration:
    """Tests for configuration errors."""

    def test_constraint_minimum(self):
        with pytest.raises(ValueError, match="must be >= 1"):
            ComplexityConstraint('Lu', 0)

    def test_constraint_unknown_category(self):
        with pytest.raises(ValueError, match="Qq"):
            ComplexityConstraint('Qq')

    def test_empty_name(self):
        with pytest.raises(ValueError):
            Generator('', ALNUM)

    def test_too_few_characters(self):
        with pytest.raises(ValueError, match="at least two"):
            Generator('One', [CharRange('x')])

    def test_substitutes_must_be_allowed(self):
        with pytest.raises(ValueError, match="Lu"):
            Generator('Digits', [CharRange('0', '9')], [ComplexityConstraint('Lu')])

    def test_unrepairable_constraint_not_enforced(self):
        gen = Generator('Digits', [CharRange('0', '9')], [ComplexityConstraint('Nd', 3)])
        assert gen.is_acceptable('1')
        assert gen.make_acceptable('1') == '1'

    def test_properties(self):
        gen = Generator('Alnum', ALNUM, [ComplexityConstraint('No')], [CharRange('a', 'z')])
        assert gen.name == 'Alnum'
        assert size_of(gen.ranges) == 62
        assert size_of(gen.first_ranges) == 26
        assert gen.constraints == (ComplexityConstraint('No'),)


class TestLength:
    """Tests for length estimation."""

    def test_qwerty(self, qwerty):
        assert qwerty.length_of(32) == 5

    def test_exact_power_of_two(self, registry):
        assert registry.generator_of('Hexadecimal').length_of(88) == 22

    def test_decimal(self, registry):
        assert registry.generator_of('Decimal').length_of(88) == 27

    def test_first_character_set(self, ncname):
        # 88 - log2(53) bits over 65 characters -> 14, plus the first
        assert ncname.length_of(88) == 15

    def test_first_character_only(self, ncname):
        assert ncname.length_of(1) == 1

    def test_entropy_sufficiency(self, registry):
        """The password always carries at least the requested bits."""
        for gen in registry:
            main = math.log2(size_of(gen.ranges))
            for bits in range(1, 257):
                n = gen.length_of(bits)
                carried = n * main
                if gen.first_ranges is not None:
                    carried = math.log2(size_of(gen.first_ranges)) + (n - 1) * main
                assert carried >= bits - 1e-9, (gen.name, bits)


class TestEncode:
    """Tests for encoding entropy buffers."""

    def test_qwerty_reference(self, qwerty, qwerty_buffer):
        assert qwerty.partition(qwerty_buffer) == [66, 76, 37, 12, 26]
        encoded = qwerty.encode(qwerty_buffer)
        assert encoded == 'cmF-;'
        assert Generator.count_categories(encoded) == {'Ll': 2, 'Lu': 1, 'Po': 2}

    def test_deterministic(self, registry):
        buf = random_bytes(128)
        for gen in registry:
            assert gen.encode(buf) == gen.encode(buf)
            assert gen.generate(buf) == gen.generate(buf)

    def test_first_character_set_used(self, ncname):
        for _ in range(50):
            encoded = ncname.encode(random_bytes(64))
            assert encoded[0].isalpha() or encoded[0] == '_'

    def test_unconstrained_is_acceptable(self, registry):
        for name in ('Decimal', 'Hexadecimal'):
            gen = registry.generator_of(name)
            for _ in range(50):
                encoded = gen.encode(random_bytes(88))
                assert gen.is_acceptable(encoded)
                assert gen.generate(random_bytes(88)).isalnum()

    def test_zero_buffer(self, qwerty):
        assert qwerty.encode(bytes(4)) == '!!!!!'


class TestIsAcceptable:
    """Tests for acceptability checks."""

    def test_ncname_reference(self, ncname):
        assert ncname.is_acceptable('aB3')
        assert not ncname.is_acceptable('aAa')
        assert not ncname.is_acceptable('3aB')

    def test_out_of_range_character(self, ncname):
        assert not ncname.is_acceptable('aB3!')

    def test_first_character_only_checked_at_start(self, ncname):
        assert ncname.is_acceptable('aB3.-')
        assert not ncname.is_acceptable('.aB3')


class TestMakeAcceptable:
    """Tests for deterministic constraint repair."""

    def test_unchanged_when_acceptable(self, ncname):
        assert ncname.make_acceptable('aB3') == 'aB3'

    def test_substitutes_from_surplus_class(self, ncname):
        assert ncname.make_acceptable('aAa') == 'aA4'

    def test_repairs_first_character(self, ncname):
        assert ncname.make_acceptable('3aB') == 'Fa1'

    def test_qwerty_reference(self, qwerty, qwerty_buffer):
        password = qwerty.make_acceptable(qwerty.encode(qwerty_buffer))
        assert len(password) == 5
        assert password == 'c7F-^'
        counts = Generator.count_categories(password)
        assert counts.get('Lu') == 1
        assert counts.get('Ll') == 1
        assert counts.get('Po') == 1
        assert counts.get('So') == 1
        assert counts.get('No') == 1
        assert qwerty.is_acceptable(password)

    def test_replaces_out_of_range_characters(self, ncname):
        repaired = ncname.make_acceptable('a!B3')
        assert repaired[0] == 'a'
        assert repaired[2:] == 'B3'
        assert ncname.is_acceptable(repaired)

    def test_minimum_above_one(self):
        gen = Generator('Upper2', ALNUM, [ComplexityConstraint('Lu', 2)])
        repaired = gen.make_acceptable('abcdef')
        assert len(repaired) == 6
        assert Generator.count_categories(repaired)['Lu'] == 2
        assert gen.is_acceptable(repaired)

    def test_pads_when_no_donor(self):
        """With nothing to convert, required characters are appended."""
        gen = Generator(
            'Tight', ALNUM,
            [ComplexityConstraint('Lu'), ComplexityConstraint('Ll'), ComplexityConstraint('No')],
            [CharRange('a', 'z')],
        )
        repaired = gen.make_acceptable('a')
        assert repaired[0] == 'a'
        assert len(repaired) == 3
        assert gen.is_acceptable(repaired)

    def test_first_position_never_substituted(self):
        """
        The only donor sits at position 0, so the substitution is skipped
        even though the tallies move; padding then supplies the digit.
        """
        gen = Generator('Digit', ALNUM, [ComplexityConstraint('No')])
        repaired = gen.make_acceptable('Ab')
        assert repaired[:2] == 'Ab'
        assert len(repaired) == 3
        assert repaired[2].isdigit()
        assert gen.is_acceptable(repaired)

    def test_empty_candidate(self, ncname):
        repaired = ncname.make_acceptable('')
        assert ncname.is_acceptable(repaired)

    def test_idempotent(self, registry):
        for gen in registry:
            for _ in range(20):
                password = gen.generate(random_bytes(72))
                assert gen.is_acceptable(password)
                assert gen.make_acceptable(password) == password

    def test_always_converges(self, registry):
        for gen in registry:
            for bits in (8, 16, 24, 40, 64, 88, 128):
                buf = random_bytes(bits)
                assert gen.is_acceptable(gen.make_acceptable(gen.encode(buf))), gen.name

    def test_xml_id_stress(self, registry):
        """Restrictive first character, wide main range; exercises padding."""
        xmlid = registry.generator_of('xml:id')
        rng = random.Random(20171)
        for _ in range(300):
            bits = (55 + rng.randrange(88) + 7) // 8 * 8
            buf = bytes(rng.getrandbits(8) for _ in range(bits // 8))
            password = xmlid.generate(buf)
            assert xmlid.is_acceptable(password), (bits, buf.hex(), password)
