"""Tests for short code generation."""

import pytest
from shortener.shortcode import ShortCodeGenerator, generate_shortcode
from shortener.common.validators import validate_shortcode


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_default(self):
        """Generated codes are 6 alphanumeric characters."""
        generator = ShortCodeGenerator(default_length=6)

        for _ in range(200):
            code = generator.generate()
            assert len(code) == 6
            assert code.isascii() and code.isalnum()
            assert validate_shortcode(code)

    def test_generate_from_uuid_custom_length(self):
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate_from_uuid(length=10)
        assert len(code) == 10
        assert validate_shortcode(code)

    def test_generate_varies(self):
        generator = ShortCodeGenerator()

        codes = {generator.generate() for _ in range(50)}
        assert len(codes) > 1

    def test_module_helper(self):
        code = generate_shortcode()
        assert len(code) == 6
        assert validate_shortcode(code)

    def test_base62_conversion(self):
        generator = ShortCodeGenerator()

        assert generator._int_to_base62(0) == "a"
        assert generator._int_to_base62(61) == "9"
        assert generator._int_to_base62(62) == "ba"

    @pytest.mark.parametrize("length", [0, 21])
    def test_rejects_bad_default_length(self, length):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=length)
