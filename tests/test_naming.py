"""Canonicalizer and variant classifier tests."""

import unittest

from iconbuild.naming import (
    canonicalize,
    classify,
    is_fill,
    strip_fill_suffix,
    to_component_id,
    to_file_slug,
)

SAMPLE_NAMES = [
    "home",
    "home-fill",
    "account_circle",
    "account_circle-fill",
    "3d_rotation",
    "10k",
    "123",
    "arrow_back_ios_new",
    "wifi-fill",
    "AddBox",
    "-fill",
]


class TestCanonicalize(unittest.TestCase):
    def test_snake_case_name(self) -> None:
        name = canonicalize("account_circle")
        self.assertEqual(name.component_id, "AccountCircle")
        self.assertEqual(name.file_slug, "account-circle")

    def test_digit_leading_name_gets_prefix(self) -> None:
        name = canonicalize("3d_rotation")
        self.assertEqual(name.component_id, "Icon3DRotation")
        self.assertEqual(name.file_slug, "3d-rotation")

    def test_single_word(self) -> None:
        name = canonicalize("home")
        self.assertEqual(name.component_id, "Home")
        self.assertEqual(name.file_slug, "home")

    def test_fill_suffix_is_part_of_the_identifier(self) -> None:
        name = canonicalize("home-fill")
        self.assertEqual(name.component_id, "HomeFill")
        self.assertEqual(name.file_slug, "home-fill")

    def test_segments_are_lowercased_after_first_letter(self) -> None:
        self.assertEqual(to_component_id("WIFI_OFF"), "WifiOff")

    def test_digit_only_name(self) -> None:
        self.assertEqual(to_component_id("123"), "Icon123")
        self.assertEqual(to_file_slug("123"), "123")

    def test_slug_without_separators_splits_case_boundaries(self) -> None:
        self.assertEqual(to_file_slug("AddBox"), "addbox")
        self.assertEqual(to_file_slug("10k"), "10-k")

    def test_deterministic_across_calls(self) -> None:
        for raw_name in SAMPLE_NAMES:
            self.assertEqual(canonicalize(raw_name), canonicalize(raw_name))

    def test_slug_is_idempotent(self) -> None:
        for raw_name in SAMPLE_NAMES:
            slug = to_file_slug(raw_name)
            self.assertEqual(to_file_slug(slug), slug, raw_name)

    def test_component_ids_are_identifiers(self) -> None:
        for raw_name in SAMPLE_NAMES:
            component_id = to_component_id(raw_name)
            self.assertFalse(component_id[:1].isdigit(), raw_name)


class TestClassify(unittest.TestCase):
    def test_fill_variant(self) -> None:
        key = classify("home-fill")
        self.assertEqual(key.base_name, "home")
        self.assertEqual(key.variant, "fill")

    def test_outline_variant(self) -> None:
        key = classify("account_circle")
        self.assertEqual(key.base_name, "account_circle")
        self.assertEqual(key.variant, "outline")

    def test_suffix_token_alone_is_outline(self) -> None:
        key = classify("-fill")
        self.assertEqual(key.base_name, "-fill")
        self.assertEqual(key.variant, "outline")
        self.assertFalse(is_fill("-fill"))

    def test_fill_inside_name_is_not_a_variant(self) -> None:
        self.assertEqual(classify("format_color_fill").variant, "outline")
        self.assertEqual(classify("fill-home").variant, "outline")

    def test_stripping_is_idempotent(self) -> None:
        for raw_name in SAMPLE_NAMES + ["home-fill-fill"]:
            base = classify(raw_name).base_name
            self.assertTrue(base)
            self.assertEqual(classify(base).base_name, base, raw_name)

    def test_repeated_suffix_is_stripped_completely(self) -> None:
        self.assertEqual(strip_fill_suffix("home-fill-fill"), "home")


if __name__ == "__main__":
    unittest.main()
