"""Tests for contact field extraction."""
import unittest

from extraction.resume.fields import extract_fields, guess_name


class TestExtractFields(unittest.TestCase):
    """Test suite for extract_fields."""

    def test_basic_profile(self):
        text = "John Smith\njohn@x.com\n+1 555-123-4567\nEducation\nMIT"

        profile = extract_fields(text)

        self.assertEqual(profile.full_name, "John Smith")
        self.assertEqual(profile.email, "john@x.com")
        self.assertEqual(profile.phone, "+1 555-123-4567")
        self.assertIsNone(profile.link)

    def test_first_email_wins(self):
        text = "Contact: first@example.com or second@example.org"

        profile = extract_fields(text)

        self.assertEqual(profile.email, "first@example.com")

    def test_chinese_mobile_numbers(self):
        self.assertEqual(extract_fields("电话：13812345678").phone, "13812345678")
        self.assertEqual(extract_fields("Tel +86 13812345678").phone, "+86 13812345678")

    def test_area_code_number(self):
        self.assertEqual(extract_fields("Office 010-12345678").phone, "010-12345678")

    def test_grouped_number(self):
        self.assertEqual(extract_fields("Call 555-123-4567 today").phone, "555-123-4567")

    def test_links(self):
        self.assertEqual(
            extract_fields("Site: https://example.com/me and more").link,
            "https://example.com/me",
        )
        self.assertEqual(extract_fields("github.com/jsmith").link, "github.com/jsmith")
        self.assertEqual(
            extract_fields("LinkedIn.com/in/jane-doe").link,
            "LinkedIn.com/in/jane-doe",
        )

    def test_missing_fields_are_none(self):
        profile = extract_fields("")

        self.assertIsNone(profile.full_name)
        self.assertIsNone(profile.email)
        self.assertIsNone(profile.phone)
        self.assertIsNone(profile.link)

    def test_values_are_substrings_of_input(self):
        samples = [
            "Jane Doe\njane@doe.io\n(555) 123-4567\nhttps://jane.dev",
            "张三\n邮箱: zhangsan@example.com\n电话: 13912345678",
            "@@@ ### 2020\n\n\n|||",
            "x" * 500,
            "http://\n@\n+86",
        ]
        for text in samples:
            profile = extract_fields(text)
            for value in profile.model_dump().values():
                if value is not None:
                    self.assertIn(value, text)


class TestGuessName(unittest.TestCase):
    """Test suite for guess_name."""

    def test_skips_header_words(self):
        self.assertEqual(guess_name(["RESUME", "Jane Doe"]), "Jane Doe")
        self.assertEqual(guess_name(["Curriculum Vitae", "Jane Doe"]), "Jane Doe")
        self.assertEqual(guess_name(["个人简历", "张三"]), "张三")

    def test_skips_lines_with_digits_or_at(self):
        self.assertEqual(
            guess_name(["2020 Portfolio", "jane@doe.io", "Jane Doe"]),
            "Jane Doe",
        )

    def test_length_bounds(self):
        self.assertIsNone(guess_name(["J"]))
        self.assertIsNone(guess_name(["A" * 30]))
        self.assertEqual(guess_name(["A" * 29]), "A" * 29)

    def test_only_leading_lines_are_scanned(self):
        lines = [f"Line {i}" for i in range(10)] + ["Late Name"]

        self.assertIsNone(guess_name(lines))
        self.assertEqual(guess_name(lines, scan_lines=11), "Late Name")

    def test_blank_lines_do_not_count(self):
        self.assertEqual(guess_name(["", "   ", "Jane Doe"]), "Jane Doe")
