from __future__ import annotations

import time
import unittest

from recipebox.extractor import classify_line, is_valid_ingredient, looks_like_quantity
from recipebox.extractor.classifier import is_single_letter_word, match_line
from recipebox.extractor.tables import DEFAULT_CONFIG, LINE_PATTERNS


class QuantityTests(unittest.TestCase):
    def test_amounts(self) -> None:
        for token in [
            "200g", "2個", "1本", "大さじ1", "小さじ1/2", "少々", "適量",
            "1/2カップ", "100 ml", "3 cups", "1.5kg", "２枚",
            "1かけ", "お好みで", "1個 お好みで",
        ]:
            with self.subTest(token=token):
                self.assertTrue(looks_like_quantity(token))

    def test_names(self) -> None:
        for token in ["トマト", "鶏もも肉", "g", "大", "オリーブオイル", "大さじ", "塩 少々", ""]:
            with self.subTest(token=token):
                self.assertFalse(looks_like_quantity(token))

    def test_amounts_with_inner_spaces(self) -> None:
        self.assertTrue(looks_like_quantity("1 1/2カップ"))
        self.assertTrue(looks_like_quantity("大さじ 2"))
        self.assertFalse(looks_like_quantity("1 トマト"))

    def test_long_whitespace_runs_fail_fast(self) -> None:
        spaces = " " * 5000
        for token in [
            "1" + spaces + "x",
            "大さじ" + spaces + "x",
            "1" + spaces + "個" + spaces + "x",
            "1 " * 2500 + "x",
        ]:
            with self.subTest(token=token[:12]):
                started = time.monotonic()
                self.assertFalse(looks_like_quantity(token))
                self.assertLess(time.monotonic() - started, 1.0)


class ValidityTests(unittest.TestCase):
    def test_rejects(self) -> None:
        for candidate in ["a", "", "123", "1.5", "(2)", "（3）", "Salt", "Olive Oil", "チャンネルの動画", "詳細はこちら"]:
            with self.subTest(candidate=candidate):
                self.assertFalse(is_valid_ingredient(candidate))

    def test_rejects_single_fullwidth_symbols(self) -> None:
        for candidate in ["１", "！", "「", "ー", "＃", "１２", "！？", "【】", "★ ☆"]:
            with self.subTest(candidate=candidate):
                self.assertFalse(is_valid_ingredient(candidate))

    def test_accepts(self) -> None:
        for candidate in ["トマト", "塩", "卵", "Tomato缶", "オリーブ オイル"]:
            with self.subTest(candidate=candidate):
                self.assertTrue(is_valid_ingredient(candidate))

    def test_single_letter_words(self) -> None:
        self.assertTrue(is_single_letter_word("塩"))
        self.assertTrue(is_single_letter_word("す"))
        self.assertFalse(is_single_letter_word("！"))
        self.assertFalse(is_single_letter_word("ー"))
        self.assertFalse(is_single_letter_word("塩塩"))


class PatternOrderTests(unittest.TestCase):
    def test_priority_is_explicit(self) -> None:
        self.assertEqual(
            [name for name, _ in LINE_PATTERNS],
            [
                "bullet_label_value",
                "quantity_then_name",
                "name_then_quantity",
                "bullet_only",
                "ascii_parenthesised",
                "fullwidth_parenthesised",
            ],
        )

    def test_first_matching_pattern(self) -> None:
        cases = {
            "・トマト 2個": "bullet_label_value",
            "トマト 2個": "quantity_then_name",
            "トマト:2個": "name_then_quantity",
            "・トマト": "bullet_only",
            "豚肉(200g)": "ascii_parenthesised",
            "豚肉（200g）": "fullwidth_parenthesised",
        }
        for line, expected in cases.items():
            with self.subTest(line=line):
                name, _ = match_line(line, DEFAULT_CONFIG)
                self.assertEqual(name, expected)

    def test_no_pattern(self) -> None:
        self.assertIsNone(match_line("トマト", DEFAULT_CONFIG))

    def test_earlier_pattern_wins(self) -> None:
        # bullet_only matches first, so the full-width quantity stays attached
        self.assertEqual(classify_line("・豚肉（200g）"), "豚肉（200g）")
        self.assertEqual(classify_line("豚肉（200g）"), "豚肉")


class ClassifyLineTests(unittest.TestCase):
    def test_name_before_quantity(self) -> None:
        self.assertEqual(classify_line("・トマト 2個"), "トマト")
        self.assertEqual(classify_line("トマト:2個"), "トマト")

    def test_quantity_before_name(self) -> None:
        self.assertEqual(classify_line("2個 トマト"), "トマト")
        self.assertEqual(classify_line("大さじ1 醤油"), "醤油")

    def test_two_names_are_joined(self) -> None:
        self.assertEqual(classify_line("オリーブ オイル"), "オリーブ オイル")

    def test_two_quantities_are_dropped(self) -> None:
        self.assertIsNone(classify_line("200g 2個"))
        self.assertIsNone(classify_line("・大さじ1 少々"))

    def test_noise_lines(self) -> None:
        for line in [
            "https://example.com/トマト 2個",
            "詳しくは www.example.com",
            "3:15 トマトを切る",
            "Subscribe トマト",
            "Like トマト 2個",
            "コメント欄 教えて",
            "チャンネル登録 よろしく",
        ]:
            with self.subTest(line=line):
                self.assertIsNone(classify_line(line))

    def test_blank_line(self) -> None:
        self.assertIsNone(classify_line("   "))

    def test_latin_only_candidate(self) -> None:
        self.assertIsNone(classify_line("- Olive oil"))

    def test_truncation(self) -> None:
        result = classify_line("・" + "あ" * 51)
        self.assertEqual(result, "あ" * 50 + "...")
        self.assertEqual(classify_line("・" + "あ" * 50), "あ" * 50)


if __name__ == "__main__":
    unittest.main()
