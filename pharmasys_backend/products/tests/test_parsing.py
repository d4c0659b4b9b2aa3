# products/tests/test_parsing.py

from __future__ import annotations

from decimal import Decimal

from django.test import SimpleTestCase

from common.exceptions import ValidationError
from products.services._parsing import to_int


class ToIntTests(SimpleTestCase):
    def test_accepts_plain_integers(self):
        self.assertEqual(to_int("12", field_name="qty"), 12)
        self.assertEqual(to_int(" -3 ", field_name="qty"), -3)
        self.assertEqual(to_int(Decimal("4"), field_name="qty"), 4)
        self.assertEqual(to_int(7, field_name="qty"), 7)

    def test_rejects_non_ascii_digits_and_repeated_signs(self):
        for raw in ["²", "٣", "--5", "-", "1.5", "5-", True]:
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError):
                    to_int(raw, field_name="qty")

    def test_blank_is_required(self):
        with self.assertRaisesMessage(ValidationError, "qty is required"):
            to_int("  ", field_name="qty")
