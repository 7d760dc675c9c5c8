"""Tests for :class:`nutclient.response.Response`."""

import unittest
from decimal import Decimal

from nutclient.errors import InvalidResponseError, NumericParseError
from nutclient.response import Response


class ResponseTests(unittest.TestCase):
    def test_columns_are_unescaped(self):
        response = Response('VAR ups1 ups.status "OL CHRG"')
        self.assertEqual(response.columns, ("VAR", "ups1", "ups.status", "OL CHRG"))
        self.assertEqual(response.column(3), "OL CHRG")
        self.assertEqual(len(response), 4)
        self.assertEqual(response.raw, 'VAR ups1 ups.status "OL CHRG"')
        self.assertEqual(str(response), response.raw)

    def test_empty_line_is_invalid(self):
        with self.assertRaises(InvalidResponseError) as ctx:
            Response("")
        self.assertEqual(ctx.exception.response, "")

    def test_whitespace_line_is_invalid(self):
        with self.assertRaises(InvalidResponseError):
            Response("    ")

    def test_missing_column(self):
        response = Response("NUMLOGINS ups1")
        with self.assertRaises(InvalidResponseError) as ctx:
            response.column(2)
        self.assertEqual(ctx.exception.response, "NUMLOGINS ups1")
        with self.assertRaises(InvalidResponseError):
            response.column(-1)

    def test_numeric_column(self):
        response = Response('VAR ups1 battery.charge "100" 12.50 -3 1E3')
        self.assertEqual(response.column_as_number(3), Decimal("100"))
        self.assertEqual(response.column_as_number(4), Decimal("12.50"))
        self.assertEqual(response.column_as_number(5), Decimal("-3"))
        self.assertEqual(response.column_as_number(6), Decimal("1000"))

    def test_non_numeric_column(self):
        response = Response('VAR ups1 ups.status OL NaN "1 2" 1_000')
        for index in (3, 4, 5, 6):
            with self.subTest(index=index):
                with self.assertRaises(NumericParseError):
                    response.column_as_number(index)

    def test_numeric_parse_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            Response("X abc").column_as_number(1)

    def test_numeric_access_on_missing_column(self):
        with self.assertRaises(InvalidResponseError):
            Response("NUMLOGINS ups1").column_as_number(2)


if __name__ == "__main__":
    unittest.main()
