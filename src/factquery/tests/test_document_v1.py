from __future__ import annotations

import json
import unittest

from factquery.errors import QueryValidationError
from factquery.ir.document import QueryDocument, dump_query, parse_query, query_json_schema
from factquery.ir.query import Query
from factquery.ir.terms import Const, Var


class QueryDocumentV1Tests(unittest.TestCase):
    def test_parse_mapping(self) -> None:
        query = parse_query(
            {"find": ["?year"], "where": [["?id", "movie/title", "Alien"], ["?id", "movie/year", "?year"]]}
        )
        self.assertIsInstance(query, Query)
        self.assertEqual(query.find, (Var("?year"),))
        self.assertEqual(query.where[0].value, Const("Alien"))

    def test_parse_json_keeps_scalar_types(self) -> None:
        query = parse_query('{"find": ["?a", 1, true], "where": [[200, "?a", 1979.5]]}')
        self.assertEqual(query.find, (Var("?a"), Const(1), Const(True)))
        self.assertIsInstance(query.find[1].value, int)
        self.assertIsInstance(query.find[2].value, bool)
        self.assertEqual(query.where[0].entity, Const(200))
        self.assertEqual(query.where[0].value, Const(1979.5))

    def test_wrong_arity_is_rejected(self) -> None:
        with self.assertRaisesRegex(QueryValidationError, "where\\[1\\]"):
            parse_query({"find": ["?a"], "where": [["?a", "b", "c"], ["?a", "b"]]})

    def test_shape_errors_are_rejected(self) -> None:
        bad_payloads = [
            {"find": ["?a"]},
            {"where": []},
            {"find": ["?a"], "where": [], "limit": 3},
            {"find": "?a", "where": []},
            {"find": ["?a"], "where": [[["nested"], "b", "c"]]},
            {"find": ["?"], "where": []},
            "not json",
        ]
        for payload in bad_payloads:
            with self.subTest(payload=payload):
                with self.assertRaises(QueryValidationError):
                    parse_query(payload)

    def test_dump_query_round_trips(self) -> None:
        data = {"find": ["?attr", "?value"], "where": [[1, "?attr", "?value"]]}
        text = dump_query(parse_query(data))
        self.assertEqual(json.loads(text), data)
        self.assertEqual(parse_query(text), parse_query(data))

    def test_json_schema_lists_fields(self) -> None:
        schema = query_json_schema()
        self.assertEqual(set(schema["required"]), {"find", "where"})
        self.assertIn("find", schema["properties"])

    def test_document_is_frozen(self) -> None:
        doc = QueryDocument(find=["?a"], where=[])
        with self.assertRaises(Exception):
            doc.find = ["?b"]


if __name__ == "__main__":
    unittest.main()
