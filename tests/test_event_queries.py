import unittest
from unittest.mock import patch, MagicMock
import os
import sys
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from farm_events.errors import BadRequest, DataUnavailable
from farm_events.services.insights import AI_NOT_CONFIGURED, AI_UNAVAILABLE, InsightComposer
from farm_events.workflows.event_queries import (
    ANALYSIS_INSTRUCTION,
    RECOMMENDATION_INSTRUCTION,
    SEARCH_INSTRUCTION,
    analyze_events,
    list_events,
    search_events,
)

CSV_TEXT = (
    "Otsikko,Tiivistelmä,Aiheet,Tyyppi\n"
    "Soil health workshop,Hands-on,\"Soil, Water\",Workshop\n"
    "Market trends,Prices,Markets,Webinar\n"
    "Drainage day,Field demo,Soil,Workshop\n"
)


class CsvFixtureMixin:

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self._tmp.name, "events.csv")
        with open(self.csv_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(CSV_TEXT)

    def tearDown(self):
        self._tmp.cleanup()


class TestListAndSearch(CsvFixtureMixin, unittest.TestCase):

    def test_list_events(self):
        records = list_events(self.csv_path)
        self.assertEqual(len(records), 3)

    def test_search_events_filters_and_composes_once(self):
        composer = MagicMock(spec=InsightComposer)
        composer.compose_json.return_value = "Both are about soil."

        result = search_events("soil", composer, self.csv_path)

        self.assertEqual([r.title for r in result.records], ["Soil health workshop", "Drainage day"])
        self.assertEqual(result.insight, "Both are about soil.")
        composer.compose_json.assert_called_once()
        payload, instruction = composer.compose_json.call_args.args
        self.assertEqual(instruction, SEARCH_INSTRUCTION)
        self.assertEqual([row["Otsikko"] for row in payload], ["Soil health workshop", "Drainage day"])

    @patch('farm_events.workflows.event_queries.filter_records')
    @patch('farm_events.workflows.event_queries.load_records')
    def test_blank_query_rejected_before_loading(self, mock_load_records, mock_filter_records):
        composer = MagicMock(spec=InsightComposer)
        for query in (None, "", "   ", "\t\n"):
            with self.assertRaises(BadRequest):
                search_events(query, composer, self.csv_path)

        mock_load_records.assert_not_called()
        mock_filter_records.assert_not_called()
        composer.compose_json.assert_not_called()

    def test_search_without_ai_uses_sentinel(self):
        result = search_events("market", InsightComposer(None), self.csv_path)
        self.assertEqual(len(result.records), 1)
        self.assertEqual(result.insight, AI_NOT_CONFIGURED)

    def test_search_missing_file_propagates(self):
        with self.assertRaises(DataUnavailable):
            search_events("soil", InsightComposer(None), os.path.join(self._tmp.name, "missing.csv"))


class TestAnalytics(CsvFixtureMixin, unittest.IsolatedAsyncioTestCase):

    async def test_analyze_events_tables_and_insights(self):
        mock_client = MagicMock()

        def reply(**kwargs):
            content = kwargs["messages"][0]["content"]
            text = "analysis" if content.startswith(ANALYSIS_INSTRUCTION) else "recommendations"
            return MagicMock(choices=[MagicMock(message=MagicMock(content=text))])

        mock_client.chat.completions.create.side_effect = reply

        result = await analyze_events(InsightComposer(mock_client), self.csv_path)

        self.assertEqual(result.total_events, 3)
        self.assertEqual(result.theme_analysis, {"Soil": 2, "Water": 1, "Markets": 1})
        self.assertEqual(result.type_analysis, {"Workshop": 2, "Webinar": 1})
        self.assertEqual(result.ai_analysis, "analysis")
        self.assertEqual(result.ai_recommendations, "recommendations")
        self.assertEqual(mock_client.chat.completions.create.call_count, 2)

        prompts = [c.kwargs["messages"][0]["content"] for c in mock_client.chat.completions.create.call_args_list]
        self.assertTrue(any(p.startswith(RECOMMENDATION_INSTRUCTION) for p in prompts))

    async def test_one_failing_insight_does_not_block_the_other(self):
        mock_client = MagicMock()

        def reply(**kwargs):
            if kwargs["messages"][0]["content"].startswith(ANALYSIS_INSTRUCTION):
                raise TimeoutError("upstream timed out")
            return MagicMock(choices=[MagicMock(message=MagicMock(content="Add more water events."))])

        mock_client.chat.completions.create.side_effect = reply

        result = await analyze_events(InsightComposer(mock_client), self.csv_path)

        self.assertEqual(result.ai_analysis, AI_UNAVAILABLE)
        self.assertEqual(result.ai_recommendations, "Add more water events.")

    async def test_analyze_without_credential(self):
        result = await analyze_events(InsightComposer(None), self.csv_path)
        self.assertEqual(result.ai_analysis, AI_NOT_CONFIGURED)
        self.assertEqual(result.ai_recommendations, AI_NOT_CONFIGURED)


if __name__ == '__main__':
    unittest.main()
