import unittest
from unittest.mock import patch
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from farm_events.clients import build_openai_client, get_session


class TestOpenAIClient(unittest.TestCase):

    @patch('farm_events.clients.openai_client._OpenAIClient')
    def test_no_key_returns_none_without_constructing(self, mock_openai_cls):
        with self.assertLogs("farm_events.clients.openai_client", level="WARNING"):
            self.assertIsNone(build_openai_client(api_key=None))
        self.assertIsNone(build_openai_client(api_key=""))
        mock_openai_cls.assert_not_called()

    @patch('farm_events.clients.openai_client._OpenAIClient')
    def test_key_constructs_client_with_timeout(self, mock_openai_cls):
        client = build_openai_client(api_key="k", timeout=5)

        mock_openai_cls.assert_called_once_with(api_key="k", timeout=5)
        self.assertIs(client, mock_openai_cls.return_value)

    @patch('farm_events.clients.openai_client._OpenAIClient')
    def test_default_timeout_from_config(self, mock_openai_cls):
        from farm_events.config import OPENAI_TIMEOUT

        build_openai_client(api_key="k")

        self.assertEqual(mock_openai_cls.call_args.kwargs["timeout"], OPENAI_TIMEOUT)


class TestHttpSession(unittest.TestCase):

    def test_get_session_is_singleton_with_json_header(self):
        session = get_session()
        self.assertIs(session, get_session())
        self.assertEqual(session.headers["Content-Type"], "application/json")


if __name__ == '__main__':
    unittest.main()
