"""Tests for fetching weekly turnstile files."""

import tempfile
import unittest
from datetime import date
from unittest.mock import patch, MagicMock
import sys
from pathlib import Path

import requests

# Add src to path so we can import turnstats
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turnstats.errors import DownloadError
from turnstats.mta_client import TurnstileFileClient, last_saturday, turnstile_filename


class TestLastSaturday(unittest.TestCase):
    """Test locating the weekly file date."""

    def test_saturday_is_today(self):
        self.assertEqual(last_saturday(date(2023, 6, 17)), date(2023, 6, 17))

    def test_sunday_goes_back_one_day(self):
        self.assertEqual(last_saturday(date(2023, 6, 18)), date(2023, 6, 17))

    def test_friday_goes_back_six_days(self):
        self.assertEqual(last_saturday(date(2023, 6, 23)), date(2023, 6, 17))

    def test_across_month_boundary(self):
        self.assertEqual(last_saturday(date(2023, 7, 3)), date(2023, 7, 1))
        self.assertEqual(last_saturday(date(2023, 7, 1)).weekday(), 5)

    def test_filename(self):
        self.assertEqual(turnstile_filename(date(2023, 6, 17)), "turnstile_230617.txt")


class TestTurnstileFileClient(unittest.TestCase):
    """Test downloading weekly files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self.tmp.name)
        self.client = TurnstileFileClient(base_url="http://test/turnstile", data_dir=self.data_dir)

    def tearDown(self):
        self.tmp.cleanup()

    @staticmethod
    def _mock_response(chunks):
        response = MagicMock()
        response.iter_content.return_value = chunks
        response.__enter__.return_value = response
        return response

    @patch("turnstats.mta_client.requests.get")
    def test_existing_file_is_not_downloaded(self, mock_get):
        existing = self.data_dir / "turnstile_230617.txt"
        existing.write_text("C/A,UNIT\n")

        path = self.client.ensure_file("turnstile_230617.txt")

        self.assertEqual(path, existing)
        mock_get.assert_not_called()

    @patch("turnstats.mta_client.requests.get")
    def test_missing_file_is_downloaded(self, mock_get):
        mock_get.return_value = self._mock_response([b"C/A,UNIT\n", b"", b"A002,R051\n"])

        path = self.client.ensure_file("turnstile_230617.txt")

        mock_get.assert_called_once()
        self.assertEqual(mock_get.call_args[0][0], "http://test/turnstile/turnstile_230617.txt")
        self.assertEqual(path.read_bytes(), b"C/A,UNIT\nA002,R051\n")
        self.assertFalse((self.data_dir / "turnstile_230617.txt.part").exists())

    @patch("turnstats.mta_client.requests.get")
    def test_http_error_raises_and_leaves_nothing(self, mock_get):
        response = self._mock_response([])
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = response

        with self.assertRaises(DownloadError):
            self.client.ensure_file("turnstile_230617.txt")

        self.assertEqual(list(self.data_dir.iterdir()), [])

    @patch("turnstats.mta_client.requests.get")
    def test_connection_drop_mid_download_leaves_nothing(self, mock_get):
        def chunks():
            yield b"C/A,UNIT,SCP\n"
            raise requests.ConnectionError("Connection reset by peer")

        mock_get.return_value = self._mock_response(chunks())

        with self.assertRaises(DownloadError):
            self.client.ensure_file("turnstile_230617.txt")

        self.assertFalse((self.data_dir / "turnstile_230617.txt").exists())
        self.assertFalse((self.data_dir / "turnstile_230617.txt.part").exists())

    @patch("turnstats.mta_client.requests.get")
    def test_ensure_latest_uses_last_saturday(self, mock_get):
        mock_get.return_value = self._mock_response([b"x"])

        path = self.client.ensure_latest(today=date(2023, 6, 20))

        self.assertEqual(path.name, "turnstile_230617.txt")


if __name__ == "__main__":
    unittest.main()
