import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from personal_crossword.core.exceptions import UploadError
from personal_crossword.io.upload_client import PuzzleUploadClient


IMAGE = "data:image/png;base64,YWJj"


def fake_response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class UploadClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = PuzzleUploadClient(base_url="https://puzzles.example.com/")

    @patch("personal_crossword.io.upload_client.requests.post")
    def test_save_crossword(self, mock_post: MagicMock) -> None:
        mock_post.return_value = fake_response(
            {"success": True, "url": "https://cdn.example.com/p.png", "public_id": "crosswords/p"}
        )
        result = self.client.save_crossword(IMAGE)

        self.assertEqual(result.url, "https://cdn.example.com/p.png")
        self.assertEqual(result.public_id, "crosswords/p")
        mock_post.assert_called_once_with(
            "https://puzzles.example.com/save-crossword",
            json={"image": IMAGE},
            timeout=60.0,
        )

    @patch("personal_crossword.io.upload_client.requests.post")
    def test_invalid_image_never_posts(self, mock_post: MagicMock) -> None:
        for image in ("", "not-a-data-uri", "data:text/plain;base64,YWJj"):
            with self.assertRaises(UploadError):
                self.client.save_crossword(image)
        mock_post.assert_not_called()

    @patch("personal_crossword.io.upload_client.requests.post")
    def test_rejected_upload(self, mock_post: MagicMock) -> None:
        mock_post.return_value = fake_response({"success": False, "error": "Failed to save image"})
        with self.assertRaises(UploadError) as ctx:
            self.client.save_crossword(IMAGE)
        self.assertIn("Failed to save image", str(ctx.exception))

    @patch("personal_crossword.io.upload_client.requests.post")
    def test_missing_url_in_response(self, mock_post: MagicMock) -> None:
        mock_post.return_value = fake_response({"success": True})
        with self.assertRaises(UploadError):
            self.client.save_crossword(IMAGE)

    @patch("personal_crossword.io.upload_client.requests.post")
    def test_network_error(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.ConnectionError("boom")
        with self.assertRaises(UploadError):
            self.client.save_crossword(IMAGE)

    def test_session_is_used_when_given(self) -> None:
        session = MagicMock()
        session.post.return_value = fake_response({"success": True, "url": "https://cdn.example.com/s.png"})
        client = PuzzleUploadClient(base_url="https://puzzles.example.com", session=session)
        self.assertEqual(client.save_crossword(IMAGE).url, "https://cdn.example.com/s.png")
        session.post.assert_called_once()

    def test_base_url_from_environment(self) -> None:
        with patch.dict(os.environ, {"CROSSWORD_SERVER_URL": "http://localhost:3000"}):
            client = PuzzleUploadClient()
        self.assertEqual(client.base_url, "http://localhost:3000")

    def test_missing_base_url(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(UploadError):
                PuzzleUploadClient()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
