"""Tests for the runnable demo scripts."""

import runpy
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from starter_utils.http_request import DEFAULT_URL


SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def run_script(name):
    return runpy.run_path(str(SCRIPTS_DIR / name), run_name="__main__")


@pytest.fixture
def request_google():
    """Module globals of request_google.py, without running main()."""
    return runpy.run_path(str(SCRIPTS_DIR / "request_google.py"))


class TestRequestGoogle:
    @patch("starter_utils.http_request.requests.get")
    def test_prints_three_lines_on_success(self, mock_get, capsys):
        response = MagicMock(spec=requests.Response)
        response.status_code = 200
        response.text = "<html>google</html>"
        mock_get.return_value = response

        run_script("request_google.py")

        mock_get.assert_called_once_with(DEFAULT_URL)
        assert capsys.readouterr().out.splitlines() == [
            "error: None",
            "statusCode: 200",
            "body: <html>google</html>",
        ]

    @patch("starter_utils.http_request.requests.get")
    def test_prints_three_lines_on_transport_error(self, mock_get, capsys):
        mock_get.side_effect = requests.ConnectionError("no route to host")

        run_script("request_google.py")

        assert capsys.readouterr().out.splitlines() == [
            "error: ConnectionError('no route to host')",
            "statusCode: None",
            "body: None",
        ]

    def test_print_outcome_without_response(self, request_google, capsys):
        request_google["print_outcome"](None, None, None)

        assert capsys.readouterr().out.splitlines() == [
            "error: None",
            "statusCode: None",
            "body: None",
        ]


def test_index_prints_report(capsys):
    run_script("index.py")

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "circle: area, circumference",
        "add: add, is_number",
        "The area of a circle with a radius of 4 is: 50.27",
        "The circumference of a circle with a radius of 4 is: 25.13",
        "2 + 2 = 4",
    ]
