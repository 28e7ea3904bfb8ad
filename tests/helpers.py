import json
from pathlib import Path
from unittest.mock import MagicMock


FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://www.dwolla.com/oauth/rest"


def fixture(name):
    """Load a JSON fixture body."""
    return json.loads((FIXTURES_DIR / name).read_text())


def fake_response(body):
    response = MagicMock()
    response.json.return_value = body
    return response


def requested_query(mocked):
    """Query parameters of the last call, in the order they were sent."""
    return list(mocked.call_args.kwargs["params"])
