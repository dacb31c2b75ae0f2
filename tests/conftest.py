import pytest

import settings
from modules.database import ClaimTracker
from modules.utils import logger

HOUR = 60 * 60 * 1000


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None):
        self.status_code = status_code
        self.payload = payload

    def json(self):
        if isinstance(self.payload, Exception): raise self.payload
        return self.payload


class FakeSession:
    " replays queued responses, records every POST "

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def post(self, url, **kwargs):
        self.requests.append((url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception): raise response
        return response


class FakeConsole:
    def __init__(self, *answers):
        self.answers = list(answers)

    def ask(self, message):
        return self.answers.pop(0)


@pytest.fixture()
def tracker(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "MAX_CLAIMS_PER_DAY", 10)
    monkeypatch.setattr(settings, "COOLDOWN_HOURS", 24)
    return ClaimTracker(ledger_path=str(tmp_path / "databases" / "claims.json"))


@pytest.fixture()
def sleeps(monkeypatch):
    calls = []
    fake_sleeping = lambda *timing: calls.append(timing)
    monkeypatch.setattr("modules.faucet.sleeping", fake_sleeping)
    monkeypatch.setattr("modules.wallet.sleeping", fake_sleeping)
    return calls


@pytest.fixture()
def wallet_file(tmp_path, monkeypatch):
    path = tmp_path / "wallets.txt"
    monkeypatch.setattr(settings, "WALLET_FILE", str(path))
    return path


@pytest.fixture(autouse=True)
def no_telegram(monkeypatch):
    monkeypatch.setattr(settings, "TG_BOT_TOKEN", "")
    monkeypatch.setattr(settings, "TG_USER_ID", [])


@pytest.fixture()
def logs():
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
