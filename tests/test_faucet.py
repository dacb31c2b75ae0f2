import settings
from modules.faucet import FaucetClient, NoRetryFixedPacing, RetryOnRateLimit, RATE_LIMIT_ERROR
from conftest import FakeResponse, FakeSession

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
SUCCESS = {"success": True, "data": {"hash": "0xabc", "amount": "500000000000000000"}}


def test_successful_claim(sleeps):
    session = FakeSession(FakeResponse(200, SUCCESS))
    result = FaucetClient(session=session, url="https://faucet.test/api/faucet").claim(ADDRESS)

    assert result.success
    assert result.hash == "0xabc"
    assert result.amount == "500000000000000000"

    url, kwargs = session.requests[0]
    assert url == "https://faucet.test/api/faucet"
    assert kwargs["json"] == {"address": ADDRESS}
    assert sleeps == [(settings.CLAIM_DELAY,)]


def test_application_failure_is_generic(sleeps):
    result = FaucetClient(session=FakeSession(FakeResponse(200, {"success": False}))).claim(ADDRESS)
    assert not result.success
    assert result.error == "Faucet claim failed"
    assert not result.rate_limited


def test_rate_limit_is_distinguished(sleeps):
    result = FaucetClient(session=FakeSession(FakeResponse(429, {"error": "slow down"}))).claim(ADDRESS)
    assert not result.success
    assert result.rate_limited
    assert result.error == RATE_LIMIT_ERROR


def test_other_http_errors_are_not_rate_limits(sleeps):
    result = FaucetClient(session=FakeSession(FakeResponse(500))).claim(ADDRESS)
    assert not result.rate_limited
    assert result.error == "Request failed with status code 500"


def test_transport_error_message_is_verbatim(sleeps):
    result = FaucetClient(session=FakeSession(ConnectionError("connection reset by peer"))).claim(ADDRESS)
    assert not result.success
    assert result.error == "connection reset by peer"


def test_retry_on_rate_limit_gives_up_after_three_attempts(sleeps):
    session = FakeSession(*[FakeResponse(429) for _ in range(3)])
    result = RetryOnRateLimit(attempts=3, wait=60).run(FaucetClient(session=session), ADDRESS)

    assert len(session.requests) == 3
    assert not result.success
    assert result.rate_limited
    assert "Gave up after 3 attempts" in result.error
    # each attempt has its own pre-request delay, backoffs only between attempts
    assert sleeps.count((60,)) == 2
    assert sleeps.count((settings.CLAIM_DELAY,)) == 3


def test_retry_on_rate_limit_recovers(sleeps):
    session = FakeSession(FakeResponse(429), FakeResponse(200, SUCCESS))
    result = RetryOnRateLimit(attempts=3, wait=60).run(FaucetClient(session=session), ADDRESS)

    assert result.success
    assert len(session.requests) == 2


def test_retry_policy_does_not_retry_other_failures(sleeps):
    session = FakeSession(FakeResponse(500), FakeResponse(200, SUCCESS))
    result = RetryOnRateLimit(attempts=3, wait=60).run(FaucetClient(session=session), ADDRESS)

    assert not result.success
    assert len(session.requests) == 1


def test_bulk_policy_makes_single_attempt(sleeps):
    session = FakeSession(FakeResponse(429), FakeResponse(200, SUCCESS))
    policy = NoRetryFixedPacing(pacing=5)
    result = policy.run(FaucetClient(session=session), ADDRESS)

    assert result.rate_limited
    assert len(session.requests) == 1

    policy.pace()
    assert sleeps[-1] == (5,)


def test_retry_policy_keeps_explicit_attempts(sleeps):
    assert RetryOnRateLimit(attempts=1).attempts == 1
    assert RetryOnRateLimit(attempts=0).attempts == 1

    session = FakeSession(FakeResponse(429), FakeResponse(200, SUCCESS))
    result = RetryOnRateLimit(attempts=1, wait=60).run(FaucetClient(session=session), ADDRESS)

    assert result.rate_limited
    assert len(session.requests) == 1
    assert (60,) not in sleeps
