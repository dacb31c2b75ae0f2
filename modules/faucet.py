from dataclasses import dataclass
from tls_client import Session

from modules.utils import logger, sleeping
import modules.config as config
import settings


RATE_LIMIT_ERROR = "Rate limit reached. Please wait 24 hours before trying again."


@dataclass
class ClaimResult:
    success: bool
    hash: str = None
    amount: str = None
    error: str = None
    rate_limited: bool = False
    remaining_claims: int = None


class FaucetClient:
    def __init__(self, session=None, url: str = None):
        self.url = url or settings.FAUCET_API
        self.session = session or self.get_new_session()


    def get_new_session(self):
        session = Session(
            client_identifier="chrome_120",
            random_tls_extension_order=True
        )
        session.headers.update(config.FAUCET_HEADERS)

        if settings.PROXY not in ['http://log:pass@ip:port', '']:
            session.proxies.update({'http': settings.PROXY, 'https': settings.PROXY})

        return session


    def claim(self, address: str) -> ClaimResult:
        try:
            sleeping(settings.CLAIM_DELAY)

            r = self.session.post(self.url, json={"address": address}, timeout_seconds=30)

            if r.status_code == 429:
                return ClaimResult(success=False, error=RATE_LIMIT_ERROR, rate_limited=True)
            elif r.status_code >= 400:
                return ClaimResult(success=False, error=f'Request failed with status code {r.status_code}')

            response = r.json()
            if response.get("success"):
                return ClaimResult(success=True, hash=response["data"]["hash"], amount=response["data"]["amount"])
            return ClaimResult(success=False, error="Faucet claim failed")

        except Exception as err:
            return ClaimResult(success=False, error=str(err))


class RetryOnRateLimit:
    def __init__(self, attempts: int = None, wait: int = None):
        # at least one request is always made
        self.attempts = max(settings.RATE_LIMIT_ATTEMPTS if attempts is None else attempts, 1)
        self.wait = settings.RATE_LIMIT_WAIT if wait is None else wait


    def run(self, client: FaucetClient, address: str) -> ClaimResult:
        for attempt in range(1, self.attempts + 1):
            result = client.claim(address)
            if not result.rate_limited:
                return result

            if attempt < self.attempts:
                logger.warning(f'[-] Faucet | {result.error} Retrying in {self.wait}s [{attempt}/{self.attempts}]')
                sleeping(self.wait)

        result.error = f'{result.error} Gave up after {self.attempts} attempts.'
        return result


class NoRetryFixedPacing:
    def __init__(self, pacing: int = None):
        self.pacing = settings.BULK_PACING if pacing is None else pacing


    def run(self, client: FaucetClient, address: str) -> ClaimResult:
        return client.claim(address)


    def pace(self):
        logger.debug(f'[•] Faucet | Waiting {self.pacing} seconds before next wallet...')
        sleeping(self.pacing)
