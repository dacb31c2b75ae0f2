from dataclasses import dataclass, field
from enum import Enum
from os import path, makedirs
from math import ceil
import json

from modules.utils import logger, now_ms, format_ms
import settings


HOUR_MS = 60 * 60 * 1000


class ClaimReason(str, Enum):
    DAILY_LIMIT_REACHED = "DailyLimitReached"
    ADDRESS_COOLDOWN = "AddressCooldown"
    ELIGIBLE = "Eligible"


@dataclass
class ClaimLedger:
    claims: dict = field(default_factory=dict)
    daily_count: int = 0
    last_reset: int = 0

    @classmethod
    def zeroed(cls, now: int = None):
        return cls(claims={}, daily_count=0, last_reset=now if now is not None else now_ms())

    @classmethod
    def from_dict(cls, data: dict):
        claims = data["claims"]
        if not isinstance(claims, dict): raise ValueError(f'claims must be an object, got {type(claims).__name__}')
        return cls(
            claims={str(address): int(timestamp) for address, timestamp in claims.items()},
            daily_count=int(data["dailyCount"]),
            last_reset=int(data["lastReset"]),
        )

    def to_dict(self):
        return {"claims": dict(self.claims), "dailyCount": self.daily_count, "lastReset": self.last_reset}


@dataclass
class ClaimDecision:
    eligible: bool
    reason: ClaimReason
    next_reset: int = None
    hours_remaining: int = None

    @property
    def message(self):
        if self.reason == ClaimReason.DAILY_LIMIT_REACHED:
            return f'Daily limit reached ({settings.MAX_CLAIMS_PER_DAY} claims). Reset at {format_ms(self.next_reset)}'
        elif self.reason == ClaimReason.ADDRESS_COOLDOWN:
            return f'This address must wait {self.hours_remaining} hours before claiming again.'
        return 'This address is eligible to claim!'


class ClaimTracker:
    def __init__(self, ledger_path: str = None):
        self.ledger_path = ledger_path or settings.CLAIMS_FILE

        # create db folder if not exists
        folder = path.dirname(self.ledger_path)
        if folder and not path.isdir(folder):
            makedirs(folder, exist_ok=True)


    @property
    def window_ms(self):
        return settings.COOLDOWN_HOURS * HOUR_MS


    def load_ledger(self, now: int = None) -> ClaimLedger:
        if not path.isfile(self.ledger_path):
            logger.debug(f'[•] Database | No claim history at {self.ledger_path}, starting fresh')
            return ClaimLedger.zeroed(now)
        try:
            with open(self.ledger_path, encoding="utf-8") as f: data = json.load(f)
            return ClaimLedger.from_dict(data)
        except Exception as err:
            logger.error(f'[-] Database | Error loading claim history: {err}')
            return ClaimLedger.zeroed(now)


    def save_ledger(self, ledger: ClaimLedger):
        try:
            with open(self.ledger_path, 'w', encoding="utf-8") as f: json.dump(ledger.to_dict(), f, indent=2)
        except Exception as err:
            logger.error(f'[-] Database | Error saving claim history: {err}')


    def evaluate(self, address: str, now: int = None) -> ClaimDecision:
        if now is None: now = now_ms()
        ledger = self.load_ledger(now=now)

        if now - ledger.last_reset >= self.window_ms:
            ledger.daily_count = 0
            ledger.last_reset = now
            self.save_ledger(ledger)

        if ledger.daily_count >= settings.MAX_CLAIMS_PER_DAY:
            return ClaimDecision(
                eligible=False,
                reason=ClaimReason.DAILY_LIMIT_REACHED,
                next_reset=ledger.last_reset + self.window_ms,
            )

        last_claim = ledger.claims.get(address)
        if last_claim is not None:
            hours_since_last_claim = (now - last_claim) / HOUR_MS
            if hours_since_last_claim < settings.COOLDOWN_HOURS:
                return ClaimDecision(
                    eligible=False,
                    reason=ClaimReason.ADDRESS_COOLDOWN,
                    hours_remaining=ceil(settings.COOLDOWN_HOURS - hours_since_last_claim),
                )

        return ClaimDecision(eligible=True, reason=ClaimReason.ELIGIBLE)


    def record_claim(self, address: str, now: int = None) -> ClaimLedger:
        " caller must have a successful faucet response, no eligibility check here "
        if now is None: now = now_ms()
        ledger = self.load_ledger(now=now)
        ledger.claims[address] = now
        ledger.daily_count += 1
        self.save_ledger(ledger)
        return ledger


    def remaining_claims(self, ledger: ClaimLedger):
        return max(settings.MAX_CLAIMS_PER_DAY - ledger.daily_count, 0)


    def status(self, now: int = None):
        " read-only, an expired window is shown as already reset "
        if now is None: now = now_ms()
        ledger = self.load_ledger(now=now)
        if now - ledger.last_reset >= self.window_ms:
            ledger = ClaimLedger(claims=ledger.claims, daily_count=0, last_reset=now)
        return {
            "daily_count": ledger.daily_count,
            "max_claims": settings.MAX_CLAIMS_PER_DAY,
            "remaining": self.remaining_claims(ledger),
            "limit_reached": ledger.daily_count >= settings.MAX_CLAIMS_PER_DAY,
            "next_reset": ledger.last_reset + self.window_ms,
        }
