from .database import ClaimTracker, ClaimLedger, ClaimDecision, ClaimReason
from .faucet import FaucetClient, ClaimResult, RetryOnRateLimit, NoRetryFixedPacing
from .wallet import Wallet, GeneratedWallet, generate_wallet, save_wallet, read_privatekey, run_transfers
from .runner import single_claim, bulk_claim, transfer_tokens, claim_status
from .utils import TgReport, Console, sleeping
