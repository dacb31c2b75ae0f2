from web3 import Web3

from modules.database import ClaimTracker, ClaimReason
from modules.faucet import FaucetClient, RetryOnRateLimit, NoRetryFixedPacing
from modules.wallet import Wallet, generate_wallet, save_wallet, read_privatekey, run_transfers
from modules.utils import logger, format_ms, parse_positive_int, parse_delay, parse_amount, TgReport, Console
import modules.config as config
import settings


def format_amount(amount: str):
    symbol = config.NETWORKS[config.FAUCET_NETWORK]["symbol"]
    return f'{Web3.from_wei(int(amount), "ether")} {symbol}'


def ask_address(console: Console, message: str):
    address = console.ask(message)
    if not Web3.is_address(address):
        logger.error(f'[-] Soft | Invalid Ethereum address!')
        return None
    return Web3.to_checksum_address(address)


def single_claim(console: Console, tracker: ClaimTracker, client: FaucetClient):
    try:
        address = ask_address(console, "Enter your wallet address")
        if not address: return None

        decision = tracker.evaluate(address)
        if not decision.eligible:
            logger.error(f'[-] Faucet | Claim failed: {decision.message}')
            return None

        logger.info(f'[•] Faucet | Attempting to claim faucet for {address}...')
        result = RetryOnRateLimit().run(client, address)

        if result.success:
            ledger = tracker.record_claim(address)
            result.remaining_claims = tracker.remaining_claims(ledger)
            logger.success(f'[+] Faucet | Claim successful! TX Hash: {result.hash}')
            logger.success(f'[+] Faucet | Amount: {format_amount(result.amount)}')
            logger.info(f'[•] Faucet | Remaining claims today: {result.remaining_claims}')
        else:
            logger.error(f'[-] Faucet | Claim failed: {result.error}')
        return result

    except Exception as err:
        logger.error(f'[-] Faucet | Error: {err}')


def bulk_claim(console: Console, tracker: ClaimTracker, client: FaucetClient):
    try:
        wallets_amount = parse_positive_int(
            console.ask("How many wallets do you want to generate for faucet claims?"),
            name="Number of wallets",
        )
    except ValueError as err:
        logger.error(f'[-] Soft | {err}')
        return None

    report = TgReport()
    policy = NoRetryFixedPacing()
    results = []
    try:
        logger.info(f'[•] Faucet | Starting wallet generation and faucet claim process...')
        logger.info(f'[•] Faucet | Wallets will be saved to: {settings.WALLET_FILE}')

        for i in range(wallets_amount):
            wallet = generate_wallet()
            logger.info(f'[•] Faucet | Wallet {i + 1}/{wallets_amount}: {wallet.address}')
            save_wallet(wallet)

            decision = tracker.evaluate(wallet.address)
            if decision.reason == ClaimReason.DAILY_LIMIT_REACHED:
                logger.error(f'[-] Faucet | {decision.message}. Stopping.')
                report.update_logs(f'❌ {decision.message}')
                break

            result = policy.run(client, wallet.address)
            if result.success:
                ledger = tracker.record_claim(wallet.address)
                result.remaining_claims = tracker.remaining_claims(ledger)
                logger.success(f'[+] Faucet | Claim successful! TX Hash: {result.hash} | Amount: {format_amount(result.amount)}')
                report.update_logs(f'✅ {wallet.address} claimed {format_amount(result.amount)}')
            else:
                logger.error(f'[-] Faucet | Claim failed: {result.error}')
                report.update_logs(f'❌ {wallet.address}: {result.error}')
            results.append(result)

            if i < wallets_amount - 1:
                policy.pace()

        claimed = len([result for result in results if result.success])
        logger.success(f'[+] Faucet | Process completed! Claimed {claimed}/{len(results)}')
        logger.info(f'[•] Faucet | Wallets saved to: {settings.WALLET_FILE}')
        report.send_log()
        return results

    except Exception as err:
        logger.error(f'[-] Faucet | Error: {err}')
        return results


def transfer_tokens(console: Console, network_name: str):
    network = config.NETWORKS[network_name]
    report = TgReport()
    try:
        wallet = Wallet(privatekey=read_privatekey(), network=network_name)

        logger.info(f'[•] Web3 | Selected Network: {network["name"]}')
        logger.info(f'[•] Web3 | Token Symbol: {network["symbol"]}')

        amount = parse_amount(console.ask("Enter amount of tokens per transaction"))
        tx_amount = parse_positive_int(console.ask("Enter number of transactions to perform"), name="Number of transactions")
        min_delay = parse_delay(console.ask("Enter minimum delay (seconds) between transactions"), name="Minimum delay")
        max_delay = parse_delay(console.ask("Enter maximum delay (seconds) between transactions"), name="Maximum delay")
        if min_delay > max_delay:
            raise ValueError('Minimum delay cannot be greater than maximum delay!')

    except Exception as err:
        logger.error(f'[-] Soft | {err}')
        return None

    report.update_logs(f'{network["name"]} | {wallet.address}')
    try:
        tx_hashes = run_transfers(
            wallet=wallet,
            amount=amount,
            count=tx_amount,
            delay_range=[min_delay, max_delay],
            report=report,
        )
        logger.success(f'[+] Web3 | All transactions completed successfully!')
        return tx_hashes

    except Exception as err:
        logger.error(f'[-] Web3 | Error: {err}')
        report.update_logs(f'❌ {err}')

    finally:
        report.send_log()


def claim_status(console: Console, tracker: ClaimTracker):
    try:
        status = tracker.status()
        logger.info(f'[•] Faucet | Daily Claims Used: {status["daily_count"]}/{status["max_claims"]}')
        if status["limit_reached"]:
            logger.info(f'[•] Faucet | Next Reset: {format_ms(status["next_reset"])}')
        else:
            logger.info(f'[•] Faucet | Remaining Claims Today: {status["remaining"]}')

        address = ask_address(console, "Enter wallet address to check specific status")
        if not address: return None

        decision = tracker.evaluate(address)
        if decision.eligible: logger.success(f'[+] Faucet | {decision.message}')
        else: logger.warning(f'[-] Faucet | {decision.message}')
        return decision

    except Exception as err:
        logger.error(f'[-] Faucet | Error: {err}')
