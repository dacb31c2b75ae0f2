from web3.middleware import ExtraDataToPOAMiddleware
from dataclasses import dataclass
from decimal import Decimal
from os import path, makedirs
from web3 import Web3

from modules.utils import logger, sleeping
import modules.config as config
import settings


@dataclass
class GeneratedWallet:
    address: str
    privatekey: str


def generate_wallet() -> GeneratedWallet:
    account = Web3().eth.account.create()
    return GeneratedWallet(address=account.address, privatekey=Web3.to_hex(account.key))


def save_wallet(wallet: GeneratedWallet, wallet_file: str = None):
    wallet_file = wallet_file or settings.WALLET_FILE
    folder = path.dirname(wallet_file)
    if folder and not path.isdir(folder): makedirs(folder, exist_ok=True)

    with open(wallet_file, 'a', encoding="utf-8") as f: f.write(f'{wallet.address}:{wallet.privatekey}\n')


def read_privatekey(pk_file: str = None):
    with open(pk_file or settings.PRIVATEKEY_FILE, encoding="utf-8") as f: return f.read().strip()


class Wallet:
    def __init__(self, privatekey: str, network: str):
        self.network_name = network
        self.network = config.NETWORKS[network]
        self.account = Web3().eth.account.from_key(privatekey)
        self.address = self.account.address
        self.web3 = self.get_web3()


    def get_web3(self):
        web3 = Web3(Web3.HTTPProvider(self.network["rpc"]))
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        return web3


    def tx_link(self, tx_hash: str):
        return f'{self.network["explorer"]}/tx/{tx_hash}'


    def send_native(self, recipient: str, value: int, tx_label: str = None):
        tx_label = tx_label or f'sent {Web3.from_wei(value, "ether")} {self.network["symbol"]} to {recipient}'
        tx = {
            'from': self.address,
            'to': Web3.to_checksum_address(recipient),
            'value': value,
            'chainId': self.network["chain_id"],
            'nonce': self.web3.eth.get_transaction_count(self.address, 'pending'),
            'gasPrice': self.web3.eth.gas_price,
        }
        tx['gas'] = int(self.web3.eth.estimate_gas(tx) * settings.GAS_MULTIPLIER)

        signed_tx = self.account.sign_transaction(tx)
        tx_hash = Web3.to_hex(self.web3.eth.send_raw_transaction(signed_tx.raw_transaction))
        tx_link = self.tx_link(tx_hash)
        logger.debug(f'[•] Web3 | {tx_label} tx sent: {tx_link}')

        status = self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=int(settings.TO_WAIT_TX * 60)).status
        if status == 1:
            logger.info(f'[+] Web3 | {tx_label} tx confirmed')
            return tx_hash
        raise ValueError(f'{tx_label} tx failed: {tx_link}')


def run_transfers(wallet: Wallet, amount: Decimal, count: int, delay_range: list, wallet_file: str = None, report=None):
    value = Web3.to_wei(amount, 'ether')
    symbol = wallet.network["symbol"]
    tx_hashes = []

    for i in range(count):
        logger.info(f'[•] Web3 | Processing transaction {i + 1} of {count}')

        recipient = generate_wallet()
        logger.info(f'[•] Web3 | Generated recipient address: {recipient.address}')
        save_wallet(recipient, wallet_file)

        tx_hash = wallet.send_native(recipient=recipient.address, value=value, tx_label=f'sent {amount} {symbol} to {recipient.address}')
        tx_hashes.append(tx_hash)
        if report: report.update_logs(f'✅ {amount} {symbol} -> {recipient.address}\n{wallet.tx_link(tx_hash)}')

        if i < count - 1:
            sleeping(list(delay_range))

    return tx_hashes
