
NETWORKS = {
    'somnia': {
        'name': 'Somnia Testnet',
        'chain_id': 50312,
        'rpc': 'https://dream-rpc.somnia.network',
        'symbol': 'STT',
        'explorer': 'https://somnia-testnet.socialscan.io',
    },
    'nexus': {
        'name': 'Nexus Network',
        'chain_id': 392,
        'rpc': 'https://rpc.nexus.xyz/http',
        'symbol': 'NEX',
        'explorer': 'https://explorer.nexus.xyz',
    },
}

FAUCET_NETWORK = 'somnia'

FAUCET_HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36",
}

MENU_CHOICES = [
    '1. Claim Faucet (Single Wallet)',
    '2. Generate Wallets & Claim Faucet (Somnia)',
    '3. Transfer STT Tokens (Somnia)',
    '4. Transfer NEX Tokens (Nexus)',
    '5. Check Faucet Claim Status',
    '6. Exit',
]
