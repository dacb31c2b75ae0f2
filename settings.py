
# --------------------- FAUCET SETTINGS ---------------------
FAUCET_API          = "https://testnet.somnia.network/api/faucet"

MAX_CLAIMS_PER_DAY  = 10                    # максимум успешных клеймов за 24 часа (на все адреса)
COOLDOWN_HOURS      = 24                    # сколько часов ждать одному адресу перед следующим клеймом

CLAIM_DELAY         = [5, 10]               # задержка перед каждым запросом к крану 5-10 секунд
RATE_LIMIT_ATTEMPTS = 3                     # (одиночный клейм) кол-во попыток при ответе 429
RATE_LIMIT_WAIT     = 60                    # (одиночный клейм) сколько секунд ждать после ответа 429
BULK_PACING         = 5                     # (массовый клейм) задержка между кошельками в секундах

# --------------------- TRANSFER SETTINGS ---------------------
TO_WAIT_TX          = 1                     # сколько минут ожидать транзакцию. по истечению будет считатся зафейленной
GAS_MULTIPLIER      = 1.1                   # умножать оценку газа на 10%

# --------------------- FILES ---------------------
CLAIMS_FILE         = 'databases/claims.json'
WALLET_FILE         = 'databases/wallets.txt'
PRIVATEKEY_FILE     = 'pk.txt'              # приватник кошелька с которого идут трансферы

# --------------------- PERSONAL SETTINGS --------------------

PROXY               = 'http://log:pass@ip:port'           # что бы не использовать прокси - оставьте как есть

TG_BOT_TOKEN        = ''                           # токен от тг бота (`12345:Abcde`) для уведомлений. если не нужно - оставляй пустым
TG_USER_ID          = []                             # тг айди куда должны приходить уведомления. [21957123] - для отправления уведомления только себе, [21957123, 103514123] - отправлять нескольким людями
