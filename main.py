import sys

from modules.utils import logger, sleep, Console
from modules import *
import settings


def run_choice(choice: str, console: Console, tracker: ClaimTracker, client: FaucetClient):
    match choice:
        case "1":
            single_claim(console=console, tracker=tracker, client=client)
        case "2":
            bulk_claim(console=console, tracker=tracker, client=client)
        case "3":
            transfer_tokens(console=console, network_name="somnia")
        case "4":
            transfer_tokens(console=console, network_name="nexus")
        case "5":
            claim_status(console=console, tracker=tracker)
        case "6":
            logger.success(f'Thank you for using this bot!')
            sys.exit(0)
        case _:
            logger.error(f'Invalid choice!')


if __name__ == '__main__':
    if settings.PROXY in ['http://log:pass@ip:port', '']: logger.warning(f'You will not use proxies!')
    logger.info(f'Starting Multi-Network Bot...')

    console = Console()
    tracker = ClaimTracker()
    client = FaucetClient()

    while True:
        try:
            choice = console.choose_action()
            run_choice(choice=choice, console=console, tracker=tracker, client=client)
            print('')
        except KeyboardInterrupt:
            logger.info(f'Thank you for using this bot!')
            sleep(0.1)
            sys.exit(0)
        except Exception as err:
            logger.error(f'[-] Soft | Unexpected error: {err}')
