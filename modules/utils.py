from datetime import datetime
from decimal import Decimal, InvalidOperation
from random import randint
from requests import post
from loguru import logger
from time import sleep
from tqdm import tqdm
import sys

sys.__stdout__ = sys.stdout # error with `import inquirer` without this string in some system
from inquirer import prompt, List, Text

import settings
import modules.config as config


logger.remove()
logger.add(sys.stderr, format="<white>{time:HH:mm:ss}</white> | <level>{message}</level>")


class TgReport:
    def __init__(self):
        self.logs = ''


    def update_logs(self, text: str):
        self.logs += f'{text}\n'


    def send_log(self, logs: str = None):
        notification_text = logs or self.logs

        texts = []
        while len(notification_text) > 0:
            texts.append(notification_text[:1900])
            notification_text = notification_text[1900:]

        if settings.TG_BOT_TOKEN:
            for tg_id in settings.TG_USER_ID:
                for text in texts:
                    try:
                        r = post(f'https://api.telegram.org/bot{settings.TG_BOT_TOKEN}/sendMessage',
                                 params={'parse_mode': 'html', 'chat_id': tg_id, 'text': text}, timeout=10)
                        if r.json().get("ok") != True: raise Exception(r.json())
                    except Exception as err:
                        logger.error(f'[-] TG | Send Telegram message error to {tg_id}: {err}\n{text}')


class Console:
    def ask(self, message: str) -> str:
        answer = prompt([Text('answer', message=message)])
        if answer is None: raise KeyboardInterrupt
        return answer['answer'].strip()


    def choose_action(self) -> str:
        questions = [List('action', message="Select menu", choices=config.MENU_CHOICES)]
        answer = prompt(questions)
        if answer is None: raise KeyboardInterrupt
        return answer['action'].split('.')[0]


def sleeping(*timing):
    if type(timing[0]) == list: timing = timing[0]
    if len(timing) == 2: x = randint(timing[0], timing[1])
    else: x = timing[0]
    desc = datetime.now().strftime('%H:%M:%S')
    for _ in tqdm(range(x), desc=desc, bar_format='{desc} | [•] Sleeping {n_fmt}/{total_fmt}'):
        sleep(1)


def now_ms():
    return int(datetime.now().timestamp() * 1000)


def format_ms(timestamp: int):
    return datetime.fromtimestamp(timestamp / 1000).strftime('%d.%m.%Y %H:%M:%S')


def parse_positive_int(value: str, name: str):
    try: number = int(value)
    except (TypeError, ValueError): raise ValueError(f'{name} must be a number!')
    if number <= 0: raise ValueError(f'{name} must be a positive number!')
    return number


def parse_delay(value: str, name: str):
    try: number = int(value)
    except (TypeError, ValueError): raise ValueError(f'{name} must be a number!')
    if number < 0: raise ValueError(f'{name} cannot be negative!')
    return number


def parse_amount(value: str):
    try: amount = Decimal(value)
    except (TypeError, InvalidOperation): raise ValueError('Amount must be a number!')
    if not amount.is_finite() or amount <= 0: raise ValueError('Amount must be a positive number!')
    return amount
