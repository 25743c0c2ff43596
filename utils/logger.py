import logging
from colorama import Fore, Style, init

init(autoreset=True)

APP_LOGGER = logging.getLogger('groupie_tracker')

SEVERITY_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.MAGENTA
}


def logger(message, severity='INFO'):
    level = severity.upper()
    color = SEVERITY_COLORS.get(level, Fore.WHITE)
    print(f"{color}[{level}]{Style.RESET_ALL} {message}")
    APP_LOGGER.log(getattr(logging, level, logging.INFO), message)
