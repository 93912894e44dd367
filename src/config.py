"""
Runtime settings for the Vaajoor solver.
"""

from datetime import datetime

__version__ = "1.0.0"

# Remote endpoint that checks a guess against today's word.
API_URL = "https://www.vaajoor.ir/api/check"

# Game ids are a day counter starting from this date.
FIRST_GAME_ID_DATE = datetime(2022, 1, 8)

# Every letter that may appear in a Persian word.
ALPHABET = "آابپتثجچحخدذرزژسشصضطظعغفقکگلمنوهیئ"

# Progress log, appended to on every run (relative to the working directory).
LOG_FILE = "log.txt"

# Set to True to hide the progress bar.
FAST_MODE = False
