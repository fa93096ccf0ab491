"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (paths, article number format, table layout, colors, exit codes).
- Side effects: None.
"""

# Persistence: working directory and default file (resolved in storage module)
ASSETS_DIRNAME = "Assets"
DEFAULT_ASSETS_FILENAME = "assets.json"
ASSET_FILE_SUFFIX = ".json"

# Article numbers: ATS0001, ATS0002, ...
ARTICLE_PREFIX = "ATS"
ARTICLE_DIGITS = 4

# Table column widths (characters), in display order
COUNTRY_WIDTH = 10
ARTICLE_NAME_WIDTH = 20
MODEL_WIDTH = 10
QUANTITY_WIDTH = 8
UNIT_PRICE_WIDTH = 15
TOTAL_PRICE_WIDTH = 15
ARTICLE_NUMBER_WIDTH = 15

# Used by format_currency when the active locale carries no currency data ("C" locale)
CURRENCY_FALLBACK_SYMBOL = "$"

# ANSI colors; disabled when stdout is not a TTY or NO_COLOR is set
COLOR_ACCENT = "\033[33m"   # dashboard (dark yellow)
COLOR_ERROR = "\033[31m"
COLOR_SUCCESS = "\033[32m"
COLOR_RESET = "\033[0m"

DASHBOARD_TITLE = "ASSETS TRACKING SOLUTION"
DASHBOARD_SUBTITLE = "YOUR OPTIONS ARE BELOW"
DASHBOARD_OPTIONS = "[1] Add Asset  |  [2] View Assets  |  [3] Update Asset  |  [4] Delete Asset  |  [5] Exit"
FALLBACK_TERMINAL_WIDTH = 100

# Logging: file lives inside the assets directory (not .json, so never offered as an asset file)
LOG_FILENAME = "asset_tracker.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_STARTUP_FAILURE = 2
EXIT_INTERRUPTED = 130
