"""Constants for the Recipe Scaler."""

# Multiplier defaults and the bounds accepted by the request handler
DEFAULT_MULTIPLIER = 1.0
MIN_MULTIPLIER = 0.3
MAX_MULTIPLIER = 3.0

# Environment variables read by the command line
ENV_MULTIPLIER = "RECIPE_SCALER_MULTIPLIER"
ENV_LOG_LEVEL = "RECIPE_SCALER_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "INFO"

# Canonical unit emitted for parenthetical gram overrides
GRAMS_UNIT = "g"

# Request data keys
DATA_INGREDIENTS = "ingredients"
DATA_INSTRUCTIONS = "instructions"
DATA_MULTIPLIER = "multiplier"
DATA_ERROR = "error"

# Ingredient pricing request keys
DATA_NAME = "name"
DATA_PACKAGE_COST = "package_cost"
DATA_PACKAGE_SIZE = "package_size"
DATA_PACKAGE_UNIT = "package_unit"
DATA_AMOUNT_USED = "amount_used"
DATA_AMOUNT_UNIT = "amount_unit"

PACKAGE_UNITS = ("g", "sticks", "count")
