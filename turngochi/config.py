from pathlib import Path

# --- Constants ---
SAVE_FILE = Path("tamagotchi_status.txt")
DEFAULT_NAME = "Critter"

# Attributes
ATTRIBUTE_INITIAL = 50
ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 100

# Actions
FEED_HUNGER_DELTA = 10
PLAY_ENERGY_COST = 5
SLEEP_ENERGY_GAIN = 20; SLEEP_HUNGER_GAIN = 5
CLEAN_CLEANLINESS_GAIN = 20

# Random events
EVENT_PENALTY = 10

# Mini-games
GAME_WIN_HAPPINESS = 20
GAME_LOSS_HAPPINESS = 10
GAME_REWARD = 10
GUESS_LOW, GUESS_HIGH = 1, 100
OPERAND_LOW, OPERAND_HIGH = 1, 10

# Economy (prices in coins, boost applied to the target attribute)
STARTING_MONEY = 50
FOOD_PRICE = 20; FOOD_BOOST = 20
MEDICINE_PRICE = 30; MEDICINE_BOOST = 30
TOY_PRICE = 15; TOY_BOOST = 15
