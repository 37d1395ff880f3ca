"""Central scoring constants for Farkle."""

DICE_PER_ROLL = 6
FACE_MIN, FACE_MAX = 1, 6
FACES = tuple(range(FACE_MIN, FACE_MAX + 1))

# === WHOLE-ROLL PATTERNS ===
STRAIGHT_FACES = [1, 2, 3, 4, 5, 6]
STRAIGHT_POINTS = 1500
THREE_PAIRS_POINTS = 1500

# === N OF A KIND ===
SIX_OF_A_KIND_POINTS = 3000
# Four and five of a kind both pay double the three-of-a-kind base
FOUR_OF_A_KIND_MULTIPLIER = 2
FIVE_OF_A_KIND_MULTIPLIER = 2
THREE_OF_A_KIND_POINTS = {
    1: 1000,
    2: 200,
    3: 300,
    4: 400,
    5: 500,
    6: 600,
}
KIND_WORDS = {3: "Three", 4: "Four", 5: "Five", 6: "Six"}

# === SINGLES ===
SINGLE_POINTS = {
    1: 100,
    5: 50,
}

# === DESCRIPTIONS ===
STRAIGHT_LABEL = "Straight"
THREE_PAIRS_LABEL = "Three Pairs"
FARKLE_LABEL = "Farkle (no scoring dice)"
DESCRIPTION_SEPARATOR = ", "

# === VALIDATION MESSAGES ===
ERROR_FULL_ROLL_LENGTH = f"Must roll exactly {DICE_PER_ROLL} dice"
ERROR_SELECTION_LENGTH = f"Must select between 1 and {DICE_PER_ROLL} dice"
ERROR_FACE_VALUE = f"All dice must be integers between {FACE_MIN} and {FACE_MAX}"
ERROR_NOT_A_SEQUENCE = "Dice must be a list of integers"
ERROR_UNKNOWN_MODE = "Unknown scoring mode"

# Default target for score entries (game-management layer)
DEFAULT_TARGET_SCORE = 10000
