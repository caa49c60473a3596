# Ataxx Game Constants
BOARD_SIZE = 7
BOARD_TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE

# Move geometry
MAX_MOVE_DISTANCE = 2
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1)
]
MOVE_OFFSETS = [
    (dr, dc)
    for dr in range(-MAX_MOVE_DISTANCE, MAX_MOVE_DISTANCE + 1)
    for dc in range(-MAX_MOVE_DISTANCE, MAX_MOVE_DISTANCE + 1)
    if (dr, dc) != (0, 0)
]

# Evaluation
WIN_SCORE = 10000
LOSS_SCORE = -WIN_SCORE

# Difficulty bands
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
DEFAULT_DIFFICULTY = 5
RANDOMNESS_CEILING = 3      # (3 - level) * step, so only levels 1-2 blunder
RANDOMNESS_STEP = 0.3
GREEDY_MAX_DIFFICULTY = 6
MINIMAX_DEPTH = 2

DIFFICULTY_LABELS = {
    1: "Toddler", 2: "Toddler",
    3: "Easy", 4: "Easy",
    5: "Medium", 6: "Medium",
    7: "Hard", 8: "Hard",
    9: "Expert", 10: "Expert",
}

DRAW = "draw"

# In-process session store cap; least recently used games are evicted first
MAX_SESSIONS = 1000
