# --- Display ---
WIDTH = 800
HEIGHT = 600
FPS = 60

# --- Player ---
PLAYER_W = 32
PLAYER_H = 32
PLAYER_SPAWN_X = 384        # (WIDTH - PLAYER_W) // 2
PLAYER_SPAWN_Y = 568        # HEIGHT - PLAYER_H
PLAYER_STEP = 10            # px per frame while a direction is held

# --- Speed tiers (px per frame, vertical) ---
SPEED_UNITS = {
    "slow": 2,
    "medium": 4,
    "fast": 6,
}

# --- Obstacle generation ---
# count, width, height, spawn band for y: [SPAWN_Y_MIN, 0)
ASTEROID_COUNT = 8
ASTEROID_SIZE = 32
ASTEROID_SPAWN_Y_MIN = -600

WALL_COUNT = 3
WALL_W = 200
WALL_H = 50
WALL_SPACING_X = 300        # x = index * spacing
WALL_BASE_Y = -100          # y = base - index * step
WALL_STEP_Y = 200

BLOCK_COUNT = 12
BLOCK_SIZE = 20
BLOCK_SPAWN_Y_MIN = -300

# Obstacles whose y passes this line are recycled above the field
RECYCLE_BELOW_Y = HEIGHT
RECYCLE_Y_MIN = -200        # new y drawn from [RECYCLE_Y_MIN, 0)

# --- Scoring ---
FRAMES_PER_SECOND_SCORE = 60   # displayed score = frames survived // 60

# --- Background decoration ---
STAR_COUNT = 100
STAR_SIZE = 2
CITY_BAR_COUNT = 10
CITY_BAR_SPACING = 80
CITY_BAR_W = 60
CITY_BAR_MIN_H = 100
CITY_BAR_EXTRA_H = 200      # height = MIN_H + U[0, EXTRA_H)
GRID_STEP = 40

# --- Colors (RGB) ---
COLOR_BG = (26, 26, 26)
COLOR_STAR = (255, 255, 255)
COLOR_CITY = (0, 255, 255)
COLOR_GRID = (0, 255, 0)
COLOR_PLAYER = (0, 255, 0)
COLOR_ASTEROID = (255, 0, 255)
COLOR_WALL = (0, 255, 255)
COLOR_BLOCK = (255, 255, 0)
COLOR_FG = (0, 255, 0)
COLOR_ACCENT = (255, 0, 255)
COLOR_DANGER = (255, 86, 110)
COLOR_PANEL = (10, 10, 10)

# --- Text ---
FONT_NAME = "pressstart2p"
FONT_SIZE = 16
SCORE_POS = (20, 24)

# --- Export ---
SCREENSHOT_NAME = "retro-game-screenshot.png"
