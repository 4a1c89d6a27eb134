"""
Reference constants for the shmup simulation
"""

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 600
FPS = 60

# Player
PLAYER_SPEED = 8
PLAYER_HP = 100
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 30
PLAYER_START_X = 100

BULLET_SPEED = 15
BULLET_DAMAGE = 10
ENEMY_BULLET_SPEED = 6
SHOOT_COOLDOWN = 120  # ms, wall clock

# Powerups
HEART_VALUE = 20
POWERUP_SPEED = 3
POWERUP_SIZE = 20

# Durations in ticks
SHIELD_DURATION = 300
MULTISHOT_DURATION = 600
BULLET_INVULNERABILITY = 30
RAM_INVULNERABILITY = 60

# Drop chances (cumulative bands, Bomb first)
DROP_CHANCE_HEART = 0.15
DROP_CHANCE_SHIELD = 0.03
DROP_CHANCE_MULTISHOT = 0.03
DROP_CHANCE_BOMB = 0.02
BOMB_KILL_CHANCE = 0.75

# Contact damage
LASER_TICK_DAMAGE = 2
RAM_DAMAGE_TO_PLAYER = 20
RAM_DAMAGE_TO_ENEMY = 50

# Spawning
SPAWN_RATE_BASE = 100
SPAWN_RATE_MIN = 30
SHOOT_CADENCE = 120
PARATROOPER_CADENCE = 90

# Laser cycle
LASER_WARNING_TICKS = 60
LASER_FIRING_TICKS = 40
LASER_HEIGHT = 20

# Off-screen margin for projectiles
BOUNDS_MARGIN = 50

# Entity tags
PLAYER = "PLAYER"
ENEMY = "ENEMY"

SCOUT = "SCOUT"
FIGHTER = "FIGHTER"
DESTROYER = "DESTROYER"
PILOT = "PILOT"
KAMIKAZE = "KAMIKAZE"
PARATROOPER = "PARATROOPER"
ENEMY_TYPES = (SCOUT, FIGHTER, DESTROYER, PILOT, KAMIKAZE, PARATROOPER)

ENTERING = "ENTERING"
HOVERING = "HOVERING"
ATTACKING = "ATTACKING"
CRASHING = "CRASHING"
RETREATING = "RETREATING"

WARNING = "WARNING"
FIRING = "FIRING"

HEART = "HEART"
SHIELD = "SHIELD"
MULTISHOT = "MULTISHOT"
BOMB = "BOMB"
POWERUP_TYPES = (HEART, SHIELD, MULTISHOT, BOMB)

MENU = "MENU"
PLAYING = "PLAYING"
GAME_OVER = "GAME_OVER"

# Cyberpunk palette
COLORS = {
    "background": (5, 5, 16),
    "neon_pink": (255, 0, 255),
    "neon_cyan": (0, 255, 255),
    "neon_yellow": (252, 238, 10),
    "neon_green": (10, 255, 10),
    "neon_red": (255, 0, 51),
    "neon_orange": (255, 170, 0),
    "white": (255, 255, 255),
}

ENEMY_STATS = {
    SCOUT: {"width": 40, "height": 30, "hp": 20, "score": 100, "color": COLORS["neon_yellow"]},  # single shot
    FIGHTER: {"width": 50, "height": 40, "hp": 40, "score": 300, "color": COLORS["neon_pink"]},  # tri-shot, ejects pilot
    DESTROYER: {"width": 80, "height": 60, "hp": 150, "score": 1000, "color": COLORS["neon_red"]},  # laser
    PILOT: {"width": 20, "height": 20, "hp": 1, "score": 500, "color": COLORS["white"]},  # throws bomb
    KAMIKAZE: {"width": 45, "height": 25, "hp": 30, "score": 400, "color": COLORS["neon_orange"]},  # rams, drops paratrooper
    PARATROOPER: {"width": 20, "height": 30, "hp": 10, "score": 200, "color": COLORS["neon_green"]},
}
